"""
Core data models for vcfstream.
"""

from collections.abc import Iterable, Iterator, Mapping
from enum import Enum
from pathlib import Path
from types import MappingProxyType

from pydantic import BaseModel, ConfigDict, Field, field_validator

InfoValue = str | bool


class StructuralVariantType(str, Enum):
    """Symbolic structural variant codes from the SVTYPE INFO key."""
    DELETION = "DEL"
    DUPLICATION = "DUP"
    INSERTION = "INS"
    INVERSION = "INV"
    COPY_NUMBER_VARIATION = "CNV"
    TANDEM_DUPLICATION = "DUP:TANDEM"
    DELETION_MOBILE_ELEMENT = "DEL:ME"
    INSERTION_MOBILE_ELEMENT = "INS:ME"
    BREAKEND = "BND"

    @classmethod
    def from_code(cls, code: str) -> "StructuralVariantType | None":
        return SV_TYPE_CODES.get(code)


SV_TYPE_CODES: Mapping[str, StructuralVariantType] = MappingProxyType(
    {member.value: member for member in StructuralVariantType}
)


class SampleData:
    """
    Read-only genotype columns of one VCF line.

    Every Variant built from the same line holds the same instance.
    """

    __slots__ = ("_samples",)

    def __init__(self, samples: Iterable[Mapping[str, str]] = ()):
        self._samples = tuple(MappingProxyType(dict(sample)) for sample in samples)

    def __getitem__(self, index: int) -> Mapping[str, str]:
        return self._samples[index]

    def __len__(self) -> int:
        return len(self._samples)

    def __iter__(self) -> Iterator[Mapping[str, str]]:
        return iter(self._samples)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, SampleData):
            return self._samples == other._samples
        return NotImplemented

    def __hash__(self) -> int:
        return hash(tuple(tuple(sorted(s.items())) for s in self._samples))

    def __repr__(self) -> str:
        return f"SampleData({[dict(s) for s in self._samples]!r})"


class Variant(BaseModel):
    """
    One chromosome/position/reference/alternate combination from a VCF line.

    Coordinates are 0-based. The INFO mapping holds the raw annotation values
    of this allele; flag annotations map to True. The remaining optional fields
    are typed views over well-known INFO keys and stay None when the key is
    missing or does not parse.
    """
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    chrom: str = Field(min_length=1)
    pos: int = Field(ge=0, description="0-based position of the variant")
    ref: str = Field(min_length=1)
    alt: str = Field(min_length=1)

    id: str = ""
    qual: float | None = None
    filter: str = ""
    info: Mapping[str, InfoValue] = Field(default_factory=dict, validate_default=True)
    samples: SampleData = Field(default_factory=SampleData)

    # Reserved INFO keys (VCF 4.2, section 1.4.1)
    ancestral_allele: str | None = None
    depth: int | None = None
    allele_frequency: float | None = None
    allele_count: int | None = None
    total_alleles: int | None = None
    end: int | None = None
    mapq0_reads: int | None = None
    number_of_samples: int | None = None
    mapping_quality: float | None = None
    cigar: str | None = None
    in_dbsnp: bool | None = None
    in_hapmap2: bool | None = None
    in_hapmap3: bool | None = None
    is_somatic: bool | None = None
    is_validated: bool | None = None
    in_1000g: bool | None = None
    base_quality: float | None = None
    strand_bias: float | None = None

    # Structural variants
    imprecise: bool | None = None
    novel: bool | None = None
    sv_type: StructuralVariantType | None = None
    sv_length: int | None = None
    ci_pos: int | None = None
    ci_end: int | None = None

    @field_validator("info")
    @classmethod
    def freeze_info(cls, v: Mapping[str, InfoValue]) -> Mapping[str, InfoValue]:
        return MappingProxyType(dict(v))

    @property
    def key(self) -> tuple[str, int, str, str]:
        return (self.chrom, self.pos, self.ref, self.alt)

    def __str__(self) -> str:
        return (
            f"Chromosome: {self.chrom} Position: {self.pos} "
            f"Reference: {self.ref} Alternative: {self.alt}"
        )


class InvalidLine(BaseModel):
    """A source line that could not be interpreted, with the reason."""
    model_config = ConfigDict(frozen=True)

    line: str
    error: str


class ParserConfig(BaseModel):
    """
    Configuration for a vcfstream parse run.
    """
    # Input
    variant_file: Path

    # Output
    output_file: Path | None = None
    invalid_file: Path | None = None

    # Capacity of each bounded sink between the parser and its consumers
    queue_size: int = Field(default=1000, ge=1)

    @field_validator("variant_file")
    @classmethod
    def validate_file_exists(cls, v: Path) -> Path:
        if not v.exists():
            raise ValueError(f"File not found: {v}")
        return v

    @field_validator("output_file", "invalid_file")
    @classmethod
    def validate_output_path(cls, v: Path | None) -> Path | None:
        if v is not None and v.is_dir():
            raise ValueError(f"Output path must be a file, not a directory: {v}")
        return v
