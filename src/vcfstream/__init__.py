"""
vcfstream - A streaming parser for Variant Call Format (VCF) 4.2 files.

This package turns VCF text lines into validated, immutable Variant records
(one per alternate allele) and reports the lines it cannot interpret.

Example usage:
    $ vcfstream parse -v variants.vcf -o variants.tsv -i invalid.tsv
"""

__version__ = "1.0.0"

from .core.builder import parse_vcf_line
from .errors import HeaderNotFoundError, InvalidVariantError, MalformedLineError, VcfError
from .io.input import VcfReader, iter_records, sample_ids, to_sinks
from .models.core import InvalidLine, ParserConfig, SampleData, StructuralVariantType, Variant
from .pipeline import Pipeline, PipelineResult

__all__ = [
    "__version__",
    "HeaderNotFoundError",
    "InvalidLine",
    "InvalidVariantError",
    "MalformedLineError",
    "ParserConfig",
    "Pipeline",
    "PipelineResult",
    "SampleData",
    "StructuralVariantType",
    "Variant",
    "VcfError",
    "VcfReader",
    "iter_records",
    "parse_vcf_line",
    "sample_ids",
    "to_sinks",
]
