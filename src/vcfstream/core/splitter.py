"""
Line Splitter: break one VCF data line into its columns.

The eight mandatory columns are kept as raw strings. When a FORMAT column is
present, every following column is decoded into a ``FORMAT key -> value``
mapping for one sample.
"""

import logging
from dataclasses import dataclass, field

from ..errors import MalformedLineError
from ..models.core import SampleData

logger = logging.getLogger(__name__)

MANDATORY_COLUMNS = ("CHROM", "POS", "ID", "REF", "ALT", "QUAL", "FILTER", "INFO")
FORMAT_COLUMN = len(MANDATORY_COLUMNS)


@dataclass(frozen=True)
class VcfLine:
    """Raw columns of one data line."""

    chrom: str
    pos: str
    id: str
    ref: str
    alt: str
    qual: str
    filter: str
    info: str
    format: tuple[str, ...] = ()
    samples: SampleData = field(default_factory=SampleData)


def split_vcf_fields(line: str) -> VcfLine:
    """
    Split a data line on tabs.

    Args:
        line: Raw line with the trailing newline already removed.

    Raises:
        MalformedLineError: If the line has fewer than 8 columns.
    """
    fields = line.split("\t")
    if len(fields) < len(MANDATORY_COLUMNS):
        raise MalformedLineError(line, len(fields))

    chrom, pos, id_, ref, alt, qual, filter_, info = fields[:FORMAT_COLUMN]

    if len(fields) == FORMAT_COLUMN:
        return VcfLine(chrom, pos, id_, ref, alt, qual, filter_, info)

    format_keys = tuple(fields[FORMAT_COLUMN].split(":"))
    samples = SampleData(
        parse_sample(format_keys, raw) for raw in fields[FORMAT_COLUMN + 1:]
    )
    return VcfLine(chrom, pos, id_, ref, alt, qual, filter_, info, format_keys, samples)


def parse_sample(format_keys: tuple[str, ...] | list[str], raw_sample: str) -> dict[str, str]:
    """
    Zip FORMAT keys with the colon-separated values of one sample column.

    Keys without a value are left out; values beyond the last key are dropped.
    """
    values = raw_sample.split(":")
    if len(values) > len(format_keys):
        logger.debug(
            "Sample %r has %d values for %d FORMAT keys, dropping the surplus",
            raw_sample,
            len(values),
            len(format_keys),
        )
    return dict(zip(format_keys, values))
