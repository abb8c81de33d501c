"""
Variant Builder: turn one VCF data line into Variant records.

A line with N alternates yields N records, or none at all: if any required
field is empty or out of range the whole line is rejected.
"""

import logging

from pydantic import ValidationError

from ..errors import InvalidVariantError
from ..models.core import InfoValue, Variant
from .info import decode_info, info_sub_fields, parse_float, split_multiple_alt_infos
from .kernel import CoordinateKernel
from .splitter import split_vcf_fields

logger = logging.getLogger(__name__)

MISSING_VALUE = "."


def parse_quality(raw_qual: str) -> float | None:
    """
    Parse the QUAL column.

    '.' is the VCF missing value and yields None silently. Any other value that
    is not a float also yields None, with a warning.
    """
    try:
        return parse_float(raw_qual)
    except ValueError:
        if raw_qual != MISSING_VALUE:
            logger.warning("unable to parse quality %r as float, setting as None", raw_qual)
        return None


def parse_vcf_line(line: str) -> list[Variant]:
    """
    Parse one data line into one Variant per alternate allele.

    Args:
        line: Raw data line without its trailing newline.

    Returns:
        Variants in ALT order, REF/ALT already suffix-trimmed.

    Raises:
        MalformedLineError: Fewer than 8 columns.
        InvalidVariantError: Empty chromosome, REF or alternate, or an
            unparsable/negative position.
    """
    fields = split_vcf_fields(line)

    chrom = CoordinateKernel.normalize_chromosome(fields.chrom)
    pos = CoordinateKernel.vcf_to_internal_pos(fields.pos)
    ref = CoordinateKernel.normalize_allele(fields.ref)
    alternatives = CoordinateKernel.split_alternatives(fields.alt)

    if pos is None:
        raise InvalidVariantError(line, f"position {fields.pos!r} is not an integer")
    if not chrom or pos < 0 or not ref:
        raise InvalidVariantError(line)

    qual = parse_quality(fields.qual)
    info = split_multiple_alt_infos(decode_info(fields.info), len(alternatives))

    variants = []
    for i, alternative in enumerate(alternatives):
        if not alternative:
            raise InvalidVariantError(line)

        allele_info = _allele_info(info, i)
        trimmed_ref, trimmed_alt = CoordinateKernel.trim_common_suffix(ref, alternative)
        try:
            variant = Variant(
                chrom=chrom,
                pos=pos,
                ref=trimmed_ref,
                alt=trimmed_alt,
                id=fields.id,
                qual=qual,
                filter=fields.filter,
                info=allele_info,
                samples=fields.samples,
                **info_sub_fields(allele_info),
            )
        except ValidationError as e:
            raise InvalidVariantError(line, str(e)) from e
        variants.append(variant)

    return variants


def _allele_info(info: list[dict[str, InfoValue]], index: int) -> dict[str, InfoValue]:
    if index < len(info):
        return info[index]
    return dict(info[0]) if info else {}
