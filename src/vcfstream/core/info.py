"""
INFO column handling.

Decodes the semicolon-delimited INFO column into a generic mapping, splits
comma-delimited values across the alternates of a line, and exposes the typed
parse-or-None lookups used to fill the reserved sub-fields of a Variant.
"""

import re
from collections.abc import Callable, Mapping
from typing import Any

from ..models.core import InfoValue, StructuralVariantType

INFO_SEPARATOR = ";"
ALLELE_SEPARATOR = ","

# Unpadded ASCII decimal literals only
_INT_PATTERN = re.compile(r"[+-]?[0-9]+")
_FLOAT_PATTERN = re.compile(
    r"[+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|inf|infinity|nan)",
    re.IGNORECASE,
)


def parse_int(raw: str) -> int:
    """Like ``int()``, but raises ValueError for anything but optionally signed digits."""
    if not _INT_PATTERN.fullmatch(raw):
        raise ValueError(f"invalid integer: {raw!r}")
    return int(raw)


def parse_float(raw: str) -> float:
    """Like ``float()``, but rejects surrounding whitespace and ``_`` separators."""
    if not _FLOAT_PATTERN.fullmatch(raw):
        raise ValueError(f"invalid float: {raw!r}")
    return float(raw)


def decode_info(raw: str) -> dict[str, InfoValue]:
    """
    Parse an INFO column.

    ``KEY=VALUE`` pieces keep the raw string after the first ``=``; any piece
    without ``=`` is a flag and maps to True.

    Example:
        >>> decode_info("AC=1;DB;CSQ=a=b")
        {'AC': '1', 'DB': True, 'CSQ': 'a=b'}
    """
    info: dict[str, InfoValue] = {}
    for piece in raw.split(INFO_SEPARATOR):
        key, sep, value = piece.partition("=")
        info[key] = value if sep else True
    return info


def split_multiple_alt_infos(
    info: Mapping[str, InfoValue], n_alternatives: int
) -> list[dict[str, InfoValue]]:
    """
    Build one INFO mapping per alternate allele.

    String values containing a comma are split and the i-th piece goes to the
    i-th mapping. Other string values are copied to the first
    ``n_alternatives`` mappings. Flags only land in the first mapping.

    The result can be shorter than ``n_alternatives``; callers fall back to the
    first mapping for missing indices.
    """
    maps: list[dict[str, InfoValue]] = []

    def insert(position: int, key: str, value: InfoValue) -> None:
        while len(maps) <= position:
            maps.append({})
        maps[position][key] = value

    for key, value in info.items():
        if isinstance(value, str):
            if ALLELE_SEPARATOR in value:
                for position, piece in enumerate(value.split(ALLELE_SEPARATOR)):
                    insert(position, key, piece)
            else:
                for position in range(n_alternatives):
                    insert(position, key, value)
        else:
            insert(0, key, value)

    return maps


def _lookup(info: Mapping[str, InfoValue], key: str, convert: Callable[[str], Any]) -> Any:
    value = info.get(key)
    if not isinstance(value, str):
        return None
    try:
        return convert(value)
    except ValueError:
        return None


def info_int(info: Mapping[str, InfoValue], key: str) -> int | None:
    return _lookup(info, key, parse_int)


def info_float(info: Mapping[str, InfoValue], key: str) -> float | None:
    return _lookup(info, key, parse_float)


def info_str(info: Mapping[str, InfoValue], key: str) -> str | None:
    return _lookup(info, key, str)


def info_flag(info: Mapping[str, InfoValue], key: str) -> bool | None:
    value = info.get(key)
    # bool is checked by identity: a "true" string is a valued key, not a flag
    return True if value is True else None


def info_sv_type(info: Mapping[str, InfoValue], key: str) -> StructuralVariantType | None:
    code = info_str(info, key)
    return StructuralVariantType.from_code(code) if code is not None else None


# Variant field -> (INFO key, typed lookup)
RESERVED_INFO_FIELDS: Mapping[str, tuple[str, Callable[[Mapping[str, InfoValue], str], Any]]] = {
    "ancestral_allele": ("AA", info_str),
    "depth": ("DP", info_int),
    "allele_frequency": ("AF", info_float),
    "allele_count": ("AC", info_int),
    "total_alleles": ("AN", info_int),
    "end": ("END", info_int),
    "mapq0_reads": ("MQ0", info_int),
    "number_of_samples": ("NS", info_int),
    "mapping_quality": ("MQ", info_float),
    "cigar": ("CIGAR", info_str),
    "in_dbsnp": ("DB", info_flag),
    "in_hapmap2": ("H2", info_flag),
    "in_hapmap3": ("H3", info_flag),
    "is_somatic": ("SOMATIC", info_flag),
    "is_validated": ("VALIDATED", info_flag),
    "in_1000g": ("1000G", info_flag),
    "base_quality": ("BQ", info_float),
    "strand_bias": ("SB", info_float),
    "imprecise": ("IMPRECISE", info_flag),
    "novel": ("NOVEL", info_flag),
    "sv_type": ("SVTYPE", info_sv_type),
    "sv_length": ("SVLEN", info_int),
    "ci_pos": ("CIPOS", info_int),
    "ci_end": ("CIEND", info_int),
}


def info_sub_fields(info: Mapping[str, InfoValue]) -> dict[str, Any]:
    """Typed values of the reserved INFO keys present in ``info``."""
    fields = {}
    for name, (key, lookup) in RESERVED_INFO_FIELDS.items():
        value = lookup(info, key)
        if value is not None:
            fields[name] = value
    return fields
