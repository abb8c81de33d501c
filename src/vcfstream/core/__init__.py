"""
Core module for vcfstream.

Provides the line splitter, INFO decoder, coordinate kernel and variant builder.
"""

from .builder import parse_quality, parse_vcf_line
from .info import decode_info, info_sub_fields, parse_float, parse_int, split_multiple_alt_infos
from .kernel import CoordinateKernel
from .splitter import VcfLine, parse_sample, split_vcf_fields

__all__ = [
    "CoordinateKernel",
    "VcfLine",
    "decode_info",
    "info_sub_fields",
    "parse_float",
    "parse_int",
    "parse_quality",
    "parse_sample",
    "parse_vcf_line",
    "split_multiple_alt_infos",
    "split_vcf_fields",
]
