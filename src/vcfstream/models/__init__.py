"""
Data models for vcfstream.

Provides Pydantic models for variants, invalid lines and configuration.
"""

from .core import (
    InvalidLine,
    ParserConfig,
    SampleData,
    StructuralVariantType,
    Variant,
)

__all__ = [
    "InvalidLine",
    "ParserConfig",
    "SampleData",
    "StructuralVariantType",
    "Variant",
]
