"""
I/O module for vcfstream.

Provides VCF stream readers, output sinks and TSV writers.
"""

from .input import (
    VcfReader,
    iter_records,
    open_variant_file,
    read_header,
    sample_ids,
    to_sinks,
)
from .output import InvalidLineWriter, OutputWriter, VariantTsvWriter
from .sinks import ListSink, QueueSink, Sink

__all__ = [
    "InvalidLineWriter",
    "ListSink",
    "OutputWriter",
    "QueueSink",
    "Sink",
    "VariantTsvWriter",
    "VcfReader",
    "iter_records",
    "open_variant_file",
    "read_header",
    "sample_ids",
    "to_sinks",
]
