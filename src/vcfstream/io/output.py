"""
Output Writers: tabular reports of parse results.

This module writes parsed variants and rejected lines to TSV files.
"""

import csv
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from ..models.core import InfoValue, InvalidLine, Variant


class OutputWriter:
    """Abstract base class for output writers."""

    def write(self, item: Any):
        raise NotImplementedError

    def close(self):
        pass

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()


class VariantTsvWriter(OutputWriter):
    """Writes Variants to a TSV file, one row per allele."""

    fieldnames = [
        "chrom", "pos", "id", "ref", "alt", "qual", "filter",
        "ancestral_allele", "depth", "allele_frequency", "allele_count",
        "total_alleles", "end", "mapq0_reads", "number_of_samples",
        "mapping_quality", "cigar", "in_dbsnp", "in_hapmap2", "in_hapmap3",
        "is_somatic", "is_validated", "in_1000g", "base_quality", "strand_bias",
        "imprecise", "novel", "sv_type", "sv_length", "ci_pos", "ci_end",
        "info", "n_samples",
    ]

    def __init__(self, path: Path):
        self.path = path
        self.file = open(path, "w", newline="")
        self.writer = csv.DictWriter(self.file, fieldnames=self.fieldnames, delimiter="\t")
        self._headers_written = False
        self.count = 0

    def write(self, variant: Variant):
        if not self._headers_written:
            self.writer.writeheader()
            self._headers_written = True

        row = {k: "" for k in self.fieldnames}
        for name in self.fieldnames:
            if name in Variant.model_fields:
                value = getattr(variant, name)
                if value is not None:
                    row[name] = value

        row.update({
            "pos": variant.pos + 1,  # 1-based for display
            "qual": "" if variant.qual is None else f"{variant.qual:g}",
            "sv_type": variant.sv_type.value if variant.sv_type else "",
            "info": format_info(variant.info),
            "n_samples": len(variant.samples),
        })
        self.writer.writerow(row)
        self.count += 1

    def close(self):
        if not self._headers_written:
            self.writer.writeheader()
            self._headers_written = True
        self.file.close()


class InvalidLineWriter(OutputWriter):
    """Writes rejected lines with their error to a TSV file."""

    fieldnames = ["line", "error"]

    def __init__(self, path: Path):
        self.path = path
        self.file = open(path, "w", newline="")
        self.writer = csv.DictWriter(self.file, fieldnames=self.fieldnames, delimiter="\t")
        self.writer.writeheader()
        self.count = 0

    def write(self, invalid: InvalidLine):
        self.writer.writerow({"line": invalid.line, "error": invalid.error})
        self.count += 1

    def close(self):
        self.file.close()


def format_info(info: Mapping[str, InfoValue]) -> str:
    """Render an INFO mapping back to VCF ``KEY=VALUE;FLAG`` form."""
    return ";".join(key if value is True else f"{key}={value}" for key, value in info.items())
