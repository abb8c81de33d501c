"""Tests for the TSV writers."""

import csv

from conftest import GATK_LINE
from vcfstream.core.builder import parse_vcf_line
from vcfstream.io.output import InvalidLineWriter, VariantTsvWriter, format_info
from vcfstream.models.core import InvalidLine


def read_rows(path):
    with open(path, newline="") as f:
        return list(csv.DictReader(f, delimiter="\t"))


def test_variant_writer(temp_dir):
    path = temp_dir / "variants.tsv"
    variants = parse_vcf_line(
        "X\t1734042\tCNVR8241.1\tN\t<DUP>\t30.2\tPASS\tSVTYPE=DUP;END=1752234;IMPRECISE\tGT\t0/1"
    ) + parse_vcf_line(GATK_LINE)

    with VariantTsvWriter(path) as writer:
        for variant in variants:
            writer.write(variant)
        assert writer.count == 2

    rows = read_rows(path)
    assert len(rows) == 2

    sv, snv = rows
    # Positions are written back 1-based
    assert sv["pos"] == "1734042"
    assert sv["sv_type"] == "DUP"
    assert sv["end"] == "1752234"
    assert sv["imprecise"] == "True"
    assert sv["qual"] == "30.2"
    assert sv["info"] == "SVTYPE=DUP;END=1752234;IMPRECISE"
    assert sv["n_samples"] == "1"

    assert snv["chrom"] == "1"
    assert snv["ref"] == "GTTTA"
    assert snv["alt"] == "G"
    assert snv["depth"] == "41"
    assert snv["in_dbsnp"] == "True"
    assert snv["sv_type"] == ""
    assert snv["ancestral_allele"] == ""


def test_missing_quality_is_blank(temp_dir):
    path = temp_dir / "variants.tsv"
    with VariantTsvWriter(path) as writer:
        writer.write(parse_vcf_line("1\t100\t.\tA\tT\t.\t.\tDP=1")[0])

    assert read_rows(path)[0]["qual"] == ""


def test_empty_variant_file_has_header(temp_dir):
    path = temp_dir / "variants.tsv"
    VariantTsvWriter(path).close()

    assert path.read_text().splitlines() == ["\t".join(VariantTsvWriter.fieldnames)]


def test_invalid_line_writer(temp_dir):
    path = temp_dir / "invalid.tsv"
    with InvalidLineWriter(path) as writer:
        writer.write(InvalidLine(line="not a vcf line", error="wrong amount of columns: 1"))

    rows = read_rows(path)
    assert rows == [{"line": "not a vcf line", "error": "wrong amount of columns: 1"}]


def test_format_info():
    assert format_info({"AC": "1", "DB": True, "AF": "0.5"}) == "AC=1;DB;AF=0.5"
    assert format_info({}) == ""
