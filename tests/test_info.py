"""Tests for INFO decoding, per-allele redistribution and typed lookups."""

from vcfstream.core.info import (
    decode_info,
    info_flag,
    info_float,
    info_int,
    info_str,
    info_sub_fields,
    split_multiple_alt_infos,
)
from vcfstream.models.core import StructuralVariantType


class TestDecodeInfo:
    def test_key_value_pairs_keep_raw_strings(self):
        assert decode_info("AC=1;AF=0.500;culprit=FS") == {
            "AC": "1",
            "AF": "0.500",
            "culprit": "FS",
        }

    def test_flags_map_to_true(self):
        info = decode_info("AC=1;DB;H2")
        assert info["DB"] is True
        assert info["H2"] is True

    def test_value_keeps_everything_after_first_equals(self):
        info = decode_info("CSQ=A|x=y|z;ANN=k=v=w")
        assert info["CSQ"] == "A|x=y|z"
        assert info["ANN"] == "k=v=w"

    def test_empty_value_is_a_string(self):
        assert decode_info("KEY=") == {"KEY": ""}

    def test_malformed_pieces_become_flags(self):
        assert decode_info("not an info field") == {"not an info field": True}


class TestSplitMultipleAltInfos:
    def test_comma_values_are_split_by_allele(self):
        maps = split_multiple_alt_infos({"AF": "0.500,0.335", "AC": "1,2"}, 2)
        assert maps == [{"AF": "0.500", "AC": "1"}, {"AF": "0.335", "AC": "2"}]

    def test_scalar_values_are_broadcast(self):
        maps = split_multiple_alt_infos({"DP": "41", "AF": "0.1,0.2,0.3"}, 3)
        assert [m["DP"] for m in maps] == ["41", "41", "41"]
        assert [m["AF"] for m in maps] == ["0.1", "0.2", "0.3"]

    def test_flags_only_in_first_map(self):
        maps = split_multiple_alt_infos({"DB": True, "DP": "20"}, 2)
        assert maps[0] == {"DB": True, "DP": "20"}
        assert maps[1] == {"DP": "20"}

    def test_result_may_be_shorter_than_allele_count(self):
        maps = split_multiple_alt_infos({"DB": True}, 3)
        assert maps == [{"DB": True}]

    def test_longer_comma_list_creates_extra_maps(self):
        maps = split_multiple_alt_infos({"CIPOS": "-141,50"}, 1)
        assert maps == [{"CIPOS": "-141"}, {"CIPOS": "50"}]

    def test_empty_info(self):
        assert split_multiple_alt_infos({}, 2) == []


class TestTypedLookups:
    info = {"DP": "41", "AF": "0.5", "AA": "T", "DB": True, "SB": "strong", "X": "true"}

    def test_int(self):
        assert info_int(self.info, "DP") == 41
        assert info_int(self.info, "AF") is None
        assert info_int(self.info, "DB") is None
        assert info_int(self.info, "missing") is None

    def test_float(self):
        assert info_float(self.info, "AF") == 0.5
        assert info_float(self.info, "DP") == 41.0
        assert info_float(self.info, "SB") is None

    def test_str(self):
        assert info_str(self.info, "AA") == "T"
        assert info_str(self.info, "DB") is None

    def test_numbers_must_be_plain_literals(self):
        info = {"DP": "1_000", "MQ": " 60.0", "AF": "0.5 ", "SB": "1_0.5", "AC": "+3", "BQ": "1e2"}
        assert info_int(info, "DP") is None
        assert info_float(info, "MQ") is None
        assert info_float(info, "AF") is None
        assert info_float(info, "SB") is None
        assert info_int(info, "AC") == 3
        assert info_float(info, "BQ") == 100.0

    def test_flag(self):
        assert info_flag(self.info, "DB") is True
        assert info_flag(self.info, "X") is None
        assert info_flag(self.info, "missing") is None


def test_sub_fields_cover_structural_keys():
    fields = info_sub_fields(
        decode_info("SVTYPE=DUP;SVLEN=337;CIPOS=10;CIEND=7;END=1752234;IMPRECISE;NOVEL")
    )
    assert fields == {
        "sv_type": StructuralVariantType.DUPLICATION,
        "sv_length": 337,
        "ci_pos": 10,
        "ci_end": 7,
        "end": 1752234,
        "imprecise": True,
        "novel": True,
    }


def test_sub_fields_skip_absent_and_unparsable():
    assert info_sub_fields({"AC": "x", "OTHER": "1"}) == {}


def test_structural_variant_codes():
    expected = {
        "DEL": StructuralVariantType.DELETION,
        "DUP": StructuralVariantType.DUPLICATION,
        "INS": StructuralVariantType.INSERTION,
        "INV": StructuralVariantType.INVERSION,
        "CNV": StructuralVariantType.COPY_NUMBER_VARIATION,
        "DUP:TANDEM": StructuralVariantType.TANDEM_DUPLICATION,
        "DEL:ME": StructuralVariantType.DELETION_MOBILE_ELEMENT,
        "INS:ME": StructuralVariantType.INSERTION_MOBILE_ELEMENT,
        "BND": StructuralVariantType.BREAKEND,
    }
    for code, member in expected.items():
        assert info_sub_fields({"SVTYPE": code})["sv_type"] is member
    assert "sv_type" not in info_sub_fields({"SVTYPE": "INVALID"})
