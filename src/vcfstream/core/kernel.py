"""
Coordinate Kernel: normalization rules for VCF fields.

Handles:
- Chromosome names (first "chr" removed)
- Positions (VCF 1-based -> internal 0-based)
- Alleles (uppercased, missing-value dots removed from ALT)
- Minimal representation of REF/ALT pairs (shared suffix trimmed)
"""

from .info import ALLELE_SEPARATOR, parse_int


class CoordinateKernel:
    """
    Stateless utility for coordinate transformations and normalization.
    """

    @staticmethod
    def normalize_chromosome(chrom: str) -> str:
        """
        Remove the first "chr" from a chromosome name.

        The match is case-sensitive and may sit anywhere in the name:
            chr1 -> 1, scaffold_chr1 -> scaffold_1, Chr1 -> Chr1
        """
        return chrom.replace("chr", "", 1)

    @staticmethod
    def vcf_to_internal_pos(raw_pos: str) -> int | None:
        """
        Convert a VCF POS column to a 0-based position.

        Returns None when the column is not an integer.
        1-based 10 -> 0-based 9
        """
        try:
            return parse_int(raw_pos) - 1
        except ValueError:
            return None

    @staticmethod
    def normalize_allele(allele: str) -> str:
        return allele.upper()

    @staticmethod
    def split_alternatives(raw_alt: str) -> list[str]:
        """
        Uppercase ALT, drop every '.', and split on ','.

        'G....' -> ['G'], 'a,c' -> ['A', 'C'], '.' -> ['']
        """
        return raw_alt.upper().replace(".", "").split(ALLELE_SEPARATOR)

    @staticmethod
    def trim_common_suffix(ref: str, alt: str) -> tuple[str, str]:
        """
        Remove the trailing bases shared by REF and ALT.

        At least one base is always kept on each side:
            GC / TC   -> G / T
            GTT / GT  -> GT / G
            CG / CGCG -> C / CGC
        """
        i = len(ref) - 1
        j = len(alt) - 1
        while i > 0 and j > 0 and ref[i] == alt[j]:
            i -= 1
            j -= 1
        return ref[: i + 1], alt[: j + 1]
