"""Exception hierarchy for vcfstream."""


class VcfError(ValueError):
    """Base class for VCF parsing failures."""


class HeaderNotFoundError(VcfError):
    """No ``#CHROM`` column header line was found before the input ended."""

    def __init__(self, message: str = "vcf header not found on file"):
        super().__init__(message)


class MalformedLineError(VcfError):
    """A data line has fewer than the eight mandatory columns."""

    def __init__(self, line: str, n_columns: int):
        self.line = line
        self.n_columns = n_columns
        super().__init__(
            f"unable to parse apparently misformatted VCF line "
            f"(wrong amount of columns: {n_columns}): {line!r}"
        )


class InvalidVariantError(VcfError):
    """A required field of a line is empty or out of range after normalization."""

    def __init__(self, line: str, reason: str | None = None):
        self.line = line
        self.reason = reason
        message = f"error parsing variant: {line!r}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)
