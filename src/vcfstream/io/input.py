"""
Input Adapters: reading VCF text streams.

This module locates the ``#CHROM`` column header, then feeds every data line
through the variant builder, one line at a time. Results are either yielded
lazily or pushed into a pair of sinks (valid variants, invalid lines).
"""

import gzip
import logging
from collections.abc import Iterable, Iterator
from pathlib import Path
from typing import TextIO

from ..core.builder import parse_vcf_line
from ..errors import HeaderNotFoundError, VcfError
from ..models.core import InvalidLine, Variant
from .sinks import Sink

logger = logging.getLogger(__name__)

SAMPLE_COLUMN = 9

ParseResult = Variant | InvalidLine


def open_variant_file(path: Path | str) -> TextIO:
    """Open a plain or gzip/bgzip-compressed VCF for text reading."""
    path = Path(path)
    if path.suffix.lower() in (".gz", ".bgz"):
        return gzip.open(path, "rt", encoding="utf-8")
    return open(path, encoding="utf-8")


def is_header_line(line: str) -> bool:
    return line.startswith("#")


def is_column_header(line: str) -> bool:
    return line.startswith("#") and not line.startswith("##")


def read_header(lines: Iterator[str]) -> list[str]:
    """
    Consume lines up to and including the ``#CHROM`` column header.

    Args:
        lines: Line iterator; it is left positioned on the first data line.

    Returns:
        Column names without the leading '#'.

    Raises:
        HeaderNotFoundError: If the input ends before a column header.
    """
    for line in lines:
        if is_column_header(line):
            return line.strip()[1:].split("\t")
    raise HeaderNotFoundError()


def samples_from_header(header: list[str]) -> list[str] | None:
    """Sample IDs are the columns after FORMAT; None when there are none."""
    if len(header) > SAMPLE_COLUMN:
        return header[SAMPLE_COLUMN:]
    return None


def sample_ids(source: Path | str | Iterable[str]) -> list[str] | None:
    """
    Read the sample IDs declared by a VCF header.

    Raises:
        HeaderNotFoundError: If no column header is found.
    """
    if isinstance(source, (str, Path)):
        with open_variant_file(source) as f:
            return samples_from_header(read_header(iter(f)))
    return samples_from_header(read_header(iter(source)))


def parse_line(line: str) -> list[ParseResult]:
    """
    Parse one data line into its variants, or a single InvalidLine.
    """
    try:
        return list(parse_vcf_line(line))
    except VcfError as e:
        logger.debug("Rejected line: %s", e)
        return [InvalidLine(line=line, error=str(e))]


def iter_body(lines: Iterator[str]) -> Iterator[ParseResult]:
    """Parse the data lines that follow an already consumed header."""
    for raw in lines:
        line = raw.rstrip("\r\n")
        if is_header_line(line):
            continue
        yield from parse_line(line)


def iter_records(lines: Iterable[str]) -> Iterator[ParseResult]:
    """
    Lazily parse a VCF line stream.

    Yields Variants in input and ALT order, and one InvalidLine for every data
    line that cannot be interpreted.

    Raises:
        HeaderNotFoundError: If no column header precedes the data.
    """
    it = iter(lines)
    read_header(it)
    yield from iter_body(it)


def to_sinks(
    source: Path | str | Iterable[str],
    output: Sink[Variant],
    invalids: Sink[InvalidLine],
) -> None:
    """
    Parse a VCF stream, routing variants and invalid lines to two sinks.

    Sink writes block rather than drop. Both sinks are closed when the stream
    is exhausted, and also when a fatal error (missing header, read failure)
    stops the run; the error is then re-raised.
    """
    try:
        if isinstance(source, (str, Path)):
            with open_variant_file(source) as f:
                _dispatch(iter_records(f), output, invalids)
        else:
            _dispatch(iter_records(source), output, invalids)
    finally:
        output.close()
        invalids.close()


def _dispatch(
    results: Iterable[ParseResult], output: Sink[Variant], invalids: Sink[InvalidLine]
) -> None:
    for result in results:
        if isinstance(result, InvalidLine):
            invalids.put(result)
        else:
            output.put(result)


class VcfReader:
    """Reads variants from a VCF file or line stream."""

    def __init__(self, source: Path | str | Iterable[str]):
        self.path: Path | None = None
        self._handle: TextIO | None = None
        if isinstance(source, (str, Path)):
            self.path = Path(source)
            self._handle = open_variant_file(self.path)
            self._lines: Iterator[str] = iter(self._handle)
        else:
            self._lines = iter(source)

        try:
            self.header = read_header(self._lines)
        except Exception:
            self.close()
            raise

    @property
    def samples(self) -> list[str] | None:
        return samples_from_header(self.header)

    def __iter__(self) -> Iterator[ParseResult]:
        return iter_body(self._lines)

    def variants(self) -> Iterator[Variant]:
        """Only the successfully parsed records; invalid lines are logged and skipped."""
        for result in self:
            if isinstance(result, Variant):
                yield result
            else:
                logger.warning("Skipping invalid line: %s", result.error)

    def close(self):
        if self._handle is not None:
            self._handle.close()
            self._handle = None

    def __enter__(self) -> "VcfReader":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
