"""
Logging setup for vcfstream.

Records flow through the standard logging module. The console handler writes
to stderr so that command output on stdout (sample IDs, counts) stays
parseable, and never interprets markup: log messages quote raw VCF lines,
which may contain square brackets (breakend ALTs such as ``G]17:198982]``).
"""

import logging
import time
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler

__all__ = [
    "console",
    "setup_logging",
    "timed",
    "Timer",
]

FILE_LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"

console = Console(stderr=True)


def setup_logging(verbose: bool = False, log_file: str | Path | None = None) -> None:
    """
    Route vcfstream logs to the stderr console, and optionally to a file.

    Args:
        verbose: DEBUG level (rejected lines, timings) instead of INFO.
        log_file: Plain-text log destination; it always receives DEBUG records.
    """
    console_handler = RichHandler(
        console=console,
        markup=False,
        rich_tracebacks=True,
        show_path=verbose,
    )
    console_handler.setLevel(logging.DEBUG if verbose else logging.INFO)
    handlers: list[logging.Handler] = [console_handler]

    if log_file:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(logging.Formatter(FILE_LOG_FORMAT))
        file_handler.setLevel(logging.DEBUG)
        handlers.append(file_handler)

    logging.basicConfig(
        level=logging.DEBUG if verbose or log_file else logging.INFO,
        format="%(message)s",
        datefmt="[%X]",
        handlers=handlers,
        force=True,
    )


@dataclass
class Timer:
    """Wall-clock duration of a ``timed`` block; final once the block exits."""

    start: float
    elapsed: float = 0.0


@contextmanager
def timed(operation: str, logger: logging.Logger) -> Iterator[Timer]:
    """
    Time a block and log its duration at DEBUG.

    Example:
        with timed("Parsing calls.vcf", logger) as timer:
            ...
        logger.info("done in %.2fs", timer.elapsed)
    """
    timer = Timer(start=time.perf_counter())
    logger.debug("Starting: %s", operation)
    try:
        yield timer
    finally:
        timer.elapsed = time.perf_counter() - timer.start
        logger.debug("Completed: %s (%.3fs)", operation, timer.elapsed)
