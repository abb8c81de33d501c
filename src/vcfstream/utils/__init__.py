"""
Utility modules for vcfstream.

Provides logging and timing helpers.
"""

from .logging import Timer, console, setup_logging, timed

__all__ = [
    "Timer",
    "console",
    "setup_logging",
    "timed",
]
