"""tailr - Print the last part of files by line or byte count."""

import logging
import sys

from .count import FROM_START, CountSpec, FromStart, Signed, parse_count
from .errors import IllegalCount, TailError
from .offset import resolve_start
from .tailr import Config, Mode, run, tail_file

__version__ = "0.1.0"
__all__ = [
    "Config",
    "CountSpec",
    "FROM_START",
    "FromStart",
    "IllegalCount",
    "Mode",
    "Signed",
    "TailError",
    "configure_logging",
    "parse_count",
    "resolve_start",
    "run",
    "tail_file",
]


def configure_logging(level=logging.WARNING):
    """Configure logging for tailr."""
    formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)

    logger = logging.getLogger("tailr")
    logger.setLevel(level)
    # Remove existing handlers to avoid duplicates
    logger.handlers.clear()
    logger.addHandler(handler)
