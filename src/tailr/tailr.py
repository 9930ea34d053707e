"""Main tailr implementation."""

import enum
import logging
import time
from dataclasses import dataclass
from typing import BinaryIO, Optional, TextIO, Tuple

from .count import CountSpec, parse_count
from .file import count_totals, write_bytes, write_lines
from .offset import resolve_start

logger = logging.getLogger(__name__)

DEFAULT_LINES = "-10"
HEADER_FORMAT = "==> {path} <=="


class Mode(enum.Enum):
    """Unit the count is measured in."""

    LINES = "lines"
    BYTES = "bytes"


@dataclass(frozen=True)
class Config:
    """
    What to print and from which files.

    A byte count, when given, takes precedence over the line count.
    """

    files: Tuple[str, ...]
    lines: CountSpec = parse_count(DEFAULT_LINES)
    bytes: Optional[CountSpec] = None
    quiet: bool = False

    @property
    def mode(self) -> Mode:
        return Mode.BYTES if self.bytes is not None else Mode.LINES

    @property
    def count(self) -> CountSpec:
        return self.bytes if self.bytes is not None else self.lines

    @property
    def show_headers(self) -> bool:
        return not self.quiet and len(self.files) > 1


def tail_file(file: BinaryIO, config: Config, out: BinaryIO) -> None:
    """
    Write the tail of one open file.

    Args:
        file: Binary file opened for reading, must be seekable
        config: Count and mode to apply
        out: Binary stream to write to

    Raises:
        OSError: If the file can't be read or seeked
    """
    totals = count_totals(file)

    if config.mode is Mode.BYTES:
        start = resolve_start(config.count, totals.total_bytes)
        logger.debug(f"Byte start {start} of {totals.total_bytes:,}")
        write_bytes(file, start, out)
    else:
        start = resolve_start(config.count, totals.total_lines)
        logger.debug(f"Line start {start} of {totals.total_lines:,}")
        write_lines(file, start, out)


def _report(err: TextIO, path: str, error: OSError) -> None:
    logger.debug(f"{path}: skipped after {type(error).__name__}")
    err.write(f"{path}: {error.strerror or error}\n")
    err.flush()


def run(config: Config, out: BinaryIO, err: TextIO) -> None:
    """
    Write the tail of every file in order.

    A file that can't be opened or read is reported on ``err`` and skipped;
    the rest are still processed.

    Args:
        config: Files, count and mode
        out: Binary stream for file content and headers
        err: Text stream for per-file diagnostics
    """
    logger.info(f"Tailing {len(config.files)} file(s) in {config.mode.value} mode")
    first_header = True

    for path in config.files:
        try:
            file = open(path, "rb")
        except OSError as e:
            _report(err, path, e)
            continue

        start_time = time.time()
        with file:
            if config.show_headers:
                if not first_header:
                    out.write(b"\n")
                out.write(HEADER_FORMAT.format(path=path).encode(errors="surrogateescape") + b"\n")
                first_header = False

            try:
                tail_file(file, config, out)
            except OSError as e:
                _report(err, path, e)

        out.flush()
        logger.debug(f"{path}: done in {time.time() - start_time:.3f}s")
