"""Line and byte totals for a file."""

import logging
from dataclasses import dataclass
from typing import BinaryIO

logger = logging.getLogger(__name__)

CHUNK_SIZE_BYTES = 64 * 1024


@dataclass(frozen=True)
class FileTotals:
    """Number of lines and bytes in a file."""

    total_lines: int
    total_bytes: int


def count_totals(file: BinaryIO) -> FileTotals:
    """
    Scan a file once and count its lines and bytes.

    A trailing line without a newline still counts as a line.

    Args:
        file: Binary file opened for reading; it is rewound before the scan

    Returns:
        FileTotals for the whole file
    """
    file.seek(0)

    newlines = 0
    total_bytes = 0
    last = b""

    while True:
        chunk = file.read(CHUNK_SIZE_BYTES)
        if not chunk:
            break
        newlines += chunk.count(b"\n")
        total_bytes += len(chunk)
        last = chunk[-1:]

    # Unterminated last line
    total_lines = newlines + 1 if last and last != b"\n" else newlines

    logger.debug(f"Counted {total_lines:,} lines, {total_bytes:,} bytes")
    return FileTotals(total_lines, total_bytes)
