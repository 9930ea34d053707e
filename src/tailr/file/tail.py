"""Writing the tail of a file from a resolved start offset."""

import logging
import shutil
from typing import BinaryIO, Optional

from .totals import CHUNK_SIZE_BYTES

logger = logging.getLogger(__name__)


def write_lines(file: BinaryIO, start: Optional[int], out: BinaryIO) -> None:
    """
    Write every line from line ``start`` to the end of the file.

    Lines can't be located without reading the ones before them, so the
    file is read from the top. Lines are written as raw bytes, newline
    included.

    Args:
        file: Binary file opened for reading
        start: Zero-based first line to write, or None to write nothing
        out: Binary stream to write to
    """
    if start is None:
        return

    file.seek(0)
    for line_no, line in enumerate(file):
        if line_no >= start:
            out.write(line)


def write_bytes(file: BinaryIO, start: Optional[int], out: BinaryIO) -> None:
    """
    Write everything from byte ``start`` to the end of the file.

    Nothing is decoded, so a multi-byte character may be cut in half.

    Args:
        file: Binary file opened for reading, must be seekable
        start: Zero-based first byte to write, or None to write nothing
        out: Binary stream to write to
    """
    if start is None:
        return

    file.seek(start)
    logger.debug(f"Seeked to byte {start:,}")
    shutil.copyfileobj(file, out, CHUNK_SIZE_BYTES)
