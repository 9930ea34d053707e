"""Mapping of a count onto a start offset."""

from typing import Optional

from .count import CountSpec, FromStart


def resolve_start(count: CountSpec, total: int) -> Optional[int]:
    """
    Find the zero-based index where output begins.

    The same rule applies to lines and bytes; only ``total`` differs.
    A count larger than the file, in either direction, selects nothing.

    Args:
        count: Parsed count
        total: Number of lines or bytes in the file

    Returns:
        Start index below ``total``, or None when there is nothing to print
    """
    if isinstance(count, FromStart):
        return 0 if total > 0 else None

    n = count.n
    # A negative count past the start prints nothing rather than clamping to 0
    if n == 0 or total == 0 or abs(n) > total:
        return None

    if n < 0:
        return total + n
    return n - 1
