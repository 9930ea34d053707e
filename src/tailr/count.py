"""Parsing of signed line/byte counts."""

import re
from dataclasses import dataclass
from typing import Union

from .errors import IllegalCount

# Range of a 64-bit signed integer
INT64_MIN = -(1 << 63)
INT64_MAX = (1 << 63) - 1

_INTEGER = re.compile(r"[+-]?[0-9]+")


@dataclass(frozen=True)
class FromStart:
    """The whole file, written as ``+0``."""


@dataclass(frozen=True)
class Signed:
    """
    A signed count.

    Negative means the last ``abs(n)`` units, positive means starting at the
    1-based position ``n``, and zero selects nothing.
    """

    n: int


CountSpec = Union[FromStart, Signed]

FROM_START = FromStart()


def negate_saturating(value: int) -> int:
    """Negate a 64-bit value, keeping INT64_MIN at INT64_MIN."""
    if value == INT64_MIN:
        return INT64_MIN
    return -value


def _parse_int64(text: str) -> int:
    if not _INTEGER.fullmatch(text):
        raise IllegalCount(text)
    value = int(text)
    if value < INT64_MIN or value > INT64_MAX:
        raise IllegalCount(text)
    return value


def parse_count(text: str) -> CountSpec:
    """
    Parse a count argument.

    Args:
        text: Count as given by the user, e.g. ``"10"``, ``"-10"``, ``"+3"``

    Returns:
        FROM_START for ``+0``, otherwise a Signed count. Unsigned numbers
        mean "last N" and are negated.

    Raises:
        IllegalCount: If text is not a 64-bit base-10 integer
    """
    value = _parse_int64(text)

    if text.startswith("+"):
        if value == 0:
            return FROM_START
        return Signed(value)

    if text.startswith("-"):
        return Signed(value)

    return Signed(negate_saturating(value))
