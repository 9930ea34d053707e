"""Exceptions raised by tailr."""


class TailError(Exception):
    """Base class for tailr errors."""


class IllegalCount(TailError, ValueError):
    """A line or byte count that is not a base-10 integer."""

    def __init__(self, value: str):
        super().__init__(value)
        self.value = value

    def __str__(self) -> str:
        return self.value
