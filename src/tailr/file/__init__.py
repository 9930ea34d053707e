"""File scanning and extraction."""

from .tail import write_bytes, write_lines
from .totals import FileTotals, count_totals

__all__ = ["FileTotals", "count_totals", "write_bytes", "write_lines"]
