"""Tests for start offset resolution."""

from tailr.count import FROM_START, INT64_MAX, INT64_MIN, Signed
from tailr.offset import resolve_start


def test_from_start():
    """Test +0 on empty and non-empty totals."""
    assert resolve_start(FROM_START, 10) == 0
    assert resolve_start(FROM_START, 1) == 0
    assert resolve_start(FROM_START, 0) is None


def test_zero_count():
    """Test that a count of zero selects nothing."""
    assert resolve_start(Signed(0), 10) is None
    assert resolve_start(Signed(0), 0) is None


def test_empty_total():
    """Test that an empty file selects nothing."""
    assert resolve_start(Signed(-3), 0) is None
    assert resolve_start(Signed(3), 0) is None


def test_last_n():
    """Test negative counts."""
    assert resolve_start(Signed(-3), 10) == 7
    assert resolve_start(Signed(-1), 10) == 9
    assert resolve_start(Signed(-10), 10) == 0


def test_last_n_beyond_total():
    """Test that asking for more than the file has selects nothing."""
    assert resolve_start(Signed(-11), 10) is None
    assert resolve_start(Signed(-100), 6) is None
    assert resolve_start(Signed(INT64_MIN), 10) is None


def test_from_position():
    """Test positive counts."""
    assert resolve_start(Signed(1), 10) == 0
    assert resolve_start(Signed(8), 10) == 7
    assert resolve_start(Signed(10), 10) == 9


def test_from_position_beyond_total():
    """Test positions past the end."""
    assert resolve_start(Signed(11), 10) is None
    assert resolve_start(Signed(INT64_MAX), 10) is None


def test_offset_always_in_range():
    """Test that a resolved offset never points past the end."""
    for total in range(0, 6):
        for n in range(-8, 9):
            start = resolve_start(Signed(n), total)
            if start is not None:
                assert 0 <= start < total
