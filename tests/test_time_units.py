"""
Test suite for time unit conversion
"""

import sys
from pathlib import Path

import pytest

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from core.time_units import TimeUnit, UnknownTimeUnitError


def test_to_seconds():
    """Test conversion to seconds."""

    print("Testing to_seconds...")

    assert TimeUnit.SECONDS.to_seconds(3) == 3
    assert TimeUnit.MILLISECONDS.to_seconds(250) == pytest.approx(0.25)
    assert TimeUnit.MICROSECONDS.to_seconds(1500) == pytest.approx(0.0015)
    assert TimeUnit.NANOSECONDS.to_seconds(2_000_000_000) == pytest.approx(2.0)
    assert TimeUnit.MINUTES.to_seconds(2) == 120
    assert TimeUnit.HOURS.to_seconds(1) == 3600
    assert TimeUnit.DAYS.to_seconds(0.5) == 43200

    # Zero is zero in any unit
    for unit in TimeUnit:
        assert unit.to_seconds(0) == 0

    print("✓ to_seconds tests passed")


def test_parse():
    """Test unit name resolution."""

    print("Testing parse...")

    assert TimeUnit.parse(TimeUnit.HOURS) is TimeUnit.HOURS
    assert TimeUnit.parse("ms") is TimeUnit.MILLISECONDS
    assert TimeUnit.parse("Seconds") is TimeUnit.SECONDS
    assert TimeUnit.parse("  MIN ") is TimeUnit.MINUTES
    assert TimeUnit.parse("d") is TimeUnit.DAYS
    assert TimeUnit.parse("nanoseconds") is TimeUnit.NANOSECONDS

    print("✓ parse tests passed")


def test_parse_unknown():
    """Test unknown names are rejected."""

    with pytest.raises(UnknownTimeUnitError):
        TimeUnit.parse("fortnight")

    # Still a ValueError for callers that don't know the subclass
    with pytest.raises(ValueError):
        TimeUnit.parse("")


if __name__ == "__main__":
    test_to_seconds()
    test_parse()
    test_parse_unknown()
    print("✅ ALL TESTS PASSED!")
