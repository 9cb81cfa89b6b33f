"""
Time Units

Named durations for the blinking cursor. Converts an amount expressed in a
unit (milliseconds, seconds, minutes, ...) into seconds for wall-clock math.
"""

from enum import Enum
from typing import Union


class UnknownTimeUnitError(ValueError):
    """Raised when a unit name cannot be resolved to a TimeUnit"""


class TimeUnit(Enum):
    """
    Supported time units, valued by their length in seconds.

    Examples:
        >>> TimeUnit.MILLISECONDS.to_seconds(250)
        0.25

        >>> TimeUnit.parse("min")
        <TimeUnit.MINUTES: 60.0>
    """
    NANOSECONDS = 1e-9
    MICROSECONDS = 1e-6
    MILLISECONDS = 1e-3
    SECONDS = 1.0
    MINUTES = 60.0
    HOURS = 3600.0
    DAYS = 86400.0

    def to_seconds(self, amount: float) -> float:
        """Convert an amount in this unit to seconds"""
        return amount * self.value

    @classmethod
    def parse(cls, value: Union["TimeUnit", str]) -> "TimeUnit":
        """
        Resolve a TimeUnit from a member or a case-insensitive name/alias.

        Raises:
            UnknownTimeUnitError: If the name is not recognized
        """
        if isinstance(value, cls):
            return value

        key = str(value).strip().lower()
        unit = _ALIASES.get(key)
        if unit is None:
            raise UnknownTimeUnitError(f"Unknown time unit: {value!r}")
        return unit


_ALIASES = {
    "ns": TimeUnit.NANOSECONDS,
    "nanosecond": TimeUnit.NANOSECONDS,
    "nanoseconds": TimeUnit.NANOSECONDS,
    "us": TimeUnit.MICROSECONDS,
    "microsecond": TimeUnit.MICROSECONDS,
    "microseconds": TimeUnit.MICROSECONDS,
    "ms": TimeUnit.MILLISECONDS,
    "millisecond": TimeUnit.MILLISECONDS,
    "milliseconds": TimeUnit.MILLISECONDS,
    "s": TimeUnit.SECONDS,
    "sec": TimeUnit.SECONDS,
    "second": TimeUnit.SECONDS,
    "seconds": TimeUnit.SECONDS,
    "m": TimeUnit.MINUTES,
    "min": TimeUnit.MINUTES,
    "minute": TimeUnit.MINUTES,
    "minutes": TimeUnit.MINUTES,
    "h": TimeUnit.HOURS,
    "hour": TimeUnit.HOURS,
    "hours": TimeUnit.HOURS,
    "d": TimeUnit.DAYS,
    "day": TimeUnit.DAYS,
    "days": TimeUnit.DAYS,
}
