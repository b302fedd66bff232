"""
Time — CSS <time>

Seconds or milliseconds. Unlike the other number+unit types, Time compares
by duration: Time.s(1) == Time.ms(1000). Addition and subtraction convert
the result to the unit of the left operand.
"""

from typing import Any, ClassVar, Union

from cssvalues.core.constants import DEFAULT_TIME_UNIT, MS_PER_SECOND
from cssvalues.core.numeric import ensure_nonzero_divisor
from cssvalues.core.formatting import format_number
from cssvalues.values.base import CSSKeyword, CSSValue


class TimeUnit(CSSKeyword):
    """CSS time units"""

    S = "s"
    MS = "ms"


class Time(CSSValue):
    """
    CSS time.

    Examples:
        >>> str(Time.s(0.3))
        '0.3s'
        >>> str(Time.s(1) + Time.ms(500))
        '1.5s'
        >>> Time.s(1) == Time.ms(1000)
        True
    """

    value: float
    unit: TimeUnit

    ZERO: ClassVar["Time"]
    ONE_SECOND: ClassVar["Time"]
    HALF_SECOND: ClassVar["Time"]

    @classmethod
    def s(cls, value: float) -> "Time":
        return cls(value=value, unit=TimeUnit.S)

    @classmethod
    def ms(cls, value: float) -> "Time":
        return cls(value=value, unit=TimeUnit.MS)

    @classmethod
    def coerce(cls, value: Union["Time", int, float]) -> "Time":
        """
        Explicit literal coercion: a bare number becomes seconds.

        Raises:
            TypeError: If value is neither a Time nor a number
        """
        if isinstance(value, Time):
            return value
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return cls(value=value, unit=DEFAULT_TIME_UNIT)
        raise TypeError(f"Cannot coerce {type(value).__name__} to Time")

    @property
    def in_seconds(self) -> float:
        if self.unit is TimeUnit.MS:
            return self.value / MS_PER_SECOND
        return self.value

    @property
    def in_milliseconds(self) -> float:
        if self.unit is TimeUnit.S:
            return self.value * MS_PER_SECOND
        return self.value

    def converted(self, unit: TimeUnit) -> "Time":
        """Same duration expressed in another unit."""
        if unit is self.unit:
            return self
        if unit is TimeUnit.S:
            return Time.s(self.in_seconds)
        return Time.ms(self.in_milliseconds)

    # -------------------------------------------------------------------------
    # Arithmetic
    # -------------------------------------------------------------------------

    def __add__(self, other: Any) -> "Time":
        if not isinstance(other, Time):
            return NotImplemented
        return Time.s(self.in_seconds + other.in_seconds).converted(self.unit)

    def __sub__(self, other: Any) -> "Time":
        if not isinstance(other, Time):
            return NotImplemented
        return Time.s(self.in_seconds - other.in_seconds).converted(self.unit)

    def __mul__(self, other: Any) -> "Time":
        if not isinstance(other, (int, float)) or isinstance(other, bool):
            return NotImplemented
        return Time(value=self.value * other, unit=self.unit)

    __rmul__ = __mul__

    def __truediv__(self, other: Any) -> "Time":
        if not isinstance(other, (int, float)) or isinstance(other, bool):
            return NotImplemented
        ensure_nonzero_divisor(self, other)
        return Time(value=self.value / other, unit=self.unit)

    def __neg__(self) -> "Time":
        return Time(value=-self.value, unit=self.unit)

    # -------------------------------------------------------------------------
    # Comparison (by duration)
    # -------------------------------------------------------------------------

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Time):
            return NotImplemented
        return self.in_seconds == other.in_seconds

    def __hash__(self) -> int:
        return hash(self.in_seconds)

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, Time):
            return NotImplemented
        return self.in_seconds < other.in_seconds

    def __le__(self, other: Any) -> bool:
        if not isinstance(other, Time):
            return NotImplemented
        return self.in_seconds <= other.in_seconds

    def __gt__(self, other: Any) -> bool:
        if not isinstance(other, Time):
            return NotImplemented
        return self.in_seconds > other.in_seconds

    def __ge__(self, other: Any) -> bool:
        if not isinstance(other, Time):
            return NotImplemented
        return self.in_seconds >= other.in_seconds

    def __str__(self) -> str:
        return f"{format_number(self.value)}{self.unit}"


Time.ZERO = Time.s(0)
Time.ONE_SECOND = Time.s(1)
Time.HALF_SECOND = Time.s(0.5)
