"""
Percentage — CSS <percentage>

A number followed by '%'. No range is enforced: CSS accepts negative and
greater-than-100 percentages in many contexts.
"""

from typing import Any, ClassVar, Optional

from cssvalues.core.errors import DivisionByZeroError
from cssvalues.core.formatting import format_number
from cssvalues.values.base import CSSValue


class Percentage(CSSValue):
    """
    CSS percentage.

    Examples:
        >>> str(Percentage(50))
        '50%'
        >>> str(Percentage(33.33))
        '33.33%'
    """

    value: float

    ZERO: ClassVar["Percentage"]
    HALF: ClassVar["Percentage"]
    FULL: ClassVar["Percentage"]

    def __init__(self, value: float, **data: Any) -> None:
        super().__init__(value=value, **data)

    def __str__(self) -> str:
        return f"{format_number(self.value)}%"

    @staticmethod
    def _scalar(other: Any) -> Optional[float]:
        if isinstance(other, (int, float)) and not isinstance(other, bool):
            return float(other)
        return None

    def __add__(self, other: Any) -> "Percentage":
        if not isinstance(other, Percentage):
            return NotImplemented
        return Percentage(self.value + other.value)

    def __sub__(self, other: Any) -> "Percentage":
        if not isinstance(other, Percentage):
            return NotImplemented
        return Percentage(self.value - other.value)

    def __mul__(self, other: Any) -> "Percentage":
        factor = self._scalar(other)
        if factor is None:
            return NotImplemented
        return Percentage(self.value * factor)

    __rmul__ = __mul__

    def __truediv__(self, other: Any) -> "Percentage":
        divisor = self._scalar(other)
        if divisor is None:
            return NotImplemented
        if divisor == 0:
            raise DivisionByZeroError(self)
        return Percentage(self.value / divisor)

    def __neg__(self) -> "Percentage":
        return Percentage(-self.value)

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, Percentage):
            return NotImplemented
        return self.value < other.value

    def __le__(self, other: Any) -> bool:
        if not isinstance(other, Percentage):
            return NotImplemented
        return self.value <= other.value

    def __gt__(self, other: Any) -> bool:
        if not isinstance(other, Percentage):
            return NotImplemented
        return self.value > other.value

    def __ge__(self, other: Any) -> bool:
        if not isinstance(other, Percentage):
            return NotImplemented
        return self.value >= other.value

    def fraction(self, fraction: float) -> "Percentage":
        """
        Fraction of this percentage.

        Examples:
            >>> str(Percentage(80).fraction(0.25))
            '20%'
        """
        return self * fraction


Percentage.ZERO = Percentage(0)
Percentage.HALF = Percentage(50)
Percentage.FULL = Percentage(100)


class PercentageConvertible:
    """
    Mixin: a type that can be built from a Percentage.

    Implement from_percentage(); percentage() comes for free.
    """

    @classmethod
    def from_percentage(cls, percentage: Percentage):
        raise NotImplementedError(f"{cls.__name__} must implement from_percentage()")

    @classmethod
    def percentage(cls, value: float):
        return cls.from_percentage(Percentage(value))
