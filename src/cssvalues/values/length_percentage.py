"""
LengthPercentage — CSS <length-percentage>

Either a Length (including calc() expressions) or a Percentage. No
normalization between the two is attempted. This is the most widely
embedded value type: width, padding, margins, gradient stops, positions.
"""

import logging
import operator
from typing import Any, Callable, ClassVar, Union

from cssvalues.values.base import CSSValue
from cssvalues.values.length import Length, LengthConvertible
from cssvalues.values.percentage import Percentage, PercentageConvertible

logger = logging.getLogger(__name__)


class LengthPercentageConvertible(LengthConvertible, PercentageConvertible):
    """
    Mixin: a type that can be built from a LengthPercentage.

    Implement from_length_percentage(); all Length unit factories,
    percentage(), calc() and zero() come for free.
    """

    @classmethod
    def from_length_percentage(cls, value: "LengthPercentage"):
        raise NotImplementedError(f"{cls.__name__} must implement from_length_percentage()")

    @classmethod
    def from_length(cls, length: Length):
        return cls.from_length_percentage(LengthPercentage(length))

    @classmethod
    def from_percentage(cls, percentage: Percentage):
        return cls.from_length_percentage(LengthPercentage(percentage))

    @classmethod
    def calc(cls, expression: str):
        return cls.from_length_percentage(LengthPercentage(Length.calc(expression)))

    @classmethod
    def zero(cls):
        return cls.from_length_percentage(LengthPercentage.ZERO)


class LengthPercentage(CSSValue, LengthPercentageConvertible):
    """
    CSS length-percentage.

    Examples:
        >>> str(LengthPercentage.px(10))
        '10px'
        >>> str(LengthPercentage.percentage(50))
        '50%'
        >>> str(LengthPercentage.percentage(50) + LengthPercentage.px(20))
        'calc(50% + 20px)'
    """

    value: Union[Length, Percentage]

    ZERO: ClassVar["LengthPercentage"]

    def __init__(self, value: Union[Length, Percentage], **data: Any) -> None:
        super().__init__(value=value, **data)

    @classmethod
    def from_length_percentage(cls, value: "LengthPercentage") -> "LengthPercentage":
        return value

    @classmethod
    def coerce(cls, value: Union["LengthPercentage", Length, Percentage, int, float]) -> "LengthPercentage":
        """
        Explicit literal coercion.

        LengthPercentage passes through, Length and Percentage are wrapped,
        bare numbers become pixel lengths.
        """
        if isinstance(value, LengthPercentage):
            return value
        if isinstance(value, Percentage):
            return cls(value)
        return cls(Length.coerce(value))

    @property
    def is_length(self) -> bool:
        return isinstance(self.value, Length)

    @property
    def is_percentage(self) -> bool:
        return isinstance(self.value, Percentage)

    def __str__(self) -> str:
        return str(self.value)

    # -------------------------------------------------------------------------
    # Arithmetic
    # -------------------------------------------------------------------------

    def _combine(self, other: Any, symbol: str, op: Callable[[Any, Any], Any]) -> "LengthPercentage":
        if isinstance(other, (Length, Percentage)):
            other = LengthPercentage(other)
        if not isinstance(other, LengthPercentage):
            return NotImplemented
        if self.is_percentage and other.is_percentage:
            return LengthPercentage(op(self.value, other.value))
        if self.is_length and other.is_length:
            return LengthPercentage(op(self.value, other.value))
        logger.debug("%s %s %s mixes length and percentage, falling back to calc()", self, symbol, other)
        return LengthPercentage(Length.calc(f"{self} {symbol} {other}"))

    def __add__(self, other: Any) -> "LengthPercentage":
        return self._combine(other, "+", operator.add)

    def __sub__(self, other: Any) -> "LengthPercentage":
        return self._combine(other, "-", operator.sub)

    def __mul__(self, other: Any) -> "LengthPercentage":
        if not isinstance(other, (int, float)) or isinstance(other, bool):
            return NotImplemented
        return LengthPercentage(self.value * other)

    __rmul__ = __mul__

    def __truediv__(self, other: Any) -> "LengthPercentage":
        if not isinstance(other, (int, float)) or isinstance(other, bool):
            return NotImplemented
        return LengthPercentage(self.value / other)


LengthPercentage.ZERO = LengthPercentage(Length.px(0))

