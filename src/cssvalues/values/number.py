"""
Number — CSS <number>

A plain real number (opacity, line-height, iteration counts, ...).
Integral values render without a decimal point.
"""

import math
from typing import Any, ClassVar, Optional

from cssvalues.core.errors import DivisionByZeroError
from cssvalues.core.formatting import format_number
from cssvalues.core.numeric import round_half_away_from_zero
from cssvalues.values.base import CSSValue


class Number(CSSValue):
    """
    CSS number.

    Examples:
        >>> str(Number(2))
        '2'
        >>> str(Number(1.25))
        '1.25'
    """

    value: float

    ZERO: ClassVar["Number"]
    ONE: ClassVar["Number"]

    def __init__(self, value: float, **data: Any) -> None:
        super().__init__(value=value, **data)

    def __str__(self) -> str:
        return format_number(self.value)

    # -------------------------------------------------------------------------
    # Arithmetic
    # -------------------------------------------------------------------------

    @staticmethod
    def _operand(other: Any) -> Optional[float]:
        if isinstance(other, Number):
            return other.value
        if isinstance(other, (int, float)) and not isinstance(other, bool):
            return float(other)
        return None

    def __add__(self, other: Any) -> "Number":
        rhs = self._operand(other)
        if rhs is None:
            return NotImplemented
        return Number(self.value + rhs)

    __radd__ = __add__

    def __sub__(self, other: Any) -> "Number":
        rhs = self._operand(other)
        if rhs is None:
            return NotImplemented
        return Number(self.value - rhs)

    def __mul__(self, other: Any) -> "Number":
        rhs = self._operand(other)
        if rhs is None:
            return NotImplemented
        return Number(self.value * rhs)

    __rmul__ = __mul__

    def __truediv__(self, other: Any) -> "Number":
        rhs = self._operand(other)
        if rhs is None:
            return NotImplemented
        if rhs == 0:
            raise DivisionByZeroError(self)
        return Number(self.value / rhs)

    def __neg__(self) -> "Number":
        return Number(-self.value)

    def __abs__(self) -> "Number":
        return Number(abs(self.value))

    def __lt__(self, other: Any) -> bool:
        rhs = self._operand(other)
        if rhs is None:
            return NotImplemented
        return self.value < rhs

    def __le__(self, other: Any) -> bool:
        rhs = self._operand(other)
        if rhs is None:
            return NotImplemented
        return self.value <= rhs

    def __gt__(self, other: Any) -> bool:
        rhs = self._operand(other)
        if rhs is None:
            return NotImplemented
        return self.value > rhs

    def __ge__(self, other: Any) -> bool:
        rhs = self._operand(other)
        if rhs is None:
            return NotImplemented
        return self.value >= rhs

    # -------------------------------------------------------------------------
    # Rounding
    # -------------------------------------------------------------------------

    def rounded(self) -> "Number":
        """Nearest integer, ties away from zero."""
        return Number(round_half_away_from_zero(self.value))

    def floor(self) -> "Number":
        return Number(math.floor(self.value))

    def ceil(self) -> "Number":
        return Number(math.ceil(self.value))


Number.ZERO = Number(0)
Number.ONE = Number(1)


class NumberConvertible:
    """
    Mixin: a type that can be built from a Number.

    Implement from_number(); number(), zero() and one() come for free.
    """

    @classmethod
    def from_number(cls, number: Number):
        raise NotImplementedError(f"{cls.__name__} must implement from_number()")

    @classmethod
    def number(cls, value: float):
        return cls.from_number(Number(value))

    @classmethod
    def zero(cls):
        return cls.from_number(Number.ZERO)

    @classmethod
    def one(cls):
        return cls.from_number(Number.ONE)
