"""
AlphaValue — CSS <alpha-value>

A number (0 is transparent, 1 opaque) or a percentage. Not clamped.
"""

from typing import Any, Union

from cssvalues.values.base import CSSValue
from cssvalues.values.number import Number, NumberConvertible
from cssvalues.values.percentage import Percentage, PercentageConvertible


class AlphaValue(CSSValue, NumberConvertible, PercentageConvertible):
    """
    CSS alpha value.

    Examples:
        >>> str(AlphaValue.number(0.5))
        '0.5'
        >>> str(AlphaValue.percentage(50))
        '50%'
    """

    value: Union[Number, Percentage]

    def __init__(self, value: Union[Number, Percentage], **data: Any) -> None:
        super().__init__(value=value, **data)

    @classmethod
    def from_number(cls, number: Number) -> "AlphaValue":
        return cls(number)

    @classmethod
    def from_percentage(cls, percentage: Percentage) -> "AlphaValue":
        return cls(percentage)

    @classmethod
    def coerce(cls, value: Union["AlphaValue", Number, Percentage, int, float]) -> "AlphaValue":
        """Explicit literal coercion: bare numbers stay numbers."""
        if isinstance(value, AlphaValue):
            return value
        if isinstance(value, (Number, Percentage)):
            return cls(value)
        return cls(Number(value))

    def __str__(self) -> str:
        return str(self.value)
