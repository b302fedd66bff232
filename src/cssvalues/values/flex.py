"""
Flex — CSS <flex>

A fraction of the free space in a grid container: "<number>fr".
"""

from typing import Any

from cssvalues.values.base import CSSValue
from cssvalues.values.number import Number, NumberConvertible


class Flex(CSSValue, NumberConvertible):
    """
    CSS flex value.

    Examples:
        >>> str(Flex(1))
        '1fr'
        >>> str(Flex(1.5))
        '1.5fr'
    """

    factor: Number

    def __init__(self, factor: Any, **data: Any) -> None:
        if not isinstance(factor, Number):
            factor = Number(factor)
        super().__init__(factor=factor, **data)

    @classmethod
    def from_number(cls, number: Number) -> "Flex":
        return cls(number)

    def __str__(self) -> str:
        return f"{self.factor}fr"
