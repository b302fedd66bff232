"""
Opacity — the opacity property

A number clamped into [0, 1] on construction and rendered with two
decimals ("0.50"), or a percentage rendered as given.
"""

import logging
from typing import Any, ClassVar, Union

from cssvalues.core.constants import OPACITY_MAX, OPACITY_MIN
from cssvalues.core.numeric import clamp
from cssvalues.properties.base import Property
from cssvalues.values.global_keyword import GlobalKeyword
from cssvalues.values.number import Number, NumberConvertible
from cssvalues.values.percentage import Percentage, PercentageConvertible

logger = logging.getLogger(__name__)


class Opacity(Property, NumberConvertible, PercentageConvertible):
    """
    Examples:
        >>> str(Opacity(0.5))
        '0.50'
        >>> str(Opacity(1.5))
        '1.00'
        >>> str(Opacity.percentage(40))
        '40%'
    """

    property_name: ClassVar[str] = "opacity"

    value: Union[GlobalKeyword, Number, Percentage]

    TRANSPARENT: ClassVar["Opacity"]
    OPAQUE: ClassVar["Opacity"]

    def __init__(self, value: Any, **data: Any) -> None:
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            value = Number(value)
        if isinstance(value, Number):
            alpha = clamp(value.value, OPACITY_MIN, OPACITY_MAX)
            if alpha != value.value:
                logger.debug("opacity %s clamped to %s", value, alpha)
                value = Number(alpha)
        super().__init__(value, **data)

    @classmethod
    def from_number(cls, number: Number) -> "Opacity":
        return cls(number)

    @classmethod
    def from_percentage(cls, percentage: Percentage) -> "Opacity":
        return cls(percentage)

    def __str__(self) -> str:
        if isinstance(self.value, Number):
            return f"{self.value.value:.2f}"
        return str(self.value)


Opacity.TRANSPARENT = Opacity(0)
Opacity.OPAQUE = Opacity(1)
