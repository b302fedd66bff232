"""
AnglePercentage — CSS <angle-percentage>
"""

from typing import Any, Union

from cssvalues.values.angle import Angle, AngleConvertible
from cssvalues.values.base import CSSValue
from cssvalues.values.percentage import Percentage, PercentageConvertible


class AnglePercentage(CSSValue, AngleConvertible, PercentageConvertible):
    """
    An Angle or a Percentage.

    Examples:
        >>> str(AnglePercentage.deg(90))
        '90deg'
        >>> str(AnglePercentage.percentage(25))
        '25%'
    """

    value: Union[Angle, Percentage]

    def __init__(self, value: Union[Angle, Percentage], **data: Any) -> None:
        super().__init__(value=value, **data)

    @classmethod
    def from_angle(cls, angle: Angle) -> "AnglePercentage":
        return cls(angle)

    @classmethod
    def from_percentage(cls, percentage: Percentage) -> "AnglePercentage":
        return cls(percentage)

    @classmethod
    def coerce(cls, value: Union["AnglePercentage", Angle, Percentage, int, float]) -> "AnglePercentage":
        """Explicit literal coercion: bare numbers become degrees."""
        if isinstance(value, AnglePercentage):
            return value
        if isinstance(value, Percentage):
            return cls(value)
        return cls(Angle.coerce(value))

    def __str__(self) -> str:
        return str(self.value)
