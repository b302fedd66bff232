"""
Hue — CSS <hue>

A bare number (interpreted as degrees by the browser) or an Angle.
normalized_degrees() is the only place the value layer wraps an angle.
"""

from typing import Any, Union

from cssvalues.core.numeric import wrap_degrees
from cssvalues.values.angle import Angle, AngleConvertible
from cssvalues.values.base import CSSValue
from cssvalues.values.number import Number, NumberConvertible


class Hue(CSSValue, AngleConvertible, NumberConvertible):
    """
    CSS hue.

    Examples:
        >>> str(Hue.number(120))
        '120'
        >>> str(Hue.deg(120))
        '120deg'
        >>> Hue.deg(-90).normalized_degrees()
        270.0
    """

    value: Union[Number, Angle]

    def __init__(self, value: Union[Number, Angle], **data: Any) -> None:
        super().__init__(value=value, **data)

    @classmethod
    def from_angle(cls, angle: Angle) -> "Hue":
        return cls(angle)

    @classmethod
    def from_number(cls, number: Number) -> "Hue":
        return cls(number)

    @classmethod
    def coerce(cls, value: Union["Hue", Angle, Number, int, float]) -> "Hue":
        """
        Explicit literal coercion: bare numbers stay unitless numbers.

        Raises:
            TypeError: If value is not a Hue, Angle, Number or number
        """
        if isinstance(value, Hue):
            return value
        if isinstance(value, (Angle, Number)):
            return cls(value)
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return cls(Number(value))
        raise TypeError(f"Cannot coerce {type(value).__name__} to Hue")

    def normalized_degrees(self) -> float:
        """
        Hue in degrees, wrapped into [0, 360).

        Numbers are taken as degrees; angles are converted first
        (grad x 0.9, rad x 180/pi, turn x 360).
        """
        if isinstance(self.value, Angle):
            degrees = self.value.to_degrees()
        else:
            degrees = self.value.value
        return wrap_degrees(degrees)

    def __str__(self) -> str:
        return str(self.value)
