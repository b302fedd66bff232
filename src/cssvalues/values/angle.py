"""
Angle — CSS <angle>

Four units: deg, rad, grad, turn. No normalization into [0, 360) happens
here; Hue does that explicitly when asked.
"""

import math
from typing import Union

from cssvalues.core.constants import DEFAULT_ANGLE_UNIT, DEGREES_PER_GRAD, DEGREES_PER_TURN
from cssvalues.core.formatting import format_number
from cssvalues.values.base import CSSKeyword, CSSValue


class AngleUnit(CSSKeyword):
    """CSS angle units"""

    DEG = "deg"
    RAD = "rad"
    GRAD = "grad"
    TURN = "turn"


class AngleConvertible:
    """
    Mixin: a type that can be built from an Angle.

    Implement from_angle(); deg/rad/grad/turn (and their long aliases)
    come for free.
    """

    @classmethod
    def from_angle(cls, angle: "Angle"):
        raise NotImplementedError(f"{cls.__name__} must implement from_angle()")

    @classmethod
    def deg(cls, value: float):
        return cls.from_angle(Angle(value=value, unit=AngleUnit.DEG))

    @classmethod
    def rad(cls, value: float):
        return cls.from_angle(Angle(value=value, unit=AngleUnit.RAD))

    @classmethod
    def grad(cls, value: float):
        return cls.from_angle(Angle(value=value, unit=AngleUnit.GRAD))

    @classmethod
    def turn(cls, value: float):
        return cls.from_angle(Angle(value=value, unit=AngleUnit.TURN))

    @classmethod
    def degrees(cls, value: float):
        return cls.deg(value)

    @classmethod
    def radians(cls, value: float):
        return cls.rad(value)

    @classmethod
    def gradians(cls, value: float):
        return cls.grad(value)


class Angle(CSSValue, AngleConvertible):
    """
    CSS angle.

    Examples:
        >>> str(Angle.deg(45))
        '45deg'
        >>> str(Angle.turn(0.25))
        '0.25turn'
    """

    value: float
    unit: AngleUnit

    @classmethod
    def from_angle(cls, angle: "Angle") -> "Angle":
        return angle

    @classmethod
    def coerce(cls, value: Union["Angle", int, float]) -> "Angle":
        """
        Explicit literal coercion: a bare number becomes degrees.

        Raises:
            TypeError: If value is neither an Angle nor a number
        """
        if isinstance(value, Angle):
            return value
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return cls(value=value, unit=DEFAULT_ANGLE_UNIT)
        raise TypeError(f"Cannot coerce {type(value).__name__} to Angle")

    def to_degrees(self) -> float:
        """Value in degrees: grad x 0.9, rad x 180/pi, turn x 360."""
        if self.unit is AngleUnit.DEG:
            return self.value
        if self.unit is AngleUnit.GRAD:
            return self.value * DEGREES_PER_GRAD
        if self.unit is AngleUnit.RAD:
            return self.value * 180.0 / math.pi
        return self.value * DEGREES_PER_TURN

    def __str__(self) -> str:
        return f"{format_number(self.value)}{self.unit}"
