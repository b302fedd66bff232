"""
Rotate — the rotate property

none | <angle> | [x | y | z] <angle> | <number>{3} <angle>
"""

from typing import ClassVar, Union

from cssvalues.core.formatting import format_number
from cssvalues.properties.base import Property
from cssvalues.values.angle import Angle, AngleConvertible
from cssvalues.values.base import CSSKeyword, CSSValue
from cssvalues.values.global_keyword import GlobalKeyword


class RotateKeyword(CSSKeyword):
    NONE = "none"


class RotateAxis(CSSKeyword):
    X = "x"
    Y = "y"
    Z = "z"


class AxisRotation(CSSValue):
    """Rotation around a named axis, e.g. x 45deg"""

    axis: RotateAxis
    angle: Angle

    def __str__(self) -> str:
        return f"{self.axis} {self.angle}"


class VectorRotation(CSSValue):
    """Rotation around an arbitrary vector, e.g. 1 1 0 45deg"""

    x: float
    y: float
    z: float
    angle: Angle

    def __str__(self) -> str:
        return f"{format_number(self.x)} {format_number(self.y)} {format_number(self.z)} {self.angle}"


class Rotate(Property, AngleConvertible):
    """
    Examples:
        >>> str(Rotate.deg(45))
        '45deg'
        >>> str(Rotate.around(RotateAxis.Y, Angle.turn(0.5)))
        'y 0.5turn'
    """

    property_name: ClassVar[str] = "rotate"

    value: Union[GlobalKeyword, RotateKeyword, Angle, AxisRotation, VectorRotation]

    NONE: ClassVar["Rotate"]

    @classmethod
    def from_angle(cls, angle: Angle) -> "Rotate":
        return cls(angle)

    @classmethod
    def around(cls, axis: Union[RotateAxis, str], angle: Angle) -> "Rotate":
        return cls(AxisRotation(axis=RotateAxis(axis), angle=angle))

    @classmethod
    def vector(cls, x: float, y: float, z: float, angle: Angle) -> "Rotate":
        return cls(VectorRotation(x=x, y=y, z=z, angle=angle))


Rotate.NONE = Rotate(RotateKeyword.NONE)
