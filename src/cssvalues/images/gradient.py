"""
Gradient — CSS <gradient>

linear-gradient(), radial-gradient(), conic-gradient() and their repeating-
forms. Arguments are written in a fixed order. The prefix components are
space-separated and form a single argument, followed by ", " and the stops:

    <kind>(
        [in <color space> [<hue method>]]
        [<angle> | to <side>]                       linear
        [<shape> <size> at <position>]              radial
        [from <angle>] [at <position>]              conic
        , <color stop>, <color stop>, ...
    )

    conic-gradient(from 90deg at center, red, blue)
    linear-gradient(in oklab to right, red, blue)

A color stop is "<color>" or "<color> <length-percentage>".
"""

from typing import Any, Iterable, Optional, Tuple, Union

from cssvalues.color.color import Color
from cssvalues.color.interpolation import ColorInterpolationMethod
from cssvalues.core.formatting import join
from cssvalues.values.angle import Angle, AngleConvertible
from cssvalues.values.base import CSSKeyword, CSSValue
from cssvalues.values.length_percentage import LengthPercentage
from cssvalues.values.position import Position


# =============================================================================
# ENUMS
# =============================================================================


class GradientKind(CSSKeyword):
    """Gradient function names"""

    LINEAR = "linear-gradient"
    REPEATING_LINEAR = "repeating-linear-gradient"
    RADIAL = "radial-gradient"
    REPEATING_RADIAL = "repeating-radial-gradient"
    CONIC = "conic-gradient"
    REPEATING_CONIC = "repeating-conic-gradient"


class Side(CSSKeyword):
    """Target side or corner of a linear gradient ("to <side>")"""

    TOP = "top"
    RIGHT = "right"
    BOTTOM = "bottom"
    LEFT = "left"
    TOP_RIGHT = "top right"
    BOTTOM_RIGHT = "bottom right"
    BOTTOM_LEFT = "bottom left"
    TOP_LEFT = "top left"


class RadialShape(CSSKeyword):
    CIRCLE = "circle"
    ELLIPSE = "ellipse"


class RadialSizeKeyword(CSSKeyword):
    CLOSEST_SIDE = "closest-side"
    CLOSEST_CORNER = "closest-corner"
    FARTHEST_SIDE = "farthest-side"
    FARTHEST_CORNER = "farthest-corner"


# =============================================================================
# COMPONENTS
# =============================================================================


class GradientDirection(CSSValue, AngleConvertible):
    """
    Direction of a linear gradient: an angle or "to <side>".

    Examples:
        >>> str(GradientDirection.deg(45))
        '45deg'
        >>> str(GradientDirection.to(Side.BOTTOM_RIGHT))
        'to bottom right'
    """

    value: Union[Angle, Side]

    def __init__(self, value: Union[Angle, Side], **data: Any) -> None:
        super().__init__(value=value, **data)

    @classmethod
    def from_angle(cls, angle: Angle) -> "GradientDirection":
        return cls(angle)

    @classmethod
    def to(cls, side: Union[Side, str]) -> "GradientDirection":
        return cls(Side(side))

    def __str__(self) -> str:
        if isinstance(self.value, Side):
            return f"to {self.value}"
        return str(self.value)


class ColorStop(CSSValue):
    """A color with an optional position along the gradient line"""

    color: Color
    position: Optional[LengthPercentage] = None

    def __init__(self, color: Color, position: Optional[LengthPercentage] = None, **data: Any) -> None:
        super().__init__(color=color, position=position, **data)

    def __str__(self) -> str:
        if self.position is None:
            return str(self.color)
        return f"{self.color} {self.position}"


class RadialSize(CSSValue):
    """
    Ending-shape size: a keyword, one radius, or two radii (ellipse).

    Examples:
        >>> str(RadialSize.keyword(RadialSizeKeyword.CLOSEST_CORNER))
        'closest-corner'
        >>> str(RadialSize.elliptical(LengthPercentage.percentage(50), LengthPercentage.percentage(25)))
        '50% 25%'
    """

    parts: Tuple[Union[RadialSizeKeyword, LengthPercentage], ...]

    @classmethod
    def keyword(cls, keyword: Union[RadialSizeKeyword, str]) -> "RadialSize":
        return cls(parts=(RadialSizeKeyword(keyword),))

    @classmethod
    def explicit(cls, radius: LengthPercentage) -> "RadialSize":
        return cls(parts=(radius,))

    @classmethod
    def elliptical(cls, radius_x: LengthPercentage, radius_y: LengthPercentage) -> "RadialSize":
        return cls(parts=(radius_x, radius_y))

    def __str__(self) -> str:
        return join(self.parts)


class RadialOptions(CSSValue):
    """Shape, size and center of a radial gradient; every part optional"""

    shape: Optional[RadialShape] = None
    size: Optional[RadialSize] = None
    position: Optional[Position] = None

    def __str__(self) -> str:
        parts = []
        if self.shape is not None:
            parts.append(self.shape.value)
        if self.size is not None:
            parts.append(str(self.size))
        if self.position is not None:
            parts.append(f"at {self.position}")
        return " ".join(parts)


# =============================================================================
# GRADIENT
# =============================================================================


def _stops(colors: Iterable[Union[Color, ColorStop]]) -> Tuple[ColorStop, ...]:
    return tuple(c if isinstance(c, ColorStop) else ColorStop(c) for c in colors)


class Gradient(CSSValue):
    """
    CSS gradient.

    Only the fields that belong to the kind are rendered: direction for
    linear kinds, options for radial kinds, angle and position for conic
    kinds.

    Examples:
        >>> red, blue = Color.named("red"), Color.named("blue")
        >>> str(Gradient.linear_gradient([red, blue], to=Side.BOTTOM))
        'linear-gradient(to bottom, red, blue)'
        >>> str(Gradient.conic_gradient([red, blue], from_angle=Angle.deg(90)))
        'conic-gradient(from 90deg, red, blue)'
    """

    kind: GradientKind
    stops: Tuple[ColorStop, ...]
    interpolation: Optional[ColorInterpolationMethod] = None
    direction: Optional[GradientDirection] = None
    options: Optional[RadialOptions] = None
    angle: Optional[Angle] = None
    position: Optional[Position] = None

    # -------------------------------------------------------------------------
    # Construction, one classmethod per kind
    # -------------------------------------------------------------------------

    @classmethod
    def linear(
        cls,
        stops: Iterable[Union[Color, ColorStop]],
        direction: Optional[GradientDirection] = None,
        interpolation: Optional[ColorInterpolationMethod] = None,
    ) -> "Gradient":
        return cls(kind=GradientKind.LINEAR, stops=_stops(stops), direction=direction, interpolation=interpolation)

    @classmethod
    def repeating_linear(
        cls,
        stops: Iterable[Union[Color, ColorStop]],
        direction: Optional[GradientDirection] = None,
        interpolation: Optional[ColorInterpolationMethod] = None,
    ) -> "Gradient":
        return cls(
            kind=GradientKind.REPEATING_LINEAR,
            stops=_stops(stops),
            direction=direction,
            interpolation=interpolation,
        )

    @classmethod
    def radial(
        cls,
        stops: Iterable[Union[Color, ColorStop]],
        options: Optional[RadialOptions] = None,
        interpolation: Optional[ColorInterpolationMethod] = None,
    ) -> "Gradient":
        return cls(kind=GradientKind.RADIAL, stops=_stops(stops), options=options, interpolation=interpolation)

    @classmethod
    def repeating_radial(
        cls,
        stops: Iterable[Union[Color, ColorStop]],
        options: Optional[RadialOptions] = None,
        interpolation: Optional[ColorInterpolationMethod] = None,
    ) -> "Gradient":
        return cls(
            kind=GradientKind.REPEATING_RADIAL,
            stops=_stops(stops),
            options=options,
            interpolation=interpolation,
        )

    @classmethod
    def conic(
        cls,
        stops: Iterable[Union[Color, ColorStop]],
        angle: Optional[Angle] = None,
        position: Optional[Position] = None,
        interpolation: Optional[ColorInterpolationMethod] = None,
    ) -> "Gradient":
        return cls(
            kind=GradientKind.CONIC,
            stops=_stops(stops),
            angle=angle,
            position=position,
            interpolation=interpolation,
        )

    @classmethod
    def repeating_conic(
        cls,
        stops: Iterable[Union[Color, ColorStop]],
        angle: Optional[Angle] = None,
        position: Optional[Position] = None,
        interpolation: Optional[ColorInterpolationMethod] = None,
    ) -> "Gradient":
        return cls(
            kind=GradientKind.REPEATING_CONIC,
            stops=_stops(stops),
            angle=angle,
            position=position,
            interpolation=interpolation,
        )

    # -------------------------------------------------------------------------
    # Shorthand builders from plain color lists
    # -------------------------------------------------------------------------

    @classmethod
    def linear_gradient(
        cls,
        colors: Iterable[Color],
        to: Optional[Union[Side, str]] = None,
        angle: Optional[Angle] = None,
    ) -> "Gradient":
        """
        Linear gradient toward a side, or along an angle.

        Raises:
            ValueError: If both to and angle are given
        """
        if to is not None and angle is not None:
            raise ValueError("linear_gradient() takes either 'to' or 'angle', not both")
        direction = None
        if to is not None:
            direction = GradientDirection.to(to)
        elif angle is not None:
            direction = GradientDirection(angle)
        return cls.linear(colors, direction=direction)

    @classmethod
    def radial_gradient(
        cls,
        colors: Iterable[Color],
        shape: Optional[Union[RadialShape, str]] = None,
        size: Optional[RadialSize] = None,
        at: Optional[Position] = None,
    ) -> "Gradient":
        options = None
        if shape is not None or size is not None or at is not None:
            options = RadialOptions(
                shape=RadialShape(shape) if shape is not None else None,
                size=size,
                position=at,
            )
        return cls.radial(colors, options=options)

    @classmethod
    def conic_gradient(
        cls,
        colors: Iterable[Color],
        from_angle: Optional[Angle] = None,
        at: Optional[Position] = None,
    ) -> "Gradient":
        return cls.conic(colors, angle=from_angle, position=at)

    # -------------------------------------------------------------------------
    # Rendering
    # -------------------------------------------------------------------------

    @property
    def is_repeating(self) -> bool:
        return self.kind.value.startswith("repeating-")

    def _prefix(self) -> str:
        # Prefix components share one comma-separated argument:
        # "in oklab to right", "from 90deg at center"
        parts = []
        if self.interpolation is not None:
            parts.append(str(self.interpolation))

        if self.kind in (GradientKind.LINEAR, GradientKind.REPEATING_LINEAR):
            if self.direction is not None:
                parts.append(str(self.direction))
        elif self.kind in (GradientKind.RADIAL, GradientKind.REPEATING_RADIAL):
            options = str(self.options) if self.options is not None else ""
            if options:
                parts.append(options)
        else:
            if self.angle is not None:
                parts.append(f"from {self.angle}")
            if self.position is not None:
                parts.append(f"at {self.position}")
        if not parts:
            return ""
        return " ".join(parts) + ", "

    def __str__(self) -> str:
        return f"{self.kind}({self._prefix()}{join(self.stops, ', ')})"
