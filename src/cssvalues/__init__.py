"""
cssvalues — typed CSS values that render themselves as exact CSS text.

Every value is an immutable pydantic model; str(value) is its CSS form:

    >>> from cssvalues import Color, Length, LengthPercentage
    >>> str(Length.px(10) + Length.em(2))
    'calc(10px + 2em)'
    >>> str(Color.rgba(255, 0, 0, 0.5))
    'rgba(255, 0, 0, 0.5)'

Subpackages:
    core        formatting, numeric helpers, constants, errors
    values      numbers, dimensions and their unions, positions, urls
    color       the Color union and its building blocks
    images      gradients and images
    properties  property types built on the above
"""

from cssvalues.color import Color, ColorInterpolationMethod, HexColor, NamedColor, SystemColor
from cssvalues.core import CSSValueError, DivisionByZeroError, InvalidValueError, format_number
from cssvalues.images import ColorStop, Gradient, Image
from cssvalues.values import (
    AlphaValue,
    Angle,
    AnglePercentage,
    CalcSum,
    CSSValue,
    Flex,
    Frequency,
    GlobalKeyword,
    Hue,
    Length,
    LengthPercentage,
    Number,
    Percentage,
    Position,
    Ratio,
    Resolution,
    Time,
    TimePercentage,
    Url,
    WithGlobal,
)

__version__ = "0.1.0"

__all__ = [
    # Errors
    "CSSValueError",
    "InvalidValueError",
    "DivisionByZeroError",
    "format_number",
    # Values
    "CSSValue",
    "GlobalKeyword",
    "WithGlobal",
    "Number",
    "Percentage",
    "AlphaValue",
    "Length",
    "LengthPercentage",
    "Angle",
    "AnglePercentage",
    "Hue",
    "Time",
    "TimePercentage",
    "Resolution",
    "Frequency",
    "Flex",
    "Ratio",
    "CalcSum",
    "Position",
    "Url",
    # Color
    "Color",
    "HexColor",
    "NamedColor",
    "SystemColor",
    "ColorInterpolationMethod",
    # Images
    "Gradient",
    "ColorStop",
    "Image",
]
