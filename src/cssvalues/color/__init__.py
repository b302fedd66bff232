"""
CSS color types.

Color is the tagged union over every color syntax; HexColor, NamedColor,
SystemColor and ColorInterpolationMethod are its building blocks.
"""

from cssvalues.color.color import (
    Color,
    ColorConvertible,
    CurrentColor,
    HexColorValue,
    HSLAColor,
    HSLColor,
    HWBColor,
    LabColor,
    LCHColor,
    MixedColor,
    NamedColorValue,
    OKLabColor,
    OKLCHColor,
    RGBAColor,
    RGBColor,
    SystemColorValue,
    TransparentColor,
)
from cssvalues.color.hex import HexColor
from cssvalues.color.interpolation import (
    ColorInterpolationMethod,
    HueInterpolationMethod,
    PolarColorSpace,
    RectangularColorSpace,
)
from cssvalues.color.named import NamedColor
from cssvalues.color.system import SystemColor

__all__ = [
    # Union
    "Color",
    "ColorConvertible",
    "NamedColorValue",
    "HexColorValue",
    "SystemColorValue",
    "CurrentColor",
    "TransparentColor",
    "RGBColor",
    "RGBAColor",
    "HSLColor",
    "HSLAColor",
    "HWBColor",
    "LabColor",
    "LCHColor",
    "OKLabColor",
    "OKLCHColor",
    "MixedColor",
    # Building blocks
    "HexColor",
    "NamedColor",
    "SystemColor",
    "ColorInterpolationMethod",
    "RectangularColorSpace",
    "PolarColorSpace",
    "HueInterpolationMethod",
]
