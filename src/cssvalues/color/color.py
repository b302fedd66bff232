"""
Color — CSS <color>

One variant per color syntax. Channels are stored and rendered exactly as
given: nothing is validated or clamped here (browsers clamp at computed-value
time). The clamping builders are HexColor.rgb()/rgba() and the
ColorConvertible factories.

Rendering templates:

    rgb(255, 0, 0)              Color.rgb(255, 0, 0)
    rgba(255, 0, 0, 0.5)        Color.rgba(255, 0, 0, 0.5)
    hsl(120deg, 100%, 50%)      Color.hsl(Hue.deg(120), 100, 50)
    hsla(120, 100%, 50%, 0.5)   Color.hsla(120, 100, 50, 0.5)
    hwb(0deg 10% 0%)            Color.hwb(Hue.deg(0), 10, 0)
    lab(50% 20 -40)             Color.lab(50, 20, -40)
    lch(50% 30 270)             Color.lch(50, 30, 270)
    oklab(0.5 0.1 -0.2)         Color.oklab(0.5, 0.1, -0.2)
    oklch(0.7 0.15 200)         Color.oklch(0.7, 0.15, 200)
    color-mix(in oklab, red, blue 30%)

ColorConvertible gives any type holding a color the same factories, with
range clamping.
"""

import logging
import math
from typing import ClassVar, Optional, Union

from cssvalues.core.constants import (
    COLOR_ALPHA_MAX,
    COLOR_ALPHA_MIN,
    COLOR_PERCENT_MAX,
    COLOR_PERCENT_MIN,
    DEGREES_PER_TURN,
    HEX_CHANNEL_MAX,
    HEX_CHANNEL_MIN,
    OKLCH_LIGHTNESS_MAX,
    OKLCH_LIGHTNESS_MIN,
)
from cssvalues.core.formatting import format_number
from cssvalues.core.numeric import clamp
from cssvalues.color.hex import HexColor
from cssvalues.color.interpolation import ColorInterpolationMethod
from cssvalues.color.named import NamedColor
from cssvalues.color.system import SystemColor
from cssvalues.values.angle import Angle
from cssvalues.values.base import CSSUnion
from cssvalues.values.hue import Hue
from cssvalues.values.number import Number

logger = logging.getLogger(__name__)

HueLike = Union[Hue, Angle, Number, int, float]


class Color(CSSUnion):
    """
    CSS color (base of every color variant).

    Construct through the classmethods; str() gives the CSS text.
    """

    CURRENT_COLOR: ClassVar["Color"]
    TRANSPARENT: ClassVar["Color"]

    # -------------------------------------------------------------------------
    # Keyword colors
    # -------------------------------------------------------------------------

    @classmethod
    def named(cls, name: Union[NamedColor, str]) -> "Color":
        return NamedColorValue(value=NamedColor(name))

    @classmethod
    def hex(cls, value: Union[HexColor, str]) -> "Color":
        if not isinstance(value, HexColor):
            value = HexColor(value)
        return HexColorValue(value=value)

    @classmethod
    def system(cls, color: Union[SystemColor, str]) -> "Color":
        return SystemColorValue(value=SystemColor(color))

    # -------------------------------------------------------------------------
    # Functional notations
    # -------------------------------------------------------------------------

    @classmethod
    def rgb(cls, red: int, green: int, blue: int) -> "Color":
        return RGBColor(red=red, green=green, blue=blue)

    @classmethod
    def rgba(cls, red: int, green: int, blue: int, alpha: float) -> "Color":
        return RGBAColor(red=red, green=green, blue=blue, alpha=alpha)

    @classmethod
    def hsl(cls, hue: HueLike, saturation: float, lightness: float) -> "Color":
        """
        hsl() color.

        Args:
            hue: Hue, Angle, or a bare number (rendered unitless)
            saturation: Percentage value, rendered with "%"
            lightness: Percentage value, rendered with "%"
        """
        return HSLColor(hue=Hue.coerce(hue), saturation=saturation, lightness=lightness)

    @classmethod
    def hsla(cls, hue: HueLike, saturation: float, lightness: float, alpha: float) -> "Color":
        return HSLAColor(hue=Hue.coerce(hue), saturation=saturation, lightness=lightness, alpha=alpha)

    @classmethod
    def hwb(cls, hue: HueLike, whiteness: float, blackness: float) -> "Color":
        return HWBColor(hue=Hue.coerce(hue), whiteness=whiteness, blackness=blackness)

    @classmethod
    def lab(cls, lightness: float, a: float, b: float) -> "Color":
        return LabColor(lightness=lightness, a=a, b=b)

    @classmethod
    def lch(cls, lightness: float, chroma: float, hue: float) -> "Color":
        return LCHColor(lightness=lightness, chroma=chroma, hue=hue)

    @classmethod
    def oklab(cls, lightness: float, a: float, b: float) -> "Color":
        return OKLabColor(lightness=lightness, a=a, b=b)

    @classmethod
    def oklch(cls, lightness: float, chroma: float, hue: float) -> "Color":
        return OKLCHColor(lightness=lightness, chroma=chroma, hue=hue)

    @classmethod
    def mix(
        cls,
        method: ColorInterpolationMethod,
        first: "Color",
        second: "Color",
        percentage: Optional[float] = None,
    ) -> "Color":
        """
        color-mix() of two colors.

        Args:
            method: Interpolation method ("in srgb", "in hsl longer hue", ...)
            first: First color
            second: Second color
            percentage: Optional weight of the second color, rendered with "%"

        Examples:
            >>> red, blue = Color.named("red"), Color.named("blue")
            >>> str(Color.mix(ColorInterpolationMethod.rectangular("srgb"), red, blue))
            'color-mix(in srgb, red, blue)'
        """
        return MixedColor(method=method, first=first, second=second, percentage=percentage)


# =============================================================================
# KEYWORD VARIANTS
# =============================================================================


class NamedColorValue(Color):
    """Named color keyword"""

    value: NamedColor

    def __str__(self) -> str:
        return self.value.value


class HexColorValue(Color):
    """Hex notation"""

    value: HexColor

    def __str__(self) -> str:
        return str(self.value)


class SystemColorValue(Color):
    """System color keyword"""

    value: SystemColor

    def __str__(self) -> str:
        return self.value.value


class CurrentColor(Color):
    """The currentColor keyword"""

    def __str__(self) -> str:
        return "currentColor"


class TransparentColor(Color):
    """The transparent keyword"""

    def __str__(self) -> str:
        return "transparent"


# =============================================================================
# FUNCTIONAL VARIANTS
# =============================================================================


class RGBColor(Color):
    red: int
    green: int
    blue: int

    def __str__(self) -> str:
        return f"rgb({self.red}, {self.green}, {self.blue})"


class RGBAColor(Color):
    red: int
    green: int
    blue: int
    alpha: float

    def __str__(self) -> str:
        return f"rgba({self.red}, {self.green}, {self.blue}, {format_number(self.alpha)})"


class HSLColor(Color):
    hue: Hue
    saturation: float
    lightness: float

    def __str__(self) -> str:
        return f"hsl({self.hue}, {format_number(self.saturation)}%, {format_number(self.lightness)}%)"


class HSLAColor(Color):
    hue: Hue
    saturation: float
    lightness: float
    alpha: float

    def __str__(self) -> str:
        return (
            f"hsla({self.hue}, {format_number(self.saturation)}%, "
            f"{format_number(self.lightness)}%, {format_number(self.alpha)})"
        )


class HWBColor(Color):
    """Space separated, CSS Color 4 syntax"""

    hue: Hue
    whiteness: float
    blackness: float

    def __str__(self) -> str:
        return f"hwb({self.hue} {format_number(self.whiteness)}% {format_number(self.blackness)}%)"


class LabColor(Color):
    """CIE Lab; lightness rendered as a percentage"""

    lightness: float
    a: float
    b: float

    def __str__(self) -> str:
        return f"lab({format_number(self.lightness)}% {format_number(self.a)} {format_number(self.b)})"


class LCHColor(Color):
    """CIE LCH; lightness rendered as a percentage, hue as a bare number"""

    lightness: float
    chroma: float
    hue: float

    def __str__(self) -> str:
        return f"lch({format_number(self.lightness)}% {format_number(self.chroma)} {format_number(self.hue)})"


class OKLabColor(Color):
    lightness: float
    a: float
    b: float

    def __str__(self) -> str:
        return f"oklab({format_number(self.lightness)} {format_number(self.a)} {format_number(self.b)})"


class OKLCHColor(Color):
    lightness: float
    chroma: float
    hue: float

    def __str__(self) -> str:
        return f"oklch({format_number(self.lightness)} {format_number(self.chroma)} {format_number(self.hue)})"


class MixedColor(Color):
    """color-mix(); the optional percentage weights the second color"""

    method: ColorInterpolationMethod
    first: Color
    second: Color
    percentage: Optional[float] = None

    def __str__(self) -> str:
        if self.percentage is None:
            return f"color-mix({self.method}, {self.first}, {self.second})"
        return f"color-mix({self.method}, {self.first}, {self.second} {format_number(self.percentage)}%)"


Color.CURRENT_COLOR = CurrentColor()
Color.TRANSPARENT = TransparentColor()


# =============================================================================
# CONVERTIBLE MIXIN
# =============================================================================


def _bounded(value: float, low: float, high: float, channel: str) -> float:
    bounded = clamp(value, low, high)
    if bounded != value:
        logger.debug("Color %s %s clamped to %s", channel, value, bounded)
    return bounded


class ColorConvertible:
    """
    Mixin: a type that can be built from a Color.

    Implement from_color(); the color factories come for free:

        class OutlineColor(Property, ColorConvertible):
            value: Union[GlobalKeyword, Color]

            @classmethod
            def from_color(cls, color):
                return cls(color)

        OutlineColor.rgb(300, 0, 0)   # rgb(255, 0, 0)

    Unlike the Color classmethods, these factories clamp into the CSS
    ranges: rgb channels 0-255, alpha 0-1, hsl/hwb percentages and lab
    lightness 0-100, oklch lightness 0-1 with non-negative chroma and the
    hue reduced by fmod 360 (sign kept). lch and oklab pass through.
    """

    @classmethod
    def from_color(cls, color: Color):
        raise NotImplementedError(f"{cls.__name__} must implement from_color()")

    @classmethod
    def rgb(cls, red: int, green: int, blue: int):
        return cls.from_color(Color.rgb(
            int(_bounded(red, HEX_CHANNEL_MIN, HEX_CHANNEL_MAX, "red")),
            int(_bounded(green, HEX_CHANNEL_MIN, HEX_CHANNEL_MAX, "green")),
            int(_bounded(blue, HEX_CHANNEL_MIN, HEX_CHANNEL_MAX, "blue")),
        ))

    @classmethod
    def rgba(cls, red: int, green: int, blue: int, alpha: float):
        return cls.from_color(Color.rgba(
            int(_bounded(red, HEX_CHANNEL_MIN, HEX_CHANNEL_MAX, "red")),
            int(_bounded(green, HEX_CHANNEL_MIN, HEX_CHANNEL_MAX, "green")),
            int(_bounded(blue, HEX_CHANNEL_MIN, HEX_CHANNEL_MAX, "blue")),
            _bounded(alpha, COLOR_ALPHA_MIN, COLOR_ALPHA_MAX, "alpha"),
        ))

    @classmethod
    def hsl(cls, hue: HueLike, saturation: float, lightness: float):
        return cls.from_color(Color.hsl(
            hue,
            _bounded(saturation, COLOR_PERCENT_MIN, COLOR_PERCENT_MAX, "saturation"),
            _bounded(lightness, COLOR_PERCENT_MIN, COLOR_PERCENT_MAX, "lightness"),
        ))

    @classmethod
    def hsla(cls, hue: HueLike, saturation: float, lightness: float, alpha: float):
        return cls.from_color(Color.hsla(
            hue,
            _bounded(saturation, COLOR_PERCENT_MIN, COLOR_PERCENT_MAX, "saturation"),
            _bounded(lightness, COLOR_PERCENT_MIN, COLOR_PERCENT_MAX, "lightness"),
            _bounded(alpha, COLOR_ALPHA_MIN, COLOR_ALPHA_MAX, "alpha"),
        ))

    @classmethod
    def hwb(cls, hue: HueLike, whiteness: float, blackness: float):
        return cls.from_color(Color.hwb(
            hue,
            _bounded(whiteness, COLOR_PERCENT_MIN, COLOR_PERCENT_MAX, "whiteness"),
            _bounded(blackness, COLOR_PERCENT_MIN, COLOR_PERCENT_MAX, "blackness"),
        ))

    @classmethod
    def lab(cls, lightness: float, a: float, b: float):
        return cls.from_color(Color.lab(
            _bounded(lightness, COLOR_PERCENT_MIN, COLOR_PERCENT_MAX, "lightness"), a, b
        ))

    @classmethod
    def lch(cls, lightness: float, chroma: float, hue: float):
        return cls.from_color(Color.lch(lightness, chroma, hue))

    @classmethod
    def oklab(cls, lightness: float, a: float, b: float):
        return cls.from_color(Color.oklab(lightness, a, b))

    @classmethod
    def oklch(cls, lightness: float, chroma: float, hue: float):
        return cls.from_color(Color.oklch(
            _bounded(lightness, OKLCH_LIGHTNESS_MIN, OKLCH_LIGHTNESS_MAX, "lightness"),
            max(chroma, 0.0),
            math.fmod(hue, DEGREES_PER_TURN),
        ))

    @classmethod
    def hex(cls, value: Union[HexColor, str]):
        return cls.from_color(Color.hex(value))

    @classmethod
    def named(cls, name: Union[NamedColor, str]):
        """Any CSS named color, by enum member or keyword text."""
        return cls.from_color(Color.named(name))

    @classmethod
    def system(cls, color: Union[SystemColor, str]):
        return cls.from_color(Color.system(color))

    @classmethod
    def current_color(cls):
        return cls.from_color(Color.CURRENT_COLOR)

    @classmethod
    def transparent(cls):
        return cls.from_color(Color.TRANSPARENT)

    @classmethod
    def mix(
        cls,
        method: ColorInterpolationMethod,
        first: Color,
        second: Color,
        percentage: Optional[float] = None,
    ):
        return cls.from_color(Color.mix(method, first, second, percentage))
