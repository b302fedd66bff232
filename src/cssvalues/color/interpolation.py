"""
ColorInterpolationMethod — CSS <color-interpolation-method>

"in <color space> [<hue interpolation method>]", used by color-mix() and
gradients. Hue methods only apply to polar spaces; custom color profiles
are rendered as a double-quoted string.
"""

from typing import Optional, Union

from cssvalues.core.formatting import quote
from cssvalues.values.base import CSSKeyword, CSSValue


class RectangularColorSpace(CSSKeyword):
    """Color spaces with rectangular (non-hue) coordinates"""

    SRGB = "srgb"
    SRGB_LINEAR = "srgb-linear"
    DISPLAY_P3 = "display-p3"
    A98_RGB = "a98-rgb"
    PROPHOTO_RGB = "prophoto-rgb"
    REC2020 = "rec2020"
    LAB = "lab"
    OKLAB = "oklab"
    XYZ = "xyz"
    XYZ_D50 = "xyz-d50"
    XYZ_D65 = "xyz-d65"


class PolarColorSpace(CSSKeyword):
    """Color spaces with a hue angle"""

    HSL = "hsl"
    HWB = "hwb"
    LCH = "lch"
    OKLCH = "oklch"


class HueInterpolationMethod(CSSKeyword):
    """Direction taken around the hue circle"""

    SHORTER = "shorter hue"
    LONGER = "longer hue"
    INCREASING = "increasing hue"
    DECREASING = "decreasing hue"


class ColorInterpolationMethod(CSSValue):
    """
    CSS color interpolation method.

    Examples:
        >>> str(ColorInterpolationMethod.rectangular(RectangularColorSpace.OKLAB))
        'in oklab'
        >>> str(ColorInterpolationMethod.polar(PolarColorSpace.HSL, HueInterpolationMethod.LONGER))
        'in hsl longer hue'
        >>> str(ColorInterpolationMethod.custom("my-profile"))
        'in "my-profile"'
    """

    color_space: str
    hue_method: Optional[str] = None

    @classmethod
    def rectangular(cls, space: Union[RectangularColorSpace, str]) -> "ColorInterpolationMethod":
        return cls(color_space=RectangularColorSpace(space).value)

    @classmethod
    def polar(
        cls,
        space: Union[PolarColorSpace, str],
        hue_method: Optional[Union[HueInterpolationMethod, str]] = None,
    ) -> "ColorInterpolationMethod":
        method: Optional[str] = None
        if hue_method is not None:
            method = HueInterpolationMethod(hue_method).value
        return cls(color_space=PolarColorSpace(space).value, hue_method=method)

    @classmethod
    def custom(cls, profile: str) -> "ColorInterpolationMethod":
        """Custom color profile, e.g. one declared with @color-profile."""
        return cls(color_space=quote(profile))

    def __str__(self) -> str:
        if self.hue_method is not None:
            return f"in {self.color_space} {self.hue_method}"
        return f"in {self.color_space}"
