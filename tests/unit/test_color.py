"""
Color rendering: keywords, hex, functional notations, color-mix().

Channels pass through Color unvalidated; HexColor.rgb()/rgba() and the
ColorConvertible factories are the clamping builders.
"""

import logging

import pytest

from cssvalues.color import (
    Color,
    ColorConvertible,
    ColorInterpolationMethod,
    CurrentColor,
    HexColor,
    HueInterpolationMethod,
    NamedColor,
    PolarColorSpace,
    RectangularColorSpace,
    SystemColor,
)
from cssvalues.values import Angle, CSSValue, Hue


@pytest.fixture
def red() -> Color:
    """Named red"""
    return Color.named(NamedColor.RED)


@pytest.fixture
def blue() -> Color:
    """Named blue"""
    return Color.named(NamedColor.BLUE)


class TestKeywordColors:
    """Named, system and special keywords"""

    def test_named(self, red: Color) -> None:
        assert str(red) == "red"
        assert str(Color.named("rebeccapurple")) == "rebeccapurple"

    def test_current_color_alias(self) -> None:
        assert NamedColor.CURRENT is NamedColor.CURRENT_COLOR
        assert str(Color.named(NamedColor.CURRENT)) == "currentColor"

    def test_special_constants(self) -> None:
        assert str(Color.CURRENT_COLOR) == "currentColor"
        assert str(Color.TRANSPARENT) == "transparent"
        assert Color.CURRENT_COLOR == CurrentColor()

    def test_system(self) -> None:
        assert str(Color.system(SystemColor.CANVAS)) == "Canvas"
        assert str(Color.system("ButtonText")) == "ButtonText"

    def test_deprecated_system_colors(self) -> None:
        assert SystemColor.ACTIVE_BORDER.is_deprecated
        assert SystemColor.ACTIVE_BORDER.replacement is SystemColor.BUTTON_BORDER
        assert not SystemColor.CANVAS.is_deprecated
        assert SystemColor.CANVAS.replacement is None

    def test_unknown_name_rejected(self) -> None:
        with pytest.raises(ValueError):
            Color.named("not-a-color")

    def test_hex(self) -> None:
        assert str(Color.hex("ff0000")) == "#ff0000"
        assert str(Color.hex(HexColor.rgb(0, 128, 255))) == "#0080FF"


class TestFunctionalColors:
    """Functional notation templates"""

    def test_rgb(self) -> None:
        assert str(Color.rgb(255, 0, 0)) == "rgb(255, 0, 0)"

    def test_rgba(self) -> None:
        assert str(Color.rgba(255, 0, 0, 0.5)) == "rgba(255, 0, 0, 0.5)"
        assert str(Color.rgba(255, 0, 0, 1.0)) == "rgba(255, 0, 0, 1)"

    def test_out_of_range_channels_pass_through(self) -> None:
        assert str(Color.rgb(300, -5, 0)) == "rgb(300, -5, 0)"

    def test_hsl(self) -> None:
        assert str(Color.hsl(Hue.deg(0), 100, 50)) == "hsl(0deg, 100%, 50%)"
        assert str(Color.hsl(Angle.turn(0.5), 75, 25)) == "hsl(0.5turn, 75%, 25%)"

    def test_hsl_bare_hue_is_unitless(self) -> None:
        assert str(Color.hsl(120, 100, 50)) == "hsl(120, 100%, 50%)"

    def test_hsla(self) -> None:
        assert str(Color.hsla(Hue.deg(0), 100, 50, 1)) == "hsla(0deg, 100%, 50%, 1)"
        assert str(Color.hsla(120, 100, 50, 0.5)) == "hsla(120, 100%, 50%, 0.5)"

    def test_hwb(self) -> None:
        assert str(Color.hwb(Hue.deg(0), 10, 0)) == "hwb(0deg 10% 0%)"

    def test_lab_and_lch(self) -> None:
        assert str(Color.lab(50, 20, -40)) == "lab(50% 20 -40)"
        assert str(Color.lch(50, 30, 270)) == "lch(50% 30 270)"

    def test_oklab_and_oklch(self) -> None:
        assert str(Color.oklab(0.5, 0.1, -0.2)) == "oklab(0.5 0.1 -0.2)"
        assert str(Color.oklch(0.7, 0.15, 200)) == "oklch(0.7 0.15 200)"

    def test_equality(self) -> None:
        assert Color.rgb(1, 2, 3) == Color.rgb(1, 2, 3)
        assert Color.rgba(0, 0, 255, 1.0) != Color.rgba(0, 0, 255, 0.9)
        assert Color.rgb(255, 0, 0) != Color.named("red")


class TestColorMix:
    """color-mix()"""

    def test_without_percentage(self, red: Color, blue: Color) -> None:
        method = ColorInterpolationMethod.rectangular(RectangularColorSpace.SRGB)
        assert str(Color.mix(method, red, blue)) == "color-mix(in srgb, red, blue)"

    def test_with_percentage(self, red: Color, blue: Color) -> None:
        method = ColorInterpolationMethod.rectangular(RectangularColorSpace.OKLAB)
        assert str(Color.mix(method, red, blue, 30)) == "color-mix(in oklab, red, blue 30%)"

    def test_nested_functional_colors(self) -> None:
        method = ColorInterpolationMethod.polar(PolarColorSpace.HSL)
        mixed = Color.mix(method, Color.rgb(255, 0, 0), Color.rgb(0, 0, 255), 25)
        assert str(mixed) == "color-mix(in hsl, rgb(255, 0, 0), rgb(0, 0, 255) 25%)"


class TestInterpolationMethod:
    """in <space> [<hue method>]"""

    def test_rectangular(self) -> None:
        assert str(ColorInterpolationMethod.rectangular(RectangularColorSpace.SRGB)) == "in srgb"
        assert str(ColorInterpolationMethod.rectangular("display-p3")) == "in display-p3"

    def test_polar(self) -> None:
        assert str(ColorInterpolationMethod.polar(PolarColorSpace.HSL)) == "in hsl"
        method = ColorInterpolationMethod.polar(PolarColorSpace.OKLCH, HueInterpolationMethod.SHORTER)
        assert str(method) == "in oklch shorter hue"

    def test_custom_profile_is_quoted(self) -> None:
        assert str(ColorInterpolationMethod.custom("my-custom-profile")) == 'in "my-custom-profile"'

    def test_polar_space_required_for_hue_method(self) -> None:
        with pytest.raises(ValueError):
            ColorInterpolationMethod.polar("srgb", HueInterpolationMethod.LONGER)


class TestHexColor:
    """Hex encoding and decoding"""

    def test_prefix_added(self) -> None:
        assert HexColor("FF0000").value == "#FF0000"
        assert HexColor("#abc").value == "#abc"

    def test_rgb(self) -> None:
        assert str(HexColor.rgb(255, 0, 0)) == "#FF0000"

    def test_rgba(self) -> None:
        """0.5 * 255 = 127.5 rounds away from zero to 128 (0x80)"""
        assert str(HexColor.rgba(0, 0, 255, 0.5)) == "#0000FF80"

    def test_channels_clamped(self) -> None:
        assert str(HexColor.rgb(300, -10, 128)) == "#FF0080"

    def test_alpha_clamped(self) -> None:
        assert str(HexColor.rgba(0, 0, 0, 2.0)) == "#000000FF"
        assert str(HexColor.rgba(0, 0, 0, -1)) == "#00000000"

    def test_clamping_is_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="cssvalues.color.hex"):
            HexColor.rgb(300, 0, 0)
        assert "clamped" in caplog.text

    @pytest.mark.parametrize("value", ["#abc", "#abcd", "#aabbcc", "#AABBCC80"])
    def test_valid(self, value: str) -> None:
        assert HexColor(value).is_valid

    @pytest.mark.parametrize("value", ["#ab", "#ggg", "#aabbccd", "red"])
    def test_invalid_is_still_constructed(self, value: str) -> None:
        """Validity is advisory"""
        color = HexColor(value)
        assert not color.is_valid
        assert color.to_rgb() is None

    @pytest.mark.parametrize("value", ["#fff\n", "#aabbcc\n", "#abc \n"])
    def test_trailing_newline_is_invalid(self, value: str) -> None:
        """The whole text must be hex digits"""
        color = HexColor(value)
        assert not color.is_valid
        assert color.to_rgb() is None

    def test_to_rgb(self) -> None:
        assert HexColor("#f80").to_rgb() == (255, 136, 0, None)
        assert HexColor("#11223344").to_rgb() == (17, 34, 51, 68)

    def test_equality_is_on_text(self) -> None:
        assert HexColor("#FF0000") != HexColor("#ff0000")
        assert HexColor("FF0000") == HexColor("#FF0000")


class Swatch(CSSValue, ColorConvertible):
    """Minimal ColorConvertible holder"""

    color: Color

    @classmethod
    def from_color(cls, color: Color) -> "Swatch":
        return cls(color=color)

    def __str__(self) -> str:
        return str(self.color)


class TestColorConvertible:
    """Factories shared by every type built from a Color"""

    def test_rgb_channels_clamped(self) -> None:
        assert str(Swatch.rgb(300, -5, 128)) == "rgb(255, 0, 128)"
        assert str(Swatch.rgba(0, 0, 0, 1.5)) == "rgba(0, 0, 0, 1)"

    def test_percentages_clamped(self) -> None:
        assert str(Swatch.hsl(Hue.deg(120), 150, -10)) == "hsl(120deg, 100%, 0%)"
        assert str(Swatch.hsla(120, 50, 50, -0.2)) == "hsla(120, 50%, 50%, 0)"
        assert str(Swatch.hwb(0, 120, 0)) == "hwb(0 100% 0%)"
        assert str(Swatch.lab(120, 20, -40)) == "lab(100% 20 -40)"

    def test_oklch_bounds(self) -> None:
        """Lightness 0-1, chroma non-negative, hue fmod 360 keeping its sign"""
        assert str(Swatch.oklch(1.2, -0.1, 380)) == "oklch(1 0 20)"
        assert str(Swatch.oklch(0.7, 0.15, -30)) == "oklch(0.7 0.15 -30)"

    def test_unbounded_spaces_pass_through(self) -> None:
        assert str(Swatch.lch(150, 30, 270)) == "lch(150% 30 270)"
        assert str(Swatch.oklab(0.5, 0.1, -0.2)) == "oklab(0.5 0.1 -0.2)"

    def test_keyword_factories(self) -> None:
        assert str(Swatch.named(NamedColor.RED)) == "red"
        assert str(Swatch.named("rebeccapurple")) == "rebeccapurple"
        assert str(Swatch.hex("ff0000")) == "#ff0000"
        assert str(Swatch.system(SystemColor.CANVAS)) == "Canvas"
        assert str(Swatch.current_color()) == "currentColor"
        assert str(Swatch.transparent()) == "transparent"

    def test_mix(self, red: Color, blue: Color) -> None:
        method = ColorInterpolationMethod.rectangular(RectangularColorSpace.OKLAB)
        assert str(Swatch.mix(method, red, blue, 30)) == "color-mix(in oklab, red, blue 30%)"

    def test_clamping_is_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="cssvalues.color.color"):
            Swatch.rgb(0, 0, 300)
        assert "clamped" in caplog.text

    def test_from_color_required(self) -> None:
        class Bare(ColorConvertible):
            pass

        with pytest.raises(NotImplementedError, match="from_color"):
            Bare.rgb(0, 0, 0)


class TestColorBase:
    """Color itself is only a namespace for its variants"""

    def test_direct_construction_rejected(self) -> None:
        with pytest.raises(TypeError, match="Color"):
            Color()

    def test_variants_construct(self) -> None:
        assert str(CurrentColor()) == "currentColor"
