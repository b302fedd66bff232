"""
Property types: rendering, declarations, global keywords and the
construction-time rules each property applies (clamping, box collapsing,
quoting).
"""

import logging

import pytest

from cssvalues.color import Color
from cssvalues.core import InvalidValueError
from cssvalues.images import Gradient, Side
from cssvalues.properties import (
    AbsoluteSize,
    AspectRatio,
    BackgroundColor,
    BackgroundImage,
    BorderWidth,
    CompositingOperator,
    FeatureSwitch,
    FontFamily,
    FontFeatureSettings,
    FontSize,
    FontWeight,
    GenericFamily,
    LineWidth,
    LineWidthKeyword,
    MaskComposite,
    Opacity,
    Padding,
    Rotate,
    RotateAxis,
    Width,
    shortest_box_form,
)
from cssvalues.values import Angle, CalcSum, GlobalKeyword, Length, LengthPercentage, Ratio, Url


class TestGlobalKeywords:
    """Every property accepts a CSS-wide keyword"""

    @pytest.mark.parametrize(
        "prop",
        [
            Width,
            Padding,
            BorderWidth,
            FontSize,
            FontWeight,
            FontFamily,
            Opacity,
            AspectRatio,
            Rotate,
            MaskComposite,
            BackgroundColor,
        ],
    )
    def test_inherit(self, prop) -> None:
        value = prop.inherit()
        assert str(value) == "inherit"
        assert value.is_global

    def test_declaration_with_global(self) -> None:
        assert FontWeight.revert_layer().declaration() == "font-weight: revert-layer"
        assert BackgroundImage.from_global(GlobalKeyword.UNSET).declaration() == "background-image: unset"


class TestWidth:
    """width"""

    def test_lengths(self) -> None:
        assert str(Width.px(200)) == "200px"
        assert str(Width.percentage(50)) == "50%"
        assert str(Width.calc("100% - 2rem")) == "calc(100% - 2rem)"

    def test_keywords(self) -> None:
        assert str(Width.AUTO) == "auto"
        assert str(Width.STRETCH) == "stretch"
        assert str(Width.fit_content()) == "fit-content"

    def test_fit_content_function(self) -> None:
        assert str(Width.fit_content(LengthPercentage.px(300))) == "fit-content(300px)"

    def test_declaration(self) -> None:
        assert Width.px(200).declaration() == "width: 200px"


class TestPadding:
    """padding shorthand"""

    def test_one_to_four_values(self) -> None:
        assert str(Padding(LengthPercentage.px(10))) == "10px"
        assert str(Padding(10, 20)) == "10px 20px"
        assert str(Padding(1, 2, 3)) == "1px 2px 3px"
        assert str(Padding(1, 2, 3, 4)) == "1px 2px 3px 4px"

    def test_mixed_values(self) -> None:
        padding = Padding(LengthPercentage.percentage(5), Length.em(1))
        assert str(padding) == "5% 1em"

    @pytest.mark.parametrize("count", [0, 5])
    def test_value_count(self, count: int) -> None:
        with pytest.raises(ValueError, match="1 to 4 values"):
            Padding(*range(count))

    def test_factories(self) -> None:
        assert str(Padding.em(1)) == "1em"
        assert str(Padding.ZERO) == "0px"
        assert str(Padding.symmetric(LengthPercentage.px(4), LengthPercentage.px(8))) == "4px 8px"

    def test_sides_collapse(self) -> None:
        px = LengthPercentage.px
        assert str(Padding.sides(top=px(5), right=px(5), bottom=px(5), left=px(5))) == "5px"
        assert str(Padding.sides(top=px(5), right=px(10), bottom=px(5), left=px(10))) == "5px 10px"
        assert str(Padding.sides(top=px(1), right=px(2), bottom=px(3), left=px(2))) == "1px 2px 3px"
        assert str(Padding.sides(top=px(1), right=px(2), bottom=px(3), left=px(4))) == "1px 2px 3px 4px"

    def test_sides_missing(self) -> None:
        with pytest.raises(ValueError, match="missing: bottom, left"):
            Padding.sides(top=LengthPercentage.px(1), right=LengthPercentage.px(2))

    def test_shortest_box_form(self) -> None:
        a, b = LengthPercentage.px(1), LengthPercentage.px(2)
        assert shortest_box_form(a, b, a, b) == (a, b)

    def test_declaration(self) -> None:
        assert Padding(10, 20).declaration() == "padding: 10px 20px"


class TestBorderWidth:
    """border-width shorthand"""

    def test_default(self) -> None:
        assert str(BorderWidth.DEFAULT) == "medium"

    def test_keywords_and_lengths(self) -> None:
        assert str(BorderWidth(LineWidth.THIN, Length.px(2))) == "thin 2px"
        assert str(BorderWidth(LineWidthKeyword.THICK)) == "thick"
        assert str(BorderWidth.px(3)) == "3px"
        assert str(BorderWidth(1, 2, 3, 4)) == "1px 2px 3px 4px"

    def test_value_count(self) -> None:
        with pytest.raises(ValueError):
            BorderWidth(1, 2, 3, 4, 5)

    def test_line_width_coerce(self) -> None:
        assert str(LineWidth.coerce(2)) == "2px"
        assert LineWidth.coerce(LineWidthKeyword.MEDIUM) == LineWidth.MEDIUM


class TestFontSize:
    """font-size"""

    def test_keywords(self) -> None:
        assert str(FontSize(AbsoluteSize.X_LARGE)) == "x-large"
        assert str(FontSize.MEDIUM) == "medium"
        assert str(FontSize.LARGER) == "larger"

    def test_lengths(self) -> None:
        assert str(FontSize.rem(1.25)) == "1.25rem"
        assert str(FontSize.percentage(120)) == "120%"

    def test_math(self) -> None:
        assert str(FontSize.clamp("1rem", "2.5vw", "2rem")) == "clamp(1rem, 2.5vw, 2rem)"
        assert str(FontSize.math(CalcSum("1rem + 1vw"))) == "calc(1rem + 1vw)"


class TestFontWeight:
    """font-weight"""

    def test_numbers(self) -> None:
        assert str(FontWeight(600)) == "600"
        assert str(FontWeight.number(450)) == "450"
        assert str(FontWeight.SEMI_BOLD) == "600"

    @pytest.mark.parametrize("weight, expected", [(1200, "1000"), (0, "1"), (-5, "1")])
    def test_clamped(self, weight: float, expected: str) -> None:
        assert str(FontWeight(weight)) == expected

    def test_clamping_is_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="cssvalues.properties.font_weight"):
            FontWeight(1200)
        assert "clamped" in caplog.text

    def test_keywords(self) -> None:
        assert str(FontWeight.BOLD) == "bold"
        assert str(FontWeight.BOLDER) == "bolder"


class TestFontFamily:
    """font-family"""

    def test_quoting(self) -> None:
        family = FontFamily("Helvetica Neue", "Arial", GenericFamily.SANS_SERIF)
        assert str(family) == '"Helvetica Neue", Arial, sans-serif'

    @pytest.mark.parametrize("name", ["Font-Awesome", "Segoe.UI", "Times New Roman"])
    def test_quote_triggers(self, name: str) -> None:
        assert str(FontFamily(name)) == f'"{name}"'

    def test_generic_constants(self) -> None:
        assert str(FontFamily.SERIF) == "serif"
        assert str(FontFamily.SYSTEM_UI) == "system-ui"

    def test_with_fallback(self) -> None:
        assert str(FontFamily.with_fallback(["Georgia"], GenericFamily.SERIF)) == "Georgia, serif"

    def test_empty(self) -> None:
        with pytest.raises(ValueError, match="at least one family"):
            FontFamily()


class TestFontFeatureSettings:
    """font-feature-settings"""

    def test_features(self) -> None:
        settings = FontFeatureSettings.features({"liga": FeatureSwitch.OFF, "tnum": None})
        assert str(settings) == '"liga" off, "tnum"'

    def test_integer_value(self) -> None:
        assert str(FontFeatureSettings.features({"kern": 1})) == '"kern" 1'

    def test_empty_is_normal(self) -> None:
        assert FontFeatureSettings.features({}) is FontFeatureSettings.NORMAL
        assert str(FontFeatureSettings.NORMAL) == "normal"

    def test_presets(self) -> None:
        assert str(FontFeatureSettings.all_small_caps()) == '"c2sc", "smcp"'
        assert str(FontFeatureSettings.disable_ligatures()) == '"liga" off'
        assert str(FontFeatureSettings.tabular_figures()) == '"tnum"'

    def test_stylistic_set(self) -> None:
        assert str(FontFeatureSettings.stylistic_set(3)) == '"ss03"'
        assert str(FontFeatureSettings.stylistic_set(20)) == '"ss20"'
        assert str(FontFeatureSettings.stylistic_set(21)) == "normal"
        assert str(FontFeatureSettings.stylistic_set(0)) == "normal"


class TestOpacity:
    """opacity"""

    @pytest.mark.parametrize("value, expected", [(0.5, "0.50"), (1.5, "1.00"), (-1, "0.00"), (0.333, "0.33")])
    def test_number(self, value: float, expected: str) -> None:
        assert str(Opacity(value)) == expected

    def test_constants(self) -> None:
        assert str(Opacity.TRANSPARENT) == "0.00"
        assert str(Opacity.OPAQUE) == "1.00"

    def test_percentage(self) -> None:
        assert str(Opacity.percentage(40)) == "40%"

    def test_declaration(self) -> None:
        assert Opacity(0.5).declaration() == "opacity: 0.50"


class TestBackgroundColor:
    """background-color"""

    def test_color_factories(self) -> None:
        assert str(BackgroundColor.rgb(300, 0, 0)) == "rgb(255, 0, 0)"
        assert str(BackgroundColor.hex("#336699")) == "#336699"
        assert str(BackgroundColor.named("rebeccapurple")) == "rebeccapurple"

    def test_wraps_any_color(self) -> None:
        assert str(BackgroundColor(Color.oklch(0.7, 0.15, 200))) == "oklch(0.7 0.15 200)"

    def test_constants(self) -> None:
        assert str(BackgroundColor.TRANSPARENT) == "transparent"
        assert str(BackgroundColor.CURRENT_COLOR) == "currentColor"

    def test_declaration(self) -> None:
        assert BackgroundColor.hsl(120, 100, 50).declaration() == "background-color: hsl(120, 100%, 50%)"
        assert BackgroundColor.initial().declaration() == "background-color: initial"


class TestAspectRatio:
    """aspect-ratio"""

    def test_forms(self) -> None:
        assert str(AspectRatio.AUTO) == "auto"
        assert str(AspectRatio.ratio(16, 9)) == "16 / 9"
        assert str(AspectRatio.auto_with_fallback(Ratio(4, 3))) == "auto 4 / 3"
        assert str(AspectRatio.ratio_with_auto(Ratio.WIDESCREEN)) == "16 / 9 auto"
        assert str(AspectRatio.square()) == "1"

    def test_negative_ratio(self) -> None:
        with pytest.raises(InvalidValueError):
            AspectRatio.ratio(-1)


class TestRotate:
    """rotate"""

    def test_forms(self) -> None:
        assert str(Rotate.NONE) == "none"
        assert str(Rotate.deg(45)) == "45deg"
        assert str(Rotate.around(RotateAxis.Y, Angle.turn(0.5))) == "y 0.5turn"
        assert str(Rotate.around("x", Angle.deg(10))) == "x 10deg"
        assert str(Rotate.vector(1, 1, 0, Angle.deg(45))) == "1 1 0 45deg"


class TestBackgroundImage:
    """background-image"""

    def test_none(self) -> None:
        assert str(BackgroundImage.NONE) == "none"
        assert BackgroundImage.DEFAULT == BackgroundImage.NONE
        assert BackgroundImage.NONE.declaration() == "background-image: none"

    def test_url(self) -> None:
        assert str(BackgroundImage.url("bg.png")) == "url('bg.png')"

    def test_gradients(self) -> None:
        colors = [Color.named("red"), Color.named("blue")]
        assert str(BackgroundImage.linear_gradient(colors, to=Side.BOTTOM)) == "linear-gradient(to bottom, red, blue)"
        assert str(BackgroundImage.radial_gradient(colors)) == "radial-gradient(red, blue)"
        assert str(BackgroundImage.conic_gradient(colors, from_angle=Angle.deg(90))) == (
            "conic-gradient(from 90deg, red, blue)"
        )

    def test_layers(self) -> None:
        colors = [Color.named("red"), Color.named("blue")]
        image = BackgroundImage(Url("a.png"), Gradient.linear_gradient(colors))
        assert str(image) == "url('a.png'), linear-gradient(red, blue)"

    def test_empty(self) -> None:
        with pytest.raises(ValueError):
            BackgroundImage()


class TestMaskComposite:
    """mask-composite"""

    def test_layers(self) -> None:
        composite = MaskComposite(CompositingOperator.ADD, CompositingOperator.EXCLUDE)
        assert str(composite) == "add, exclude"

    def test_string_operator(self) -> None:
        assert str(MaskComposite("subtract")) == "subtract"

    def test_default(self) -> None:
        assert MaskComposite.DEFAULT == MaskComposite.ADD
        assert str(MaskComposite.DEFAULT) == "add"

    def test_empty(self) -> None:
        with pytest.raises(ValueError):
            MaskComposite()
