"""
Gradients and images.

Gradient arguments render in a fixed order: interpolation method, then the
kind-specific prefix (direction, radial options, or conic from/at), then
the color stops.
"""

import pytest

from cssvalues.color import (
    Color,
    ColorInterpolationMethod,
    HueInterpolationMethod,
    PolarColorSpace,
    RectangularColorSpace,
)
from cssvalues.images import (
    ColorStop,
    Gradient,
    GradientDirection,
    GradientKind,
    Image,
    RadialOptions,
    RadialShape,
    RadialSize,
    RadialSizeKeyword,
    Side,
)
from cssvalues.values import Angle, LengthPercentage, Percentage, Position, Resolution, Url


@pytest.fixture
def red_blue() -> list:
    """Two named color stops"""
    return [Color.named("red"), Color.named("blue")]


class TestLinearGradient:
    """linear-gradient() and repeating-linear-gradient()"""

    def test_to_side(self, red_blue: list) -> None:
        gradient = Gradient.linear_gradient(red_blue, to=Side.BOTTOM)
        assert str(gradient) == "linear-gradient(to bottom, red, blue)"

    def test_to_corner(self) -> None:
        colors = [Color.named("yellow"), Color.named("green")]
        gradient = Gradient.linear_gradient(colors, to=Side.BOTTOM_RIGHT)
        assert str(gradient) == "linear-gradient(to bottom right, yellow, green)"

    def test_angle(self, red_blue: list) -> None:
        gradient = Gradient.linear_gradient(red_blue, angle=Angle.deg(45))
        assert str(gradient) == "linear-gradient(45deg, red, blue)"

    def test_no_direction(self, red_blue: list) -> None:
        assert str(Gradient.linear_gradient(red_blue)) == "linear-gradient(red, blue)"

    def test_to_and_angle_are_exclusive(self, red_blue: list) -> None:
        with pytest.raises(ValueError, match="not both"):
            Gradient.linear_gradient(red_blue, to=Side.TOP, angle=Angle.deg(10))

    def test_positioned_stops(self) -> None:
        stops = [
            ColorStop(Color.named("red"), LengthPercentage.percentage(0)),
            ColorStop(Color.named("yellow"), LengthPercentage.percentage(50)),
            ColorStop(Color.named("blue"), LengthPercentage.percentage(100)),
        ]
        gradient = Gradient.linear(stops, direction=GradientDirection.to(Side.BOTTOM))
        assert str(gradient) == "linear-gradient(to bottom, red 0%, yellow 50%, blue 100%)"

    def test_repeating(self, red_blue: list) -> None:
        gradient = Gradient.repeating_linear(red_blue, direction=GradientDirection.deg(90))
        assert str(gradient) == "repeating-linear-gradient(90deg, red, blue)"
        assert gradient.is_repeating

    def test_interpolation_comes_first(self, red_blue: list) -> None:
        gradient = Gradient.linear(
            red_blue,
            direction=GradientDirection.to(Side.RIGHT),
            interpolation=ColorInterpolationMethod.rectangular(RectangularColorSpace.SRGB),
        )
        assert str(gradient) == "linear-gradient(in srgb to right, red, blue)"


class TestRadialGradient:
    """radial-gradient() and repeating-radial-gradient()"""

    def test_plain(self, red_blue: list) -> None:
        assert str(Gradient.radial(red_blue)) == "radial-gradient(red, blue)"
        assert not Gradient.radial(red_blue).is_repeating

    def test_shape_size_position(self) -> None:
        colors = [Color.named("yellow"), Color.named("green")]
        options = RadialOptions(
            shape=RadialShape.CIRCLE,
            size=RadialSize.keyword(RadialSizeKeyword.CLOSEST_CORNER),
            position=Position.CENTER,
        )
        gradient = Gradient.radial(colors, options=options)
        assert str(gradient) == "radial-gradient(circle closest-corner at center, yellow, green)"

    def test_elliptical_size(self, red_blue: list) -> None:
        gradient = Gradient.radial_gradient(
            red_blue,
            shape=RadialShape.ELLIPSE,
            size=RadialSize.elliptical(LengthPercentage.percentage(50), LengthPercentage.percentage(25)),
            at=Position.TOP_LEFT,
        )
        assert str(gradient) == "radial-gradient(ellipse 50% 25% at top left, red, blue)"

    def test_shape_only(self, red_blue: list) -> None:
        gradient = Gradient.radial_gradient(red_blue, shape="circle")
        assert str(gradient) == "radial-gradient(circle, red, blue)"

    def test_explicit_radius(self, red_blue: list) -> None:
        gradient = Gradient.repeating_radial(
            red_blue, options=RadialOptions(size=RadialSize.explicit(LengthPercentage.px(20)))
        )
        assert str(gradient) == "repeating-radial-gradient(20px, red, blue)"

    def test_polar_interpolation(self) -> None:
        colors = [Color.named("yellow"), Color.named("green")]
        method = ColorInterpolationMethod.polar(PolarColorSpace.HSL, HueInterpolationMethod.SHORTER)
        gradient = Gradient.radial(colors, interpolation=method)
        assert str(gradient) == "radial-gradient(in hsl shorter hue, yellow, green)"


class TestConicGradient:
    """conic-gradient() and repeating-conic-gradient()"""

    def test_from_and_at(self) -> None:
        colors = [Color.named("red"), Color.named("yellow"), Color.named("blue")]
        gradient = Gradient.conic(colors, angle=Angle.deg(45), position=Position.CENTER)
        assert str(gradient) == "conic-gradient(from 45deg at center, red, yellow, blue)"

    def test_shorthand(self, red_blue: list) -> None:
        gradient = Gradient.conic_gradient(red_blue, from_angle=Angle.deg(90))
        assert str(gradient) == "conic-gradient(from 90deg, red, blue)"

    def test_repeating(self, red_blue: list) -> None:
        gradient = Gradient.repeating_conic(red_blue, position=Position.TOP)
        assert str(gradient) == "repeating-conic-gradient(at top, red, blue)"
        assert gradient.kind is GradientKind.REPEATING_CONIC

    def test_fields_of_other_kinds_are_ignored(self, red_blue: list) -> None:
        """A conic gradient never renders a linear direction"""
        gradient = Gradient(
            kind=GradientKind.CONIC,
            stops=(ColorStop(red_blue[0]), ColorStop(red_blue[1])),
            direction=GradientDirection.to(Side.TOP),
        )
        assert str(gradient) == "conic-gradient(red, blue)"


class TestImage:
    """<image> variants"""

    def test_url(self) -> None:
        assert str(Image.url("hero.png")) == "url('hero.png')"
        assert str(Image.url(Url("a b.png"))) == "url('a%20b.png')"

    def test_gradient(self, red_blue: list) -> None:
        image = Image.gradient(Gradient.linear_gradient(red_blue))
        assert str(image) == "linear-gradient(red, blue)"

    def test_element(self) -> None:
        assert str(Image.element("chart")) == "element(#chart)"

    def test_cross_fade(self) -> None:
        image = Image.cross_fade(Percentage(30), Image.url("a.png"), Image.url("b.png"))
        assert str(image) == "cross-fade(30% url('a.png'), url('b.png'))"

    def test_image_set(self) -> None:
        image = Image.image_set(
            [
                (Url("a.png"), Resolution.x(1)),
                (Url("a@2x.png"), Resolution.x(2)),
            ]
        )
        assert str(image) == "image-set(url('a.png') 1x, url('a@2x.png') 2x)"

    def test_paint(self) -> None:
        assert str(Image.paint("checker")) == "paint(checker)"
        assert str(Image.paint("checker", "red", "4px")) == "paint(checker, red, 4px)"

    def test_none(self) -> None:
        assert str(Image.NONE) == "none"

    def test_base_not_constructible(self) -> None:
        with pytest.raises(TypeError, match="Image cannot be constructed directly"):
            Image()
