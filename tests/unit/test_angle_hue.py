"""
Angle, Hue, AnglePercentage and Ratio.

Hue normalization is the only place an angle is wrapped into [0, 360).
"""

import math
from decimal import Decimal

import pytest

from cssvalues.core import InvalidValueError
from cssvalues.values import (
    Angle,
    AnglePercentage,
    AngleUnit,
    Hue,
    Number,
    Ratio,
)


class TestAngle:
    """Angle rendering and conversion"""

    @pytest.mark.parametrize(
        "angle, expected",
        [
            (Angle.deg(45), "45deg"),
            (Angle.rad(1.5708), "1.5708rad"),
            (Angle.grad(100), "100grad"),
            (Angle.turn(0.25), "0.25turn"),
            (Angle.degrees(-90), "-90deg"),
        ],
    )
    def test_rendering(self, angle: Angle, expected: str) -> None:
        assert str(angle) == expected

    def test_no_normalization(self) -> None:
        """Angles render as authored, even past a full turn"""
        assert str(Angle.deg(720)) == "720deg"

    def test_to_degrees(self) -> None:
        assert Angle.deg(30).to_degrees() == 30
        assert Angle.grad(100).to_degrees() == pytest.approx(90)
        assert Angle.rad(math.pi).to_degrees() == pytest.approx(180)
        assert Angle.turn(0.5).to_degrees() == 180

    def test_coerce(self) -> None:
        assert Angle.coerce(45) == Angle(value=45, unit=AngleUnit.DEG)
        with pytest.raises(TypeError):
            Angle.coerce("45deg")


class TestHue:
    """Hue rendering and normalization"""

    def test_number_renders_unitless(self) -> None:
        assert str(Hue.number(120)) == "120"
        assert str(Hue.coerce(120)) == "120"

    def test_angle_keeps_unit(self) -> None:
        assert str(Hue.deg(120)) == "120deg"
        assert str(Hue.turn(0.5)) == "0.5turn"

    @pytest.mark.parametrize(
        "hue, expected",
        [
            (Hue.deg(-90), 270.0),
            (Hue.deg(480), 120.0),
            (Hue.turn(0.75), 270.0),
            (Hue.number(360), 0.0),
            (Hue.grad(100), 90.0),
            (Hue.rad(math.pi), 180.0),
        ],
    )
    def test_normalized_degrees(self, hue: Hue, expected: float) -> None:
        """Result always lies in [0, 360)"""
        result = hue.normalized_degrees()
        assert result == pytest.approx(expected)
        assert 0 <= result < 360

    def test_normalization_does_not_change_rendering(self) -> None:
        hue = Hue.deg(-90)
        hue.normalized_degrees()
        assert str(hue) == "-90deg"

    def test_coerce(self) -> None:
        hue = Hue.deg(10)
        assert Hue.coerce(hue) is hue
        assert Hue.coerce(Angle.turn(1)) == Hue.turn(1)
        assert Hue.coerce(Number(5)) == Hue.number(5)
        with pytest.raises(TypeError):
            Hue.coerce("red")


class TestAnglePercentage:
    """Angle or percentage"""

    def test_rendering(self) -> None:
        assert str(AnglePercentage.deg(90)) == "90deg"
        assert str(AnglePercentage.percentage(25)) == "25%"

    def test_coerce_number_is_degrees(self) -> None:
        assert str(AnglePercentage.coerce(90)) == "90deg"


class TestRatio:
    """Ratio rendering, validation and ordering"""

    def test_rendering(self) -> None:
        assert str(Ratio(16, 9)) == "16 / 9"
        assert str(Ratio(2)) == "2"
        assert str(Ratio(1)) == "1"
        assert str(Ratio(1.5, 2)) == "1.5 / 2"

    def test_constants(self) -> None:
        assert str(Ratio.SQUARE) == "1"
        assert str(Ratio.WIDESCREEN) == "16 / 9"
        assert str(Ratio.MOVIE) == "185 / 100"

    @pytest.mark.parametrize("width, height", [(-1, 1), (1, -2)])
    def test_negative_components_rejected(self, width: float, height: float) -> None:
        with pytest.raises(InvalidValueError, match="non-negative"):
            Ratio(width, height)

    @pytest.mark.parametrize("width, height", [("-16", 9), (16, "-9"), (Decimal("-4"), 3)])
    def test_negative_numeric_text_rejected(self, width, height) -> None:
        """Signs are checked on the value pydantic would coerce"""
        with pytest.raises(InvalidValueError, match="non-negative"):
            Ratio(width, height)

    def test_numeric_text_coerced(self) -> None:
        assert str(Ratio("16", "9")) == "16 / 9"

    def test_zero_height_quotient(self) -> None:
        assert Ratio(1, 0).quotient == math.inf

    def test_quotient(self) -> None:
        assert Ratio(16, 9).quotient == pytest.approx(16 / 9)

    def test_inverse(self) -> None:
        assert str(Ratio(16, 9).inverse()) == "9 / 16"

    def test_simplified(self) -> None:
        assert Ratio(1920, 1080).simplified() == Ratio(16, 9)
        assert str(Ratio(4, 2).simplified()) == "2"

    def test_simplified_leaves_fractions(self) -> None:
        ratio = Ratio(1.5, 1)
        assert ratio.simplified() is ratio

    def test_ordering(self) -> None:
        assert Ratio.TV < Ratio.WIDESCREEN
        assert Ratio.ULTRAWIDE > Ratio.WIDESCREEN
        assert Ratio(2, 1) >= Ratio(4, 2)
        assert Ratio(1, 1) <= Ratio.SQUARE
