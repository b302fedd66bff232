"""
FontSize — the font-size property

<absolute-size> | <relative-size> | <length-percentage> | math functions
"""

from typing import ClassVar, Union

from cssvalues.properties.base import Property
from cssvalues.values.base import CSSKeyword
from cssvalues.values.calc import CalcSum
from cssvalues.values.global_keyword import GlobalKeyword
from cssvalues.values.length_percentage import LengthPercentage, LengthPercentageConvertible


class AbsoluteSize(CSSKeyword):
    XX_SMALL = "xx-small"
    X_SMALL = "x-small"
    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"
    X_LARGE = "x-large"
    XX_LARGE = "xx-large"
    XXX_LARGE = "xxx-large"


class RelativeSize(CSSKeyword):
    LARGER = "larger"
    SMALLER = "smaller"


class FontSize(Property, LengthPercentageConvertible):
    """
    Examples:
        >>> str(FontSize.rem(1.25))
        '1.25rem'
        >>> str(FontSize.clamp("1rem", "2.5vw", "2rem"))
        'clamp(1rem, 2.5vw, 2rem)'
    """

    property_name: ClassVar[str] = "font-size"

    value: Union[GlobalKeyword, AbsoluteSize, RelativeSize, LengthPercentage, CalcSum]

    MEDIUM: ClassVar["FontSize"]
    LARGER: ClassVar["FontSize"]
    SMALLER: ClassVar["FontSize"]

    @classmethod
    def from_length_percentage(cls, value: LengthPercentage) -> "FontSize":
        return cls(value)

    @classmethod
    def math(cls, expression: CalcSum) -> "FontSize":
        return cls(expression)

    @classmethod
    def clamp(cls, minimum: str, preferred: str, maximum: str) -> "FontSize":
        """Fluid type size: clamp(<min>, <preferred>, <max>)."""
        return cls(CalcSum.clamp(minimum, preferred, maximum))


FontSize.MEDIUM = FontSize(AbsoluteSize.MEDIUM)
FontSize.LARGER = FontSize(RelativeSize.LARGER)
FontSize.SMALLER = FontSize(RelativeSize.SMALLER)
