"""
FontWeight — the font-weight property

normal | bold | lighter | bolder | <number 1-1000>. Numeric weights are
clamped into [1, 1000] on construction.
"""

import logging
from typing import Any, ClassVar, Union

from cssvalues.core.constants import FONT_WEIGHT_MAX, FONT_WEIGHT_MIN
from cssvalues.core.numeric import clamp
from cssvalues.properties.base import Property
from cssvalues.values.base import CSSKeyword
from cssvalues.values.global_keyword import GlobalKeyword
from cssvalues.values.number import Number, NumberConvertible

logger = logging.getLogger(__name__)


class FontWeightKeyword(CSSKeyword):
    NORMAL = "normal"
    BOLD = "bold"
    LIGHTER = "lighter"
    BOLDER = "bolder"


class FontWeight(Property, NumberConvertible):
    """
    Examples:
        >>> str(FontWeight(600))
        '600'
        >>> str(FontWeight(1200))
        '1000'
        >>> str(FontWeight.BOLD)
        'bold'
    """

    property_name: ClassVar[str] = "font-weight"

    value: Union[GlobalKeyword, FontWeightKeyword, Number]

    NORMAL: ClassVar["FontWeight"]
    BOLD: ClassVar["FontWeight"]
    LIGHTER: ClassVar["FontWeight"]
    BOLDER: ClassVar["FontWeight"]
    THIN: ClassVar["FontWeight"]
    EXTRA_LIGHT: ClassVar["FontWeight"]
    LIGHT: ClassVar["FontWeight"]
    MEDIUM: ClassVar["FontWeight"]
    SEMI_BOLD: ClassVar["FontWeight"]
    EXTRA_BOLD: ClassVar["FontWeight"]
    BLACK: ClassVar["FontWeight"]
    EXTRA_BLACK: ClassVar["FontWeight"]

    def __init__(self, value: Any, **data: Any) -> None:
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            value = Number(value)
        if isinstance(value, Number):
            weight = clamp(value.value, FONT_WEIGHT_MIN, FONT_WEIGHT_MAX)
            if weight != value.value:
                logger.debug("font-weight %s clamped to %s", value, weight)
                value = Number(weight)
        super().__init__(value, **data)

    @classmethod
    def from_number(cls, number: Number) -> "FontWeight":
        return cls(number)


FontWeight.NORMAL = FontWeight(FontWeightKeyword.NORMAL)
FontWeight.BOLD = FontWeight(FontWeightKeyword.BOLD)
FontWeight.LIGHTER = FontWeight(FontWeightKeyword.LIGHTER)
FontWeight.BOLDER = FontWeight(FontWeightKeyword.BOLDER)
FontWeight.THIN = FontWeight(100)
FontWeight.EXTRA_LIGHT = FontWeight(200)
FontWeight.LIGHT = FontWeight(300)
FontWeight.MEDIUM = FontWeight(500)
FontWeight.SEMI_BOLD = FontWeight(600)
FontWeight.EXTRA_BOLD = FontWeight(800)
FontWeight.BLACK = FontWeight(900)
FontWeight.EXTRA_BLACK = FontWeight(950)
