"""
Position — CSS <position>

Used by background-position, object-position, transform-origin and the
"at <position>" part of radial and conic gradients. Rendered as its parts
joined by single spaces:

    center                 Position.keyword(PositionKeyword.CENTER)
    10px                   Position.value(LengthPercentage.px(10))
    top left               Position.keywords(TOP, LEFT)
    left 20%               Position.keyword_value(LEFT, 20%)
    20% top                Position.value_keyword(20%, TOP)
    10px 20px              Position.values(10px, 20px)
    right 10px bottom 5%   Position.offsets(RIGHT, 10px, BOTTOM, 5%)
"""

from typing import Any, ClassVar, Tuple, Union

from cssvalues.core.formatting import join
from cssvalues.values.base import CSSKeyword, CSSValue
from cssvalues.values.length_percentage import LengthPercentage, LengthPercentageConvertible


class PositionKeyword(CSSKeyword):
    """Position keywords"""

    CENTER = "center"
    TOP = "top"
    RIGHT = "right"
    BOTTOM = "bottom"
    LEFT = "left"


PositionPart = Union[PositionKeyword, LengthPercentage]


class Position(CSSValue, LengthPercentageConvertible):
    """
    CSS position.

    Build through the classmethods; each one matches one shape of the
    <position> grammar.
    """

    parts: Tuple[PositionPart, ...]

    CENTER: ClassVar["Position"]
    TOP: ClassVar["Position"]
    RIGHT: ClassVar["Position"]
    BOTTOM: ClassVar["Position"]
    LEFT: ClassVar["Position"]
    TOP_LEFT: ClassVar["Position"]
    TOP_RIGHT: ClassVar["Position"]
    BOTTOM_LEFT: ClassVar["Position"]
    BOTTOM_RIGHT: ClassVar["Position"]

    def __init__(self, *parts: Any, **data: Any) -> None:
        if parts:
            data["parts"] = parts
        super().__init__(**data)

    @classmethod
    def from_length_percentage(cls, value: LengthPercentage) -> "Position":
        return cls.value(value)

    @classmethod
    def keyword(cls, keyword: PositionKeyword) -> "Position":
        return cls(PositionKeyword(keyword))

    @classmethod
    def value(cls, value: LengthPercentage) -> "Position":
        return cls(value)

    @classmethod
    def keywords(cls, first: PositionKeyword, second: PositionKeyword) -> "Position":
        return cls(PositionKeyword(first), PositionKeyword(second))

    @classmethod
    def keyword_value(cls, keyword: PositionKeyword, value: LengthPercentage) -> "Position":
        return cls(PositionKeyword(keyword), value)

    @classmethod
    def value_keyword(cls, value: LengthPercentage, keyword: PositionKeyword) -> "Position":
        return cls(value, PositionKeyword(keyword))

    @classmethod
    def values(cls, x: LengthPercentage, y: LengthPercentage) -> "Position":
        return cls(x, y)

    @classmethod
    def offsets(
        cls,
        first_keyword: PositionKeyword,
        first_offset: LengthPercentage,
        second_keyword: PositionKeyword,
        second_offset: LengthPercentage,
    ) -> "Position":
        return cls(
            PositionKeyword(first_keyword),
            first_offset,
            PositionKeyword(second_keyword),
            second_offset,
        )

    def __str__(self) -> str:
        return join(self.parts)


Position.CENTER = Position.keyword(PositionKeyword.CENTER)
Position.TOP = Position.keyword(PositionKeyword.TOP)
Position.RIGHT = Position.keyword(PositionKeyword.RIGHT)
Position.BOTTOM = Position.keyword(PositionKeyword.BOTTOM)
Position.LEFT = Position.keyword(PositionKeyword.LEFT)
Position.TOP_LEFT = Position.keywords(PositionKeyword.TOP, PositionKeyword.LEFT)
Position.TOP_RIGHT = Position.keywords(PositionKeyword.TOP, PositionKeyword.RIGHT)
Position.BOTTOM_LEFT = Position.keywords(PositionKeyword.BOTTOM, PositionKeyword.LEFT)
Position.BOTTOM_RIGHT = Position.keywords(PositionKeyword.BOTTOM, PositionKeyword.RIGHT)
