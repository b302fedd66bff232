"""
Padding — the padding shorthand

One to four <length-percentage> values in top, right, bottom, left order.
sides() takes all four by name and emits the shortest equivalent form.
"""

from typing import Any, ClassVar, Optional, Tuple, Union

from cssvalues.properties.base import Property
from cssvalues.values.global_keyword import GlobalKeyword
from cssvalues.values.length_percentage import LengthPercentage, LengthPercentageConvertible


def shortest_box_form(
    top: LengthPercentage,
    right: LengthPercentage,
    bottom: LengthPercentage,
    left: LengthPercentage,
) -> Tuple[LengthPercentage, ...]:
    """
    Collapse four sides into the shortest shorthand with the same meaning.

    Examples:
        all equal                    -> (top,)
        top == bottom, right == left -> (top, right)
        right == left                -> (top, right, bottom)
        otherwise                    -> (top, right, bottom, left)
    """
    if top == right == bottom == left:
        return (top,)
    if top == bottom and right == left:
        return (top, right)
    if right == left:
        return (top, right, bottom)
    return (top, right, bottom, left)


class Padding(Property, LengthPercentageConvertible):
    """
    Examples:
        >>> str(Padding(LengthPercentage.px(10), LengthPercentage.px(20)))
        '10px 20px'
        >>> px = LengthPercentage.px
        >>> str(Padding.sides(top=px(5), right=px(10), bottom=px(5), left=px(10)))
        '5px 10px'
    """

    property_name: ClassVar[str] = "padding"

    value: Union[GlobalKeyword, Tuple[LengthPercentage, ...]]

    ZERO: ClassVar["Padding"]

    def __init__(self, *values: Any, **data: Any) -> None:
        """
        Args:
            values: One global keyword, or 1-4 lengths/percentages (bare
                numbers are pixels)

        Raises:
            ValueError: If more than four or no values are given
        """
        if len(values) == 1 and isinstance(values[0], GlobalKeyword):
            super().__init__(values[0], **data)
            return
        if not 1 <= len(values) <= 4:
            raise ValueError(f"padding takes 1 to 4 values, got {len(values)}")
        super().__init__(tuple(LengthPercentage.coerce(v) for v in values), **data)

    @classmethod
    def from_length_percentage(cls, value: LengthPercentage) -> "Padding":
        return cls(value)

    @classmethod
    def symmetric(cls, vertical: LengthPercentage, horizontal: LengthPercentage) -> "Padding":
        return cls(vertical, horizontal)

    @classmethod
    def sides(
        cls,
        top: Optional[LengthPercentage] = None,
        right: Optional[LengthPercentage] = None,
        bottom: Optional[LengthPercentage] = None,
        left: Optional[LengthPercentage] = None,
    ) -> "Padding":
        """
        Padding from named sides, collapsed to the shortest form.

        Raises:
            ValueError: If any side is missing (the shorthand cannot leave
                a side unset; use the longhand properties instead)
        """
        named = {"top": top, "right": right, "bottom": bottom, "left": left}
        missing = [name for name, value in named.items() if value is None]
        if missing:
            raise ValueError(f"padding shorthand needs all four sides, missing: {', '.join(missing)}")
        return cls(*shortest_box_form(top, right, bottom, left))


Padding.ZERO = Padding(LengthPercentage.px(0))
