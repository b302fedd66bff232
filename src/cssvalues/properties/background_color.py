"""
BackgroundColor — the background-color property

<color>. Built through the ColorConvertible factories, which clamp channel
values into their CSS ranges.
"""

from typing import ClassVar, Union

from cssvalues.color.color import Color, ColorConvertible
from cssvalues.properties.base import Property
from cssvalues.values.global_keyword import GlobalKeyword


class BackgroundColor(Property, ColorConvertible):
    """
    Examples:
        >>> str(BackgroundColor.rgb(300, 0, 0))
        'rgb(255, 0, 0)'
        >>> BackgroundColor.named("rebeccapurple").declaration()
        'background-color: rebeccapurple'
    """

    property_name: ClassVar[str] = "background-color"

    value: Union[GlobalKeyword, Color]

    TRANSPARENT: ClassVar["BackgroundColor"]
    CURRENT_COLOR: ClassVar["BackgroundColor"]

    @classmethod
    def from_color(cls, color: Color) -> "BackgroundColor":
        return cls(color)


BackgroundColor.TRANSPARENT = BackgroundColor.transparent()
BackgroundColor.CURRENT_COLOR = BackgroundColor.current_color()
