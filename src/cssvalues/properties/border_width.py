"""
BorderWidth — the border-width shorthand

One to four <line-width> values: thin | medium | thick | <length>.
"""

from typing import Any, ClassVar, Tuple, Union

from cssvalues.properties.base import Property
from cssvalues.values.base import CSSKeyword, CSSValue
from cssvalues.values.global_keyword import GlobalKeyword
from cssvalues.values.length import Length, LengthConvertible


class LineWidthKeyword(CSSKeyword):
    THIN = "thin"
    MEDIUM = "medium"
    THICK = "thick"


class LineWidth(CSSValue, LengthConvertible):
    """Width of one border side"""

    value: Union[LineWidthKeyword, Length]

    THIN: ClassVar["LineWidth"]
    MEDIUM: ClassVar["LineWidth"]
    THICK: ClassVar["LineWidth"]

    def __init__(self, value: Union[LineWidthKeyword, Length], **data: Any) -> None:
        super().__init__(value=value, **data)

    @classmethod
    def from_length(cls, length: Length) -> "LineWidth":
        return cls(length)

    @classmethod
    def coerce(cls, value: Any) -> "LineWidth":
        """LineWidth, keyword, Length, or a bare number (pixels)."""
        if isinstance(value, LineWidth):
            return value
        if isinstance(value, LineWidthKeyword):
            return cls(value)
        return cls(Length.coerce(value))

    def __str__(self) -> str:
        return str(self.value)


LineWidth.THIN = LineWidth(LineWidthKeyword.THIN)
LineWidth.MEDIUM = LineWidth(LineWidthKeyword.MEDIUM)
LineWidth.THICK = LineWidth(LineWidthKeyword.THICK)


class BorderWidth(Property, LengthConvertible):
    """
    Examples:
        >>> str(BorderWidth(LineWidth.THIN, Length.px(2)))
        'thin 2px'
        >>> str(BorderWidth.DEFAULT)
        'medium'
    """

    property_name: ClassVar[str] = "border-width"

    value: Union[GlobalKeyword, Tuple[LineWidth, ...]]

    DEFAULT: ClassVar["BorderWidth"]

    def __init__(self, *widths: Any, **data: Any) -> None:
        """
        Raises:
            ValueError: If more than four or no widths are given
        """
        if len(widths) == 1 and isinstance(widths[0], GlobalKeyword):
            super().__init__(widths[0], **data)
            return
        if not 1 <= len(widths) <= 4:
            raise ValueError(f"border-width takes 1 to 4 values, got {len(widths)}")
        super().__init__(tuple(LineWidth.coerce(w) for w in widths), **data)

    @classmethod
    def from_length(cls, length: Length) -> "BorderWidth":
        return cls(length)


BorderWidth.DEFAULT = BorderWidth(LineWidth.MEDIUM)
