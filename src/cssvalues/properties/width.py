"""
Width — the width property

<length-percentage> | auto | max-content | min-content | fit-content |
fit-content(<length-percentage>) | stretch
"""

from typing import ClassVar, Optional, Union

from cssvalues.properties.base import Property
from cssvalues.values.base import CSSKeyword, CSSValue
from cssvalues.values.global_keyword import GlobalKeyword
from cssvalues.values.length_percentage import LengthPercentage, LengthPercentageConvertible


class WidthKeyword(CSSKeyword):
    AUTO = "auto"
    MAX_CONTENT = "max-content"
    MIN_CONTENT = "min-content"
    FIT_CONTENT = "fit-content"
    STRETCH = "stretch"


class FitContent(CSSValue):
    """fit-content(<length-percentage>)"""

    limit: LengthPercentage

    def __str__(self) -> str:
        return f"fit-content({self.limit})"


class Width(Property, LengthPercentageConvertible):
    """
    Examples:
        >>> str(Width.px(200))
        '200px'
        >>> str(Width.fit_content(LengthPercentage.percentage(50)))
        'fit-content(50%)'
    """

    property_name: ClassVar[str] = "width"

    value: Union[GlobalKeyword, WidthKeyword, LengthPercentage, FitContent]

    AUTO: ClassVar["Width"]
    MAX_CONTENT: ClassVar["Width"]
    MIN_CONTENT: ClassVar["Width"]
    FIT_CONTENT: ClassVar["Width"]
    STRETCH: ClassVar["Width"]

    @classmethod
    def from_length_percentage(cls, value: LengthPercentage) -> "Width":
        return cls(value)

    @classmethod
    def fit_content(cls, limit: Optional[LengthPercentage] = None) -> "Width":
        """fit-content, or fit-content(<limit>) when a limit is given."""
        if limit is None:
            return cls(WidthKeyword.FIT_CONTENT)
        return cls(FitContent(limit=limit))


Width.AUTO = Width(WidthKeyword.AUTO)
Width.MAX_CONTENT = Width(WidthKeyword.MAX_CONTENT)
Width.MIN_CONTENT = Width(WidthKeyword.MIN_CONTENT)
Width.FIT_CONTENT = Width(WidthKeyword.FIT_CONTENT)
Width.STRETCH = Width(WidthKeyword.STRETCH)
