"""
AspectRatio — the aspect-ratio property

auto | <ratio> | auto <ratio> | <ratio> auto. In the combined forms the
ratio applies unless the element is a replaced element with a natural
aspect ratio.
"""

from typing import Any, ClassVar, Tuple, Union

from cssvalues.properties.base import Property
from cssvalues.values.base import CSSKeyword
from cssvalues.values.global_keyword import GlobalKeyword
from cssvalues.values.ratio import Ratio


class AspectRatioKeyword(CSSKeyword):
    AUTO = "auto"


class AspectRatio(Property):
    """
    Examples:
        >>> str(AspectRatio.ratio(16, 9))
        '16 / 9'
        >>> str(AspectRatio.auto_with_fallback(Ratio(4, 3)))
        'auto 4 / 3'
    """

    property_name: ClassVar[str] = "aspect-ratio"

    value: Union[GlobalKeyword, Tuple[Union[AspectRatioKeyword, Ratio], ...]]

    AUTO: ClassVar["AspectRatio"]

    def __init__(self, *parts: Any, **data: Any) -> None:
        if len(parts) == 1 and isinstance(parts[0], GlobalKeyword):
            super().__init__(parts[0], **data)
            return
        super().__init__(tuple(parts), **data)

    @classmethod
    def ratio(cls, width: float, height: float = 1.0) -> "AspectRatio":
        """
        Raises:
            InvalidValueError: If width or height is negative
        """
        return cls(Ratio(width, height))

    @classmethod
    def auto_with_fallback(cls, ratio: Ratio) -> "AspectRatio":
        return cls(AspectRatioKeyword.AUTO, ratio)

    @classmethod
    def ratio_with_auto(cls, ratio: Ratio) -> "AspectRatio":
        return cls(ratio, AspectRatioKeyword.AUTO)

    @classmethod
    def square(cls) -> "AspectRatio":
        return cls(Ratio.SQUARE)

    @classmethod
    def widescreen(cls) -> "AspectRatio":
        return cls(Ratio.WIDESCREEN)


AspectRatio.AUTO = AspectRatio(AspectRatioKeyword.AUTO)
