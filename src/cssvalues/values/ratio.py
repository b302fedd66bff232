"""
Ratio — CSS <ratio>

"<width> / <height>", or just "<width>" when the height is 1. Both
components must be non-negative.
"""

import math
from typing import Any, ClassVar

from cssvalues.core.errors import InvalidValueError
from cssvalues.core.formatting import format_number
from cssvalues.core.numeric import is_negative, is_whole
from cssvalues.values.base import CSSValue


class Ratio(CSSValue):
    """
    CSS ratio.

    Examples:
        >>> str(Ratio(16, 9))
        '16 / 9'
        >>> str(Ratio(2))
        '2'
    """

    width: float
    height: float = 1.0

    SQUARE: ClassVar["Ratio"]
    TV: ClassVar["Ratio"]
    WIDESCREEN: ClassVar["Ratio"]
    ULTRAWIDE: ClassVar["Ratio"]
    MOVIE: ClassVar["Ratio"]
    CINEMASCOPE: ClassVar["Ratio"]

    def __init__(self, width: float, height: float = 1.0, **data: Any) -> None:
        # Checked before pydantic runs so the typed error is not wrapped
        for component in (width, height):
            if is_negative(component):
                raise InvalidValueError("Ratio", component, "components must be non-negative")
        super().__init__(width=width, height=height, **data)

    @property
    def quotient(self) -> float:
        """
        width / height.

        Returns inf for a zero height.
        """
        if self.height == 0:
            return math.inf
        return self.width / self.height

    def inverse(self) -> "Ratio":
        """Swap width and height."""
        return Ratio(self.height, self.width)

    def simplified(self) -> "Ratio":
        """
        Reduce whole-number ratios by their greatest common divisor.

        Fractional ratios are returned unchanged.

        Examples:
            >>> str(Ratio(1920, 1080).simplified())
            '16 / 9'
        """
        if not (is_whole(self.width) and is_whole(self.height)):
            return self
        width, height = int(self.width), int(self.height)
        divisor = math.gcd(width, height)
        if divisor <= 1:
            return self
        return Ratio(width // divisor, height // divisor)

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, Ratio):
            return NotImplemented
        return self.quotient < other.quotient

    def __le__(self, other: Any) -> bool:
        if not isinstance(other, Ratio):
            return NotImplemented
        return self.quotient <= other.quotient

    def __gt__(self, other: Any) -> bool:
        if not isinstance(other, Ratio):
            return NotImplemented
        return self.quotient > other.quotient

    def __ge__(self, other: Any) -> bool:
        if not isinstance(other, Ratio):
            return NotImplemented
        return self.quotient >= other.quotient

    def __str__(self) -> str:
        if self.height == 1:
            return format_number(self.width)
        return f"{format_number(self.width)} / {format_number(self.height)}"


Ratio.SQUARE = Ratio(1, 1)
Ratio.TV = Ratio(4, 3)
Ratio.WIDESCREEN = Ratio(16, 9)
Ratio.ULTRAWIDE = Ratio(21, 9)
Ratio.MOVIE = Ratio(185, 100)
Ratio.CINEMASCOPE = Ratio(239, 100)
