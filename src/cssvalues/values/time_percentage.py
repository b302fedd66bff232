"""
TimePercentage — CSS <time-percentage>
"""

from typing import Any, ClassVar, Union

from cssvalues.values.base import CSSValue
from cssvalues.values.percentage import Percentage, PercentageConvertible
from cssvalues.values.time import Time


class TimePercentage(CSSValue, PercentageConvertible):
    """
    A Time or a Percentage.

    Examples:
        >>> str(TimePercentage.ms(250))
        '250ms'
        >>> str(TimePercentage.HALF)
        '50%'
    """

    value: Union[Time, Percentage]

    ZERO: ClassVar["TimePercentage"]
    HALF: ClassVar["TimePercentage"]
    FULL: ClassVar["TimePercentage"]

    def __init__(self, value: Union[Time, Percentage], **data: Any) -> None:
        super().__init__(value=value, **data)

    @classmethod
    def from_percentage(cls, percentage: Percentage) -> "TimePercentage":
        return cls(percentage)

    @classmethod
    def s(cls, value: float) -> "TimePercentage":
        return cls(Time.s(value))

    @classmethod
    def ms(cls, value: float) -> "TimePercentage":
        return cls(Time.ms(value))

    def __mul__(self, other: Any) -> "TimePercentage":
        if not isinstance(other, (int, float)) or isinstance(other, bool):
            return NotImplemented
        return TimePercentage(self.value * other)

    __rmul__ = __mul__

    def __truediv__(self, other: Any) -> "TimePercentage":
        if not isinstance(other, (int, float)) or isinstance(other, bool):
            return NotImplemented
        return TimePercentage(self.value / other)

    def __str__(self) -> str:
        return str(self.value)


TimePercentage.ZERO = TimePercentage(Time.ZERO)
TimePercentage.HALF = TimePercentage(Percentage.HALF)
TimePercentage.FULL = TimePercentage(Percentage.FULL)
