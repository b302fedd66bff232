"""
Resolution — CSS <resolution>

dpi, dpcm, dppx and its alias x. Values must be non-negative. Conversion
goes through dpi: 1dpcm = 2.54dpi, 1dppx = 1x = 96dpi.
"""

from typing import Any, ClassVar

from cssvalues.core.constants import DPI_PER_DPCM, DPI_PER_DPPX
from cssvalues.core.errors import InvalidValueError
from cssvalues.core.formatting import format_number
from cssvalues.core.numeric import is_negative
from cssvalues.values.base import CSSKeyword, CSSValue


class ResolutionUnit(CSSKeyword):
    """CSS resolution units"""

    DPI = "dpi"
    DPCM = "dpcm"
    DPPX = "dppx"
    X = "x"


_DPI_PER_UNIT = {
    ResolutionUnit.DPI: 1.0,
    ResolutionUnit.DPCM: DPI_PER_DPCM,
    ResolutionUnit.DPPX: DPI_PER_DPPX,
    ResolutionUnit.X: DPI_PER_DPPX,
}


class Resolution(CSSValue):
    """
    CSS resolution.

    Examples:
        >>> str(Resolution.dpi(300))
        '300dpi'
        >>> str(Resolution.x(2))
        '2x'
    """

    value: float
    unit: ResolutionUnit

    STANDARD: ClassVar["Resolution"]
    RETINA: ClassVar["Resolution"]
    PRINT: ClassVar["Resolution"]

    def __init__(self, **data: Any) -> None:
        value = data.get("value")
        if is_negative(value):
            raise InvalidValueError("Resolution", value, "must be non-negative")
        super().__init__(**data)

    @classmethod
    def dpi(cls, value: float) -> "Resolution":
        return cls(value=value, unit=ResolutionUnit.DPI)

    @classmethod
    def dpcm(cls, value: float) -> "Resolution":
        return cls(value=value, unit=ResolutionUnit.DPCM)

    @classmethod
    def dppx(cls, value: float) -> "Resolution":
        return cls(value=value, unit=ResolutionUnit.DPPX)

    @classmethod
    def x(cls, value: float) -> "Resolution":
        return cls(value=value, unit=ResolutionUnit.X)

    @property
    def in_dpi(self) -> float:
        return self.value * _DPI_PER_UNIT[self.unit]

    def converted(self, unit: ResolutionUnit) -> "Resolution":
        """
        Same resolution expressed in another unit.

        Examples:
            >>> str(Resolution.dppx(2).converted(ResolutionUnit.DPI))
            '192dpi'
        """
        return Resolution(value=self.in_dpi / _DPI_PER_UNIT[unit], unit=unit)

    def __str__(self) -> str:
        return f"{format_number(self.value)}{self.unit}"


Resolution.STANDARD = Resolution.dpi(96)
Resolution.RETINA = Resolution.dpi(192)
Resolution.PRINT = Resolution.dpi(300)
