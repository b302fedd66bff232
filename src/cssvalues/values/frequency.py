"""
Frequency — CSS <frequency>

Hz and kHz. Equality is by value and unit: 1000Hz != 1kHz.
"""

from cssvalues.core.constants import HZ_PER_KHZ
from cssvalues.core.formatting import format_number
from cssvalues.values.base import CSSKeyword, CSSValue


class FrequencyUnit(CSSKeyword):
    """CSS frequency units"""

    HZ = "Hz"
    KHZ = "kHz"


class Frequency(CSSValue):
    """
    CSS frequency.

    Examples:
        >>> str(Frequency.hz(440))
        '440Hz'
        >>> str(Frequency.khz(2.5))
        '2.5kHz'
    """

    value: float
    unit: FrequencyUnit

    @classmethod
    def hz(cls, value: float) -> "Frequency":
        return cls(value=value, unit=FrequencyUnit.HZ)

    @classmethod
    def khz(cls, value: float) -> "Frequency":
        return cls(value=value, unit=FrequencyUnit.KHZ)

    @property
    def in_hertz(self) -> float:
        if self.unit is FrequencyUnit.KHZ:
            return self.value * HZ_PER_KHZ
        return self.value

    def converted(self, unit: FrequencyUnit) -> "Frequency":
        """Same frequency expressed in another unit."""
        if unit is FrequencyUnit.KHZ:
            return Frequency.khz(self.in_hertz / HZ_PER_KHZ)
        return Frequency.hz(self.in_hertz)

    def __str__(self) -> str:
        return f"{format_number(self.value)}{self.unit}"
