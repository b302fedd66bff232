"""
Shared CSS value types.

Numbers, percentages, dimensions (length, angle, time, resolution,
frequency, flex), their "either" unions, ratios, math functions, positions,
urls and the global keywords. Color types live in cssvalues.color.
"""

from cssvalues.values.alpha import AlphaValue
from cssvalues.values.angle import Angle, AngleConvertible, AngleUnit
from cssvalues.values.angle_percentage import AnglePercentage
from cssvalues.values.base import CSSKeyword, CSSUnion, CSSValue
from cssvalues.values.calc import CalcSum
from cssvalues.values.flex import Flex
from cssvalues.values.frequency import Frequency, FrequencyUnit
from cssvalues.values.global_keyword import GlobalConvertible, GlobalKeyword, WithGlobal
from cssvalues.values.hue import Hue
from cssvalues.values.length import (
    Length,
    LengthCalc,
    LengthConvertible,
    LengthDimension,
    LengthGlobal,
    LengthSizing,
    LengthUnit,
    SizingKeyword,
)
from cssvalues.values.length_percentage import LengthPercentage, LengthPercentageConvertible
from cssvalues.values.number import Number, NumberConvertible
from cssvalues.values.percentage import Percentage, PercentageConvertible
from cssvalues.values.position import Position, PositionKeyword
from cssvalues.values.ratio import Ratio
from cssvalues.values.resolution import Resolution, ResolutionUnit
from cssvalues.values.time import Time, TimeUnit
from cssvalues.values.time_percentage import TimePercentage
from cssvalues.values.url import QuoteStyle, Url

__all__ = [
    # Base
    "CSSValue",
    "CSSKeyword",
    "CSSUnion",
    # Global keywords
    "GlobalKeyword",
    "GlobalConvertible",
    "WithGlobal",
    # Numbers
    "Number",
    "NumberConvertible",
    "Percentage",
    "PercentageConvertible",
    "AlphaValue",
    # Length
    "Length",
    "LengthDimension",
    "LengthSizing",
    "LengthCalc",
    "LengthGlobal",
    "LengthUnit",
    "SizingKeyword",
    "LengthConvertible",
    "LengthPercentage",
    "LengthPercentageConvertible",
    # Angle
    "Angle",
    "AngleUnit",
    "AngleConvertible",
    "AnglePercentage",
    "Hue",
    # Other dimensions
    "Time",
    "TimeUnit",
    "TimePercentage",
    "Resolution",
    "ResolutionUnit",
    "Frequency",
    "FrequencyUnit",
    "Flex",
    "Ratio",
    # Composite
    "CalcSum",
    "Position",
    "PositionKeyword",
    "Url",
    "QuoteStyle",
]
