"""
Length — CSS <length>

A length is one of four variants:
- LengthDimension: number + unit ("10px", "1.5em")
- LengthSizing: intrinsic sizing keyword ("auto", "max-content", ...)
- LengthCalc: raw calc() body, rendered as "calc(<expression>)"
- LengthGlobal: a CSS-wide keyword ("inherit", ...)

ARITHMETIC:
Same-unit dimensions combine numerically and keep their unit. Every other
combination (different units, keywords, calc expressions) degrades to a
calc() expression built from each operand's rendered text:

    Length.px(10) + Length.px(5)   -> 15px
    Length.px(10) + Length.em(2)   -> calc(10px + 2em)

No unit conversion is ever attempted (px and em are not convertible without
layout information). Division by zero raises DivisionByZeroError.

LITERALS:
Bare numbers are NOT lengths. Use Length.px(n) (or Length.coerce(n), which
documents the pixel default) at call sites.
"""

import logging
import operator
from typing import Any, Callable, ClassVar, Union

from cssvalues.core.constants import DEFAULT_LENGTH_UNIT
from cssvalues.core.formatting import format_number
from cssvalues.core.numeric import ensure_nonzero_divisor
from cssvalues.values.base import CSSKeyword, CSSUnion
from cssvalues.values.global_keyword import GlobalConvertible, GlobalKeyword

logger = logging.getLogger(__name__)


# =============================================================================
# ENUMS
# =============================================================================


class LengthUnit(CSSKeyword):
    """CSS length units"""

    # Absolute
    PX = "px"
    CM = "cm"
    MM = "mm"
    Q = "q"
    IN = "in"
    PT = "pt"
    PC = "pc"

    # Font-relative
    EM = "em"
    REM = "rem"
    EX = "ex"
    CH = "ch"
    CAP = "cap"
    IC = "ic"
    LH = "lh"
    RLH = "rlh"

    # Viewport-relative
    VW = "vw"
    VH = "vh"
    VMIN = "vmin"
    VMAX = "vmax"

    # Grid
    FR = "fr"


class SizingKeyword(CSSKeyword):
    """Intrinsic sizing keywords accepted where a length is expected"""

    AUTO = "auto"
    MAX_CONTENT = "max-content"
    MIN_CONTENT = "min-content"
    FIT_CONTENT = "fit-content"


# =============================================================================
# CONVERTIBLE MIXIN
# =============================================================================


class LengthConvertible:
    """
    Mixin: a type that can be built from a Length.

    Implement from_length(); every unit factory and zero() come for free:

        class BorderSpacing(CSSValue, LengthConvertible):
            length: Length

            @classmethod
            def from_length(cls, length):
                return cls(length=length)

        BorderSpacing.px(2)   # BorderSpacing(length=LengthDimension(2px))
    """

    @classmethod
    def from_length(cls, length: "Length"):
        raise NotImplementedError(f"{cls.__name__} must implement from_length()")

    @classmethod
    def with_unit(cls, value: float, unit: Union[LengthUnit, str]):
        return cls.from_length(LengthDimension(value=value, unit=unit))

    @classmethod
    def px(cls, value: float):
        return cls.with_unit(value, LengthUnit.PX)

    @classmethod
    def em(cls, value: float):
        return cls.with_unit(value, LengthUnit.EM)

    @classmethod
    def rem(cls, value: float):
        return cls.with_unit(value, LengthUnit.REM)

    @classmethod
    def vw(cls, value: float):
        return cls.with_unit(value, LengthUnit.VW)

    @classmethod
    def vh(cls, value: float):
        return cls.with_unit(value, LengthUnit.VH)

    @classmethod
    def vmin(cls, value: float):
        return cls.with_unit(value, LengthUnit.VMIN)

    @classmethod
    def vmax(cls, value: float):
        return cls.with_unit(value, LengthUnit.VMAX)

    @classmethod
    def cm(cls, value: float):
        return cls.with_unit(value, LengthUnit.CM)

    @classmethod
    def mm(cls, value: float):
        return cls.with_unit(value, LengthUnit.MM)

    @classmethod
    def q(cls, value: float):
        return cls.with_unit(value, LengthUnit.Q)

    @classmethod
    def in_(cls, value: float):
        """Inches ("in" is a Python keyword)."""
        return cls.with_unit(value, LengthUnit.IN)

    @classmethod
    def pt(cls, value: float):
        return cls.with_unit(value, LengthUnit.PT)

    @classmethod
    def pc(cls, value: float):
        return cls.with_unit(value, LengthUnit.PC)

    @classmethod
    def ex(cls, value: float):
        return cls.with_unit(value, LengthUnit.EX)

    @classmethod
    def ch(cls, value: float):
        return cls.with_unit(value, LengthUnit.CH)

    @classmethod
    def cap(cls, value: float):
        return cls.with_unit(value, LengthUnit.CAP)

    @classmethod
    def ic(cls, value: float):
        return cls.with_unit(value, LengthUnit.IC)

    @classmethod
    def lh(cls, value: float):
        return cls.with_unit(value, LengthUnit.LH)

    @classmethod
    def rlh(cls, value: float):
        return cls.with_unit(value, LengthUnit.RLH)

    @classmethod
    def fr(cls, value: float):
        return cls.with_unit(value, LengthUnit.FR)

    @classmethod
    def zero(cls):
        return cls.px(0)


# =============================================================================
# LENGTH
# =============================================================================


class Length(CSSUnion, LengthConvertible, GlobalConvertible):
    """
    CSS length (base of the four variants).

    Construct through the classmethods, never directly:

        Length.px(200)            -> 200px
        Length.AUTO               -> auto
        Length.calc("100% - 2em") -> calc(100% - 2em)
        Length.inherit()          -> inherit
    """

    AUTO: ClassVar["Length"]
    MAX_CONTENT: ClassVar["Length"]
    MIN_CONTENT: ClassVar["Length"]
    FIT_CONTENT: ClassVar["Length"]

    # -------------------------------------------------------------------------
    # Construction
    # -------------------------------------------------------------------------

    @classmethod
    def from_length(cls, length: "Length") -> "Length":
        return length

    @classmethod
    def from_global(cls, keyword: GlobalKeyword) -> "Length":
        return LengthGlobal(keyword=keyword)

    @classmethod
    def sizing(cls, keyword: Union[SizingKeyword, str]) -> "Length":
        return LengthSizing(keyword=keyword)

    @classmethod
    def calc(cls, expression: str) -> "Length":
        return LengthCalc(expression=expression)

    @classmethod
    def coerce(cls, value: Union["Length", int, float]) -> "Length":
        """
        Explicit literal coercion: a bare number becomes a pixel length.

        The pixel default is a convenience of this library, not a CSS rule.

        Raises:
            TypeError: If value is neither a Length nor a number
        """
        if isinstance(value, Length):
            return value
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return cls.with_unit(value, DEFAULT_LENGTH_UNIT)
        raise TypeError(f"Cannot coerce {type(value).__name__} to Length")

    @property
    def magnitude(self) -> float:
        """abs(value) for dimensions, 0 for keywords, calc expressions and globals."""
        return 0.0

    # -------------------------------------------------------------------------
    # Arithmetic
    # -------------------------------------------------------------------------

    def _combine(self, other: Any, symbol: str, op: Callable[[float, float], float]) -> "Length":
        if not isinstance(other, Length):
            return NotImplemented
        if (
            isinstance(self, LengthDimension)
            and isinstance(other, LengthDimension)
            and self.unit == other.unit
        ):
            return LengthDimension(value=op(self.value, other.value), unit=self.unit)
        logger.debug("Length %s %s %s cannot be reduced, falling back to calc()", self, symbol, other)
        return Length.calc(f"{self} {symbol} {other}")

    def __add__(self, other: Any) -> "Length":
        return self._combine(other, "+", operator.add)

    def __sub__(self, other: Any) -> "Length":
        return self._combine(other, "-", operator.sub)

    def __mul__(self, other: Any) -> "Length":
        if isinstance(other, (int, float)) and not isinstance(other, bool):
            if isinstance(self, LengthDimension):
                return LengthDimension(value=self.value * other, unit=self.unit)
            logger.debug("Length %s * %s cannot be reduced, falling back to calc()", self, other)
            return Length.calc(f"{self} * {format_number(other)}")
        return self._combine(other, "*", operator.mul)

    def __rmul__(self, other: Any) -> "Length":
        if isinstance(other, (int, float)) and not isinstance(other, bool):
            return self * other
        return NotImplemented

    def __truediv__(self, other: Any) -> "Length":
        if isinstance(other, Length):
            if isinstance(other, LengthDimension):
                ensure_nonzero_divisor(self, other.value)
            return self._combine(other, "/", operator.truediv)
        if not isinstance(other, (int, float)) or isinstance(other, bool):
            return NotImplemented
        ensure_nonzero_divisor(self, other)
        return self._divide_by_scalar(other)

    def _divide_by_scalar(self, divisor: float) -> "Length":
        # Keywords and globals cannot be divided
        return self


class LengthDimension(Length):
    """Number + unit"""

    value: float
    unit: LengthUnit

    @property
    def magnitude(self) -> float:
        return abs(self.value)

    def _divide_by_scalar(self, divisor: float) -> "Length":
        return LengthDimension(value=self.value / divisor, unit=self.unit)

    def __str__(self) -> str:
        return f"{format_number(self.value)}{self.unit}"


class LengthSizing(Length):
    """Intrinsic sizing keyword"""

    keyword: SizingKeyword

    def __str__(self) -> str:
        return self.keyword.value


class LengthCalc(Length):
    """Raw calc() body"""

    expression: str

    def _divide_by_scalar(self, divisor: float) -> "Length":
        return LengthCalc(expression=f"({self.expression}) / {format_number(divisor)}")

    def __str__(self) -> str:
        return f"calc({self.expression})"


class LengthGlobal(Length):
    """CSS-wide keyword in place of a length"""

    keyword: GlobalKeyword

    def __str__(self) -> str:
        return self.keyword.value


Length.AUTO = LengthSizing(keyword=SizingKeyword.AUTO)
Length.MAX_CONTENT = LengthSizing(keyword=SizingKeyword.MAX_CONTENT)
Length.MIN_CONTENT = LengthSizing(keyword=SizingKeyword.MIN_CONTENT)
Length.FIT_CONTENT = LengthSizing(keyword=SizingKeyword.FIT_CONTENT)
