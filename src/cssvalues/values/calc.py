"""
CalcSum — CSS math functions

Builders for calc(), min(), max() and clamp(). The expression is opaque
text: nothing is parsed or simplified.
"""

from typing import Any

from cssvalues.values.base import CSSValue

MATH_FUNCTION_PREFIXES = ("calc(", "min(", "max(", "clamp(")


class CalcSum(CSSValue):
    """
    CSS math expression.

    An expression that already is a complete math function renders as is;
    anything else is wrapped in calc().

    Examples:
        >>> str(CalcSum("100% - 20px"))
        'calc(100% - 20px)'
        >>> str(CalcSum.min("50%, 300px"))
        'min(50%, 300px)'
        >>> str(CalcSum.clamp("1rem", "2.5vw", "2rem"))
        'clamp(1rem, 2.5vw, 2rem)'
    """

    expression: str

    def __init__(self, expression: str, **data: Any) -> None:
        super().__init__(expression=expression, **data)

    @classmethod
    def calc(cls, expression: str) -> "CalcSum":
        return cls(expression)

    @classmethod
    def min(cls, expressions: str) -> "CalcSum":
        return cls(f"min({expressions})")

    @classmethod
    def max(cls, expressions: str) -> "CalcSum":
        return cls(f"max({expressions})")

    @classmethod
    def clamp(cls, minimum: str, preferred: str, maximum: str) -> "CalcSum":
        return cls(f"clamp({minimum}, {preferred}, {maximum})")

    @property
    def is_math_function(self) -> bool:
        return self.expression.startswith(MATH_FUNCTION_PREFIXES) and self.expression.endswith(")")

    def __str__(self) -> str:
        if self.is_math_function:
            return self.expression
        return f"calc({self.expression})"
