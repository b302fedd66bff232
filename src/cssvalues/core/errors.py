"""
Exceptions raised by the CSS value layer.

Rendering never fails. The only failure channels are:
- validating constructors (Ratio, Resolution) rejecting out-of-grammar input
- division by zero in unit arithmetic

Malformed channels, out-of-range percentages and unusual angles are NOT
errors: they pass through to the rendered text as authored.
"""

from typing import Any


class CSSValueError(Exception):
    """Base class for every error raised by cssvalues."""

    pass


class InvalidValueError(CSSValueError, ValueError):
    """
    A validating constructor rejected its input.

    Raised by Ratio (negative width or height) and Resolution (negative value).

    Attributes:
        type_name: Name of the CSS type that rejected the value
        value: The rejected value
    """

    def __init__(self, type_name: str, value: Any, reason: str):
        self.type_name = type_name
        self.value = value
        super().__init__(f"Invalid {type_name} value {value!r}: {reason}")


class DivisionByZeroError(CSSValueError, ZeroDivisionError):
    """
    Unit arithmetic was asked to divide by zero.

    CSS has no division-by-zero concept at authoring time, so this is a
    programming error at the call site, not a value that can be rendered.
    """

    def __init__(self, dividend: Any):
        self.dividend = dividend
        super().__init__(f"Division by zero: {dividend} / 0")
