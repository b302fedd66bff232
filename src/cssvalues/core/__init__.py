"""
Core primitives of the CSS value layer.

Formatting rules, numeric helpers, constants and the exception hierarchy.
Nothing in here knows about concrete CSS types.
"""

from cssvalues.core.errors import CSSValueError, DivisionByZeroError, InvalidValueError
from cssvalues.core.formatting import css_text, format_number, join, quote
from cssvalues.core.numeric import (
    clamp,
    ensure_nonzero_divisor,
    is_negative,
    is_whole,
    round_half_away_from_zero,
    wrap_degrees,
)

__all__ = [
    # Errors
    "CSSValueError",
    "InvalidValueError",
    "DivisionByZeroError",
    # Formatting
    "format_number",
    "quote",
    "css_text",
    "join",
    # Numeric
    "clamp",
    "round_half_away_from_zero",
    "is_negative",
    "is_whole",
    "wrap_degrees",
    "ensure_nonzero_divisor",
]
