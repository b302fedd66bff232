"""
Numeric primitives shared by the value types.

- clamping for byte encoding and bounded properties
- explicit half-away-from-zero rounding (the alpha byte rule)
- sign check on raw constructor input
- degree wrapping into [0, 360)
- zero-divisor guard for unit arithmetic
"""

import math
from typing import Any

from cssvalues.core.constants import DEGREES_PER_TURN
from cssvalues.core.errors import DivisionByZeroError


def clamp(value: float, min_val: float, max_val: float) -> float:
    """
    Clamp a value into [min_val, max_val].

    Args:
        value: Value to clamp
        min_val: Lower bound
        max_val: Upper bound

    Returns:
        min(max(value, min_val), max_val)

    Raises:
        ValueError: If min_val > max_val

    Examples:
        >>> clamp(300, 0, 255)
        255
        >>> clamp(-4, 0, 255)
        0
    """
    if min_val > max_val:
        raise ValueError(f"min_val ({min_val}) must be <= max_val ({max_val})")
    return min(max(value, min_val), max_val)


def round_half_away_from_zero(value: float) -> int:
    """
    Round to the nearest integer, ties away from zero.

    Python's round() uses banker's rounding (round(126.5) == 126); hex alpha
    encoding needs a rule that does not depend on the parity of the result.

    Examples:
        >>> round_half_away_from_zero(127.5)
        128
        >>> round_half_away_from_zero(126.5)
        127
        >>> round_half_away_from_zero(-2.5)
        -3
    """
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def is_whole(value: float) -> bool:
    """True when value has no fractional part (and is finite)."""
    return math.isfinite(value) and value % 1 == 0


def is_negative(value: Any) -> bool:
    """
    True when value reads as a number below zero.

    Numeric strings and Decimals are read the way pydantic's lax mode will
    coerce them. Anything that does not read as a number returns False and
    is left for model validation to reject.

    Examples:
        >>> is_negative("-16")
        True
        >>> is_negative("abc")
        False
    """
    if isinstance(value, bool):
        return False
    try:
        return float(value) < 0
    except (TypeError, ValueError):
        return False


def wrap_degrees(degrees: float) -> float:
    """
    Reduce an angle in degrees into [0, 360).

    ((degrees fmod 360) + 360) fmod 360: the first fmod keeps the sign of
    the input, the offset makes it positive, the second fmod wraps 360 to 0.

    Examples:
        >>> wrap_degrees(-90)
        270.0
        >>> wrap_degrees(480)
        120.0
        >>> wrap_degrees(720)
        0.0
    """
    return math.fmod(math.fmod(degrees, DEGREES_PER_TURN) + DEGREES_PER_TURN, DEGREES_PER_TURN)


def ensure_nonzero_divisor(dividend: Any, divisor: float) -> float:
    """
    Guard for unit arithmetic division.

    Args:
        dividend: Value being divided (used in the error message)
        divisor: Divisor

    Returns:
        divisor unchanged

    Raises:
        DivisionByZeroError: If divisor == 0
    """
    if divisor == 0:
        raise DivisionByZeroError(dividend)
    return divisor
