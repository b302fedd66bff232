"""
CSS token formatting.

Numbers: integral values render without a decimal point ("2", not "2.0");
everything else renders in Python's shortest round-trip form ("1.5", "0.1").
Strings that need quoting (font family names, feature tags, custom color
profiles) are wrapped in double quotes.
"""

from enum import Enum
from typing import Any, Iterable


def format_number(value: float) -> str:
    """
    Canonical CSS rendering of a number.

    Args:
        value: Any int or float

    Returns:
        Integral values without a decimal point, others via repr()

    Examples:
        >>> format_number(2.0)
        '2'
        >>> format_number(33.33)
        '33.33'
        >>> format_number(-0.0)
        '0'
    """
    value = float(value)
    if value % 1 == 0:
        return str(int(value))
    # NaN and +/-inf fall through here: value % 1 is nan for them
    return repr(value)


def quote(text: str) -> str:
    """
    Wrap text in double quotes, escaping backslashes and embedded double quotes.

    Examples:
        >>> quote("Open Sans")
        '"Open Sans"'
    """
    escaped = text.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def css_text(value: Any) -> str:
    """
    Render any supported component as CSS text.

    Enum members render their value, numbers go through format_number,
    everything else (value models, strings) through str().
    """
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, bool):
        raise TypeError("booleans have no CSS rendering")
    if isinstance(value, (int, float)):
        return format_number(value)
    return str(value)


def join(values: Iterable[Any], separator: str = " ") -> str:
    """Render each component and join them with a literal separator."""
    return separator.join(css_text(v) for v in values)
