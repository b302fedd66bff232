"""
HexColor — CSS hex color notation

Stores the text as given, with a leading "#" added when missing. The
rgb()/rgba() builders clamp every channel to 0-255 and encode uppercase;
alpha is scaled from 0-1 and rounded half away from zero (0.5 -> 80).
is_valid is advisory: construction never rejects malformed input.
"""

import logging
import re
from typing import Any, Optional, Tuple

from cssvalues.core.constants import HEX_CHANNEL_MAX, HEX_CHANNEL_MIN
from cssvalues.core.numeric import clamp, round_half_away_from_zero
from cssvalues.values.base import CSSValue

logger = logging.getLogger(__name__)

# Used with fullmatch(): "$" alone would accept a trailing newline
HEX_PATTERN = re.compile(r"#([0-9A-Fa-f]{3}|[0-9A-Fa-f]{4}|[0-9A-Fa-f]{6}|[0-9A-Fa-f]{8})")


def _channel_byte(value: int, name: str) -> int:
    clamped = int(clamp(value, HEX_CHANNEL_MIN, HEX_CHANNEL_MAX))
    if clamped != value:
        logger.debug("Hex %s channel %s clamped to %s", name, value, clamped)
    return clamped


def _alpha_byte(alpha: float) -> int:
    clamped = clamp(alpha, 0.0, 1.0)
    if clamped != alpha:
        logger.debug("Hex alpha %s clamped to %s", alpha, clamped)
    return round_half_away_from_zero(clamped * HEX_CHANNEL_MAX)


class HexColor(CSSValue):
    """
    CSS hex color.

    Equality is on the stored text, so "#FF0000" != "#ff0000".

    Examples:
        >>> str(HexColor("ff0000"))
        '#ff0000'
        >>> str(HexColor.rgb(255, 0, 0))
        '#FF0000'
        >>> str(HexColor.rgba(0, 0, 255, 0.5))
        '#0000FF80'
    """

    value: str

    def __init__(self, value: str, **data: Any) -> None:
        if not value.startswith("#"):
            value = "#" + value
        super().__init__(value=value, **data)

    @classmethod
    def rgb(cls, red: int, green: int, blue: int) -> "HexColor":
        """
        Encode byte channels as #RRGGBB.

        Args:
            red: Red channel, clamped to 0-255
            green: Green channel, clamped to 0-255
            blue: Blue channel, clamped to 0-255

        Returns:
            Uppercase 6-digit hex color
        """
        r = _channel_byte(red, "red")
        g = _channel_byte(green, "green")
        b = _channel_byte(blue, "blue")
        return cls(f"#{r:02X}{g:02X}{b:02X}")

    @classmethod
    def rgba(cls, red: int, green: int, blue: int, alpha: float) -> "HexColor":
        """
        Encode byte channels and a 0-1 alpha as #RRGGBBAA.

        Args:
            red: Red channel, clamped to 0-255
            green: Green channel, clamped to 0-255
            blue: Blue channel, clamped to 0-255
            alpha: Opacity, clamped to 0-1, then scaled to 0-255 with
                ties rounded away from zero

        Returns:
            Uppercase 8-digit hex color
        """
        r = _channel_byte(red, "red")
        g = _channel_byte(green, "green")
        b = _channel_byte(blue, "blue")
        a = _alpha_byte(alpha)
        return cls(f"#{r:02X}{g:02X}{b:02X}{a:02X}")

    @property
    def is_valid(self) -> bool:
        """True for #RGB, #RGBA, #RRGGBB and #RRGGBBAA (either case)."""
        return HEX_PATTERN.fullmatch(self.value) is not None

    def to_rgb(self) -> Optional[Tuple[int, int, int, Optional[int]]]:
        """
        Decode channels.

        Returns:
            (red, green, blue, alpha) bytes, alpha None when the notation
            has no alpha digits; None when the value is not valid hex

        Examples:
            >>> HexColor("#f80").to_rgb()
            (255, 136, 0, None)
        """
        if not self.is_valid:
            return None
        digits = self.value[1:]
        if len(digits) in (3, 4):
            digits = "".join(d * 2 for d in digits)
        channels = [int(digits[i:i + 2], 16) for i in range(0, len(digits), 2)]
        alpha = channels[3] if len(channels) == 4 else None
        return channels[0], channels[1], channels[2], alpha

    def __str__(self) -> str:
        return self.value
