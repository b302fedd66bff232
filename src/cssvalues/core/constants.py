"""
Library-wide constants for the CSS value layer.

Defaults for literal coercion, hex byte encoding bounds and the conversion
factors used by unit conversions. Everything here is read-only.
"""

from typing import Final


# =============================================================================
# LITERAL COERCION DEFAULTS
# =============================================================================
# Unit applied when a bare number is coerced into a Length / LengthPercentage.
# This is an ergonomic default of the library, not a CSS rule.
DEFAULT_LENGTH_UNIT: Final[str] = "px"

# Unit applied when a bare number is coerced into an Angle.
DEFAULT_ANGLE_UNIT: Final[str] = "deg"

# Unit applied when a bare number is coerced into a Time.
DEFAULT_TIME_UNIT: Final[str] = "s"


# =============================================================================
# HEX ENCODING
# =============================================================================
# Byte bounds for HexColor.rgb / HexColor.rgba channel clamping
HEX_CHANNEL_MIN: Final[int] = 0
HEX_CHANNEL_MAX: Final[int] = 255


# =============================================================================
# ANGLE CONVERSION
# =============================================================================
DEGREES_PER_TURN: Final[float] = 360.0
DEGREES_PER_GRAD: Final[float] = 0.9


# =============================================================================
# RESOLUTION / FREQUENCY / TIME CONVERSION
# =============================================================================
# 1 dpcm = 2.54 dpi
DPI_PER_DPCM: Final[float] = 2.54

# 1 dppx = 1x = 96 dpi
DPI_PER_DPPX: Final[float] = 96.0

HZ_PER_KHZ: Final[float] = 1000.0

MS_PER_SECOND: Final[float] = 1000.0


# =============================================================================
# PROPERTY CLAMPS
# =============================================================================
FONT_WEIGHT_MIN: Final[int] = 1
FONT_WEIGHT_MAX: Final[int] = 1000

OPACITY_MIN: Final[float] = 0.0
OPACITY_MAX: Final[float] = 1.0


# =============================================================================
# COLOR FACTORY CLAMPS
# =============================================================================
# Bounds applied by the ColorConvertible factories (not by Color itself)
COLOR_PERCENT_MIN: Final[float] = 0.0
COLOR_PERCENT_MAX: Final[float] = 100.0

COLOR_ALPHA_MIN: Final[float] = 0.0
COLOR_ALPHA_MAX: Final[float] = 1.0

OKLCH_LIGHTNESS_MIN: Final[float] = 0.0
OKLCH_LIGHTNESS_MAX: Final[float] = 1.0
