"""
codec.py
========

Does: Convert between 24-bit color ints, `#rrggbb` / `#rrggbbaa` strings and
      decimal channel strings (`"64,166,115"` / `"64 166 115"`).
Used By: Every deriver (hex rendering) and the RGB variant expander.
Returns: Strings or (r, g, b) tuples; malformed hex raises HexParseError
         unless the caller opts into lenient zero-channel fallback.
"""

from __future__ import annotations

import logging
from typing import Tuple

import webcolors

__all__ = [
    "RGB",
    "HexParseError",
    "channels_from_color",
    "color_from_hex",
    "hex_from_color",
    "hex_alpha_from_color",
    "channels_from_hex",
    "rgb_from_hex",
]
__docformat__ = "google"

logger = logging.getLogger(__name__)

RGB = Tuple[int, int, int]


class HexParseError(ValueError):
    """Raise when a string is not a `#rgb` / `#rrggbb` hex color."""


# =============================================================================
# 1) INT → HEX
# =============================================================================

def channels_from_color(color: int) -> RGB:
    """Does: Split the low 24 bits of an ARGB int into (r, g, b)."""
    return (color >> 16) & 0xFF, (color >> 8) & 0xFF, color & 0xFF


def color_from_hex(hex_color: str) -> int:
    """Does: Parse `#rrggbb` into an opaque ARGB int (alpha 0xff)."""
    r, g, b = channels_from_hex(hex_color)
    return 0xFF000000 | (r << 16) | (g << 8) | b


def hex_from_color(color: int) -> str:
    """Does: Render a 24-bit color as lowercase `#rrggbb` (alpha bits ignored)."""
    return webcolors.rgb_to_hex(channels_from_color(color))


def hex_alpha_from_color(color: int, alpha: float) -> str:
    """Does: Render `#rrggbbaa` where aa = round(alpha * 255), zero-padded."""
    if not 0.0 <= alpha <= 1.0:
        raise ValueError(f"alpha must be within [0, 1], got {alpha!r}")
    return f"{hex_from_color(color)}{round(alpha * 255):02x}"


# =============================================================================
# 2) HEX → CHANNELS
# =============================================================================

def channels_from_hex(hex_color: str, *, lenient: bool = False) -> RGB:
    """
    Does: Parse `#rrggbb` (leading '#' optional, `#rgb` accepted) into channels.
    Returns: (r, g, b) each in [0, 255].
    Raises: HexParseError on malformed input, unless `lenient` is set, in
            which case (0, 0, 0) is returned and a warning is logged.
    """
    try:
        if not isinstance(hex_color, str):
            raise ValueError(f"expected str, got {type(hex_color).__name__}")
        value = hex_color.strip()
        if not value.startswith("#"):
            value = f"#{value}"
        rgb = webcolors.hex_to_rgb(value)
    except ValueError as e:
        if lenient:
            logger.warning("[codec] malformed hex %r → zero channels (%s)", hex_color, e)
            return (0, 0, 0)
        raise HexParseError(f"Not a hex color: {hex_color!r}") from e
    return rgb.red, rgb.green, rgb.blue


def rgb_from_hex(
    hex_color: str,
    separator: str | None = ",",
    *,
    lenient: bool = False,
) -> str:
    """
    Does: Render a hex color as decimal channels joined by `separator`.
          A None/False separator joins with a single space, the form
          required by space-separated `rgb()` syntax.
    Returns: e.g. "64,166,115" or "64 166 115".
    """
    r, g, b = channels_from_hex(hex_color, lenient=lenient)
    sep = separator if separator else " "
    return f"{r}{sep}{g}{sep}{b}"
