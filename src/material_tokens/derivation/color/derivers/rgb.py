# src/material_tokens/derivation/color/derivers/rgb.py
from __future__ import annotations

"""
derivers.rgb
============

Does: Build the decimal-channel sibling of a hex token map
      (`--md-sys-color-primary` → `--md-sys-color-primary-rgb: 64,166,115`)
      for use inside `rgb()` / `rgba()` stylesheet expressions.
Used By: orchestrator.derive_properties, on the palette, scheme, custom color
         and surface-container maps only.
"""

from typing import Dict, Mapping, Optional

from material_tokens.derivation.color.codec import rgb_from_hex

__all__ = ["rgb_properties"]
__docformat__ = "google"


def rgb_properties(
    properties: Mapping[str, str],
    *,
    separator: Optional[str] = ",",
    suffix: str = "-rgb",
    lenient: bool = False,
) -> Dict[str, str]:
    """Does: `{name}{suffix}` → channels of `properties[name]` joined by `separator`."""
    return {
        f"{name}{suffix}": rgb_from_hex(hex_color, separator, lenient=lenient)
        for name, hex_color in properties.items()
    }
