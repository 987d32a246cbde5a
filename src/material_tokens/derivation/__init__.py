# material_tokens/derivation/__init__.py

"""
derivation
==========

Does: Token derivation pipeline: theme model, engine adapter, derivers and the
      orchestrator that merges their outputs.
Returns: Re-exports the entry points and the error types callers may catch.
Used by: `material_tokens` top-level package and the CLI.
"""
from __future__ import annotations

from .color.codec import HexParseError
from .color.config import ConfigTypeError, TokenConfig, ToneRangeError
from .color.derivers import DuplicateCustomColorError, TintTableError
from .color.engine import theme_from_source_color
from .color.theme import CustomColor, MalformedThemeError, Theme
from .orchestrator import (
    derive_properties,
    properties_from_source_color,
    properties_from_theme,
)

__all__: list[str] = [
    "properties_from_theme",
    "properties_from_source_color",
    "derive_properties",
    "theme_from_source_color",
    "CustomColor",
    "Theme",
    "TokenConfig",
    "MalformedThemeError",
    "ToneRangeError",
    "ConfigTypeError",
    "TintTableError",
    "DuplicateCustomColorError",
    "HexParseError",
]
__docformat__ = "google"
