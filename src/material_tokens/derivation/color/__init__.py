"""
color.
=====

Does: Aggregate the color-domain building blocks of the token pipeline:
      default tables, the theme model, the engine adapter, the codec and the
      typed configuration.
Used By: Derivers, the orchestrator and the CLI.
Returns: Pure data structures and functions; no side effects at import.
"""

# ── Constants ────────────────────────────────────────────────────────────────
from .constants import (
    COLOR_GROUP_ROLES,
    DEFAULT_TONES,
    SCHEME_ROLES,
    SURFACE_CONTAINER_TONES,
    SURFACE_TINT_RATIOS,
    SURFACE_TINT_ROLES,
)

# ── Codec ────────────────────────────────────────────────────────────────────
from .codec import (
    HexParseError,
    channels_from_hex,
    color_from_hex,
    hex_alpha_from_color,
    hex_from_color,
    rgb_from_hex,
)

# ── Theme model & engine ─────────────────────────────────────────────────────
from .theme import (
    ColorGroup,
    CustomColor,
    CustomColorGroup,
    MalformedThemeError,
    Scheme,
    Theme,
    TonalPaletteLike,
)
from .engine import (
    ColorEngine,
    MaterialColorEngine,
    default_engine,
    theme_from_source_color,
)

# ── Config ───────────────────────────────────────────────────────────────────
from .config import (
    DEFAULT_CONFIG,
    ConfigOverrides,
    ConfigTypeError,
    PrefixConfig,
    RgbConfig,
    TokenConfig,
    ToneRangeError,
    merge_config,
    validate_tones,
)

__all__ = [
    # constants
    "DEFAULT_TONES",
    "SCHEME_ROLES",
    "COLOR_GROUP_ROLES",
    "SURFACE_CONTAINER_TONES",
    "SURFACE_TINT_ROLES",
    "SURFACE_TINT_RATIOS",
    # codec
    "HexParseError",
    "channels_from_hex",
    "color_from_hex",
    "hex_alpha_from_color",
    "hex_from_color",
    "rgb_from_hex",
    # theme / engine
    "MalformedThemeError",
    "TonalPaletteLike",
    "Scheme",
    "ColorGroup",
    "CustomColor",
    "CustomColorGroup",
    "Theme",
    "ColorEngine",
    "MaterialColorEngine",
    "default_engine",
    "theme_from_source_color",
    # config
    "ConfigTypeError",
    "ToneRangeError",
    "PrefixConfig",
    "RgbConfig",
    "TokenConfig",
    "ConfigOverrides",
    "DEFAULT_CONFIG",
    "merge_config",
    "validate_tones",
]
