# constants.py
# ============

"""
constants.
=========

Does: Define the immutable default tables of the derivation pipeline
      (tone list, prefixes, role vocabularies, surface-container tones,
      surface-tint levels).
Used By: The orchestrator, which injects them into derivers as parameters,
         and the theme model, which validates role maps against them.
Returns: Pure data structures only (no side effects).
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, Tuple

# ── 1) Defaults ──────────────────────────────────────────────────────────────

DEFAULT_TONES: Tuple[int, ...] = (0, 5, 10, 20, 30, 40, 50, 60, 70, 80, 90, 100)

DEFAULT_PALETTE_PREFIX = "md-ref-palette-"
DEFAULT_COLOR_PREFIX = "md-sys-color-"
DEFAULT_CUSTOM_COLOR_PREFIX = "md-custom-color-"

DEFAULT_RGB_SEPARATOR = ","
DEFAULT_RGB_SUFFIX = "-rgb"

LIGHT_SUFFIX = "-light"
DARK_SUFFIX = "-dark"

TONE_MIN, TONE_MAX = 0, 100


# ── 2) Role vocabularies (closed sets, order = emission order) ───────────────

SCHEME_ROLES: Tuple[str, ...] = (
    "primary",
    "onPrimary",
    "primaryContainer",
    "onPrimaryContainer",
    "secondary",
    "onSecondary",
    "secondaryContainer",
    "onSecondaryContainer",
    "tertiary",
    "onTertiary",
    "tertiaryContainer",
    "onTertiaryContainer",
    "error",
    "onError",
    "errorContainer",
    "onErrorContainer",
    "background",
    "onBackground",
    "surface",
    "onSurface",
    "surfaceVariant",
    "onSurfaceVariant",
    "outline",
    "outlineVariant",
    "shadow",
    "scrim",
    "inverseSurface",
    "inverseOnSurface",
    "inversePrimary",
)

# "color" is the placeholder replaced by the custom color's tokenized name
COLOR_GROUP_ROLES: Tuple[str, ...] = (
    "color",
    "onColor",
    "colorContainer",
    "onColorContainer",
)
CUSTOM_ROLE_PLACEHOLDER = "color"


# ── 3) Surface containers: role → (light tone, dark tone) ────────────────────

SURFACE_CONTAINER_TONES: Mapping[str, Tuple[int, int]] = MappingProxyType(
    {
        "surface-dim": (87, 6),
        "surface-bright": (98, 24),
        "surface-container-lowest": (100, 4),
        "surface-container-low": (96, 10),
        "surface-container": (94, 12),
        "surface-container-high": (92, 17),
        "surface-container-highest": (90, 22),
    }
)


# ── 4) Surface tint: blend ratio of the key color over the surface ───────────
# Both tuples are consumed pairwise; their lengths must match.

SURFACE_TINT_ROLES: Tuple[str, ...] = (
    "background-tint",
    "surface-level1",
    "surface-level2",
    "surface-level3",
    "surface-level4",
    "surface-level5",
)
SURFACE_TINT_RATIOS: Tuple[float, ...] = (0.02, 0.05, 0.08, 0.11, 0.12, 0.14)

# alpha overlays of the key color, one per ratio: surface-tint-level{n}
SURFACE_TINT_OVERLAY_ROLE = "surface-tint-level"
