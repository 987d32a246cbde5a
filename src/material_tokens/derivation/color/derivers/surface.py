# src/material_tokens/derivation/color/derivers/surface.py
from __future__ import annotations

"""
derivers.surface
================

Does: Derive surface tokens that the scheme does not carry itself:
      - surface containers: fixed role → tone table read from a palette seeded
        by the scheme's `surface` color (light and dark tones differ);
      - surface tints: the surface blended toward the key (primary) color at
        small ratios, plus alpha overlays of the key color at the same ratios.
Used By: orchestrator.derive_properties.
Returns: Plain dicts of token → hex (`#rrggbb`, or `#rrggbbaa` for overlays).
"""

import logging
from typing import Dict, Mapping, Sequence, Tuple

from material_tokens.derivation.color.codec import hex_alpha_from_color, hex_from_color
from material_tokens.derivation.color.constants import (
    DARK_SUFFIX,
    LIGHT_SUFFIX,
    SURFACE_TINT_OVERLAY_ROLE,
)
from material_tokens.derivation.color.engine import ColorEngine
from material_tokens.derivation.color.theme import Scheme, Theme
from material_tokens.derivation.general.token import compose_token

__all__ = [
    "TintTableError",
    "check_tint_table",
    "derive_surface_container_properties",
    "derive_surface_container_set",
    "derive_surface_tint_properties",
    "derive_surface_tint_set",
]
__docformat__ = "google"

log = logging.getLogger(__name__)

Properties = Dict[str, str]


class TintTableError(ValueError):
    """Raise when tint roles and tint ratios are not the same length."""


def _variants(theme: Theme, *, dark: bool, brightness_suffix: bool) -> list[Tuple[Scheme, bool, str]]:
    """Does: (scheme, is_dark, suffix) for the active brightness, then both suffixed."""
    out = [(theme.scheme(dark), dark, "")]
    if brightness_suffix:
        out.append((theme.schemes["light"], False, LIGHT_SUFFIX))
        out.append((theme.schemes["dark"], True, DARK_SUFFIX))
    return out


# =============================================================================
# 1) SURFACE CONTAINERS
# =============================================================================

def derive_surface_container_properties(
    scheme: Scheme,
    *,
    dark: bool,
    engine: ColorEngine,
    table: Mapping[str, Tuple[int, int]],
    prefix: str = "",
    suffix: str = "",
) -> Properties:
    """Does: One token per table row at the light or dark tone of the surface palette."""
    palette = engine.tonal_palette_from(scheme["surface"])
    idx = 1 if dark else 0
    return {
        compose_token(role, prefix=prefix, suffix=suffix): hex_from_color(palette.tone(tones[idx]))
        for role, tones in table.items()
    }


def derive_surface_container_set(
    theme: Theme,
    *,
    dark: bool,
    brightness_suffix: bool,
    engine: ColorEngine,
    table: Mapping[str, Tuple[int, int]],
    prefix: str = "",
) -> Properties:
    properties: Properties = {}
    for scheme, is_dark, suffix in _variants(theme, dark=dark, brightness_suffix=brightness_suffix):
        properties.update(
            derive_surface_container_properties(
                scheme, dark=is_dark, engine=engine, table=table, prefix=prefix, suffix=suffix
            )
        )
    return properties


# =============================================================================
# 2) SURFACE TINTS
# =============================================================================

def check_tint_table(roles: Sequence[str], ratios: Sequence[float]) -> None:
    """Does: Fail before any token is emitted when the table is inconsistent."""
    if len(roles) != len(ratios):
        raise TintTableError(
            f"surface tint table mismatch: {len(roles)} roles vs {len(ratios)} ratios"
        )
    for ratio in ratios:
        if not 0.0 <= ratio <= 1.0:
            raise TintTableError(f"surface tint ratio {ratio!r} outside [0, 1]")


def derive_surface_tint_properties(
    surface: int,
    key: int,
    *,
    engine: ColorEngine,
    roles: Sequence[str],
    ratios: Sequence[float],
    prefix: str = "",
    suffix: str = "",
) -> Properties:
    """
    Does: `--{prefix}{role}{suffix}` = blend(surface, key, ratio) for each pair, and
          `--{prefix}surface-tint-level{n}{suffix}` = key color at alpha `ratio`.
    """
    check_tint_table(roles, ratios)
    properties: Properties = {}
    for role, ratio in zip(roles, ratios):
        token = compose_token(role, prefix=prefix, suffix=suffix)
        properties[token] = hex_from_color(engine.blend(surface, key, ratio))
    for level, ratio in enumerate(ratios):
        token = compose_token(SURFACE_TINT_OVERLAY_ROLE, prefix=prefix, tone=level, suffix=suffix)
        properties[token] = hex_alpha_from_color(key, ratio)
    return properties


def derive_surface_tint_set(
    theme: Theme,
    *,
    dark: bool,
    brightness_suffix: bool,
    engine: ColorEngine,
    roles: Sequence[str],
    ratios: Sequence[float],
    prefix: str = "",
) -> Properties:
    """Does: Tints of each variant's `surface` toward its `primary`."""
    check_tint_table(roles, ratios)
    properties: Properties = {}
    for scheme, _, suffix in _variants(theme, dark=dark, brightness_suffix=brightness_suffix):
        properties.update(
            derive_surface_tint_properties(
                scheme["surface"],
                scheme["primary"],
                engine=engine,
                roles=roles,
                ratios=ratios,
                prefix=prefix,
                suffix=suffix,
            )
        )
    log.debug("[surface] %d tint tokens", len(properties))
    return properties
