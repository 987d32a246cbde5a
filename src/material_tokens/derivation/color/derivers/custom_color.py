# src/material_tokens/derivation/color/derivers/custom_color.py
from __future__ import annotations

"""
derivers.custom_color
=====================

Does: Derive tokens for caller-supplied custom colors: a full tonal palette per
      group (harmonized toward the theme source when `blend` is set) and the
      group's light/dark roles with the "color" placeholder replaced by the
      tokenized custom name (`onColorContainer` → `on-<name>-container`).
Used By: orchestrator.derive_properties.
Returns: Plain dicts of token → hex.

Notes:
- Names are not deduplicated: two groups with the same tokenized name write the
  same keys and the later group wins. ensure_unique_custom_names() is the
  opt-in strict check.
"""

import logging
from typing import Dict, Sequence

from material_tokens.derivation.color.codec import hex_from_color
from material_tokens.derivation.color.constants import (
    CUSTOM_ROLE_PLACEHOLDER,
    DARK_SUFFIX,
    LIGHT_SUFFIX,
)
from material_tokens.derivation.color.engine import ColorEngine
from material_tokens.derivation.color.theme import CustomColorGroup, TonalPaletteLike
from material_tokens.derivation.general.token import compose_token, tokenize

__all__ = [
    "DuplicateCustomColorError",
    "ensure_unique_custom_names",
    "palette_from_custom_color",
    "derive_custom_palette_properties",
    "custom_role_token",
    "derive_custom_scheme_properties",
    "derive_custom_scheme_set",
]
__docformat__ = "google"

log = logging.getLogger(__name__)

Properties = Dict[str, str]


class DuplicateCustomColorError(ValueError):
    """Raise (strict mode only) when two custom colors tokenize to the same name."""


def ensure_unique_custom_names(groups: Sequence[CustomColorGroup]) -> None:
    """Does: Raise DuplicateCustomColorError on the first repeated tokenized name."""
    seen: Dict[str, str] = {}
    for group in groups:
        key = tokenize(group.color.name)
        if key in seen:
            raise DuplicateCustomColorError(
                f"custom colors {seen[key]!r} and {group.color.name!r} both map to {key!r}"
            )
        seen[key] = group.color.name


# =============================================================================
# 1) PALETTE
# =============================================================================

def palette_from_custom_color(
    group: CustomColorGroup,
    *,
    source_color: int,
    engine: ColorEngine,
) -> TonalPaletteLike:
    """
    Does: Seed a palette from the custom color's value; blended colors are first
          harmonized toward `source_color`, unblended ones seed it directly.
    """
    value = group.color.value
    if group.color.blend:
        value = engine.harmonize(value, source_color)
        log.debug("[custom] %r harmonized %#08x → %#08x", group.color.name, group.color.value, value)
    return engine.tonal_palette_from(value)


def derive_custom_palette_properties(
    groups: Sequence[CustomColorGroup],
    *,
    tones: Sequence[int],
    source_color: int,
    engine: ColorEngine,
    prefix: str = "",
    suffix: str = "",
) -> Properties:
    """Does: `--{prefix}{tokenize(name)}{tone}{suffix}` for each group and tone."""
    properties: Properties = {}
    for group in groups:
        palette = palette_from_custom_color(group, source_color=source_color, engine=engine)
        name = tokenize(group.color.name)
        for tone in tones:
            token = compose_token(name, prefix=prefix, tone=tone, suffix=suffix)
            properties[token] = hex_from_color(palette.tone(tone))
    return properties


# =============================================================================
# 2) SCHEME ROLES
# =============================================================================

def custom_role_token(role: str, name: str) -> str:
    """Does: Tokenize `role` and swap its first "color" for `name` (already tokenized)."""
    return tokenize(role).replace(CUSTOM_ROLE_PLACEHOLDER, name, 1)


def derive_custom_scheme_properties(
    group: CustomColorGroup,
    *,
    dark: bool = False,
    prefix: str = "",
    suffix: str = "",
) -> Properties:
    """Does: One token per role of the group's light (or dark) role map."""
    name = tokenize(group.color.name)
    return {
        compose_token(custom_role_token(role, name), prefix=prefix, suffix=suffix): hex_from_color(value)
        for role, value in group.group(dark).roles()
    }


def derive_custom_scheme_set(
    groups: Sequence[CustomColorGroup],
    *,
    dark: bool,
    brightness_suffix: bool,
    prefix: str = "",
) -> Properties:
    """Does: Active roles unsuffixed per group, plus `-light`/`-dark` copies when suffixing."""
    properties: Properties = {}
    for group in groups:
        properties.update(derive_custom_scheme_properties(group, dark=dark, prefix=prefix))
        if brightness_suffix:
            properties.update(
                derive_custom_scheme_properties(group, dark=False, prefix=prefix, suffix=LIGHT_SUFFIX)
            )
            properties.update(
                derive_custom_scheme_properties(group, dark=True, prefix=prefix, suffix=DARK_SUFFIX)
            )
    log.debug("[custom] %d groups → %d scheme tokens", len(groups), len(properties))
    return properties
