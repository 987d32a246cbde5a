# src/material_tokens/derivation/color/derivers/palette.py
from __future__ import annotations

"""
derivers.palette
================

Does: Enumerate theme palettes × configured tones into reference-palette tokens
      (`--md-ref-palette-primary40` → `#rrggbb`).
Used By: orchestrator.derive_properties.
"""

import logging
from typing import Dict, Mapping, Sequence

from material_tokens.derivation.color.codec import hex_from_color
from material_tokens.derivation.color.engine import ColorEngine
from material_tokens.derivation.color.theme import PaletteEntry, Theme, TonalPaletteLike
from material_tokens.derivation.general.token import compose_token, tokenize

__all__ = ["resolve_palette", "derive_palette_properties"]
__docformat__ = "google"

log = logging.getLogger(__name__)

Properties = Dict[str, str]


def resolve_palette(entry: PaletteEntry, engine: ColorEngine) -> TonalPaletteLike:
    """Does: Lift a raw ARGB seed into a tonal palette; pass palettes through."""
    if isinstance(entry, int) and not isinstance(entry, bool):
        return engine.tonal_palette_from(entry)
    return entry


def derive_palette_properties(
    theme: Theme,
    *,
    tones: Sequence[int],
    engine: ColorEngine,
    prefix: str = "",
) -> Properties:
    """Does: One token per (palette, tone), exactly the configured tones. Returns: dict."""
    palettes: Mapping[str, PaletteEntry] = theme.palettes
    properties: Properties = {}
    for name, entry in palettes.items():
        palette = resolve_palette(entry, engine)
        base = tokenize(name)
        for tone in tones:
            properties[compose_token(base, prefix=prefix, tone=tone)] = hex_from_color(palette.tone(tone))
    log.debug("[palette] %d palettes × %d tones → %d tokens", len(palettes), len(tones), len(properties))
    return properties
