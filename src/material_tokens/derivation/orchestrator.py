# orchestrator.py
from __future__ import annotations

"""
orchestrator.py
===============

Does: High-level entry points turning a Material theme into one flat map of
      CSS custom properties. Merges caller overrides over the defaults, runs the
      derivers in a fixed order and merges their outputs with last-writer-wins
      precedence:
        palette → scheme → custom palette → custom scheme → surface tint
        → surface container → RGB variants
Returns:
  - properties_from_theme(theme, options) -> dict[str, str]
  - properties_from_source_color(source, custom_colors, options) -> dict[str, str]
  - derive_properties(theme, config, engine=...) -> dict[str, str]
Used by: Applications injecting stylesheet variables, and the CLI demo.
"""

import logging
from typing import Dict, Iterable, Mapping, Sequence, Tuple, Union

from material_tokens.derivation.color.codec import color_from_hex
from material_tokens.derivation.color.config import (
    DEFAULT_CONFIG,
    ConfigOverrides,
    TokenConfig,
    merge_config,
)
from material_tokens.derivation.color.constants import (
    SURFACE_CONTAINER_TONES,
    SURFACE_TINT_RATIOS,
    SURFACE_TINT_ROLES,
)
from material_tokens.derivation.color.derivers import (
    check_tint_table,
    derive_custom_palette_properties,
    derive_custom_scheme_set,
    derive_palette_properties,
    derive_scheme_set,
    derive_surface_container_set,
    derive_surface_tint_set,
    ensure_unique_custom_names,
    rgb_properties,
)
from material_tokens.derivation.color.engine import (
    ColorEngine,
    MaterialColorEngine,
    default_engine,
    theme_from_source_color,
)
from material_tokens.derivation.color.theme import CustomColor, Theme
from material_tokens.derivation.general.utils.log import debug, enabled

logger = logging.getLogger(__name__)

Properties = Dict[str, str]

__all__ = [
    "derive_properties",
    "properties_from_theme",
    "properties_from_source_color",
]


def derive_properties(
    theme: Theme,
    config: TokenConfig,
    *,
    engine: ColorEngine,
    surface_container_tones: Mapping[str, Tuple[int, int]] = SURFACE_CONTAINER_TONES,
    tint_roles: Sequence[str] = SURFACE_TINT_ROLES,
    tint_ratios: Sequence[float] = SURFACE_TINT_RATIOS,
) -> Properties:
    """
    Does: Run every deriver for an already merged `config` and merge the results.
          All structural checks happen before the first token is produced.
    Returns: Fresh dict; neither `theme` nor `config` is mutated.
    """
    theme.validate()
    check_tint_table(tint_roles, tint_ratios)
    if config.strict_custom_names:
        ensure_unique_custom_names(theme.custom_colors)

    prefix = config.prefix
    palettes = derive_palette_properties(
        theme, tones=config.tones, engine=engine, prefix=prefix.palette
    )
    schemes = derive_scheme_set(
        theme, dark=config.dark, brightness_suffix=config.brightness_suffix, prefix=prefix.color
    )
    custom_palettes = derive_custom_palette_properties(
        theme.custom_colors,
        tones=config.tones,
        source_color=theme.source,
        engine=engine,
        prefix=prefix.palette,
    )
    custom_schemes = derive_custom_scheme_set(
        theme.custom_colors,
        dark=config.dark,
        brightness_suffix=config.brightness_suffix,
        prefix=prefix.custom_color,
    )
    surface_tints = derive_surface_tint_set(
        theme,
        dark=config.dark,
        brightness_suffix=config.brightness_suffix,
        engine=engine,
        roles=tint_roles,
        ratios=tint_ratios,
        prefix=prefix.color,
    )
    surface_containers = derive_surface_container_set(
        theme,
        dark=config.dark,
        brightness_suffix=config.brightness_suffix,
        engine=engine,
        table=surface_container_tones,
        prefix=prefix.color,
    )

    # surface tints carry alpha overlays and are never channel-expanded
    rgb: Properties = {}
    if config.rgb.include:
        for part in (palettes, schemes, custom_palettes, custom_schemes, surface_containers):
            rgb.update(
                rgb_properties(
                    part,
                    separator=config.rgb.separator,
                    suffix=config.rgb.suffix,
                    lenient=config.rgb.lenient,
                )
            )

    properties: Properties = {}
    for part in (
        palettes,
        schemes,
        custom_palettes,
        custom_schemes,
        surface_tints,
        surface_containers,
        rgb,
    ):
        properties.update(part)

    if enabled("tokens"):
        debug(
            f"palette={len(palettes)} scheme={len(schemes)} "
            f"custom_palette={len(custom_palettes)} custom_scheme={len(custom_schemes)} "
            f"tint={len(surface_tints)} container={len(surface_containers)} "
            f"rgb={len(rgb)} → total={len(properties)}",
            topic="tokens",
        )
    logger.debug("[orchestrator] %d tokens derived", len(properties))
    return properties


def properties_from_theme(
    theme: Theme,
    options: Union[ConfigOverrides, TokenConfig, None] = None,
    *,
    engine: ColorEngine | None = None,
) -> Properties:
    """
    Does: Merge `options` over the defaults (field by field, at every depth) and
          derive the full token map.
    Example:
        theme = theme_from_source_color(color_from_hex("#40a673"))
        properties_from_theme(theme, {"prefix": {"color": "app-"}})
        # => {"--md-ref-palette-primary0": "#000000", "--app-primary": "#...", ...}
    """
    config = merge_config(DEFAULT_CONFIG, options)
    return derive_properties(theme, config, engine=engine or default_engine())


def properties_from_source_color(
    source: Union[int, str],
    custom_colors: Iterable[CustomColor] = (),
    options: Union[ConfigOverrides, TokenConfig, None] = None,
    *,
    engine: MaterialColorEngine | None = None,
) -> Properties:
    """Does: Build the theme for `source` (ARGB int or `#rrggbb`) and derive its tokens."""
    engine = engine or default_engine()
    argb = color_from_hex(source) if isinstance(source, str) else source
    theme = theme_from_source_color(argb, custom_colors, engine=engine)
    return properties_from_theme(theme, options, engine=engine)
