"""
engine.py
=========

Does: Wrap the perceptual color engine (materialyoucolor: HCT, tonal palettes,
      harmonize, CAM16-UCS blend) behind a small protocol, and build a
      Material Theme from a source color.
Used By: Derivers (through the ColorEngine protocol only) and the orchestrator.
Returns: Tonal palettes, harmonized/blended ARGB ints, and Theme objects.

Notes:
- materialyoucolor is imported lazily so that derivers can be exercised with
  any object satisfying ColorEngine.
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Dict, Iterable, Mapping, Protocol, Tuple, runtime_checkable

from material_tokens.derivation.color.theme import (
    ColorGroup,
    CustomColor,
    CustomColorGroup,
    Scheme,
    Theme,
    TonalPaletteLike,
)

__all__ = [
    "ColorEngine",
    "MaterialColorEngine",
    "default_engine",
    "theme_from_source_color",
]
__docformat__ = "google"

logger = logging.getLogger(__name__)


@runtime_checkable
class ColorEngine(Protocol):
    """
    Structural contract for the external color capability.

    - tonal_palette_from(color): palette seeded from one ARGB color.
    - harmonize(design, source): shift `design` hue toward `source`.
    - blend(a, b, ratio): move `a` toward `b` by `ratio` in [0, 1].
    """

    def tonal_palette_from(self, color: int) -> TonalPaletteLike: ...
    def harmonize(self, design: int, source: int) -> int: ...
    def blend(self, a: int, b: int, ratio: float) -> int: ...


# ── Core palette names exposed on the Theme, mapped to CorePalette attributes ─
CORE_PALETTE_ATTRS: Mapping[str, str] = MappingProxyType(
    {
        "primary": "a1",
        "secondary": "a2",
        "tertiary": "a3",
        "neutral": "n1",
        "neutralVariant": "n2",
        "error": "error",
    }
)

# custom color roles: role → (light tone, dark tone), all from the custom palette
COLOR_GROUP_TONES: Mapping[str, Tuple[int, int]] = MappingProxyType(
    {
        "color": (40, 80),
        "onColor": (100, 20),
        "colorContainer": (90, 30),
        "onColorContainer": (10, 90),
    }
)


class MaterialColorEngine:
    """ColorEngine backed by materialyoucolor."""

    def tonal_palette_from(self, color: int) -> TonalPaletteLike:
        from materialyoucolor.palettes.tonal_palette import TonalPalette

        return TonalPalette.from_int(color)

    def harmonize(self, design: int, source: int) -> int:
        from materialyoucolor.blend import Blend

        return Blend.harmonize(design, source)

    def blend(self, a: int, b: int, ratio: float) -> int:
        from materialyoucolor.blend import Blend

        return Blend.cam16_ucs(a, b, ratio)

    def core_palette(self, source: int):
        """Does: materialyoucolor CorePalette (a1/a2/a3/n1/n2/error) for `source`."""
        from materialyoucolor.palettes.core_palette import CorePalette

        return CorePalette.of(source)

    def core_palettes(self, source: int) -> Dict[str, TonalPaletteLike]:
        """Does: Name the CorePalette members primary/secondary/.../error."""
        core = self.core_palette(source)
        return {name: getattr(core, attr) for name, attr in CORE_PALETTE_ATTRS.items()}

    def schemes(self, source: int) -> Dict[str, Scheme]:
        """Does: Light and dark Material schemes for `source`, as local Scheme role maps."""
        from materialyoucolor.scheme import Scheme as MaterialScheme

        core = self.core_palette(source)
        return {
            "light": Scheme(MaterialScheme.light_from_core_palette(core).props),
            "dark": Scheme(MaterialScheme.dark_from_core_palette(core).props),
        }


_DEFAULT_ENGINE: MaterialColorEngine | None = None


def default_engine() -> MaterialColorEngine:
    """Does: Return the shared MaterialColorEngine (stateless, created once)."""
    global _DEFAULT_ENGINE
    if _DEFAULT_ENGINE is None:
        _DEFAULT_ENGINE = MaterialColorEngine()
    return _DEFAULT_ENGINE


# =============================================================================
# THEME CONSTRUCTION
# =============================================================================

def _custom_color_group(
    custom: CustomColor, source: int, engine: MaterialColorEngine
) -> CustomColorGroup:
    value = engine.harmonize(custom.value, source) if custom.blend else custom.value
    palette = engine.core_palette(value).a1
    light = ColorGroup({role: palette.tone(t[0]) for role, t in COLOR_GROUP_TONES.items()})
    dark = ColorGroup({role: palette.tone(t[1]) for role, t in COLOR_GROUP_TONES.items()})
    return CustomColorGroup(color=custom, value=value, light=light, dark=dark)


def theme_from_source_color(
    source: int,
    custom_colors: Iterable[CustomColor] = (),
    *,
    engine: MaterialColorEngine | None = None,
) -> Theme:
    """
    Does: Build a Theme (core palettes, light/dark schemes, custom groups) from one
          ARGB source color.
    Returns: Theme ready for properties_from_theme().
    """
    engine = engine or default_engine()
    groups = tuple(_custom_color_group(c, source, engine) for c in custom_colors)
    logger.debug("[engine] theme from %#010x with %d custom colors", source, len(groups))
    return Theme(
        source=source,
        schemes=MappingProxyType(engine.schemes(source)),
        palettes=MappingProxyType(engine.core_palettes(source)),
        custom_colors=groups,
    )
