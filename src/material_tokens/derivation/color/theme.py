"""
theme.py
========

Does: Define the read-only theme model consumed by the derivers: closed-vocabulary
      role maps (Scheme, ColorGroup), custom color groups and the Theme itself.
Used By: engine.theme_from_source_color (producer), derivers and orchestrator (consumers).
Returns: Frozen dataclasses; structural problems raise MalformedThemeError.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import ClassVar, List, Mapping, Protocol, Sequence, Tuple, Union, runtime_checkable

from material_tokens.derivation.color.constants import COLOR_GROUP_ROLES, SCHEME_ROLES
from material_tokens.derivation.general.fuzzy import did_you_mean

__all__ = [
    "MalformedThemeError",
    "TonalPaletteLike",
    "Scheme",
    "ColorGroup",
    "CustomColor",
    "CustomColorGroup",
    "Theme",
]
__docformat__ = "google"

logger = logging.getLogger(__name__)


class MalformedThemeError(ValueError):
    """Raise when a theme, scheme or role map is missing required structure."""


@runtime_checkable
class TonalPaletteLike(Protocol):
    """Anything answering `tone(n) -> ARGB int` for n in [0, 100]."""

    def tone(self, tone: int) -> int: ...


# =============================================================================
# 1) ROLE MAPS
# =============================================================================

@dataclass(frozen=True)
class _RoleMap:
    """Closed-vocabulary role → color map; `roles()` is the only way to enumerate it."""

    colors: Mapping[str, int]

    VOCABULARY: ClassVar[Tuple[str, ...]] = ()
    KIND: ClassVar[str] = "role map"

    def __post_init__(self) -> None:
        if not isinstance(self.colors, Mapping):
            raise MalformedThemeError(
                f"{self.KIND}: expected a mapping of roles, got {type(self.colors).__name__}"
            )
        missing = [r for r in self.VOCABULARY if r not in self.colors]
        if missing:
            raise MalformedThemeError(f"{self.KIND}: missing roles {missing}")
        for role in self.colors:
            if role not in self.VOCABULARY:
                raise MalformedThemeError(
                    f"{self.KIND}: unknown role {role!r}{did_you_mean(role, self.VOCABULARY)}"
                )
        for role in self.VOCABULARY:
            value = self.colors[role]
            if isinstance(value, bool) or not isinstance(value, int):
                raise MalformedThemeError(
                    f"{self.KIND}: role {role!r} must be an ARGB int, got {type(value).__name__}"
                )
        ordered = {r: self.colors[r] for r in self.VOCABULARY}
        object.__setattr__(self, "colors", MappingProxyType(ordered))

    def roles(self) -> List[Tuple[str, int]]:
        """Does: Return (role, color) pairs in vocabulary order."""
        return list(self.colors.items())

    def __getitem__(self, role: str) -> int:
        return self.colors[role]


@dataclass(frozen=True)
class Scheme(_RoleMap):
    """One brightness mode of the Material scheme (29 fixed roles)."""

    VOCABULARY: ClassVar[Tuple[str, ...]] = SCHEME_ROLES
    KIND: ClassVar[str] = "scheme"


@dataclass(frozen=True)
class ColorGroup(_RoleMap):
    """Roles of one custom color for one brightness (color/onColor/...Container)."""

    VOCABULARY: ClassVar[Tuple[str, ...]] = COLOR_GROUP_ROLES
    KIND: ClassVar[str] = "color group"


# =============================================================================
# 2) CUSTOM COLORS
# =============================================================================

@dataclass(frozen=True)
class CustomColor:
    """A caller-supplied named seed; `blend` harmonizes it toward the theme source."""

    name: str
    value: int
    blend: bool = False


@dataclass(frozen=True)
class CustomColorGroup:
    color: CustomColor
    value: int
    light: ColorGroup
    dark: ColorGroup

    def group(self, dark: bool) -> ColorGroup:
        return self.dark if dark else self.light


# =============================================================================
# 3) THEME
# =============================================================================

PaletteEntry = Union[TonalPaletteLike, int]


@dataclass(frozen=True)
class Theme:
    """
    Source color, light/dark schemes, named palettes and custom color groups.

    Palettes may hold a ready tonal palette or a raw ARGB seed; raw seeds are
    lifted by the engine at derivation time.
    """

    source: int
    schemes: Mapping[str, Scheme]
    palettes: Mapping[str, PaletteEntry]
    custom_colors: Sequence[CustomColorGroup] = field(default_factory=tuple)

    def validate(self) -> None:
        """Does: Raise MalformedThemeError when any required piece is absent or mistyped."""
        if isinstance(self.source, bool) or not isinstance(self.source, int):
            raise MalformedThemeError(f"theme.source must be an ARGB int, got {self.source!r}")
        if not isinstance(self.schemes, Mapping):
            raise MalformedThemeError("theme.schemes must be a mapping with 'light' and 'dark'")
        for mode in ("light", "dark"):
            scheme = self.schemes.get(mode)
            if scheme is None:
                raise MalformedThemeError(f"theme.schemes is missing {mode!r}")
            if not isinstance(scheme, Scheme):
                raise MalformedThemeError(
                    f"theme.schemes[{mode!r}] must be a Scheme, got {type(scheme).__name__}"
                )
        if not isinstance(self.palettes, Mapping):
            raise MalformedThemeError("theme.palettes must be a mapping of name → palette")
        for name, entry in self.palettes.items():
            if isinstance(entry, bool) or not (isinstance(entry, int) or isinstance(entry, TonalPaletteLike)):
                raise MalformedThemeError(
                    f"theme.palettes[{name!r}] must be a tonal palette or an ARGB int"
                )
        if isinstance(self.custom_colors, (str, bytes)) or not isinstance(
            self.custom_colors, Sequence
        ):
            raise MalformedThemeError(
                "theme.custom_colors must be a sequence of CustomColorGroup, "
                f"got {type(self.custom_colors).__name__}"
            )
        for i, group in enumerate(self.custom_colors):
            if not isinstance(group, CustomColorGroup):
                raise MalformedThemeError(
                    f"theme.custom_colors[{i}] must be a CustomColorGroup, got {type(group).__name__}"
                )
        logger.debug(
            "[theme] valid: %d palettes, %d custom colors",
            len(self.palettes),
            len(self.custom_colors),
        )

    def scheme(self, dark: bool) -> Scheme:
        return self.schemes["dark" if dark else "light"]
