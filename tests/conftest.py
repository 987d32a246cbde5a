# tests/conftest.py
"""Shared deterministic fakes: a color engine and theme builders that need no color science."""

from __future__ import annotations

from types import MappingProxyType

import pytest

from material_tokens.derivation.color.constants import COLOR_GROUP_ROLES, SCHEME_ROLES
from material_tokens.derivation.color.theme import (
    ColorGroup,
    CustomColor,
    CustomColorGroup,
    Scheme,
    Theme,
)


class FakePalette:
    """tone(t) = seed with every channel xor'ed by t; records queried tones."""

    def __init__(self, seed: int):
        self.seed = seed & 0xFFFFFF
        self.queried: list[int] = []

    def tone(self, tone: int) -> int:
        self.queried.append(tone)
        return 0xFF000000 | (self.seed ^ (tone * 0x010101))


class FakeEngine:
    """ColorEngine stand-in with call logs."""

    def __init__(self):
        self.palettes: list[FakePalette] = []
        self.harmonized: list[tuple[int, int]] = []
        self.blended: list[tuple[int, int, float]] = []

    def tonal_palette_from(self, color: int) -> FakePalette:
        p = FakePalette(color)
        self.palettes.append(p)
        return p

    def harmonize(self, design: int, source: int) -> int:
        self.harmonized.append((design, source))
        return 0xFF000000 | ((design + source) & 0xFFFFFF)

    def blend(self, a: int, b: int, ratio: float) -> int:
        self.blended.append((a, b, ratio))
        return 0xFF000000 | ((a & 0xFFFF00) + round(ratio * 100))


def make_scheme(base: int) -> Scheme:
    return Scheme({role: 0xFF000000 | (base + i) for i, role in enumerate(SCHEME_ROLES)})


def make_group(name: str, value: int, blend: bool = False) -> CustomColorGroup:
    light = ColorGroup({r: 0xFF000000 | (value + i) for i, r in enumerate(COLOR_GROUP_ROLES)})
    dark = ColorGroup({r: 0xFF000000 | (value + 0x10 + i) for i, r in enumerate(COLOR_GROUP_ROLES)})
    return CustomColorGroup(
        color=CustomColor(name=name, value=value, blend=blend), value=value, light=light, dark=dark
    )


def make_theme(custom_colors=(), palettes=None) -> Theme:
    if palettes is None:
        palettes = {
            "primary": FakePalette(0x40A673),
            "neutralVariant": 0xFF336699,
        }
    return Theme(
        source=0xFF40A673,
        schemes=MappingProxyType({"light": make_scheme(0x101000), "dark": make_scheme(0x202000)}),
        palettes=MappingProxyType(palettes),
        custom_colors=tuple(custom_colors),
    )


@pytest.fixture
def engine() -> FakeEngine:
    return FakeEngine()


@pytest.fixture
def theme() -> Theme:
    return make_theme()


@pytest.fixture
def theme_factory():
    return make_theme


@pytest.fixture
def group_factory():
    return make_group
