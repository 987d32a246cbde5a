# tests/test_color_custom.py
"""
Tests: color/derivers/custom_color.py

- blended groups harmonize toward the theme source before seeding the palette
- role names swap the "color" placeholder for the tokenized custom name
- duplicate names collide silently unless strict mode is requested
"""

from __future__ import annotations

import pytest

from material_tokens.derivation.color.codec import hex_from_color
from material_tokens.derivation.color.derivers import custom_color as CC

SOURCE = 0xFF40A673


# ──────────────────────────────────────────────────────────────────────────────
# palette
# ──────────────────────────────────────────────────────────────────────────────
def test_unblended_palette_seeds_from_raw_value(engine, group_factory):
    group = group_factory("Custom Color", 0xFF123456, blend=False)
    palette = CC.palette_from_custom_color(group, source_color=SOURCE, engine=engine)
    assert engine.harmonized == []
    assert palette.seed == 0x123456


def test_blended_palette_harmonizes_first(engine, group_factory):
    group = group_factory("Custom Color", 0xFF123456, blend=True)
    palette = CC.palette_from_custom_color(group, source_color=SOURCE, engine=engine)
    assert engine.harmonized == [(0xFF123456, SOURCE)]
    assert palette.seed == (0xFF123456 + SOURCE) & 0xFFFFFF


def test_custom_palette_tokens_named_from_custom_name(engine, group_factory):
    tones = (0, 40, 100)
    groups = [group_factory("Custom Color", 0xFF123456)]
    props = CC.derive_custom_palette_properties(
        groups, tones=tones, source_color=SOURCE, engine=engine, prefix="md-ref-palette-"
    )
    assert sorted(props) == sorted(f"--md-ref-palette-custom-color{t}" for t in tones)
    assert props["--md-ref-palette-custom-color40"] == hex_from_color(engine.palettes[0].tone(40))


def test_custom_palette_blended_and_unblended_differ(engine, group_factory):
    groups = [
        group_factory("customColor1", 0xFF123456, blend=True),
        group_factory("customColor2", 0xFF123456, blend=False),
    ]
    props = CC.derive_custom_palette_properties(groups, tones=(50,), source_color=SOURCE, engine=engine)
    assert props["--custom-color150"] != props["--custom-color250"]


# ──────────────────────────────────────────────────────────────────────────────
# scheme roles
# ──────────────────────────────────────────────────────────────────────────────
@pytest.mark.parametrize(
    "role,expected",
    [
        ("color", "custom-color"),
        ("onColor", "on-custom-color"),
        ("colorContainer", "custom-color-container"),
        ("onColorContainer", "on-custom-color-container"),
    ],
)
def test_custom_role_token(role, expected):
    assert CC.custom_role_token(role, "custom-color") == expected


def test_custom_scheme_properties_light_and_dark(group_factory):
    group = group_factory("Custom Color", 0xFF123456)
    light = CC.derive_custom_scheme_properties(group, prefix="md-custom-color-")
    dark = CC.derive_custom_scheme_properties(group, dark=True, prefix="md-custom-color-")
    assert set(light) == {
        "--md-custom-color-custom-color",
        "--md-custom-color-on-custom-color",
        "--md-custom-color-custom-color-container",
        "--md-custom-color-on-custom-color-container",
    }
    assert set(light) == set(dark)
    assert light["--md-custom-color-on-custom-color"] == hex_from_color(group.light["onColor"])
    assert dark["--md-custom-color-on-custom-color"] == hex_from_color(group.dark["onColor"])


def test_custom_scheme_set_suffixes(group_factory):
    groups = [group_factory("brand", 0xFF111111), group_factory("accent", 0xFF222222)]
    props = CC.derive_custom_scheme_set(groups, dark=True, brightness_suffix=True)
    assert len(props) == 2 * 3 * 4
    assert props["--brand"] == hex_from_color(groups[0].dark["color"])
    assert props["--brand-light"] == hex_from_color(groups[0].light["color"])
    assert props["--on-accent-container-dark"] == hex_from_color(groups[1].dark["onColorContainer"])

    plain = CC.derive_custom_scheme_set(groups, dark=False, brightness_suffix=False)
    assert len(plain) == 2 * 4


# ──────────────────────────────────────────────────────────────────────────────
# duplicate names
# ──────────────────────────────────────────────────────────────────────────────
def test_duplicate_names_last_writer_wins(engine, group_factory):
    groups = [group_factory("Brand", 0xFF111111), group_factory("brand", 0xFF222222)]
    props = CC.derive_custom_scheme_set(groups, dark=False, brightness_suffix=False)
    assert len(props) == 4
    assert props["--brand"] == hex_from_color(groups[1].light["color"])


def test_strict_mode_rejects_duplicates(group_factory):
    groups = [group_factory("Brand", 0xFF111111), group_factory("brand", 0xFF222222)]
    with pytest.raises(CC.DuplicateCustomColorError):
        CC.ensure_unique_custom_names(groups)
    CC.ensure_unique_custom_names(groups[:1])
