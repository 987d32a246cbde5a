from __future__ import annotations

import pytest

# Module sous test : politique de nommage des tokens
from material_tokens.derivation.general.token import naming as N

"""
Tests: general/token/naming.py

- tokenize() must give the same fragment for role names and custom color names
- compose_token() never escapes and renders tone 0
"""


# ──────────────────────────────────────────────────────────────────────────────
# camelize / capitalize
# ──────────────────────────────────────────────────────────────────────────────

@pytest.mark.parametrize(
    "raw,expected",
    [
        ("custom color", "customColor"),
        ("Custom Color", "customColor"),
        ("brand-accent", "brandAccent"),
        ("onPrimary", "onPrimary"),
        ("", ""),
    ],
)
def test_camelize(raw, expected):
    assert N.camelize(raw) == expected


def test_capitalize_keeps_tail():
    assert N.capitalize("primaryContainer") == "PrimaryContainer"
    assert N.capitalize("") == ""


# ──────────────────────────────────────────────────────────────────────────────
# tokenize
# ──────────────────────────────────────────────────────────────────────────────

@pytest.mark.parametrize(
    "raw,expected",
    [
        ("onPrimaryContainer", "on-primary-container"),
        ("primary", "primary"),
        ("neutralVariant", "neutral-variant"),
        ("inverseOnSurface", "inverse-on-surface"),
        ("Custom Color", "custom-color"),
        ("customColor1", "custom-color1"),
        ("brand-accent", "brand-accent"),
        ("colorContainer", "color-container"),
    ],
)
def test_tokenize(raw, expected):
    assert N.tokenize(raw) == expected


def test_tokenize_is_idempotent_on_tokens():
    once = N.tokenize("onSecondaryContainer")
    assert N.tokenize(once) == once


# ──────────────────────────────────────────────────────────────────────────────
# compose_token
# ──────────────────────────────────────────────────────────────────────────────

def test_compose_token_defaults_to_bare_name():
    assert N.compose_token("primary") == "--primary"


def test_compose_token_full():
    token = N.compose_token("primary", prefix="md-ref-palette-", tone=40, suffix="-dark")
    assert token == "--md-ref-palette-primary40-dark"


def test_compose_token_renders_tone_zero():
    assert N.compose_token("primary", prefix="p-", tone=0) == "--p-primary0"


def test_compose_token_does_not_escape():
    assert N.compose_token("a b", prefix="x.y/") == "--x.y/a b"


# ──────────────────────────────────────────────────────────────────────────────
# humanize / contrast_token
# ──────────────────────────────────────────────────────────────────────────────

@pytest.mark.parametrize(
    "raw,expected",
    [
        ("onPrimaryContainer", "On Primary Container"),
        ("surfaceLevel12", "Surface Level 12"),
        ("primary", "Primary"),
        ("", ""),
    ],
)
def test_humanize(raw, expected):
    assert N.humanize(raw) == expected


@pytest.mark.parametrize(
    "role,expected",
    [
        ("primary", "--on-primary"),
        ("onPrimary", "--primary"),
        ("inverseSurface", "--surface"),
        ("primaryContainer", "--on-primary-container"),
        ("onTertiaryContainer", "--tertiary-container"),
    ],
)
def test_contrast_token(role, expected):
    assert N.contrast_token(role) == expected


def test_contrast_token_prefix_and_suffix():
    token = N.contrast_token("secondary", prefix="md-sys-color-", suffix="-dark")
    assert token == "--md-sys-color-on-secondary-dark"
    assert N.contrast_token("onError", prefix="x-") == "--x-error"
