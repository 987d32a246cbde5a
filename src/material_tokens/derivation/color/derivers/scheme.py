# src/material_tokens/derivation/color/derivers/scheme.py
from __future__ import annotations

"""
derivers.scheme
===============

Does: Emit one system-color token per scheme role, for the active brightness and,
      with brightness suffixing, for both light and dark under `-light`/`-dark`.
Used By: orchestrator.derive_properties.
"""

import logging
from typing import Dict

from material_tokens.derivation.color.codec import hex_from_color
from material_tokens.derivation.color.constants import DARK_SUFFIX, LIGHT_SUFFIX
from material_tokens.derivation.color.theme import Scheme, Theme
from material_tokens.derivation.general.token import compose_token, tokenize

__all__ = ["derive_scheme_properties", "derive_scheme_set"]
__docformat__ = "google"

log = logging.getLogger(__name__)

Properties = Dict[str, str]


def derive_scheme_properties(scheme: Scheme, *, prefix: str = "", suffix: str = "") -> Properties:
    """Does: Map every role of `scheme` to `--{prefix}{role}{suffix}`."""
    return {
        compose_token(tokenize(role), prefix=prefix, suffix=suffix): hex_from_color(value)
        for role, value in scheme.roles()
    }


def derive_scheme_set(
    theme: Theme,
    *,
    dark: bool,
    brightness_suffix: bool,
    prefix: str = "",
) -> Properties:
    """
    Does: Active scheme unsuffixed; when `brightness_suffix`, add the light and dark
          schemes suffixed, regardless of which one is active.
    """
    properties = derive_scheme_properties(theme.scheme(dark), prefix=prefix)
    if brightness_suffix:
        properties.update(
            derive_scheme_properties(theme.schemes["light"], prefix=prefix, suffix=LIGHT_SUFFIX)
        )
        properties.update(
            derive_scheme_properties(theme.schemes["dark"], prefix=prefix, suffix=DARK_SUFFIX)
        )
    log.debug("[scheme] dark=%s suffix=%s → %d tokens", dark, brightness_suffix, len(properties))
    return properties
