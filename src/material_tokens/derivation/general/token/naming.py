# derivation/general/token/naming.py
# ──────────────────────────────────────────────────────────────
# Token naming: identifier → hyphenated fragment → custom property
# ──────────────────────────────────────────────────────────────
"""
naming.

Does: Turn identifier-style names (camelCase roles, free-form custom color
      names) into hyphenated lowercase fragments and compose CSS custom
      property keys from prefix, base, tone and suffix.
Returns: capitalize(), camelize(), tokenize(), compose_token(), humanize(),
         contrast_token().
Used by: Every deriver, so palette and scheme tokens line up lexically.
"""

from __future__ import annotations

import re

__all__ = [
    "capitalize",
    "camelize",
    "tokenize",
    "compose_token",
    "humanize",
    "contrast_token",
]

# Word separators accepted in free-form names ("custom color", "brand-accent")
_WORD_SEP_RE = re.compile(r"-|\s")

# lower → Upper boundary inside an identifier
_CAMEL_BOUNDARY_RE = re.compile(r"([a-z])([A-Z])")

# Capital letters and digit runs start a new word in humanize()
_HUMANIZE_RE = re.compile(r"([A-Z]|\d+)")


def capitalize(word: str) -> str:
    """Upper-case the first character, leave the rest untouched."""
    return word[:1].upper() + word[1:]


def camelize(name: str) -> str:
    """
    Does: Join hyphen/space separated words into camelCase
          ("custom color" → "customColor", "Brand-Accent" → "brandAccent").
    Returns: camelCase string with a lowercase first character.
    """
    words = _WORD_SEP_RE.split(name)
    joined = "".join(w if i == 0 else capitalize(w) for i, w in enumerate(words))
    return joined[:1].lower() + joined[1:]


def tokenize(name: str) -> str:
    """
    Does: camelize, hyphenate each lower→upper boundary, then lowercase.
          onPrimaryContainer → on-primary-container
          Custom Color       → custom-color
          customColor1       → custom-color1
    Returns: Hyphenated token fragment.
    """
    return _CAMEL_BOUNDARY_RE.sub(r"\1-\2", camelize(name)).lower()


def compose_token(
    base: str,
    *,
    prefix: str = "",
    tone: int | None = None,
    suffix: str = "",
) -> str:
    """
    Does: Build `--{prefix}{base}{tone}{suffix}`. No escaping is applied;
          prefixes and suffixes must already be identifier-safe.
    Returns: Custom property name.
    """
    tone_part = "" if tone is None else str(tone)
    return f"--{prefix}{base}{tone_part}{suffix}"


def humanize(name: str) -> str:
    """
    Does: Space out capitals and digit runs, capitalize the first character.
          onPrimaryContainer → On Primary Container
          surfaceLevel12     → Surface Level 12
    """
    return capitalize(_HUMANIZE_RE.sub(r" \1", name))


def contrast_token(role: str, *, prefix: str = "", suffix: str = "") -> str:
    """
    Does: Name the role that contrasts with `role`:
          "on" roles drop "on" (onPrimary → primary), inverse roles drop
          "inverse" (inverseSurface → surface), anything else gains "on"
          (primary → on-primary).
    Returns: `--{prefix}{name}{suffix}`.
    """
    words = humanize(role).lower().split()
    if "on" in words:
        words.remove("on")
    elif "inverse" in words:
        words.remove("inverse")
    else:
        words.insert(0, "on")
    return compose_token("-".join(words), prefix=prefix, suffix=suffix)
