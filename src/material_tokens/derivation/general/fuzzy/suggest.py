# src/material_tokens/derivation/general/fuzzy/suggest.py
from __future__ import annotations

"""
suggest.py

Does: Find the closest known name for a misspelled key (config options,
      scheme roles) so structural errors can say "did you mean ...".
Returns: closest_name() and did_you_mean() helpers.
Used by: Config merging and theme role validation.
"""

import logging
from typing import Iterable, Optional

from rapidfuzz import fuzz  # performant, no numpy dependency

__all__ = ["closest_name", "did_you_mean"]

__docformat__ = "google"

log = logging.getLogger(__name__)

# ── Tunables ─────────────────────────────────────────────────────────────────
SUGGEST_MIN_RATIO = 75


def closest_name(name: str, known: Iterable[str], *, min_ratio: int = SUGGEST_MIN_RATIO) -> Optional[str]:
    """Does: Return the best fuzzy match for `name` in `known` above `min_ratio`, else None."""
    best, best_score = None, 0.0
    needle = name.lower()
    for cand in known:
        score = fuzz.ratio(needle, cand.lower())
        if score > best_score:
            best, best_score = cand, score
    if best is not None and best_score >= min_ratio:
        log.debug("[suggest] %r → %r (score=%.1f)", name, best, best_score)
        return best
    return None


def did_you_mean(name: str, known: Iterable[str]) -> str:
    """Does: Render a ' (did you mean 'x'?)' hint, or '' when nothing is close."""
    hit = closest_name(name, known)
    return f" (did you mean {hit!r}?)" if hit else ""
