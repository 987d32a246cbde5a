"""
config.py
=========

Does: Define the typed, immutable token configuration and merge caller overrides
      over the defaults field by field, at every nesting level.
Used By: The orchestrator (properties_from_theme) and the CLI.
Returns: TokenConfig instances; bad overrides raise ConfigTypeError / ToneRangeError.

Notes:
- Supplying only `prefix.color` keeps the default `prefix.palette` and
  `prefix.custom_color`: nested dataclasses are merged, never replaced.
- camelCase aliases (brightnessSuffix, customColor, strictCustomNames) are
  accepted so JSON override files can mirror stylesheet-side naming.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, fields, is_dataclass, replace
from typing import Any, Iterable, Mapping, Optional, Tuple, TypedDict, TypeVar, Union

from material_tokens.derivation.color.constants import (
    DEFAULT_COLOR_PREFIX,
    DEFAULT_CUSTOM_COLOR_PREFIX,
    DEFAULT_PALETTE_PREFIX,
    DEFAULT_RGB_SEPARATOR,
    DEFAULT_RGB_SUFFIX,
    DEFAULT_TONES,
    TONE_MAX,
    TONE_MIN,
)
from material_tokens.derivation.general.fuzzy import did_you_mean
from material_tokens.derivation.general.utils.load_config import ConfigTypeError

__all__ = [
    "ToneRangeError",
    "ConfigTypeError",
    "PrefixConfig",
    "RgbConfig",
    "TokenConfig",
    "PrefixOverrides",
    "RgbOverrides",
    "ConfigOverrides",
    "DEFAULT_CONFIG",
    "validate_tones",
    "merge_config",
]
__docformat__ = "google"

logger = logging.getLogger(__name__)


class ToneRangeError(ValueError):
    """Raise when a configured tone lies outside [0, 100]."""


def validate_tones(tones: Iterable[Any]) -> Tuple[int, ...]:
    """
    Does: Check every tone is an int within [TONE_MIN, TONE_MAX]. Tones are
          never clamped: clamping would silently duplicate tokens.
    Returns: The tones as a tuple, in the given order.
    """
    if isinstance(tones, (str, bytes)) or not isinstance(tones, Iterable):
        raise ConfigTypeError(f"tones must be a sequence of ints, got {type(tones).__name__}")
    out = tuple(tones)
    for tone in out:
        if isinstance(tone, bool) or not isinstance(tone, int):
            raise ConfigTypeError(f"tone must be an int, got {tone!r}")
        if not TONE_MIN <= tone <= TONE_MAX:
            raise ToneRangeError(f"tone {tone} outside [{TONE_MIN}, {TONE_MAX}]")
    return out


# =============================================================================
# 1) TYPED CONFIG
# =============================================================================

@dataclass(frozen=True)
class PrefixConfig:
    palette: str = DEFAULT_PALETTE_PREFIX
    color: str = DEFAULT_COLOR_PREFIX
    custom_color: str = DEFAULT_CUSTOM_COLOR_PREFIX


@dataclass(frozen=True)
class RgbConfig:
    """`separator=None` joins channels with a single space."""

    include: bool = True
    separator: Optional[str] = DEFAULT_RGB_SEPARATOR
    suffix: str = DEFAULT_RGB_SUFFIX
    lenient: bool = False


@dataclass(frozen=True)
class TokenConfig:
    tones: Tuple[int, ...] = DEFAULT_TONES
    dark: bool = False
    brightness_suffix: bool = True
    prefix: PrefixConfig = field(default_factory=PrefixConfig)
    rgb: RgbConfig = field(default_factory=RgbConfig)
    strict_custom_names: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "tones", validate_tones(self.tones))


DEFAULT_CONFIG = TokenConfig()


# =============================================================================
# 2) OVERRIDE SHAPES
# =============================================================================

class PrefixOverrides(TypedDict, total=False):
    palette: str
    color: str
    custom_color: str


class RgbOverrides(TypedDict, total=False):
    include: bool
    separator: Optional[str]
    suffix: str
    lenient: bool


class ConfigOverrides(TypedDict, total=False):
    tones: Iterable[int]
    dark: bool
    brightness_suffix: bool
    prefix: PrefixOverrides
    rgb: RgbOverrides
    strict_custom_names: bool


_ALIASES = {
    "brightnessSuffix": "brightness_suffix",
    "customColor": "custom_color",
    "strictCustomNames": "strict_custom_names",
}


# =============================================================================
# 3) MERGE
# =============================================================================

C = TypeVar("C")


def _coerce(owner: str, key: str, current: Any, value: Any) -> Any:
    """Does: Type-check one leaf override against the default it replaces."""
    where = f"{owner}.{key}"
    if key == "tones":
        return validate_tones(value)
    if key == "separator":
        if value is None or value is False:
            return None
        if isinstance(value, str) and value:
            return value
        raise ConfigTypeError(f"{where}: expected a non-empty str or None, got {value!r}")
    if isinstance(current, bool):
        if not isinstance(value, bool):
            raise ConfigTypeError(f"{where}: expected bool, got {type(value).__name__}")
        return value
    if isinstance(current, str):
        if not isinstance(value, str):
            raise ConfigTypeError(f"{where}: expected str, got {type(value).__name__}")
        return value
    return value


def merge_config(
    base: C,
    overrides: Union[ConfigOverrides, PrefixOverrides, RgbOverrides, C, None],
) -> C:
    """
    Does: Recursively merge `overrides` over the config dataclass `base`.
          Mappings are merged field by field; nested dataclass fields recurse;
          an instance of the same dataclass replaces `base` wholesale.
    Returns: A new config; `base` is never mutated.
    """
    if overrides is None:
        return base
    if not is_dataclass(base):
        raise ConfigTypeError(f"cannot merge into {type(base).__name__}")
    if isinstance(overrides, type(base)):
        return overrides
    if not isinstance(overrides, Mapping):
        raise ConfigTypeError(
            f"{type(base).__name__}: overrides must be a mapping, got {type(overrides).__name__}"
        )

    owner = type(base).__name__
    names = [f.name for f in fields(base)]
    changes: dict[str, Any] = {}
    for raw_key, value in overrides.items():
        key = _ALIASES.get(raw_key, raw_key)
        if key not in names:
            raise ConfigTypeError(f"{owner}: unknown option {raw_key!r}{did_you_mean(raw_key, names)}")
        current = getattr(base, key)
        if is_dataclass(current):
            changes[key] = merge_config(current, value)
        else:
            changes[key] = _coerce(owner, key, current, value)

    merged = replace(base, **changes)
    if changes:
        logger.debug("[config] %s overrides applied: %s", owner, sorted(changes))
    return merged
