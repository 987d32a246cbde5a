# src/material_tokens/derivation/general/utils/load_config.py

"""Load token-config override files from a <data/> directory with caching.

- `<name>.json`  -> strict JSON
- `<name>.json5` -> JSON5 (comments, trailing commas), needs the `json5` extra

A bare name resolves to `<name>.json`. The result is always a dict; an optional
validator may check or rewrite it (its output is never cached).

Used by the CLI (`--config`). The derivation core never reads files; it only
receives the mapping produced here.
"""

from __future__ import annotations

import json
import logging
import os
import threading
from collections.abc import Callable
from pathlib import Path
from typing import Any

# --- optional json5 support (no hard dependency) -----------------------------
try:  # mypy: json5 may be missing in most envs
    import json5 as _json5
except Exception:  # pragma: no cover - only hit when json5 missing
    _json5 = None  # type: ignore[assignment]

# ── Public surface ────────────────────────────────────────────────────────────
Validator = Callable[[dict[str, Any]], dict[str, Any]]
__all__ = [
    "Validator",
    "load_config",
    "clear_config_cache",
    "DataDirNotFound",
    "ConfigFileNotFound",
    "ConfigParseError",
    "ConfigTypeError",
]

JSON5_SUFFIX = ".json5"


# ── Exceptions ───────────────────────────────────────────────────────────────
class DataDirNotFound(FileNotFoundError):
    """Raise when no data directory can be resolved."""


class ConfigFileNotFound(FileNotFoundError):
    """Raise when the requested config file cannot be read or resolved."""


class ConfigParseError(ValueError):
    """Raise when parsing or validation fails for a config file."""


class ConfigTypeError(TypeError):
    """Raise when a config value doesn't match the expected structure."""


# ── Logging & cache ──────────────────────────────────────────────────────────
log = logging.getLogger(__name__)
_CACHE_LOCK = threading.RLock()
# (path, mtime) → parsed overrides
_CONFIG_CACHE: dict[tuple[Path, float], dict[str, Any]] = {}


def clear_config_cache() -> None:
    """Empty the in-memory config cache (useful for pytest/hot-reload)."""
    with _CACHE_LOCK:
        _CONFIG_CACHE.clear()
        log.debug("Config cache cleared.")


def _resolve_data_dir(base_dir: str | os.PathLike[str] | None) -> Path:
    """Explicit dir > MD_TOKENS_DATA_DIR / DATA_DIR > ./data."""
    if base_dir is None:
        for var in ("MD_TOKENS_DATA_DIR", "DATA_DIR"):
            v = os.environ.get(var)
            if v:
                base_dir = os.path.expanduser(v)
                break
    if base_dir is None:
        cand = (Path.cwd() / "data").resolve()
        if not cand.is_dir():
            raise DataDirNotFound(
                f"No data directory found (tried {cand}); "
                "set MD_TOKENS_DATA_DIR or pass base_dir explicitly."
            )
        return cand

    data_dir = Path(base_dir).resolve()
    if not data_dir.is_dir():
        raise DataDirNotFound(f"Data directory does not exist: {data_dir}")
    return data_dir


def _resolve_file(data_dir: Path, file: str | os.PathLike[str]) -> Path:
    name = os.fspath(file)
    if not name.endswith((".json", JSON5_SUFFIX)):
        name = f"{name}.json"
    path = (data_dir / name).resolve()
    try:
        path.relative_to(data_dir)
    except ValueError as e:
        raise ConfigFileNotFound(
            f"Refusing to access file outside data dir: {path} (base={data_dir})"
        ) from e
    if not path.is_file():
        raise ConfigFileNotFound(f"Config file not found: {path}")
    return path


def _parse(path: Path, encoding: str) -> Any:
    json5_file = path.suffix == JSON5_SUFFIX
    if json5_file and _json5 is None:
        raise ConfigParseError(
            f"{path.name}: JSON5 files need the optional 'json5' package "
            "(pip install material-tokens[json5])"
        )
    try:
        with path.open("r", encoding=encoding, errors="strict", newline="") as f:
            return _json5.load(f) if json5_file else json.load(f)
    except ValueError as e:
        raise ConfigParseError(f"Invalid {'JSON5' if json5_file else 'JSON'} in {path}: {e}") from e
    except OSError as e:
        raise ConfigFileNotFound(f"Cannot read {path}: {e}") from e


def load_config(
    file: str | os.PathLike[str],
    *,
    base_dir: str | os.PathLike[str] | None = None,
    encoding: str = "utf-8",
    validator: Validator | None = None,
) -> dict[str, Any]:
    """
    Does: Load <data>/<file> as an overrides mapping, cached by (path, mtime).
    Raises: DataDirNotFound / ConfigFileNotFound on resolution, ConfigParseError
            on bad syntax or a failing validator, ConfigTypeError when the top
            level is not an object.
    """
    path = _resolve_file(_resolve_data_dir(base_dir), file)
    try:
        mtime = path.stat().st_mtime
    except OSError as e:
        raise ConfigFileNotFound(f"Cannot stat {path}: {e}") from e

    with _CACHE_LOCK:
        data = _CONFIG_CACHE.get((path, mtime))
    if data is None:
        data = _parse(path, encoding)
        if not isinstance(data, dict):
            raise ConfigTypeError(f"{path.name}: expected an object, got {type(data).__name__}")
        with _CACHE_LOCK:
            _CONFIG_CACHE[(path, mtime)] = data
        log.debug("Config cache MISS → STORED: %s", path.name)
    else:
        log.debug("Config cache HIT: %s", path.name)

    if validator is None:
        return dict(data)
    try:
        return validator(dict(data))
    except (TypeError, ValueError) as e:
        raise ConfigParseError(f"{path.name}: {e}") from e
