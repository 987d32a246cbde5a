# tests/test_general_utils.py
"""End-to-end tests for general utils (load_config, log) with cache and env handling."""

from __future__ import annotations

import json
import sys
from importlib import import_module
from types import SimpleNamespace

import pytest

# import the module objects (the package re-exports a function named load_config)
LC = import_module("material_tokens.derivation.general.utils.load_config")
LOG = import_module("material_tokens.derivation.general.utils.log")

DataDirNotFound = LC.DataDirNotFound
ConfigFileNotFound = LC.ConfigFileNotFound
ConfigParseError = LC.ConfigParseError
ConfigTypeError = LC.ConfigTypeError
load_config = LC.load_config
clear_config_cache = LC.clear_config_cache


# ---------- Fixtures ----------
@pytest.fixture
def tmp_data_dir(tmp_path, monkeypatch):
    """Provide an isolated data/ dir and point loader via MD_TOKENS_DATA_DIR."""
    data = tmp_path / "data"
    data.mkdir()
    monkeypatch.setenv("MD_TOKENS_DATA_DIR", str(data))
    clear_config_cache()
    return data


@pytest.fixture(autouse=True)
def _reset_env_and_cache(monkeypatch):
    """Reset debug topics and config cache between tests."""
    monkeypatch.delenv("MD_TOKENS_DEBUG_TOPICS", raising=False)
    clear_config_cache()
    LOG.reload_topics()


# ---------- load_config tests ----------
def test_load_config_reads_dict_and_cache_hit(tmp_data_dir):
    p = tmp_data_dir / "overrides.json"
    p.write_text(json.dumps({"dark": True}), encoding="utf-8")

    out1 = load_config("overrides")
    assert out1 == {"dark": True}
    out1["dark"] = False
    assert load_config("overrides") == {"dark": True}

    p.write_text(json.dumps({"dark": False, "tones": [0, 100]}), encoding="utf-8")
    # mtime may not move on fast filesystems, so only assert after clearing
    clear_config_cache()
    assert load_config("overrides.json") == {"dark": False, "tones": [0, 100]}


def test_load_config_validator_and_errors(tmp_data_dir):
    conf = tmp_data_dir / "settings.json"
    conf.write_text(json.dumps({"prefix": {"color": "app-"}}), encoding="utf-8")

    def validator(d: dict) -> dict:
        d["dark"] = True
        return d

    out = load_config("settings", validator=validator)
    assert out == {"prefix": {"color": "app-"}, "dark": True}
    assert load_config("settings") == {"prefix": {"color": "app-"}}

    bad = tmp_data_dir / "list.json"
    bad.write_text(json.dumps([1, 2, 3]), encoding="utf-8")
    with pytest.raises(ConfigTypeError):
        load_config("list")

    with pytest.raises(ConfigFileNotFound):
        load_config("does_not_exist")


def test_load_config_validator_failure_is_parse_error(tmp_data_dir):
    (tmp_data_dir / "v.json").write_text("{}", encoding="utf-8")

    def validator(d: dict) -> dict:
        raise ValueError("nope")

    with pytest.raises(ConfigParseError, match="nope"):
        load_config("v", validator=validator)


def test_load_config_invalid_json(tmp_data_dir):
    (tmp_data_dir / "broken.json").write_text("{not json", encoding="utf-8")
    with pytest.raises(ConfigParseError):
        load_config("broken")


def test_load_config_json5_file_uses_json5(tmp_data_dir, monkeypatch):
    (tmp_data_dir / "cmt.json5").write_text('{dark: true, /*c*/ }', encoding="utf-8")

    fake_json5 = SimpleNamespace(load=lambda f: {"dark": True})
    monkeypatch.setattr(LC, "_json5", fake_json5, raising=True)

    assert load_config("cmt.json5") == {"dark": True}


def test_load_config_json5_file_without_json5(tmp_data_dir, monkeypatch):
    (tmp_data_dir / "cmt.json5").write_text("{}", encoding="utf-8")
    monkeypatch.setattr(LC, "_json5", None, raising=True)
    with pytest.raises(ConfigParseError, match="json5"):
        load_config("cmt.json5")


def test_load_config_json_file_stays_strict(tmp_data_dir, monkeypatch):
    (tmp_data_dir / "cmt.json").write_text('{"dark": true, /*c*/ }', encoding="utf-8")
    monkeypatch.setattr(LC, "_json5", SimpleNamespace(load=lambda f: {}), raising=True)
    with pytest.raises(ConfigParseError):
        load_config("cmt")


def test_load_config_refuses_escape_from_data_dir(tmp_data_dir):
    outside = tmp_data_dir.parent / "secret.json"
    outside.write_text(json.dumps({"x": 1}), encoding="utf-8")
    with pytest.raises(ConfigFileNotFound):
        load_config("../secret")


def test_load_config_explicit_base_dir_wins(tmp_path, tmp_data_dir):
    other = tmp_path / "other"
    other.mkdir()
    (other / "o.json").write_text(json.dumps({"rgb": {"include": False}}), encoding="utf-8")
    assert load_config("o", base_dir=other) == {"rgb": {"include": False}}


def test_load_config_missing_explicit_base_dir(tmp_path):
    with pytest.raises(DataDirNotFound):
        load_config("o", base_dir=tmp_path / "nope")


def test_load_config_no_data_dir(tmp_path, monkeypatch):
    monkeypatch.delenv("MD_TOKENS_DATA_DIR", raising=False)
    monkeypatch.delenv("DATA_DIR", raising=False)
    monkeypatch.chdir(tmp_path)
    with pytest.raises(DataDirNotFound):
        load_config("anything")


# ---------- log.debug tests ----------
def test_log_debug_silent_without_topics(capsys):
    LOG.debug("nobody listens", topic="tokens")
    assert "nobody listens" not in capsys.readouterr().err
    assert LOG.enabled("tokens") is False


def test_log_debug_respects_topics_env(monkeypatch, capsys):
    monkeypatch.setenv("MD_TOKENS_DEBUG_TOPICS", "tokens")
    LOG.reload_topics()

    LOG.debug("hello on tokens", topic="tokens")
    LOG.debug("should be silent", topic="other")

    captured = capsys.readouterr()
    assert "hello on tokens" in captured.err
    assert "[tokens][DEBUG]" in captured.err
    assert "should be silent" not in captured.err


def test_log_debug_all_topics(monkeypatch, capsys):
    monkeypatch.setenv("MD_TOKENS_DEBUG_TOPICS", "all")
    LOG.reload_topics()

    LOG.debug("m1", topic="foo")
    LOG.debug("m2", topic="bar", level="info", stream=sys.stdout)

    captured = capsys.readouterr()
    assert "m1" in captured.err
    assert "[bar][INFO] m2" in captured.out
