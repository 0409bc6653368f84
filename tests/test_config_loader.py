"""Tests for settings loading: file keys, env overrides and error reporting."""

import json
from pathlib import Path

import pytest

from methodrouter.config.loader import (
    camel_to_snake,
    convert_keys,
    load_settings,
    save_settings,
    snake_to_camel,
)
from methodrouter.config.schema import RouterSettings
from methodrouter.utils.exceptions import ConfigError


def test_missing_file_gives_defaults(tmp_path: Path) -> None:
    settings = load_settings(tmp_path / "absent.json")
    assert settings.log_level == "INFO"
    assert settings.log_faults is True
    assert settings.schema_mode == "validation"
    assert settings.include_schema_uri is True
    assert settings.log_file is None


def test_camel_case_file_keys_are_accepted(tmp_path: Path) -> None:
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"logFaults": False, "schemaMode": "serialization", "logFile": "/tmp/mr.log"}))

    settings = load_settings(path)

    assert settings.log_faults is False
    assert settings.schema_mode == "serialization"
    assert settings.log_file == Path("/tmp/mr.log")


def test_env_vars_fill_fields_absent_from_file(tmp_path: Path, monkeypatch) -> None:
    """METHODROUTER_* env applies where the file is silent; the file wins otherwise."""
    monkeypatch.setenv("METHODROUTER_LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("METHODROUTER_INCLUDE_SCHEMA_URI", "false")
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"includeSchemaUri": True}))

    settings = load_settings(path)

    assert settings.log_level == "DEBUG"
    assert settings.include_schema_uri is True


def test_invalid_json_raises_config_error(tmp_path: Path) -> None:
    path = tmp_path / "config.json"
    path.write_text("{not json")

    with pytest.raises(ConfigError) as info:
        load_settings(path)
    assert info.value.code == "CONFIG_ERROR"
    assert info.value.details == {"path": str(path)}


def test_invalid_value_raises_config_error(tmp_path: Path) -> None:
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"schemaMode": "bogus"}))

    with pytest.raises(ConfigError):
        load_settings(path)


def test_non_object_file_raises_config_error(tmp_path: Path) -> None:
    path = tmp_path / "config.json"
    path.write_text("[1, 2]")

    with pytest.raises(ConfigError):
        load_settings(path)


def test_save_writes_camel_case_and_reloads(tmp_path: Path) -> None:
    path = tmp_path / "nested" / "config.json"
    original = RouterSettings(log_level="WARNING", log_faults=False)

    save_settings(original, path)

    raw = json.loads(path.read_text())
    assert raw["logLevel"] == "WARNING"
    assert raw["logFaults"] is False
    assert load_settings(path) == original


def test_key_case_helpers() -> None:
    assert camel_to_snake("includeSchemaUri") == "include_schema_uri"
    assert snake_to_camel("include_schema_uri") == "includeSchemaUri"
    assert convert_keys({"logFile": None, "nested": [{"aB": 1}]}) == {"log_file": None, "nested": [{"a_b": 1}]}
