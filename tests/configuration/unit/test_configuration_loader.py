"""Settings loader tests."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from schema_doc_tree.configuration import SessionSettings
from schema_doc_tree.configuration.loader import ConfigurationError, load_settings


def _write_file(path: Path, contents: str) -> Path:
    path.write_text(contents, encoding="utf-8")
    return path


def test_loads_yaml_settings(tmp_path: Path) -> None:
    config_path = _write_file(
        tmp_path / "settings.yaml",
        """
session:
  sparse: true
  register_identifiers_eagerly: false
""",
    )

    settings = load_settings(config_path)

    assert settings == SessionSettings(sparse=True, register_identifiers_eagerly=False)


def test_loads_json_settings_with_defaults(tmp_path: Path) -> None:
    config_path = _write_file(
        tmp_path / "settings.json", json.dumps({"session": {"sparse": True}})
    )

    settings = load_settings(config_path)

    assert settings.sparse is True
    assert settings.register_identifiers_eagerly is True


@pytest.mark.parametrize("contents", ["", "session:\n"])
def test_empty_settings_fall_back_to_defaults(tmp_path: Path, contents: str) -> None:
    config_path = _write_file(tmp_path / "settings.yaml", contents)

    assert load_settings(config_path) == SessionSettings()


def test_missing_settings_file_raises(tmp_path: Path) -> None:
    with pytest.raises(ConfigurationError, match="Settings file not found"):
        load_settings(tmp_path / "missing.yaml")


def test_unparsable_settings_file_raises(tmp_path: Path) -> None:
    config_path = _write_file(tmp_path / "settings.yaml", "session: [unclosed\n")

    with pytest.raises(ConfigurationError, match="Failed to parse settings file"):
        load_settings(config_path)


def test_settings_root_must_be_mapping(tmp_path: Path) -> None:
    config_path = _write_file(tmp_path / "settings.yaml", "- sparse\n")

    with pytest.raises(ConfigurationError, match="root must be a mapping"):
        load_settings(config_path)


def test_session_section_must_be_mapping(tmp_path: Path) -> None:
    config_path = _write_file(tmp_path / "settings.yaml", "session: dense\n")

    with pytest.raises(ConfigurationError, match="'session' must be a mapping"):
        load_settings(config_path)


def test_unknown_session_keys_are_reported(tmp_path: Path) -> None:
    config_path = _write_file(
        tmp_path / "settings.yaml", "session:\n  verbose: true\n  colour: red\n"
    )

    with pytest.raises(ConfigurationError, match="Unknown session settings: colour, verbose"):
        load_settings(config_path)


def test_sparse_flag_must_be_boolean(tmp_path: Path) -> None:
    config_path = _write_file(tmp_path / "settings.yaml", "session:\n  sparse: 'yes please'\n")

    with pytest.raises(ConfigurationError, match="session.sparse must be a boolean"):
        load_settings(config_path)
