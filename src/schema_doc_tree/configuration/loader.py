"""Settings file loader service."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from .runtime_settings import SessionSettings

_SESSION_KEYS = frozenset({"sparse", "register_identifiers_eagerly"})


class ConfigurationError(Exception):
    """Raised when the settings file is invalid."""


def load_settings(config_path: Path | str) -> SessionSettings:
    """Load and validate a YAML/JSON settings file."""
    path = Path(config_path)
    if not path.exists():
        raise ConfigurationError(f"Settings file not found: {path}")

    text = path.read_text(encoding="utf-8")
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Failed to parse settings file: {exc}") from exc

    if parsed is None:
        parsed = {}

    if not isinstance(parsed, Mapping):
        raise ConfigurationError("Settings root must be a mapping.")

    return _parse_session_section(parsed.get("session"))


def _parse_session_section(value: Any) -> SessionSettings:
    if value is None:
        return SessionSettings()
    if not isinstance(value, Mapping):
        raise ConfigurationError("Settings section 'session' must be a mapping.")
    unknown = sorted(str(key) for key in value if key not in _SESSION_KEYS)
    if unknown:
        raise ConfigurationError(f"Unknown session settings: {', '.join(unknown)}")

    defaults = SessionSettings()
    return SessionSettings(
        sparse=_optional_bool(value.get("sparse"), "session.sparse", defaults.sparse),
        register_identifiers_eagerly=_optional_bool(
            value.get("register_identifiers_eagerly"),
            "session.register_identifiers_eagerly",
            defaults.register_identifiers_eagerly,
        ),
    )


def _optional_bool(value: Any, field_name: str, default: bool) -> bool:
    if value is None:
        return default
    if not isinstance(value, bool):
        raise ConfigurationError(f"{field_name} must be a boolean.")
    return value
