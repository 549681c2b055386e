"""Schema file reading service."""

from __future__ import annotations

import json
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

_YAML_SUFFIXES = frozenset({".yaml", ".yml"})


class SchemaLoadError(Exception):
    """Raised when a schema file cannot be read or parsed."""


def read_schema_file(schema_path: Path | str) -> Mapping[str, Any]:
    """Parse a JSON (or YAML) schema file into its raw mapping."""
    path = Path(schema_path)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise SchemaLoadError(f"Schema file could not be read: {path}: {exc}") from exc

    if path.suffix.lower() in _YAML_SUFFIXES:
        try:
            parsed = yaml.safe_load(text)
        except yaml.YAMLError as exc:
            raise SchemaLoadError(f"Invalid YAML schema {path}: {exc}") from exc
    else:
        try:
            parsed = json.loads(text)
        except json.JSONDecodeError as exc:
            raise SchemaLoadError(f"Invalid JSON schema {path}: {exc}") from exc

    if not isinstance(parsed, Mapping):
        raise SchemaLoadError(f"Schema root must be an object: {path}")
    return parsed
