"""Sidecar example file loading for root schemas."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from .slug_allocator import document_label

_LOGGER = logging.getLogger("schema_doc_tree.examples")


def example_path(schema_filename: str, number: int) -> Path:
    """Return the sidecar path `<dir>/<name>.example.<number>.json` for a schema file."""
    schema_path = Path(schema_filename)
    return schema_path.with_name(f"{document_label(schema_filename)}.example.{number}.json")


def load_examples(schema_filename: str) -> list[Any]:
    """Load numbered sidecar examples, stopping at the first missing or unparsable file."""
    examples: list[Any] = []
    number = 1
    while True:
        try:
            path = example_path(schema_filename, number)
            examples.append(json.loads(path.read_text(encoding="utf-8")))
        except (OSError, ValueError) as exc:
            _LOGGER.debug(
                "stopped loading examples for %s at #%d: %s", schema_filename, number, exc
            )
            return examples
        number += 1
