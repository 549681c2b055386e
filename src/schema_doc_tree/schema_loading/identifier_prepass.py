"""Discovery of nested `$id` declarations before decoration."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from schema_doc_tree.node_decoration import keywords, normalize_conditional


def collect_nested_identifiers(document: Mapping[str, Any]) -> list[tuple[str, tuple[str, ...]]]:
    """Return `(identifier, path)` for every identified subschema below the root.

    Nested objects are normalized the same way decoration normalizes them, so
    each path matches the one a decorated read would follow.
    """
    found: list[tuple[str, tuple[str, ...]]] = []
    for key, value in document.items():
        _collect(value, (str(key),), found, seen=set())
    return found


def _collect(
    value: Any,
    path: tuple[str, ...],
    found: list[tuple[str, tuple[str, ...]]],
    *,
    seen: set[int],
) -> None:
    if isinstance(value, list):
        for index, item in enumerate(value):
            _collect(item, (*path, str(index)), found, seen=seen)
        return
    if not isinstance(value, Mapping) or id(value) in seen:
        return

    seen.add(id(value))
    node = normalize_conditional(value)
    identifier = node.get(keywords.ID)
    if isinstance(identifier, str) and identifier:
        found.append((identifier, path))
    for key, child in node.items():
        _collect(child, (*path, str(key)), found, seen=seen)
    seen.discard(id(value))
