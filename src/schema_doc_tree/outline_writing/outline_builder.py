"""Depth-first outline of a decorated schema tree."""

from __future__ import annotations

import json
from collections.abc import Iterator, Mapping, Sequence
from dataclasses import asdict, dataclass

from schema_doc_tree.node_decoration import DecoratedNode, SchemaArray, SchemaNode, keywords

_MAP_KEYWORDS: tuple[str, ...] = (
    keywords.PROPERTIES,
    "patternProperties",
    "dependentSchemas",
    *keywords.DEFINITION_KEYWORDS,
)
_SCHEMA_KEYWORDS: tuple[str, ...] = (
    keywords.ITEMS,
    keywords.ADDITIONAL_PROPERTIES,
    "not",
    "contains",
)
_LIST_KEYWORDS: tuple[str, ...] = ("prefixItems", *keywords.COMPOSITION_KEYWORDS)


@dataclass(frozen=True)
class OutlineEntry:
    """One schema node as listed in an outline."""

    depth: int
    pointer: str
    slug: str
    titles: tuple[str, ...]
    id: str | None


def build_outline(root: SchemaNode) -> list[OutlineEntry]:
    """List the root and every subschema reachable through schema keywords."""
    return [
        OutlineEntry(
            depth=depth,
            pointer=node.pointer,
            slug=node.slug,
            titles=node.titles,
            id=node.id,
        )
        for depth, node in walk_schema(root)
    ]


def walk_schema(root: SchemaNode) -> Iterator[tuple[int, SchemaNode]]:
    """Yield `(depth, node)` pairs in document order, visiting each node once."""
    visited: set[int] = set()
    yield from _walk(root, 0, visited)


def _walk(node: SchemaNode, depth: int, visited: set[int]) -> Iterator[tuple[int, SchemaNode]]:
    if id(node) in visited:
        return
    visited.add(id(node))
    yield depth, node
    for child in _subschemas(node):
        yield from _walk(child, depth + 1, visited)


def _subschemas(node: SchemaNode) -> Iterator[SchemaNode]:
    for key in node:
        if key in _MAP_KEYWORDS:
            members = node[key]
            if isinstance(members, SchemaNode):
                yield from (value for value in members.values() if isinstance(value, SchemaNode))
        elif key in _SCHEMA_KEYWORDS:
            value = node[key]
            if isinstance(value, SchemaNode):
                yield value
            elif isinstance(value, SchemaArray):
                yield from (item for item in value if isinstance(item, SchemaNode))
        elif key in _LIST_KEYWORDS:
            value = node[key]
            if isinstance(value, SchemaArray):
                yield from (item for item in value if isinstance(item, SchemaNode))


def format_outline_text(documents: Sequence[tuple[DecoratedNode, list[OutlineEntry]]]) -> str:
    """Render outlines as indented `slug  pointer  title > title` lines."""
    lines: list[str] = []
    for root, entries in documents:
        lines.append(f"# {root.filename}")
        for entry in entries:
            indent = "  " * entry.depth
            line = f"{indent}{entry.slug}  {entry.pointer or '/'}"
            if entry.titles:
                line += "  " + " > ".join(entry.titles)
            lines.append(line)
    return "\n".join(lines)


def format_outline_json(documents: Sequence[tuple[DecoratedNode, list[OutlineEntry]]]) -> str:
    """Render outlines as a JSON document keyed by schema filename."""
    payload: Mapping[str, object] = {
        root.filename: [asdict(entry) for entry in entries] for root, entries in documents
    }
    return json.dumps(payload, indent=2)
