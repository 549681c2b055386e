"""Decoration session: one registry and one slug allocator per set of documents."""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from dataclasses import replace
from pathlib import Path
from typing import Any

from schema_doc_tree.configuration.runtime_settings import SessionSettings
from schema_doc_tree.node_decoration import DecorationContext, SchemaNode

from .identifier_prepass import collect_nested_identifiers
from .schema_documents import SchemaLoadError, read_schema_file

_LOGGER = logging.getLogger("schema_doc_tree.loading")

SchemaLoader = Callable[[Mapping[str, Any], str], SchemaNode]


class DocumentSession:
    """Load schema documents that may reference each other through `$ref`."""

    def __init__(self, settings: SessionSettings | None = None) -> None:
        self.settings = settings or SessionSettings()
        self._context = DecorationContext(sparse=self.settings.sparse)
        self._loaded: list[SchemaNode] = []

    @property
    def loaded(self) -> tuple[SchemaNode, ...]:
        """Decorated roots in load order."""
        return tuple(self._loaded)

    def known_identifiers(self) -> tuple[str, ...]:
        return self._context.registry.known()

    def load(self, schema: Mapping[str, Any], filename: str) -> SchemaNode:
        """Decorate a raw schema document and add it to this session."""
        if not isinstance(schema, Mapping):
            raise SchemaLoadError(f"Schema root must be an object: {filename}")
        _LOGGER.info("loading %s", filename)
        root = self._context.decorate_root(schema, filename)
        self._loaded.append(root)
        if self.settings.register_identifiers_eagerly:
            for identifier, path in collect_nested_identifiers(schema):
                self._context.registry.register_pending(identifier, root, path)
        return root

    def load_file(self, schema_path: Path | str) -> SchemaNode:
        """Read a schema file and load it under its own path."""
        return self.load(read_schema_file(schema_path), str(schema_path))


def create_loader(
    settings: SessionSettings | None = None, *, sparse: bool | None = None
) -> SchemaLoader:
    """Return a `load(schema, filename)` callable backed by a fresh session."""
    resolved = settings or SessionSettings()
    if sparse is not None:
        resolved = replace(resolved, sparse=sparse)
    return DocumentSession(resolved).load
