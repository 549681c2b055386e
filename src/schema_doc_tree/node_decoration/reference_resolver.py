"""`$ref` resolution against the session identifier registry."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from .identifier_registry import IdentifierRegistry

if TYPE_CHECKING:
    from .decorated_nodes import DecoratedNode

_LOGGER = logging.getLogger("schema_doc_tree.references")


def split_reference(reference: str) -> tuple[str, str]:
    """Split `<uri>#<pointer>` into its two halves, either of which may be empty."""
    uri, _, pointer = reference.partition("#")
    return uri, pointer


class ReferenceResolver:
    """Look up the document a `$ref` names and walk its JSON Pointer."""

    def __init__(self, registry: IdentifierRegistry) -> None:
        self._registry = registry
        self._in_progress: set[tuple[str, str]] = set()

    def resolve(
        self, reference: str, *, base_identifier: str | None, origin: str
    ) -> DecoratedNode | None:
        """Return the decorated target of the reference, or None when it cannot be found.

        Args:
          reference: The `$ref` value.
          base_identifier: Identifier in effect where the reference appears. Used
            when the reference has no document part.
          origin: `filename#pointer` of the referencing node, for diagnostics.
        """
        uri, pointer = split_reference(reference)
        base = uri or base_identifier
        if not base:
            _LOGGER.warning("cannot resolve %s from %s: no base identifier", reference, origin)
            return None

        key = (base, pointer)
        if key in self._in_progress:
            _LOGGER.warning(
                "cannot resolve %s from %s: reference includes itself", reference, origin
            )
            return None

        self._in_progress.add(key)
        try:
            document = self._registry.lookup(base)
            if document is None:
                _LOGGER.warning(
                    "cannot resolve %s from %s: unknown schema %s", reference, origin, base
                )
                return None
            target = document.resolve(pointer)
        finally:
            self._in_progress.discard(key)

        if target is None:
            _LOGGER.warning(
                "cannot resolve %s from %s: pointer %r not found in %s",
                reference,
                origin,
                pointer,
                base,
            )
        return target
