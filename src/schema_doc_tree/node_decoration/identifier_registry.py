"""Session-wide lookup of decorated schemas by `$id`."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .decorated_nodes import DecoratedNode, SchemaNode

_LOGGER = logging.getLogger("schema_doc_tree.registry")


@dataclass(frozen=True)
class PendingIdentifier:
    """Location of an identified subschema that has not been decorated yet."""

    root: SchemaNode
    path: tuple[str, ...]

    @property
    def pointer(self) -> str:
        return "".join(f"/{segment}" for segment in self.path)

    def describe(self) -> str:
        return f"{self.root.filename}#{self.pointer}"


class IdentifierRegistry:
    """Map schema identifiers to decorated nodes, keeping the first registration."""

    def __init__(self) -> None:
        self._nodes: dict[str, DecoratedNode] = {}
        self._pending: dict[str, PendingIdentifier] = {}

    def register(self, identifier: str, node: DecoratedNode) -> None:
        """Store the node under its identifier unless another node already claimed it."""
        existing = self._nodes.get(identifier)
        if existing is node:
            return
        if existing is not None:
            _warn_collision(identifier, kept=_describe(existing), dropped=_describe(node))
            return

        pending = self._pending.get(identifier)
        if pending is not None:
            if pending.root is not node.root or pending.pointer != node.pointer:
                _warn_collision(identifier, kept=pending.describe(), dropped=_describe(node))
                return
            del self._pending[identifier]

        self._nodes[identifier] = node

    def register_pending(self, identifier: str, root: SchemaNode, path: tuple[str, ...]) -> None:
        """Remember where an identified subschema lives so it can be decorated on demand."""
        location = PendingIdentifier(root=root, path=path)
        if identifier in self._nodes:
            existing = self._nodes[identifier]
            if existing.root is not root or existing.pointer != location.pointer:
                _warn_collision(identifier, kept=_describe(existing), dropped=location.describe())
            return
        if identifier in self._pending:
            _warn_collision(
                identifier, kept=self._pending[identifier].describe(), dropped=location.describe()
            )
            return
        self._pending[identifier] = location

    def lookup(self, identifier: str) -> DecoratedNode | None:
        """Return the node for an identifier, decorating a pending location if needed."""
        node = self._nodes.get(identifier)
        if node is not None:
            return node

        pending = self._pending.pop(identifier, None)
        if pending is None:
            return None
        located = pending.root.resolve(list(pending.path))
        if identifier not in self._nodes:
            if located is None:
                _LOGGER.warning(
                    "identifier %s no longer found at %s", identifier, pending.describe()
                )
                return None
            self._nodes[identifier] = located
        return self._nodes[identifier]

    def known(self) -> tuple[str, ...]:
        return tuple(self._nodes) + tuple(key for key in self._pending if key not in self._nodes)

    def __contains__(self, identifier: object) -> bool:
        return identifier in self._nodes or identifier in self._pending


def _describe(node: DecoratedNode) -> str:
    return f"{node.filename}#{node.pointer}"


def _warn_collision(identifier: str, *, kept: str, dropped: str) -> None:
    _LOGGER.warning(
        "duplicate schema identifier %s: keeping %s, ignoring %s", identifier, kept, dropped
    )
