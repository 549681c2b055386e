"""Lazily decorated views over raw JSON Schema documents.

A decorated node wraps one raw schema object or array. Raw keys are read with
item access and come back decorated: nested objects and arrays are wrapped on
first read, `$ref` holders are merged with their target, and single-branch
`if`/`then` conditionals are flattened. Computed attributes (`parent`,
`pointer`, `filename`, `id`, `titles`, `slug`, `meta`, `resolve`) live on the
node itself and never collide with schema keys.

The caller's raw document is never modified. Merging and normalization work
on copies that back the decorated child.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping, Sequence
from typing import Any

from . import keywords
from .conditional_normalizer import normalize_conditional
from .example_loader import load_examples
from .identifier_registry import IdentifierRegistry
from .node_metadata import NodeMeta, describe_node
from .reference_resolver import ReferenceResolver
from .slug_allocator import SlugAllocator, abbreviate, document_label

PathLike = str | Sequence[str] | None


class DecorationContext:
    """State shared by every node decorated within one session."""

    def __init__(self, *, sparse: bool = False) -> None:
        self.sparse = sparse
        self.registry = IdentifierRegistry()
        self.slugs = SlugAllocator()
        self.references = ReferenceResolver(self.registry)
        self._arena: list[DecoratedNode] = []

    def adopt(self, node: DecoratedNode) -> int:
        """Take ownership of a node and return its handle."""
        self._arena.append(node)
        return len(self._arena) - 1

    def node(self, handle: int) -> DecoratedNode:
        return self._arena[handle]

    def decorate_root(self, raw: Mapping[str, Any], filename: str) -> SchemaNode:
        """Wrap a raw document and register it when it carries an `$id`."""
        root = SchemaNode(raw, self, filename=filename)
        identifier = root.own_id
        if identifier:
            self.registry.register(identifier, root)
        return root


class DecoratedNode:
    """Attributes shared by decorated objects and arrays."""

    def __init__(
        self,
        raw: Any,
        context: DecorationContext,
        *,
        filename: str,
        path: tuple[str, ...] = (),
        parent: DecoratedNode | None = None,
    ) -> None:
        self._raw = raw
        self._context = context
        self._filename = filename
        self._path = path
        self._parent_handle = parent._handle if parent is not None else None
        self._handle = context.adopt(self)
        self._children: dict[str | int, DecoratedNode] = {}
        self._slug: str | None = None
        self._titles: tuple[str, ...] | None = None

    @property
    def raw(self) -> Any:
        """The normalized underlying value; treat as read-only."""
        return self._raw

    @property
    def parent(self) -> DecoratedNode | None:
        if self._parent_handle is None:
            return None
        return self._context.node(self._parent_handle)

    @property
    def root(self) -> SchemaNode:
        node: DecoratedNode = self
        while node.parent is not None:
            node = node.parent
        assert isinstance(node, SchemaNode)
        return node

    @property
    def pointer(self) -> str:
        """Slash-joined access path from the root; the root itself is `""`."""
        return "".join(f"/{segment}" for segment in self._path)

    @property
    def filename(self) -> str:
        return self._filename

    @property
    def own_id(self) -> str | None:
        return None

    @property
    def id(self) -> str | None:
        """Own `$id`, or the identifier inherited from the nearest identified ancestor."""
        own = self.own_id
        if own:
            return own
        parent = self.parent
        return parent.id if parent is not None else None

    @property
    def own_title(self) -> str | None:
        return None

    @property
    def titles(self) -> tuple[str, ...]:
        """Ancestor titles followed by this node's title, when it has one."""
        if self._titles is None:
            parent = self.parent
            inherited = parent.titles if parent is not None else ()
            title = self.own_title
            self._titles = (*inherited, title) if title is not None else inherited
        return self._titles

    @property
    def slug(self) -> str:
        """Session-unique anchor for this node, computed once."""
        if self._slug is None:
            self._slug = self._context.slugs.slug(self._slug_label())
        return self._slug

    @property
    def meta(self) -> NodeMeta:
        return describe_node(self)

    def resolve(self, path: PathLike = None) -> DecoratedNode | None:
        """Walk a JSON Pointer (or pre-split segments) down from this node.

        Empty segments are skipped, so `""`, `"/"` and `None` all return the
        node itself. Returns None as soon as a segment is missing or lands on
        a plain value.
        """
        if path is None:
            return self
        segments = path.split("/") if isinstance(path, str) else list(path)
        node: DecoratedNode = self
        for segment in segments:
            if not segment:
                continue
            child = node._child_at(_decode_pointer_segment(segment))
            if not isinstance(child, DecoratedNode):
                return None
            node = child
        return node

    def _child_at(self, segment: str) -> Any:
        raise NotImplementedError

    def _slug_label(self) -> str:
        dense = not self._context.sparse
        parent = self.parent
        if parent is None:
            label = document_label(self._filename)
            return abbreviate(label) if dense else label
        text = self.own_title or self._path[-1]
        return f"{parent.slug}-{abbreviate(text) if dense else text}"

    def _decorate(self, key: str | int, value: Any) -> Any:
        if isinstance(value, DecoratedNode):
            # Already decorated: arrived here through a `$ref` merge.
            return value
        if not isinstance(value, Mapping | list):
            return value
        cached = self._children.get(key)
        if cached is not None:
            return cached

        path = (*self._path, str(key))
        if isinstance(value, list):
            child: DecoratedNode = SchemaArray(
                value, self._context, filename=self._filename, path=path, parent=self
            )
            self._children[key] = child
            return child

        data, borrowed_id = self._merge_reference(value, path)
        cached = self._children.get(key)
        if cached is not None:
            # The reference led back here and the key was decorated meanwhile.
            return cached
        data = normalize_conditional(data)
        node = SchemaNode(data, self._context, filename=self._filename, path=path, parent=self)
        self._children[key] = node
        identifier = node.own_id
        if identifier and not borrowed_id:
            self._context.registry.register(identifier, node)
        return node

    def _merge_reference(
        self, value: Mapping[str, Any], path: tuple[str, ...]
    ) -> tuple[Mapping[str, Any], bool]:
        """Overlay the `$ref` target's entries on a copy of the holder."""
        reference = value.get(keywords.REF)
        if not isinstance(reference, str) or not reference:
            return value, False
        origin = self._filename + "#" + "".join(f"/{segment}" for segment in path)
        target = self._context.references.resolve(
            reference, base_identifier=self.id, origin=origin
        )
        if not isinstance(target, SchemaNode):
            return value, False
        merged = dict(value)
        for key in target:
            merged[key] = target[key]
        return merged, target.own_id is not None


class SchemaNode(DecoratedNode, Mapping[str, Any]):
    """Decorated view of a JSON Schema object."""

    def __getitem__(self, key: str) -> Any:
        try:
            value = self._raw[key]
        except KeyError:
            if key == keywords.EXAMPLES and self._parent_handle is None:
                return load_examples(self._filename)
            raise
        return self._decorate(key, value)

    def __iter__(self) -> Iterator[str]:
        return iter(self._raw)

    def __len__(self) -> int:
        return len(self._raw)

    def __contains__(self, key: object) -> bool:
        return key in self._raw

    def __repr__(self) -> str:
        return f"SchemaNode(filename={self._filename!r}, pointer={self.pointer!r})"

    @property
    def own_id(self) -> str | None:
        identifier = self._raw.get(keywords.ID)
        return identifier if isinstance(identifier, str) and identifier else None

    @property
    def own_title(self) -> str | None:
        title = self._raw.get(keywords.TITLE)
        return title if isinstance(title, str) else None

    def _child_at(self, segment: str) -> Any:
        if segment not in self._raw:
            return None
        return self[segment]


class SchemaArray(DecoratedNode, Sequence[Any]):
    """Decorated view of a JSON array inside a schema (`allOf`, `items`, ...)."""

    def __getitem__(self, index):  # type: ignore[override]
        if isinstance(index, slice):
            return [self[position] for position in range(*index.indices(len(self)))]
        if index < 0:
            index += len(self._raw)
        return self._decorate(index, self._raw[index])

    def __len__(self) -> int:
        return len(self._raw)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Sequence) and not isinstance(other, str | bytes):
            return list(self) == list(other)
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"SchemaArray(filename={self._filename!r}, pointer={self.pointer!r})"

    def _child_at(self, segment: str) -> Any:
        if not segment.isdigit() or int(segment) >= len(self._raw):
            return None
        return self[int(segment)]


def _decode_pointer_segment(segment: str) -> str:
    return segment.replace("~1", "/").replace("~0", "~")
