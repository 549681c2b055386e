"""Aggregate per-node metadata consumed by documentation renderers."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import PurePath
from typing import TYPE_CHECKING, Any

from . import keywords

if TYPE_CHECKING:
    from .decorated_nodes import DecoratedNode


@dataclass(frozen=True)
class NodeMeta:  # pylint: disable=too-many-instance-attributes
    """Summary of one decorated node."""

    pointer: str
    filename: str
    defined_in: str
    id: str | None
    slug: str
    titles: tuple[str, ...]
    types: tuple[str, ...]
    short_description: str | None
    long_description: str | None
    abstract: bool
    extensible: bool
    additional: bool
    custom: bool
    status: str | None


def describe_node(node: DecoratedNode) -> NodeMeta:
    """Collect the metadata a renderer shows in a node's header."""
    raw = node.raw if isinstance(node.raw, Mapping) else {}
    description = raw.get(keywords.DESCRIPTION)
    long_description = description if isinstance(description, str) else None
    return NodeMeta(
        pointer=node.pointer,
        filename=node.filename,
        defined_in=PurePath(node.filename).name,
        id=node.id,
        slug=node.slug,
        titles=node.titles,
        types=_declared_types(raw),
        short_description=_first_paragraph(long_description),
        long_description=long_description,
        abstract=_is_abstract(raw),
        extensible=any(key in raw for key in keywords.DEFINITION_KEYWORDS),
        additional=raw.get(keywords.ADDITIONAL_PROPERTIES) is not False,
        custom=any(key not in keywords.KNOWN_KEYWORDS for key in raw),
        status=_status(raw),
    )


def _declared_types(raw: Mapping[str, Any]) -> tuple[str, ...]:
    declared = raw.get(keywords.TYPE)
    if isinstance(declared, str):
        return (declared,)
    if isinstance(declared, list):
        return tuple(value for value in declared if isinstance(value, str))
    return ()


def _first_paragraph(text: str | None) -> str | None:
    if text is None:
        return None
    return text.strip().split("\n\n", 1)[0].strip()


def _is_abstract(raw: Mapping[str, Any]) -> bool:
    has_definitions = any(key in raw for key in keywords.DEFINITION_KEYWORDS)
    return has_definitions and keywords.PROPERTIES not in raw and keywords.TYPE not in raw


def _status(raw: Mapping[str, Any]) -> str | None:
    if raw.get(keywords.DEPRECATED) is True:
        return "deprecated"
    status = raw.get(keywords.META_STATUS)
    return status if isinstance(status, str) else None
