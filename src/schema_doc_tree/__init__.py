"""Lazy documentation decoration for JSON Schema documents."""

import logging

from .configuration import SessionSettings
from .node_decoration import DecoratedNode, NodeMeta, SchemaArray, SchemaNode
from .schema_loading import DocumentSession, SchemaLoadError, create_loader

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "DecoratedNode",
    "DocumentSession",
    "NodeMeta",
    "SchemaArray",
    "SchemaLoadError",
    "SchemaNode",
    "SessionSettings",
    "create_loader",
]
