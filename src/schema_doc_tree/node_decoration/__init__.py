"""Node decoration exports."""

from .conditional_normalizer import normalize_conditional
from .decorated_nodes import DecoratedNode, DecorationContext, SchemaArray, SchemaNode
from .example_loader import example_path, load_examples
from .identifier_registry import IdentifierRegistry
from .node_metadata import NodeMeta, describe_node
from .reference_resolver import ReferenceResolver, split_reference
from .slug_allocator import SlugAllocator, abbreviate, document_label, slugify

__all__ = [
    "DecoratedNode",
    "DecorationContext",
    "IdentifierRegistry",
    "NodeMeta",
    "ReferenceResolver",
    "SchemaArray",
    "SchemaNode",
    "SlugAllocator",
    "abbreviate",
    "describe_node",
    "document_label",
    "example_path",
    "load_examples",
    "normalize_conditional",
    "slugify",
    "split_reference",
]
