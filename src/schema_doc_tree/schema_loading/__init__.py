"""Schema loading exports."""

from .identifier_prepass import collect_nested_identifiers
from .schema_documents import SchemaLoadError, read_schema_file
from .session import DocumentSession, SchemaLoader, create_loader

__all__ = [
    "DocumentSession",
    "SchemaLoadError",
    "SchemaLoader",
    "collect_nested_identifiers",
    "create_loader",
    "read_schema_file",
]
