"""Outline writing exports."""

from .outline_builder import (
    OutlineEntry,
    build_outline,
    format_outline_json,
    format_outline_text,
    walk_schema,
)

__all__ = [
    "OutlineEntry",
    "build_outline",
    "format_outline_json",
    "format_outline_text",
    "walk_schema",
]
