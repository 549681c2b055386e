"""Flattening of single-branch `if`/`then` conditional schemas."""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any

from . import keywords


def normalize_conditional(node: Mapping[str, Any]) -> Mapping[str, Any]:
    """Return a copy of the node with its `if`/`then` pair folded into plain keywords.

    Only nodes with `if` and without `else` are rewritten. Conditions on
    `properties` become a titled object whose properties come from the `then`
    branch. Conditions on `type` lift the first `then` keyword into the node.
    Every other shape is returned as given.
    """
    if keywords.IF not in node or keywords.ELSE in node:
        return node
    condition = node[keywords.IF]
    if not isinstance(condition, Mapping):
        return node
    consequence = node.get(keywords.THEN)
    if not isinstance(consequence, Mapping):
        consequence = {}

    condition_properties = condition.get(keywords.PROPERTIES)
    if isinstance(condition_properties, Mapping) and condition_properties:
        normalized = _normalize_property_condition(node, condition, consequence)
    elif condition.get(keywords.TYPE):
        normalized = _normalize_type_condition(node, condition, consequence)
    else:
        return node

    normalized.pop(keywords.IF, None)
    normalized.pop(keywords.THEN, None)
    return normalized


def _normalize_property_condition(
    node: Mapping[str, Any], condition: Mapping[str, Any], consequence: Mapping[str, Any]
) -> dict[str, Any]:
    condition_properties = condition[keywords.PROPERTIES]
    discriminant = next(iter(condition_properties))
    discriminant_schema = condition_properties[discriminant]
    constant = (
        discriminant_schema.get(keywords.CONST, _UNDEFINED)
        if isinstance(discriminant_schema, Mapping)
        else _UNDEFINED
    )
    normalized = dict(node)
    normalized[keywords.TITLE] = f"property {discriminant} is {_display(constant)}"
    normalized[keywords.PROPERTIES] = consequence.get(keywords.PROPERTIES)
    return normalized


def _normalize_type_condition(
    node: Mapping[str, Any], condition: Mapping[str, Any], consequence: Mapping[str, Any]
) -> dict[str, Any]:
    condition_type = condition[keywords.TYPE]
    discriminant = next(iter(consequence), None)
    branch = consequence.get(discriminant) if discriminant is not None else None
    branch_mapping: Mapping[str, Any] = branch if isinstance(branch, Mapping) else {}

    normalized = dict(node)
    if condition_type == "array":
        normalized[keywords.TITLE] = f"type is array of {discriminant}"
        normalized[keywords.ALL_OF] = branch_mapping.get(keywords.ALL_OF)
    elif condition_type == "object":
        normalized[keywords.TITLE] = f"type is object of {discriminant}"
        existing = node.get(discriminant) if discriminant is not None else None
        merged = dict(existing) if isinstance(existing, Mapping) else {}
        merged[keywords.PROPERTIES] = branch_mapping.get(keywords.PROPERTIES)
        if discriminant is not None:
            normalized[discriminant] = merged
    else:
        normalized[keywords.TITLE] = f"type is {_display(condition_type)}"
        if discriminant is not None:
            normalized[discriminant] = branch
    return normalized


_UNDEFINED = object()


def _display(value: Any) -> str:
    """Render a value the way it reads when spliced into a generated title."""
    if value is _UNDEFINED:
        return "undefined"
    if isinstance(value, str):
        return value
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return json.dumps(value, separators=(",", ":"))
