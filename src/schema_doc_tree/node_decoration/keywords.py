"""Shared JSON Schema keyword constants."""

from __future__ import annotations

ID = "$id"
REF = "$ref"
TITLE = "title"
DESCRIPTION = "description"
TYPE = "type"
CONST = "const"
PROPERTIES = "properties"
ADDITIONAL_PROPERTIES = "additionalProperties"
ITEMS = "items"
IF = "if"
THEN = "then"
ELSE = "else"
ALL_OF = "allOf"
ANY_OF = "anyOf"
ONE_OF = "oneOf"
DEFS = "$defs"
DEFINITIONS = "definitions"
EXAMPLES = "examples"
DEPRECATED = "deprecated"
META_STATUS = "meta:status"

COMPOSITION_KEYWORDS: tuple[str, ...] = (ALL_OF, ANY_OF, ONE_OF)
DEFINITION_KEYWORDS: tuple[str, ...] = (DEFS, DEFINITIONS)

KNOWN_KEYWORDS: frozenset[str] = frozenset(
    {
        "$schema",
        ID,
        REF,
        "$anchor",
        "$comment",
        "$vocabulary",
        "$dynamicRef",
        "$dynamicAnchor",
        DEFS,
        DEFINITIONS,
        TITLE,
        DESCRIPTION,
        "default",
        EXAMPLES,
        DEPRECATED,
        "readOnly",
        "writeOnly",
        TYPE,
        "enum",
        CONST,
        "format",
        "contentEncoding",
        "contentMediaType",
        "contentSchema",
        "multipleOf",
        "maximum",
        "exclusiveMaximum",
        "minimum",
        "exclusiveMinimum",
        "maxLength",
        "minLength",
        "pattern",
        ITEMS,
        "prefixItems",
        "additionalItems",
        "unevaluatedItems",
        "contains",
        "maxContains",
        "minContains",
        "maxItems",
        "minItems",
        "uniqueItems",
        PROPERTIES,
        "patternProperties",
        ADDITIONAL_PROPERTIES,
        "unevaluatedProperties",
        "propertyNames",
        "maxProperties",
        "minProperties",
        "required",
        "dependentRequired",
        "dependentSchemas",
        "dependencies",
        ALL_OF,
        ANY_OF,
        ONE_OF,
        "not",
        IF,
        THEN,
        ELSE,
    }
)
