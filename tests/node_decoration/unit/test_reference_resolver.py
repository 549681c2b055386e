"""`$ref` resolution tests."""

from __future__ import annotations

import copy
import logging

import pytest
from schema_doc_tree.node_decoration import DecorationContext, SchemaNode
from schema_doc_tree.node_decoration.reference_resolver import split_reference

PERSON_ID = "https://example.com/person.schema.json"


def _person_schema() -> dict:
    return {
        "$id": PERSON_ID,
        "title": "Person",
        "definitions": {"name": {"title": "Name", "type": "string", "maxLength": 80}},
        "properties": {
            "first": {"$ref": "#/definitions/name"},
            "last": {"$ref": "#/definitions/name", "title": "Surname", "description": "kept"},
        },
    }


def _decorate(schema: dict, filename: str = "person.schema.json") -> SchemaNode:
    return DecorationContext().decorate_root(schema, filename)


@pytest.mark.parametrize(
    ("reference", "expected"),
    [
        ("other.json#/definitions/a", ("other.json", "/definitions/a")),
        ("#/definitions/a", ("", "/definitions/a")),
        ("other.json", ("other.json", "")),
        ("#", ("", "")),
    ],
)
def test_split_reference(reference: str, expected: tuple[str, str]) -> None:
    assert split_reference(reference) == expected


def test_local_reference_merges_target_keys_into_holder() -> None:
    root = _decorate(_person_schema())

    first = root["properties"]["first"]

    assert first["type"] == "string"
    assert first["title"] == "Name"
    assert first["maxLength"] == 80
    assert first["$ref"] == "#/definitions/name"
    assert first.pointer == "/properties/first"
    assert first.titles == ("Person", "Name")


def test_target_keys_overwrite_holder_keys() -> None:
    root = _decorate(_person_schema())

    last = root["properties"]["last"]

    assert last["title"] == "Name"
    assert last["description"] == "kept"


def test_resolution_is_idempotent_and_leaves_input_untouched() -> None:
    raw = _person_schema()
    original = copy.deepcopy(raw)

    first_pass = dict(_decorate(raw)["properties"]["first"].items())
    second_pass = dict(_decorate(raw)["properties"]["first"].items())

    assert first_pass == second_pass
    assert raw == original


def test_unknown_base_identifier_leaves_holder_unmerged(caplog: pytest.LogCaptureFixture) -> None:
    root = _decorate({"properties": {"x": {"$ref": "missing.json#/definitions/a"}}})

    with caplog.at_level(logging.WARNING, logger="schema_doc_tree.references"):
        x = root["properties"]["x"]

    assert dict(x.items()) == {"$ref": "missing.json#/definitions/a"}
    assert "cannot resolve missing.json#/definitions/a" in caplog.text
    assert "unknown schema missing.json" in caplog.text


def test_missing_pointer_is_reported(caplog: pytest.LogCaptureFixture) -> None:
    root = _decorate({"$id": "doc", "properties": {"x": {"$ref": "#/definitions/nope"}}})

    with caplog.at_level(logging.WARNING, logger="schema_doc_tree.references"):
        x = root["properties"]["x"]

    assert "type" not in x
    assert "not found" in caplog.text


def test_reference_to_document_root_reuses_decorated_children() -> None:
    root = _decorate({"$id": "tree", "properties": {"child": {"$ref": "#"}}})

    child = root["properties"]["child"]

    assert child["properties"] is root["properties"]
    assert child["properties"]["child"] is child
    assert root.resolve("/properties/child/properties") is root["properties"]


def test_self_including_reference_terminates(caplog: pytest.LogCaptureFixture) -> None:
    root = _decorate({"$id": "loop", "properties": {"a": {"$ref": "#/properties/a"}}})

    with caplog.at_level(logging.WARNING, logger="schema_doc_tree.references"):
        a = root["properties"]["a"]

    assert a["$ref"] == "#/properties/a"
    assert root["properties"]["a"] is a
    assert "reference includes itself" in caplog.text


def test_reference_without_any_base_identifier_is_reported(
    caplog: pytest.LogCaptureFixture,
) -> None:
    root = _decorate({"properties": {"x": {"$ref": "#/definitions/a"}}, "definitions": {"a": {}}})

    with caplog.at_level(logging.WARNING, logger="schema_doc_tree.references"):
        x = root["properties"]["x"]

    assert list(x) == ["$ref"]
    assert "no base identifier" in caplog.text


def test_references_inside_arrays_resolve_against_inherited_identifier() -> None:
    root = _decorate(
        {
            "$id": "shapes",
            "definitions": {"round": {"title": "Round", "properties": {"r": {"type": "number"}}}},
            "allOf": [{"$ref": "#/definitions/round"}],
        }
    )

    member = root["allOf"][0]

    assert member["title"] == "Round"
    assert member.pointer == "/allOf/0"
    assert member["properties"].pointer == "/definitions/round/properties"


def test_borrowed_identifier_does_not_replace_registered_document() -> None:
    context = DecorationContext()
    other = context.decorate_root({"$id": "other", "title": "Other"}, "other.json")
    main = context.decorate_root({"properties": {"o": {"$ref": "other"}}}, "main.json")

    holder = main["properties"]["o"]

    assert holder["$id"] == "other"
    assert context.registry.lookup("other") is other
