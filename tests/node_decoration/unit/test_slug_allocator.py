"""Slug allocation tests."""

from __future__ import annotations

from schema_doc_tree.node_decoration.slug_allocator import (
    SlugAllocator,
    abbreviate,
    document_label,
    slugify,
)


def test_slugify_lowercases_and_joins_words_with_hyphens() -> None:
    assert slugify("doc-Hello World") == "doc-hello-world"
    assert slugify("Héllo, Wörld!") == "héllo-wörld"
    assert slugify("snake_case") == "snake_case"


def test_allocator_suffixes_repeated_labels() -> None:
    allocator = SlugAllocator()

    assert allocator.slug("Item") == "item"
    assert allocator.slug("item") == "item-1"
    assert allocator.slug("item") == "item-2"


def test_allocator_never_returns_a_slug_twice_even_for_suffix_lookalikes() -> None:
    allocator = SlugAllocator()

    first = allocator.slug("a")
    second = allocator.slug("a")
    lookalike = allocator.slug("a-1")

    assert (first, second) == ("a", "a-1")
    assert lookalike == "a-1-1"


def test_separate_allocators_do_not_share_state() -> None:
    assert SlugAllocator().slug("same") == SlugAllocator().slug("same") == "same"


def test_abbreviate_cuts_each_hyphen_separated_part_to_three_characters() -> None:
    assert abbreviate("first-name-field") == "fir-nam-fie"
    assert abbreviate("Hello World") == "Hel"
    assert abbreviate("id") == "id"


def test_document_label_uses_basename_up_to_first_dot() -> None:
    assert document_label("/tmp/schemas/doc.schema.json") == "doc"
    assert document_label("widget.json") == "widget"
    assert document_label("plain") == "plain"
