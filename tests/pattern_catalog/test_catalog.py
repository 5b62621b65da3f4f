"""Tests for the catalog builder."""

import pytest

from pattern_catalog.catalog import build_catalog
from pattern_catalog.errors import DuplicateKeyError
from pattern_catalog.models import Category
from pattern_catalog.parser import parse_document


def _docs(pattern_doc, paths):
    return [parse_document(pattern_doc(p.rsplit("/", 1)[-1][:-3]), p) for p in paths]


def test_builds_catalog_with_unique_keys(pattern_doc):
    """Test that every document with a unique key lands in the catalog."""
    docs = _docs(
        pattern_doc,
        ["Creational/Builder.md", "Creational/Prototype.md", "Structural/Adapter.md"],
    )

    catalog = build_catalog(docs)

    assert len(catalog) == len(docs)
    assert catalog.get(Category.CREATIONAL, "Builder").path == "Creational/Builder.md"
    assert catalog.by_path("Structural/Adapter.md").title == "Adapter"
    assert "Structural/Adapter.md" in catalog
    assert catalog.categories() == [Category.CREATIONAL, Category.STRUCTURAL]


def test_same_title_in_different_categories_is_allowed(pattern_doc):
    """Test that keys combine category and title."""
    docs = [
        parse_document(pattern_doc("Proxy"), "Structural/Proxy.md"),
        parse_document(pattern_doc("Proxy"), "Behavioral/Proxy.md"),
    ]

    assert len(build_catalog(docs)) == 2


def test_duplicate_key_names_both_paths(pattern_doc):
    """Test that a duplicate (category, title) fails with both paths."""
    first = parse_document(pattern_doc("Builder"), "Creational/Builder.md")
    second = parse_document(pattern_doc("Builder"), "Creational/BuilderCopy.md")

    with pytest.raises(DuplicateKeyError) as exc_info:
        build_catalog([first, second])

    error = exc_info.value
    assert error.first_path == "Creational/Builder.md"
    assert error.second_path == "Creational/BuilderCopy.md"
    assert error.category == "Creational"
    assert error.title == "Builder"
    assert "Creational/Builder.md" in str(error)
    assert "Creational/BuilderCopy.md" in str(error)


def test_duplicate_reports_later_document_as_second(pattern_doc):
    """Test that the second path is always the later input."""
    first = parse_document(pattern_doc("Builder"), "Creational/Builder.md")
    second = parse_document(pattern_doc("Builder"), "Creational/BuilderCopy.md")

    with pytest.raises(DuplicateKeyError) as exc_info:
        build_catalog([second, first])

    assert exc_info.value.second_path == "Creational/Builder.md"


def test_insertion_order_does_not_change_content(pattern_doc):
    """Test that the catalog iterates the same way whatever the input order."""
    docs = _docs(
        pattern_doc,
        ["Structural/Adapter.md", "Creational/Prototype.md", "Creational/Builder.md", "Guide.md"],
    )

    forward = [d.path for d in build_catalog(docs)]
    backward = [d.path for d in build_catalog(list(reversed(docs)))]

    assert forward == backward
    assert forward == [
        "Creational/Builder.md",
        "Creational/Prototype.md",
        "Structural/Adapter.md",
        "Guide.md",
    ]


def test_empty_catalog():
    """Test that no documents yields an empty catalog."""
    catalog = build_catalog([])

    assert len(catalog) == 0
    assert catalog.categories() == []
