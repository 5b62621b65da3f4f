"""Tests for the index emitter."""

import json

from pattern_catalog.catalog import build_catalog
from pattern_catalog.index import build_index, render_json, render_markdown
from pattern_catalog.models import Category, IndexEntry
from pattern_catalog.parser import parse_document


def _catalog(pattern_doc, paths):
    return build_catalog(parse_document(pattern_doc(p.rsplit("/", 1)[-1][:-3]), p) for p in paths)


PATHS = [
    "Structural/Adapter.md",
    "Creational/Prototype.md",
    "Behavioral/observer.md",
    "Creational/Builder.md",
    "Interview.md",
]


def test_orders_by_category_then_title(pattern_doc):
    """Test category order and alphabetical titles."""
    index = build_index(_catalog(pattern_doc, PATHS))

    assert list(index) == [
        Category.CREATIONAL,
        Category.STRUCTURAL,
        Category.BEHAVIORAL,
        Category.META,
    ]
    assert index[Category.CREATIONAL] == [
        IndexEntry(title="Builder", path="Creational/Builder.md"),
        IndexEntry(title="Prototype", path="Creational/Prototype.md"),
    ]


def test_titles_sort_case_insensitively(pattern_doc):
    """Test that lowercase titles do not sort after uppercase ones."""
    index = build_index(_catalog(pattern_doc, ["Behavioral/observer.md", "Behavioral/Command.md", "Behavioral/Visitor.md"]))

    assert [e.title for e in index[Category.BEHAVIORAL]] == ["Command", "observer", "Visitor"]


def test_omits_empty_categories(pattern_doc):
    """Test that categories without documents are left out."""
    index = build_index(_catalog(pattern_doc, ["Structural/Adapter.md"]))

    assert list(index) == [Category.STRUCTURAL]


def test_render_json_is_idempotent(pattern_doc):
    """Test that emitting twice gives byte-identical output."""
    catalog = _catalog(pattern_doc, PATHS)

    first = render_json(build_index(catalog)).encode("utf-8")
    second = render_json(build_index(catalog)).encode("utf-8")

    assert first == second


def test_output_independent_of_input_order(pattern_doc):
    """Test that a catalog built in reverse order emits the same index."""
    forward = render_json(build_index(_catalog(pattern_doc, PATHS)))
    backward = render_json(build_index(_catalog(pattern_doc, list(reversed(PATHS)))))

    assert forward == backward


def test_render_json_structure(pattern_doc):
    """Test the JSON shape of the index."""
    data = json.loads(render_json(build_index(_catalog(pattern_doc, PATHS))))

    assert list(data) == ["Creational", "Structural", "Behavioral", "Meta"]
    assert data["Creational"][0] == {"title": "Builder", "path": "Creational/Builder.md"}


def test_render_markdown(pattern_doc):
    """Test the Markdown table of contents."""
    output = render_markdown(build_index(_catalog(pattern_doc, ["Creational/Builder.md", "Structural/Adapter.md"])))

    assert output.startswith("# Table of Contents\n")
    assert "- [Creational](#creational)" in output
    assert "## Structural" in output
    assert "- [Builder](Creational/Builder.md)" in output
    assert output.index("## Creational") < output.index("## Structural")
