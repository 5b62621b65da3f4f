"""Tests for the document parser."""

import pytest

from pattern_catalog.errors import ParseError
from pattern_catalog.models import Category
from pattern_catalog.parser import normalize_section, parse_document, parse_heading, split_fences


def test_extracts_title_and_category(pattern_doc):
    """Test that title comes from the first level-1 heading and category from the directory."""
    doc = parse_document(pattern_doc("Builder"), "Creational/Builder.md")

    assert doc.title == "Builder"
    assert doc.category == Category.CREATIONAL
    assert doc.category_label == "Creational"
    assert doc.path == "Creational/Builder.md"
    assert doc.key == (Category.CREATIONAL, "Builder")


def test_top_level_document_is_meta():
    """Test that documents at the root belong to the Meta category."""
    doc = parse_document("# Interview Questions\n\nSome text\n", "Interview.md")

    assert doc.category == Category.META
    assert doc.category_label == ""


def test_missing_top_level_heading_raises():
    """Test that a document without '# ' heading fails to parse."""
    with pytest.raises(ParseError) as exc_info:
        parse_document("## Definition\n\nNo title here\n", "Creational/Broken.md")

    assert exc_info.value.path == "Creational/Broken.md"
    assert "top-level heading" in exc_info.value.reason


def test_empty_document_raises():
    """Test that an empty document fails to parse."""
    with pytest.raises(ParseError):
        parse_document("", "Structural/Empty.md")


def test_empty_title_raises():
    """Test that a bare '#' heading is rejected."""
    with pytest.raises(ParseError) as exc_info:
        parse_document("#\n\n## Definition\n", "Structural/Blank.md")

    assert "empty" in exc_info.value.reason


def test_unknown_category_directory_raises():
    """Test that documents outside the known category directories are rejected."""
    with pytest.raises(ParseError) as exc_info:
        parse_document("# Notes\n", "drafts/Notes.md")

    assert "drafts" in str(exc_info.value)


def test_headings_inside_code_blocks_are_ignored():
    """Test that '# comment' lines in code samples are not headings."""
    text = "```python\n# not a title\n```\n"

    with pytest.raises(ParseError):
        parse_document(text, "Behavioral/Observer.md")


def test_records_code_sample_languages():
    """Test that fenced blocks record language tags and byte lengths."""
    text = "\n".join(
        [
            "# Singleton",
            "```Java",
            "abc",
            "```",
            "~~~ python title=example",
            "é",
            "~~~",
            "```",
            "plain",
            "```",
        ]
    )

    doc = parse_document(text, "Creational/Singleton.md")

    assert [s.language for s in doc.code_samples] == ["java", "python", "unspecified"]
    assert doc.code_samples[0].byte_length == 3
    assert doc.code_samples[1].byte_length == 2  # UTF-8 length
    assert doc.code_samples[0].line_number == 2
    assert doc.languages == {"java", "python"}


def test_fence_closes_only_on_matching_fence():
    """Test that a shorter or different fence does not close a block."""
    text = "\n".join(
        [
            "# Composite",
            "````markdown",
            "```",
            "## Inner heading",
            "~~~",
            "````",
            "## Definition",
        ]
    )

    doc = parse_document(text, "Structural/Composite.md")

    assert len(doc.code_samples) == 1
    assert [h.text for h in doc.headings] == ["Composite", "Definition"]


def test_unterminated_fence_runs_to_end():
    """Test that an unclosed fence swallows the rest of the document."""
    doc = parse_document("# Proxy\n```go\n## Structure\n", "Structural/Proxy.md")

    assert len(doc.code_samples) == 1
    assert doc.sections == []


def test_recognizes_required_sections_with_decoration():
    """Test that numbering, emoji and aliases are normalized."""
    text = "\n".join(
        [
            "# Adapter",
            "## 1. Definition",
            "### 📐 Structure:",
            "## Pros and Cons",
            "## Real-World Analogy",
        ]
    )

    doc = parse_document(text, "Structural/Adapter.md")

    assert doc.sections == ["Definition", "Structure", "Pros & Cons"]
    assert doc.section_lines["Structure"] == 3
    assert doc.sections_present == {"Definition", "Structure", "Pros & Cons"}


def test_collects_heading_slugs_and_html_anchors():
    """Test that anchors include heading slugs and explicit HTML anchors."""
    text = '<a name="top"></a>\n# Facade\n## Pros & Cons\n## Example\n## Example\n'

    doc = parse_document(text, "Structural/Facade.md")

    assert {"top", "facade", "pros--cons", "example", "example-1"} <= doc.anchors


def test_records_declared_category():
    """Test that a 'Category:' line is captured as written."""
    text = "# Visitor\n\n**Category:** behavioral\n"

    doc = parse_document(text, "Behavioral/Visitor.md")

    assert doc.declared_category == "behavioral"


def test_parse_heading():
    """Test ATX heading recognition."""
    assert parse_heading("## Structure ##") == (2, "Structure")
    assert parse_heading("# C#") == (1, "C#")
    assert parse_heading("#NoSpace") is None
    assert parse_heading("####### Too deep") is None


def test_normalize_section_rejects_other_headings():
    """Test that non-required headings map to None."""
    assert normalize_section("Real World Example") is None
    assert normalize_section("2) pros & cons") == "Pros & Cons"


def test_split_fences_keeps_line_numbers():
    """Test that prose lines keep their original numbering."""
    prose, samples = split_fences("a\n```\nb\n```\nc\n")

    assert [(line.number, line.text) for line in prose] == [(1, "a"), (5, "c")]
    assert len(samples) == 1


def test_ignores_leading_byte_order_mark(pattern_doc):
    """Test that a BOM before the title does not hide the top-level heading."""
    doc = parse_document("\ufeff" + pattern_doc("Builder"), "Creational/Builder.md")

    assert doc.title == "Builder"
    assert doc.headings[0].line_number == 1
    assert doc.sections == ["Definition", "Structure", "Pros & Cons"]
