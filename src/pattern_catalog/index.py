"""Navigation index emitted from a validated catalog."""

import json

from .catalog import Catalog
from .models import Category, IndexEntry
from .slugs import slugify


def build_index(catalog: Catalog) -> dict[Category, list[IndexEntry]]:
    """Build the navigation index.

    Categories appear in navigation order (empty ones omitted); entries are
    sorted alphabetically by title, ignoring case.

    Args:
        catalog: Validated catalog

    Returns:
        Ordered mapping of category to index entries
    """
    index: dict[Category, list[IndexEntry]] = {}
    for category in catalog.categories():
        documents = sorted(
            catalog.in_category(category),
            key=lambda d: (d.title.casefold(), d.title, d.path),
        )
        index[category] = [IndexEntry(title=d.title, path=d.path) for d in documents]
    return index


def index_to_dict(index: dict[Category, list[IndexEntry]]) -> dict[str, list[dict[str, str]]]:
    return {
        category.value: [{"title": e.title, "path": e.path} for e in entries]
        for category, entries in index.items()
    }


def render_json(index: dict[Category, list[IndexEntry]]) -> str:
    """Serialize the index as JSON (key order preserved)."""
    return json.dumps(index_to_dict(index), indent=2, ensure_ascii=False) + "\n"


def render_markdown(index: dict[Category, list[IndexEntry]], title: str = "Table of Contents") -> str:
    """Render the index as a Markdown table of contents.

    Example:
        # Table of Contents

        - [Creational](#creational)

        ## Creational

        - [Builder](Creational/Builder.md)
    """
    lines = [f"# {title}", ""]
    for category in index:
        lines.append(f"- [{category.value}](#{slugify(category.value)})")
    lines.append("")

    for category, entries in index.items():
        lines.append(f"## {category.value}")
        lines.append("")
        for entry in entries:
            target = entry.path.replace(" ", "%20")
            lines.append(f"- [{entry.title}]({target})")
        lines.append("")

    return "\n".join(lines)
