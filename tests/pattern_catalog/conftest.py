"""Shared fixtures for pattern_catalog tests."""

from pathlib import Path

import pytest

REQUIRED = ("Definition", "Structure", "Pros & Cons")


def make_pattern_doc(
    title: str,
    sections: tuple[str, ...] = REQUIRED,
    languages: tuple[str, ...] = ("java", "python"),
    extra: str = "",
) -> str:
    """Build the text of a well-formed pattern document."""
    lines = [f"# {title}", "", "## Table of Contents", ""]
    for name in sections:
        anchor = name.lower().replace("&", "").replace(" ", "-")
        lines.append(f"- [{name}](#{anchor})")
    lines.append("")
    for name in sections:
        lines.extend([f"## {name}", "", f"{title} {name.lower()} text.", ""])
        if name == "Structure":
            for language in languages:
                lines.extend([f"```{language}", f"// {title} in {language}", "```", ""])
    lines.append(extra)
    lines.append("[Back to Top](#table-of-contents)")
    return "\n".join(lines) + "\n"


@pytest.fixture
def pattern_doc():
    """Factory for pattern document text."""
    return make_pattern_doc


@pytest.fixture
def write_catalog(tmp_path):
    """Write {relative path: text} into a fresh catalog root and return the root."""

    def _write(files: dict[str, str]) -> Path:
        for relative, text in files.items():
            path = tmp_path / relative
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(text, encoding="utf-8")
        return tmp_path

    return _write
