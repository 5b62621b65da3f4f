"""Parse one Markdown pattern document into a PatternDocument."""

import re
from dataclasses import dataclass
from pathlib import PurePosixPath

from common.constants import SECTION_ALIASES, UNSPECIFIED_LANGUAGE

from .errors import ParseError
from .models import Category, CodeSample, Heading, PatternDocument
from .slugs import Slugger, strip_inline_markup

_FENCE = re.compile(r"^ {0,3}(?P<fence>`{3,}|~{3,})(?P<info>.*)$")
_HEADING = re.compile(r"^ {0,3}(?P<marks>#{1,6})(?:[ \t]+(?P<text>.*?))?[ \t]*$")
_CLOSING_HASHES = re.compile(r"(?:^|[ \t]+)#+$")
_HTML_TAG = re.compile(r"<[A-Za-z][^>]*>")
_ANCHOR_ATTR = re.compile(r"""\b(?:name|id)\s*=\s*["']([^"']+)["']""")
_DECLARED_CATEGORY = re.compile(
    r"^\s*(?:[-*+]\s+)?[*_]{0,2}category[*_]{0,2}\s*:\s*[*_]{0,2}\s*(?P<name>[A-Za-z]+)",
    re.IGNORECASE,
)
_NUMBERING = re.compile(r"^(?:\d+(?:\.\d+)*[.)]?|[ivx]+[.)])\s+")
_SECTION_NOISE = re.compile(r"[^\w\s&.)]", re.UNICODE)


@dataclass(frozen=True)
class ProseLine:
    """A line that sits outside every fenced code block."""

    number: int
    text: str


def split_fences(text: str) -> tuple[list[ProseLine], list[CodeSample]]:
    """Separate prose lines from fenced code blocks.

    A fence closes only on a line of the same character that is at least as
    long as the opening fence. An unterminated fence runs to end of file.

    Args:
        text: Raw document text

    Returns:
        Tuple of (prose lines, code samples in document order)
    """
    prose: list[ProseLine] = []
    samples: list[CodeSample] = []

    fence: str | None = None
    language = UNSPECIFIED_LANGUAGE
    opened_at = 0
    body: list[str] = []

    # Drop a leading byte-order mark so line 1 can hold the title
    for line_num, line in enumerate(text.removeprefix("\ufeff").splitlines(), start=1):
        if fence is None:
            match = _FENCE.match(line)
            if match and not (match.group("fence")[0] == "`" and "`" in match.group("info")):
                fence = match.group("fence")
                info = match.group("info").strip()
                language = info.split()[0].lower() if info else UNSPECIFIED_LANGUAGE
                opened_at = line_num
                body = []
            else:
                prose.append(ProseLine(line_num, line))
            continue

        stripped = line.strip()
        if stripped and set(stripped) == {fence[0]} and len(stripped) >= len(fence):
            samples.append(_code_sample(language, body, opened_at))
            fence = None
        else:
            body.append(line)

    if fence is not None:
        samples.append(_code_sample(language, body, opened_at))

    return prose, samples


def _code_sample(language: str, body: list[str], line_number: int) -> CodeSample:
    content = "\n".join(body)
    return CodeSample(
        language=language,
        byte_length=len(content.encode("utf-8")),
        line_number=line_number,
    )


def parse_heading(line: str) -> tuple[int, str] | None:
    """Return (level, text) for an ATX heading line, else None."""
    match = _HEADING.match(line)
    if not match:
        return None
    text = _CLOSING_HASHES.sub("", match.group("text") or "").strip()
    return len(match.group("marks")), text


def normalize_section(text: str) -> str | None:
    """Map heading text to a required section name.

    Numbering ("2. Structure"), emoji, punctuation and case are ignored.

    Returns:
        Canonical section name, or None when the heading is not a required section
    """
    text = _SECTION_NOISE.sub("", strip_inline_markup(text).lower()).strip()
    text = _NUMBERING.sub("", text)
    text = " ".join(text.replace(".", " ").replace(")", " ").split())
    return SECTION_ALIASES.get(text)


def category_from_path(path: str) -> tuple[Category, str]:
    """Derive a document's category from its containing directory.

    Documents directly under the root are meta documents.

    Raises:
        ParseError: If the directory is not a known category
    """
    parts = PurePosixPath(path).parts
    if len(parts) <= 1:
        return Category.META, ""
    label = parts[0]
    category = Category.parse(label)
    if category is None:
        raise ParseError(path, f"unknown category directory '{label}'")
    return category, label


def parse_document(text: str, path: str | PurePosixPath) -> PatternDocument:
    """Parse a pattern document.

    Args:
        text: Raw Markdown text
        path: Document path relative to the catalog root

    Returns:
        The parsed document

    Raises:
        ParseError: If the document has no top-level heading, the heading is
            empty, or the document sits in an unknown category directory
    """
    path = PurePosixPath(path).as_posix()
    category, label = category_from_path(path)
    prose, samples = split_fences(text)

    slugger = Slugger()
    headings: list[Heading] = []
    anchors: set[str] = set()
    declared: str | None = None

    for line in prose:
        parsed = parse_heading(line.text)
        if parsed:
            level, heading_text = parsed
            slug = slugger.slug(heading_text)
            headings.append(Heading(level, heading_text, line.number, slug))
            anchors.add(slug)
        elif declared is None:
            match = _DECLARED_CATEGORY.match(line.text)
            if match:
                declared = match.group("name")

        for tag in _HTML_TAG.findall(line.text):
            anchors.update(a.lower() for a in _ANCHOR_ATTR.findall(tag))

    top = next((h for h in headings if h.level == 1), None)
    if top is None:
        raise ParseError(path, "no top-level heading found")
    title = strip_inline_markup(top.text)
    if not title:
        raise ParseError(path, "top-level heading is empty")

    sections: list[str] = []
    section_lines: dict[str, int] = {}
    for heading in headings:
        if heading.level < 2:
            continue
        name = normalize_section(heading.text)
        if name and name not in section_lines:
            sections.append(name)
            section_lines[name] = heading.line_number

    return PatternDocument(
        path=path,
        title=title,
        category=category,
        category_label=label,
        declared_category=declared,
        headings=headings,
        code_samples=samples,
        anchors=anchors,
        sections=sections,
        section_lines=section_lines,
    )

