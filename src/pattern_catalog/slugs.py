"""Heading-to-anchor slugs, following the convention GitHub uses.

    "Pros & Cons"          -> "pros--cons"
    "1. Definition"        -> "1-definition"
    "`Builder` in **Java**" -> "builder-in-java"

Repeated headings within one document get "-1", "-2", ... suffixes.
"""

import re

_IMAGE = re.compile(r"!\[([^\]]*)\]\([^)]*\)")
_LINK = re.compile(r"\[([^\]]*)\]\([^)]*\)")
_HTML_TAG = re.compile(r"<[^>]+>")
_STRONG = re.compile(r"(\*\*|__)(.+?)\1")
_DISALLOWED = re.compile(r"[^\w\- ]", re.UNICODE)


def strip_inline_markup(text: str) -> str:
    """Reduce inline Markdown to the text a reader sees."""
    text = _IMAGE.sub(r"\1", text)
    text = _LINK.sub(r"\1", text)
    text = _HTML_TAG.sub("", text)
    text = _STRONG.sub(r"\2", text)
    return text.replace("`", "").strip()


def slugify(text: str) -> str:
    """Convert heading text to its anchor slug (without duplicate suffix)."""
    text = strip_inline_markup(text).lower()
    text = _DISALLOWED.sub("", text)
    return text.replace(" ", "-")


class Slugger:
    """Hands out unique slugs for the headings of one document."""

    def __init__(self):
        self.seen: dict[str, int] = {}

    def slug(self, text: str) -> str:
        base = slugify(text)
        count = self.seen.get(base)
        if count is None:
            self.seen[base] = 0
            return base
        count += 1
        self.seen[base] = count
        return f"{base}-{count}"
