"""Shared constants for the pattern-catalog application.

For environment-based configuration (catalog root, strict mode, etc.), use the env module:
    from common.env import env
    root = env.catalog_root()
"""

# Markdown files are the only documents the catalog considers
DOCUMENT_SUFFIX = ".md"

# Tag recorded for fenced code blocks that declare no language
UNSPECIFIED_LANGUAGE = "unspecified"

# Sections every pattern document must list, in this order
REQUIRED_SECTIONS: tuple[str, ...] = ("Definition", "Structure", "Pros & Cons")

# Alternative spellings that count as a required section (keys are normalized)
SECTION_ALIASES: dict[str, str] = {
    "definition": "Definition",
    "structure": "Structure",
    "pros & cons": "Pros & Cons",
    "pros and cons": "Pros & Cons",
}
