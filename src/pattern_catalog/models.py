"""Data models for parsed documents, findings and validation reports."""

from dataclasses import dataclass, field
from enum import Enum

from common.constants import UNSPECIFIED_LANGUAGE


class Category(Enum):
    """Pattern categories, in navigation order."""

    CREATIONAL = "Creational"
    STRUCTURAL = "Structural"
    BEHAVIORAL = "Behavioral"
    META = "Meta"

    @classmethod
    def parse(cls, name: str) -> "Category | None":
        """Look up a category by name, ignoring case.

        Args:
            name: Category name as spelled in a directory or document

        Returns:
            Matching category, or None if the name is not a category
        """
        wanted = name.strip().lower()
        for category in cls:
            if category.value.lower() == wanted:
                return category
        return None

    @property
    def order(self) -> int:
        return list(Category).index(self)


class Severity(Enum):
    """Severity levels for findings."""

    ERROR = "error"  # Breaks the catalog (broken link, missing section)
    WARNING = "warning"  # Likely mistake (inconsistent casing, missing sample)


@dataclass(frozen=True)
class Heading:
    """An ATX heading found outside code blocks."""

    level: int
    text: str
    line_number: int
    slug: str


@dataclass(frozen=True)
class CodeSample:
    """A fenced code block."""

    language: str
    byte_length: int
    line_number: int

    @property
    def is_tagged(self) -> bool:
        return self.language != UNSPECIFIED_LANGUAGE


@dataclass
class PatternDocument:
    """One parsed Markdown document.

    The path is relative to the catalog root and uses forward slashes, so
    the same corpus yields the same identities on every platform.
    """

    path: str
    title: str
    category: Category
    category_label: str  # Directory name the category was read from
    declared_category: str | None = None  # "Category: ..." line, as written
    headings: list[Heading] = field(default_factory=list)
    code_samples: list[CodeSample] = field(default_factory=list)
    anchors: set[str] = field(default_factory=set)
    sections: list[str] = field(default_factory=list)  # Required sections, in document order
    section_lines: dict[str, int] = field(default_factory=dict)

    @property
    def key(self) -> tuple[Category, str]:
        """Catalog key: (category, title)."""
        return (self.category, self.title)

    @property
    def sections_present(self) -> set[str]:
        return set(self.sections)

    @property
    def languages(self) -> set[str]:
        """Declared code-sample languages, excluding untagged blocks."""
        return {s.language for s in self.code_samples if s.is_tagged}


@dataclass(frozen=True)
class CrossReference:
    """A link from one document to an anchor or another document."""

    source: str
    target: str
    kind: str  # "toc", "back-to-top", "document" or "anchor"
    line_number: int


@dataclass(frozen=True)
class UnresolvedReference:
    """A cross-reference whose target could not be found."""

    source: str
    target: str
    reason: str
    line_number: int
    kind: str
    rule_id: str  # e.g., "LINK_001"
    suggestion: str | None = None


@dataclass
class Finding:
    """A single reported inconsistency."""

    file_path: str
    line_number: int
    severity: Severity
    rule_id: str  # e.g., "SECTION_001"
    message: str
    suggestion: str | None = None  # Suggested fix

    @property
    def sort_key(self) -> tuple[str, int, str, str]:
        return (self.file_path, self.line_number, self.rule_id, self.message)


@dataclass(frozen=True)
class IndexEntry:
    """One entry of the navigation index."""

    title: str
    path: str


@dataclass
class ValidationReport:
    """Result of one validation run over a catalog root."""

    root: str
    findings: list[Finding] = field(default_factory=list)
    index: dict[Category, list[IndexEntry]] = field(default_factory=dict)
    document_count: int = 0

    @property
    def errors(self) -> list[Finding]:
        return [f for f in self.findings if f.severity == Severity.ERROR]

    @property
    def warnings(self) -> list[Finding]:
        return [f for f in self.findings if f.severity == Severity.WARNING]

    @property
    def has_errors(self) -> bool:
        """Check if report contains any errors."""
        return any(f.severity == Severity.ERROR for f in self.findings)

    @property
    def has_warnings(self) -> bool:
        """Check if report contains any warnings."""
        return any(f.severity == Severity.WARNING for f in self.findings)

    @property
    def is_clean(self) -> bool:
        """Check if report has no findings."""
        return len(self.findings) == 0

    def exit_code(self, strict: bool = False) -> int:
        """Process exit status for this report.

        Args:
            strict: Treat warnings as errors

        Returns:
            0 when the catalog is acceptable, 1 otherwise
        """
        if self.has_errors or (strict and self.has_warnings):
            return 1
        return 0
