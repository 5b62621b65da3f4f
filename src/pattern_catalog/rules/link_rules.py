"""Cross-reference resolution for links between and within documents."""

import difflib
import posixpath
import re
from collections.abc import Mapping
from pathlib import Path, PurePosixPath
from urllib.parse import unquote

from common.constants import DOCUMENT_SUFFIX

from ..catalog import Catalog
from ..models import (
    CrossReference,
    Finding,
    PatternDocument,
    Severity,
    UnresolvedReference,
)
from ..parser import split_fences
from ..slugs import strip_inline_markup

_INLINE_CODE = re.compile(r"`+[^`]*`+")
_LINK = re.compile(
    r"!?\[(?P<text>(?:[^\[\]]|\[[^\]]*\])*)\]"
    r"\(\s*(?P<target><[^>]*>|[^)\s]+)(?:\s+\"[^\"]*\"|\s+'[^']*')?\s*\)"
)
_REFERENCE_DEFINITION = re.compile(
    r"^ {0,3}\[(?P<text>[^\]^][^\]]*)\]:[ \t]*(?P<target><[^>]*>|\S+)"
    r"(?:[ \t]+(?:\"[^\"]*\"|'[^']*'|\([^)]*\)))?[ \t]*$"
)
_SCHEME = re.compile(r"^[A-Za-z][A-Za-z0-9+.-]*:")
_LIST_ITEM = re.compile(r"^\s*(?:[-*+]|\d+[.)])\s+")


def is_external(target: str) -> bool:
    """Check whether a link target leaves the catalog (URL, mailto, ...)."""
    return bool(_SCHEME.match(target)) or target.startswith("//")


def is_back_to_top(text: str) -> bool:
    letters = re.sub(r"[^a-z]", "", strip_inline_markup(text).lower())
    return letters == "backtotop"


class LinkResolver:
    """Checks every relative link and anchor reference against a catalog."""

    RULE_PREFIX = "LINK"

    def __init__(self, catalog: Catalog, root: Path | None = None):
        """Initialize the resolver.

        Args:
            catalog: Catalog links must resolve against
            root: Catalog root on disk; when given, links to non-Markdown
                files (images, sources) are checked for existence
        """
        self.catalog = catalog
        self.root = root

    def extract(self, source: str, text: str) -> list[CrossReference]:
        """Extract the cross-references of one document.

        Args:
            source: Path of the document the text belongs to
            text: Raw document text

        Inline links and reference definitions (``[id]: target``) are both
        extracted.

        Returns:
            Cross-references in document order, external links excluded
        """
        prose, _ = split_fences(text)
        references = []

        for line in prose:
            visible = _INLINE_CODE.sub(lambda m: " " * len(m.group(0)), line.text)
            definition = _REFERENCE_DEFINITION.match(visible)
            matches = [definition] if definition else _LINK.finditer(visible)
            for match in matches:
                target = match.group("target").strip("<>")
                if not target or is_external(target):
                    continue
                references.append(
                    CrossReference(
                        source=source,
                        target=target,
                        kind=self._kind(match.group("text"), target, line.text),
                        line_number=line.number,
                    )
                )

        return references

    def resolve(
        self, texts: Mapping[str, str]
    ) -> tuple[list[CrossReference], list[UnresolvedReference]]:
        """Extract and check the links of every document.

        Broken links are returned, never raised.

        Args:
            texts: Raw text per document path

        Returns:
            Tuple of (all cross-references, unresolved ones)
        """
        references: list[CrossReference] = []
        unresolved: list[UnresolvedReference] = []

        for source in sorted(texts):
            for reference in self.extract(source, texts[source]):
                references.append(reference)
                problem = self.check(reference)
                if problem:
                    unresolved.append(problem)

        return references, unresolved

    def check(self, reference: CrossReference) -> UnresolvedReference | None:
        """Check a single cross-reference.

        Returns:
            An UnresolvedReference describing the problem, or None if it resolves
        """
        path_part, _, fragment = reference.target.partition("#")
        path_part = unquote(path_part)

        target_doc: PatternDocument | None
        if path_part:
            normalized = self._normalize(reference.source, path_part)
            if normalized is None:
                return self._unresolved(
                    reference, f"{self.RULE_PREFIX}_003", "path escapes the catalog root"
                )

            if PurePosixPath(normalized).suffix.lower() == DOCUMENT_SUFFIX:
                target_doc = self.catalog.by_path(normalized)
                if target_doc is None:
                    return self._unresolved(
                        reference,
                        f"{self.RULE_PREFIX}_001",
                        f"no document '{normalized}' in the catalog",
                        suggestion=self._suggest_path(normalized),
                    )
            else:
                if self.root is not None and not (self.root / normalized).exists():
                    return self._unresolved(
                        reference, f"{self.RULE_PREFIX}_001", f"file '{normalized}' does not exist"
                    )
                return None
        else:
            target_doc = self.catalog.by_path(reference.source)

        if not fragment or target_doc is None:
            return None

        anchor = unquote(fragment).lower()
        if anchor in target_doc.anchors:
            return None

        close = difflib.get_close_matches(anchor, sorted(target_doc.anchors), n=1, cutoff=0.6)
        return self._unresolved(
            reference,
            f"{self.RULE_PREFIX}_002",
            f"no heading '#{anchor}' in {target_doc.path}",
            suggestion=f"#{close[0]}" if close else None,
        )

    def _normalize(self, source: str, path_part: str) -> str | None:
        if path_part.startswith("/"):
            joined = path_part.lstrip("/")
        else:
            joined = posixpath.join(PurePosixPath(source).parent.as_posix(), path_part)
        normalized = posixpath.normpath(joined)
        if normalized == ".." or normalized.startswith("../"):
            return None
        return normalized

    def _suggest_path(self, missing: str) -> str | None:
        paths = sorted(d.path for d in self.catalog)
        close = difflib.get_close_matches(missing, paths, n=1, cutoff=0.7)
        return close[0] if close else None

    def _kind(self, text: str, target: str, line: str) -> str:
        if is_back_to_top(text):
            return "back-to-top"
        if not target.startswith("#"):
            return "document"
        if _LIST_ITEM.match(line):
            return "toc"
        return "anchor"

    @staticmethod
    def _unresolved(
        reference: CrossReference, rule_id: str, reason: str, suggestion: str | None = None
    ) -> UnresolvedReference:
        return UnresolvedReference(
            source=reference.source,
            target=reference.target,
            reason=reason,
            line_number=reference.line_number,
            kind=reference.kind,
            rule_id=rule_id,
            suggestion=suggestion,
        )


def unresolved_to_findings(unresolved: list[UnresolvedReference]) -> list[Finding]:
    """Turn unresolved references into Error findings."""
    return [
        Finding(
            file_path=ref.source,
            line_number=ref.line_number,
            severity=Severity.ERROR,
            rule_id=ref.rule_id,
            message=f"Broken {ref.kind} link '{ref.target}': {ref.reason}",
            suggestion=ref.suggestion,
        )
        for ref in unresolved
    ]
