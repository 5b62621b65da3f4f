"""Main validator running the catalog pipeline over a directory tree."""

from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

from common.constants import DOCUMENT_SUFFIX
from common.logger import get_logger

from .catalog import Catalog, build_catalog
from .checker import ConsistencyChecker
from .errors import ParseError
from .index import build_index
from .models import Finding, PatternDocument, Severity, ValidationReport
from .parser import parse_document
from .rules.link_rules import LinkResolver, unresolved_to_findings

logger = get_logger(__name__)


class CatalogValidator:
    """Parses, catalogs, checks and indexes a tree of pattern documents."""

    def __init__(self, workers: int = 1, check_meta_sections: bool = False):
        """Initialize the validator.

        Args:
            workers: Threads used to read and parse documents
            check_meta_sections: Require the pattern sections in meta documents too
        """
        self.workers = max(1, workers)
        self.checker = ConsistencyChecker(check_meta_sections=check_meta_sections)

    def discover(self, root: Path) -> list[Path]:
        """Find every Markdown document under root, skipping hidden directories.

        Args:
            root: Catalog root directory

        Returns:
            Sorted list of document paths
        """
        documents = []
        for path in root.rglob(f"*{DOCUMENT_SUFFIX}"):
            relative = path.relative_to(root)
            if any(part.startswith(".") for part in relative.parts):
                continue
            if path.is_file():
                documents.append(path)
        return sorted(documents, key=lambda p: p.relative_to(root).as_posix())

    def load(self, file_path: Path, root: Path) -> tuple[PatternDocument, str] | Finding:
        """Read and parse one document.

        Read and parse failures are downgraded to findings so the run can
        continue with the remaining documents.

        Args:
            file_path: Document on disk
            root: Catalog root

        Returns:
            Tuple of (document, raw text), or an Error finding
        """
        relative = file_path.relative_to(root).as_posix()
        try:
            text = file_path.read_text(encoding="utf-8-sig")
        except (OSError, UnicodeDecodeError) as e:
            logger.debug(f"Could not read {relative}: {e}")
            return Finding(
                file_path=relative,
                line_number=0,
                severity=Severity.ERROR,
                rule_id="READ_001",
                message=f"Could not read document: {e}",
            )

        try:
            return parse_document(text, relative), text
        except ParseError as e:
            return Finding(
                file_path=relative,
                line_number=0,
                severity=Severity.ERROR,
                rule_id="PARSE_001",
                message=e.reason,
            )

    def load_all(self, files: list[Path], root: Path) -> list[tuple[PatternDocument, str] | Finding]:
        """Load documents, in parallel when more than one worker is configured.

        Results keep the order of files so duplicate detection is reproducible.
        """
        if self.workers == 1 or len(files) < 2:
            return [self.load(f, root) for f in files]
        with ThreadPoolExecutor(max_workers=self.workers) as executor:
            return list(executor.map(lambda f: self.load(f, root), files))

    def build(self, root: Path) -> tuple[Catalog, dict[str, str], list[Finding]]:
        """Discover, parse and catalog every document under root.

        Args:
            root: Catalog root directory

        Returns:
            Tuple of (catalog, raw text per document path, load findings)

        Raises:
            NotADirectoryError: If root is not a directory
            DuplicateKeyError: If two documents share a (category, title) key
        """
        if not root.is_dir():
            raise NotADirectoryError(f"{root}: not a directory")

        files = self.discover(root)
        logger.debug(f"Discovered [bold]{len(files)}[/bold] documents under {root}")

        documents: list[PatternDocument] = []
        texts: dict[str, str] = {}
        findings: list[Finding] = []

        for result in self.load_all(files, root):
            if isinstance(result, Finding):
                findings.append(result)
                continue
            document, text = result
            documents.append(document)
            texts[document.path] = text

        catalog = build_catalog(documents)
        return catalog, texts, findings

    def validate(self, root: Path) -> ValidationReport:
        """Run the whole pipeline over a directory tree.

        Args:
            root: Catalog root directory

        Returns:
            ValidationReport with findings and the navigation index

        Raises:
            NotADirectoryError: If root is not a directory
            DuplicateKeyError: If two documents share a (category, title) key
        """
        catalog, texts, findings = self.build(root)

        resolver = LinkResolver(catalog, root=root)
        references, unresolved = resolver.resolve(texts)
        logger.debug(
            f"Checked [bold]{len(references)}[/bold] cross-references, "
            f"[bold]{len(unresolved)}[/bold] unresolved"
        )

        findings.extend(unresolved_to_findings(unresolved))
        findings.extend(self.checker.check(catalog))
        findings.sort(key=lambda f: f.sort_key)

        return ValidationReport(
            root=str(root),
            findings=findings,
            index=build_index(catalog),
            document_count=len(catalog),
        )
