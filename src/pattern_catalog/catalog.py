"""In-memory catalog of parsed pattern documents."""

from collections.abc import Iterable, Iterator

from common.logger import get_logger

from .errors import DuplicateKeyError
from .models import Category, PatternDocument

logger = get_logger(__name__)


class Catalog:
    """All documents of one validation run, keyed by (category, title).

    Iteration is ordered by category, then title, then path, so the result
    never depends on the order documents were added in.
    """

    def __init__(self):
        self._by_key: dict[tuple[Category, str], PatternDocument] = {}
        self._by_path: dict[str, PatternDocument] = {}

    def add(self, document: PatternDocument) -> None:
        """Insert a document.

        Args:
            document: Parsed document to take ownership of

        Raises:
            DuplicateKeyError: If another document already holds the same key
        """
        existing = self._by_key.get(document.key)
        if existing is not None:
            raise DuplicateKeyError(
                category=document.category.value,
                title=document.title,
                first_path=existing.path,
                second_path=document.path,
            )
        self._by_key[document.key] = document
        self._by_path[document.path] = document

    def __len__(self) -> int:
        return len(self._by_key)

    def __iter__(self) -> Iterator[PatternDocument]:
        return iter(
            sorted(
                self._by_key.values(),
                key=lambda d: (d.category.order, d.title.casefold(), d.title, d.path),
            )
        )

    def __contains__(self, path: object) -> bool:
        return path in self._by_path

    def get(self, category: Category, title: str) -> PatternDocument | None:
        return self._by_key.get((category, title))

    def by_path(self, path: str) -> PatternDocument | None:
        return self._by_path.get(path)

    def in_category(self, category: Category) -> list[PatternDocument]:
        """Documents of one category, in catalog order."""
        return [d for d in self if d.category == category]

    def categories(self) -> list[Category]:
        """Categories that hold at least one document, in navigation order."""
        present = {d.category for d in self._by_key.values()}
        return [c for c in Category if c in present]


def build_catalog(documents: Iterable[PatternDocument]) -> Catalog:
    """Aggregate parsed documents into a catalog.

    Documents are inserted in the order given, so when two share a key the
    error names the later one as the second path.

    Args:
        documents: Parsed documents

    Returns:
        Catalog owning every document

    Raises:
        DuplicateKeyError: If two documents share a (category, title) key
    """
    catalog = Catalog()
    for document in documents:
        catalog.add(document)
    logger.debug(f"Catalog built with {len(catalog)} documents")
    return catalog
