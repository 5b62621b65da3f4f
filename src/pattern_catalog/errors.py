"""Exceptions raised while building a catalog."""


class CatalogError(Exception):
    """Base class for catalog failures."""


class ParseError(CatalogError):
    """A document could not be turned into a PatternDocument.

    Fatal for that document only; the run continues without it.
    """

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"{path}: {reason}")


class DuplicateKeyError(CatalogError):
    """Two documents claim the same (category, title) key.

    Fatal for the whole run, since the catalog cannot be indexed.
    """

    def __init__(self, category: str, title: str, first_path: str, second_path: str):
        self.category = category
        self.title = title
        self.first_path = first_path
        self.second_path = second_path
        super().__init__(
            f"{second_path}: duplicate pattern '{title}' in category {category} "
            f"(already defined by {first_path})"
        )
