"""Validate and index a catalog of design-pattern documents."""

from .catalog import Catalog, build_catalog
from .errors import CatalogError, DuplicateKeyError, ParseError
from .models import Category, Finding, PatternDocument, Severity, ValidationReport
from .parser import parse_document
from .validator import CatalogValidator

__all__ = [
    "Catalog",
    "CatalogError",
    "CatalogValidator",
    "Category",
    "DuplicateKeyError",
    "Finding",
    "ParseError",
    "PatternDocument",
    "Severity",
    "ValidationReport",
    "build_catalog",
    "parse_document",
]
