"""Category consistency rules."""

from ..catalog import Catalog
from ..models import Category, Finding, Severity


class CategoryValidator:
    """Validates that a document's category agrees with its directory.

    Top-level meta documents have no directory category, so a "Category:"
    line inside them is not checked.
    """

    RULE_PREFIX = "CATEGORY"

    def validate(self, catalog: Catalog) -> list[Finding]:
        """Validate category spelling and agreement.

        Args:
            catalog: Catalog to check

        Returns:
            List of findings
        """
        findings = []

        for document in catalog:
            canonical = document.category.value

            # Directory spelled with different casing (e.g. "creational/")
            if document.category_label and document.category_label != canonical:
                findings.append(
                    Finding(
                        file_path=document.path,
                        line_number=0,
                        severity=Severity.WARNING,
                        rule_id=f"{self.RULE_PREFIX}_001",
                        message=f"Inconsistent category casing for directory '{document.category_label}'. Expected: '{canonical}'",
                        suggestion=canonical,
                    )
                )

            declared = document.declared_category
            if declared is None or document.category == Category.META:
                continue

            declared_category = Category.parse(declared)
            if declared_category != document.category:
                findings.append(
                    Finding(
                        file_path=document.path,
                        line_number=0,
                        severity=Severity.ERROR,
                        rule_id=f"{self.RULE_PREFIX}_002",
                        message=f"Declared category '{declared}' does not match directory category '{canonical}'",
                        suggestion=f"Category: {canonical}",
                    )
                )
            elif declared != canonical:
                findings.append(
                    Finding(
                        file_path=document.path,
                        line_number=0,
                        severity=Severity.WARNING,
                        rule_id=f"{self.RULE_PREFIX}_001",
                        message=f"Inconsistent category casing '{declared}'. Expected: '{canonical}'",
                        suggestion=f"Category: {canonical}",
                    )
                )

        return findings
