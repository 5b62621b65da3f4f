"""Code sample validation rules."""

from ..catalog import Catalog
from ..models import Category, Finding, Severity


class CodeSampleValidator:
    """Flags code samples that look accidentally omitted or untagged."""

    RULE_PREFIX = "SAMPLE"

    def validate(self, catalog: Catalog) -> list[Finding]:
        """Compare code-sample languages across sibling documents.

        Every document in a category should cover the union of languages its
        siblings use. Meta documents are not compared.

        Args:
            catalog: Catalog to check

        Returns:
            List of warning findings
        """
        findings = []

        for category in catalog.categories():
            if category == Category.META:
                continue
            siblings = catalog.in_category(category)

            for document in siblings:
                for sample in document.code_samples:
                    if not sample.is_tagged:
                        findings.append(
                            Finding(
                                file_path=document.path,
                                line_number=sample.line_number,
                                severity=Severity.WARNING,
                                rule_id=f"{self.RULE_PREFIX}_002",
                                message="Code block has no language tag",
                                suggestion="```<language>",
                            )
                        )

            if len(siblings) < 2:
                continue

            expected: set[str] = set()
            for document in siblings:
                expected |= document.languages

            for document in siblings:
                missing = sorted(expected - document.languages)
                if missing:
                    findings.append(
                        Finding(
                            file_path=document.path,
                            line_number=0,
                            severity=Severity.WARNING,
                            rule_id=f"{self.RULE_PREFIX}_001",
                            message=f"Missing code samples in {', '.join(missing)} (used by other {category.value} patterns)",
                            suggestion=None,
                        )
                    )

        return findings
