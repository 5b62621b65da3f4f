"""Required section validation rules."""

from common.constants import REQUIRED_SECTIONS

from ..catalog import Catalog
from ..models import Category, Finding, PatternDocument, Severity


class RequiredSectionValidator:
    """Checks that pattern documents list the required sections in order."""

    RULE_PREFIX = "SECTION"

    def __init__(
        self,
        required_sections: tuple[str, ...] = REQUIRED_SECTIONS,
        check_meta: bool = False,
    ):
        """Initialize validator with the required section names.

        Args:
            required_sections: Canonical section names, in required order
            check_meta: Also apply the rule to top-level meta documents
        """
        self.required_sections = required_sections
        self.check_meta = check_meta

    def validate(self, catalog: Catalog) -> list[Finding]:
        """Validate required sections of every pattern document.

        Args:
            catalog: Catalog to check

        Returns:
            List of findings
        """
        findings = []
        for document in catalog:
            if document.category == Category.META and not self.check_meta:
                continue
            findings.extend(self.validate_document(document))
        return findings

    def validate_document(self, document: PatternDocument) -> list[Finding]:
        findings = []

        for name in self.required_sections:
            if name not in document.section_lines:
                findings.append(
                    Finding(
                        file_path=document.path,
                        line_number=0,
                        severity=Severity.ERROR,
                        rule_id=f"{self.RULE_PREFIX}_001",
                        message=f"missing section {name}",
                        suggestion=f"## {name}",
                    )
                )

        present = [s for s in document.sections if s in self.required_sections]
        expected = [s for s in self.required_sections if s in present]
        if present != expected:
            findings.append(
                Finding(
                    file_path=document.path,
                    line_number=document.section_lines[present[0]],
                    severity=Severity.ERROR,
                    rule_id=f"{self.RULE_PREFIX}_002",
                    message=f"Sections out of order: {', '.join(present)}",
                    suggestion=f"Expected order: {', '.join(expected)}",
                )
            )

        return findings
