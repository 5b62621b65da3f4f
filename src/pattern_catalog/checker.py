"""Consistency checker orchestrating the catalog rules."""

from .catalog import Catalog
from .models import Finding
from .rules.category_rules import CategoryValidator
from .rules.sample_rules import CodeSampleValidator
from .rules.section_rules import RequiredSectionValidator


class ConsistencyChecker:
    """Applies every consistency rule to a catalog."""

    def __init__(self, check_meta_sections: bool = False):
        """Initialize the checker.

        Args:
            check_meta_sections: Require the pattern sections in meta documents too
        """
        self.validators = [
            RequiredSectionValidator(check_meta=check_meta_sections),
            CategoryValidator(),
            CodeSampleValidator(),
        ]

    def check(self, catalog: Catalog) -> list[Finding]:
        """Run all rules.

        Args:
            catalog: Catalog to check

        Returns:
            Findings sorted by file and line
        """
        findings: list[Finding] = []
        for validator in self.validators:
            findings.extend(validator.validate(catalog))

        findings.sort(key=lambda f: f.sort_key)
        return findings
