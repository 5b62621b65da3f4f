"""Validation report reporters."""

import json
from itertools import groupby

from rich.markup import escape

from common.logger import get_logger

from .index import index_to_dict
from .models import Severity, ValidationReport

logger = get_logger(__name__)


class ValidationReporter:
    """Format and display validation reports."""

    def __init__(self, show_warnings: bool = True, strict: bool = False):
        """Initialize the reporter.

        Args:
            show_warnings: Whether to list warning-level findings
            strict: Treat warnings as errors when computing the exit code
        """
        self.show_warnings = show_warnings
        self.strict = strict

    def report_console(self, report: ValidationReport) -> int:
        """Print the index and findings to the console.

        Args:
            report: Validation report to print

        Returns:
            Exit code (0 for success, 1 if errors found)
        """
        logger.info(f"[bold]Catalog[/bold] {escape(report.root)}: {report.document_count} documents")
        for category, entries in report.index.items():
            logger.info(f"\n{category.value}:")
            for entry in entries:
                logger.info(f"  - {escape(entry.title)} ({escape(entry.path)})")

        ordered = sorted(report.findings, key=lambda f: f.sort_key)
        for file_path, group in groupby(ordered, key=lambda f: f.file_path):
            findings = [f for f in group if self.show_warnings or f.severity == Severity.ERROR]
            if not findings:
                continue

            logger.info(f"\n{escape(file_path)}:")
            for finding in findings:
                if finding.severity == Severity.ERROR:
                    icon = "[red]✗[/red]"
                else:
                    icon = "[yellow]⚠[/yellow]"

                location = f"Line [bold]{finding.line_number}[/bold]: " if finding.line_number else ""
                logger.info(f"  {icon} {location}{escape(finding.message)} [dim]({finding.rule_id})[/dim]")
                if finding.suggestion:
                    logger.info(f"      Suggestion: {escape(finding.suggestion)}")

        # Summary
        logger.info("\n" + "=" * 60)
        logger.info(
            f"Total: [bold]{len(report.errors)}[/bold] errors, [bold]{len(report.warnings)}[/bold] warnings"
        )

        return report.exit_code(strict=self.strict)

    def report_json(self, report: ValidationReport) -> str:
        """Format the report as JSON.

        Args:
            report: Validation report to format

        Returns:
            JSON string with the index, findings and a summary
        """
        data = {
            "root": report.root,
            "index": index_to_dict(report.index),
            "findings": [
                {
                    "file": f.file_path,
                    "line": f.line_number,
                    "severity": f.severity.value,
                    "rule_id": f.rule_id,
                    "message": f.message,
                    "suggestion": f.suggestion,
                }
                for f in report.findings
                if self.show_warnings or f.severity == Severity.ERROR
            ],
            "summary": {
                "documents": report.document_count,
                "errors": len(report.errors),
                "warnings": len(report.warnings),
                "exit_code": report.exit_code(strict=self.strict),
            },
        }

        return json.dumps(data, indent=2, ensure_ascii=False)
