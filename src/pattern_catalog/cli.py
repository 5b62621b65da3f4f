#!/usr/bin/env python3
"""CLI interface for pattern_catalog module."""

import argparse
import io
import sys
from pathlib import Path

from rich.markup import escape

from common.env import env
from common.logger import error, get_logger, success

from .errors import DuplicateKeyError
from .index import build_index, render_json, render_markdown
from .reporters import ValidationReporter
from .validator import CatalogValidator

logger = get_logger(__name__)


def cmd_validate(args):
    """Validate a catalog of pattern documents.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    root = Path(args.root)

    if not root.is_dir():
        error(f"Directory '{root}' does not exist")
        return 1

    validator = CatalogValidator(workers=args.workers, check_meta_sections=args.check_meta)

    try:
        report = validator.validate(root)
    except DuplicateKeyError as e:
        error(escape(str(e)))
        return 1

    reporter = ValidationReporter(show_warnings=not args.hide_warnings, strict=args.strict)
    exit_code = report.exit_code(strict=args.strict)

    if args.format == "json":
        output = reporter.report_json(report)
        if args.output:
            output_path = Path(args.output)
            output_path.write_text(output + "\n", encoding="utf-8")
            success(f"Validation results written to {output_path}")
        else:
            print(output)
        return exit_code

    if not args.output:
        return reporter.report_console(report)

    # Capture console output so it can be saved as well
    output_path = Path(args.output)
    old_stdout = sys.stdout
    sys.stdout = buffer = io.StringIO()
    try:
        exit_code = reporter.report_console(report)
        output = buffer.getvalue()
        output_path.write_text(output, encoding="utf-8")
    finally:
        sys.stdout = old_stdout

    print(output, end="")
    success(f"Validation results also written to {output_path}")
    return exit_code


def cmd_index(args):
    """Emit the navigation index of a catalog.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    root = Path(args.root)

    if not root.is_dir():
        error(f"Directory '{root}' does not exist")
        return 1

    validator = CatalogValidator(workers=args.workers)

    try:
        catalog, _, findings = validator.build(root)
    except DuplicateKeyError as e:
        error(escape(str(e)))
        return 1

    for finding in findings:
        logger.warning(f"Skipped {finding.file_path}: {finding.message}")

    index = build_index(catalog)
    output = render_markdown(index) if args.format == "markdown" else render_json(index)

    if args.output:
        output_path = Path(args.output)
        output_path.write_text(output, encoding="utf-8")
        success(f"Index with {len(catalog)} documents written to {output_path}")
    else:
        sys.stdout.write(output)

    return 0


def main(argv: list[str] | None = None):
    """Main entry point for the CLI."""
    parser = argparse.ArgumentParser(description="Validate and index a design-pattern document catalog")

    subparsers = parser.add_subparsers(dest="command", required=True)

    # Validate command
    validate_parser = subparsers.add_parser("validate", help="Validate the catalog")
    validate_parser.add_argument(
        "root",
        nargs="?",
        default=str(env.catalog_root()),
        help="Catalog root directory (default: $CATALOG_ROOT or current directory)",
    )
    validate_parser.add_argument(
        "--strict",
        action="store_true",
        default=env.strict(),
        help="Treat warnings as errors",
    )
    validate_parser.add_argument(
        "--format",
        choices=["console", "json"],
        default="console",
        help="Output format",
    )
    validate_parser.add_argument(
        "--output",
        type=str,
        help="Write validation results to file (in addition to console for console format)",
    )
    validate_parser.add_argument(
        "--hide-warnings",
        action="store_true",
        help="Only list error-level findings",
    )
    validate_parser.add_argument(
        "--check-meta",
        action="store_true",
        help="Require Definition, Structure and Pros & Cons in top-level documents too",
    )
    validate_parser.add_argument(
        "--workers",
        type=int,
        default=env.workers(),
        help="Threads used to parse documents (default: $CATALOG_WORKERS or 1)",
    )
    validate_parser.set_defaults(func=cmd_validate)

    # Index command
    index_parser = subparsers.add_parser("index", help="Emit the navigation index")
    index_parser.add_argument(
        "root",
        nargs="?",
        default=str(env.catalog_root()),
        help="Catalog root directory (default: $CATALOG_ROOT or current directory)",
    )
    index_parser.add_argument(
        "--format",
        choices=["json", "markdown"],
        default="json",
        help="Index format",
    )
    index_parser.add_argument("--output", type=str, help="Write the index to file")
    index_parser.add_argument(
        "--workers",
        type=int,
        default=env.workers(),
        help="Threads used to parse documents (default: $CATALOG_WORKERS or 1)",
    )
    index_parser.set_defaults(func=cmd_index)

    args = parser.parse_args(argv)
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
