"""Logging utilities with rich output for the catalog CLI.

This module wires Python's standard logging to rich's console output so
every module logs the same way.

Usage:
    from common.logger import get_logger

    logger = get_logger(__name__)
    logger.info("Parsing documents...")
    logger.warning("Document skipped")
    logger.error("Failed to read document", exc_info=True)
"""

import logging
import sys

from rich.console import Console
from rich.logging import RichHandler

from common.env import env

# Global console instance for consistent output
console = Console()
error_console = Console(stderr=True)


def get_logger(
    name: str,
    level: str | None = None,
    show_time: bool = False,
    show_path: bool = False,
) -> logging.Logger:
    """Get a configured logger with rich output.

    Args:
        name: Logger name (typically __name__ of the module)
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
               If None, uses the LOG_LEVEL environment variable or INFO.
        show_time: Show timestamp in log output (default: False for clean CLI)
        show_path: Show file path in log output (default: False for clean CLI)

    Returns:
        Configured logger instance

    Example:
        >>> logger = get_logger(__name__)
        >>> logger.info("Index written")
        Index written
    """
    logger = logging.getLogger(name)

    # Avoid adding multiple handlers if logger already configured
    if logger.handlers:
        return logger

    if level is None:
        level = env.log_level()

    logger.setLevel(level.upper())

    rich_handler = RichHandler(
        console=console,
        show_time=show_time,
        show_path=show_path,
        rich_tracebacks=True,
        tracebacks_show_locals=True,
        markup=True,  # Allow rich markup in log messages
    )
    rich_handler.setFormatter(logging.Formatter(fmt="%(message)s", datefmt="[%X]"))

    logger.addHandler(rich_handler)

    # Allow propagation for test frameworks (pytest caplog)
    logger.propagate = True

    return logger


def success(message: str) -> None:
    """Print a success message with a green checkmark.

    Example:
        >>> success("Catalog is consistent")
        ✓ Catalog is consistent
    """
    console.print(f"[green]✓[/green] {message}")


def error(message: str) -> None:
    """Print an error message with a red X icon to stderr.

    Example:
        >>> error("Directory not found")
        ✗ Directory not found
    """
    error_console.print(f"[red]✗[/red] {message}")
    sys.stderr.flush()
