"""Environment configuration interface for pattern-catalog.

This module provides a clean interface for accessing environment variables,
centralizing all environment variable access in one place. Command-line
flags take precedence over the values read here.
"""

import os
from pathlib import Path

from dotenv import load_dotenv

# Load environment variables from .env file if it exists
load_dotenv()

_TRUTHY = {"1", "true", "yes", "on"}


class Environment:
    """Interface for accessing environment configuration."""

    @staticmethod
    def log_level() -> str:
        """Get the logging level.

        Returns:
            Upper-cased level name, defaults to 'INFO'
        """
        return os.getenv("LOG_LEVEL", "INFO").upper()

    @staticmethod
    def catalog_root() -> Path:
        """Get the default catalog root directory.

        Returns:
            Path to the directory holding the pattern documents, defaults to '.'
        """
        return Path(os.getenv("CATALOG_ROOT", "."))

    @staticmethod
    def strict() -> bool:
        """Check whether warnings should be treated as errors.

        Returns:
            True when CATALOG_STRICT is set to a truthy value, defaults to False
        """
        return os.getenv("CATALOG_STRICT", "false").strip().lower() in _TRUTHY

    @staticmethod
    def workers() -> int:
        """Get the number of threads used to parse documents.

        Returns:
            Worker count, defaults to 1 (never less than 1, and 1 when the
            value is not an integer)
        """
        try:
            return max(1, int(os.getenv("CATALOG_WORKERS", "1")))
        except ValueError:
            return 1


# Singleton instance for convenient access
env = Environment()
