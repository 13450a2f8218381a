"""
Error types for the shallot design-token engine.

The color math and responsive lookups never raise: out-of-range numbers are
clamped and missing values resolve to ``None``. Errors only come from the
edges of the system (parsing color text, loading theme config files).
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional


class ShallotError(Exception):
    """Base exception for all shallot errors."""

    def __init__(self, message: str, context: Optional["ErrorContext"] = None):
        self.message = message
        self.context = context
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format error message with context if available."""
        if self.context:
            return f"{self.context.format()}\n{self.message}"
        return self.message


class InvalidColorError(ShallotError):
    """
    Raised when color text cannot be parsed.

    Examples:
    - Hex string with the wrong number of digits
    - Non-hex characters
    """

    pass


class ThemeSpecError(ShallotError):
    """
    Raised when a theme configuration cannot be loaded.

    Examples:
    - Malformed YAML
    - Values outside the schema bounds
    - Missing file when defaults are disabled
    """

    pass


class TokenCollisionError(ShallotError):
    """Raised when two token groups emit the same variable name."""

    pass


@dataclass
class ErrorContext:
    """
    Where in a configuration file an error was found.

    Attributes:
        file: Path to the configuration file
        field: Optional dotted field path (e.g. "seed.hex")
    """

    file: Path
    field: str | None = None

    def format(self) -> str:
        """
        Format error context as a human-readable string.

        Returns:
            Formatted string like: "themespec.yaml (seed.hex)"
        """
        if self.field:
            return f"{self.file} ({self.field})"
        return str(self.file)
