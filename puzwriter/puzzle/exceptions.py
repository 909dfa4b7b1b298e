"""Exception hierarchy for puzzle writing."""

from typing import Any


class PuzError(Exception):
    """Base exception for writer failures."""


class ValidationError(PuzError, ValueError):
    """Raised when a puzzle field cannot be encoded faithfully."""

    def __init__(self, field: str, expected: Any, actual: Any):
        self.field = field
        self.expected = expected
        self.actual = actual
        super().__init__(f"{field}: expected {expected}, got {actual}")


class PuzzleLoadError(PuzError):
    """Raised when a puzzle description cannot be read."""


class ConfigError(PuzError):
    """Raised when the writer configuration is invalid."""
