"""Diagnostic codes and data structures.

Defines error codes and the structured diagnostic attached to every
non-success resolution outcome.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Localization file errors (missing, unreadable, malformed)
        2000-2999: Lookup misses (key absent from a parsed mapping)
    """

    # Localization file errors (1000-1999)
    NLS_FILE_NOT_FOUND = 1001
    NLS_FILE_UNREADABLE = 1002
    NLS_PARSE_FAILED = 1003

    # Lookup misses (2000-2999)
    KEY_NOT_FOUND = 2001


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    ``message`` is the user-facing text shown in a hover. ``hint`` carries
    the underlying reason (decoder error, OS error) when there is one.

    Attributes:
        code: Unique error code
        message: Human-readable description
        hint: Underlying reason or suggestion
        path: Localization file the diagnostic refers to
        key: Externalization key involved, if any
        severity: Severity level
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None
    path: str | None = None
    key: str | None = None
    severity: Literal["error", "warning", "info"] = "error"

    def __str__(self) -> str:
        """Return human-readable description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic as a single line.

        Example output:
            NLS_PARSE_FAILED: Could not read the package.nls.json file at /x/package.nls.json

        Returns:
            Formatted diagnostic
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
