"""Enumerations for nlsassist type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

from enum import StrEnum


class LoadStatus(StrEnum):
    """Outcome of loading a package.nls.json file.

    StrEnum provides automatic string conversion: str(LoadStatus.SUCCESS) == "success"
    """

    SUCCESS = "success"
    """File read and parsed into a mapping."""

    NOT_FOUND = "not_found"
    """No file at the sibling location (common, not an error)."""

    READ_ERROR = "read_error"
    """File exists but could not be read or decoded."""

    PARSE_ERROR = "parse_error"
    """File read but is not a JSON object."""


class CompletionItemKind(StrEnum):
    """Classification of a completion item.

    Only VALUE is produced; placeholders always complete a JSON value.
    """

    VALUE = "value"


class ProviderKind(StrEnum):
    """Editor capability attached to a workspace folder."""

    HOVER = "hover"
    COMPLETION = "completion"
    DEFINITION = "definition"


__all__ = [
    "CompletionItemKind",
    "LoadStatus",
    "ProviderKind",
]
