"""Diagnostic system for nlsassist.

Provides structured diagnostics with codes and hints for every
non-success outcome of a placeholder resolution.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode
from .errors import NlsError, NlsParseError
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "ErrorTemplate",
    "NlsError",
    "NlsParseError",
    "OutputFormat",
]
