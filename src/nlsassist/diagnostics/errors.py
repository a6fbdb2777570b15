"""nlsassist exception hierarchy with structured diagnostics.

Exceptions are raised inside the loading layer and converted to
LoadResult values before they reach a provider.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic


class NlsError(Exception):
    """Base exception for all nlsassist errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize NlsError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.message)
        else:
            self.diagnostic = None
            super().__init__(message)


class NlsParseError(NlsError):
    """Localization text is not a JSON object.

    Raised for malformed JSON and for well-formed JSON whose top-level
    value is not an object.

    Attributes:
        reason: Decoder message, without position
        line: 1-based line of the failure (0 when not positional)
        column: 1-based column of the failure (0 when not positional)
        offset: 0-based character offset of the failure
    """

    def __init__(
        self,
        message: str | Diagnostic,
        *,
        reason: str = "",
        line: int = 0,
        column: int = 0,
        offset: int = 0,
    ) -> None:
        """Initialize NlsParseError.

        Args:
            message: Error message string OR Diagnostic object
            reason: Decoder message, without position
            line: 1-based line of the failure
            column: 1-based column of the failure
            offset: 0-based character offset of the failure
        """
        super().__init__(message)
        self.reason = reason
        self.line = line
        self.column = column
        self.offset = offset
