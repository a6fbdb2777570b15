"""Error message templates.

Centralized message templates for testable, consistent hover text.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode


class ErrorTemplate:
    """Centralized error message templates.

    All user-facing messages are created here. NO f-strings in exception constructors!
    The ``message`` of each diagnostic is exactly the text a hover shows.
    """

    @staticmethod
    def nls_file_not_found(path: str, nls_filename: str) -> Diagnostic:
        """No localization file next to the manifest.

        Args:
            path: Expected location of the localization file
            nls_filename: Localization filename (e.g., 'package.nls.json')

        Returns:
            Diagnostic for NLS_FILE_NOT_FOUND
        """
        msg = f"No {nls_filename} found at {path}"
        return Diagnostic(
            code=DiagnosticCode.NLS_FILE_NOT_FOUND,
            message=msg,
            hint=f"Create {nls_filename} next to the manifest to externalize strings",
            path=path,
            severity="info",
        )

    @staticmethod
    def nls_file_unreadable(path: str, nls_filename: str, reason: str | None) -> Diagnostic:
        """Localization file exists but could not be read or decoded.

        Args:
            path: Location of the localization file
            nls_filename: Localization filename
            reason: Underlying OS or decode error text

        Returns:
            Diagnostic for NLS_FILE_UNREADABLE
        """
        msg = ErrorTemplate._could_not_read(path, nls_filename, reason)
        return Diagnostic(
            code=DiagnosticCode.NLS_FILE_UNREADABLE,
            message=msg,
            hint=reason,
            path=path,
        )

    @staticmethod
    def nls_parse_failed(path: str, nls_filename: str, reason: str | None) -> Diagnostic:
        """Localization file is not a JSON object.

        Args:
            path: Location of the localization file
            nls_filename: Localization filename
            reason: Decoder error text, shown verbatim

        Returns:
            Diagnostic for NLS_PARSE_FAILED
        """
        msg = ErrorTemplate._could_not_read(path, nls_filename, reason)
        return Diagnostic(
            code=DiagnosticCode.NLS_PARSE_FAILED,
            message=msg,
            hint=reason,
            path=path,
        )

    @staticmethod
    def invalid_json(reason: str, line: int, column: int) -> Diagnostic:
        """Decoder rejected the localization text.

        Args:
            reason: Decoder message
            line: 1-based line
            column: 1-based column

        Returns:
            Diagnostic for NLS_PARSE_FAILED (no path; attached by the loader)
        """
        msg = f"{reason}: line {line} column {column}"
        return Diagnostic(code=DiagnosticCode.NLS_PARSE_FAILED, message=msg)

    @staticmethod
    def not_an_object(type_name: str) -> Diagnostic:
        """Top-level JSON value is not an object.

        Args:
            type_name: Python type name of the decoded value

        Returns:
            Diagnostic for NLS_PARSE_FAILED
        """
        msg = f"Expected a JSON object at the top level, got {type_name}"
        return Diagnostic(
            code=DiagnosticCode.NLS_PARSE_FAILED,
            message=msg,
            hint="package.nls.json must map keys to strings",
        )

    @staticmethod
    def key_not_found(key: str, nls_filename: str, path: str | None = None) -> Diagnostic:
        """Key absent from a parsed localization mapping.

        Args:
            key: Externalization key that was looked up
            nls_filename: Localization filename
            path: Location of the localization file

        Returns:
            Diagnostic for KEY_NOT_FOUND
        """
        msg = f"The key {key} was not found in the {nls_filename} file"
        return Diagnostic(
            code=DiagnosticCode.KEY_NOT_FOUND,
            message=msg,
            hint=f'Add "{key}" to {nls_filename}',
            path=path,
            key=key,
            severity="warning",
        )

    @staticmethod
    def _could_not_read(path: str, nls_filename: str, reason: str | None) -> str:
        base = f"Could not read the {nls_filename} file at {path}"
        if reason:
            return f"{base}: {reason}"
        return base
