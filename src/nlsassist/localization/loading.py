"""Localization file loading.

Locates the package.nls.json sibling of a manifest, reads it through a
pluggable loader, and parses it into a flat mapping. Every outcome is
captured in a LoadResult; nothing raises past load_mapping().

Components:
    NlsLoader - Protocol for reading localization files (structural typing)
    PathNlsLoader - Filesystem loader
    LoadResult - Immutable result of one load attempt
    locate_sibling_file / parse_mapping / load_mapping / load_mapping_async

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import asyncio
import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

from nlsassist.constants import DEFAULT_ENCODING, NLS_FILENAME
from nlsassist.diagnostics import Diagnostic, ErrorTemplate, NlsParseError
from nlsassist.enums import LoadStatus
from nlsassist.localization.types import LocalizationMapping, NlsSource

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Protocol
    "NlsLoader",
    # Concrete loader
    "PathNlsLoader",
    # Result type
    "LoadResult",
    # Operations
    "locate_sibling_file",
    "parse_mapping",
    "load_mapping",
    "load_mapping_async",
]

logger = logging.getLogger(__name__)


class NlsLoader(Protocol):
    """Protocol for reading localization files.

    This is a Protocol (structural typing) rather than ABC so hosts can
    hand in any object that can read text, e.g. one backed by unsaved
    editor buffers.

    Example:
        >>> class BufferLoader:
        ...     def __init__(self, buffers: dict[Path, str]) -> None:
        ...         self.buffers = buffers
        ...     def read(self, path: Path) -> str:
        ...         try:
        ...             return self.buffers[path]
        ...         except KeyError:
        ...             raise FileNotFoundError(path) from None
        ...     def describe_path(self, path: Path) -> str:
        ...         return str(path)
    """

    def read(self, path: Path) -> NlsSource:
        """Read the localization file at path.

        Raises:
            FileNotFoundError: If the file doesn't exist
            OSError: If the file cannot be read
            UnicodeDecodeError: If the file cannot be decoded
        """

    def describe_path(self, path: Path) -> str:
        """Return human-readable path for messages.

        Default implementation returns ``str(path)``.
        """
        return str(path)


@dataclass(frozen=True, slots=True)
class PathNlsLoader:
    """File system localization loader.

    Attributes:
        encoding: Text encoding of localization files
    """

    encoding: str = DEFAULT_ENCODING

    def read(self, path: Path) -> NlsSource:
        """Read a localization file from disk, dropping a leading BOM.

        Raises:
            FileNotFoundError: If the file doesn't exist
            OSError: If the file cannot be read
            UnicodeDecodeError: If the file cannot be decoded
        """
        return path.read_text(encoding=self.encoding).removeprefix("\ufeff")

    def describe_path(self, path: Path) -> str:
        """Return the path as the operating system spells it."""
        return str(path)


@dataclass(frozen=True, slots=True)
class LoadResult:
    """Result of loading one localization file.

    Exactly one of the LoadStatus cases. ``mapping`` is set only on SUCCESS,
    ``source`` on SUCCESS and PARSE_ERROR, ``error`` on READ_ERROR and PARSE_ERROR.

    Attributes:
        status: Load status
        path: Location that was read
        source_path: Human-readable location for messages
        mapping: Parsed key -> value mapping
        source: Raw file text (needed for navigation)
        error: Exception behind a READ_ERROR or PARSE_ERROR
    """

    status: LoadStatus
    path: Path
    source_path: str
    mapping: LocalizationMapping | None = None
    source: NlsSource | None = None
    error: Exception | None = None

    @property
    def is_success(self) -> bool:
        """Check if the file was read and parsed."""
        return self.status == LoadStatus.SUCCESS

    @property
    def is_not_found(self) -> bool:
        """Check if there is no file (expected for many manifests)."""
        return self.status == LoadStatus.NOT_FOUND

    @property
    def is_error(self) -> bool:
        """Check if the file exists but could not be used."""
        return self.status in (LoadStatus.READ_ERROR, LoadStatus.PARSE_ERROR)

    def diagnostic(self, nls_filename: str = NLS_FILENAME) -> Diagnostic | None:
        """Build the user-facing diagnostic for a non-success outcome.

        Args:
            nls_filename: Localization filename used in the message

        Returns:
            Diagnostic, or None on SUCCESS
        """
        match self.status:
            case LoadStatus.SUCCESS:
                return None
            case LoadStatus.NOT_FOUND:
                return ErrorTemplate.nls_file_not_found(self.source_path, nls_filename)
            case LoadStatus.READ_ERROR:
                return ErrorTemplate.nls_file_unreadable(
                    self.source_path, nls_filename, _reason(self.error)
                )
            case LoadStatus.PARSE_ERROR:
                return ErrorTemplate.nls_parse_failed(
                    self.source_path, nls_filename, _reason(self.error)
                )


def _reason(error: Exception | None) -> str | None:
    if error is None:
        return None
    if isinstance(error, OSError) and error.strerror:
        return error.strerror
    return str(error) or type(error).__name__


def locate_sibling_file(manifest_path: Path, nls_filename: str = NLS_FILENAME) -> Path:
    """Compute the localization file location for a manifest.

    Same parent folder, fixed filename. Pure: the file may not exist.

    Example:
        >>> locate_sibling_file(Path("/ext/package.json"))
        PosixPath('/ext/package.nls.json')
    """
    return manifest_path.parent / nls_filename


def parse_mapping(raw_text: NlsSource) -> LocalizationMapping:
    """Parse localization text into a flat mapping.

    Duplicate keys keep the last value. Values are not checked; non-string
    values are carried through as decoded.

    Args:
        raw_text: package.nls.json content

    Returns:
        Key -> value mapping in file order

    Raises:
        NlsParseError: If the text is not JSON or its top level is not an object
    """
    try:
        data = json.loads(raw_text)
    except json.JSONDecodeError as e:
        raise NlsParseError(
            ErrorTemplate.invalid_json(e.msg, e.lineno, e.colno),
            reason=e.msg,
            line=e.lineno,
            column=e.colno,
            offset=e.pos,
        ) from e
    except ValueError as e:
        # Well-formed JSON the decoder still refuses, e.g. an integer past
        # the int/str conversion digit limit
        reason = str(e)
        raise NlsParseError(ErrorTemplate.invalid_json(reason, 1, 1), reason=reason) from e
    except RecursionError as e:
        raise NlsParseError(
            ErrorTemplate.invalid_json("Nesting too deep", 1, 1), reason="Nesting too deep"
        ) from e

    if not isinstance(data, dict):
        raise NlsParseError(ErrorTemplate.not_an_object(type(data).__name__))
    return data


def load_mapping(path: Path, loader: NlsLoader | None = None) -> LoadResult:
    """Read and parse the localization file at path.

    Never raises: a missing file, an unreadable file and malformed JSON
    each become a distinct LoadResult status.

    Args:
        path: Localization file location
        loader: Loader to read with (default: PathNlsLoader())

    Returns:
        LoadResult describing the outcome
    """
    loader = loader if loader is not None else PathNlsLoader()
    source_path = loader.describe_path(path)

    try:
        source = loader.read(path)
    except (FileNotFoundError, NotADirectoryError, IsADirectoryError):
        logger.debug("No localization file at %s", source_path)
        return LoadResult(LoadStatus.NOT_FOUND, path, source_path)
    except (OSError, UnicodeDecodeError) as e:
        logger.warning("Failed to read localization file %s: %s", source_path, e)
        return LoadResult(LoadStatus.READ_ERROR, path, source_path, error=e)

    return _parse_loaded(path, source_path, source)


async def load_mapping_async(path: Path, loader: NlsLoader | None = None) -> LoadResult:
    """Read and parse the localization file without blocking the event loop.

    The read runs in a worker thread; awaiting it is the only suspension
    point, so a cancelled caller is abandoned there.

    Args:
        path: Localization file location
        loader: Loader to read with (default: PathNlsLoader())

    Returns:
        LoadResult describing the outcome
    """
    loader = loader if loader is not None else PathNlsLoader()
    source_path = loader.describe_path(path)

    try:
        source = await asyncio.to_thread(loader.read, path)
    except (FileNotFoundError, NotADirectoryError, IsADirectoryError):
        logger.debug("No localization file at %s", source_path)
        return LoadResult(LoadStatus.NOT_FOUND, path, source_path)
    except (OSError, UnicodeDecodeError) as e:
        logger.warning("Failed to read localization file %s: %s", source_path, e)
        return LoadResult(LoadStatus.READ_ERROR, path, source_path, error=e)

    return _parse_loaded(path, source_path, source)


def _parse_loaded(path: Path, source_path: str, source: NlsSource) -> LoadResult:
    try:
        mapping = parse_mapping(source)
    except NlsParseError as e:
        logger.warning("Failed to parse localization file %s: %s", source_path, e)
        return LoadResult(LoadStatus.PARSE_ERROR, path, source_path, source=source, error=e)

    logger.debug("Loaded %d keys from %s", len(mapping), source_path)
    return LoadResult(LoadStatus.SUCCESS, path, source_path, mapping=mapping, source=source)
