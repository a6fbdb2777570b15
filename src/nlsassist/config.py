"""Configuration for the nlsassist providers.

Provides a single frozen dataclass holding the file naming and trigger
settings shared by the loader, the workspace registry and the CLI.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass

from nlsassist.constants import (
    COMPLETION_TRIGGER_CHARACTERS,
    DEFAULT_ENCODING,
    MANIFEST_GLOB,
    NLS_FILENAME,
)

__all__ = ["AssistConfig"]


@dataclass(frozen=True, slots=True)
class AssistConfig:
    """Immutable configuration for placeholder resolution.

    All fields have sensible defaults; constructing ``AssistConfig()`` with
    no arguments reproduces the standard package.json / package.nls.json
    pairing.

    Attributes:
        nls_filename: Localization filename looked up next to each manifest
            (default: ``package.nls.json``). Must be a bare filename.
        manifest_pattern: Glob, relative to a workspace folder, selecting
            the manifests the providers attach to (default: ``**/package.json``).
        trigger_characters: Characters that trigger completion (default: ``%`` and ``.``).
        encoding: Text encoding of the localization file (default: ``utf-8``).

    Example:
        >>> config = AssistConfig(nls_filename="package.nls.de.json")
        >>> config.nls_filename
        'package.nls.de.json'
    """

    nls_filename: str = NLS_FILENAME
    manifest_pattern: str = MANIFEST_GLOB
    trigger_characters: tuple[str, ...] = COMPLETION_TRIGGER_CHARACTERS
    encoding: str = DEFAULT_ENCODING

    def __post_init__(self) -> None:
        """Validate configuration values at construction time.

        Raises:
            ValueError: If nls_filename is empty or contains a path separator,
                if manifest_pattern is empty, or if trigger_characters is empty
                or holds anything other than single characters.
        """
        if not self.nls_filename or self.nls_filename in (".", ".."):
            msg = f"nls_filename must be a file name, got {self.nls_filename!r}"
            raise ValueError(msg)
        if "/" in self.nls_filename or "\\" in self.nls_filename:
            msg = f"nls_filename must not contain path separators, got {self.nls_filename!r}"
            raise ValueError(msg)
        if not self.manifest_pattern:
            msg = "manifest_pattern must not be empty"
            raise ValueError(msg)
        if not self.trigger_characters:
            msg = "trigger_characters must not be empty"
            raise ValueError(msg)
        if any(len(ch) != 1 for ch in self.trigger_characters):
            msg = f"trigger_characters must be single characters, got {self.trigger_characters!r}"
            raise ValueError(msg)
