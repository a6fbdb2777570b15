"""Queries over a loaded localization mapping.

Exact lookup for hover and navigation, prefix search for completion, and
the source span of a key inside package.nls.json for go-to-definition.

NlsResolver binds a configuration and a loader so that providers can go
from a manifest location to a LoadResult in one call. It keeps no state
between calls: every query re-reads and re-parses the localization file,
so edits are always visible on the next query.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from nlsassist.config import AssistConfig
from nlsassist.constants import NLS_KEY_PATTERN
from nlsassist.localization.loading import (
    LoadResult,
    NlsLoader,
    PathNlsLoader,
    load_mapping,
    load_mapping_async,
    locate_sibling_file,
)

if TYPE_CHECKING:
    from pathlib import Path

    from nlsassist.localization.types import LocalizationMapping, NlsKey, NlsSource, NlsValue
    from nlsassist.syntax.document import TextDocument
    from nlsassist.syntax.position import Range

__all__ = [
    "KeyLookup",
    "NavigationSpan",
    "NlsResolver",
    "find_key_offset",
    "format_value",
    "locate_key",
    "lookup_exact",
    "lookup_prefix",
    "word_range_around_offset",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class KeyLookup:
    """Outcome of an exact key lookup.

    A JSON null stored under the key is still a hit, so ``found`` is kept
    separately from ``value``.
    """

    key: NlsKey
    found: bool
    value: NlsValue = None


@dataclass(frozen=True, slots=True)
class NavigationSpan:
    """Where a key is defined inside the localization file.

    Attributes:
        path: Localization file location
        offset: 0-based character offset of the opening quote of the key
        range: Range of the quoted key token
    """

    path: Path
    offset: int
    range: Range


def lookup_exact(mapping: LocalizationMapping, key: NlsKey) -> KeyLookup:
    """Look a key up in the mapping.

    Example:
        >>> lookup_exact({"a": "A"}, "a")
        KeyLookup(key='a', found=True, value='A')
        >>> lookup_exact({"a": "A"}, "b").found
        False
    """
    if key in mapping:
        return KeyLookup(key, True, mapping[key])
    logger.debug("Key %s not in localization mapping", key)
    return KeyLookup(key, False)


def lookup_prefix(
    mapping: LocalizationMapping, prefix: str
) -> tuple[tuple[NlsKey, NlsValue], ...]:
    """Return every entry whose key starts with prefix, in file order.

    An empty prefix returns all entries.
    """
    return tuple((key, value) for key, value in mapping.items() if key.startswith(prefix))


def find_key_offset(raw_text: NlsSource, key: NlsKey) -> int | None:
    """Return the offset of the first literal ``"<key>"`` in raw_text."""
    index = raw_text.find(f'"{key}"')
    return index if index >= 0 else None


def word_range_around_offset(document: TextDocument, offset: int) -> Range | None:
    """Return the quoted-key token enclosing offset.

    The token is bounded by ``"[a-zA-Z0-9.\\-]+"``, quotes included, so the
    navigation target is the key itself and not its value.
    """
    return document.get_word_range_at_position(document.position_at(offset), NLS_KEY_PATTERN)


def locate_key(document: TextDocument, key: NlsKey) -> NavigationSpan | None:
    """Find the navigation span of key in a localization document.

    Args:
        document: The localization file as a document
        key: Externalization key to find

    Returns:
        NavigationSpan, or None if the key text or its token cannot be found
    """
    offset = find_key_offset(document.text, key)
    if offset is None:
        return None
    key_range = word_range_around_offset(document, offset)
    if key_range is None:
        return None
    return NavigationSpan(path=document.path, offset=offset, range=key_range)


def format_value(value: NlsValue) -> str:
    """Render a mapping value for display.

    Strings are shown as-is; anything else is shown as its JSON text.
    """
    if isinstance(value, str):
        return value
    return json.dumps(value, ensure_ascii=False)


@dataclass(frozen=True, slots=True)
class NlsResolver:
    """Loads the localization file belonging to a manifest.

    Attributes:
        config: File naming configuration
        loader: Loader used to read localization files (default: a
            PathNlsLoader using config.encoding)

    Example:
        >>> resolver = NlsResolver()
        >>> resolver.nls_path_for(Path("/ext/package.json"))
        PosixPath('/ext/package.nls.json')
    """

    config: AssistConfig = field(default_factory=AssistConfig)
    loader: NlsLoader | None = None

    def __post_init__(self) -> None:
        if self.loader is None:
            object.__setattr__(self, "loader", PathNlsLoader(self.config.encoding))

    def nls_path_for(self, manifest_path: Path) -> Path:
        """Return the localization file location for a manifest."""
        return locate_sibling_file(manifest_path, self.config.nls_filename)

    def load(self, manifest_path: Path) -> LoadResult:
        """Load the localization file for a manifest (blocking)."""
        return load_mapping(self.nls_path_for(manifest_path), self.loader)

    async def load_async(self, manifest_path: Path) -> LoadResult:
        """Load the localization file for a manifest without blocking."""
        return await load_mapping_async(self.nls_path_for(manifest_path), self.loader)
