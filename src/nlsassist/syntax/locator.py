"""Placeholder token detection in manifest documents.

Classifies a cursor position in a package.json as touching a complete
``"%some.key%"`` placeholder, a placeholder still being typed, or neither.

The externalization tool only accepts a placeholder that is the entire
string value::

    "key": "%some.key%"

so ``"Plain text %some.key%"`` and ``"%key with spaces%"`` are never matched.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from nlsassist.constants import (
    MIN_FULL_TOKEN_LENGTH,
    PARTIAL_PLACEHOLDER_PATTERN,
    PLACEHOLDER_PATTERN,
)

if TYPE_CHECKING:
    from nlsassist.syntax.document import TextDocument
    from nlsassist.syntax.position import Position, Range

__all__ = [
    "PartialPlaceholder",
    "PlaceholderToken",
    "match_full_token",
    "match_partial_token",
]


@dataclass(frozen=True, slots=True)
class PlaceholderToken:
    """A complete placeholder under the cursor.

    Attributes:
        text: Matched text including quotes and % delimiters ('"%a.b%"')
        key: Bare externalization key ('a.b')
        range: Location of text in the manifest
    """

    text: str
    key: str
    range: Range


@dataclass(frozen=True, slots=True)
class PartialPlaceholder:
    """A placeholder being typed in value position.

    Attributes:
        text: Matched text starting with '"%'
        prefix: Key prefix typed so far (may be empty)
        colon_index: Index of the last ':' before the cursor on the line
        range: Location of text in the manifest
    """

    text: str
    prefix: str
    colon_index: int
    range: Range


def match_full_token(document: TextDocument, position: Position) -> PlaceholderToken | None:
    """Return the complete placeholder touching position, if any.

    The word range primitive may be looser than the pattern, so the matched
    text is checked again before the key is extracted.

    Args:
        document: Manifest document
        position: Cursor position

    Returns:
        PlaceholderToken, or None when position is not on a placeholder
    """
    word_range = document.get_word_range_at_position(position, PLACEHOLDER_PATTERN)
    if word_range is None:
        return None

    word = document.get_text(word_range)
    if len(word) < MIN_FULL_TOKEN_LENGTH or not word.startswith('"%') or not word.endswith('%"'):
        return None

    return PlaceholderToken(text=word, key=word[2:-2], range=word_range)


def match_partial_token(document: TextDocument, position: Position) -> PartialPlaceholder | None:
    """Return the in-progress placeholder at position, if it is in value position.

    A ':' must appear on the line before the cursor, otherwise the token is
    one of the manifest's own keys and must not be completed.

    Args:
        document: Manifest document
        position: Cursor position

    Returns:
        PartialPlaceholder, or None when completion does not apply
    """
    word_range = document.get_word_range_at_position(position, PARTIAL_PLACEHOLDER_PATTERN)
    if word_range is None:
        return None

    word = document.get_text(word_range)
    if len(word) < 2 or not word.startswith('"%'):
        return None

    cursor = document.validate_position(position)
    colon_index = document.line_at(cursor).rfind(":", 0, cursor.character)
    if colon_index == -1:
        return None

    prefix = word[2:].removesuffix('"')
    return PartialPlaceholder(
        text=word, prefix=prefix, colon_index=colon_index, range=word_range
    )
