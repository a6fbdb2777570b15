"""In-memory text document with editor-style addressing.

TextDocument provides the primitives the locator and resolver need from a
host editor: line text at a position, text in a range, offset/position
conversion and the regex-driven word range at a position.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from pathlib import Path

from nlsassist.constants import DEFAULT_ENCODING
from nlsassist.syntax.position import LineIndex, Position, Range

__all__ = ["TextDocument"]


@dataclass(frozen=True, slots=True)
class TextDocument:
    """Immutable snapshot of a document's text.

    Constructed per query and discarded afterwards; nothing holds on to it.

    Attributes:
        path: Absolute location of the document
        text: Raw text content

    Example:
        >>> doc = TextDocument(Path("/ext/package.json"), '{"a": "%b%"}')
        >>> doc.get_word_range_at_position(Position(0, 9), re.compile(r'"%[a-z]+%"'))
        Range(start=Position(line=0, character=6), end=Position(line=0, character=11))
    """

    path: Path
    text: str
    _index: LineIndex = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        """Build the line index once per snapshot."""
        object.__setattr__(self, "_index", LineIndex(self.text))

    @classmethod
    def from_path(cls, path: Path, encoding: str = DEFAULT_ENCODING) -> TextDocument:
        """Read a document from disk.

        A leading byte order mark is dropped, as editors do.

        Raises:
            FileNotFoundError: If the file does not exist
            OSError: If the file cannot be read
            UnicodeDecodeError: If the file is not valid in ``encoding``
        """
        text = path.read_text(encoding=encoding)
        return cls(path, text.removeprefix("\ufeff"))

    @property
    def line_count(self) -> int:
        """Number of lines in the document."""
        return self._index.line_count

    def line_at(self, position: Position | int) -> str:
        """Return the text of the line containing position (or of a line number)."""
        line = position.line if isinstance(position, Position) else position
        return self._index.line_text(line)

    def get_text(self, text_range: Range | None = None) -> str:
        """Return the text covered by a range, or the whole document."""
        if text_range is None:
            return self.text
        return self.text[self.offset_at(text_range.start) : self.offset_at(text_range.end)]

    def offset_at(self, position: Position) -> int:
        """Convert a position to a character offset (clamped)."""
        return self._index.offset_at(position)

    def position_at(self, offset: int) -> Position:
        """Convert a character offset to a position (clamped)."""
        return self._index.position_at(offset)

    def validate_position(self, position: Position) -> Position:
        """Clamp a position to an existing line and character."""
        return self.position_at(self.offset_at(position))

    def get_word_range_at_position(
        self, position: Position, pattern: re.Pattern[str]
    ) -> Range | None:
        """Find the pattern match on position's line that touches position.

        The pattern is applied to the line text only. A match touches the
        position when ``start <= character <= end``, so a cursor right after
        the last character still counts. Empty matches are ignored. When two
        matches touch the position, the leftmost wins.

        Args:
            position: Cursor position
            pattern: Compiled word pattern

        Returns:
            Range of the touching match, or None if no match touches position
        """
        position = self.validate_position(position)
        line_text = self._index.line_text(position.line)
        character = position.character

        for match in pattern.finditer(line_text):
            if match.start() > character:
                break
            if match.start() == match.end():
                continue
            word_range = Range(
                Position(position.line, match.start()),
                Position(position.line, match.end()),
            )
            if word_range.contains(position):
                return word_range
        return None
