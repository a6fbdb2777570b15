"""Position utilities for JSON documents.

Provides zero-based Position/Range value types (the editor's addressing
scheme) and a cached line index for converting between character offsets
and positions.

Line Ending Support:
    - LF (Unix, \\n): Fully supported
    - CRLF (Windows, \\r\\n): Supported; the \\r is part of the line ending,
      not of the line text
    - CR-only (Classic Mac, \\r): NOT supported

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["LineIndex", "Position", "Range"]


@dataclass(frozen=True, slots=True, order=True)
class Position:
    """Zero-based line/character position.

    Ordering compares line first, then character.

    Attributes:
        line: 0-based line number
        character: 0-based character offset within the line
    """

    line: int
    character: int

    def __post_init__(self) -> None:
        """Reject negative coordinates.

        Raises:
            ValueError: If line or character is negative
        """
        if self.line < 0:
            msg = f"Position.line must be >= 0, got {self.line}"
            raise ValueError(msg)
        if self.character < 0:
            msg = f"Position.character must be >= 0, got {self.character}"
            raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class Range:
    """Half-open span between two positions (end exclusive).

    Attributes:
        start: First position covered
        end: Position just past the last character covered
    """

    start: Position
    end: Position

    def __post_init__(self) -> None:
        """Validate Range invariants.

        Raises:
            ValueError: If end precedes start
        """
        if self.end < self.start:
            msg = f"Range.end ({self.end}) must be >= start ({self.start})"
            raise ValueError(msg)

    def contains(self, position: Position) -> bool:
        """Check if position lies in the range, both ends inclusive.

        Inclusive end matches the editor's notion of a cursor touching a word.
        """
        return self.start <= position <= self.end


class LineIndex:
    """Cached line offset computation for offset <-> position conversion.

    Precomputes line start offsets in one pass, then provides O(log n)
    lookups using binary search. Out-of-range input is clamped the way
    the editor clamps it rather than raising.

    Example:
        >>> index = LineIndex("ab\\ncd")
        >>> index.position_at(4)
        Position(line=1, character=1)
        >>> index.offset_at(Position(1, 0))
        3

    Thread Safety:
        Thread-safe. Internal state is only set during __init__.
    """

    __slots__ = ("_offsets", "_source")

    def __init__(self, source: str) -> None:
        """Build line index from source.

        Args:
            source: Source text to index
        """
        offsets = [0]
        for i, char in enumerate(source):
            if char == "\n":
                offsets.append(i + 1)
        self._offsets: tuple[int, ...] = tuple(offsets)
        self._source = source

    @property
    def line_count(self) -> int:
        """Number of lines (an empty source has one empty line)."""
        return len(self._offsets)

    def line_text(self, line: int) -> str:
        """Return the text of a line without its line ending.

        Args:
            line: 0-based line number, clamped to the last line

        Returns:
            Line content, excluding a trailing \\n or \\r\\n
        """
        line = max(0, min(line, len(self._offsets) - 1))
        start = self._offsets[line]
        if line + 1 < len(self._offsets):
            end = self._offsets[line + 1] - 1
        else:
            end = len(self._source)
        text = self._source[start:end]
        if text.endswith("\r"):
            text = text[:-1]
        return text

    def position_at(self, offset: int) -> Position:
        """Convert a character offset to a position.

        Args:
            offset: Character offset, clamped to [0, len(source)]

        Returns:
            Position of the offset
        """
        offset = max(0, min(offset, len(self._source)))

        # Line number = index of largest line start <= offset
        left, right = 0, len(self._offsets) - 1
        while left < right:
            mid = (left + right + 1) // 2
            if self._offsets[mid] <= offset:
                left = mid
            else:
                right = mid - 1

        character = min(offset - self._offsets[left], len(self.line_text(left)))
        return Position(left, character)

    def offset_at(self, position: Position) -> int:
        """Convert a position to a character offset.

        Args:
            position: Position, clamped to an existing line and to that
                line's length

        Returns:
            Character offset into the source
        """
        if position.line >= len(self._offsets):
            return len(self._source)
        character = min(position.character, len(self.line_text(position.line)))
        return self._offsets[position.line] + character
