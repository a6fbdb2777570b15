"""Tests for TextDocument and its word range primitive."""

from __future__ import annotations

import re
from pathlib import Path

import pytest

from nlsassist.constants import NLS_KEY_PATTERN, PARTIAL_PLACEHOLDER_PATTERN, PLACEHOLDER_PATTERN
from nlsassist.syntax.document import TextDocument
from nlsassist.syntax.position import Position, Range

PATH = Path("/ws/ext/package.json")


def _doc(text: str) -> TextDocument:
    return TextDocument(PATH, text)


class TestTextAccess:
    """Test line and range access."""

    def test_line_at_position_and_number(self) -> None:
        doc = _doc('{\n  "a": "b"\n}')

        assert doc.line_at(Position(1, 3)) == '  "a": "b"'
        assert doc.line_at(2) == "}"
        assert doc.line_count == 3

    def test_get_text_without_range_is_whole_text(self) -> None:
        doc = _doc("abc\ndef")

        assert doc.get_text() == "abc\ndef"

    def test_get_text_across_lines(self) -> None:
        doc = _doc("abc\ndef")

        assert doc.get_text(Range(Position(0, 1), Position(1, 2))) == "bc\nde"

    def test_validate_position_clamps(self) -> None:
        doc = _doc("abc\nd")

        assert doc.validate_position(Position(0, 40)) == Position(0, 3)
        assert doc.validate_position(Position(7, 0)) == Position(1, 1)

    def test_snapshot_is_immutable(self) -> None:
        doc = _doc("abc")

        with pytest.raises(AttributeError):
            doc.text = "xyz"  # type: ignore[misc]

    def test_from_path_strips_bom(self, tmp_path: Path) -> None:
        path = tmp_path / "package.json"
        path.write_text('\ufeff{"a": "%b%"}', encoding="utf-8")

        doc = TextDocument.from_path(path)

        assert doc.text == '{"a": "%b%"}'
        assert doc.path == path

    def test_from_path_missing_file_raises(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            TextDocument.from_path(tmp_path / "package.json")


class TestWordRangeAtPosition:
    """Test regex-driven word range detection."""

    def test_range_touching_inside(self) -> None:
        doc = _doc('  "title": "%cmd.run%",')

        word_range = doc.get_word_range_at_position(Position(0, 15), PLACEHOLDER_PATTERN)

        assert word_range == Range(Position(0, 11), Position(0, 22))
        assert doc.get_text(word_range) == '"%cmd.run%"'

    def test_range_touching_at_both_edges(self) -> None:
        doc = _doc('x "%a%" y')

        assert doc.get_word_range_at_position(Position(0, 2), PLACEHOLDER_PATTERN) is not None
        assert doc.get_word_range_at_position(Position(0, 7), PLACEHOLDER_PATTERN) is not None
        assert doc.get_word_range_at_position(Position(0, 1), PLACEHOLDER_PATTERN) is None
        assert doc.get_word_range_at_position(Position(0, 8), PLACEHOLDER_PATTERN) is None

    def test_leftmost_match_wins_when_two_touch(self) -> None:
        doc = _doc("ab-cd")
        pattern = re.compile(r"[a-z]+")

        word_range = doc.get_word_range_at_position(Position(0, 2), pattern)

        assert doc.get_text(word_range) == "ab"  # type: ignore[arg-type]

    def test_only_the_position_line_is_searched(self) -> None:
        doc = _doc('"%a%"\n\n"%b%"')

        assert doc.get_word_range_at_position(Position(1, 0), PLACEHOLDER_PATTERN) is None

    def test_empty_matches_ignored(self) -> None:
        doc = _doc("abc")

        assert doc.get_word_range_at_position(Position(0, 1), re.compile(r"x*")) is None

    def test_partial_pattern_stops_at_closing_percent(self) -> None:
        doc = _doc('"d": "%a.b%"')

        word_range = doc.get_word_range_at_position(Position(0, 9), PARTIAL_PLACEHOLDER_PATTERN)

        assert doc.get_text(word_range) == '"%a.b'  # type: ignore[arg-type]

    def test_key_pattern_matches_quoted_key_not_value_with_spaces(self) -> None:
        doc = _doc('  "ext.title": "Hello world",')

        key_range = doc.get_word_range_at_position(Position(0, 2), NLS_KEY_PATTERN)
        value_range = doc.get_word_range_at_position(Position(0, 18), NLS_KEY_PATTERN)

        assert doc.get_text(key_range) == '"ext.title"'  # type: ignore[arg-type]
        assert value_range is None
