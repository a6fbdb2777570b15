"""Tests for localization file loading and parsing."""

from __future__ import annotations

import asyncio
import json
import logging
from pathlib import Path

import pytest

from nlsassist.diagnostics import DiagnosticCode, NlsParseError
from nlsassist.enums import LoadStatus
from nlsassist.localization.loading import (
    LoadResult,
    PathNlsLoader,
    load_mapping,
    load_mapping_async,
    locate_sibling_file,
    parse_mapping,
)


class DictLoader:
    """In-memory loader keyed by path; missing paths raise FileNotFoundError."""

    def __init__(self, files: dict[Path, str]) -> None:
        self.files = files
        self.reads: list[Path] = []

    def read(self, path: Path) -> str:
        self.reads.append(path)
        try:
            return self.files[path]
        except KeyError:
            raise FileNotFoundError(path) from None

    def describe_path(self, path: Path) -> str:
        return f"mem:{path}"


class FailingLoader:
    """Loader whose reads fail with a fixed exception."""

    def __init__(self, error: Exception) -> None:
        self.error = error

    def read(self, path: Path) -> str:
        raise self.error

    def describe_path(self, path: Path) -> str:
        return str(path)


# ============================================================================
# SIBLING LOCATION
# ============================================================================


class TestLocateSiblingFile:
    """Test the package.nls.json location convention."""

    def test_same_folder_fixed_name(self) -> None:
        assert locate_sibling_file(Path("/ws/ext/package.json")) == Path(
            "/ws/ext/package.nls.json"
        )

    def test_custom_filename(self) -> None:
        assert locate_sibling_file(
            Path("/ws/ext/package.json"), "package.nls.de.json"
        ) == Path("/ws/ext/package.nls.de.json")

    def test_does_not_touch_filesystem(self, tmp_path: Path) -> None:
        missing = tmp_path / "nowhere" / "package.json"

        assert locate_sibling_file(missing) == tmp_path / "nowhere" / "package.nls.json"


# ============================================================================
# PARSING
# ============================================================================


class TestParseMapping:
    """Test JSON parsing into a flat mapping."""

    def test_flat_object(self) -> None:
        assert parse_mapping('{"a": "A", "b.c": "BC"}') == {"a": "A", "b.c": "BC"}

    def test_insertion_order_preserved(self) -> None:
        assert list(parse_mapping('{"z": "1", "a": "2", "m": "3"}')) == ["z", "a", "m"]

    def test_duplicate_keys_last_wins(self) -> None:
        assert parse_mapping('{"a": "first", "a": "second"}') == {"a": "second"}

    def test_non_string_values_tolerated(self) -> None:
        mapping = parse_mapping('{"n": 1, "o": {"x": true}, "z": null}')

        assert mapping == {"n": 1, "o": {"x": True}, "z": None}

    def test_invalid_json_raises_with_position(self) -> None:
        with pytest.raises(NlsParseError) as exc_info:
            parse_mapping('{"a":}')

        error = exc_info.value
        assert error.line == 1
        assert error.column == 6
        assert error.offset == 5
        assert error.reason == "Expecting value"
        assert error.diagnostic is not None
        assert error.diagnostic.code == DiagnosticCode.NLS_PARSE_FAILED

    def test_empty_text_raises(self) -> None:
        with pytest.raises(NlsParseError):
            parse_mapping("")

    @pytest.mark.parametrize("text", ["[]", '"a"', "42", "null"])
    def test_top_level_must_be_object(self, text: str) -> None:
        with pytest.raises(NlsParseError, match="JSON object"):
            parse_mapping(text)

    def test_integer_past_digit_limit_raises_parse_error(self) -> None:
        text = '{"a": "A", "n": 1' + "0" * 5000 + "}"

        with pytest.raises(NlsParseError) as exc_info:
            parse_mapping(text)

        assert "digits" in exc_info.value.reason
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code == DiagnosticCode.NLS_PARSE_FAILED

    def test_excessive_nesting_raises_parse_error(self) -> None:
        with pytest.raises(NlsParseError, match="Nesting too deep"):
            parse_mapping('{"a": ' + "[" * 100_000 + "]" * 100_000 + "}")


# ============================================================================
# LOADING
# ============================================================================


class TestLoadMapping:
    """Test the tagged outcomes of load_mapping."""

    def test_success(self, tmp_path: Path) -> None:
        path = tmp_path / "package.nls.json"
        path.write_text('{"a": "A"}', encoding="utf-8")

        result = load_mapping(path)

        assert result.status == LoadStatus.SUCCESS
        assert result.is_success
        assert result.mapping == {"a": "A"}
        assert result.source == '{"a": "A"}'
        assert result.error is None
        assert result.diagnostic() is None

    def test_bom_is_dropped(self, tmp_path: Path) -> None:
        path = tmp_path / "package.nls.json"
        path.write_text('\ufeff{"a": "A"}', encoding="utf-8")

        result = load_mapping(path)

        assert result.mapping == {"a": "A"}
        assert result.source == '{"a": "A"}'

    def test_missing_file_is_not_found(self, tmp_path: Path) -> None:
        result = load_mapping(tmp_path / "package.nls.json")

        assert result.status == LoadStatus.NOT_FOUND
        assert result.is_not_found
        assert not result.is_error
        assert result.mapping is None

    def test_missing_parent_is_not_found(self, tmp_path: Path) -> None:
        result = load_mapping(tmp_path / "missing" / "package.nls.json")

        assert result.is_not_found

    def test_directory_is_not_found(self, tmp_path: Path) -> None:
        (tmp_path / "package.nls.json").mkdir()

        result = load_mapping(tmp_path / "package.nls.json")

        assert result.is_not_found

    def test_invalid_json_is_parse_error(self, tmp_path: Path) -> None:
        path = tmp_path / "package.nls.json"
        path.write_text('{"a":}', encoding="utf-8")

        result = load_mapping(path)

        assert result.status == LoadStatus.PARSE_ERROR
        assert result.is_error
        assert isinstance(result.error, NlsParseError)
        assert result.source == '{"a":}'
        assert result.mapping is None

    def test_huge_integer_is_parse_error(self, tmp_path: Path) -> None:
        path = tmp_path / "package.nls.json"
        path.write_text('{"n": 1' + "0" * 5000 + "}", encoding="utf-8")

        result = load_mapping(path)
        async_result = asyncio.run(load_mapping_async(path))

        assert result.status == async_result.status == LoadStatus.PARSE_ERROR
        assert result.source is not None
        diagnostic = result.diagnostic()
        assert diagnostic is not None
        assert diagnostic.message.startswith("Could not read the package.nls.json file at ")

    def test_undecodable_file_is_read_error(self, tmp_path: Path) -> None:
        path = tmp_path / "package.nls.json"
        path.write_bytes(b'{"a": "\xff\xfe"}')

        result = load_mapping(path)

        assert result.status == LoadStatus.READ_ERROR
        assert isinstance(result.error, UnicodeDecodeError)

    def test_permission_error_is_read_error(self) -> None:
        loader = FailingLoader(PermissionError(13, "Permission denied"))

        result = load_mapping(Path("/ws/package.nls.json"), loader)

        assert result.status == LoadStatus.READ_ERROR
        diagnostic = result.diagnostic()
        assert diagnostic is not None
        assert diagnostic.code == DiagnosticCode.NLS_FILE_UNREADABLE
        assert diagnostic.message.endswith(": Permission denied")

    def test_custom_loader_and_describe_path(self) -> None:
        path = Path("/ws/package.nls.json")
        loader = DictLoader({path: json.dumps({"k": "v"})})

        result = load_mapping(path, loader)

        assert result.mapping == {"k": "v"}
        assert result.source_path == "mem:/ws/package.nls.json"
        assert loader.reads == [path]

    def test_not_found_logged_at_debug_only(
        self, tmp_path: Path, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.DEBUG, logger="nlsassist"):
            load_mapping(tmp_path / "package.nls.json")

        assert caplog.records
        assert all(r.levelno == logging.DEBUG for r in caplog.records)

    def test_parse_error_logged_as_warning(
        self, tmp_path: Path, caplog: pytest.LogCaptureFixture
    ) -> None:
        path = tmp_path / "package.nls.json"
        path.write_text("{", encoding="utf-8")

        with caplog.at_level(logging.WARNING, logger="nlsassist"):
            load_mapping(path)

        assert any(r.levelno == logging.WARNING for r in caplog.records)

    def test_edits_visible_on_next_load(self, tmp_path: Path) -> None:
        path = tmp_path / "package.nls.json"
        path.write_text('{"a": "old"}', encoding="utf-8")
        first = load_mapping(path)

        path.write_text('{"a": "new"}', encoding="utf-8")
        second = load_mapping(path)

        assert first.mapping == {"a": "old"}
        assert second.mapping == {"a": "new"}


class TestLoadMappingAsync:
    """Test the non-blocking variant."""

    def test_same_outcomes_as_blocking(self, tmp_path: Path) -> None:
        good = tmp_path / "good.json"
        good.write_text('{"a": "A"}', encoding="utf-8")
        bad = tmp_path / "bad.json"
        bad.write_text("{", encoding="utf-8")
        missing = tmp_path / "missing.json"

        async def run() -> list[LoadResult]:
            return list(
                await asyncio.gather(
                    load_mapping_async(good),
                    load_mapping_async(bad),
                    load_mapping_async(missing),
                )
            )

        results = asyncio.run(run())

        assert [r.status for r in results] == [
            LoadStatus.SUCCESS,
            LoadStatus.PARSE_ERROR,
            LoadStatus.NOT_FOUND,
        ]

    def test_read_error(self) -> None:
        loader = FailingLoader(OSError(5, "Input/output error"))

        result = asyncio.run(load_mapping_async(Path("/ws/package.nls.json"), loader))

        assert result.status == LoadStatus.READ_ERROR


class TestPathNlsLoader:
    """Test the filesystem loader."""

    def test_describe_path(self) -> None:
        assert PathNlsLoader().describe_path(Path("/a/b.json")) == str(Path("/a/b.json"))

    def test_encoding_option(self, tmp_path: Path) -> None:
        path = tmp_path / "package.nls.json"
        path.write_bytes('{"a": "é"}'.encode("latin-1"))

        assert PathNlsLoader(encoding="latin-1").read(path) == '{"a": "é"}'

    def test_missing_file_raises(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            PathNlsLoader().read(tmp_path / "none.json")
