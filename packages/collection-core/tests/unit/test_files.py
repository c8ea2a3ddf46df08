"""Unit tests for file access helpers."""

from __future__ import annotations

from pathlib import Path

import pytest

from collection_core.errors import MalformedRecordError
from collection_core.files import read_bytes_or_empty, read_json, write_text


class TestReadJson:
    """Tests for read_json()."""

    def test_reads_utf8(self, tmp_path: Path) -> None:
        path = tmp_path / "a.json"
        path.write_bytes('{"name": "Gestión"}'.encode())

        assert read_json(path) == {"name": "Gestión"}

    def test_missing_file_raises_file_not_found(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            read_json(tmp_path / "missing.json")

    def test_invalid_json_reports_position(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.json"
        path.write_text('{\n  "id": \n}', encoding="utf-8")

        with pytest.raises(MalformedRecordError, match="Invalid JSON at line 3") as exc_info:
            read_json(path)

        assert exc_info.value.file_path == str(path)

    @pytest.mark.parametrize("token", ["NaN", "Infinity", "-Infinity", "1e400", "-1e400"])
    def test_non_finite_numbers_rejected(self, tmp_path: Path, token: str) -> None:
        path = tmp_path / "a.json"
        path.write_text(f'{{"id": "a", "weight": {token}}}', encoding="utf-8")

        with pytest.raises(MalformedRecordError, match="Invalid JSON") as exc_info:
            read_json(path)

        assert exc_info.value.file_path == str(path)

    def test_finite_floats_accepted(self, tmp_path: Path) -> None:
        path = tmp_path / "a.json"
        path.write_text('{"weight": 2.5e3, "ratio": -0.25}', encoding="utf-8")

        assert read_json(path) == {"weight": 2500.0, "ratio": -0.25}

    def test_lone_surrogate_escape_rejected(self, tmp_path: Path) -> None:
        path = tmp_path / "a.json"
        path.write_text('{"skillName": "\\ud800"}', encoding="utf-8")

        with pytest.raises(MalformedRecordError, match="not valid Unicode") as exc_info:
            read_json(path)

        assert exc_info.value.file_path == str(path)

    def test_surrogate_pair_escape_accepted(self, tmp_path: Path) -> None:
        path = tmp_path / "a.json"
        path.write_text('{"skillName": "\\ud83d\\ude00"}', encoding="utf-8")

        assert read_json(path) == {"skillName": "\U0001f600"}


class TestReadBytesOrEmpty:
    """Tests for read_bytes_or_empty()."""

    def test_missing_file_is_empty(self, tmp_path: Path) -> None:
        assert read_bytes_or_empty(tmp_path / "missing.json") == b""

    def test_line_endings_preserved(self, tmp_path: Path) -> None:
        path = tmp_path / "crlf.json"
        path.write_bytes(b"{}\r\n")

        assert read_bytes_or_empty(path) == b"{}\r\n"


class TestWriteText:
    """Tests for write_text()."""

    def test_creates_parent_directories(self, tmp_path: Path) -> None:
        path = tmp_path / "nested" / "out.json"

        assert write_text(path, "{}\n") == path
        assert path.read_text(encoding="utf-8") == "{}\n"

    def test_writes_lf_newlines(self, tmp_path: Path) -> None:
        path = tmp_path / "out.json"
        write_text(path, "{\n}\n")

        assert path.read_bytes() == b"{\n}\n"

    def test_overwrites(self, tmp_path: Path) -> None:
        path = tmp_path / "out.json"
        path.write_text("old", encoding="utf-8")

        write_text(path, "new\n")

        assert path.read_text(encoding="utf-8") == "new\n"
