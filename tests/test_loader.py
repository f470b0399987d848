"""Tests for podium.loader: roster parsing and file loading."""

from __future__ import annotations

from pathlib import Path

import pytest

from podium.errors import InvalidConfiguration, RecordFormatError
from podium.loader import load_context, load_records, parse_records
from podium.models import ParticipantRecord


class TestParseRecords:
    def test_basic_rows(self) -> None:
        records = parse_records([["John Doe", "97"], ["Jane Doe", "92"]])
        assert records == [
            ParticipantRecord(name="John Doe", score=97),
            ParticipantRecord(name="Jane Doe", score=92),
        ]

    def test_strips_whitespace(self) -> None:
        records = parse_records([["  Jane Doe ", " 92 "]])
        assert records[0] == ParticipantRecord(name="Jane Doe", score=92)

    def test_skips_blank_rows(self) -> None:
        records = parse_records([[], ["A", "1"], ["", ""], ["B", "2"]])
        assert [r.name for r in records] == ["A", "B"]

    def test_skips_header(self) -> None:
        records = parse_records([["Name", "Score"], ["A", "1"]])
        assert [r.name for r in records] == ["A"]

    def test_error_wrong_field_count(self) -> None:
        with pytest.raises(RecordFormatError, match="expected 2 fields, got 3") as exc_info:
            parse_records([["A", "1"], ["B", "2", "3"]], source="roster.csv")
        assert exc_info.value.line == 2
        assert exc_info.value.source == "roster.csv"

    def test_error_empty_name(self) -> None:
        with pytest.raises(RecordFormatError, match="name is empty"):
            parse_records([["  ", "5"]])

    def test_error_non_integer_score(self) -> None:
        with pytest.raises(RecordFormatError, match="not an integer"):
            parse_records([["A", "9.5"]])

    def test_error_negative_score(self) -> None:
        with pytest.raises(RecordFormatError, match="negative"):
            parse_records([["A", "-1"]])


class TestLoadRecords:
    def test_bundled_roster(self, student_scores: Path) -> None:
        records = load_records(student_scores)
        assert records[0] == ParticipantRecord(name="John Doe", score=97)
        assert records[1] == ParticipantRecord(name="Jane Doe", score=92)
        assert len(records) == 7

    def test_custom_delimiter(self, write_roster) -> None:
        path = write_roster("A;10\nB;20\n")
        records = load_records(path, delimiter=";")
        assert [(r.name, r.score) for r in records] == [("A", 10), ("B", 20)]

    def test_names_with_commas_quoted(self, write_roster) -> None:
        path = write_roster('"Doe, John",97\n')
        assert load_records(path)[0].name == "Doe, John"

    def test_error_reports_file_and_line(self, write_roster) -> None:
        path = write_roster("A,10\nB,oops\n", name="bad.csv")
        with pytest.raises(RecordFormatError, match=r"bad\.csv:2"):
            load_records(path)

    def test_error_missing_file(self) -> None:
        with pytest.raises(FileNotFoundError, match="not found"):
            load_records("/nonexistent/roster.csv")

    def test_empty_file(self, write_roster) -> None:
        assert load_records(write_roster("")) == []

    def test_error_invalid_utf8(self, tmp_path: Path) -> None:
        path = tmp_path / "latin.csv"
        path.write_bytes(b"\xff\xfeA,70\n")
        with pytest.raises(RecordFormatError, match=r"latin\.csv:1: not valid UTF-8"):
            load_records(path)

    @pytest.mark.parametrize("delimiter", ["", "ab"])
    def test_error_bad_delimiter(self, write_roster, delimiter: str) -> None:
        path = write_roster("A,10\n")
        with pytest.raises(InvalidConfiguration, match="single character"):
            load_records(path, delimiter=delimiter)


class TestLoadContext:
    def test_builds_context(self, student_scores: Path) -> None:
        ctx = load_context(student_scores, 100)
        assert ctx.max_achievable_score == 100
        assert ctx.names[:2] == ["John Doe", "Jane Doe"]

    def test_rejects_bad_max(self, student_scores: Path) -> None:
        with pytest.raises(InvalidConfiguration):
            load_context(student_scores, 0)
