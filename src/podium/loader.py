"""Roster loader: reads ``name,score`` rows into participant records."""

from __future__ import annotations

import csv
import logging
from collections.abc import Iterable
from pathlib import Path

from podium.context import EvaluationContext
from podium.errors import InvalidConfiguration, RecordFormatError
from podium.models import ParticipantRecord

logger = logging.getLogger(__name__)

_HEADER = ("name", "score")


def parse_records(
    rows: Iterable[list[str]],
    source: str | Path = "<rows>",
) -> list[ParticipantRecord]:
    """Validate raw rows and turn them into records.

    Blank rows are skipped. A leading ``name,score`` header row is allowed.

    Raises
    ------
    RecordFormatError
        If a row does not have exactly two fields, the name is empty, or
        the score is not a non-negative integer.
    """
    records: list[ParticipantRecord] = []
    for line, row in enumerate(rows, start=1):
        if not row or all(not cell.strip() for cell in row):
            continue
        if len(row) != 2:
            raise RecordFormatError(source, line, f"expected 2 fields, got {len(row)}")

        name, raw_score = row[0].strip(), row[1].strip()
        if not records and (name.lower(), raw_score.lower()) == _HEADER:
            continue
        if not name:
            raise RecordFormatError(source, line, "participant name is empty")
        try:
            score = int(raw_score)
        except ValueError:
            raise RecordFormatError(source, line, f"score {raw_score!r} is not an integer") from None
        if score < 0:
            raise RecordFormatError(source, line, f"score {score} is negative")

        records.append(ParticipantRecord(name=name, score=score))
    return records


def load_records(filepath: str | Path, *, delimiter: str = ",") -> list[ParticipantRecord]:
    """Load participant records from a delimited text file.

    Raises
    ------
    FileNotFoundError
        If *filepath* does not exist.
    RecordFormatError
        If any row is malformed or the file is not UTF-8 text.
    InvalidConfiguration
        If *delimiter* is not a single character.
    """
    if not isinstance(delimiter, str) or len(delimiter) != 1:
        raise InvalidConfiguration(f"delimiter must be a single character, got {delimiter!r}")

    path = Path(filepath)
    if not path.is_file():
        raise FileNotFoundError(f"Roster file not found: {path}")

    with path.open(newline="", encoding="utf-8") as fh:
        reader = csv.reader(fh, delimiter=delimiter)
        try:
            records = parse_records(reader, source=path.name)
        except UnicodeDecodeError:
            raise RecordFormatError(path.name, reader.line_num + 1, "not valid UTF-8 text") from None
        except csv.Error as exc:
            raise RecordFormatError(path.name, reader.line_num, str(exc)) from None

    logger.debug("Loaded %d records from %s", len(records), path)
    return records


def load_context(
    filepath: str | Path,
    max_achievable_score: int,
    *,
    delimiter: str = ",",
) -> EvaluationContext:
    """Load a roster file straight into an :class:`EvaluationContext`."""
    records = load_records(filepath, delimiter=delimiter)
    return EvaluationContext(max_achievable_score=max_achievable_score, records=tuple(records))
