"""Shared test fixtures: fixed config and roster files."""

from __future__ import annotations

from pathlib import Path

import pytest

from podium.config import PodiumConfig

ROSTERS_DIR = Path(__file__).resolve().parent.parent / "rosters"


@pytest.fixture(scope="session")
def podium_config():
    return PodiumConfig(max_achievable_score=100, csv_delimiter=",", report_json=False)


@pytest.fixture()
def student_scores() -> Path:
    """The bundled example roster."""
    return ROSTERS_DIR / "student_scores.csv"


@pytest.fixture()
def write_roster(tmp_path: Path):
    """Factory fixture: write roster text to a temporary file and return its path."""

    def _write(content: str, name: str = "roster.csv") -> Path:
        p = tmp_path / name
        p.write_text(content, encoding="utf-8")
        return p

    return _write
