"""Configuration for podium, sourced from .env file and environment variables."""

from __future__ import annotations

import os
from dataclasses import dataclass, field

from dotenv import load_dotenv

from podium.errors import InvalidConfiguration

load_dotenv()


def _env_int(name: str, default: int) -> int:
    value = os.environ.get(name, "").strip()
    if not value:
        return default
    try:
        return int(value)
    except ValueError:
        raise InvalidConfiguration(f"{name} must be an integer, got {value!r}") from None


def _env_bool(name: str, default: bool = False) -> bool:
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


@dataclass
class PodiumConfig:
    """Central configuration for podium."""

    max_achievable_score: int = field(default_factory=lambda: _env_int("PODIUM_MAX_SCORE", 100))
    csv_delimiter: str = field(default_factory=lambda: os.environ.get("PODIUM_CSV_DELIMITER", ","))
    report_json: bool = field(default_factory=lambda: _env_bool("PODIUM_REPORT_JSON"))
