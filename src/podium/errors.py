"""Exceptions raised by podium."""

from __future__ import annotations

from pathlib import Path


class PodiumError(Exception):
    """Base class for podium errors."""


class ParticipantNotFound(PodiumError, LookupError):
    """No record in the context matches the queried name."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Participant not found: {name!r}")
        self.name = name


class InvalidConfiguration(PodiumError, ValueError):
    """The evaluation context cannot be built with the given settings."""


class RecordFormatError(PodiumError, ValueError):
    """A roster row is not a valid ``name,score`` pair."""

    def __init__(self, source: str | Path, line: int, reason: str) -> None:
        super().__init__(f"{source}:{line}: {reason}")
        self.source = str(source)
        self.line = line
        self.reason = reason
