"""Core data models for podium award evaluation."""

from __future__ import annotations

import enum
from dataclasses import dataclass


class Award(enum.Enum):
    """Award a participant can receive, best first."""

    GOLD = "gold"
    SILVER = "silver"
    BRONZE = "bronze"
    MENTION = "mention"
    NONE = "none"

    @property
    def is_awarded(self) -> bool:
        return self is not Award.NONE

    @classmethod
    def ranked(cls) -> list[Award]:
        """The four real awards, best first."""
        return [cls.GOLD, cls.SILVER, cls.BRONZE, cls.MENTION]


class AwardBasis(enum.Enum):
    """Which rule granted an award."""

    THRESHOLD = "threshold"
    FALLBACK = "fallback"
    UNAWARDED = "unawarded"


@dataclass(frozen=True)
class ParticipantRecord:
    """A single participant and their raw score."""

    name: str
    score: int


@dataclass(frozen=True)
class AwardOutcome:
    """The award assigned to one record, with how and where it ranked."""

    record: ParticipantRecord
    award: Award = Award.NONE
    basis: AwardBasis = AwardBasis.UNAWARDED
    rank: int = 0

    @property
    def name(self) -> str:
        return self.record.name

    @property
    def score(self) -> int:
        return self.record.score

    @property
    def awarded(self) -> bool:
        return self.award.is_awarded
