"""EvaluationContext: the immutable roster an evaluation runs against."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from podium.errors import InvalidConfiguration, ParticipantNotFound
from podium.models import ParticipantRecord


@dataclass(frozen=True)
class EvaluationContext:
    """Participant records plus the maximum achievable score.

    Records keep their insertion order, which is also the tie-break order
    for ranking. Duplicate names are allowed; lookups return the first
    match. Contexts are never mutated, ``with_record`` and
    ``with_records`` build new ones.
    """

    max_achievable_score: int
    records: tuple[ParticipantRecord, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        max_score = self.max_achievable_score
        if isinstance(max_score, bool) or not isinstance(max_score, int):
            raise InvalidConfiguration(
                f"max_achievable_score must be an integer, got {type(max_score).__name__}"
            )
        if max_score <= 0:
            raise InvalidConfiguration(
                f"max_achievable_score must be positive, got {max_score}"
            )
        if not isinstance(self.records, tuple):
            object.__setattr__(self, "records", tuple(self.records))

    @classmethod
    def from_pairs(
        cls, max_achievable_score: int, pairs: Iterable[tuple[str, int]]
    ) -> EvaluationContext:
        records = tuple(ParticipantRecord(name=name, score=score) for name, score in pairs)
        return cls(max_achievable_score=max_achievable_score, records=records)

    def with_record(self, record: ParticipantRecord) -> EvaluationContext:
        return self.with_records([record])

    def with_records(self, records: Iterable[ParticipantRecord]) -> EvaluationContext:
        return EvaluationContext(
            max_achievable_score=self.max_achievable_score,
            records=self.records + tuple(records),
        )

    def find(self, name: str) -> ParticipantRecord:
        """Return the first record named exactly *name* (case-sensitive)."""
        for record in self.records:
            if record.name == name:
                return record
        raise ParticipantNotFound(name)

    @property
    def names(self) -> list[str]:
        return [r.name for r in self.records]

    def __len__(self) -> int:
        return len(self.records)
