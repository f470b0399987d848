"""podium: tiered competition awards from raw scores."""

from podium.config import PodiumConfig
from podium.context import EvaluationContext
from podium.errors import (
    InvalidConfiguration,
    ParticipantNotFound,
    PodiumError,
    RecordFormatError,
)
from podium.evaluator import AwardEvaluator, resolve_award
from podium.loader import load_context, load_records, parse_records
from podium.models import Award, AwardBasis, AwardOutcome, ParticipantRecord
from podium.ranking import assign_awards, rank_order
from podium.report import StandingsReport
from podium.tiers import DEFAULT_TIERS, Tier, classify

__all__ = [
    "Award",
    "AwardBasis",
    "AwardEvaluator",
    "AwardOutcome",
    "DEFAULT_TIERS",
    "EvaluationContext",
    "InvalidConfiguration",
    "ParticipantNotFound",
    "ParticipantRecord",
    "PodiumConfig",
    "PodiumError",
    "RecordFormatError",
    "StandingsReport",
    "Tier",
    "assign_awards",
    "classify",
    "load_context",
    "load_records",
    "parse_records",
    "rank_order",
    "resolve_award",
]
