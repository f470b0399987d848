"""AwardEvaluator: resolves awards by name against a precomputed assignment."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from podium.context import EvaluationContext
from podium.errors import ParticipantNotFound
from podium.models import Award, AwardOutcome
from podium.ranking import assign_awards
from podium.tiers import DEFAULT_TIERS, Tier

logger = logging.getLogger(__name__)


class AwardEvaluator:
    """Answers award queries for a single :class:`EvaluationContext`.

    The full assignment is computed once, at construction; queries are
    dictionary lookups. Nothing is mutated afterwards, so one evaluator
    can be shared between threads.

    Usage::

        ctx = EvaluationContext.from_pairs(100, [("John Doe", 97), ("Jane Doe", 92)])
        evaluator = AwardEvaluator(ctx)
        evaluator.resolve_award("John Doe")  # Award.GOLD
    """

    def __init__(
        self,
        context: EvaluationContext,
        tiers: Sequence[Tier] = DEFAULT_TIERS,
    ) -> None:
        self._context = context
        self._tiers = tuple(tiers)
        self._outcomes = tuple(assign_awards(context, self._tiers))
        self._by_name: dict[str, AwardOutcome] = {}
        for outcome in self._outcomes:
            # First record with a given name wins.
            self._by_name.setdefault(outcome.name, outcome)
        logger.debug(
            "Evaluated %d records (max score %d)",
            len(context), context.max_achievable_score,
        )

    @property
    def context(self) -> EvaluationContext:
        return self._context

    def outcome(self, name: str) -> AwardOutcome:
        """Return the full outcome (award, basis, rank) for *name*."""
        try:
            return self._by_name[name]
        except KeyError:
            raise ParticipantNotFound(name) from None

    def resolve_award(self, name: str) -> Award:
        """Return the award for *name*, ``Award.NONE`` when unawarded.

        Raises
        ------
        ParticipantNotFound
            If no record is named exactly *name*.
        """
        return self.outcome(name).award

    def standings(self) -> list[AwardOutcome]:
        """All outcomes ordered by rank."""
        return sorted(self._outcomes, key=lambda o: o.rank)

    def winners(self, award: Award) -> list[AwardOutcome]:
        """Outcomes holding *award*, in rank order."""
        return [o for o in self.standings() if o.award is award]


def resolve_award(context: EvaluationContext, name: str) -> Award:
    """One-shot award lookup for *name* in *context*."""
    return AwardEvaluator(context).resolve_award(name)
