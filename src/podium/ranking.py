"""Whole-roster award assignment.

Awards are decided tier by tier, best first. A tier whose threshold is
exceeded by anyone in the roster is handed out on thresholds alone; a tier
nobody reaches falls back to rank order, skipping participants who already
hold a better award.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

import numpy as np

from podium.context import EvaluationContext
from podium.models import Award, AwardBasis, AwardOutcome
from podium.tiers import DEFAULT_TIERS, Tier

logger = logging.getLogger(__name__)


def rank_order(scores: Sequence[int]) -> list[int]:
    """Record indices ordered by score, highest first.

    Equal scores keep their record order.
    """
    # Object dtype keeps arbitrary-size ints exact.
    values = np.asarray(scores, dtype=object)
    return [int(i) for i in np.argsort(-values, kind="stable")]


def assign_awards(
    context: EvaluationContext,
    tiers: Sequence[Tier] = DEFAULT_TIERS,
) -> list[AwardOutcome]:
    """Compute the award for every record in *context*.

    Returns one :class:`AwardOutcome` per record, in record order.
    """
    records = context.records
    max_score = context.max_achievable_score
    order = rank_order([r.score for r in records])
    ranks = {idx: pos + 1 for pos, idx in enumerate(order)}

    assigned: dict[int, tuple[Award, AwardBasis]] = {}

    for tier in tiers:
        reached = [tier.exceeded_by(r.score, max_score) for r in records]

        if any(reached):
            granted = 0
            for idx in order:
                if idx not in assigned and reached[idx]:
                    assigned[idx] = (tier.award, AwardBasis.THRESHOLD)
                    granted += 1
            logger.debug("%s: %d awarded on threshold", tier.award.value, granted)
            continue

        logger.debug(
            "%s: nobody above %s of %d, falling back to rank",
            tier.award.value, tier.threshold, max_score,
        )
        granted = 0
        for idx in order:
            if granted >= tier.fallback_slots:
                break
            if idx in assigned:
                continue
            # Ranked descending, so nobody further down meets the floor either.
            if not tier.meets_floor(records[idx].score, max_score):
                break
            assigned[idx] = (tier.award, AwardBasis.FALLBACK)
            granted += 1
        logger.debug("%s: %d awarded on fallback", tier.award.value, granted)

    outcomes: list[AwardOutcome] = []
    for idx, record in enumerate(records):
        award, basis = assigned.get(idx, (Award.NONE, AwardBasis.UNAWARDED))
        outcomes.append(AwardOutcome(record=record, award=award, basis=basis, rank=ranks[idx]))
    return outcomes
