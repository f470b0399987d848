"""Award tiers and their percentage thresholds."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from fractions import Fraction

from podium.models import Award


@dataclass(frozen=True)
class Tier:
    """One award level.

    ``threshold`` and ``fallback_floor`` are shares of the maximum
    achievable score. Comparisons are done on exact fractions so that a
    score sitting exactly on a boundary never rounds across it.
    """

    award: Award
    threshold: Fraction
    fallback_slots: int = 1
    fallback_floor: Fraction = Fraction(0)

    def exceeded_by(self, score: int, max_score: int) -> bool:
        """True when *score* is strictly above the threshold."""
        return Fraction(score, max_score) > self.threshold

    def meets_floor(self, score: int, max_score: int) -> bool:
        return Fraction(score, max_score) >= self.fallback_floor


DEFAULT_TIERS: tuple[Tier, ...] = (
    Tier(Award.GOLD, Fraction(95, 100)),
    Tier(Award.SILVER, Fraction(90, 100)),
    Tier(Award.BRONZE, Fraction(85, 100)),
    Tier(Award.MENTION, Fraction(80, 100), fallback_slots=5, fallback_floor=Fraction(1, 2)),
)


def classify(score: int, max_score: int, tiers: Sequence[Tier] = DEFAULT_TIERS) -> Award:
    """Return the best award *score* earns on thresholds alone."""
    for tier in tiers:
        if tier.exceeded_by(score, max_score):
            return tier.award
    return Award.NONE
