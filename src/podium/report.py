"""Standings reports: console and JSON output."""

from __future__ import annotations

import json
from collections import Counter
from pathlib import Path

from podium.models import Award, AwardBasis, AwardOutcome


class StandingsReport:
    """Collects award outcomes and renders them in rank order."""

    def __init__(self, max_achievable_score: int) -> None:
        self._max_score = max_achievable_score
        self._outcomes: list[AwardOutcome] = []

    def add(self, outcome: AwardOutcome) -> None:
        self._outcomes.append(outcome)

    def extend(self, outcomes: list[AwardOutcome]) -> None:
        self._outcomes.extend(outcomes)

    @property
    def outcomes(self) -> list[AwardOutcome]:
        return sorted(self._outcomes, key=lambda o: o.rank)

    @property
    def award_counts(self) -> dict[str, int]:
        counts = Counter(o.award for o in self._outcomes)
        return {award.value: counts.get(award, 0) for award in Award}

    def to_console(self) -> str:
        lines: list[str] = []
        lines.append(f"\n{'='*60}")
        lines.append(f"STANDINGS (max score {self._max_score})")
        lines.append(f"{'='*60}")

        for o in self.outcomes:
            label = o.award.value.upper() if o.awarded else "-"
            suffix = " (fallback)" if o.basis is AwardBasis.FALLBACK else ""
            lines.append(f"  {o.rank:>3}. {o.name:<30} {o.score:>6}  {label}{suffix}")

        awarded = sum(1 for o in self._outcomes if o.awarded)
        lines.append(f"{'='*60}")
        lines.append(f"  {awarded}/{len(self._outcomes)} participants awarded")
        lines.append(f"{'='*60}\n")
        return "\n".join(lines)

    def to_dict(self) -> dict:
        return {
            "max_achievable_score": self._max_score,
            "award_counts": self.award_counts,
            "standings": [
                {
                    "rank": o.rank,
                    "name": o.name,
                    "score": o.score,
                    "award": o.award.value,
                    "basis": o.basis.value,
                }
                for o in self.outcomes
            ],
        }

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), indent=2)

    def save(self, path: str | Path) -> None:
        Path(path).write_text(self.to_json())
