"""pytest plugin for podium: fixtures and markers."""

from __future__ import annotations

from collections.abc import Iterable

import pytest

from podium.config import PodiumConfig
from podium.context import EvaluationContext
from podium.evaluator import AwardEvaluator


def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line("markers", "award: mark a test as an award evaluation test")


@pytest.fixture(scope="session")
def podium_config() -> PodiumConfig:
    """Session-scoped podium configuration from environment."""
    return PodiumConfig()


@pytest.fixture()
def make_context(podium_config: PodiumConfig):
    """Factory fixture: build an EvaluationContext from ``(name, score)`` pairs.

    The maximum score defaults to the configured one.
    """

    def _make(
        pairs: Iterable[tuple[str, int]],
        max_achievable_score: int | None = None,
    ) -> EvaluationContext:
        if max_achievable_score is None:
            max_achievable_score = podium_config.max_achievable_score
        return EvaluationContext.from_pairs(max_achievable_score, pairs)

    return _make


@pytest.fixture()
def award_evaluator(make_context):
    """Factory fixture: build an AwardEvaluator straight from pairs."""

    def _make(
        pairs: Iterable[tuple[str, int]],
        max_achievable_score: int | None = None,
    ) -> AwardEvaluator:
        return AwardEvaluator(make_context(pairs, max_achievable_score))

    return _make
