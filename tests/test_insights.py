"""Tests for the insight labels and recommendation priority."""

from __future__ import annotations

import dataclasses

import pytest

from training_core.insights import (
    FATIGUE_ADVICE,
    LOAD_INCREASE_ADVICE,
    PROGRESS_PRAISE,
    RECOVERY_FIRST_ADVICE,
    adaptation_status,
    build_insights,
    fitness_progress,
    injury_risk_level,
    recommendations,
)
from training_core.models.training_state import TrainingState


class TestLabels:
    @pytest.mark.parametrize(
        ("score", "expected"),
        [(0.51, "Progressing well"), (0.5, "Maintaining"), (-0.5, "Maintaining"), (-0.6, "Need recovery")],
    )
    def test_adaptation_status(self, score: float, expected: str) -> None:
        assert adaptation_status(score) == expected

    @pytest.mark.parametrize(
        ("risk", "expected"), [(0.0, "Low"), (3.9, "Low"), (4.0, "Moderate"), (6.0, "High")],
    )
    def test_injury_risk_level(self, risk: float, expected: str) -> None:
        assert injury_risk_level(risk) == expected

    @pytest.mark.parametrize(
        ("fitness", "expected"),
        [(1.0, "Building"), (3.0, "Building"), (5.0, "Steady"), (6.0, "Good"), (8.0, "Excellent")],
    )
    def test_fitness_progress(self, fitness: float, expected: str) -> None:
        assert fitness_progress(fitness) == expected


class TestRecommendations:
    def test_high_risk_outranks_adaptation(self, intermediate_state: TrainingState) -> None:
        state = dataclasses.replace(intermediate_state, injury_risk=7.0, adaptation_score=1.8)
        assert recommendations(state) == RECOVERY_FIRST_ADVICE

    def test_strong_adaptation(self, intermediate_state: TrainingState) -> None:
        state = dataclasses.replace(intermediate_state, adaptation_score=1.2)
        assert recommendations(state) == (LOAD_INCREASE_ADVICE,)

    def test_fatigue(self, intermediate_state: TrainingState) -> None:
        state = dataclasses.replace(intermediate_state, adaptation_score=-1.2)
        assert recommendations(state) == (FATIGUE_ADVICE,)

    def test_praise_combines_with_load_advice(self, intermediate_state: TrainingState) -> None:
        state = dataclasses.replace(intermediate_state, adaptation_score=1.5, fitness_level=7.5)
        assert recommendations(state) == (LOAD_INCREASE_ADVICE, PROGRESS_PRAISE)

    def test_no_praise_with_elevated_risk(self, intermediate_state: TrainingState) -> None:
        state = dataclasses.replace(intermediate_state, fitness_level=9.0, injury_risk=3.0)
        assert recommendations(state) == ()

    def test_build_insights_to_dict(self, intermediate_state: TrainingState) -> None:
        data = build_insights(intermediate_state).to_dict()
        assert data == {
            "adaptation_status": "Maintaining",
            "injury_risk_level": "Low",
            "fitness_progress": "Steady",
            "recommendations": [],
        }
