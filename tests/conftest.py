"""Shared test fixtures: runner profiles, feedback records, training states."""

from __future__ import annotations

from datetime import date, datetime, timedelta, timezone
from typing import Callable

import pytest

from training_core.models.enums import ExperienceLevel, Mood
from training_core.models.feedback import FeedbackRecord
from training_core.models.profile import RunnerProfile
from training_core.models.training_state import TrainingState


@pytest.fixture
def monday() -> date:
    """Fixed Monday used as the start of every planned week."""
    return date(2026, 10, 19)


@pytest.fixture
def beginner_profile() -> RunnerProfile:
    """Beginner on 5 mi/week, 3 training days, no gym → initial fitness 1."""
    return RunnerProfile(
        experience_level=ExperienceLevel.BEGINNER,
        current_weekly_mileage=5.0,
        training_days_per_week=3,
        gym_access=False,
    )


@pytest.fixture
def intermediate_profile() -> RunnerProfile:
    """Intermediate on 20 mi/week, 5 training days, gym access → fitness 5."""
    return RunnerProfile(
        experience_level=ExperienceLevel.INTERMEDIATE,
        current_weekly_mileage=20.0,
        training_days_per_week=5,
        gym_access=True,
        name="Sarah",
    )


@pytest.fixture
def advanced_profile() -> RunnerProfile:
    """Advanced on 35 mi/week, 6 training days, gym access → fitness 10."""
    return RunnerProfile(
        experience_level=ExperienceLevel.ADVANCED,
        current_weekly_mileage=35.0,
        training_days_per_week=6,
        gym_access=True,
    )


@pytest.fixture
def intermediate_state(intermediate_profile: RunnerProfile) -> TrainingState:
    return TrainingState.initial(intermediate_profile)


@pytest.fixture
def feedback_factory() -> Callable[..., FeedbackRecord]:
    """Factory for FeedbackRecords with neutral defaults and increasing timestamps.

    Usage:
        record = feedback_factory(rating=5, effort=3, energy=9)
    """
    counter = {"n": 0}
    origin = datetime(2026, 10, 1, 7, 0, tzinfo=timezone.utc)

    def factory(
        rating: int = 3,
        effort: int = 5,
        energy: int = 6,
        mood: str = "good",
        injuries: tuple[str, ...] = (),
        workout_id: str | None = None,
    ) -> FeedbackRecord:
        counter["n"] += 1
        return FeedbackRecord(
            rating=rating,
            effort_level=effort,
            energy_level=energy,
            mood=Mood.parse(mood),
            injuries=injuries,
            timestamp=origin + timedelta(days=counter["n"]),
            workout_id=workout_id or f"w{counter['n']}",
        )

    return factory


@pytest.fixture
def great_session(feedback_factory: Callable[..., FeedbackRecord]) -> FeedbackRecord:
    return feedback_factory(rating=5, effort=3, energy=9, mood="great")


@pytest.fixture
def overreached_session(feedback_factory: Callable[..., FeedbackRecord]) -> FeedbackRecord:
    """Injured, overreached and exhausted: 3 + 1.5 + 0.5 + 0.5 = 5.5 risk alone."""
    return feedback_factory(
        rating=1, effort=9, energy=3, mood="exhausted", injuries=("sore knee",),
    )
