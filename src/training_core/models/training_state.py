"""Frozen training state: the only thing that changes between engine calls."""

from __future__ import annotations

from dataclasses import dataclass, field

from training_core.models.enums import (
    PEAK_MILEAGE_CAP,
    PEAK_MILEAGE_MULTIPLIER,
    TOTAL_PROGRAM_WEEKS,
)
from training_core.models.ledger import FeedbackLedger
from training_core.models.profile import RunnerProfile


@dataclass(frozen=True)
class TrainingState:
    """Immutable snapshot of a runner's progress through the program.

    Transitions never mutate a state in place; they return a new one via
    ``dataclasses.replace``. Base and peak mileage are fixed at creation.
    """

    base_weekly_mileage: float
    peak_weekly_mileage: float
    fitness_level: float
    current_week: int = 1
    total_weeks: int = TOTAL_PROGRAM_WEEKS
    weekly_mileage: float = 0.0  # most recent weekly target
    ledger: FeedbackLedger = field(default_factory=FeedbackLedger)
    adaptation_score: float = 0.0  # [-2, 2], smoothed
    injury_risk: float = 0.0  # [0, 10], acute

    @classmethod
    def initial(cls, profile: RunnerProfile, current_week: int = 1) -> TrainingState:
        """Derive the starting state for a freshly onboarded runner."""
        from training_core.math.adaptation import initial_fitness_level

        base = profile.current_weekly_mileage
        return cls(
            base_weekly_mileage=base,
            peak_weekly_mileage=peak_mileage_for(base),
            fitness_level=initial_fitness_level(profile),
            current_week=max(1, current_week),
            weekly_mileage=base,
        )


def peak_mileage_for(base_weekly_mileage: float) -> float:
    """Peak = 2.5x base, capped at 45 miles/week."""
    return min(base_weekly_mileage * PEAK_MILEAGE_MULTIPLIER, PEAK_MILEAGE_CAP)
