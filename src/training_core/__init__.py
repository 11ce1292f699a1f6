"""Adaptive half-marathon training core.

Converts a runner's intake profile and a rolling window of post-workout
feedback into week-by-week prescriptions for a 20-week program.
"""

from training_core.engine import TrainingEngine, compose_weekly_plan
from training_core.exceptions import InvalidWeekError, SnapshotError, TrainingCoreError
from training_core.math.adaptation import apply_feedback
from training_core.models import (
    FeedbackRecord,
    RunnerProfile,
    TrainingInsights,
    TrainingState,
    WeeklyPlan,
    WorkoutPlan,
)

__all__ = [
    "FeedbackRecord",
    "InvalidWeekError",
    "RunnerProfile",
    "SnapshotError",
    "TrainingCoreError",
    "TrainingEngine",
    "TrainingInsights",
    "TrainingState",
    "WeeklyPlan",
    "WorkoutPlan",
    "apply_feedback",
    "compose_weekly_plan",
]
