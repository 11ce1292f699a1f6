"""Data models for the training core."""

from training_core.models.enums import (
    ExperienceLevel,
    GoalType,
    Intensity,
    Mood,
    TrainingPhase,
    WorkoutType,
)
from training_core.models.feedback import FeedbackRecord
from training_core.models.insights import TrainingInsights
from training_core.models.ledger import FeedbackLedger
from training_core.models.profile import RunnerProfile
from training_core.models.training_state import TrainingState
from training_core.models.weekly_plan import WeeklyPlan
from training_core.models.workout import WorkoutPlan

__all__ = [
    "ExperienceLevel",
    "FeedbackLedger",
    "FeedbackRecord",
    "GoalType",
    "Intensity",
    "Mood",
    "RunnerProfile",
    "TrainingInsights",
    "TrainingPhase",
    "TrainingState",
    "WeeklyPlan",
    "WorkoutPlan",
    "WorkoutType",
]
