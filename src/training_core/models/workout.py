"""Workout plan: one prescribed day, the core's per-day output."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Any

from training_core.models.enums import Intensity, WorkoutType


@dataclass(frozen=True)
class WorkoutPlan:
    """A single day's prescription.

    Recomputed fresh on every plan call; ``completed`` belongs to the caller
    and is always False on output.
    """

    week_number: int
    date: date
    day_name: str
    workout_type: WorkoutType
    distance: float  # miles
    duration: int  # minutes
    intensity: Intensity
    description: str
    completed: bool = False
    workout_id: str = ""

    @property
    def is_rest(self) -> bool:
        return self.workout_type == WorkoutType.REST

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.workout_id,
            "week_number": self.week_number,
            "date": self.date.isoformat(),
            "day": self.day_name,
            "workout_type": self.workout_type.value,
            "distance": self.distance,
            "duration": self.duration,
            "intensity": self.intensity.value,
            "description": self.description,
            "completed": self.completed,
        }
