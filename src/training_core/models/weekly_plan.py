"""Weekly plan: seven WorkoutPlans plus how the week was shaped."""

from __future__ import annotations

from dataclasses import dataclass, field

from training_core.models.enums import TrainingPhase, WorkoutType
from training_core.models.workout import WorkoutPlan


@dataclass(frozen=True)
class WeeklyPlan:
    """Output of TrainingEngine.plan_week(): Monday-first days + planning notes.

    ``adjustments`` lists every feedback-driven modification that fired
    while the week was planned, in the order it was applied.
    """

    workouts: tuple[WorkoutPlan, ...] = field(default_factory=tuple)
    week_number: int = 1
    phase: TrainingPhase = TrainingPhase.BASE
    progression_factor: float = 0.0
    target_mileage: float = 0.0
    adjustments: tuple[str, ...] = field(default_factory=tuple)

    def __len__(self) -> int:
        return len(self.workouts)

    def __iter__(self):
        return iter(self.workouts)

    @property
    def total_distance(self) -> float:
        return round(sum(w.distance for w in self.workouts), 1)

    @property
    def total_duration(self) -> int:
        return sum(w.duration for w in self.workouts)

    @property
    def training_day_count(self) -> int:
        return sum(1 for w in self.workouts if w.workout_type != WorkoutType.REST)

    def workouts_of_type(self, workout_type: WorkoutType) -> tuple[WorkoutPlan, ...]:
        return tuple(w for w in self.workouts if w.workout_type == workout_type)
