"""Runner profile: the structured output of the intake conversation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from training_core.models.enums import (
    DEFAULT_TRAINING_DAYS,
    DEFAULT_WEEKLY_MILEAGE,
    MAX_TRAINING_DAYS,
    ExperienceLevel,
    GoalType,
)


@dataclass(frozen=True)
class RunnerProfile:
    """Immutable intake profile for one runner session.

    ``experience_level`` is None when the intake never captured it; the
    estimator then treats the runner as intermediate.
    """

    experience_level: ExperienceLevel | None = None
    current_weekly_mileage: float = DEFAULT_WEEKLY_MILEAGE
    training_days_per_week: int = DEFAULT_TRAINING_DAYS
    gym_access: bool = False
    goal_type: GoalType = GoalType.FINISH

    # Optional intake details, carried for callers but unused by the planner
    name: str | None = None
    target_time: str | None = None
    past_injuries: str | None = None

    def __post_init__(self) -> None:
        mileage = max(0.0, float(self.current_weekly_mileage))
        days = max(0, min(MAX_TRAINING_DAYS, int(self.training_days_per_week)))
        object.__setattr__(self, "current_weekly_mileage", mileage)
        object.__setattr__(self, "training_days_per_week", days)

    @classmethod
    def from_intake(cls, data: Mapping[str, Any]) -> RunnerProfile:
        """Build a profile from the intake flow's snake_case output.

        Missing keys fall back to the documented defaults. A zero or missing
        mileage / training-day count is treated as "not answered".
        """
        experience = _parse_enum(ExperienceLevel, data.get("running_experience"))
        goal = _parse_enum(GoalType, data.get("goal_type")) or GoalType.FINISH

        mileage = data.get("current_weekly_mileage") or DEFAULT_WEEKLY_MILEAGE
        days = data.get("training_days_per_week") or DEFAULT_TRAINING_DAYS

        return cls(
            experience_level=experience,
            current_weekly_mileage=float(mileage),
            training_days_per_week=int(days),
            gym_access=bool(data.get("gym_access", False)),
            goal_type=goal,
            name=data.get("name"),
            target_time=data.get("target_time"),
            past_injuries=data.get("past_injuries"),
        )

    def to_intake(self) -> dict[str, Any]:
        """Inverse of ``from_intake``."""
        return {
            "name": self.name,
            "running_experience": (
                self.experience_level.value if self.experience_level else None
            ),
            "current_weekly_mileage": self.current_weekly_mileage,
            "training_days_per_week": self.training_days_per_week,
            "gym_access": self.gym_access,
            "goal_type": self.goal_type.value,
            "target_time": self.target_time,
            "past_injuries": self.past_injuries,
        }


def _parse_enum(enum_cls: Any, value: Any) -> Any:
    if value is None:
        return None
    try:
        return enum_cls(str(value).strip().lower())
    except ValueError:
        return None
