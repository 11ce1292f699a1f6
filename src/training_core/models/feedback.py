"""Post-workout feedback record submitted through the debrief screen."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Mapping

from training_core.models.enums import FATIGUE_MOODS, Mood

RATING_RANGE = (1, 5)
EFFORT_RANGE = (1, 10)
ENERGY_RANGE = (1, 10)


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def _clamp_int(value: Any, bounds: tuple[int, int]) -> int:
    low, high = bounds
    return max(low, min(high, int(round(float(value)))))


@dataclass(frozen=True)
class FeedbackRecord:
    """One runner-submitted reaction to a completed workout.

    Numeric fields are clamped into their scales on construction, so a
    slider glitch (rating 0, effort 12) degrades instead of failing.
    ``timestamp`` only orders records; wall-clock gaps are never decayed.
    """

    rating: int  # 1-5 overall satisfaction
    effort_level: int  # 1-10 RPE
    energy_level: int  # 1-10 post-workout energy
    mood: Mood = Mood.OKAY
    injuries: tuple[str, ...] = field(default_factory=tuple)
    timestamp: datetime = field(default_factory=_utc_now)

    workout_id: str | None = None
    feedback_text: str = ""
    completed_distance: float | None = None
    completed_duration: float | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "rating", _clamp_int(self.rating, RATING_RANGE))
        object.__setattr__(
            self, "effort_level", _clamp_int(self.effort_level, EFFORT_RANGE)
        )
        object.__setattr__(
            self, "energy_level", _clamp_int(self.energy_level, ENERGY_RANGE)
        )
        object.__setattr__(self, "mood", Mood.parse(self.mood))
        raw_injuries = self.injuries or ()
        if isinstance(raw_injuries, str):
            raw_injuries = (raw_injuries,)
        cleaned = tuple(str(i).strip() for i in raw_injuries if str(i).strip())
        object.__setattr__(self, "injuries", cleaned)

    @property
    def has_injury(self) -> bool:
        return len(self.injuries) > 0

    @property
    def is_fatigued_mood(self) -> bool:
        return self.mood in FATIGUE_MOODS

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> FeedbackRecord:
        """Decode a record from its JSON form (debrief keys, camelCase accepted)."""

        def pick(*keys: str, default: Any = None) -> Any:
            for key in keys:
                if key in data and data[key] is not None:
                    return data[key]
            return default

        injuries = pick("injuries", default=())
        if isinstance(injuries, str):
            injuries = (injuries,)

        raw_ts = pick("timestamp")
        if isinstance(raw_ts, datetime):
            timestamp = raw_ts
        elif raw_ts:
            timestamp = datetime.fromisoformat(str(raw_ts).replace("Z", "+00:00"))
        else:
            timestamp = _utc_now()

        return cls(
            rating=pick("rating", default=3),
            effort_level=pick("effort_level", "effortLevel", default=5),
            energy_level=pick("energy_level", "energyLevel", default=5),
            mood=pick("mood"),
            injuries=tuple(injuries),
            timestamp=timestamp,
            workout_id=pick("workout_id", "workoutId"),
            feedback_text=pick("feedback_text", "feedbackText", default=""),
            completed_distance=pick("completed_distance", "completedDistance"),
            completed_duration=pick("completed_duration", "completedDuration"),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "rating": self.rating,
            "effort_level": self.effort_level,
            "energy_level": self.energy_level,
            "mood": self.mood.value,
            "injuries": list(self.injuries),
            "timestamp": self.timestamp.isoformat(),
            "workout_id": self.workout_id,
            "feedback_text": self.feedback_text,
            "completed_distance": self.completed_distance,
            "completed_duration": self.completed_duration,
        }
