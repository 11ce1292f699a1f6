"""Description builder: human-readable text for each prescribed day."""

from __future__ import annotations

from training_core.models.enums import INJURY_RISK_MODERATE, WorkoutType

_STATIC_DESCRIPTIONS: dict[WorkoutType, str] = {
    WorkoutType.EASY_RUN: "Easy conversational pace run to build aerobic base",
    WorkoutType.STRENGTH: (
        "Runner-specific strength: core, glutes, single-leg stability, and power"
    ),
    WorkoutType.RECOVERY: "Recovery run or active recovery with dynamic stretching",
}


def rest_description(injury_risk: float) -> str:
    if injury_risk >= INJURY_RISK_MODERATE:
        return "Rest day - focus on recovery and injury prevention"
    return "Rest day - light stretching or walking optional"


def long_run_description(distance: float) -> str:
    return f"Long steady run to build endurance - {distance:.1f} miles"


def tempo_description(tempo_miles: float) -> str:
    return f"{tempo_miles:.1f}mi tempo at half-marathon pace (with warm-up/cool-down)"


def intervals_description(repetitions: int, rep_distance: str) -> str:
    return f"{repetitions}x{rep_distance} intervals at 5K pace with recovery"


def static_description(workout_type: WorkoutType) -> str:
    """Fixed description for session types whose text has no numbers in it."""
    return _STATIC_DESCRIPTIONS.get(workout_type, "Rest day - focus on recovery")
