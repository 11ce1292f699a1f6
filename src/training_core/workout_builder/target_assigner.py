"""Target assigner: distance, duration and intensity for one session.

Every session is sized from the week's average training-day volume:

    avg_daily   = target_volume / training_days
    fitness_mul = 0.8 + fitness_level / 10 * 0.4      (0.84 .. 1.2)
    adapt_mul   = 1 + adaptation_score * 0.1          (0.8 .. 1.2)

Per-type formulas produce the raw distance (miles) and duration (minutes);
``adapt_mul`` then scales both, distance is rounded half-up to one decimal
and duration to whole minutes. Descriptions quote the pre-adaptation numbers.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from training_core.math.periodization import adaptation_multiplier
from training_core.models.enums import (
    EASY_PACE_MIN_PER_MILE,
    LONG_RUN_PACE_MIN_PER_MILE,
    RECOVERY_PACE_MIN_PER_MILE,
    SHORT_INTERVAL_LAST_WEEK,
    TEMPO_CORE_CAP_MILES,
    TEMPO_COOLDOWN_MIN,
    TEMPO_PACE_MIN_PER_MILE,
    TEMPO_WARMUP_COOLDOWN_MILES,
    TEMPO_WARMUP_MIN,
    Intensity,
    WorkoutType,
)
from training_core.workout_builder.description_builder import (
    intervals_description,
    long_run_description,
    rest_description,
    static_description,
    tempo_description,
)


@dataclass(frozen=True)
class SessionTargets:
    """Sized session before it is attached to a calendar day."""

    workout_type: WorkoutType
    distance: float
    duration: int
    intensity: Intensity
    description: str


def fitness_multiplier(fitness_level: float) -> float:
    return 0.8 + (fitness_level / 10) * 0.4


def interval_repetitions(week: int) -> int:
    return math.ceil(week / 3)


def interval_rep_distance(week: int) -> str:
    return "800m" if week <= SHORT_INTERVAL_LAST_WEEK else "1000m"


def rest_targets(injury_risk: float) -> SessionTargets:
    return SessionTargets(
        workout_type=WorkoutType.REST,
        distance=0.0,
        duration=0,
        intensity=Intensity.LOW,
        description=rest_description(injury_risk),
    )


def assign_targets(
    workout_type: WorkoutType,
    target_volume: float,
    training_days: int,
    week: int,
    fitness_level: float,
    adaptation_score: float,
    injury_risk: float = 0.0,
) -> SessionTargets:
    """Size a single session of *workout_type*.

    Args:
        workout_type: Session category for the day.
        target_volume: The week's target mileage.
        training_days: Number of non-rest days in the week (>= 1 for
            non-rest sessions).
        week: 1-indexed program week; drives interval progression.
        fitness_level: Current fitness signal [1, 10].
        adaptation_score: Current adaptation signal [-2, 2].
        injury_risk: Current injury risk; only affects rest-day wording.

    Returns:
        The sized SessionTargets.
    """
    if workout_type == WorkoutType.REST or training_days <= 0:
        return rest_targets(injury_risk)

    avg_daily = target_volume / training_days
    fitness_mul = fitness_multiplier(fitness_level)

    if workout_type == WorkoutType.EASY_RUN:
        distance = avg_daily * 0.8 * fitness_mul
        duration = distance * EASY_PACE_MIN_PER_MILE
        intensity = Intensity.LOW
        description = static_description(workout_type)

    elif workout_type == WorkoutType.LONG_RUN:
        distance = min(avg_daily * 2.2, target_volume * 0.4) * fitness_mul
        duration = distance * LONG_RUN_PACE_MIN_PER_MILE
        intensity = Intensity.MODERATE
        description = long_run_description(distance)

    elif workout_type == WorkoutType.TEMPO_RUN:
        tempo_miles = min(avg_daily * 1.2, TEMPO_CORE_CAP_MILES) * fitness_mul
        distance = tempo_miles + TEMPO_WARMUP_COOLDOWN_MILES
        duration = TEMPO_WARMUP_MIN + tempo_miles * TEMPO_PACE_MIN_PER_MILE + TEMPO_COOLDOWN_MIN
        intensity = Intensity.MODERATE
        description = tempo_description(tempo_miles)

    elif workout_type == WorkoutType.INTERVALS:
        distance = avg_daily * 1.1 * fitness_mul
        duration = 45 + week * 2
        intensity = Intensity.HIGH
        description = intervals_description(
            interval_repetitions(week), interval_rep_distance(week)
        )

    elif workout_type == WorkoutType.STRENGTH:
        distance = 0.0
        duration = 45 + fitness_level * 2
        intensity = Intensity.MODERATE
        description = static_description(workout_type)

    elif workout_type == WorkoutType.RECOVERY:
        distance = avg_daily * 0.5 * fitness_mul
        duration = distance * RECOVERY_PACE_MIN_PER_MILE
        intensity = Intensity.LOW
        description = static_description(workout_type)

    else:
        return rest_targets(injury_risk)

    adapt_mul = adaptation_multiplier(adaptation_score)
    distance *= adapt_mul
    duration *= adapt_mul

    return SessionTargets(
        workout_type=workout_type,
        distance=max(0.0, math.floor(distance * 10 + 0.5) / 10),
        duration=max(0, math.floor(duration + 0.5)),
        intensity=intensity,
        description=description,
    )
