"""Session templates: weekly workout-type patterns by training-day count.

Patterns are fixed templates, not generated. Each lists the workout types of
the runner's leading training days, Monday first; remaining days are rest.
Feedback-driven overrides operate on a copy of the template and report what
they changed so the planner can record it.
"""

from __future__ import annotations

import random

from training_core.models.enums import (
    DEFAULT_TRAINING_DAYS,
    HIGH_INTENSITY_TYPES,
    INJURY_RISK_HIGH,
    INJURY_RISK_MODERATE,
    MAX_TRAINING_DAYS,
    STRENGTH_MIN_FITNESS,
    STRENGTH_MIN_WEEK,
    WorkoutType,
)

EASY = WorkoutType.EASY_RUN
LONG = WorkoutType.LONG_RUN
TEMPO = WorkoutType.TEMPO_RUN
INTERVALS = WorkoutType.INTERVALS
RECOVERY = WorkoutType.RECOVERY

_PATTERNS: dict[int, tuple[WorkoutType, ...]] = {
    3: (EASY, TEMPO, LONG),
    4: (EASY, INTERVALS, EASY, LONG),
    5: (EASY, INTERVALS, EASY, TEMPO, LONG),
    6: (EASY, INTERVALS, RECOVERY, TEMPO, EASY, LONG),
    7: (EASY, INTERVALS, RECOVERY, TEMPO, EASY, LONG, RECOVERY),
}


def get_pattern(training_days: int) -> list[WorkoutType]:
    """Workout types for the leading *training_days* days of the week.

    Counts below 3 have no template of their own and use the leading days
    of the 4-day template; counts above 7 use the 7-day template.
    """
    days = max(0, min(MAX_TRAINING_DAYS, training_days))
    template = _PATTERNS.get(days, _PATTERNS[DEFAULT_TRAINING_DAYS])
    return list(template[:days])


def apply_injury_override(
    pattern: list[WorkoutType], injury_risk: float
) -> tuple[list[WorkoutType], list[str]]:
    """Suppress high-intensity slots according to injury risk.

    risk >= 6: every intervals / tempo slot becomes recovery.
    risk >= 4: only the first intervals slot becomes an easy run.

    Returns:
        The adjusted pattern and notes describing the substitutions.
    """
    notes: list[str] = []
    adjusted = list(pattern)

    if injury_risk >= INJURY_RISK_HIGH:
        replaced = 0
        for i, workout_type in enumerate(adjusted):
            if workout_type in HIGH_INTENSITY_TYPES:
                adjusted[i] = RECOVERY
                replaced += 1
        if replaced:
            notes.append(
                f"Injury risk {injury_risk:.1f} is high: {replaced} high-intensity "
                f"session(s) replaced with recovery runs."
            )
    elif injury_risk >= INJURY_RISK_MODERATE:
        if INTERVALS in adjusted:
            adjusted[adjusted.index(INTERVALS)] = EASY
            notes.append(
                f"Injury risk {injury_risk:.1f} is moderate: intervals downgraded "
                f"to an easy run."
            )

    return adjusted, notes


def strength_eligible(gym_access: bool, fitness_level: float, week: int) -> bool:
    """Strength replaces an easy run only for fit-enough runners with a gym, from week 3."""
    return (
        gym_access
        and fitness_level >= STRENGTH_MIN_FITNESS
        and week >= STRENGTH_MIN_WEEK
    )


def apply_strength_substitution(
    pattern: list[WorkoutType],
    rng: random.Random,
    probability: float,
) -> tuple[list[WorkoutType], list[str]]:
    """Swap the first easy run for a strength session with *probability*.

    The coin is only flipped when the pattern contains an easy run, so a
    pattern without one consumes no randomness.
    """
    adjusted = list(pattern)
    if EASY not in adjusted:
        return adjusted, []
    if rng.random() >= probability:
        return adjusted, []
    index = adjusted.index(EASY)
    adjusted[index] = WorkoutType.STRENGTH
    return adjusted, [f"Easy run on day {index + 1} swapped for strength training."]
