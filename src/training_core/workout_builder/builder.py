"""SessionComposer: turns a weekly volume target into seven dated days.

Algorithm:
1. Look up the workout-type template for the runner's training-day count
2. Apply the injury-risk override (recovery / easy downgrades)
3. Optionally swap an easy run for strength (injected random source)
4. Size each training day via assign_targets(); remaining days are rest
5. Date each day from the week's start date, Monday first
"""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from datetime import date, timedelta

from training_core.models.enums import (
    DAY_NAMES,
    DEFAULT_STRENGTH_PROBABILITY,
    WorkoutType,
)
from training_core.models.profile import RunnerProfile
from training_core.models.training_state import TrainingState
from training_core.models.workout import WorkoutPlan
from training_core.workout_builder.session_templates import (
    apply_injury_override,
    apply_strength_substitution,
    get_pattern,
    strength_eligible,
)
from training_core.workout_builder.target_assigner import assign_targets


@dataclass(frozen=True)
class ComposedWeek:
    """Seven WorkoutPlans plus notes on which overrides fired."""

    workouts: tuple[WorkoutPlan, ...]
    notes: tuple[str, ...] = field(default_factory=tuple)


class SessionComposer:
    """Composes the days of a training week.

    Usage::

        composer = SessionComposer(strength_probability=0.5)
        week = composer.compose(profile, state, week=5, target_volume=24.0,
                                rng=random.Random(7), start_date=date.today())
    """

    def __init__(self, strength_probability: float = DEFAULT_STRENGTH_PROBABILITY) -> None:
        self.strength_probability = max(0.0, min(1.0, strength_probability))

    def workout_types(
        self,
        profile: RunnerProfile,
        state: TrainingState,
        week: int,
        rng: random.Random,
    ) -> tuple[list[WorkoutType], list[str]]:
        """Workout type for each training day, after all overrides."""
        pattern = get_pattern(profile.training_days_per_week)
        pattern, notes = apply_injury_override(pattern, state.injury_risk)

        if strength_eligible(profile.gym_access, state.fitness_level, week):
            pattern, strength_notes = apply_strength_substitution(
                pattern, rng, self.strength_probability,
            )
            notes.extend(strength_notes)

        return pattern, notes

    def compose(
        self,
        profile: RunnerProfile,
        state: TrainingState,
        week: int,
        target_volume: float,
        rng: random.Random,
        start_date: date,
    ) -> ComposedWeek:
        """Build the seven WorkoutPlans for *week*.

        Args:
            profile: Runner intake profile (training days, gym access).
            state: Current training state; only its signals are read.
            week: 1-indexed program week.
            target_volume: Weekly mileage target from the periodization planner.
            rng: Random source for the strength substitution.
            start_date: Calendar date of the first (Monday) entry.

        Returns:
            A ComposedWeek with exactly seven entries.
        """
        training_days = profile.training_days_per_week
        pattern, notes = self.workout_types(profile, state, week, rng)

        workouts: list[WorkoutPlan] = []
        for index, day_name in enumerate(DAY_NAMES):
            if index < len(pattern):
                workout_type = pattern[index]
            else:
                workout_type = WorkoutType.REST

            targets = assign_targets(
                workout_type,
                target_volume=target_volume,
                training_days=training_days,
                week=week,
                fitness_level=state.fitness_level,
                adaptation_score=state.adaptation_score,
                injury_risk=state.injury_risk,
            )
            workouts.append(
                WorkoutPlan(
                    week_number=week,
                    date=start_date + timedelta(days=index),
                    day_name=day_name,
                    workout_type=targets.workout_type,
                    distance=targets.distance,
                    duration=targets.duration,
                    intensity=targets.intensity,
                    description=targets.description,
                    workout_id=f"week{week}-day{index}",
                )
            )

        return ComposedWeek(workouts=tuple(workouts), notes=tuple(notes))
