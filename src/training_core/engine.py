"""TrainingEngine: the orchestrator that turns feedback into weekly plans."""

from __future__ import annotations

import dataclasses
import logging
import random
from datetime import date
from typing import Any, Mapping

from training_core.insights import build_insights
from training_core.math.adaptation import apply_feedback
from training_core.math.periodization import (
    adaptation_multiplier,
    injury_damping,
    phase_for_week,
    progression_factor,
    target_weekly_mileage,
    validate_week,
)
from training_core.models.enums import DEFAULT_STRENGTH_PROBABILITY
from training_core.models.feedback import FeedbackRecord
from training_core.models.insights import TrainingInsights
from training_core.models.profile import RunnerProfile
from training_core.models.training_state import TrainingState
from training_core.models.weekly_plan import WeeklyPlan
from training_core.models.workout import WorkoutPlan
from training_core.serialization.snapshot import state_from_dict, state_to_dict
from training_core.workout_builder.builder import SessionComposer

logger = logging.getLogger(__name__)


def _volume_notes(state: TrainingState) -> list[str]:
    """Describe the feedback-driven volume modifiers in effect for *state*."""
    notes: list[str] = []
    adapt_mul = adaptation_multiplier(state.adaptation_score)
    if adapt_mul != 1.0:
        notes.append(
            f"Adaptation score {state.adaptation_score:+.2f}: volume x{adapt_mul:.2f}."
        )
    damping = injury_damping(state.injury_risk)
    if damping != 1.0:
        notes.append(
            f"Injury risk {state.injury_risk:.1f}: volume damped x{damping:.1f}."
        )
    return notes


def compose_weekly_plan(
    profile: RunnerProfile,
    state: TrainingState,
    week: int,
    rng: random.Random,
    composer: SessionComposer | None = None,
    start_date: date | None = None,
) -> tuple[WeeklyPlan, TrainingState]:
    """Pure transition: plan *week* from *state* without touching its ledger.

    Args:
        profile: Runner intake profile.
        state: Current training state.
        week: 1-indexed program week (valid range 1-20; later weeks reuse
            the final taper factor).
        rng: Random source for the strength substitution.
        composer: SessionComposer to use; default probability if None.
        start_date: Date of the Monday entry; today if None.

    Returns:
        The WeeklyPlan and a state with ``current_week`` and
        ``weekly_mileage`` updated. Signals and ledger are unchanged.

    Raises:
        InvalidWeekError: If week < 1.
    """
    validate_week(week)
    composer = composer or SessionComposer()
    start = start_date or date.today()

    target = target_weekly_mileage(state, week)
    composed = composer.compose(profile, state, week, target, rng, start)

    plan = WeeklyPlan(
        workouts=composed.workouts,
        week_number=week,
        phase=phase_for_week(week),
        progression_factor=progression_factor(week, state.total_weeks),
        target_mileage=target,
        adjustments=tuple(_volume_notes(state)) + composed.notes,
    )
    new_state = dataclasses.replace(state, current_week=week, weekly_mileage=target)
    return plan, new_state


class TrainingEngine:
    """Owns one runner's training state and exposes the planning operations.

    Not safe for concurrent mutation: the adaptation score is a fold over
    feedback order, so callers must serialize access per runner.

    Usage:
        engine = TrainingEngine(profile, seed=42)
        engine.record_feedback(FeedbackRecord(rating=4, effort_level=5, energy_level=7))
        workouts = engine.generate_weekly_plan(3)
        insights = engine.get_insights()
    """

    def __init__(
        self,
        profile: RunnerProfile,
        current_week: int = 1,
        seed: int | str | None = None,
        strength_probability: float = DEFAULT_STRENGTH_PROBABILITY,
        state: TrainingState | None = None,
    ) -> None:
        self.profile = profile
        self.seed = seed
        self.composer = SessionComposer(strength_probability=strength_probability)
        self._rng = random.Random()
        self._state = state or TrainingState.initial(profile, current_week=current_week)
        logger.debug(
            "Engine initialized: base=%.1f peak=%.1f fitness=%.1f week=%d",
            self._state.base_weekly_mileage,
            self._state.peak_weekly_mileage,
            self._state.fitness_level,
            self._state.current_week,
        )

    @property
    def state(self) -> TrainingState:
        return self._state

    def record_feedback(self, record: FeedbackRecord) -> None:
        """Append *record* to the ledger and refresh all three signals."""
        self._state = apply_feedback(self._state, record)
        logger.debug(
            "Recorded feedback (rating=%d effort=%d energy=%d): "
            "adaptation=%.2f injury_risk=%.1f fitness=%.2f",
            record.rating,
            record.effort_level,
            record.energy_level,
            self._state.adaptation_score,
            self._state.injury_risk,
            self._state.fitness_level,
        )

    def plan_week(self, week: int, start_date: date | None = None) -> WeeklyPlan:
        """Plan *week* and keep the notes on how it was shaped.

        Raises:
            InvalidWeekError: If week < 1.
        """
        plan, self._state = compose_weekly_plan(
            self.profile,
            self._state,
            week,
            rng=self._rng_for_week(week),
            composer=self.composer,
            start_date=start_date,
        )
        logger.info(
            "Planned week %d (%s): target %.1f mi, %d training days",
            plan.week_number,
            plan.phase.value,
            plan.target_mileage,
            plan.training_day_count,
        )
        return plan

    def generate_weekly_plan(
        self, week: int, start_date: date | None = None
    ) -> list[WorkoutPlan]:
        """Seven WorkoutPlans for *week*, Monday first.

        Raises:
            InvalidWeekError: If week < 1.
        """
        return list(self.plan_week(week, start_date=start_date).workouts)

    def get_insights(self) -> TrainingInsights:
        return build_insights(self._state)

    # ------------------------------------------------------------------
    # Persistence
    # ------------------------------------------------------------------

    def snapshot(self) -> dict[str, Any]:
        """Serializable copy of the current TrainingState."""
        return state_to_dict(self._state)

    @classmethod
    def from_snapshot(
        cls,
        profile: RunnerProfile,
        data: Mapping[str, Any],
        seed: int | str | None = None,
        strength_probability: float = DEFAULT_STRENGTH_PROBABILITY,
    ) -> TrainingEngine:
        """Resume an engine from ``snapshot()`` output.

        Raises:
            SnapshotError: If *data* is not a valid snapshot.
        """
        state = state_from_dict(data)
        return cls(
            profile,
            seed=seed,
            strength_probability=strength_probability,
            state=state,
        )

    def _rng_for_week(self, week: int) -> random.Random:
        # A seeded engine derives one stream per week so regenerating a week
        # reproduces it exactly.
        if self.seed is None:
            return self._rng
        return random.Random(f"{self.seed}:{week}")
