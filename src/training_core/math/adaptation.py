"""Adaptation estimator: adaptation score, injury risk, fitness level.

All three signals are derived from the feedback ledger after every append:

- Adaptation score (last 5 records): rule-based raw delta, folded into the
  previous score by exponential smoothing (0.7 old / 0.3 new) so one bad or
  great session cannot swing the plan on its own.
- Injury risk (last 3 records): additive acute score, deliberately *not*
  smoothed so a single injury mention reacts immediately.
- Fitness level (last 5 records): slow drift of +0.1 / +0.05 / -0.05 per
  update from an experience-based starting estimate.

Windows are averaged with pandas; an empty ledger leaves every signal at its
prior value.
"""

from __future__ import annotations

import dataclasses
import logging
from dataclasses import dataclass
from typing import Sequence

from training_core.models.enums import (
    ADAPTATION_SCORE_MAX,
    ADAPTATION_SCORE_MIN,
    ADAPTATION_SMOOTHING_CURRENT,
    ADAPTATION_SMOOTHING_PREVIOUS,
    ADAPTATION_WINDOW,
    FITNESS_LEVEL_MAX,
    FITNESS_LEVEL_MIN,
    FITNESS_WINDOW,
    INITIAL_FITNESS_BY_EXPERIENCE,
    INJURY_RISK_MAX,
    INJURY_RISK_MIN,
    INJURY_WINDOW,
    ExperienceLevel,
)
from training_core.models.feedback import FeedbackRecord
from training_core.models.ledger import records_to_frame
from training_core.models.profile import RunnerProfile
from training_core.models.training_state import TrainingState

logger = logging.getLogger(__name__)

# Injury-risk increments
_INJURY_MENTION_RISK = 3.0
_OVERREACH_RISK_PER_RECORD = 1.5
_LOW_ENERGY_RISK_PER_RECORD = 0.5
_FATIGUE_MOOD_RISK_PER_RECORD = 0.5


@dataclass(frozen=True)
class WindowMeans:
    """Mean rating, effort and energy over a feedback window."""

    rating: float
    effort: float
    energy: float


def clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def initial_fitness_level(profile: RunnerProfile) -> float:
    """Starting fitness estimate from experience and current mileage.

    beginner 2, intermediate 5, advanced 8 (unknown experience counts as
    intermediate); +2 above 30 mi/week, +1 above 20, -1 below 10.
    """
    experience = profile.experience_level or ExperienceLevel.INTERMEDIATE
    score = INITIAL_FITNESS_BY_EXPERIENCE[experience]

    mileage = profile.current_weekly_mileage
    if mileage > 30:
        score += 2
    elif mileage > 20:
        score += 1
    elif mileage < 10:
        score -= 1

    return clamp(score, FITNESS_LEVEL_MIN, FITNESS_LEVEL_MAX)


def window_means(records: Sequence[FeedbackRecord]) -> WindowMeans:
    """Average the score columns of *records*.

    Raises:
        ValueError: If *records* is empty.
    """
    if not records:
        raise ValueError("Cannot average an empty feedback window")
    means = records_to_frame(list(records))[["rating", "effort_level", "energy_level"]].mean()
    return WindowMeans(
        rating=float(means["rating"]),
        effort=float(means["effort_level"]),
        energy=float(means["energy_level"]),
    )


def adaptation_delta(means: WindowMeans) -> float:
    """Raw (unsmoothed) adaptation adjustment for one window.

    Positive when ratings and energy are high, negative on overreaching
    (high effort, low rating) and, independently, on low energy.
    """
    delta = 0.0

    if means.rating >= 4 and means.energy >= 7:
        delta += 1.0
    elif means.rating >= 3.5 and means.energy >= 6:
        delta += 0.5

    if means.effort >= 8 and means.rating <= 2.5:
        delta -= 1.5
    elif means.effort >= 7 and means.rating <= 3:
        delta -= 1.0

    if means.energy <= 4:
        delta -= 1.0

    return delta


def smooth_adaptation_score(previous: float, delta: float) -> float:
    """Fold a raw delta into the running score, clamped to [-2, 2]."""
    smoothed = (
        previous * ADAPTATION_SMOOTHING_PREVIOUS
        + delta * ADAPTATION_SMOOTHING_CURRENT
    )
    return clamp(smoothed, ADAPTATION_SCORE_MIN, ADAPTATION_SCORE_MAX)


def injury_risk(records: Sequence[FeedbackRecord]) -> float:
    """Acute injury-risk score over the given window, clamped to [0, 10]."""
    risk = 0.0

    if any(r.has_injury for r in records):
        risk += _INJURY_MENTION_RISK

    overreached = sum(1 for r in records if r.effort_level >= 8 and r.rating <= 2)
    risk += overreached * _OVERREACH_RISK_PER_RECORD

    low_energy = sum(1 for r in records if r.energy_level <= 4)
    risk += low_energy * _LOW_ENERGY_RISK_PER_RECORD

    fatigued = sum(1 for r in records if r.is_fatigued_mood)
    risk += fatigued * _FATIGUE_MOOD_RISK_PER_RECORD

    return clamp(risk, INJURY_RISK_MIN, INJURY_RISK_MAX)


def update_fitness_level(previous: float, means: WindowMeans) -> float:
    """Nudge fitness by at most 0.1 per update, clamped to [1, 10]."""
    level = previous
    if means.rating >= 4 and means.energy >= 7:
        level += 0.1
    elif means.rating >= 3.5 and means.energy >= 6:
        level += 0.05
    elif means.rating <= 2.5 or means.energy <= 4:
        level -= 0.05
    return clamp(level, FITNESS_LEVEL_MIN, FITNESS_LEVEL_MAX)


def recompute_signals(state: TrainingState) -> TrainingState:
    """Re-derive all three signals from the state's ledger.

    The adaptation score and fitness level fold over their previous values,
    so the order in which feedback arrives matters.
    """
    ledger = state.ledger
    if ledger.is_empty:
        return state

    adaptation_means = window_means(ledger.recent(ADAPTATION_WINDOW))
    fitness_means = window_means(ledger.recent(FITNESS_WINDOW))

    return dataclasses.replace(
        state,
        adaptation_score=smooth_adaptation_score(
            state.adaptation_score, adaptation_delta(adaptation_means)
        ),
        injury_risk=injury_risk(ledger.recent(INJURY_WINDOW)),
        fitness_level=update_fitness_level(state.fitness_level, fitness_means),
    )


def apply_feedback(state: TrainingState, record: FeedbackRecord) -> TrainingState:
    """Pure transition: append *record* to the ledger and refresh the signals."""
    updated = recompute_signals(
        dataclasses.replace(state, ledger=state.ledger.append(record))
    )
    logger.debug(
        "Feedback applied: adaptation=%.3f injury_risk=%.1f fitness=%.2f (ledger=%d)",
        updated.adaptation_score,
        updated.injury_risk,
        updated.fitness_level,
        len(updated.ledger),
    )
    return updated
