"""Periodization math: phase curve and weekly mileage targets.

Implements a fixed four-phase half-marathon curve over a 20-week program:
- BASE (weeks 1-2): flat 0.7 progression factor, easy start
- BUILD (weeks 3-12): linear ramp of +0.03 per week
- PEAK (weeks 13-16): full base-to-peak range
- TAPER (weeks 17-20): -0.15 per week; the factor drops below the week-1
  value, trading volume for freshness

The progression factor positions the week between the runner's base and
peak mileage; the feedback signals then scale the result.
"""

from __future__ import annotations

from training_core.exceptions import InvalidWeekError
from training_core.models.enums import (
    ADAPTATION_VOLUME_FACTOR,
    BASE_PHASE_END_WEEK,
    BASE_PROGRESSION_FACTOR,
    BUILD_PHASE_END_WEEK,
    BUILD_PROGRESSION_STEP,
    HIGH_RISK_VOLUME_DAMPING,
    INJURY_RISK_HIGH,
    INJURY_RISK_MODERATE,
    MILEAGE_FLOOR_FRACTION,
    MODERATE_RISK_VOLUME_DAMPING,
    PEAK_PHASE_END_WEEK,
    PEAK_PROGRESSION_FACTOR,
    TAPER_PROGRESSION_STEP,
    TOTAL_PROGRAM_WEEKS,
    TrainingPhase,
)
from training_core.models.training_state import TrainingState


def validate_week(week: int) -> int:
    """Reject non-positive program weeks.

    Raises:
        InvalidWeekError: If week < 1.
    """
    if week < 1:
        raise InvalidWeekError(week)
    return week


def phase_for_week(week: int) -> TrainingPhase:
    """Training phase for a 1-indexed program week (weeks past 16 are TAPER)."""
    validate_week(week)
    if week <= BASE_PHASE_END_WEEK:
        return TrainingPhase.BASE
    if week <= BUILD_PHASE_END_WEEK:
        return TrainingPhase.BUILD
    if week <= PEAK_PHASE_END_WEEK:
        return TrainingPhase.PEAK
    return TrainingPhase.TAPER


def progression_factor(week: int, total_weeks: int = TOTAL_PROGRAM_WEEKS) -> float:
    """Fraction of the base-to-peak range targeted in *week*.

    Weeks past the end of the program reuse the final taper value instead
    of extrapolating the taper below zero.

    Args:
        week: 1-indexed program week (valid range 1-20).
        total_weeks: Program length used to clamp late weeks.

    Returns:
        Progression factor (0.7 at the start, 1.0 at peak, 0.4 in week 20).

    Raises:
        InvalidWeekError: If week < 1.
    """
    validate_week(week)
    week = min(week, total_weeks)

    phase = phase_for_week(week)
    if phase == TrainingPhase.BASE:
        return BASE_PROGRESSION_FACTOR
    if phase == TrainingPhase.BUILD:
        return BASE_PROGRESSION_FACTOR + (week - BASE_PHASE_END_WEEK) * BUILD_PROGRESSION_STEP
    if phase == TrainingPhase.PEAK:
        return PEAK_PROGRESSION_FACTOR
    return PEAK_PROGRESSION_FACTOR - (week - PEAK_PHASE_END_WEEK) * TAPER_PROGRESSION_STEP


def adaptation_multiplier(adaptation_score: float) -> float:
    """Volume multiplier from the adaptation score: +/-20% at the extremes."""
    return 1 + adaptation_score * ADAPTATION_VOLUME_FACTOR


def injury_damping(injury_risk: float) -> float:
    """Volume damping for elevated injury risk; only one tier applies."""
    if injury_risk >= INJURY_RISK_HIGH:
        return HIGH_RISK_VOLUME_DAMPING
    if injury_risk >= INJURY_RISK_MODERATE:
        return MODERATE_RISK_VOLUME_DAMPING
    return 1.0


def target_weekly_mileage(state: TrainingState, week: int) -> float:
    """Target weekly volume (miles) for *week* under the state's current signals.

    target = base + (peak - base) * progression_factor, then scaled by the
    adaptation multiplier and, separately, by the injury damping factor.
    Never drops below half the base mileage.

    Raises:
        InvalidWeekError: If week < 1.
    """
    base = state.base_weekly_mileage
    peak = state.peak_weekly_mileage

    target = base + (peak - base) * progression_factor(week, state.total_weeks)
    target *= adaptation_multiplier(state.adaptation_score)
    target *= injury_damping(state.injury_risk)

    return max(base * MILEAGE_FLOOR_FRACTION, target)


def program_volume_curve(state: TrainingState) -> list[float]:
    """Weekly targets for every program week under the current signals."""
    return [
        round(target_weekly_mileage(state, week), 1)
        for week in range(1, state.total_weeks + 1)
    ]
