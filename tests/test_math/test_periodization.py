"""Tests for periodization math: progression curve, phases, weekly targets."""

import dataclasses

import pytest

from training_core.exceptions import InvalidWeekError
from training_core.math.periodization import (
    injury_damping,
    phase_for_week,
    program_volume_curve,
    progression_factor,
    target_weekly_mileage,
)
from training_core.models.enums import TrainingPhase
from training_core.models.profile import RunnerProfile
from training_core.models.training_state import TrainingState, peak_mileage_for


class TestProgressionFactor:
    @pytest.mark.parametrize(
        ("week", "expected"),
        [
            (1, 0.7),
            (2, 0.7),
            (3, 0.73),
            (7, 0.85),
            (12, 1.0),
            (13, 1.0),
            (16, 1.0),
            (17, 0.85),
            (20, 0.4),
        ],
    )
    def test_curve(self, week: int, expected: float) -> None:
        assert progression_factor(week) == pytest.approx(expected)

    def test_taper_goes_below_week_one(self) -> None:
        assert progression_factor(20) < progression_factor(1)

    def test_taper_never_increases(self) -> None:
        taper = [progression_factor(w) for w in range(16, 21)]
        assert taper == sorted(taper, reverse=True)

    def test_weeks_past_program_reuse_final_taper(self) -> None:
        assert progression_factor(25) == pytest.approx(progression_factor(20))
        assert progression_factor(40) > 0

    @pytest.mark.parametrize("week", [0, -3])
    def test_non_positive_week_rejected(self, week: int) -> None:
        with pytest.raises(InvalidWeekError):
            progression_factor(week)

    def test_invalid_week_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            progression_factor(0)


class TestPhaseForWeek:
    def test_phase_boundaries(self) -> None:
        assert phase_for_week(1) == TrainingPhase.BASE
        assert phase_for_week(2) == TrainingPhase.BASE
        assert phase_for_week(3) == TrainingPhase.BUILD
        assert phase_for_week(12) == TrainingPhase.BUILD
        assert phase_for_week(13) == TrainingPhase.PEAK
        assert phase_for_week(16) == TrainingPhase.PEAK
        assert phase_for_week(17) == TrainingPhase.TAPER
        assert phase_for_week(20) == TrainingPhase.TAPER


class TestPeakMileage:
    def test_peak_is_two_and_a_half_times_base(self) -> None:
        assert peak_mileage_for(10.0) == 25.0

    def test_peak_capped(self) -> None:
        assert peak_mileage_for(30.0) == 45.0


class TestTargetWeeklyMileage:
    def _state(self, base: float, **signals: float) -> TrainingState:
        state = TrainingState.initial(RunnerProfile(current_weekly_mileage=base))
        return dataclasses.replace(state, **signals)

    def test_week_one_neutral_signals(self) -> None:
        # base 10, peak 25 → 10 + 15 * 0.7
        assert target_weekly_mileage(self._state(10.0), 1) == pytest.approx(20.5)

    def test_peak_week(self) -> None:
        assert target_weekly_mileage(self._state(10.0), 14) == pytest.approx(25.0)

    def test_adaptation_scales_volume(self) -> None:
        state = self._state(10.0, adaptation_score=2.0)
        assert target_weekly_mileage(state, 14) == pytest.approx(30.0)

    def test_high_risk_single_damping(self) -> None:
        state = self._state(10.0, injury_risk=7.0)
        assert target_weekly_mileage(state, 14) == pytest.approx(20.0)

    def test_moderate_risk_damping(self) -> None:
        state = self._state(10.0, injury_risk=4.0)
        assert target_weekly_mileage(state, 14) == pytest.approx(22.5)

    def test_multipliers_compose(self) -> None:
        state = self._state(10.0, adaptation_score=-1.0, injury_risk=6.0)
        assert target_weekly_mileage(state, 14) == pytest.approx(25.0 * 0.9 * 0.8)

    def test_floor_at_half_base(self) -> None:
        # base 100 → peak capped at 45; deep taper + fatigue + risk
        state = self._state(100.0, adaptation_score=-2.0, injury_risk=8.0)
        assert target_weekly_mileage(state, 20) == pytest.approx(50.0)

    def test_invalid_week(self) -> None:
        with pytest.raises(InvalidWeekError):
            target_weekly_mileage(self._state(10.0), 0)


class TestInjuryDamping:
    def test_tiers(self) -> None:
        assert injury_damping(0.0) == 1.0
        assert injury_damping(3.9) == 1.0
        assert injury_damping(4.0) == 0.9
        assert injury_damping(6.0) == 0.8
        assert injury_damping(10.0) == 0.8


class TestProgramVolumeCurve:
    def test_one_entry_per_week(self) -> None:
        curve = program_volume_curve(TrainingState.initial(RunnerProfile()))
        assert len(curve) == 20
        assert max(curve) == curve[12]  # week 13 reaches peak
        assert curve[-1] < curve[0]
