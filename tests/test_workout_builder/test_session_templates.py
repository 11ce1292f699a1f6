"""Tests for workout-type patterns and their feedback-driven overrides."""

from __future__ import annotations

import random

import pytest

from training_core.models.enums import WorkoutType
from training_core.workout_builder.session_templates import (
    apply_injury_override,
    apply_strength_substitution,
    get_pattern,
    strength_eligible,
)

E = WorkoutType.EASY_RUN
L = WorkoutType.LONG_RUN
T = WorkoutType.TEMPO_RUN
I = WorkoutType.INTERVALS  # noqa: E741
R = WorkoutType.RECOVERY
S = WorkoutType.STRENGTH


class _FixedRandom(random.Random):
    """Random source that always returns the same draw."""

    def __init__(self, value: float) -> None:
        super().__init__(0)
        self.value = value

    def random(self) -> float:
        return self.value


class TestGetPattern:
    @pytest.mark.parametrize(
        ("days", "expected"),
        [
            (3, [E, T, L]),
            (4, [E, I, E, L]),
            (5, [E, I, E, T, L]),
            (6, [E, I, R, T, E, L]),
            (7, [E, I, R, T, E, L, R]),
        ],
    )
    def test_fixed_templates(self, days: int, expected: list[WorkoutType]) -> None:
        assert get_pattern(days) == expected

    def test_short_weeks_use_four_day_template(self) -> None:
        assert get_pattern(2) == [E, I]
        assert get_pattern(1) == [E]
        assert get_pattern(0) == []

    def test_returns_copy(self) -> None:
        pattern = get_pattern(4)
        pattern[0] = S
        assert get_pattern(4)[0] == E


class TestInjuryOverride:
    def test_low_risk_unchanged(self) -> None:
        pattern, notes = apply_injury_override(get_pattern(5), 3.5)
        assert pattern == [E, I, E, T, L]
        assert notes == []

    def test_moderate_risk_downgrades_first_intervals(self) -> None:
        pattern, notes = apply_injury_override(get_pattern(5), 4.0)
        assert pattern == [E, E, E, T, L]
        assert len(notes) == 1

    def test_moderate_risk_without_intervals(self) -> None:
        pattern, notes = apply_injury_override(get_pattern(3), 5.0)
        assert pattern == [E, T, L]
        assert notes == []

    def test_high_risk_replaces_all_high_intensity(self) -> None:
        pattern, notes = apply_injury_override(get_pattern(7), 6.0)
        assert pattern == [E, R, R, R, E, L, R]
        assert I not in pattern and T not in pattern
        assert "2 high-intensity" in notes[0]

    def test_input_not_mutated(self) -> None:
        original = get_pattern(5)
        apply_injury_override(original, 8.0)
        assert original == [E, I, E, T, L]


class TestStrengthSubstitution:
    def test_eligibility(self) -> None:
        assert strength_eligible(True, 4.0, 3)
        assert not strength_eligible(False, 9.0, 10)
        assert not strength_eligible(True, 3.9, 10)
        assert not strength_eligible(True, 9.0, 2)

    def test_swaps_first_easy_run_on_low_draw(self) -> None:
        pattern, notes = apply_strength_substitution(get_pattern(5), _FixedRandom(0.2), 0.5)
        assert pattern == [S, I, E, T, L]
        assert notes

    def test_keeps_easy_run_on_high_draw(self) -> None:
        pattern, notes = apply_strength_substitution(get_pattern(5), _FixedRandom(0.7), 0.5)
        assert pattern == [E, I, E, T, L]
        assert notes == []

    def test_probability_bounds(self) -> None:
        always, _ = apply_strength_substitution(get_pattern(4), random.Random(1), 1.0)
        never, _ = apply_strength_substitution(get_pattern(4), random.Random(1), 0.0)
        assert always[0] == S
        assert S not in never

    def test_no_easy_run_consumes_no_randomness(self) -> None:
        rng = random.Random(3)
        expected_next = random.Random(3).random()
        pattern, _ = apply_strength_substitution([T, L], rng, 1.0)
        assert pattern == [T, L]
        assert rng.random() == expected_next
