"""Tests for workout description text."""

from training_core.models.enums import WorkoutType
from training_core.workout_builder.description_builder import (
    intervals_description,
    long_run_description,
    rest_description,
    static_description,
    tempo_description,
)


class TestDescriptions:
    def test_rest_depends_on_injury_risk(self) -> None:
        assert rest_description(0.0) == "Rest day - light stretching or walking optional"
        assert rest_description(4.0) == "Rest day - focus on recovery and injury prevention"

    def test_numbers_formatted_to_one_decimal(self) -> None:
        assert long_run_description(7.456) == "Long steady run to build endurance - 7.5 miles"
        assert tempo_description(3.0) == "3.0mi tempo at half-marathon pace (with warm-up/cool-down)"

    def test_intervals(self) -> None:
        assert intervals_description(4, "1000m") == "4x1000m intervals at 5K pace with recovery"

    def test_static_descriptions_non_empty(self) -> None:
        for workout_type in (WorkoutType.EASY_RUN, WorkoutType.STRENGTH, WorkoutType.RECOVERY):
            assert static_description(workout_type)
