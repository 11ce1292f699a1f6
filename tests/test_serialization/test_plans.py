"""Tests for weekly plan export."""

from __future__ import annotations

import json
from datetime import date

import pytest

from training_core.engine import TrainingEngine
from training_core.models.profile import RunnerProfile
from training_core.models.weekly_plan import WeeklyPlan
from training_core.serialization.plans import plan_to_dicts, plan_to_json, plan_to_summary


@pytest.fixture
def plan(intermediate_profile: RunnerProfile, monday: date) -> WeeklyPlan:
    engine = TrainingEngine(intermediate_profile, strength_probability=0.0)
    return engine.plan_week(5, start_date=monday)


class TestPlanExport:
    def test_daily_entries(self, plan: WeeklyPlan) -> None:
        entries = plan_to_dicts(plan)
        assert len(entries) == 7
        assert entries[0]["day"] == "Monday"
        assert entries[0]["date"] == "2026-10-19"
        assert entries[0]["id"] == "week5-day0"
        assert entries[0]["workout_type"] == "easy_run"
        assert entries[-1]["workout_type"] == "rest"
        assert all(entry["completed"] is False for entry in entries)

    def test_summary(self, plan: WeeklyPlan) -> None:
        summary = plan_to_summary(plan)
        assert summary["week_number"] == 5
        assert summary["phase"] == "build"
        assert summary["progression_factor"] == pytest.approx(0.79)
        assert summary["total_distance"] == plan.total_distance
        assert summary["total_duration"] == sum(w.duration for w in plan.workouts)
        assert len(summary["workouts"]) == 7

    def test_json_is_parseable(self, plan: WeeklyPlan) -> None:
        assert json.loads(plan_to_json(plan)) == plan_to_summary(plan)
