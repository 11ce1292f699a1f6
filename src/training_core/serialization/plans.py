"""Weekly plan export: JSON-ready dicts for rendering or storage.

All functions are pure (no I/O).
"""

from __future__ import annotations

import json
from typing import Any

from training_core.models.weekly_plan import WeeklyPlan


def plan_to_dicts(plan: WeeklyPlan) -> list[dict[str, Any]]:
    """One dict per day, Monday first."""
    return [workout.to_dict() for workout in plan.workouts]


def plan_to_summary(plan: WeeklyPlan) -> dict[str, Any]:
    """Week-level envelope: targets, adjustment notes and the daily entries."""
    return {
        "week_number": plan.week_number,
        "phase": plan.phase.value,
        "progression_factor": round(plan.progression_factor, 3),
        "target_mileage": round(plan.target_mileage, 1),
        "total_distance": plan.total_distance,
        "total_duration": plan.total_duration,
        "adjustments": list(plan.adjustments),
        "workouts": plan_to_dicts(plan),
    }


def plan_to_json(plan: WeeklyPlan, indent: int | None = 2) -> str:
    return json.dumps(plan_to_summary(plan), indent=indent)
