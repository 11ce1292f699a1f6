"""Serialization module: state snapshots and plan export."""

from training_core.serialization.plans import plan_to_dicts, plan_to_json, plan_to_summary
from training_core.serialization.snapshot import (
    state_from_dict,
    state_from_json,
    state_to_dict,
    state_to_json,
)

__all__ = [
    "plan_to_dicts",
    "plan_to_json",
    "plan_to_summary",
    "state_from_dict",
    "state_from_json",
    "state_to_dict",
    "state_to_json",
]
