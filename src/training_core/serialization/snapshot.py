"""TrainingState snapshots for caller-side persistence.

The library performs no I/O; callers store the dict (or JSON string) and
hand it back to ``state_from_dict`` to resume a runner's session.
All functions are pure.
"""

from __future__ import annotations

import json
from typing import Any, Mapping

from training_core.exceptions import SnapshotError
from training_core.math.adaptation import clamp
from training_core.models.enums import (
    ADAPTATION_SCORE_MAX,
    ADAPTATION_SCORE_MIN,
    FEEDBACK_LEDGER_CAPACITY,
    FITNESS_LEVEL_MAX,
    FITNESS_LEVEL_MIN,
    INJURY_RISK_MAX,
    INJURY_RISK_MIN,
    TOTAL_PROGRAM_WEEKS,
)
from training_core.models.feedback import FeedbackRecord
from training_core.models.ledger import FeedbackLedger
from training_core.models.training_state import TrainingState

SNAPSHOT_VERSION = 1


def state_to_dict(state: TrainingState) -> dict[str, Any]:
    """Encode a TrainingState as a JSON-compatible dict."""
    return {
        "version": SNAPSHOT_VERSION,
        "current_week": state.current_week,
        "total_weeks": state.total_weeks,
        "base_weekly_mileage": state.base_weekly_mileage,
        "peak_weekly_mileage": state.peak_weekly_mileage,
        "weekly_mileage": state.weekly_mileage,
        "adaptation_score": state.adaptation_score,
        "injury_risk": state.injury_risk,
        "fitness_level": state.fitness_level,
        "ledger_capacity": state.ledger.capacity,
        "feedback": [record.to_dict() for record in state.ledger],
    }


def state_from_dict(data: Mapping[str, Any]) -> TrainingState:
    """Decode a snapshot produced by ``state_to_dict``.

    Signal values outside their ranges are clamped back into them.

    Raises:
        SnapshotError: If required keys are missing or values are malformed.
    """
    version = data.get("version", SNAPSHOT_VERSION)
    if version != SNAPSHOT_VERSION:
        raise SnapshotError(f"Unsupported snapshot version: {version!r}")

    try:
        records = tuple(FeedbackRecord.from_dict(r) for r in data.get("feedback", ()))
        ledger = FeedbackLedger(
            entries=records,
            capacity=int(data.get("ledger_capacity", FEEDBACK_LEDGER_CAPACITY)),
        )
        base = float(data["base_weekly_mileage"])
        return TrainingState(
            base_weekly_mileage=base,
            peak_weekly_mileage=float(data["peak_weekly_mileage"]),
            fitness_level=clamp(
                float(data["fitness_level"]), FITNESS_LEVEL_MIN, FITNESS_LEVEL_MAX
            ),
            current_week=max(1, int(data.get("current_week", 1))),
            total_weeks=int(data.get("total_weeks", TOTAL_PROGRAM_WEEKS)),
            weekly_mileage=float(data.get("weekly_mileage", base)),
            ledger=ledger,
            adaptation_score=clamp(
                float(data.get("adaptation_score", 0.0)),
                ADAPTATION_SCORE_MIN,
                ADAPTATION_SCORE_MAX,
            ),
            injury_risk=clamp(
                float(data.get("injury_risk", 0.0)), INJURY_RISK_MIN, INJURY_RISK_MAX
            ),
        )
    except (KeyError, TypeError, ValueError) as exc:
        raise SnapshotError(f"Malformed training state snapshot: {exc}") from exc


def state_to_json(state: TrainingState, indent: int | None = 2) -> str:
    return json.dumps(state_to_dict(state), indent=indent)


def state_from_json(payload: str) -> TrainingState:
    """Decode a JSON snapshot string.

    Raises:
        SnapshotError: If the payload is not valid JSON or not a snapshot.
    """
    try:
        data = json.loads(payload)
    except json.JSONDecodeError as exc:
        raise SnapshotError(f"Snapshot is not valid JSON: {exc}") from exc
    if not isinstance(data, dict):
        raise SnapshotError("Snapshot must be a JSON object")
    return state_from_dict(data)
