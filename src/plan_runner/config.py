"""Environment-variable-based configuration for the weekly plan runner."""

from __future__ import annotations

import os
from pathlib import Path

PROFILE_PATH: Path = Path(os.environ.get("PLAN_PROFILE_PATH", "profiles/runner.json"))
FEEDBACK_PATH: Path = Path(os.environ.get("PLAN_FEEDBACK_PATH", "profiles/feedback.json"))
STATE_PATH: Path = Path(os.environ.get("PLAN_STATE_PATH", "profiles/state.json"))
OUTPUT_DIR: Path = Path(os.environ.get("PLAN_OUTPUT_DIR", "plans"))
SEED: str | None = os.environ.get("PLAN_SEED") or None
STRENGTH_PROBABILITY: float = float(os.environ.get("PLAN_STRENGTH_PROBABILITY", "0.5"))
LOG_LEVEL: str = os.environ.get("PLAN_LOG_LEVEL", "INFO").upper()
