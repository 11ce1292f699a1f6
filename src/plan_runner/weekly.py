"""Weekly plan runner: replays feedback and writes one week of workouts.

Usage:
    python -m plan_runner.weekly --week 5
    python -m plan_runner.weekly --week 5 --seed 42 --feedback new_feedback.json

The feedback file holds the records submitted since the previous run; they
are appended to the persisted state in file order, then the state snapshot
is rewritten.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from datetime import date
from pathlib import Path

from training_core.engine import TrainingEngine
from training_core.exceptions import TrainingCoreError
from training_core.models.feedback import FeedbackRecord
from training_core.models.profile import RunnerProfile
from training_core.models.weekly_plan import WeeklyPlan
from training_core.serialization import plan_to_json, state_from_json, state_to_json

from plan_runner.config import (
    FEEDBACK_PATH,
    LOG_LEVEL,
    OUTPUT_DIR,
    PROFILE_PATH,
    SEED,
    STATE_PATH,
    STRENGTH_PROBABILITY,
)

logger = logging.getLogger(__name__)


def load_profile(path: Path) -> RunnerProfile:
    """Load the intake profile from disk."""
    with open(path) as f:
        return RunnerProfile.from_intake(json.load(f))


def load_feedback(path: Path) -> list[FeedbackRecord]:
    """Load pending feedback records; a missing file means no new feedback."""
    if not path.exists():
        logger.info("No feedback file at %s", path)
        return []
    with open(path) as f:
        raw = json.load(f)
    return [FeedbackRecord.from_dict(item) for item in raw]


def build_engine(
    profile: RunnerProfile,
    state_path: Path,
    seed: str | None,
    strength_probability: float,
) -> TrainingEngine:
    """Resume from the saved snapshot when there is one, else start fresh.

    Raises:
        SnapshotError: If the saved snapshot is corrupt.
    """
    if state_path.exists():
        state = state_from_json(state_path.read_text())
        logger.info("Resuming training state from %s", state_path)
        return TrainingEngine(
            profile, seed=seed, strength_probability=strength_probability, state=state,
        )
    logger.info("No saved state at %s, starting a new program", state_path)
    return TrainingEngine(profile, seed=seed, strength_probability=strength_probability)


def run_week(
    week: int,
    profile_path: Path = PROFILE_PATH,
    feedback_path: Path = FEEDBACK_PATH,
    state_path: Path = STATE_PATH,
    output_dir: Path = OUTPUT_DIR,
    seed: str | None = SEED,
    strength_probability: float = STRENGTH_PROBABILITY,
    start_date: date | None = None,
) -> tuple[WeeklyPlan, Path]:
    """Execute one cycle: load, replay feedback, plan, persist.

    Returns:
        The planned week and the path of the written plan file.
    """
    profile = load_profile(profile_path)
    engine = build_engine(profile, state_path, seed, strength_probability)

    records = load_feedback(feedback_path)
    for record in records:
        engine.record_feedback(record)
    if records:
        logger.info("Applied %d feedback record(s)", len(records))

    plan = engine.plan_week(week, start_date=start_date)
    for note in plan.adjustments:
        logger.info("Adjustment: %s", note)

    output_dir.mkdir(parents=True, exist_ok=True)
    plan_path = output_dir / f"week_{week:02d}.json"
    plan_path.write_text(plan_to_json(plan))
    logger.info("Wrote plan for week %d to %s", week, plan_path)

    state_path.parent.mkdir(parents=True, exist_ok=True)
    state_path.write_text(state_to_json(engine.state))

    insights = engine.get_insights()
    logger.info(
        "Insights: adaptation=%s injury=%s fitness=%s",
        insights.adaptation_status,
        insights.injury_risk_level,
        insights.fitness_progress,
    )
    for line in insights.recommendations:
        logger.info("Recommendation: %s", line)

    return plan, plan_path


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Generate one week of the half-marathon plan")
    parser.add_argument("--week", type=int, required=True, help="Program week (1-20)")
    parser.add_argument("--profile", type=Path, default=PROFILE_PATH)
    parser.add_argument("--feedback", type=Path, default=FEEDBACK_PATH)
    parser.add_argument("--state", type=Path, default=STATE_PATH)
    parser.add_argument("--output", type=Path, default=OUTPUT_DIR)
    parser.add_argument("--seed", default=SEED, help="Seed for reproducible plans")
    parser.add_argument(
        "--strength-probability", type=float, default=STRENGTH_PROBABILITY,
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, LOG_LEVEL, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    try:
        run_week(
            args.week,
            profile_path=args.profile,
            feedback_path=args.feedback,
            state_path=args.state,
            output_dir=args.output,
            seed=args.seed,
            strength_probability=args.strength_probability,
        )
    except FileNotFoundError as exc:
        logger.error("Input file not found: %s", exc.filename)
        return 1
    except json.JSONDecodeError as exc:
        logger.error("Input file is not valid JSON: %s", exc)
        return 1
    except TrainingCoreError as exc:
        logger.error("Planning failed: %s", exc)
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())
