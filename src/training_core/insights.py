"""Training insights: categorical labels and advice from the three signals."""

from __future__ import annotations

from training_core.models.enums import INJURY_RISK_HIGH, INJURY_RISK_LOW_CEILING, INJURY_RISK_MODERATE
from training_core.models.insights import TrainingInsights
from training_core.models.training_state import TrainingState

# Adaptation score band treated as "maintaining"
_ADAPTATION_PROGRESS_THRESHOLD = 0.5
# Scores beyond +/-1 trigger load advice
_ADAPTATION_ADVICE_THRESHOLD = 1.0

RECOVERY_FIRST_ADVICE = (
    "Focus on recovery and consider reducing training intensity",
    "Schedule a rest day or easy recovery run",
)
LOAD_INCREASE_ADVICE = (
    "Your body is adapting well - consider a slight increase in training load"
)
FATIGUE_ADVICE = "Signs of fatigue detected - prioritize sleep and nutrition"
PROGRESS_PRAISE = "Great fitness progress! You can handle more challenging workouts"


def adaptation_status(adaptation_score: float) -> str:
    if adaptation_score > _ADAPTATION_PROGRESS_THRESHOLD:
        return "Progressing well"
    if adaptation_score < -_ADAPTATION_PROGRESS_THRESHOLD:
        return "Need recovery"
    return "Maintaining"


def injury_risk_level(injury_risk: float) -> str:
    if injury_risk >= INJURY_RISK_HIGH:
        return "High"
    if injury_risk >= INJURY_RISK_MODERATE:
        return "Moderate"
    return "Low"


def fitness_progress(fitness_level: float) -> str:
    if fitness_level >= 8:
        return "Excellent"
    if fitness_level >= 6:
        return "Good"
    if fitness_level <= 3:
        return "Building"
    return "Steady"


def recommendations(state: TrainingState) -> tuple[str, ...]:
    """Prioritized advice. Injury risk outranks adaptation; praise is independent."""
    advice: list[str] = []

    if state.injury_risk >= INJURY_RISK_HIGH:
        advice.extend(RECOVERY_FIRST_ADVICE)
    elif state.adaptation_score > _ADAPTATION_ADVICE_THRESHOLD:
        advice.append(LOAD_INCREASE_ADVICE)
    elif state.adaptation_score < -_ADAPTATION_ADVICE_THRESHOLD:
        advice.append(FATIGUE_ADVICE)

    if state.fitness_level >= 7 and state.injury_risk < INJURY_RISK_LOW_CEILING:
        advice.append(PROGRESS_PRAISE)

    return tuple(advice)


def build_insights(state: TrainingState) -> TrainingInsights:
    return TrainingInsights(
        adaptation_status=adaptation_status(state.adaptation_score),
        injury_risk_level=injury_risk_level(state.injury_risk),
        fitness_progress=fitness_progress(state.fitness_level),
        recommendations=recommendations(state),
    )
