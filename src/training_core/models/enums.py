"""Enumerations and program constants for the training core.

Enum values double as wire strings, so a plan or feedback record can be
dumped straight to JSON.
"""

from enum import Enum


class ExperienceLevel(str, Enum):
    """Self-reported running experience from the intake flow."""

    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"


class GoalType(str, Enum):
    """What the runner wants from race day."""

    FINISH = "finish"
    TIME_TARGET = "time_target"


class WorkoutType(str, Enum):
    """Category of a single day's prescribed activity."""

    EASY_RUN = "easy_run"
    LONG_RUN = "long_run"
    TEMPO_RUN = "tempo_run"
    INTERVALS = "intervals"
    STRENGTH = "strength"
    RECOVERY = "recovery"
    REST = "rest"


class Intensity(str, Enum):
    LOW = "low"
    MODERATE = "moderate"
    HIGH = "high"


class Mood(str, Enum):
    """Post-workout mood vocabulary offered by the debrief screen."""

    AMAZING = "amazing"
    GREAT = "great"
    GOOD = "good"
    OKAY = "okay"
    TOUGH = "tough"
    STRUGGLED = "struggled"
    TIRED = "tired"
    EXHAUSTED = "exhausted"

    @classmethod
    def parse(cls, value: "str | Mood | None") -> "Mood":
        """Map free input onto the vocabulary; anything unknown is OKAY."""
        if isinstance(value, Mood):
            return value
        if not value:
            return cls.OKAY
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            return cls.OKAY


class TrainingPhase(str, Enum):
    """Macrocycle phase of a program week (base -> build -> peak -> taper)."""

    BASE = "base"
    BUILD = "build"
    PEAK = "peak"
    TAPER = "taper"


FATIGUE_MOODS = frozenset({Mood.TIRED, Mood.EXHAUSTED})

HIGH_INTENSITY_TYPES = frozenset({WorkoutType.INTERVALS, WorkoutType.TEMPO_RUN})

DAY_NAMES = (
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
    "Sunday",
)

# ---------------------------------------------------------------------------
# Program shape
# ---------------------------------------------------------------------------
TOTAL_PROGRAM_WEEKS = 20

# Phase boundaries (inclusive last week of each phase)
BASE_PHASE_END_WEEK = 2
BUILD_PHASE_END_WEEK = 12
PEAK_PHASE_END_WEEK = 16

BASE_PROGRESSION_FACTOR = 0.7
BUILD_PROGRESSION_STEP = 0.03
PEAK_PROGRESSION_FACTOR = 1.0
TAPER_PROGRESSION_STEP = 0.15

# ---------------------------------------------------------------------------
# Profile defaults and mileage envelope (miles per week)
# ---------------------------------------------------------------------------
DEFAULT_WEEKLY_MILEAGE = 15.0
DEFAULT_TRAINING_DAYS = 4
MAX_TRAINING_DAYS = 7
PEAK_MILEAGE_MULTIPLIER = 2.5
PEAK_MILEAGE_CAP = 45.0
MILEAGE_FLOOR_FRACTION = 0.5

# ---------------------------------------------------------------------------
# Feedback windows
# ---------------------------------------------------------------------------
FEEDBACK_LEDGER_CAPACITY = 10
ADAPTATION_WINDOW = 5
FITNESS_WINDOW = 5
INJURY_WINDOW = 3

# ---------------------------------------------------------------------------
# Signal ranges
# ---------------------------------------------------------------------------
ADAPTATION_SCORE_MIN = -2.0
ADAPTATION_SCORE_MAX = 2.0
INJURY_RISK_MIN = 0.0
INJURY_RISK_MAX = 10.0
FITNESS_LEVEL_MIN = 1.0
FITNESS_LEVEL_MAX = 10.0

# Exponential smoothing of the adaptation score
ADAPTATION_SMOOTHING_PREVIOUS = 0.7
ADAPTATION_SMOOTHING_CURRENT = 0.3

# Each point of adaptation score moves volume by 10%
ADAPTATION_VOLUME_FACTOR = 0.1

# Injury risk thresholds
INJURY_RISK_HIGH = 6.0
INJURY_RISK_MODERATE = 4.0
INJURY_RISK_LOW_CEILING = 3.0
HIGH_RISK_VOLUME_DAMPING = 0.8
MODERATE_RISK_VOLUME_DAMPING = 0.9

INITIAL_FITNESS_BY_EXPERIENCE = {
    ExperienceLevel.BEGINNER: 2.0,
    ExperienceLevel.INTERMEDIATE: 5.0,
    ExperienceLevel.ADVANCED: 8.0,
}

# ---------------------------------------------------------------------------
# Session composition
# ---------------------------------------------------------------------------
DEFAULT_STRENGTH_PROBABILITY = 0.5
STRENGTH_MIN_FITNESS = 4.0
STRENGTH_MIN_WEEK = 3

# Interval rep distance switches from 800m to 1000m after this week
SHORT_INTERVAL_LAST_WEEK = 8

# Tempo run core distance cap (miles) and warm-up/cool-down allowances
TEMPO_CORE_CAP_MILES = 8.0
TEMPO_WARMUP_COOLDOWN_MILES = 2.0
TEMPO_WARMUP_MIN = 15
TEMPO_COOLDOWN_MIN = 15

# Minutes per mile by session type
EASY_PACE_MIN_PER_MILE = 9.0
LONG_RUN_PACE_MIN_PER_MILE = 9.5
TEMPO_PACE_MIN_PER_MILE = 7.5
RECOVERY_PACE_MIN_PER_MILE = 10.0
