"""Insight summary surfaced to the dashboard."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class TrainingInsights:
    """Categorical labels for the three signals plus prioritized advice."""

    adaptation_status: str  # Progressing well / Need recovery / Maintaining
    injury_risk_level: str  # Low / Moderate / High
    fitness_progress: str  # Building / Steady / Good / Excellent
    recommendations: tuple[str, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict:
        return {
            "adaptation_status": self.adaptation_status,
            "injury_risk_level": self.injury_risk_level,
            "fitness_progress": self.fitness_progress,
            "recommendations": list(self.recommendations),
        }
