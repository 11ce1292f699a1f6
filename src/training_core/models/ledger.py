"""Feedback ledger: bounded, ordered history of post-workout feedback.

The ledger is a value: ``append()`` returns a new ledger and never mutates
the receiver. Capacity is enforced through a ``deque(maxlen=...)`` so the
oldest record falls off the front as soon as a new one arrives.
"""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field

import numpy as np
import pandas as pd

from training_core.models.enums import FEEDBACK_LEDGER_CAPACITY
from training_core.models.feedback import FeedbackRecord

_FRAME_COLUMNS = ("rating", "effort_level", "energy_level", "mood", "injury", "timestamp")


@dataclass(frozen=True)
class FeedbackLedger:
    """Frozen, fixed-capacity window of the most recent feedback records."""

    entries: tuple[FeedbackRecord, ...] = field(default_factory=tuple)
    capacity: int = FEEDBACK_LEDGER_CAPACITY

    def __post_init__(self) -> None:
        if self.capacity < 1:
            raise ValueError(f"Ledger capacity must be >= 1, got {self.capacity}")
        if len(self.entries) > self.capacity:
            object.__setattr__(self, "entries", self.entries[-self.capacity:])

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self):
        return iter(self.entries)

    @property
    def is_empty(self) -> bool:
        return len(self.entries) == 0

    def append(self, record: FeedbackRecord) -> FeedbackLedger:
        """Return a new ledger with *record* appended, evicting the oldest on overflow."""
        window: deque[FeedbackRecord] = deque(self.entries, maxlen=self.capacity)
        window.append(record)
        return FeedbackLedger(entries=tuple(window), capacity=self.capacity)

    def recent(self, n: int) -> tuple[FeedbackRecord, ...]:
        """Last *n* records in arrival order (fewer if the ledger is shorter)."""
        if n <= 0:
            return ()
        return self.entries[-n:]

    def to_frame(self) -> pd.DataFrame:
        """Tabular view of the ledger, oldest row first."""
        return records_to_frame(self.entries)


def records_to_frame(records: tuple[FeedbackRecord, ...] | list[FeedbackRecord]) -> pd.DataFrame:
    """Convert feedback records to a DataFrame with float64 score columns."""
    if not records:
        return pd.DataFrame(columns=list(_FRAME_COLUMNS))
    frame = pd.DataFrame(
        {
            "rating": np.array([r.rating for r in records], dtype=np.float64),
            "effort_level": np.array([r.effort_level for r in records], dtype=np.float64),
            "energy_level": np.array([r.energy_level for r in records], dtype=np.float64),
            "mood": [r.mood.value for r in records],
            "injury": [r.has_injury for r in records],
            "timestamp": [r.timestamp for r in records],
        }
    )
    return frame
