"""Exception hierarchy for the training core."""

from __future__ import annotations


class TrainingCoreError(Exception):
    """Base exception for all training_core errors."""


class InvalidWeekError(TrainingCoreError, ValueError):
    """A plan was requested for a non-positive program week."""

    def __init__(self, week: int) -> None:
        super().__init__(f"Program week must be >= 1, got {week}")
        self.week = week


class SnapshotError(TrainingCoreError, ValueError):
    """A persisted TrainingState snapshot could not be decoded."""
