"""Workout builder: composes weekly volume into dated daily sessions."""

from training_core.workout_builder.builder import ComposedWeek, SessionComposer

__all__ = ["ComposedWeek", "SessionComposer"]
