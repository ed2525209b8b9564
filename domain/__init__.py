"""
Domain layer for the workout suggestion API.

This package contains pure value objects and the suggestion engine. Nothing
here talks to the database or the network.
"""

from domain.models import (
    ActiveInjury,
    CompletedSession,
    Exercise,
    ExercisePreference,
    Goal,
    MuscleGroup,
    SuggestionResult,
)

__all__ = [
    "ActiveInjury",
    "CompletedSession",
    "Exercise",
    "ExercisePreference",
    "Goal",
    "MuscleGroup",
    "SuggestionResult",
]
