"""
Domain models for the workout suggestion API.

This package contains pure value objects that are independent of
infrastructure concerns (database, API, external services):

- Exercise: a catalog entry with muscle, mechanic, tier, equipment, and
  safety capability attributes
- CompletedSession: a finished workout used to derive training need
- ActiveInjury: an injury the engine must train around
- ExercisePreference: per-user visibility status for an exercise
- SuggestionResult: the engine's output

Usage:
    >>> from domain.models import Exercise, MuscleGroup

    >>> row = {"id": "lat-pulldown", "name": "Lat Pulldown",
    ...        "primary_muscle": "back", "mechanic": "compound",
    ...        "hypertrophy_tier": "a", "equipment_required": ["cable"]}
    >>> exercise = Exercise.model_validate(row)
    >>> exercise.primary_muscle is MuscleGroup.BACK
    True
"""

from domain.models.exercise import (
    Exercise,
    HypertrophyTier,
    Mechanic,
    MuscleGroup,
    SpinalLoading,
    parse_muscle,
)
from domain.models.injury import ActiveInjury, InjurySeverity, InjurySource, SafetyLevel
from domain.models.preference import ExercisePreference, PreferenceStatus
from domain.models.suggestion import (
    ExerciseBudget,
    ExerciseExplanation,
    ExercisePrescription,
    SkippedMuscle,
    SuggestionResult,
)
from domain.models.training import (
    CompletedSession,
    Goal,
    MuscleTrainingRecord,
    SessionExercise,
)

__all__ = [
    # Catalog
    "Exercise",
    "HypertrophyTier",
    "Mechanic",
    "MuscleGroup",
    "SpinalLoading",
    "parse_muscle",
    # History
    "CompletedSession",
    "Goal",
    "MuscleTrainingRecord",
    "SessionExercise",
    # Safety
    "ActiveInjury",
    "InjurySeverity",
    "InjurySource",
    "SafetyLevel",
    # Preferences
    "ExercisePreference",
    "PreferenceStatus",
    # Output
    "ExerciseBudget",
    "ExerciseExplanation",
    "ExercisePrescription",
    "SkippedMuscle",
    "SuggestionResult",
]
