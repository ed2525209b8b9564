"""
Domain services for workout suggestions.

Each module is one pure stage of the suggestion pipeline; the engine in
suggestion_engine wires them together.
"""

from domain.services.config import EngineConfig
from domain.services.equipment import (
    DEFAULT_EQUIPMENT,
    EQUIPMENT_SYNONYMS,
    equipment_matches,
    expand_equipment,
)
from domain.services.injury_safety import (
    INJURY_TYPES,
    SafetyAssessment,
    SafetyClassifier,
    assess_exercise_safety,
    merge_injuries,
)
from domain.services.suggestion_engine import (
    NoExercisesFoundError,
    SuggestionInputs,
    WorkoutSuggestionEngine,
)
from domain.services.time_budget import (
    calculate_exercise_budget,
    recommended_exercise_range,
    rest_period_seconds,
)

__all__ = [
    # Engine
    "WorkoutSuggestionEngine",
    "SuggestionInputs",
    "NoExercisesFoundError",
    "EngineConfig",
    # Equipment
    "DEFAULT_EQUIPMENT",
    "EQUIPMENT_SYNONYMS",
    "equipment_matches",
    "expand_equipment",
    # Safety
    "INJURY_TYPES",
    "SafetyAssessment",
    "SafetyClassifier",
    "assess_exercise_safety",
    "merge_injuries",
    # Time budget
    "calculate_exercise_budget",
    "recommended_exercise_range",
    "rest_period_seconds",
]
