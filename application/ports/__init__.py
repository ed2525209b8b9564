"""
Repository Interfaces (Ports) for the Workout Suggestion API.

This package defines abstract interfaces that decouple the suggestion
engine from infrastructure (database, external services). Implementations
are provided in the infrastructure layer.

Architecture follows the Ports & Adapters (Hexagonal) pattern:
- Ports: Abstract interfaces defined here (what the use case needs)
- Adapters: Concrete implementations in infrastructure/ (how it's provided)

Usage:
    from application.ports import ExerciseRepository, HistoryRepository

    class SuggestWorkoutUseCase:
        def __init__(self, exercise_repo: ExerciseRepository, ...):
            self._exercise_repo = exercise_repo
"""

# Exercise catalog
from application.ports.exercise_repository import ExerciseRepository

# Training history
from application.ports.history_repository import HistoryRepository

# Gym equipment
from application.ports.equipment_repository import EquipmentRepository

# Injuries (check-in + profile history)
from application.ports.injury_repository import InjuryRepository

# Exercise preferences
from application.ports.preference_repository import PreferenceRepository

# Training profile (goal)
from application.ports.profile_repository import ProfileRepository

__all__ = [
    "ExerciseRepository",
    "HistoryRepository",
    "EquipmentRepository",
    "InjuryRepository",
    "PreferenceRepository",
    "ProfileRepository",
]
