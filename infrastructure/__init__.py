"""
Infrastructure Layer for the Workout Suggestion API.

This package contains concrete implementations of repository interfaces:
- db/: Supabase database implementations
"""

# Re-export database repositories for convenient access
from infrastructure.db import (
    SupabaseEquipmentRepository,
    SupabaseExerciseRepository,
    SupabaseHistoryRepository,
    SupabaseInjuryRepository,
    SupabasePreferenceRepository,
    SupabaseProfileRepository,
)

__all__ = [
    "SupabaseExerciseRepository",
    "SupabaseHistoryRepository",
    "SupabaseEquipmentRepository",
    "SupabaseInjuryRepository",
    "SupabasePreferenceRepository",
    "SupabaseProfileRepository",
]
