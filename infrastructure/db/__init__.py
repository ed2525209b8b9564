"""
Infrastructure Database Layer.

This package provides Supabase-backed implementations of the repository
interfaces defined in application.ports. These implementations are
injected into the suggestion use case by api.deps.

Usage:
    from supabase import create_client
    from infrastructure.db import (
        SupabaseExerciseRepository,
        SupabaseHistoryRepository,
        SupabaseEquipmentRepository,
        SupabaseInjuryRepository,
        SupabasePreferenceRepository,
        SupabaseProfileRepository,
    )

    # Create Supabase client
    client = create_client(SUPABASE_URL, SUPABASE_KEY)

    # Instantiate repositories with injected client
    exercise_repo = SupabaseExerciseRepository(client)
    history_repo = SupabaseHistoryRepository(client)
"""

from infrastructure.db.exercise_repository import SupabaseExerciseRepository
from infrastructure.db.history_repository import SupabaseHistoryRepository
from infrastructure.db.equipment_repository import SupabaseEquipmentRepository
from infrastructure.db.injury_repository import SupabaseInjuryRepository
from infrastructure.db.preference_repository import SupabasePreferenceRepository
from infrastructure.db.profile_repository import SupabaseProfileRepository

__all__ = [
    # Exercise catalog
    "SupabaseExerciseRepository",

    # Training history
    "SupabaseHistoryRepository",

    # Gym equipment
    "SupabaseEquipmentRepository",

    # Injuries
    "SupabaseInjuryRepository",

    # Preferences and profile
    "SupabasePreferenceRepository",
    "SupabaseProfileRepository",
]
