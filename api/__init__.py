"""
API package for the Workout Suggestion API.

This package contains:
- deps.py: FastAPI dependency providers for DI
- routers/: API route handlers
- schemas/: Request and response models
"""

# Re-export dependency providers for convenient access
from api.deps import (
    get_settings,
    get_supabase_client,
    get_supabase_client_required,
    get_exercise_repo,
    get_history_repo,
    get_equipment_repo,
    get_injury_repo,
    get_preference_repo,
    get_profile_repo,
    get_suggestion_engine,
    get_suggest_workout_use_case,
    get_current_user,
)

__all__ = [
    # Settings
    "get_settings",
    # Database
    "get_supabase_client",
    "get_supabase_client_required",
    # Repositories
    "get_exercise_repo",
    "get_history_repo",
    "get_equipment_repo",
    "get_injury_repo",
    "get_preference_repo",
    "get_profile_repo",
    # Engine / use case
    "get_suggestion_engine",
    "get_suggest_workout_use_case",
    # Authentication
    "get_current_user",
]
