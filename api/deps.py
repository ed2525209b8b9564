"""
FastAPI Dependency Providers for the Workout Suggestion API.

This module provides FastAPI dependency injection functions that return
interface types (Protocols) rather than concrete implementations. This
enables clean separation of concerns and easy testing with fake
implementations.

Architecture:
- Settings and Supabase client are cached per-process (lru_cache)
- Repository providers create new instances per-request
- Auth providers wrap backend.auth

Usage in routers:
    from api.deps import get_suggest_workout_use_case, get_current_user

    @router.post("/suggestions")
    def suggest(
        user_id: str = Depends(get_current_user),
        use_case: SuggestWorkoutUseCase = Depends(get_suggest_workout_use_case),
    ):
        return use_case.execute(user_id=user_id, duration_minutes=45)

Testing:
    # Override dependencies in tests
    app.dependency_overrides[get_exercise_repo] = lambda: FakeExerciseRepository()
"""

from functools import lru_cache
from typing import Optional

from fastapi import Depends, Header, HTTPException
from supabase import Client, create_client

# Protocol types (interfaces)
from application.ports import (
    EquipmentRepository,
    ExerciseRepository,
    HistoryRepository,
    InjuryRepository,
    PreferenceRepository,
    ProfileRepository,
)
from application.use_cases import SuggestWorkoutUseCase
from domain.services import WorkoutSuggestionEngine

# Concrete implementations
from infrastructure import (
    SupabaseEquipmentRepository,
    SupabaseExerciseRepository,
    SupabaseHistoryRepository,
    SupabaseInjuryRepository,
    SupabasePreferenceRepository,
    SupabaseProfileRepository,
)

from backend.settings import Settings, get_settings as _get_settings

# Auth from existing module (wrap to maintain single source of truth)
from backend.auth import get_current_user as _get_current_user


# =============================================================================
# Settings Provider
# =============================================================================


def get_settings() -> Settings:
    """
    Get application settings.

    Returns cached Settings instance from backend.settings.
    Use this as a FastAPI dependency for settings access.

    Returns:
        Settings: Application settings instance
    """
    return _get_settings()


# =============================================================================
# Supabase Client Provider
# =============================================================================


@lru_cache
def get_supabase_client() -> Optional[Client]:
    """
    Get Supabase client instance (cached).

    Creates a Supabase client using credentials from settings.
    Returns None if credentials are not configured.

    Returns:
        Client: Supabase client instance, or None if not configured
    """
    settings = _get_settings()

    if not settings.supabase_url or not settings.supabase_key:
        return None

    return create_client(settings.supabase_url, settings.supabase_key)


def get_supabase_client_required() -> Client:
    """
    Get Supabase client instance, raising if not configured.

    Raises HTTPException 503 if database is not available.

    Returns:
        Client: Supabase client instance

    Raises:
        HTTPException: 503 if Supabase is not configured
    """
    client = get_supabase_client()
    if client is None:
        raise HTTPException(
            status_code=503,
            detail="Database not available. Supabase credentials not configured.",
        )
    return client


# =============================================================================
# Repository Providers
# =============================================================================


def get_exercise_repo(
    client: Client = Depends(get_supabase_client_required),
) -> ExerciseRepository:
    """
    Get ExerciseRepository implementation.

    The return type is the Protocol to enable easy faking.

    Args:
        client: Supabase client (injected)

    Returns:
        ExerciseRepository: Read access to the exercise catalog
    """
    return SupabaseExerciseRepository(client)


def get_history_repo(
    client: Client = Depends(get_supabase_client_required),
) -> HistoryRepository:
    """
    Get HistoryRepository implementation.

    Args:
        client: Supabase client (injected)

    Returns:
        HistoryRepository: Read access to completed sessions
    """
    return SupabaseHistoryRepository(client)


def get_equipment_repo(
    client: Client = Depends(get_supabase_client_required),
) -> EquipmentRepository:
    """
    Get EquipmentRepository implementation.

    Args:
        client: Supabase client (injected)

    Returns:
        EquipmentRepository: Read access to gym locations and equipment
    """
    return SupabaseEquipmentRepository(client)


def get_injury_repo(
    client: Client = Depends(get_supabase_client_required),
) -> InjuryRepository:
    """
    Get InjuryRepository implementation.

    Args:
        client: Supabase client (injected)

    Returns:
        InjuryRepository: Read access to check-in and profile injuries
    """
    return SupabaseInjuryRepository(client)


def get_preference_repo(
    client: Client = Depends(get_supabase_client_required),
) -> PreferenceRepository:
    return SupabasePreferenceRepository(client)


def get_profile_repo(
    client: Client = Depends(get_supabase_client_required),
) -> ProfileRepository:
    return SupabaseProfileRepository(client)


# =============================================================================
# Engine / Use Case Providers
# =============================================================================


def get_suggestion_engine(
    settings: Settings = Depends(get_settings),
) -> WorkoutSuggestionEngine:
    """
    Get a suggestion engine configured from settings.

    Args:
        settings: Application settings (injected)

    Returns:
        WorkoutSuggestionEngine: Engine with the configured constants
    """
    return WorkoutSuggestionEngine(config=settings.engine_config())


def get_suggest_workout_use_case(
    exercise_repo: ExerciseRepository = Depends(get_exercise_repo),
    history_repo: HistoryRepository = Depends(get_history_repo),
    equipment_repo: EquipmentRepository = Depends(get_equipment_repo),
    injury_repo: InjuryRepository = Depends(get_injury_repo),
    preference_repo: PreferenceRepository = Depends(get_preference_repo),
    profile_repo: ProfileRepository = Depends(get_profile_repo),
    engine: WorkoutSuggestionEngine = Depends(get_suggestion_engine),
) -> SuggestWorkoutUseCase:
    """
    Get the SuggestWorkout use case with all repositories injected.

    Returns:
        SuggestWorkoutUseCase: Use case ready to execute
    """
    return SuggestWorkoutUseCase(
        exercise_repo=exercise_repo,
        history_repo=history_repo,
        equipment_repo=equipment_repo,
        injury_repo=injury_repo,
        preference_repo=preference_repo,
        profile_repo=profile_repo,
        engine=engine,
    )


# =============================================================================
# Authentication Providers
# =============================================================================


async def get_current_user(
    authorization: Optional[str] = Header(None),
    x_api_key: Optional[str] = Header(None, alias="X-API-Key"),
    x_test_auth: Optional[str] = Header(None, alias="X-Test-Auth"),
    x_test_user_id: Optional[str] = Header(None, alias="X-Test-User-Id"),
) -> str:
    """
    Get the current authenticated user ID.

    Wraps backend.auth.get_current_user for dependency injection.
    Supports multiple auth methods:
    - Clerk JWT (RS256 via JWKS)
    - API key authentication
    - E2E test bypass (dev/staging only)

    Args:
        authorization: Bearer token header
        x_api_key: API key header
        x_test_auth: Test auth secret (dev/staging only)
        x_test_user_id: Test user ID (dev/staging only)

    Returns:
        str: User ID from authentication

    Raises:
        HTTPException: 401 if authentication fails
    """
    return await _get_current_user(
        authorization=authorization,
        x_api_key=x_api_key,
        x_test_auth=x_test_auth,
        x_test_user_id=x_test_user_id,
    )


# =============================================================================
# Exports
# =============================================================================

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
