"""
Application Use Cases for the Workout Suggestion API.

Use cases orchestrate domain services and repository ports. They are the
entry points for business operations.

Architecture follows Clean Architecture / Hexagonal pattern:
- Use cases orchestrate domain objects and repository ports
- Dependencies are injected via constructors for testability
- Use cases return result dataclasses, not API responses

Usage:
    from application.use_cases import SuggestWorkoutUseCase

    use_case = SuggestWorkoutUseCase(
        exercise_repo=exercise_repo,
        history_repo=history_repo,
        equipment_repo=equipment_repo,
        injury_repo=injury_repo,
        preference_repo=preference_repo,
        profile_repo=profile_repo,
    )
    result = use_case.execute(user_id="user-123", duration_minutes=45)
"""

from application.use_cases.suggest_workout import (
    ERROR_INTERNAL,
    ERROR_NO_EXERCISES,
    ERROR_UNAUTHENTICATED,
    SuggestWorkoutResult,
    SuggestWorkoutUseCase,
)

__all__ = [
    "SuggestWorkoutUseCase",
    "SuggestWorkoutResult",
    "ERROR_UNAUTHENTICATED",
    "ERROR_NO_EXERCISES",
    "ERROR_INTERNAL",
]
