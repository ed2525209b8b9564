"""
SuggestWorkout Use Case.

Gathers everything the suggestion engine needs for one user with a
sequence of read-only repository queries, runs the engine, and converts
failures into user-facing messages.

Optional inputs (goal, equipment, injuries, preferences, history) are
soft: if a query fails the failure is logged and a default is used. The
catalog is required; without it there is nothing to suggest.
"""

import logging
from dataclasses import dataclass, field
from datetime import date, timedelta
from typing import Callable, List, Optional, TypeVar

from application.ports import (
    EquipmentRepository,
    ExerciseRepository,
    HistoryRepository,
    InjuryRepository,
    PreferenceRepository,
    ProfileRepository,
)
from domain.models import Goal, SuggestionResult
from domain.services import (
    NoExercisesFoundError,
    SuggestionInputs,
    WorkoutSuggestionEngine,
    expand_equipment,
    merge_injuries,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")

SIGN_IN_MESSAGE = "You need to be signed in to get a workout suggestion."
NO_EXERCISES_MESSAGE = (
    "No exercises found for the suggested muscles. "
    "Try adjusting your equipment or preferences."
)
GENERIC_ERROR_MESSAGE = (
    "Something went wrong while building your workout suggestion. Please try again."
)

ERROR_UNAUTHENTICATED = "unauthenticated"
ERROR_NO_EXERCISES = "no_exercises"
ERROR_INTERNAL = "internal"


@dataclass
class SuggestWorkoutResult:
    """Result of the SuggestWorkout use case execution."""

    success: bool
    suggestion: Optional[SuggestionResult] = None
    error: Optional[str] = None
    error_code: Optional[str] = None
    degraded_sources: List[str] = field(default_factory=list)


class SuggestWorkoutUseCase:
    """
    Use case for suggesting the next workout.

    Orchestrates the following workflow:
    1. Load goal, equipment, injuries, preferences and history (soft)
    2. Pick the muscles to train
    3. Load the catalog for those muscles
    4. Run the suggestion engine

    Every call recomputes from fresh queries; nothing is cached between
    calls.

    Usage:
        >>> use_case = SuggestWorkoutUseCase(
        ...     exercise_repo=exercise_repo,
        ...     history_repo=history_repo,
        ...     equipment_repo=equipment_repo,
        ...     injury_repo=injury_repo,
        ...     preference_repo=preference_repo,
        ...     profile_repo=profile_repo,
        ... )
        >>> result = use_case.execute(user_id="user-123", duration_minutes=45)
        >>> if result.success:
        ...     print(result.suggestion.reason)
    """

    def __init__(
        self,
        exercise_repo: ExerciseRepository,
        history_repo: HistoryRepository,
        equipment_repo: EquipmentRepository,
        injury_repo: InjuryRepository,
        preference_repo: PreferenceRepository,
        profile_repo: ProfileRepository,
        engine: Optional[WorkoutSuggestionEngine] = None,
    ) -> None:
        """
        Initialize the use case with required dependencies.

        Args:
            exercise_repo: Catalog access
            history_repo: Completed session access
            equipment_repo: Gym location / equipment access
            injury_repo: Check-in and profile injury access
            preference_repo: Exercise preference access
            profile_repo: Training profile access
            engine: Suggestion engine; defaults to one with default config
        """
        self._exercise_repo = exercise_repo
        self._history_repo = history_repo
        self._equipment_repo = equipment_repo
        self._injury_repo = injury_repo
        self._preference_repo = preference_repo
        self._profile_repo = profile_repo
        self._engine = engine or WorkoutSuggestionEngine()

    def execute(
        self,
        user_id: Optional[str],
        duration_minutes: int,
        location_id: Optional[str] = None,
        today: Optional[date] = None,
    ) -> SuggestWorkoutResult:
        """
        Build a workout suggestion.

        Args:
            user_id: Authenticated user ID
            duration_minutes: Requested session length
            location_id: Gym location; defaults to the user's default location
            today: Reference date (defaults to the current date)

        Returns:
            SuggestWorkoutResult with the suggestion or a user-facing error
        """
        if not user_id:
            return SuggestWorkoutResult(
                success=False,
                error=SIGN_IN_MESSAGE,
                error_code=ERROR_UNAUTHENTICATED,
            )

        today = today or date.today()
        degraded: List[str] = []

        try:
            suggestion = self._suggest(user_id, duration_minutes, location_id, today, degraded)
        except NoExercisesFoundError as e:
            logger.info(f"No suggestion for user {user_id}: {e}")
            return SuggestWorkoutResult(
                success=False,
                error=NO_EXERCISES_MESSAGE,
                error_code=ERROR_NO_EXERCISES,
                degraded_sources=degraded,
            )
        except Exception:
            logger.exception(f"Failed to build workout suggestion for user {user_id}")
            return SuggestWorkoutResult(
                success=False,
                error=GENERIC_ERROR_MESSAGE,
                error_code=ERROR_INTERNAL,
                degraded_sources=degraded,
            )

        return SuggestWorkoutResult(
            success=True,
            suggestion=suggestion,
            degraded_sources=degraded,
        )

    def _suggest(
        self,
        user_id: str,
        duration_minutes: int,
        location_id: Optional[str],
        today: date,
        degraded: List[str],
    ) -> SuggestionResult:
        config = self._engine.config

        goal = self._load_soft(
            "goal", lambda: self._profile_repo.get_goal(user_id), Goal.MAINTAIN, degraded
        )
        equipment = self._load_soft(
            "equipment", lambda: self._load_equipment(user_id, location_id), [], degraded
        )
        check_in_injuries = self._load_soft(
            "check_in_injuries",
            lambda: self._injury_repo.get_latest_check_in_injuries(user_id),
            [],
            degraded,
        )
        history_injuries = self._load_soft(
            "injury_history", lambda: self._injury_repo.get_injury_history(user_id), [], degraded
        )
        preferences = self._load_soft(
            "preferences", lambda: self._preference_repo.get_preferences(user_id), [], degraded
        )
        sessions = self._load_soft(
            "history",
            lambda: self._history_repo.get_completed_sessions(
                user_id, today - timedelta(days=config.frequency_window_days)
            ),
            [],
            degraded,
        )

        inputs = SuggestionInputs(
            exercises=[],
            duration_minutes=duration_minutes,
            today=today,
            sessions=sessions,
            goal=goal,
            available_equipment=sorted(expand_equipment(equipment)),
            injuries=merge_injuries(check_in_injuries, history_injuries),
            preferences=preferences,
        )

        selection = self._engine.select_muscles(inputs)
        inputs.exercises = self._exercise_repo.get_by_primary_muscles(selection.selected)

        return self._engine.suggest(inputs)

    def _load_equipment(self, user_id: str, location_id: Optional[str]) -> List[str]:
        location = location_id or self._equipment_repo.get_default_location_id(user_id)
        return self._equipment_repo.get_available_equipment(user_id, location)

    @staticmethod
    def _load_soft(name: str, loader: Callable[[], Optional[T]], default: T, degraded: List[str]) -> T:
        """Run an optional query, falling back to ``default`` on failure or no data."""
        try:
            value = loader()
        except Exception as e:
            logger.warning(f"Failed to load {name}, using default: {e}")
            degraded.append(name)
            return default
        return default if value is None else value
