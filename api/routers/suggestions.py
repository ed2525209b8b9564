"""
Suggestions router.

This router provides endpoints for:
- Suggesting the next workout from the user's training history
- Previewing how many exercises fit a session length
"""
import logging

from fastapi import APIRouter, Depends, HTTPException, Query, Response

from api.deps import get_current_user, get_suggest_workout_use_case
from api.schemas import BudgetResponse, RestPeriods, SuggestWorkoutRequest
from application.use_cases import (
    ERROR_NO_EXERCISES,
    ERROR_UNAUTHENTICATED,
    SuggestWorkoutUseCase,
)
from domain.models import Goal, Mechanic, SuggestionResult
from domain.services import (
    calculate_exercise_budget,
    recommended_exercise_range,
    rest_period_seconds,
)

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/suggestions",
    tags=["Suggestions"],
)

_ERROR_STATUS = {
    ERROR_UNAUTHENTICATED: 401,
    ERROR_NO_EXERCISES: 404,
}

DEGRADED_SOURCES_HEADER = "X-Degraded-Sources"


@router.post("", response_model=SuggestionResult)
def suggest_workout(
    request: SuggestWorkoutRequest,
    response: Response,
    user_id: str = Depends(get_current_user),
    use_case: SuggestWorkoutUseCase = Depends(get_suggest_workout_use_case),
) -> SuggestionResult:
    """
    Suggest the next workout for the authenticated user.

    Picks the muscles that most need training, filters the catalog by
    equipment, preferences and injuries, and fills the requested duration
    with the highest scoring exercises.

    Optional inputs that could not be loaded (goal, equipment, injuries,
    preferences, history) are listed in the ``X-Degraded-Sources`` header.
    """
    result = use_case.execute(
        user_id=user_id,
        duration_minutes=request.duration_minutes,
        location_id=request.location_id,
    )

    if not result.success:
        status_code = _ERROR_STATUS.get(result.error_code, 500)
        raise HTTPException(status_code=status_code, detail=result.error)

    if result.degraded_sources:
        logger.warning(
            f"Suggestion for user {user_id} used defaults for: {', '.join(result.degraded_sources)}"
        )
        response.headers[DEGRADED_SOURCES_HEADER] = ",".join(result.degraded_sources)

    return result.suggestion


@router.get("/budget", response_model=BudgetResponse)
def get_budget(
    duration_minutes: int = Query(..., ge=10, le=180, description="Session length in minutes"),
    goal: Goal = Query(Goal.MAINTAIN, description="Training goal, drives rest periods"),
) -> BudgetResponse:
    """
    Preview the exercise budget for a session length.

    Used by the duration picker to show how many exercises will fit.
    """
    low, high = recommended_exercise_range(duration_minutes)
    return BudgetResponse(
        duration_minutes=duration_minutes,
        goal=goal,
        budget=calculate_exercise_budget(duration_minutes, goal),
        rest_seconds=RestPeriods(
            compound=rest_period_seconds(Mechanic.COMPOUND, goal),
            isolation=rest_period_seconds(Mechanic.ISOLATION, goal),
        ),
        recommended_exercise_range=[low, high],
    )
