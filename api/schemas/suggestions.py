"""
Suggestion Schemas.

Schemas for:
- SuggestWorkoutRequest: Request body for POST /suggestions
- BudgetResponse: Response for GET /suggestions/budget
"""

from typing import List, Optional

from pydantic import BaseModel, Field

from domain.models import ExerciseBudget, Goal


class SuggestWorkoutRequest(BaseModel):
    """Request body for POST /suggestions."""
    duration_minutes: int = Field(
        ...,
        description="Requested session length in minutes",
        ge=10,
        le=180,
    )
    location_id: Optional[str] = Field(
        default=None,
        description="Gym location to use for equipment. Null uses the default location.",
        min_length=1,
        max_length=64,
    )


class RestPeriods(BaseModel):
    """Rest between sets in seconds, per mechanic."""
    compound: int
    isolation: int


class BudgetResponse(BaseModel):
    """Response body for GET /suggestions/budget."""
    duration_minutes: int
    goal: Goal
    budget: ExerciseBudget
    rest_seconds: RestPeriods
    recommended_exercise_range: List[int]
