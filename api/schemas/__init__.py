"""
Pydantic schemas for API requests and responses.

Organized by feature/domain:
- suggestions: Workout suggestion and time budget models
"""

from api.schemas.suggestions import (
    BudgetResponse,
    RestPeriods,
    SuggestWorkoutRequest,
)

__all__ = [
    "BudgetResponse",
    "RestPeriods",
    "SuggestWorkoutRequest",
]
