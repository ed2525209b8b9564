"""
Router package for the Workout Suggestion API.

This package contains all API routers organized by domain:
- health: Liveness and readiness checks
- suggestions: Next-workout suggestions and time budgets
"""

from api.routers.health import router as health_router
from api.routers.suggestions import router as suggestions_router

__all__ = [
    "health_router",
    "suggestions_router",
]
