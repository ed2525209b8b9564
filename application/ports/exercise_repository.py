"""
Exercise Repository Interface (Port).

Read-only access to the exercise catalog.
"""
from typing import List, Protocol, Sequence

from domain.models import Exercise, MuscleGroup


class ExerciseRepository(Protocol):
    """
    Abstract interface for reading the exercise catalog.

    Implementations return validated Exercise models; rows that fail
    validation are dropped at the boundary, never passed to the engine.
    """

    def get_by_primary_muscles(self, muscles: Sequence[MuscleGroup]) -> List[Exercise]:
        """
        Get catalog exercises whose primary muscle is one of ``muscles``.

        Args:
            muscles: Muscle groups selected for the session

        Returns:
            List of exercises (order is stable between calls)
        """
        ...
