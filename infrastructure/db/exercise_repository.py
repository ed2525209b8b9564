"""
Supabase implementation of ExerciseRepository.

Reads the exercises catalog. Rows are converted to Exercise models here;
rows that fail validation are logged and skipped.
"""
import logging
from typing import List, Sequence

from supabase import Client

from application.exceptions import RepositoryError
from domain.converters import db_rows_to_exercises
from domain.models import Exercise, MuscleGroup

logger = logging.getLogger(__name__)


class SupabaseExerciseRepository:
    """
    Supabase implementation of ExerciseRepository protocol.

    The client is injected via constructor for testability.
    """

    def __init__(self, client: Client):
        """
        Initialize with Supabase client.

        Args:
            client: Supabase client instance (injected, not global)
        """
        self._client = client

    def get_by_primary_muscles(self, muscles: Sequence[MuscleGroup]) -> List[Exercise]:
        if not muscles:
            return []
        try:
            result = (
                self._client.table("exercises")
                .select("*")
                .in_("primary_muscle", [m.value for m in muscles])
                .order("name")
                .execute()
            )
        except Exception as e:
            logger.error(f"Error fetching exercises for muscles {[m.value for m in muscles]}: {e}")
            raise RepositoryError("exercises", str(e)) from e
        return db_rows_to_exercises(result.data or [])
