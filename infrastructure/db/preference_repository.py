"""
Supabase implementation of PreferenceRepository.
"""
import logging
from typing import List

from supabase import Client

from application.exceptions import RepositoryError
from domain.converters import db_row_to_preference
from domain.models import ExercisePreference

logger = logging.getLogger(__name__)


class SupabasePreferenceRepository:
    """Supabase implementation of PreferenceRepository protocol."""

    def __init__(self, client: Client):
        self._client = client

    def get_preferences(self, user_id: str) -> List[ExercisePreference]:
        try:
            result = (
                self._client.table("user_exercise_preferences")
                .select("exercise_id, status")
                .eq("user_id", user_id)
                .execute()
            )
        except Exception as e:
            logger.error(f"Error fetching exercise preferences for user {user_id}: {e}")
            raise RepositoryError("preferences", str(e)) from e

        preferences: List[ExercisePreference] = []
        for row in result.data or []:
            try:
                preferences.append(db_row_to_preference(row))
            except ValueError as e:
                logger.warning(f"Skipping invalid preference row for {row.get('exercise_id')}: {e}")
        return preferences
