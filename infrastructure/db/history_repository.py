"""
Supabase implementation of HistoryRepository.

Completed sessions are read from workout_sessions with their
exercise_blocks and the muscles of each block's exercise embedded.
"""
import logging
from datetime import date
from typing import List

from supabase import Client

from application.exceptions import RepositoryError
from domain.converters import db_row_to_completed_session
from domain.models import CompletedSession

logger = logging.getLogger(__name__)

SESSION_SELECT = (
    "id, completed_at, planned_date, "
    "exercise_blocks(exercise_id, exercises(primary_muscle, secondary_muscles))"
)


class SupabaseHistoryRepository:
    """Supabase implementation of HistoryRepository protocol."""

    def __init__(self, client: Client):
        """
        Initialize with Supabase client.

        Args:
            client: Supabase client instance (injected, not global)
        """
        self._client = client

    def get_completed_sessions(self, user_id: str, since: date) -> List[CompletedSession]:
        try:
            result = (
                self._client.table("workout_sessions")
                .select(SESSION_SELECT)
                .eq("user_id", user_id)
                .eq("state", "completed")
                .gte("completed_at", since.isoformat())
                .order("completed_at", desc=True)
                .execute()
            )
        except Exception as e:
            logger.error(f"Error fetching completed sessions for user {user_id}: {e}")
            raise RepositoryError("history", str(e)) from e

        sessions: List[CompletedSession] = []
        for row in result.data or []:
            try:
                sessions.append(db_row_to_completed_session(row))
            except ValueError as e:
                logger.warning(f"Skipping invalid session row {row.get('id')}: {e}")
        return sessions
