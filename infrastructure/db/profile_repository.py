"""
Supabase implementation of ProfileRepository.
"""
import logging
from typing import Optional

from supabase import Client

from application.exceptions import RepositoryError
from domain.models import Goal

logger = logging.getLogger(__name__)


class SupabaseProfileRepository:
    """Supabase implementation of ProfileRepository protocol."""

    def __init__(self, client: Client):
        self._client = client

    def get_goal(self, user_id: str) -> Optional[Goal]:
        """
        Get the goal stored on the users table.

        The enum stores ``maintenance``; Goal.parse maps it onto MAINTAIN.
        """
        try:
            result = (
                self._client.table("users")
                .select("goal")
                .eq("id", user_id)
                .limit(1)
                .execute()
            )
        except Exception as e:
            logger.error(f"Error fetching goal for user {user_id}: {e}")
            raise RepositoryError("goal", str(e)) from e

        if not result.data:
            return None
        goal = Goal.parse(result.data[0].get("goal"))
        if goal is None:
            logger.info(f"Unknown goal {result.data[0].get('goal')!r} for user {user_id}")
        return goal
