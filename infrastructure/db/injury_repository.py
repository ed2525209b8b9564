"""
Supabase implementation of InjuryRepository.

Two sources:
- workout_sessions.pre_workout_check_in.temporaryInjuries (latest session only)
- users.injury_history (muscle groups on the profile)
"""
import logging
from typing import List

from supabase import Client

from application.exceptions import RepositoryError
from domain.converters import check_in_to_injuries, injury_history_to_injuries, parse_date
from domain.models import ActiveInjury

logger = logging.getLogger(__name__)


class SupabaseInjuryRepository:
    """Supabase implementation of InjuryRepository protocol."""

    def __init__(self, client: Client):
        """
        Initialize with Supabase client.

        Args:
            client: Supabase client instance (injected, not global)
        """
        self._client = client

    def get_latest_check_in_injuries(self, user_id: str) -> List[ActiveInjury]:
        try:
            result = (
                self._client.table("workout_sessions")
                .select("id, planned_date, started_at, pre_workout_check_in")
                .eq("user_id", user_id)
                .not_.is_("pre_workout_check_in", "null")
                .order("planned_date", desc=True)
                .limit(1)
                .execute()
            )
        except Exception as e:
            logger.error(f"Error fetching check-ins for user {user_id}: {e}")
            raise RepositoryError("check_in_injuries", str(e)) from e

        injuries: List[ActiveInjury] = []
        for row in result.data or []:
            reported_at = parse_date(row.get("started_at")) or parse_date(row.get("planned_date"))
            injuries.extend(
                check_in_to_injuries(row.get("pre_workout_check_in"), str(row.get("id")), reported_at)
            )
        return injuries

    def get_injury_history(self, user_id: str) -> List[ActiveInjury]:
        try:
            result = (
                self._client.table("users")
                .select("injury_history")
                .eq("id", user_id)
                .limit(1)
                .execute()
            )
        except Exception as e:
            logger.error(f"Error fetching injury history for user {user_id}: {e}")
            raise RepositoryError("injury_history", str(e)) from e

        if not result.data:
            return []
        return injury_history_to_injuries(user_id, result.data[0].get("injury_history"))
