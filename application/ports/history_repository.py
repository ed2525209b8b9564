"""
History Repository Interface (Port).

Read-only access to a user's completed workout sessions.
"""
from datetime import date
from typing import List, Protocol

from domain.models import CompletedSession


class HistoryRepository(Protocol):
    """
    Abstract interface for reading completed sessions.

    A single window query covers every history window the engine uses
    (7-day muscle need, 4-day recency, 90-day frequency).
    """

    def get_completed_sessions(self, user_id: str, since: date) -> List[CompletedSession]:
        """
        Get sessions the user completed on or after ``since``.

        Args:
            user_id: User ID
            since: Earliest completion date to include

        Returns:
            Completed sessions with their exercises, newest first
        """
        ...
