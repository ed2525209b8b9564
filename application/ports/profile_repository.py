"""
Profile Repository Interface (Port).
"""
from typing import Optional, Protocol

from domain.models import Goal


class ProfileRepository(Protocol):
    """Abstract interface for reading the user's training profile."""

    def get_goal(self, user_id: str) -> Optional[Goal]:
        """
        Get the user's body-composition goal.

        Args:
            user_id: User ID

        Returns:
            Goal, or None if the user has no profile or an unknown goal
        """
        ...
