"""
Injury Repository Interface (Port).

Read-only access to the injuries a user is training around.
"""
from typing import List, Protocol

from domain.models import ActiveInjury


class InjuryRepository(Protocol):
    """
    Abstract interface for reading active injuries.

    Injuries come from two places: temporary injuries reported in the
    pre-workout check-in of the user's most recent session, and the
    long-lived injury history on the user's profile.
    """

    def get_latest_check_in_injuries(self, user_id: str) -> List[ActiveInjury]:
        """
        Get injuries reported in the most recent session's check-in.

        Only the latest session with a check-in is read, however old it is.

        Args:
            user_id: User ID

        Returns:
            Injuries (empty when the user has never checked in)
        """
        ...

    def get_injury_history(self, user_id: str) -> List[ActiveInjury]:
        """
        Get injuries stored on the user's profile.

        Args:
            user_id: User ID

        Returns:
            Injuries (empty when none are recorded)
        """
        ...
