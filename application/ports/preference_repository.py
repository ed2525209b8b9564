"""
Preference Repository Interface (Port).
"""
from typing import List, Protocol

from domain.models import ExercisePreference


class PreferenceRepository(Protocol):
    """Abstract interface for reading per-user exercise preferences."""

    def get_preferences(self, user_id: str) -> List[ExercisePreference]:
        """
        Get every preference the user has set.

        Args:
            user_id: User ID

        Returns:
            Preferences; exercises without a row are implicitly normal
        """
        ...
