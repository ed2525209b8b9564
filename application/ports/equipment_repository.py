"""
Equipment Repository Interface (Port).

Read-only access to the equipment registered at a user's gym locations.
"""
from typing import List, Optional, Protocol


class EquipmentRepository(Protocol):
    """Abstract interface for reading gym locations and their equipment."""

    def get_default_location_id(self, user_id: str) -> Optional[str]:
        """
        Get the user's default gym location.

        Args:
            user_id: User ID

        Returns:
            Location ID or None if the user has no default location
        """
        ...

    def get_available_equipment(self, user_id: str, location_id: Optional[str] = None) -> List[str]:
        """
        Get equipment marked available, as canonical equipment ids.

        Args:
            user_id: User ID
            location_id: Gym location; None means equipment not tied to a location

        Returns:
            Equipment ids (empty when nothing is registered)
        """
        ...
