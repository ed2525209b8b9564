"""
Supabase implementation of EquipmentRepository.

Equipment is registered per gym location in user_equipment; the display
name comes from the equipment_types lookup table.
"""
import logging
from typing import List, Optional

from supabase import Client

from application.exceptions import RepositoryError

logger = logging.getLogger(__name__)


class SupabaseEquipmentRepository:
    """Supabase implementation of EquipmentRepository protocol."""

    def __init__(self, client: Client):
        """
        Initialize with Supabase client.

        Args:
            client: Supabase client instance (injected, not global)
        """
        self._client = client

    def get_default_location_id(self, user_id: str) -> Optional[str]:
        try:
            result = (
                self._client.table("gym_locations")
                .select("id")
                .eq("user_id", user_id)
                .eq("is_default", True)
                .limit(1)
                .execute()
            )
        except Exception as e:
            logger.error(f"Error fetching default gym location for user {user_id}: {e}")
            raise RepositoryError("gym_locations", str(e)) from e

        if result.data:
            return result.data[0].get("id")
        return None

    def get_available_equipment(self, user_id: str, location_id: Optional[str] = None) -> List[str]:
        """
        Get available equipment ids plus their display names.

        Both are returned so free-form catalog equipment can match either.
        """
        try:
            query = (
                self._client.table("user_equipment")
                .select("equipment_id, equipment_types(name)")
                .eq("user_id", user_id)
                .eq("is_available", True)
            )
            if location_id:
                query = query.eq("location_id", location_id)
            else:
                query = query.is_("location_id", "null")
            result = query.execute()
        except Exception as e:
            logger.error(f"Error fetching equipment for user {user_id} at {location_id}: {e}")
            raise RepositoryError("equipment", str(e)) from e

        equipment: List[str] = []
        for row in result.data or []:
            equipment_id = row.get("equipment_id")
            if equipment_id:
                equipment.append(str(equipment_id).lower())
            name = (row.get("equipment_types") or {}).get("name")
            if name:
                equipment.append(str(name).lower())
        return equipment
