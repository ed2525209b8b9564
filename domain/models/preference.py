"""
Per-user exercise preference value object.
"""

from enum import Enum
from typing import Any

from pydantic import BaseModel, field_validator


class PreferenceStatus(str, Enum):
    """Visibility status a user has set for an exercise."""

    NORMAL = "normal"
    ARCHIVED = "archived"
    DO_NOT_SUGGEST = "do_not_suggest"

    @property
    def excludes(self) -> bool:
        """Archived and do-not-suggest exercises are never suggested."""
        return self in (PreferenceStatus.ARCHIVED, PreferenceStatus.DO_NOT_SUGGEST)


class ExercisePreference(BaseModel):
    """A user's preference status for one exercise."""

    exercise_id: str
    status: PreferenceStatus = PreferenceStatus.NORMAL

    @field_validator("status", mode="before")
    @classmethod
    def parse_status(cls, v: Any) -> Any:
        if v is None:
            return PreferenceStatus.NORMAL
        if isinstance(v, str):
            text = v.strip().lower()
            # Older rows used "active" for the default visibility
            if text in ("active", ""):
                return PreferenceStatus.NORMAL
            return text
        return v
