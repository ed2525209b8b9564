"""
Training history value objects.

Completed sessions are the only history the suggestion engine reads. The
per-muscle training record is derived from them on every request and is
never stored.
"""

from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum
from typing import Any, List, Optional

from pydantic import BaseModel, Field, field_validator

from domain.models.exercise import MuscleGroup, parse_muscle


class Goal(str, Enum):
    """User's body-composition goal; drives rest periods."""

    BULK = "bulk"
    CUT = "cut"
    MAINTAIN = "maintain"

    @classmethod
    def parse(cls, value: Any) -> Optional["Goal"]:
        """
        Parse a stored goal value.

        The profile table historically stored ``maintenance`` and the
        macro settings use ``slow_cut`` / ``aggressive_bulk`` style values;
        all of them collapse onto the three training goals.
        """
        if isinstance(value, Goal):
            return value
        if not isinstance(value, str) or not value.strip():
            return None
        text = value.strip().lower()
        if text in ("maintain", "maintenance"):
            return cls.MAINTAIN
        if text.endswith("cut"):
            return cls.CUT
        if text.endswith("bulk"):
            return cls.BULK
        return None


class SessionExercise(BaseModel):
    """An exercise performed in a completed session."""

    exercise_id: str
    primary_muscle: Optional[MuscleGroup] = None
    secondary_muscles: List[MuscleGroup] = Field(default_factory=list)

    @field_validator("primary_muscle", mode="before")
    @classmethod
    def parse_primary(cls, v: Any) -> Optional[MuscleGroup]:
        return parse_muscle(v)

    @field_validator("secondary_muscles", mode="before")
    @classmethod
    def parse_secondary(cls, v: Any) -> List[MuscleGroup]:
        if not v:
            return []
        parsed = [parse_muscle(m) for m in v]
        return [m for m in parsed if m is not None]


class CompletedSession(BaseModel):
    """A completed workout session with the exercises it contained."""

    id: str
    completed_at: date
    exercises: List[SessionExercise] = Field(default_factory=list)

    @field_validator("completed_at", mode="before")
    @classmethod
    def parse_completed_at(cls, v: Any) -> Any:
        """Timestamps collapse to their calendar date."""
        if isinstance(v, datetime):
            return v.date()
        if isinstance(v, str) and len(v) > 10:
            text = v[:-1] + "+00:00" if v.endswith("Z") else v
            return datetime.fromisoformat(text).date()
        return v

    @property
    def exercise_ids(self) -> List[str]:
        return [ex.exercise_id for ex in self.exercises]


@dataclass
class MuscleTrainingRecord:
    """Accumulated training for one muscle over the trailing window."""

    muscle: MuscleGroup
    count: float = 0.0
    last_trained: Optional[date] = None

    @property
    def is_untrained(self) -> bool:
        return self.count == 0

    def days_since_trained(self, today: date) -> Optional[int]:
        """Whole days since last trained as primary, None if never in window."""
        if self.last_trained is None:
            return None
        return max((today - self.last_trained).days, 0)
