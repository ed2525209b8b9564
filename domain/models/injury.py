"""
Injury and safety value objects.
"""

from datetime import date
from enum import Enum
from typing import Any, Literal, Optional

from pydantic import BaseModel, Field, field_validator


class InjurySeverity(str, Enum):
    """
    Injury severity levels.

    - MILD: slight discomfort, can train with modifications
    - MODERATE: noticeable pain, requires significant modifications
    - SEVERE: significant pain, avoid all stress to the area
    """

    MILD = "mild"
    MODERATE = "moderate"
    SEVERE = "severe"

    @property
    def rank(self) -> int:
        return _SEVERITY_RANK[self]

    @classmethod
    def parse(cls, value: Any) -> "InjurySeverity":
        """Parse a severity; the pre-session check-in stores 1/2/3."""
        if isinstance(value, InjurySeverity):
            return value
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            if value >= 3:
                return cls.SEVERE
            if value >= 2:
                return cls.MODERATE
            return cls.MILD
        if isinstance(value, str):
            text = value.strip().lower()
            if text.isdigit():
                return cls.parse(int(text))
            return cls(text)
        raise ValueError(f"Invalid injury severity: {value!r}")


_SEVERITY_RANK = {
    InjurySeverity.MILD: 1,
    InjurySeverity.MODERATE: 2,
    InjurySeverity.SEVERE: 3,
}


class InjurySource(str, Enum):
    """Where an active injury was reported."""

    CHECK_IN = "check_in"
    HISTORY = "history"


class SafetyLevel(str, Enum):
    """Three-valued safety verdict for an exercise against active injuries."""

    SAFE = "safe"
    CAUTION = "caution"
    AVOID = "avoid"


class ActiveInjury(BaseModel):
    """
    An injury the user is currently training around.

    ``region`` is either an injury type id (``lower_back_strain``), a
    check-in body region (``lower_back``, ``shoulder``) or a muscle group
    (``chest``) from the stored injury history.
    """

    id: str
    region: str = Field(..., min_length=1)
    severity: InjurySeverity = InjurySeverity.MODERATE
    is_active: bool = True
    started_at: Optional[date] = None
    affected_side: Optional[Literal["left", "right", "both"]] = None
    source: InjurySource = InjurySource.HISTORY

    @field_validator("region", mode="before")
    @classmethod
    def normalize_region(cls, v: Any) -> Any:
        if isinstance(v, str):
            return v.strip().lower()
        return v

    @field_validator("severity", mode="before")
    @classmethod
    def parse_severity(cls, v: Any) -> InjurySeverity:
        if v is None:
            return InjurySeverity.MODERATE
        return InjurySeverity.parse(v)
