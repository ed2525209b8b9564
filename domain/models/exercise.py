"""
Exercise catalog value object.

An Exercise is a read-only catalog entry. It carries everything the
suggestion engine needs: the muscle it trains, how it is classified
(mechanic, movement pattern, hypertrophy tier), what equipment it needs,
and the capability attributes the injury-safety classifier inspects.
"""

from enum import Enum
from typing import Any, List, Optional, Set

from pydantic import BaseModel, ConfigDict, Field, field_validator


class MuscleGroup(str, Enum):
    """
    Trainable muscle groups.

    Declaration order is the canonical order used to break ties when
    ranking muscles, so it must stay stable.
    """

    CHEST = "chest"
    BACK = "back"
    SHOULDERS = "shoulders"
    QUADS = "quads"
    HAMSTRINGS = "hamstrings"
    BICEPS = "biceps"
    TRICEPS = "triceps"
    GLUTES = "glutes"
    CALVES = "calves"
    ABS = "abs"


class Mechanic(str, Enum):
    """Joint involvement of an exercise."""

    COMPOUND = "compound"
    ISOLATION = "isolation"


class HypertrophyTier(str, Enum):
    """Ordinal muscle-growth rating, S best through F worst."""

    S = "S"
    A = "A"
    B = "B"
    C = "C"
    D = "D"
    F = "F"


class SpinalLoading(str, Enum):
    """Axial load the exercise places on the spine."""

    NONE = "none"
    LOW = "low"
    MODERATE = "moderate"
    HIGH = "high"


# Body areas an exercise can put positional stress on
POSITION_STRESS_AREAS = frozenset(
    {
        "lower_back",
        "upper_back",
        "shoulders",
        "knees",
        "wrists",
        "elbows",
        "hips",
        "neck",
    }
)


def _as_list(value: Any) -> List[Any]:
    """Coerce null / comma-separated / scalar values into a list."""
    if value is None:
        return []
    if isinstance(value, str):
        return [part.strip() for part in value.split(",") if part.strip()]
    if isinstance(value, (list, tuple, set, frozenset)):
        return [item for item in value if item is not None and item != ""]
    return [value]


class Exercise(BaseModel):
    """
    Catalog entry for a single exercise.

    Examples:
        >>> bench = Exercise(
        ...     id="barbell-bench-press",
        ...     name="Barbell Bench Press",
        ...     primary_muscle="chest",
        ...     secondary_muscles=["triceps", "shoulders"],
        ...     mechanic="compound",
        ...     movement_pattern="horizontal_push",
        ...     hypertrophy_tier="A",
        ...     equipment_required=["barbell", "bench"],
        ... )
        >>> bench.is_compound
        True
    """

    model_config = ConfigDict(frozen=True)

    # Identity
    id: str = Field(..., min_length=1, description="Exercise identifier")
    name: str = Field(..., min_length=1, description="Display name")

    # Classification
    primary_muscle: MuscleGroup
    secondary_muscles: List[MuscleGroup] = Field(default_factory=list)
    mechanic: Mechanic = Mechanic.COMPOUND
    movement_pattern: str = Field(
        default="",
        description="Categorical movement tag (push, pull, hinge, squat, ...)",
    )
    hypertrophy_tier: HypertrophyTier = HypertrophyTier.C

    # Equipment (OR-matched against what is available)
    equipment_required: List[str] = Field(default_factory=list)
    is_bodyweight: bool = False

    # Safety capability attributes
    spinal_loading: SpinalLoading = SpinalLoading.NONE
    requires_back_arch: bool = False
    requires_spinal_flexion: bool = False
    requires_spinal_extension: bool = False
    requires_spinal_rotation: bool = False
    position_stress: Set[str] = Field(default_factory=set)
    stabilizers: List[MuscleGroup] = Field(default_factory=list)
    contraindications: List[str] = Field(
        default_factory=list,
        description="Injury type ids this exercise must never be suggested for",
    )

    @field_validator("secondary_muscles", "stabilizers", mode="before")
    @classmethod
    def normalize_muscle_list(cls, v: Any) -> List[MuscleGroup]:
        """Accept null and mixed-case muscle lists; drop muscles outside the fixed set."""
        muscles = []
        for item in _as_list(v):
            muscle = parse_muscle(item)
            if muscle is not None and muscle not in muscles:
                muscles.append(muscle)
        return muscles

    @field_validator("primary_muscle", mode="before")
    @classmethod
    def normalize_primary_muscle(cls, v: Any) -> Any:
        if isinstance(v, str):
            return v.strip().lower()
        return v

    @field_validator("mechanic", mode="before")
    @classmethod
    def normalize_mechanic(cls, v: Any) -> Any:
        if v is None:
            return Mechanic.COMPOUND
        if isinstance(v, str):
            return v.strip().lower()
        return v

    @field_validator("spinal_loading", mode="before")
    @classmethod
    def normalize_spinal_loading(cls, v: Any) -> Any:
        if v is None:
            return SpinalLoading.NONE
        if isinstance(v, str):
            return v.strip().lower()
        return v

    @field_validator("hypertrophy_tier", mode="before")
    @classmethod
    def normalize_tier(cls, v: Any) -> Any:
        """Tiers arrive as 'a', 'A', or nested {'tier': 'A'} objects."""
        if v is None:
            return HypertrophyTier.C
        if isinstance(v, dict):
            v = v.get("tier")
        if isinstance(v, str):
            return v.strip().upper() or HypertrophyTier.C
        return v

    @field_validator("equipment_required", "contraindications", mode="before")
    @classmethod
    def normalize_string_list(cls, v: Any) -> List[str]:
        return [str(item).strip().lower() for item in _as_list(v)]

    @field_validator("position_stress", mode="before")
    @classmethod
    def normalize_position_stress(cls, v: Any) -> Set[str]:
        """Accept either a list of areas or a {area: bool} mapping."""
        if isinstance(v, dict):
            items = [area for area, stressed in v.items() if stressed]
        else:
            items = _as_list(v)
        areas = set()
        for area in items:
            key = _camel_to_snake(str(area).strip())
            if key in POSITION_STRESS_AREAS:
                areas.add(key)
        return areas

    @field_validator("movement_pattern", mode="before")
    @classmethod
    def normalize_pattern(cls, v: Any) -> str:
        if v is None:
            return ""
        return str(v).strip().lower()

    @property
    def is_compound(self) -> bool:
        """Check if this is a multi-joint exercise."""
        return self.mechanic == Mechanic.COMPOUND

    @property
    def is_isolation(self) -> bool:
        """Check if this is a single-joint exercise."""
        return self.mechanic == Mechanic.ISOLATION

    def trains(self, muscle: MuscleGroup) -> bool:
        """Check if the muscle is worked as primary or secondary."""
        return muscle == self.primary_muscle or muscle in self.secondary_muscles


def _camel_to_snake(value: str) -> str:
    """lowerBack -> lower_back."""
    out: List[str] = []
    for ch in value:
        if ch.isupper():
            out.append("_")
            out.append(ch.lower())
        else:
            out.append(ch)
    return "".join(out).lstrip("_")


def parse_muscle(value: Any) -> Optional[MuscleGroup]:
    """Parse a muscle group, returning None for unknown values."""
    if isinstance(value, MuscleGroup):
        return value
    if not isinstance(value, str):
        return None
    try:
        return MuscleGroup(value.strip().lower())
    except ValueError:
        return None
