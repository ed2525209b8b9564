"""
Suggestion output value objects.

These models are what the engine hands back to the API layer. They are
serialized as-is in the ``POST /suggestions`` response.
"""

from typing import List

from pydantic import BaseModel, Field

from domain.models.exercise import Mechanic, MuscleGroup


class ExerciseBudget(BaseModel):
    """How many exercises fit the requested session duration."""

    compounds: int = Field(ge=0)
    isolations: int = Field(ge=0)
    total: int = Field(ge=0)


class SkippedMuscle(BaseModel):
    """A top candidate muscle that was left out, with the reason."""

    muscle: MuscleGroup
    reason: str


class ExercisePrescription(BaseModel):
    """Starting targets the UI pre-fills when the user accepts a suggestion."""

    exercise_id: str
    target_sets: int = Field(ge=1)
    rest_seconds: int = Field(ge=0)
    include_warmup: bool = False
    estimated_minutes: float = Field(ge=0)


class ExerciseExplanation(BaseModel):
    """Why a single exercise was picked."""

    exercise_id: str
    name: str
    muscle: MuscleGroup
    mechanic: Mechanic
    score: float
    is_caution: bool = False
    reasons: List[str] = Field(default_factory=list)

    @property
    def text(self) -> str:
        """Reasons joined into a single paragraph."""
        return " ".join(_as_sentence(r) for r in self.reasons)


class SuggestionResult(BaseModel):
    """
    Complete output of one suggestion run.

    ``selected_exercise_ids`` lists compounds first (in selection order)
    followed by isolations.
    """

    selected_muscles: List[MuscleGroup]
    selected_exercise_ids: List[str]
    reason: str
    explanations: List[ExerciseExplanation] = Field(default_factory=list)
    skipped_muscles: List[SkippedMuscle] = Field(default_factory=list)
    prescriptions: List[ExercisePrescription] = Field(default_factory=list)
    budget: ExerciseBudget
    estimated_minutes: int = Field(ge=0)
    recommended_exercise_range: List[int] = Field(
        default_factory=list,
        description="[min, max] exercise count shown to the user",
    )


def _as_sentence(text: str) -> str:
    text = text.strip()
    if not text or text[-1] in ".!?":
        return text
    return f"{text}."
