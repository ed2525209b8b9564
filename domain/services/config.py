"""
Tunable constants for the suggestion engine.

The secondary-muscle credit, the antagonist table and the scoring points
are hand-tuned. They live here so they can be overridden from settings or
in tests instead of being scattered through the scoring code.
"""

from dataclasses import dataclass, field
from typing import Dict, Tuple

from domain.models import HypertrophyTier, MuscleGroup


DEFAULT_ANTAGONIST_PAIRS: Tuple[Tuple[MuscleGroup, MuscleGroup], ...] = (
    (MuscleGroup.BICEPS, MuscleGroup.TRICEPS),
    (MuscleGroup.CHEST, MuscleGroup.BACK),
    (MuscleGroup.QUADS, MuscleGroup.HAMSTRINGS),
)

DEFAULT_TIER_POINTS: Dict[HypertrophyTier, int] = {
    HypertrophyTier.S: 50,
    HypertrophyTier.A: 40,
    HypertrophyTier.B: 25,
    HypertrophyTier.C: 10,
    HypertrophyTier.D: 0,
    HypertrophyTier.F: 0,
}


@dataclass(frozen=True)
class EngineConfig:
    """Constants used across the engine stages."""

    # History windows (days)
    muscle_window_days: int = 7
    recency_window_days: int = 4
    frequency_window_days: int = 90

    # Muscle need
    secondary_muscle_credit: float = 0.5
    min_recovery_days: int = 2
    skipped_lookahead: int = 3
    short_session_minutes: int = 45
    antagonist_pairs: Tuple[Tuple[MuscleGroup, MuscleGroup], ...] = DEFAULT_ANTAGONIST_PAIRS

    # Scoring
    tier_points: Dict[HypertrophyTier, int] = field(
        default_factory=lambda: dict(DEFAULT_TIER_POINTS)
    )
    compound_bonus: int = 15
    frequent_choice_bonus: int = 10
    frequent_choice_min_uses: int = 3
    familiar_choice_bonus: int = 5
    familiar_choice_min_uses: int = 2
    recency_penalty: int = 20
    caution_penalty: int = 15

    # Equipment
    strict_equipment_matching: bool = False

    @property
    def antagonists(self) -> Dict[MuscleGroup, MuscleGroup]:
        """Symmetric muscle -> antagonist lookup."""
        lookup: Dict[MuscleGroup, MuscleGroup] = {}
        for first, second in self.antagonist_pairs:
            lookup[first] = second
            lookup[second] = first
        return lookup
