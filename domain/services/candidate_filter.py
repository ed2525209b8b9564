"""
Candidate filtering.

Narrows the catalog to exercises the user can and should do today. Each
step only sees what survived the previous one.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Sequence, Set

from domain.models import ActiveInjury, Exercise, ExercisePreference, MuscleGroup, SafetyLevel
from domain.services.equipment import equipment_matches
from domain.services.injury_safety import SafetyClassifier, SafetyReason, assess_exercise_safety

logger = logging.getLogger(__name__)


@dataclass
class Candidate:
    """An exercise that passed filtering, tagged with its caution status."""

    exercise: Exercise
    is_caution: bool = False
    safety_reasons: List[SafetyReason] = field(default_factory=list)


@dataclass
class FilterResult:
    """Ordered candidates (safe first, then caution) plus exclusion counts."""

    candidates: List[Candidate] = field(default_factory=list)
    excluded_muscle: int = 0
    excluded_preference: int = 0
    excluded_equipment: int = 0
    excluded_injury: int = 0

    @property
    def is_empty(self) -> bool:
        return not self.candidates


def excluded_exercise_ids(preferences: Iterable[ExercisePreference]) -> Set[str]:
    """Ids the user archived or marked do-not-suggest."""
    return {p.exercise_id for p in preferences if p.status.excludes}


def filter_candidates(
    exercises: Iterable[Exercise],
    selected_muscles: Sequence[MuscleGroup],
    preferences: Iterable[ExercisePreference],
    available_equipment: Iterable[str],
    injuries: Sequence[ActiveInjury],
    classifier: Optional[SafetyClassifier] = None,
    strict_equipment: bool = False,
) -> FilterResult:
    """
    Filter the catalog down to suggestion candidates.

    Steps, in order:
    0. Primary muscle must be one of the selected muscles.
    1. Drop archived / do-not-suggest exercises.
    2. Equipment must be available; bodyweight exercises always pass.
    3. Injury safety: drop avoid, keep safe ahead of caution.

    Args:
        exercises: Catalog exercises (order is kept within each pool)
        selected_muscles: Muscles chosen for this session
        preferences: The user's exercise preferences
        available_equipment: Expanded availability set
        injuries: Active injuries
        classifier: Safety classifier; defaults to the capability-based one
        strict_equipment: Use canonical-id equipment matching

    Returns:
        FilterResult with the ordered candidates
    """
    classifier = classifier or assess_exercise_safety
    muscles = set(selected_muscles)
    excluded_ids = excluded_exercise_ids(preferences)
    available = list(available_equipment)
    result = FilterResult()

    safe: List[Candidate] = []
    caution: List[Candidate] = []

    for exercise in exercises:
        if exercise.primary_muscle not in muscles:
            result.excluded_muscle += 1
            continue
        if exercise.id in excluded_ids:
            result.excluded_preference += 1
            continue
        if not exercise.is_bodyweight and not equipment_matches(
            exercise.equipment_required, available, strict=strict_equipment
        ):
            result.excluded_equipment += 1
            continue

        assessment = classifier(exercise, injuries)
        if assessment.level == SafetyLevel.AVOID:
            result.excluded_injury += 1
            continue
        if assessment.level == SafetyLevel.CAUTION:
            caution.append(Candidate(exercise, is_caution=True, safety_reasons=list(assessment.reasons)))
        else:
            safe.append(Candidate(exercise))

    result.candidates = safe + caution

    logger.debug(
        f"Candidate filter: {len(safe)} safe, {len(caution)} caution; excluded "
        f"preference={result.excluded_preference} equipment={result.excluded_equipment} "
        f"injury={result.excluded_injury}"
    )
    return result


def count_by_muscle(result: FilterResult) -> Dict[MuscleGroup, int]:
    """Candidates available per primary muscle."""
    counts: Dict[MuscleGroup, int] = {}
    for candidate in result.candidates:
        muscle = candidate.exercise.primary_muscle
        counts[muscle] = counts.get(muscle, 0) + 1
    return counts
