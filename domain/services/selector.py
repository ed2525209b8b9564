"""
Greedy exercise selection with movement-pattern variety.
"""

import logging
from typing import List, Sequence, Set

from domain.models import ExerciseBudget
from domain.services.exercise_scorer import ScoredExercise

logger = logging.getLogger(__name__)


def _select_from_pool(
    pool: Sequence[ScoredExercise],
    quota: int,
    total_limit: int,
    already_selected: int,
    patterns: Set[str],
) -> List[ScoredExercise]:
    """
    Pick up to ``quota`` exercises from one score-ordered pool.

    A candidate is passed over only when its pattern is taken and some
    later candidate still offers a new pattern. Passed-over candidates
    backfill the quota, in score order, if the first pass comes up short.
    """
    chosen: List[ScoredExercise] = []
    passed_over: List[ScoredExercise] = []

    def room() -> bool:
        return len(chosen) < quota and already_selected + len(chosen) < total_limit

    for index, candidate in enumerate(pool):
        if not room():
            break
        pattern = candidate.exercise.movement_pattern
        if pattern in patterns:
            later_has_new = any(
                other.exercise.movement_pattern not in patterns for other in pool[index + 1:]
            )
            if later_has_new:
                passed_over.append(candidate)
                continue
        chosen.append(candidate)
        patterns.add(pattern)

    for candidate in passed_over:
        if not room():
            break
        chosen.append(candidate)

    return chosen


def select_with_variety(
    compounds: Sequence[ScoredExercise],
    isolations: Sequence[ScoredExercise],
    budget: ExerciseBudget,
) -> List[ScoredExercise]:
    """
    Fill the budget from the scored pools, preferring distinct patterns.

    Compounds are chosen first against the compound quota, then
    isolations against the isolation quota. Both passes share one set of
    already-used movement patterns.

    Args:
        compounds: Compound candidates, best first
        isolations: Isolation candidates, best first
        budget: Exercise budget for the session

    Returns:
        Selected compounds in selection order, then selected isolations
    """
    patterns: Set[str] = set()
    chosen_compounds = _select_from_pool(compounds, budget.compounds, budget.total, 0, patterns)
    chosen_isolations = _select_from_pool(
        isolations, budget.isolations, budget.total, len(chosen_compounds), patterns
    )
    logger.debug(
        f"Selected {len(chosen_compounds)}/{budget.compounds} compounds and "
        f"{len(chosen_isolations)}/{budget.isolations} isolations"
    )
    return chosen_compounds + chosen_isolations
