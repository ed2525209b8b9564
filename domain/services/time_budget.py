"""
Session time estimation.

Rest periods depend on the exercise mechanic and the user's goal. From
those, the per-exercise duration and the number of exercises that fit a
requested session length are derived.
"""

import math
from typing import Iterable, List, Optional, Set, Tuple

from domain.models import Exercise, ExerciseBudget, Goal, Mechanic, MuscleGroup

DEFAULT_SETS = 3
COMPOUND_SET_SECONDS = 50
ISOLATION_SET_SECONDS = 35
WARMUP_SECONDS = 240
TRANSITION_SECONDS = 60

# goal -> (compound rest, isolation rest) in seconds
REST_PERIODS = {
    Goal.CUT: (120, 60),
    Goal.BULK: (180, 90),
    Goal.MAINTAIN: (150, 75),
}


def rest_period_seconds(mechanic: Mechanic, goal: Optional[Goal] = None) -> int:
    """Rest between sets; unknown goals fall back to maintain."""
    compound_rest, isolation_rest = REST_PERIODS.get(goal or Goal.MAINTAIN, REST_PERIODS[Goal.MAINTAIN])
    return compound_rest if mechanic == Mechanic.COMPOUND else isolation_rest


def estimate_exercise_minutes(
    mechanic: Mechanic,
    goal: Optional[Goal] = None,
    include_warmup: bool = False,
    sets: int = DEFAULT_SETS,
) -> float:
    """
    Estimate how long one exercise takes, in minutes.

    ``((set + rest) * sets - rest + warmup + transition) / 60``. Only
    compounds can carry the warmup allowance.
    """
    is_compound = mechanic == Mechanic.COMPOUND
    set_seconds = COMPOUND_SET_SECONDS if is_compound else ISOLATION_SET_SECONDS
    rest = rest_period_seconds(mechanic, goal)
    warmup = WARMUP_SECONDS if include_warmup and is_compound else 0

    working = (set_seconds + rest) * sets - rest
    return (working + warmup + TRANSITION_SECONDS) / 60


def average_exercise_minutes(goal: Optional[Goal] = None) -> float:
    """Blended per-exercise time used to size a session."""
    with_warmup = estimate_exercise_minutes(Mechanic.COMPOUND, goal, include_warmup=True)
    without_warmup = estimate_exercise_minutes(Mechanic.COMPOUND, goal, include_warmup=False)
    compound_avg = (with_warmup + 2 * without_warmup) / 3
    isolation_avg = estimate_exercise_minutes(Mechanic.ISOLATION, goal)
    return (compound_avg + isolation_avg) / 2


def calculate_exercise_budget(duration_minutes: int, goal: Optional[Goal] = None) -> ExerciseBudget:
    """
    Work out how many compounds and isolations fit the duration.

    At least one compound is always budgeted, so ``total`` can exceed
    the raw estimate for very short sessions.

    Args:
        duration_minutes: Requested session length
        goal: User goal (rest periods)

    Returns:
        ExerciseBudget where total == compounds + isolations
    """
    raw_total = max(0, math.floor(duration_minutes / average_exercise_minutes(goal)))
    compounds = max(1, math.ceil(raw_total / 2))
    isolations = max(0, raw_total - compounds)
    return ExerciseBudget(compounds=compounds, isolations=isolations, total=compounds + isolations)


def recommended_exercise_range(duration_minutes: int) -> Tuple[int, int]:
    """Exercise count range shown to the user, on the maintain baseline."""
    total = calculate_exercise_budget(duration_minutes, Goal.MAINTAIN).total
    return max(1, total - 1), total + 1


def warmup_flags(exercises: Iterable[Exercise]) -> List[bool]:
    """Warmup applies to the first compound for each primary muscle, in order."""
    warmed: Set[MuscleGroup] = set()
    flags: List[bool] = []
    for exercise in exercises:
        needs = exercise.is_compound and exercise.primary_muscle not in warmed
        if needs:
            warmed.add(exercise.primary_muscle)
        flags.append(needs)
    return flags


def estimate_session_minutes(exercises: Iterable[Exercise], goal: Optional[Goal] = None) -> float:
    """Total estimated minutes for exercises performed in the given order."""
    exercises = list(exercises)
    return sum(
        estimate_exercise_minutes(exercise.mechanic, goal, include_warmup=warmup)
        for exercise, warmup in zip(exercises, warmup_flags(exercises))
    )
