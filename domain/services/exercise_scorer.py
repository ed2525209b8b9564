"""
Additive exercise scoring.

Every candidate starts at zero and collects points (and a reason string
for each applied factor) from its hypertrophy tier, mechanic, how often
the user picks it, and whether it was done recently or is flagged for
caution.
"""

import logging
from dataclasses import dataclass, field
from datetime import date
from typing import Dict, Iterable, List, Optional, Sequence, Set

from domain.models import CompletedSession, Exercise, HypertrophyTier
from domain.services.candidate_filter import Candidate
from domain.services.config import EngineConfig

logger = logging.getLogger(__name__)

_TIER_REASONS = {
    HypertrophyTier.S: "S-tier for maximum hypertrophy",
    HypertrophyTier.A: "A-tier for excellent hypertrophy",
    HypertrophyTier.B: "B-tier for solid hypertrophy",
    HypertrophyTier.C: "C-tier for moderate hypertrophy",
}

COMPOUND_REASON = "Compound movement (multi-joint)"
FREQUENT_REASON = "One of your go-to exercises"
FAMILIAR_REASON = "Familiar exercise"
RECENT_REASON = "Done recently (variety penalty)"
CAUTION_REASON = "Caution: may stress an injured area"


@dataclass
class ScoredExercise:
    """A candidate with its score and the reasons that produced it."""

    exercise: Exercise
    score: float = 0.0
    reasons: List[str] = field(default_factory=list)
    is_caution: bool = False
    usage_count: int = 0
    is_recent: bool = False


@dataclass
class ScoredPool:
    """Scored candidates split by mechanic, each sorted best first."""

    compounds: List[ScoredExercise] = field(default_factory=list)
    isolations: List[ScoredExercise] = field(default_factory=list)

    @property
    def all(self) -> List[ScoredExercise]:
        return self.compounds + self.isolations


def count_exercise_usage(sessions: Iterable[CompletedSession], since: date) -> Dict[str, int]:
    """Appearances of each exercise in sessions completed on or after ``since``."""
    usage: Dict[str, int] = {}
    for session in sessions:
        if session.completed_at < since:
            continue
        for exercise_id in session.exercise_ids:
            usage[exercise_id] = usage.get(exercise_id, 0) + 1
    return usage


def recent_exercise_ids(sessions: Iterable[CompletedSession], since: date) -> Set[str]:
    """Exercises done in sessions completed on or after ``since``."""
    recent: Set[str] = set()
    for session in sessions:
        if session.completed_at >= since:
            recent.update(session.exercise_ids)
    return recent


def score_exercise(
    candidate: Candidate,
    usage: Dict[str, int],
    recent: Set[str],
    config: EngineConfig,
) -> ScoredExercise:
    """
    Score a single candidate.

    Args:
        candidate: Filtered candidate (carries the caution flag)
        usage: Exercise id -> uses over the frequency window
        recent: Exercise ids done within the recency window
        config: Point values

    Returns:
        ScoredExercise with reasons in the order the factors were applied
    """
    exercise = candidate.exercise
    scored = ScoredExercise(
        exercise=exercise,
        is_caution=candidate.is_caution,
        usage_count=usage.get(exercise.id, 0),
        is_recent=exercise.id in recent,
    )

    tier = exercise.hypertrophy_tier
    tier_points = config.tier_points.get(tier, 0)
    if tier_points:
        scored.score += tier_points
        scored.reasons.append(_TIER_REASONS.get(tier, f"{tier.value}-tier exercise"))

    if exercise.is_compound:
        scored.score += config.compound_bonus
        scored.reasons.append(COMPOUND_REASON)

    if not scored.is_recent:
        if scored.usage_count >= config.frequent_choice_min_uses:
            scored.score += config.frequent_choice_bonus
            scored.reasons.append(FREQUENT_REASON)
        elif scored.usage_count >= config.familiar_choice_min_uses:
            scored.score += config.familiar_choice_bonus
            scored.reasons.append(FAMILIAR_REASON)
    else:
        scored.score -= config.recency_penalty
        scored.reasons.append(RECENT_REASON)

    if candidate.is_caution:
        scored.score -= config.caution_penalty
        scored.reasons.append(CAUTION_REASON)

    return scored


def _sort_key(scored: ScoredExercise):
    return (-scored.score, scored.is_caution, scored.exercise.name.lower(), scored.exercise.id)


def score_candidates(
    candidates: Sequence[Candidate],
    usage: Dict[str, int],
    recent: Set[str],
    config: Optional[EngineConfig] = None,
) -> ScoredPool:
    """
    Score every candidate and split the result by mechanic.

    Ties on score go to safe exercises, then by name, then by id, so the
    ordering never depends on catalog order.
    """
    config = config or EngineConfig()
    scored = sorted(
        (score_exercise(candidate, usage, recent, config) for candidate in candidates),
        key=_sort_key,
    )
    pool = ScoredPool(
        compounds=[s for s in scored if s.exercise.is_compound],
        isolations=[s for s in scored if not s.exercise.is_compound],
    )
    logger.debug(f"Scored {len(pool.compounds)} compounds and {len(pool.isolations)} isolations")
    return pool
