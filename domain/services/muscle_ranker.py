"""
Muscle-need ranking.

Orders the fixed muscle groups by how much they need training, based on
what the user did over the trailing week, and picks the muscles for the
next session.
"""

import logging
from dataclasses import dataclass, field
from datetime import date, timedelta
from functools import cmp_to_key
from typing import Dict, Iterable, List, Mapping, Optional

from domain.models import CompletedSession, MuscleGroup, MuscleTrainingRecord, SkippedMuscle
from domain.services.config import EngineConfig

logger = logging.getLogger(__name__)

TrainingRecord = Dict[MuscleGroup, MuscleTrainingRecord]


@dataclass
class MuscleSelection:
    """Muscles picked for a session plus the candidates skipped for recovery."""

    selected: List[MuscleGroup]
    skipped: List[SkippedMuscle] = field(default_factory=list)
    ranking: List[MuscleGroup] = field(default_factory=list)


def build_training_record(
    sessions: Iterable[CompletedSession],
    today: date,
    config: Optional[EngineConfig] = None,
) -> TrainingRecord:
    """
    Accumulate per-muscle training counts over the muscle window.

    A primary muscle earns 1.0 per exercise, a secondary muscle earns the
    configured credit (0.5 by default). ``last_trained`` only moves for
    primary work.

    Args:
        sessions: Completed sessions (any window; older ones are ignored)
        today: Reference date for the window
        config: Engine constants

    Returns:
        Record for every muscle group, including untouched ones
    """
    config = config or EngineConfig()
    since = today - timedelta(days=config.muscle_window_days)
    record: TrainingRecord = {m: MuscleTrainingRecord(muscle=m) for m in MuscleGroup}

    for session in sessions:
        if session.completed_at < since or session.completed_at > today:
            continue
        for exercise in session.exercises:
            primary = exercise.primary_muscle
            if primary is not None:
                entry = record[primary]
                entry.count += 1.0
                if entry.last_trained is None or session.completed_at > entry.last_trained:
                    entry.last_trained = session.completed_at
            for secondary in exercise.secondary_muscles:
                if secondary == primary:
                    continue
                record[secondary].count += config.secondary_muscle_credit

    return record


def compare_muscle_need(
    a: MuscleTrainingRecord,
    b: MuscleTrainingRecord,
    antagonists: Mapping[MuscleGroup, MuscleGroup],
) -> int:
    """
    Compare two muscles by training need; negative means ``a`` goes first.

    Rules, first one that discriminates wins:
    1. Untrained beats trained.
    2. Antagonist balance: an untrained muscle beats its trained antagonist.
    3. Lower count beats higher count.
    4. Never trained as primary beats trained; otherwise the one trained
       longer ago goes first.
    5. Equal.
    """
    if a.is_untrained != b.is_untrained:
        return -1 if a.is_untrained else 1

    if antagonists.get(a.muscle) == b.muscle:
        if a.is_untrained and not b.is_untrained:
            return -1
        if b.is_untrained and not a.is_untrained:
            return 1

    if a.count != b.count:
        return -1 if a.count < b.count else 1

    if (a.last_trained is None) != (b.last_trained is None):
        return -1 if a.last_trained is None else 1
    if a.last_trained is not None and b.last_trained is not None:
        if a.last_trained != b.last_trained:
            return -1 if a.last_trained < b.last_trained else 1

    return 0


def rank_muscles(
    record: TrainingRecord,
    config: Optional[EngineConfig] = None,
) -> List[MuscleGroup]:
    """
    Sort all muscle groups, most in need of training first.

    The sort is stable over the enum declaration order, so ties (including
    the no-history case) always resolve the same way.
    """
    config = config or EngineConfig()
    antagonists = config.antagonists
    entries = [record.get(m) or MuscleTrainingRecord(muscle=m) for m in MuscleGroup]
    entries.sort(key=cmp_to_key(lambda a, b: compare_muscle_need(a, b, antagonists)))
    return [entry.muscle for entry in entries]


def muscle_count_for_duration(
    duration_minutes: int,
    config: Optional[EngineConfig] = None,
) -> int:
    """Short sessions train two muscle groups, longer ones three."""
    config = config or EngineConfig()
    return 2 if duration_minutes <= config.short_session_minutes else 3


def describe_days_ago(days: int) -> str:
    if days <= 0:
        return "trained today"
    if days == 1:
        return "trained 1 day ago"
    return f"trained {days} days ago"


def select_muscles(
    ranking: List[MuscleGroup],
    record: TrainingRecord,
    duration_minutes: int,
    today: date,
    config: Optional[EngineConfig] = None,
) -> MuscleSelection:
    """
    Take muscles from the front of the ranking, holding back unrecovered ones.

    A muscle trained as primary within ``min_recovery_days`` is not
    selected. When that happens inside the first ``count + lookahead``
    ranked positions it is reported as skipped. If too few recovered
    muscles exist, the best skipped ones are used after all.
    """
    config = config or EngineConfig()
    count = muscle_count_for_duration(duration_minutes, config)
    window = count + config.skipped_lookahead

    selected: List[MuscleGroup] = []
    skipped: List[SkippedMuscle] = []
    held_back: List[MuscleGroup] = []

    for position, muscle in enumerate(ranking):
        if len(selected) >= count and position >= window:
            break
        days = record[muscle].days_since_trained(today)
        if days is not None and days < config.min_recovery_days:
            held_back.append(muscle)
            if position < window:
                skipped.append(SkippedMuscle(muscle=muscle, reason=describe_days_ago(days)))
            continue
        if len(selected) < count:
            selected.append(muscle)

    # Not enough recovered muscles: fall back to the best unrecovered ones
    for muscle in held_back:
        if len(selected) >= count:
            break
        selected.append(muscle)
        skipped = [s for s in skipped if s.muscle != muscle]

    logger.debug(
        "Muscle selection: selected=%s skipped=%s",
        [m.value for m in selected],
        [s.muscle.value for s in skipped],
    )
    return MuscleSelection(selected=selected, skipped=skipped, ranking=list(ranking))
