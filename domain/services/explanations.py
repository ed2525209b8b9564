"""
Human-readable explanations for a suggestion.

Reporting only: nothing here changes which exercises are selected.
"""

from datetime import date
from typing import List, Optional, Sequence

from domain.models import ExerciseExplanation, MuscleGroup
from domain.services.config import EngineConfig
from domain.services.exercise_scorer import ScoredExercise
from domain.services.muscle_ranker import TrainingRecord


def _format_count(count: float) -> str:
    return f"{count:g}"


def _join_names(names: Sequence[str]) -> str:
    if not names:
        return ""
    if len(names) == 1:
        return names[0]
    return f"{', '.join(names[:-1])} and {names[-1]}"


def muscle_need_sentence(muscle: MuscleGroup, record: TrainingRecord, config: EngineConfig) -> str:
    """Why the muscle was chosen, with an antagonist note when it applies."""
    entry = record[muscle]
    window = config.muscle_window_days

    if entry.is_untrained:
        sentence = f"You haven't trained {muscle.value} in the last {window} days"
        antagonist = config.antagonists.get(muscle)
        if antagonist is not None and not record[antagonist].is_untrained:
            sentence += f", while {antagonist.value} has been trained. This keeps the pair balanced"
        return sentence

    if entry.count < 2:
        return (
            f"{muscle.value.capitalize()} has only been partially trained "
            f"({_format_count(entry.count)} exercises in the last {window} days)"
        )
    return (
        f"{muscle.value.capitalize()} needs more volume "
        f"({_format_count(entry.count)} exercises in the last {window} days)"
    )


def recovery_sentence(muscle: MuscleGroup, record: TrainingRecord, today: date) -> Optional[str]:
    days = record[muscle].days_since_trained(today)
    if days is None or days < 2:
        return None
    return f"Last trained {days} days ago, so {muscle.value} is recovered"


def frequency_note(scored: ScoredExercise, config: EngineConfig) -> str:
    if scored.usage_count == 0:
        return f"New to your rotation in the last {config.frequency_window_days} days"
    times = "time" if scored.usage_count == 1 else "times"
    return f"Done {scored.usage_count} {times} in the last {config.frequency_window_days} days"


def recency_note(scored: ScoredExercise, config: EngineConfig) -> Optional[str]:
    if scored.is_recent or scored.usage_count == 0:
        return None
    return f"Not done in the last {config.recency_window_days} days"


def explain_exercise(
    scored: ScoredExercise,
    record: TrainingRecord,
    today: date,
    config: EngineConfig,
) -> ExerciseExplanation:
    """Build the ordered reason list for one selected exercise."""
    exercise = scored.exercise
    muscle = exercise.primary_muscle

    reasons: List[str] = [muscle_need_sentence(muscle, record, config)]
    recovery = recovery_sentence(muscle, record, today)
    if recovery:
        reasons.append(recovery)
    reasons.extend(scored.reasons)
    reasons.append(frequency_note(scored, config))
    recency = recency_note(scored, config)
    if recency:
        reasons.append(recency)

    return ExerciseExplanation(
        exercise_id=exercise.id,
        name=exercise.name,
        muscle=muscle,
        mechanic=exercise.mechanic,
        score=scored.score,
        is_caution=scored.is_caution,
        reasons=reasons,
    )


def summary_sentence(
    exercise_count: int,
    muscles: Sequence[MuscleGroup],
    duration_minutes: int,
    estimated_minutes: float,
) -> str:
    """e.g. "5 exercises targeting back, chest and biceps for your 45-minute workout (~44 min estimated)." """
    noun = "exercise" if exercise_count == 1 else "exercises"
    return (
        f"{exercise_count} {noun} targeting {_join_names([m.value for m in muscles])} "
        f"for your {duration_minutes}-minute workout (~{round(estimated_minutes)} min estimated)."
    )
