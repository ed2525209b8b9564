"""
Workout suggestion engine.

Runs the pure pipeline for one request:

    training record -> muscle ranking -> muscle selection
    -> candidate filter -> scoring -> time budget -> greedy selection
    -> explanations

The engine performs no I/O and reads no clock; everything it needs is in
SuggestionInputs, so the same inputs always yield the same suggestion.

Usage:
    >>> engine = WorkoutSuggestionEngine()
    >>> result = engine.suggest(SuggestionInputs(
    ...     exercises=catalog,
    ...     sessions=history,
    ...     duration_minutes=45,
    ...     today=date(2026, 3, 2),
    ... ))
    >>> result.selected_muscles
"""

import logging
from dataclasses import dataclass, field
from datetime import date, timedelta
from typing import List, Optional, Sequence

from domain.models import (
    ActiveInjury,
    CompletedSession,
    Exercise,
    ExercisePreference,
    ExercisePrescription,
    Goal,
    MuscleGroup,
    SuggestionResult,
)
from domain.services.candidate_filter import count_by_muscle, filter_candidates
from domain.services.config import EngineConfig
from domain.services.equipment import DEFAULT_EQUIPMENT
from domain.services.exercise_scorer import (
    ScoredExercise,
    count_exercise_usage,
    recent_exercise_ids,
    score_candidates,
)
from domain.services.explanations import explain_exercise, summary_sentence
from domain.services.injury_safety import SafetyClassifier, assess_exercise_safety
from domain.services.muscle_ranker import (
    MuscleSelection,
    build_training_record,
    rank_muscles,
    select_muscles,
)
from domain.services.selector import select_with_variety
from domain.services.time_budget import (
    DEFAULT_SETS,
    calculate_exercise_budget,
    estimate_exercise_minutes,
    estimate_session_minutes,
    recommended_exercise_range,
    rest_period_seconds,
    warmup_flags,
)

logger = logging.getLogger(__name__)


class NoExercisesFoundError(Exception):
    """Raised when no catalog exercise survives filtering for the selected muscles."""

    def __init__(self, muscles: Sequence[MuscleGroup]):
        self.muscles = list(muscles)
        super().__init__(
            f"No exercises found for muscles: {', '.join(m.value for m in self.muscles)}"
        )


@dataclass
class SuggestionInputs:
    """Everything the engine needs for one suggestion."""

    exercises: Sequence[Exercise]
    duration_minutes: int
    today: date
    sessions: Sequence[CompletedSession] = field(default_factory=list)
    goal: Goal = Goal.MAINTAIN
    available_equipment: Optional[Sequence[str]] = None
    injuries: Sequence[ActiveInjury] = field(default_factory=list)
    preferences: Sequence[ExercisePreference] = field(default_factory=list)


class WorkoutSuggestionEngine:
    """
    Builds a workout suggestion from history, catalog and constraints.

    Args:
        config: Tunable constants; defaults to EngineConfig()
        classifier: Injury safety classifier; defaults to the
            capability-based classifier
    """

    def __init__(
        self,
        config: Optional[EngineConfig] = None,
        classifier: Optional[SafetyClassifier] = None,
    ) -> None:
        self._config = config or EngineConfig()
        self._classifier = classifier or assess_exercise_safety

    @property
    def config(self) -> EngineConfig:
        return self._config

    def select_muscles(self, inputs: SuggestionInputs) -> MuscleSelection:
        """Run only the muscle-need stage (the use case needs it to scope the catalog query)."""
        record = build_training_record(inputs.sessions, inputs.today, self._config)
        ranking = rank_muscles(record, self._config)
        return select_muscles(ranking, record, inputs.duration_minutes, inputs.today, self._config)

    def suggest(self, inputs: SuggestionInputs) -> SuggestionResult:
        """
        Produce a suggestion.

        Args:
            inputs: Catalog, history, constraints and the reference date

        Returns:
            SuggestionResult ready for the API

        Raises:
            NoExercisesFoundError: If nothing survives candidate filtering
        """
        config = self._config
        today = inputs.today

        # 1. Muscle need
        record = build_training_record(inputs.sessions, today, config)
        ranking = rank_muscles(record, config)
        selection = select_muscles(ranking, record, inputs.duration_minutes, today, config)

        # 2. Candidates
        available = (
            list(inputs.available_equipment)
            if inputs.available_equipment
            else sorted(DEFAULT_EQUIPMENT)
        )
        filtered = filter_candidates(
            inputs.exercises,
            selection.selected,
            inputs.preferences,
            available,
            inputs.injuries,
            classifier=self._classifier,
            strict_equipment=config.strict_equipment_matching,
        )
        if filtered.is_empty:
            raise NoExercisesFoundError(selection.selected)
        per_muscle = {m.value: n for m, n in count_by_muscle(filtered).items()}
        logger.debug(f"Candidates per muscle: {per_muscle}")

        # 3. Scoring
        usage = count_exercise_usage(
            inputs.sessions, today - timedelta(days=config.frequency_window_days)
        )
        recent = recent_exercise_ids(
            inputs.sessions, today - timedelta(days=config.recency_window_days)
        )
        pool = score_candidates(filtered.candidates, usage, recent, config)

        # 4. Budget and selection
        budget = calculate_exercise_budget(inputs.duration_minutes, inputs.goal)
        chosen = select_with_variety(pool.compounds, pool.isolations, budget)

        # 5. Reporting
        exercises = [s.exercise for s in chosen]
        estimated = estimate_session_minutes(exercises, inputs.goal)
        explanations = [explain_exercise(s, record, today, config) for s in chosen]
        low, high = recommended_exercise_range(inputs.duration_minutes)

        logger.info(
            f"Suggested {len(chosen)} exercises for {[m.value for m in selection.selected]} "
            f"({inputs.duration_minutes} min, goal={inputs.goal.value}, ~{estimated:.1f} min estimated)"
        )

        return SuggestionResult(
            selected_muscles=selection.selected,
            selected_exercise_ids=[e.id for e in exercises],
            reason=summary_sentence(
                len(chosen), selection.selected, inputs.duration_minutes, estimated
            ),
            explanations=explanations,
            skipped_muscles=selection.skipped,
            prescriptions=self._prescriptions(chosen, inputs.goal),
            budget=budget,
            estimated_minutes=round(estimated),
            recommended_exercise_range=[low, high],
        )

    def _prescriptions(self, chosen: List[ScoredExercise], goal: Goal) -> List[ExercisePrescription]:
        exercises = [s.exercise for s in chosen]
        return [
            ExercisePrescription(
                exercise_id=exercise.id,
                target_sets=DEFAULT_SETS,
                rest_seconds=rest_period_seconds(exercise.mechanic, goal),
                include_warmup=warmup,
                estimated_minutes=round(
                    estimate_exercise_minutes(exercise.mechanic, goal, include_warmup=warmup), 1
                ),
            )
            for exercise, warmup in zip(exercises, warmup_flags(exercises))
        ]
