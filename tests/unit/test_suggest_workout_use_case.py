"""
Tests for SuggestWorkoutUseCase.
"""
from datetime import date, timedelta
from unittest.mock import MagicMock

import pytest

from application.exceptions import RepositoryError
from application.use_cases import (
    ERROR_INTERNAL,
    ERROR_NO_EXERCISES,
    ERROR_UNAUTHENTICATED,
    SuggestWorkoutUseCase,
)
from domain.models import ActiveInjury, InjurySource, MuscleGroup
from domain.services import WorkoutSuggestionEngine
from tests.fakes import (
    FakeEquipmentRepository,
    FakeExerciseRepository,
    FakeHistoryRepository,
    FakeInjuryRepository,
    FakePreferenceRepository,
    FakeProfileRepository,
    create_catalog,
    make_session,
)

TODAY = date(2026, 3, 2)
USER = "user-123"


class TestSuggestWorkoutUseCase:
    """Tests for SuggestWorkoutUseCase."""

    @pytest.fixture
    def repos(self):
        return {
            "exercise_repo": FakeExerciseRepository(create_catalog()),
            "history_repo": FakeHistoryRepository(),
            "equipment_repo": FakeEquipmentRepository(),
            "injury_repo": FakeInjuryRepository(),
            "preference_repo": FakePreferenceRepository(),
            "profile_repo": FakeProfileRepository(),
        }

    @pytest.fixture
    def use_case(self, repos):
        return SuggestWorkoutUseCase(**repos)

    @pytest.mark.unit
    def test_missing_user_returns_sign_in_error_without_queries(self, repos):
        repos["exercise_repo"] = MagicMock()
        repos["history_repo"] = MagicMock()
        use_case = SuggestWorkoutUseCase(**repos)

        result = use_case.execute(user_id=None, duration_minutes=45, today=TODAY)

        assert result.success is False
        assert result.error == "You need to be signed in to get a workout suggestion."
        assert result.error_code == ERROR_UNAUTHENTICATED
        repos["exercise_repo"].get_by_primary_muscles.assert_not_called()
        repos["history_repo"].get_completed_sessions.assert_not_called()

    @pytest.mark.unit
    def test_new_user_gets_suggestion(self, use_case):
        result = use_case.execute(user_id=USER, duration_minutes=45, today=TODAY)

        assert result.success is True
        assert result.error is None
        assert result.suggestion.selected_muscles == [MuscleGroup.CHEST, MuscleGroup.BACK]
        assert len(result.suggestion.selected_exercise_ids) == 5
        assert result.degraded_sources == []

    @pytest.mark.unit
    def test_catalog_is_queried_for_selected_muscles_only(self, use_case, repos):
        use_case.execute(user_id=USER, duration_minutes=60, today=TODAY)

        assert repos["exercise_repo"].requested_muscles == [
            [MuscleGroup.CHEST, MuscleGroup.BACK, MuscleGroup.SHOULDERS]
        ]

    @pytest.mark.unit
    def test_history_window_covers_frequency_window(self, use_case, repos):
        use_case.execute(user_id=USER, duration_minutes=45, today=TODAY)

        assert repos["history_repo"].requested_since == [TODAY - timedelta(days=90)]

    @pytest.mark.unit
    def test_history_drives_muscle_selection(self, use_case, repos):
        repos["history_repo"].seed(
            USER,
            [
                make_session(f"s{n}", TODAY - timedelta(days=n), [("barbell-bench-press", "chest", [])])
                for n in (3, 4, 5)
            ],
        )

        result = use_case.execute(user_id=USER, duration_minutes=45, today=TODAY)

        assert MuscleGroup.BACK in result.suggestion.selected_muscles
        assert MuscleGroup.CHEST not in result.suggestion.selected_muscles

    @pytest.mark.unit
    def test_goal_from_profile_sets_rest_periods(self, use_case, repos):
        repos["profile_repo"].seed(USER, "slow_cut")

        result = use_case.execute(user_id=USER, duration_minutes=45, today=TODAY)

        compound_rest = {p.rest_seconds for p in result.suggestion.prescriptions if p.include_warmup}
        assert compound_rest == {120}

    @pytest.mark.unit
    def test_default_location_equipment_is_used(self, use_case, repos):
        repos["equipment_repo"].seed(USER, ["dumbbells"], location_id="home", is_default=True)
        repos["equipment_repo"].seed(USER, ["barbell", "cable_machine"], location_id="gym")

        result = use_case.execute(user_id=USER, duration_minutes=45, today=TODAY)

        assert set(result.suggestion.selected_exercise_ids) == {
            "incline-dumbbell-press",
            "chest-supported-row",
            "push-up",
        }

    @pytest.mark.unit
    def test_explicit_location_overrides_default(self, use_case, repos):
        repos["equipment_repo"].seed(USER, ["dumbbells"], location_id="home", is_default=True)
        repos["equipment_repo"].seed(USER, ["cable_machine"], location_id="gym")

        result = use_case.execute(
            user_id=USER, duration_minutes=45, location_id="gym", today=TODAY
        )

        assert "lat-pulldown" in result.suggestion.selected_exercise_ids
        assert "incline-dumbbell-press" not in result.suggestion.selected_exercise_ids

    @pytest.mark.unit
    def test_check_in_and_history_injuries_are_merged(self, use_case, repos):
        repos["injury_repo"].seed_check_in(
            USER,
            [
                ActiveInjury(
                    id="session-1:0", region="lower_back", severity=2,
                    started_at=TODAY, source=InjurySource.CHECK_IN,
                )
            ],
        )
        repos["injury_repo"].seed_history(USER, ["lower_back"])

        result = use_case.execute(user_id=USER, duration_minutes=45, today=TODAY)

        assert "conventional-deadlift" not in result.suggestion.selected_exercise_ids
        assert any(e.is_caution for e in result.suggestion.explanations)

    @pytest.mark.unit
    def test_latest_check_in_applies_however_old(self, use_case, repos):
        repos["injury_repo"].seed_check_in(
            USER,
            [
                ActiveInjury(
                    id="session-0:0", region="lower_back",
                    started_at=TODAY - timedelta(days=10), source=InjurySource.CHECK_IN,
                )
            ],
        )

        result = use_case.execute(user_id=USER, duration_minutes=45, today=TODAY)

        assert result.success is True
        assert "conventional-deadlift" not in result.suggestion.selected_exercise_ids
        assert any(e.is_caution for e in result.suggestion.explanations)

    @pytest.mark.unit
    def test_only_latest_check_in_is_read(self, use_case, repos):
        repos["injury_repo"].seed_check_in(
            USER,
            [ActiveInjury(id="session-0:0", region="lower_back", source=InjurySource.CHECK_IN)],
            planned_date=TODAY - timedelta(days=5),
        )
        repos["injury_repo"].seed_check_in(USER, [], planned_date=TODAY - timedelta(days=3))

        result = use_case.execute(user_id=USER, duration_minutes=45, today=TODAY)

        assert not any(e.is_caution for e in result.suggestion.explanations)

    @pytest.mark.unit
    def test_preferences_exclude_exercises(self, use_case, repos):
        repos["preference_repo"].seed(USER, {"lat-pulldown": "archived"})

        result = use_case.execute(user_id=USER, duration_minutes=45, today=TODAY)

        assert "lat-pulldown" not in result.suggestion.selected_exercise_ids

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "repo_name,source",
        [
            ("profile_repo", "goal"),
            ("equipment_repo", "equipment"),
            ("preference_repo", "preferences"),
            ("history_repo", "history"),
        ],
    )
    def test_optional_source_failure_falls_back_to_default(self, use_case, repos, repo_name, source):
        repos[repo_name].error = RepositoryError(source, "connection reset")

        result = use_case.execute(user_id=USER, duration_minutes=45, today=TODAY)

        assert result.success is True
        assert result.degraded_sources == [source]
        assert result.suggestion.selected_muscles == [MuscleGroup.CHEST, MuscleGroup.BACK]

    @pytest.mark.unit
    def test_injury_source_failures_fall_back_to_no_injuries(self, use_case, repos):
        repos["injury_repo"].error = RepositoryError("check_in_injuries", "timeout")
        repos["injury_repo"].history_error = RepositoryError("injury_history", "timeout")

        result = use_case.execute(user_id=USER, duration_minutes=45, today=TODAY)

        assert result.success is True
        assert result.degraded_sources == ["check_in_injuries", "injury_history"]

    @pytest.mark.unit
    def test_soft_failure_is_logged(self, use_case, repos, caplog):
        repos["profile_repo"].error = RepositoryError("goal", "connection reset")

        with caplog.at_level("WARNING"):
            use_case.execute(user_id=USER, duration_minutes=45, today=TODAY)

        assert "Failed to load goal" in caplog.text

    @pytest.mark.unit
    def test_no_candidates_returns_no_exercises_message(self, repos):
        repos["exercise_repo"] = FakeExerciseRepository([])
        use_case = SuggestWorkoutUseCase(**repos)

        result = use_case.execute(user_id=USER, duration_minutes=45, today=TODAY)

        assert result.success is False
        assert result.error_code == ERROR_NO_EXERCISES
        assert result.error == (
            "No exercises found for the suggested muscles. "
            "Try adjusting your equipment or preferences."
        )

    @pytest.mark.unit
    def test_catalog_failure_returns_generic_error(self, use_case, repos, caplog):
        repos["exercise_repo"].error = RepositoryError("exercises", "connection reset")

        with caplog.at_level("ERROR"):
            result = use_case.execute(user_id=USER, duration_minutes=45, today=TODAY)

        assert result.success is False
        assert result.error_code == ERROR_INTERNAL
        assert result.error == (
            "Something went wrong while building your workout suggestion. Please try again."
        )
        assert "Failed to build workout suggestion" in caplog.text

    @pytest.mark.unit
    def test_engine_failure_returns_generic_error(self, repos):
        engine = MagicMock(spec=WorkoutSuggestionEngine)
        engine.config = WorkoutSuggestionEngine().config
        engine.select_muscles.side_effect = ValueError("boom")
        use_case = SuggestWorkoutUseCase(**repos, engine=engine)

        result = use_case.execute(user_id=USER, duration_minutes=45, today=TODAY)

        assert result.error_code == ERROR_INTERNAL

    @pytest.mark.unit
    def test_each_call_recomputes(self, use_case, repos):
        first = use_case.execute(user_id=USER, duration_minutes=45, today=TODAY)
        repos["preference_repo"].seed(USER, {"incline-dumbbell-press": "do_not_suggest"})

        second = use_case.execute(user_id=USER, duration_minutes=45, today=TODAY)

        assert "incline-dumbbell-press" in first.suggestion.selected_exercise_ids
        assert "incline-dumbbell-press" not in second.suggestion.selected_exercise_ids
