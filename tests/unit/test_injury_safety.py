"""
Tests for the capability-based injury safety classifier.
"""
from datetime import date

import pytest

from domain.models import ActiveInjury, InjurySeverity, InjurySource, MuscleGroup, SafetyLevel
from domain.services.injury_safety import (
    INJURY_TYPES,
    SafetyReason,
    assess_exercise_safety,
    determine_safety_level,
    merge_injuries,
    resolve_injury_type,
)
from tests.fakes import make_exercise


def injury(region: str, severity: str = "moderate", **kwargs) -> ActiveInjury:
    return ActiveInjury(id=f"inj-{region}", region=region, severity=severity, **kwargs)


@pytest.mark.unit
class TestResolveInjuryType:
    """Tests for resolve_injury_type."""

    def test_injury_type_id(self):
        assert resolve_injury_type("herniated_disc").id == "herniated_disc"

    def test_check_in_region_maps_to_injury_type(self):
        assert resolve_injury_type("lower_back").id == "lower_back_strain"
        assert resolve_injury_type("knee").id == "knee_injury"

    def test_side_suffix_is_ignored(self):
        assert resolve_injury_type("shoulder_left").id == "shoulder_impingement"

    def test_muscle_group_becomes_ad_hoc_type(self):
        injury_type = resolve_injury_type("chest")

        assert injury_type.affected_areas == (MuscleGroup.CHEST,)
        assert injury_type.restricted_loading is None

    def test_unknown_region_is_none(self):
        assert resolve_injury_type("spleen") is None

    def test_catalog_has_twenty_injury_types(self):
        assert len(INJURY_TYPES) == 20


@pytest.mark.unit
class TestAssessExerciseSafety:
    """Tests for assess_exercise_safety."""

    def test_no_injuries_is_safe(self):
        exercise = make_exercise("back-squat", "quads", spinal_loading="high")

        assessment = assess_exercise_safety(exercise, [])

        assert assessment.level == SafetyLevel.SAFE
        assert assessment.reasons == []

    def test_contraindication_is_avoid(self):
        exercise = make_exercise("deadlift", "back", contraindications=["herniated_disc"])

        assessment = assess_exercise_safety(exercise, [injury("herniated_disc", "mild")])

        assert assessment.level == SafetyLevel.AVOID
        assert any(r.kind == "contraindication" for r in assessment.reasons)

    def test_high_spinal_loading_with_lower_back_injury_is_avoid(self):
        exercise = make_exercise("back-squat", "quads", spinal_loading="high")

        assessment = assess_exercise_safety(exercise, [injury("lower_back")])

        assert assessment.level == SafetyLevel.AVOID

    def test_moderate_spinal_loading_with_lower_back_injury_is_caution(self):
        exercise = make_exercise("rdl", "hamstrings", spinal_loading="moderate")

        assessment = assess_exercise_safety(exercise, [injury("lower_back")])

        assert assessment.level == SafetyLevel.CAUTION
        assert assessment.is_caution

    def test_low_spinal_loading_with_lower_back_injury_is_safe(self):
        exercise = make_exercise("leg-curl", "hamstrings", spinal_loading="low")

        assessment = assess_exercise_safety(exercise, [injury("lower_back")])

        assert assessment.level == SafetyLevel.SAFE

    def test_primary_muscle_targeting_is_caution(self):
        exercise = make_exercise("lat-pulldown", "back")

        assessment = assess_exercise_safety(exercise, [injury("lower_back")])

        assert assessment.level == SafetyLevel.CAUTION
        assert [r.kind for r in assessment.reasons] == ["primary_muscle"]

    def test_severe_injury_escalates_to_avoid(self):
        exercise = make_exercise("lat-pulldown", "back")

        assessment = assess_exercise_safety(exercise, [injury("lower_back", "severe")])

        assert assessment.level == SafetyLevel.AVOID

    def test_movement_requirement_is_caution_for_moderate_injury(self):
        exercise = make_exercise("cable-crunch", "abs", requires_spinal_flexion=True)

        assessment = assess_exercise_safety(exercise, [injury("sciatica")])

        assert assessment.level == SafetyLevel.CAUTION
        assert assessment.reasons[0].kind == "movement_requirement"

    def test_position_stress_is_caution(self):
        exercise = make_exercise("leg-extension", "quads", position_stress=["knees"])

        assessment = assess_exercise_safety(exercise, [injury("wrist")])
        assert assessment.level == SafetyLevel.SAFE

        assessment = assess_exercise_safety(exercise, [injury("patellofemoral", "mild")])
        kinds = {r.kind for r in assessment.reasons}
        assert kinds == {"position_stress", "primary_muscle"}
        assert assessment.level == SafetyLevel.CAUTION

    def test_secondary_muscle_is_low_severity(self):
        exercise = make_exercise("bench", "chest", secondary_muscles=["triceps"])

        assessment = assess_exercise_safety(exercise, [injury("triceps")])

        assert assessment.level == SafetyLevel.CAUTION
        assert assessment.reasons[0].severity == "low"

    def test_inactive_injury_is_ignored(self):
        exercise = make_exercise("back-squat", "quads", spinal_loading="high")

        assessment = assess_exercise_safety(exercise, [injury("lower_back", is_active=False)])

        assert assessment.level == SafetyLevel.SAFE

    def test_unknown_region_is_ignored(self):
        exercise = make_exercise("bench", "chest")

        assessment = assess_exercise_safety(exercise, [injury("spleen")])

        assert assessment.level == SafetyLevel.SAFE


@pytest.mark.unit
class TestDetermineSafetyLevel:
    """Tests for determine_safety_level."""

    def test_two_medium_reasons_with_severe_injury_is_avoid(self):
        reasons = [
            SafetyReason("position_stress", "a", "medium"),
            SafetyReason("primary_muscle", "b", "medium"),
        ]

        level = determine_safety_level(reasons, [injury("chest", "severe")])

        assert level == SafetyLevel.AVOID

    def test_two_medium_reasons_without_severe_injury_is_caution(self):
        reasons = [
            SafetyReason("position_stress", "a", "medium"),
            SafetyReason("primary_muscle", "b", "medium"),
        ]

        level = determine_safety_level(reasons, [injury("chest", "moderate")])

        assert level == SafetyLevel.CAUTION


@pytest.mark.unit
class TestMergeInjuries:
    """Tests for merge_injuries."""

    def test_deduplicates_by_region_keeping_first(self):
        check_in = [
            ActiveInjury(
                id="session-1:0", region="lower_back", severity=1,
                started_at=date(2026, 3, 2), source=InjurySource.CHECK_IN,
            )
        ]
        history = [ActiveInjury(id="user:history:lower_back", region="lower_back")]

        merged = merge_injuries(check_in, history)

        assert len(merged) == 1
        assert merged[0].id == "session-1:0"
        assert merged[0].source == InjurySource.CHECK_IN

    def test_keeps_highest_severity(self):
        first = [injury("shoulder", "mild")]
        second = [injury("shoulder", "severe")]

        merged = merge_injuries(first, second)

        assert merged[0].severity == InjurySeverity.SEVERE

    def test_drops_inactive(self):
        merged = merge_injuries([injury("knee", is_active=False)], [injury("wrist")])

        assert [i.region for i in merged] == ["wrist"]
