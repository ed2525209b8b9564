"""
Fake Repository Implementations for Testing.

This package provides in-memory fake implementations of repository interfaces
for fast, isolated testing. No database or external dependencies required.

Features:
- All fakes implement the same Protocol interfaces as real implementations
- Supports seeding with test data
- Supports reset() for test isolation
- Setting ``error`` on a fake makes its queries raise, for soft-failure tests
- Factory functions for common test scenarios

Usage:
    from tests.fakes import FakeExerciseRepository, create_catalog

    repo = FakeExerciseRepository(create_catalog())
    repo.error = RepositoryError("exercises", "connection reset")
"""
from datetime import date
from typing import Any, List, Optional, Sequence, Tuple

from domain.models import CompletedSession, Exercise, SessionExercise

from tests.fakes.equipment_repository import FakeEquipmentRepository
from tests.fakes.exercise_repository import FakeExerciseRepository
from tests.fakes.history_repository import FakeHistoryRepository
from tests.fakes.injury_repository import FakeInjuryRepository
from tests.fakes.preference_repository import FakePreferenceRepository
from tests.fakes.profile_repository import FakeProfileRepository


# =============================================================================
# Factory Functions
# =============================================================================


def make_exercise(id: str, primary_muscle: str, **overrides: Any) -> Exercise:
    """
    Build an Exercise with sensible defaults.

    Args:
        id: Exercise id; the display name is derived from it
        primary_muscle: Primary muscle value
        **overrides: Any other Exercise field

    Returns:
        Exercise (compound, C-tier, no equipment unless overridden)
    """
    data = {
        "id": id,
        "name": id.replace("-", " ").title(),
        "primary_muscle": primary_muscle,
        "mechanic": "compound",
        "movement_pattern": id,
        "hypertrophy_tier": "C",
    }
    data.update(overrides)
    return Exercise.model_validate(data)


def make_session(
    session_id: str,
    completed_at: date,
    exercises: Sequence[Tuple[str, Optional[str], Sequence[str]]],
) -> CompletedSession:
    """
    Build a completed session.

    Args:
        session_id: Session id
        completed_at: Completion date
        exercises: (exercise_id, primary_muscle, secondary_muscles) tuples
    """
    return CompletedSession(
        id=session_id,
        completed_at=completed_at,
        exercises=[
            SessionExercise(
                exercise_id=exercise_id,
                primary_muscle=primary,
                secondary_muscles=list(secondaries),
            )
            for exercise_id, primary, secondaries in exercises
        ],
    )


def create_catalog() -> List[Exercise]:
    """
    Return a small catalog covering every muscle group.

    Chest and back each have an S-tier and several A-tier compounds with
    distinct movement patterns, plus one isolation.
    """
    return [
        # Chest
        make_exercise(
            "barbell-bench-press", "chest",
            name="Barbell Bench Press", hypertrophy_tier="A",
            movement_pattern="horizontal_push",
            secondary_muscles=["triceps", "shoulders"],
            equipment_required=["barbell", "bench"],
            position_stress=["shoulders"],
        ),
        make_exercise(
            "incline-dumbbell-press", "chest",
            name="Incline Dumbbell Press", hypertrophy_tier="S",
            movement_pattern="incline_push",
            secondary_muscles=["shoulders", "triceps"],
            equipment_required=["dumbbell", "incline bench"],
        ),
        make_exercise(
            "chest-press-machine", "chest",
            name="Chest Press Machine", hypertrophy_tier="B",
            movement_pattern="horizontal_push",
            secondary_muscles=["triceps"],
            equipment_required=["chest press machine"],
        ),
        make_exercise(
            "cable-fly", "chest",
            name="Cable Fly", hypertrophy_tier="A", mechanic="isolation",
            movement_pattern="fly",
            equipment_required=["cable"],
        ),
        make_exercise(
            "push-up", "chest",
            name="Push-Up", hypertrophy_tier="C",
            movement_pattern="horizontal_push",
            secondary_muscles=["triceps"],
            is_bodyweight=True,
        ),
        # Back
        make_exercise(
            "barbell-row", "back",
            name="Barbell Row", hypertrophy_tier="A",
            movement_pattern="horizontal_pull",
            secondary_muscles=["biceps"],
            equipment_required=["barbell"],
            spinal_loading="moderate",
        ),
        make_exercise(
            "lat-pulldown", "back",
            name="Lat Pulldown", hypertrophy_tier="S",
            movement_pattern="vertical_pull",
            secondary_muscles=["biceps"],
            equipment_required=["cable"],
        ),
        make_exercise(
            "conventional-deadlift", "back",
            name="Conventional Deadlift", hypertrophy_tier="A",
            movement_pattern="hinge",
            secondary_muscles=["glutes", "hamstrings"],
            equipment_required=["barbell"],
            spinal_loading="high",
            contraindications=["herniated_disc"],
        ),
        make_exercise(
            "chest-supported-row", "back",
            name="Chest-Supported Row", hypertrophy_tier="A",
            movement_pattern="horizontal_pull",
            secondary_muscles=["biceps"],
            equipment_required=["dumbbell", "incline bench"],
        ),
        make_exercise(
            "straight-arm-pulldown", "back",
            name="Straight-Arm Pulldown", hypertrophy_tier="B", mechanic="isolation",
            movement_pattern="pullover",
            equipment_required=["cable"],
        ),
        # Shoulders
        make_exercise(
            "overhead-press", "shoulders",
            name="Overhead Press", hypertrophy_tier="A",
            movement_pattern="vertical_push",
            secondary_muscles=["triceps"],
            equipment_required=["barbell"],
            spinal_loading="moderate",
            position_stress=["shoulders"],
        ),
        make_exercise(
            "lateral-raise", "shoulders",
            name="Lateral Raise", hypertrophy_tier="S", mechanic="isolation",
            movement_pattern="lateral_raise",
            equipment_required=["dumbbell"],
        ),
        # Quads
        make_exercise(
            "back-squat", "quads",
            name="Back Squat", hypertrophy_tier="S",
            movement_pattern="squat",
            secondary_muscles=["glutes"],
            equipment_required=["barbell", "squat rack"],
            spinal_loading="high",
            position_stress=["knees", "lower_back"],
        ),
        make_exercise(
            "leg-press", "quads",
            name="Leg Press", hypertrophy_tier="A",
            movement_pattern="leg_press",
            secondary_muscles=["glutes"],
            equipment_required=["leg press machine"],
        ),
        make_exercise(
            "leg-extension", "quads",
            name="Leg Extension", hypertrophy_tier="B", mechanic="isolation",
            movement_pattern="knee_extension",
            equipment_required=["machine"],
            position_stress=["knees"],
        ),
        # Hamstrings
        make_exercise(
            "romanian-deadlift", "hamstrings",
            name="Romanian Deadlift", hypertrophy_tier="S",
            movement_pattern="hinge",
            secondary_muscles=["glutes", "back"],
            equipment_required=["barbell"],
            spinal_loading="moderate",
        ),
        make_exercise(
            "lying-leg-curl", "hamstrings",
            name="Lying Leg Curl", hypertrophy_tier="A", mechanic="isolation",
            movement_pattern="knee_flexion",
            equipment_required=["machine"],
        ),
        # Arms
        make_exercise(
            "incline-dumbbell-curl", "biceps",
            name="Incline Dumbbell Curl", hypertrophy_tier="S", mechanic="isolation",
            movement_pattern="curl",
            equipment_required=["dumbbell", "incline bench"],
        ),
        make_exercise(
            "barbell-curl", "biceps",
            name="Barbell Curl", hypertrophy_tier="A", mechanic="isolation",
            movement_pattern="curl",
            equipment_required=["barbell"],
        ),
        make_exercise(
            "overhead-cable-extension", "triceps",
            name="Overhead Cable Extension", hypertrophy_tier="S", mechanic="isolation",
            movement_pattern="triceps_extension",
            equipment_required=["cable"],
        ),
        # Lower body accessories
        make_exercise(
            "hip-thrust", "glutes",
            name="Hip Thrust", hypertrophy_tier="S",
            movement_pattern="hip_extension",
            secondary_muscles=["hamstrings"],
            equipment_required=["barbell", "bench"],
        ),
        make_exercise(
            "standing-calf-raise", "calves",
            name="Standing Calf Raise", hypertrophy_tier="A", mechanic="isolation",
            movement_pattern="calf_raise",
            equipment_required=["calf raise machine"],
        ),
        make_exercise(
            "hanging-leg-raise", "abs",
            name="Hanging Leg Raise", hypertrophy_tier="A", mechanic="isolation",
            movement_pattern="hip_flexion",
            equipment_required=["pull-up bar"],
        ),
        make_exercise(
            "cable-crunch", "abs",
            name="Cable Crunch", hypertrophy_tier="B", mechanic="isolation",
            movement_pattern="spinal_flexion",
            equipment_required=["cable"],
            requires_spinal_flexion=True,
        ),
    ]


# =============================================================================
# Exports
# =============================================================================

__all__ = [
    # Fake implementations
    "FakeExerciseRepository",
    "FakeHistoryRepository",
    "FakeEquipmentRepository",
    "FakeInjuryRepository",
    "FakePreferenceRepository",
    "FakeProfileRepository",
    # Factory functions
    "make_exercise",
    "make_session",
    "create_catalog",
]
