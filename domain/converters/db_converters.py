"""
Converters: Supabase rows -> domain value objects.

Rows are validated here, at the repository boundary, so the engine only
ever sees well-formed models.

Tables read:
- exercises: catalog (id, name, primary_muscle, secondary_muscles,
  mechanic, movement_pattern, hypertrophy_tier, equipment_required, plus
  optional safety attributes)
- workout_sessions + exercise_blocks: completed training history
- workout_sessions.pre_workout_check_in: JSONB with ``temporaryInjuries``
  ([{area, severity 1|2|3, description?}])
- users.injury_history: TEXT[] of muscle groups
- user_exercise_preferences: (exercise_id, status)
"""

import logging
from datetime import date, datetime
from typing import Any, Dict, Iterable, List, Optional

from domain.models import (
    ActiveInjury,
    CompletedSession,
    Exercise,
    ExercisePreference,
    InjurySource,
    SessionExercise,
)

logger = logging.getLogger(__name__)

# camelCase keys used by the web client's exercise metadata
_SAFETY_ALIASES = {
    "spinal_loading": "spinalLoading",
    "requires_back_arch": "requiresBackArch",
    "requires_spinal_flexion": "requiresSpinalFlexion",
    "requires_spinal_extension": "requiresSpinalExtension",
    "requires_spinal_rotation": "requiresSpinalRotation",
    "position_stress": "positionStress",
    "stabilizers": "stabilizers",
    "contraindications": "contraindications",
}


def parse_date(value: Any) -> Optional[date]:
    """Parse a date or timestamp column into a calendar date."""
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        text = value[:-1] + "+00:00" if value.endswith("Z") else value
        try:
            return datetime.fromisoformat(text).date()
        except ValueError:
            try:
                return date.fromisoformat(text[:10])
            except ValueError:
                return None
    return None


def db_row_to_exercise(row: Dict[str, Any]) -> Exercise:
    """
    Convert an exercises row to an Exercise.

    Safety attributes may live in top-level snake_case columns or in a
    ``safety`` JSONB object using the client's camelCase keys.

    Args:
        row: Dictionary from the exercises table

    Returns:
        Validated Exercise

    Raises:
        pydantic.ValidationError: If required columns are missing or invalid

    Examples:
        >>> ex = db_row_to_exercise({
        ...     "id": "e1", "name": "Romanian Deadlift",
        ...     "primary_muscle": "hamstrings", "mechanic": "compound",
        ...     "movement_pattern": "hinge", "hypertrophy_tier": "s",
        ...     "equipment_required": ["barbell"],
        ...     "safety": {"spinalLoading": "moderate"},
        ... })
        >>> ex.spinal_loading.value
        'moderate'
    """
    data: Dict[str, Any] = {
        "id": str(row.get("id")) if row.get("id") is not None else "",
        "name": row.get("name"),
        "primary_muscle": row.get("primary_muscle"),
        "secondary_muscles": row.get("secondary_muscles"),
        "mechanic": row.get("mechanic"),
        "movement_pattern": row.get("movement_pattern"),
        "hypertrophy_tier": row.get("hypertrophy_tier"),
        "equipment_required": row.get("equipment_required"),
        "is_bodyweight": bool(row.get("is_bodyweight") or False),
    }

    safety = row.get("safety") or {}
    for field_name, alias in _SAFETY_ALIASES.items():
        value = row.get(field_name)
        if value is None:
            value = safety.get(alias, safety.get(field_name))
        if value is not None:
            data[field_name] = value

    return Exercise.model_validate(data)


def db_rows_to_exercises(rows: Iterable[Dict[str, Any]]) -> List[Exercise]:
    """Convert catalog rows, skipping (and logging) rows that fail validation."""
    exercises: List[Exercise] = []
    for row in rows:
        try:
            exercises.append(db_row_to_exercise(row))
        except ValueError as e:
            logger.warning(f"Skipping invalid exercise row {row.get('id')}: {e}")
    return exercises


def db_row_to_completed_session(row: Dict[str, Any]) -> CompletedSession:
    """
    Convert a workout_sessions row with embedded blocks.

    Expects the shape returned by
    ``select("id, completed_at, exercise_blocks(exercise_id, exercises(...))")``.
    Blocks whose exercise has no known primary muscle still count toward
    usage frequency.
    """
    exercises: List[SessionExercise] = []
    for block in row.get("exercise_blocks") or []:
        exercise_id = block.get("exercise_id")
        if not exercise_id:
            continue
        catalog = block.get("exercises") or {}
        exercises.append(
            SessionExercise(
                exercise_id=str(exercise_id),
                primary_muscle=catalog.get("primary_muscle"),
                secondary_muscles=catalog.get("secondary_muscles") or [],
            )
        )

    completed_at = parse_date(row.get("completed_at")) or parse_date(row.get("planned_date"))
    return CompletedSession(id=str(row.get("id")), completed_at=completed_at, exercises=exercises)


def check_in_to_injuries(
    check_in: Optional[Dict[str, Any]],
    session_id: str,
    reported_at: Optional[date] = None,
) -> List[ActiveInjury]:
    """
    Extract temporary injuries from a pre-workout check-in.

    ``shoulder_left`` style areas become region ``shoulder`` with
    ``affected_side="left"``. Unparseable entries are skipped.
    """
    if not check_in:
        return []

    injuries: List[ActiveInjury] = []
    for index, entry in enumerate(check_in.get("temporaryInjuries") or []):
        area = str(entry.get("area") or "").strip().lower()
        if not area:
            continue
        side = None
        for suffix in ("left", "right"):
            if area.endswith(f"_{suffix}"):
                area = area[: -len(suffix) - 1]
                side = suffix
        try:
            injuries.append(
                ActiveInjury(
                    id=f"{session_id}:{index}",
                    region=area,
                    severity=entry.get("severity"),
                    started_at=reported_at,
                    affected_side=side,
                    source=InjurySource.CHECK_IN,
                )
            )
        except ValueError as e:
            logger.warning(f"Skipping invalid check-in injury {entry}: {e}")
    return injuries


def injury_history_to_injuries(user_id: str, regions: Optional[Iterable[str]]) -> List[ActiveInjury]:
    """Convert ``users.injury_history`` into active injuries."""
    return [
        ActiveInjury(id=f"{user_id}:history:{region}", region=region, source=InjurySource.HISTORY)
        for region in regions or []
        if region and str(region).strip()
    ]


def db_row_to_preference(row: Dict[str, Any]) -> ExercisePreference:
    return ExercisePreference(exercise_id=str(row.get("exercise_id")), status=row.get("status"))
