"""
Domain converters for turning Supabase rows into domain value objects.

All converters are pure functions with no side effects.

Examples:
    >>> from domain.converters import db_row_to_exercise
    >>> exercise = db_row_to_exercise(row)
"""

from domain.converters.db_converters import (
    check_in_to_injuries,
    db_row_to_completed_session,
    db_row_to_exercise,
    db_row_to_preference,
    db_rows_to_exercises,
    injury_history_to_injuries,
    parse_date,
)

__all__ = [
    "check_in_to_injuries",
    "db_row_to_completed_session",
    "db_row_to_exercise",
    "db_row_to_preference",
    "db_rows_to_exercises",
    "injury_history_to_injuries",
    "parse_date",
]
