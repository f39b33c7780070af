"""
Field Alias Tables
Stored program documents come from several generator versions, so the same
field can appear under different keys. Each normalized field has an ordered
key list: the current name first, then older names. The first key that is
present with a non-null value wins.
"""
from typing import Any, Dict, Mapping, Sequence, Tuple

# ===== Program level =====
PROGRAM_ALIASES: Dict[str, Tuple[str, ...]] = {
    "phases": ("phases", "program", "schedule"),
    "weeks": ("weeks",),
    "days": ("days", "sessions", "workouts"),
    "progression_strategy": ("progressionStrategy", "progression_strategy"),
    "volume_distribution": ("volumeDistribution", "volume_distribution"),
    "overview": ("overview", "description"),
    "notes": ("notes",),
}

# ===== Phase level =====
PHASE_ALIASES: Dict[str, Tuple[str, ...]] = {
    "name": ("phaseName", "phase_name", "phase", "name"),
    "goal": ("goal", "focus", "description"),
    "weeks": ("weeks",),
    "week_range": ("week_range", "weekRange", "duration"),
    "days": ("days", "sessions", "workouts"),
    "deload_included": ("deloadIncluded", "deload_included"),
    "notes": ("notes",),
}

# ===== Week level =====
WEEK_ALIASES: Dict[str, Tuple[str, ...]] = {
    "week_number": ("weekNumber", "week_number", "week"),
    "phase": ("phase",),
    "focus": ("weeklyFocus", "weekly_focus", "focus"),
    "days": ("workoutDays", "workout_days", "days", "sessions", "workouts"),
    "notes": ("notes",),
}

# ===== Day level =====
DAY_ALIASES: Dict[str, Tuple[str, ...]] = {
    "name": ("dayName", "day", "day_name", "name"),
    "focus": ("focus", "muscle_focus", "type"),
    "exercises": ("exercises", "workout"),
    "notes": ("notes",),
}

# ===== Exercise level =====
EXERCISE_ALIASES: Dict[str, Tuple[str, ...]] = {
    "name": ("exerciseName", "name", "exercise_name", "exercise"),
    "muscle_group": ("muscleGroup", "muscle_group"),
    "sets": ("sets",),
    "reps": ("reps",),
    "rest": ("restSeconds", "rest_seconds", "rest"),
    "tempo": ("tempo",),
    "rpe": ("rpeOrIntensity", "rpe", "intensity"),
    "notes": ("notes",),
}


def first_present(record: Any, keys: Sequence[str], default: Any = None) -> Any:
    """
    Return the value of the first key in `keys` that `record` holds with a non-null value.

    Non-mapping records have no fields, so they always yield `default`.
    """
    if not isinstance(record, Mapping):
        return default

    for key in keys:
        value = record.get(key)
        if value is not None:
            return value
    return default


def resolve_field(record: Any, aliases: Mapping[str, Sequence[str]], field: str, default: Any = None) -> Any:
    """Resolve a normalized field through an alias table."""
    return first_present(record, aliases[field], default)
