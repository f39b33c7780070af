"""
Program Renderer Service
Turns a stored program document into the normalized view the app displays.

Stored documents are untrusted: they may come from an older generator, a
partial write, or be empty. Rendering never raises. Every input falls into
one of three view kinds:

- placeholder: no data (None, {}, or an empty phase list)
- structured: a phase list or a flat day list, normalized
  phase → week → day → exercise
- raw: anything else, dumped as JSON for diagnostics
"""
import json
import logging
from typing import Any, List, Optional

from pydantic import BaseModel

from core.config import Config
from ..schemas.view_schemas import (
    DayView,
    ExerciseView,
    PhaseView,
    PlaceholderView,
    RawProgramView,
    RenderedView,
    StructuredProgramView,
    WeekView,
)
from .field_aliases import (
    DAY_ALIASES,
    EXERCISE_ALIASES,
    PHASE_ALIASES,
    PROGRAM_ALIASES,
    WEEK_ALIASES,
    resolve_field,
)

logger = logging.getLogger(__name__)

PLACEHOLDER_MESSAGE = "Program data unavailable. Please regenerate this program."


def render_program(structure: Any, max_raw_chars: Optional[int] = None) -> RenderedView:
    """
    Render a program document into a view.

    Args:
        structure: Stored program document, a ProgramStructureSchema, or None
        max_raw_chars: Size limit for the raw JSON fallback (defaults to config)

    Returns:
        StructuredProgramView, PlaceholderView or RawProgramView
    """
    limit = Config.RAW_VIEW_MAX_CHARS if max_raw_chars is None else max_raw_chars

    try:
        if isinstance(structure, BaseModel):
            structure = structure.model_dump(mode="json", by_alias=True, exclude_none=True)
        return _render_document(structure, limit)
    except Exception:
        logger.exception("[RENDERER] Failed to normalize program document, falling back to raw view")
        return _raw_view(structure, limit)


def _render_document(structure: Any, limit: int) -> RenderedView:
    if structure is None or structure == {}:
        return PlaceholderView(message=PLACEHOLDER_MESSAGE)

    if not isinstance(structure, dict):
        logger.warning("[RENDERER] Program document is a %s, not an object", type(structure).__name__)
        return _raw_view(structure, limit)

    phases = resolve_field(structure, PROGRAM_ALIASES, "phases")
    weeks = resolve_field(structure, PROGRAM_ALIASES, "weeks")
    days = resolve_field(structure, PROGRAM_ALIASES, "days")

    if isinstance(phases, list) and phases:
        phase_views = [
            _phase_view(phase, index)
            for index, phase in enumerate(phases)
            if isinstance(phase, dict)
        ]
    elif isinstance(weeks, list) and weeks:
        phase_views = [PhaseView(name="Program", weeks=_week_views(weeks))]
    elif isinstance(days, list) and days:
        phase_views = [PhaseView(name="Program", weeks=[WeekView(days=_day_views(days))])]
    elif isinstance(phases, list):
        # Legacy record with an empty phase list
        return PlaceholderView(message=PLACEHOLDER_MESSAGE)
    else:
        phase_views = []

    if not phase_views:
        logger.warning("[RENDERER] Unrecognized program structure (keys: %s)", sorted(map(str, structure.keys())))
        return _raw_view(structure, limit)

    return StructuredProgramView(
        phases=phase_views,
        progression_strategy=_text(resolve_field(structure, PROGRAM_ALIASES, "progression_strategy")),
        volume_distribution=_text(resolve_field(structure, PROGRAM_ALIASES, "volume_distribution")),
        overview=_text(resolve_field(structure, PROGRAM_ALIASES, "overview")),
        notes=_text(resolve_field(structure, PROGRAM_ALIASES, "notes")),
    )


def _phase_view(phase: dict, index: int) -> PhaseView:
    weeks = resolve_field(phase, PHASE_ALIASES, "weeks")
    week_range = _text(resolve_field(phase, PHASE_ALIASES, "week_range"))

    if isinstance(weeks, list):
        week_views = _week_views(weeks)
    else:
        # Older documents put a label like "Weeks 1-4" where the week list goes
        week_range = week_range or _text(weeks)
        days = resolve_field(phase, PHASE_ALIASES, "days")
        week_views = [WeekView(days=_day_views(days))] if isinstance(days, list) else []

    deload = resolve_field(phase, PHASE_ALIASES, "deload_included")

    return PhaseView(
        name=_text(resolve_field(phase, PHASE_ALIASES, "name")) or f"Phase {index + 1}",
        goal=_text(resolve_field(phase, PHASE_ALIASES, "goal")),
        week_range=week_range,
        deload_included=deload if isinstance(deload, bool) else None,
        weeks=week_views,
        notes=_text(resolve_field(phase, PHASE_ALIASES, "notes")),
    )


def _week_views(weeks: list) -> List[WeekView]:
    views = []
    for index, week in enumerate(weeks):
        if not isinstance(week, dict):
            continue
        days = resolve_field(week, WEEK_ALIASES, "days")
        views.append(WeekView(
            week_number=_number(resolve_field(week, WEEK_ALIASES, "week_number")) or index + 1,
            phase=_text(resolve_field(week, WEEK_ALIASES, "phase")),
            focus=_text(resolve_field(week, WEEK_ALIASES, "focus")),
            days=_day_views(days) if isinstance(days, list) else [],
            notes=_text(resolve_field(week, WEEK_ALIASES, "notes")),
        ))
    return views


def _day_views(days: list) -> List[DayView]:
    views = []
    for index, day in enumerate(days):
        if not isinstance(day, dict):
            continue
        exercises = resolve_field(day, DAY_ALIASES, "exercises")
        views.append(DayView(
            name=_text(resolve_field(day, DAY_ALIASES, "name")) or f"Day {index + 1}",
            focus=_text(resolve_field(day, DAY_ALIASES, "focus")),
            exercises=_exercise_views(exercises) if isinstance(exercises, list) else [],
            notes=_text(resolve_field(day, DAY_ALIASES, "notes")),
        ))
    return views


def _exercise_views(exercises: list) -> List[ExerciseView]:
    views = []
    for index, exercise in enumerate(exercises):
        if not isinstance(exercise, dict):
            continue
        views.append(ExerciseView(
            position=index + 1,
            name=_text(resolve_field(exercise, EXERCISE_ALIASES, "name")) or "Exercise",
            muscle_group=_text(resolve_field(exercise, EXERCISE_ALIASES, "muscle_group")),
            sets=_text(resolve_field(exercise, EXERCISE_ALIASES, "sets")),
            reps=_text(resolve_field(exercise, EXERCISE_ALIASES, "reps")),
            rest=_rest_text(resolve_field(exercise, EXERCISE_ALIASES, "rest")),
            tempo=_text(resolve_field(exercise, EXERCISE_ALIASES, "tempo")),
            rpe=_text(resolve_field(exercise, EXERCISE_ALIASES, "rpe")),
            notes=_text(resolve_field(exercise, EXERCISE_ALIASES, "notes")),
        ))
    return views


def _text(value: Any) -> Optional[str]:
    """Display text for a scalar; None for missing, blank or nested values."""
    if isinstance(value, (str, int, float)):
        text = str(value).strip()
        return text or None
    return None


def _number(value: Any) -> Optional[int]:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str) and value.strip().isdecimal():
        return int(value.strip())
    return None


def _rest_text(value: Any) -> Optional[str]:
    """Numeric rest is in seconds: 90 -> "1:30", 45 -> "45s". Text is kept as written."""
    if isinstance(value, bool):
        return None
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    if isinstance(value, int):
        if value >= 60:
            return f"{value // 60}:{value % 60:02d}"
        return f"{value}s"
    return _text(value)


def _raw_view(structure: Any, limit: int) -> RawProgramView:
    try:
        raw_json = json.dumps(structure, indent=2, default=str, ensure_ascii=False)
    except (TypeError, ValueError, RecursionError):
        try:
            raw_json = repr(structure)
        except RecursionError:
            raw_json = f"<unserializable document: {type(structure).__name__}>"

    truncated = limit >= 0 and len(raw_json) > limit
    if truncated:
        raw_json = raw_json[:limit]

    return RawProgramView(raw_json=raw_json, truncated=truncated)
