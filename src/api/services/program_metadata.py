"""
Program Metadata Service
Derived labels stored alongside a generated program: split type,
bounded duration in weeks, and display name.
"""
from typing import Any, Iterable, Optional

from .program_generator import clamp_training_frequency

MIN_DURATION_WEEKS = 4
MAX_DURATION_WEEKS = 12
DEFAULT_DURATION_WEEKS = 8

STRENGTH_GOAL_KEYWORDS = ("strength", "power")
GOAL_FRAGMENT_LENGTH = 10


def determine_split_type(training_frequency: Any, goals: Optional[str]) -> str:
    """
    Map weekly frequency and goals to a split-type label.

    Frequency is clamped to [2, 6] first, so any input gets a label.
    Goal matching is a case-insensitive substring search.
    """
    frequency = clamp_training_frequency(training_frequency)
    goals_lower = (goals or "").lower()

    if frequency <= 3:
        return "Full Body"
    if frequency == 4:
        if any(keyword in goals_lower for keyword in STRENGTH_GOAL_KEYWORDS):
            return "Upper/Lower"
        return "Push/Pull/Legs/Rest"
    if frequency == 5:
        return "Push/Pull/Legs"
    return "Push/Pull/Legs/Upper/Lower"


def _phase_weeks(phase: Any) -> Any:
    if isinstance(phase, dict):
        return phase.get("weeks")
    return getattr(phase, "weeks", None)


def calculate_duration_weeks(phases: Optional[Iterable[Any]]) -> int:
    """
    Total weeks across phases, bounded to [4, 12].

    Accepts typed phases or raw phase dicts. A phase whose weeks are not a
    list contributes nothing; an empty total falls back to 8 weeks.
    """
    if not isinstance(phases, (list, tuple)):
        return DEFAULT_DURATION_WEEKS

    total_weeks = 0
    for phase in phases:
        weeks = _phase_weeks(phase)
        if isinstance(weeks, (list, tuple)):
            total_weeks += len(weeks)

    return max(MIN_DURATION_WEEKS, min(MAX_DURATION_WEEKS, total_weeks or DEFAULT_DURATION_WEEKS))


def generate_program_name(client_name: str, goals: Optional[str], weeks: int) -> str:
    """
    Build a display name like "Alex - Fat loss (8w)".

    Uses the first comma-separated goal, trimmed and cut to 10 characters.
    Client text is used as-is.
    """
    goal_short = (goals or "").split(",")[0].strip()[:GOAL_FRAGMENT_LENGTH]
    return f"{client_name} - {goal_short} ({weeks}w)"
