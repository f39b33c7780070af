"""
Program Generator Service
Builds a templated 8-week workout program from a client profile.

The generator is deterministic and does no I/O: the same profile always
yields the same structure, and the whole program is built in memory before
the caller persists it.
"""
import logging
from typing import Any, List

from ..schemas.program_schemas import (
    ClientProfile,
    ExerciseSchema,
    PhaseSchema,
    ProgramStructureSchema,
    WeekSchema,
    WorkoutDaySchema,
)

logger = logging.getLogger(__name__)

# ===== Template constants =====
PROGRAM_WEEKS = 8
PHASE_NAME = "Strength & Hypertrophy"

MIN_TRAINING_FREQUENCY = 2
MAX_TRAINING_FREQUENCY = 6
DEFAULT_TRAINING_FREQUENCY = 4

THREE_DAY_ROTATION = ["Upper", "Lower", "Full Body"]
DEFAULT_ROTATION = ["Push", "Pull", "Legs", "Upper", "Lower"]

COMPOUND_TEMPO = "3-0-1-0"
ACCESSORY_TEMPO = "2-0-1-0"

PROGRESSION_STRATEGY = "Increase weight by 2.5-5% each week while maintaining form"
VOLUME_DISTRIBUTION = "Even distribution across muscle groups, 2-3x per week each"

# Weeks before this index are hypertrophy-oriented, the rest strength-oriented
HYPERTROPHY_WEEKS = 4

WEEK_BUCKETS = {
    "Hypertrophy": {
        "focus": "High volume, moderate intensity",
        "reps": "8-10",
        "rest_seconds": 90,
        "rpe": "7-8",
    },
    "Strength": {
        "focus": "Lower volume, high intensity",
        "reps": "5-6",
        "rest_seconds": 120,
        "rpe": "8-9",
    },
}


def clamp_training_frequency(value: Any) -> int:
    """
    Coerce a stored training frequency into the supported [2, 6] range.

    Missing, zero or non-numeric values fall back to 4 days per week.
    """
    try:
        frequency = int(value) if value else DEFAULT_TRAINING_FREQUENCY
    except (TypeError, ValueError, OverflowError):
        frequency = DEFAULT_TRAINING_FREQUENCY

    return max(MIN_TRAINING_FREQUENCY, min(MAX_TRAINING_FREQUENCY, frequency))


def _day_focus(day_index: int, days_per_week: int) -> str:
    rotation = THREE_DAY_ROTATION if days_per_week == 3 else DEFAULT_ROTATION
    return rotation[day_index % len(rotation)]


def _day_exercises(bucket: dict) -> List[ExerciseSchema]:
    return [
        ExerciseSchema(
            exercise_name="Compound Movement (Squat/Bench/Deadlift)",
            sets=4,
            reps=bucket["reps"],
            rest_seconds=bucket["rest_seconds"],
            tempo=COMPOUND_TEMPO,
            rpe_or_intensity=bucket["rpe"],
        ),
        ExerciseSchema(
            exercise_name="Secondary Movement",
            sets=3,
            reps="8-12",
            rest_seconds=90,
            tempo=ACCESSORY_TEMPO,
            rpe_or_intensity="7",
        ),
        ExerciseSchema(
            exercise_name="Isolation/Accessory",
            sets=3,
            reps="10-15",
            rest_seconds=60,
            tempo=ACCESSORY_TEMPO,
            rpe_or_intensity="6-7",
        ),
    ]


def _build_week(week_index: int, days_per_week: int) -> WeekSchema:
    sub_phase = "Hypertrophy" if week_index < HYPERTROPHY_WEEKS else "Strength"
    bucket = WEEK_BUCKETS[sub_phase]

    return WeekSchema(
        week_number=week_index + 1,
        phase=sub_phase,
        weekly_focus=bucket["focus"],
        workout_days=[
            WorkoutDaySchema(
                day_name=f"Day {day_index + 1}",
                focus=_day_focus(day_index, days_per_week),
                exercises=_day_exercises(bucket),
            )
            for day_index in range(days_per_week)
        ],
    )


def generate_program(profile: ClientProfile) -> ProgramStructureSchema:
    """
    Generate a program structure for a client.

    Args:
        profile: Client profile (only training_frequency affects the layout)

    Returns:
        ProgramStructureSchema with one phase of 8 weeks, each week holding
        exactly one day per clamped training day
    """
    days_per_week = clamp_training_frequency(profile.training_frequency)

    structure = ProgramStructureSchema(
        phases=[
            PhaseSchema(
                phase_name=PHASE_NAME,
                weeks=[_build_week(i, days_per_week) for i in range(PROGRAM_WEEKS)],
                # TODO: no reduced-volume week is generated; settle whether this flag should
                # drive an actual deload week before changing either side.
                deload_included=True,
            )
        ],
        progression_strategy=PROGRESSION_STRATEGY,
        volume_distribution=VOLUME_DISTRIBUTION,
    )

    logger.debug(
        "[GENERATOR] Built %d weeks x %d days for client %s",
        PROGRAM_WEEKS, days_per_week, profile.id
    )
    return structure
