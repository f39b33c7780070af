"""
Markdown Generator Service
Formats a rendered program view as a markdown document
"""
from datetime import datetime
from typing import Dict, List, Optional

from ..schemas.view_schemas import (
    DayView,
    PlaceholderView,
    RawProgramView,
    RenderedView,
    StructuredProgramView,
)


def generate_program_markdown(
    view: RenderedView,
    program_name: str,
    client_name: Optional[str] = None,
    duration_weeks: Optional[int] = None,
    split_type: Optional[str] = None,
    created_at: Optional[datetime] = None
) -> str:
    """
    Generate markdown for a rendered program view.

    Args:
        view: Output of render_program (any view kind)
        program_name: Program display name
        client_name: Name of the client (optional)
        duration_weeks: Stored duration in weeks (optional)
        split_type: Stored split-type label (optional)
        created_at: Program creation time (optional)

    Returns:
        Markdown text
    """
    md_lines = []

    # Header
    md_lines.append(f"# {program_name}")
    md_lines.append("")

    if client_name:
        md_lines.append(f"**Created for:** {client_name}")
    if duration_weeks:
        md_lines.append(f"**Duration:** {duration_weeks} weeks")
    if split_type:
        md_lines.append(f"**Split:** {split_type}")
    if created_at:
        md_lines.append(f"**Created:** {created_at.strftime('%Y-%m-%d %H:%M')}")

    md_lines.append("")

    if isinstance(view, PlaceholderView):
        md_lines.append(f"> {view.message}")
        md_lines.append("")
        return "\n".join(md_lines)

    if isinstance(view, RawProgramView):
        md_lines.append("## Program Details")
        md_lines.append("")
        md_lines.append("```json")
        md_lines.append(view.raw_json)
        md_lines.append("```")
        if view.truncated:
            md_lines.append("")
            md_lines.append("*(truncated)*")
        md_lines.append("")
        return "\n".join(md_lines)

    md_lines.extend(_structured_markdown(view))
    return "\n".join(md_lines)


def _structured_markdown(view: StructuredProgramView) -> List[str]:
    md_lines = []

    # Program-level annotations
    for title, text in (
        ("Overview", view.overview),
        ("Progression Strategy", view.progression_strategy),
        ("Volume Distribution", view.volume_distribution),
        ("Notes", view.notes),
    ):
        if text:
            md_lines.append(f"## {title}")
            md_lines.append("")
            md_lines.append(text)
            md_lines.append("")

    md_lines.append("---")
    md_lines.append("")

    all_days: List[DayView] = []

    for phase in view.phases:
        md_lines.append(f"## {phase.name}")
        if phase.week_range:
            md_lines.append(f"**Weeks:** {phase.week_range}")
        if phase.goal:
            md_lines.append(f"**Goal:** {phase.goal}")
        if phase.deload_included is not None:
            md_lines.append(f"**Deload Included:** {'Yes' if phase.deload_included else 'No'}")
        md_lines.append("")

        for week in phase.weeks:
            if week.week_number is not None:
                md_lines.append(f"### Week {week.week_number}")
                if week.phase:
                    md_lines.append(f"**Phase:** {week.phase}")
                if week.focus:
                    md_lines.append(f"*{week.focus}*")
                md_lines.append("")

            for day in week.days:
                all_days.append(day)
                md_lines.extend(_day_markdown(day))

            if week.notes:
                md_lines.append(week.notes)
                md_lines.append("")

        if phase.notes:
            md_lines.append(f"**Phase Notes:** {phase.notes}")
            md_lines.append("")

    md_lines.extend(_statistics_markdown(all_days))
    return md_lines


def _day_markdown(day: DayView) -> List[str]:
    md_lines = []

    title = f"#### {day.name}"
    if day.focus:
        title += f": {day.focus}"
    md_lines.append(title)
    md_lines.append("")

    if day.exercises:
        md_lines.append("| # | Exercise | Muscle Group | Sets | Reps | Rest | Tempo | RPE/Intensity |")
        md_lines.append("|---|----------|--------------|------|------|------|-------|---------------|")

        # Collect exercise notes
        exercise_notes = []

        for exercise in day.exercises:
            md_lines.append(
                f"| {exercise.position} | {exercise.name} | {exercise.muscle_group or '-'} | "
                f"{exercise.sets or '-'} | {exercise.reps or '-'} | {exercise.rest or '-'} | "
                f"{exercise.tempo or '-'} | {exercise.rpe or '-'} |"
            )
            if exercise.notes:
                exercise_notes.append(f"**{exercise.position}. {exercise.name}:** {exercise.notes}")

        md_lines.append("")

        if exercise_notes:
            md_lines.append("**Notes:**")
            for note in exercise_notes:
                md_lines.append(f"- {note}")
            md_lines.append("")

    if day.notes:
        md_lines.append(f"*{day.notes}*")
        md_lines.append("")

    md_lines.append("---")
    md_lines.append("")
    return md_lines


def _statistics_markdown(days: List[DayView]) -> List[str]:
    md_lines = ["## Program Statistics", ""]

    total_workouts = len(days)
    total_exercises = sum(len(day.exercises) for day in days)
    total_sets = sum(
        int(exercise.sets)
        for day in days
        for exercise in day.exercises
        if exercise.sets and exercise.sets.isdecimal()
    )

    md_lines.append(f"- **Total Workouts:** {total_workouts}")
    md_lines.append(f"- **Total Exercises:** {total_exercises}")
    md_lines.append(f"- **Total Sets:** {total_sets}")

    if total_workouts > 0:
        md_lines.append(f"- **Average Exercises per Workout:** {total_exercises / total_workouts:.1f}")
        md_lines.append(f"- **Average Sets per Workout:** {total_sets / total_workouts:.1f}")

    md_lines.append("")

    # Exercise frequency
    exercise_counts: Dict[str, int] = {}
    for day in days:
        for exercise in day.exercises:
            exercise_counts[exercise.name] = exercise_counts.get(exercise.name, 0) + 1

    if exercise_counts:
        md_lines.append("### Exercise Frequency")
        md_lines.append("")
        md_lines.append("| Exercise | Times Used |")
        md_lines.append("|----------|------------|")
        for exercise_name, count in sorted(exercise_counts.items(), key=lambda x: -x[1]):
            md_lines.append(f"| {exercise_name} | {count} |")
        md_lines.append("")

    return md_lines
