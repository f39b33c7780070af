"""Tests for split type, duration and program name derivation."""
import pytest

from api.services.program_generator import generate_program
from api.services.program_metadata import (
    calculate_duration_weeks,
    determine_split_type,
    generate_program_name,
)


@pytest.mark.parametrize(
    "frequency, goals, expected",
    [
        (2, "anything", "Full Body"),
        (1, "strength", "Full Body"),
        (3, "Power", "Full Body"),
        (4, "Strength training", "Upper/Lower"),
        (4, "POWERLIFTING meet", "Upper/Lower"),
        (4, "Hypertrophy", "Push/Pull/Legs/Rest"),
        (5, "x", "Push/Pull/Legs"),
        (6, "x", "Push/Pull/Legs/Upper/Lower"),
        (12, "x", "Push/Pull/Legs/Upper/Lower"),
        (None, "strength", "Upper/Lower"),
        (4, None, "Push/Pull/Legs/Rest"),
    ],
)
def test_determine_split_type(frequency, goals, expected):
    assert determine_split_type(frequency, goals) == expected


def test_duration_defaults_to_eight_for_empty_input():
    assert calculate_duration_weeks([]) == 8
    assert calculate_duration_weeks(None) == 8
    assert calculate_duration_weeks("not-a-list") == 8
    assert calculate_duration_weeks([{"phaseName": "Empty", "weeks": []}]) == 8


@pytest.mark.parametrize(
    "week_counts, expected",
    [
        ([1], 4),
        ([3], 4),
        ([4], 4),
        ([6], 6),
        ([4, 4], 8),
        ([10, 5], 12),
        ([20], 12),
    ],
)
def test_duration_sums_weeks_and_is_bounded(week_counts, expected):
    phases = [{"weeks": [{} for _ in range(count)]} for count in week_counts]

    assert calculate_duration_weeks(phases) == expected


def test_duration_ignores_phases_without_week_lists():
    phases = [{"weeks": "Weeks 1-4"}, {"phaseName": "No weeks"}, "junk", {"weeks": [{}] * 5}]

    assert calculate_duration_weeks(phases) == 5


def test_duration_of_generated_program(make_profile):
    structure = generate_program(make_profile())

    assert calculate_duration_weeks(structure.phases) == 8
    assert calculate_duration_weeks(structure.to_document()["phases"]) == 8


@pytest.mark.parametrize(
    "client_name, goals, weeks, expected",
    [
        ("Alex", "Fat loss, general", 8, "Alex - Fat loss (8w)"),
        ("Sam", "Strength", 12, "Sam - Strength (12w)"),
        ("Kim", "Build muscle and tone, endurance", 8, "Kim - Build musc (8w)"),
        ("Lee", "   Mobility   , flexibility", 4, "Lee - Mobility (4w)"),
        ("Ray", "", 8, "Ray -  (8w)"),
        ("Ray", None, 8, "Ray -  (8w)"),
    ],
)
def test_generate_program_name(client_name, goals, weeks, expected):
    assert generate_program_name(client_name, goals, weeks) == expected


def test_program_name_keeps_client_text_verbatim():
    assert generate_program_name("<b>Jo</b>", "<i>x</i>", 8) == "<b>Jo</b> - <i>x</i> (8w)"


def test_strength_scenario(make_profile):
    profile = make_profile(training_frequency=4, goals="Strength")
    structure = generate_program(profile)

    assert len(structure.phases) == 1
    assert len(structure.phases[0].weeks) == 8
    assert all(len(week.workout_days) == 4 for week in structure.phases[0].weeks)
    assert determine_split_type(profile.training_frequency, profile.goals) == "Upper/Lower"
    assert calculate_duration_weeks(structure.phases) == 8
