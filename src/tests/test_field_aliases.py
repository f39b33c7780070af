"""Tests for ordered field alias resolution."""
from api.services.field_aliases import (
    DAY_ALIASES,
    EXERCISE_ALIASES,
    first_present,
    resolve_field,
)


def test_exact_name_wins_over_aliases():
    day = {"dayName": "Monday", "day": "Tuesday", "day_name": "Wednesday"}

    assert resolve_field(day, DAY_ALIASES, "name") == "Monday"


def test_aliases_are_tried_in_order():
    assert resolve_field({"day": "Tue", "day_name": "Wed"}, DAY_ALIASES, "name") == "Tue"
    assert resolve_field({"day_name": "Wed", "name": "Thu"}, DAY_ALIASES, "name") == "Wed"
    assert resolve_field({"name": "Thu"}, DAY_ALIASES, "name") == "Thu"


def test_null_values_fall_through_to_next_alias():
    exercise = {"exerciseName": None, "name": "Front Squat"}

    assert resolve_field(exercise, EXERCISE_ALIASES, "name") == "Front Squat"


def test_falsy_but_present_values_win():
    assert resolve_field({"sets": 0}, EXERCISE_ALIASES, "sets") == 0
    assert resolve_field({"exercises": [], "workout": [{"name": "x"}]}, DAY_ALIASES, "exercises") == []


def test_missing_field_returns_default():
    assert resolve_field({}, DAY_ALIASES, "name") is None
    assert resolve_field({}, DAY_ALIASES, "exercises", default=[]) == []


def test_non_mapping_records_have_no_fields():
    assert first_present("Day 1", ("dayName",), default="fallback") == "fallback"
    assert first_present(None, ("dayName",)) is None
    assert first_present(["dayName"], ("dayName",)) is None
