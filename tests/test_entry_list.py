"""
Tests for EntryList and its shown view.
"""
from datetime import datetime

import pytest
from mama.models import (
    EntryList, MealEntry, MilkEntry, NoteEntry, WorkoutEntry,
    WorkoutGoalEntry, CalorieGoalEntry,
)

TS = datetime(2025, 10, 29, 9, 0)  # Wednesday


def make_list():
    return EntryList([
        MilkEntry(100, timestamp=TS),
        NoteEntry("tired today", timestamp=TS),
        MilkEntry(150, timestamp=TS),
        MealEntry("oats", 300, timestamp=TS),
    ])


def test_sizes_without_filter():
    """Test shown view equals backing list by default."""
    entries = make_list()
    assert entries.full_size() == 4
    assert entries.shown_size() == 4


def test_filter_by_type_is_case_insensitive():
    """Test type filter ignores case."""
    entries = make_list()
    entries.filter_by_type("milk")
    assert entries.shown_size() == 2
    assert all(isinstance(e, MilkEntry) for e in entries.shown())
    entries.filter_by_type("MiLk")
    assert entries.shown_size() == 2


def test_filter_unknown_type_is_empty():
    """Test unknown type yields an empty view, not an error."""
    entries = make_list()
    entries.filter_by_type("sleep")
    assert entries.shown_size() == 0
    assert entries.full_size() == 4


def test_filter_by_keyword():
    """Test keyword filter over descriptions."""
    entries = make_list()
    entries.filter_by_keyword("tired")
    assert entries.shown_size() == 1
    entries.clear_filter()
    assert entries.shown_size() == 4


def test_delete_by_shown_index_uses_filtered_view():
    """Test delete resolves the index against the shown view."""
    entries = make_list()
    entries.filter_by_type("milk")
    removed = entries.delete_by_shown_index(1)
    assert removed.volume_ml == 150
    assert entries.full_size() == 3
    assert entries.shown_size() == 1
    assert entries.shown()[0].volume_ml == 100


def test_delete_keeps_relative_order():
    """Test remaining entries keep their order after a delete."""
    entries = make_list()
    before = entries.shown()
    entries.delete_by_shown_index(1)
    assert entries.shown() == [before[0], before[2], before[3]]


def test_delete_removes_by_identity():
    """Test the exact shown entry is removed when duplicates exist."""
    first = MilkEntry(100, timestamp=TS)
    second = MilkEntry(100, timestamp=TS)
    entries = EntryList([first, NoteEntry("x", timestamp=TS), second])
    entries.filter_by_type("milk")
    removed = entries.delete_by_shown_index(1)
    assert removed is second
    assert entries.all()[0] is first


def test_delete_out_of_range():
    """Test out-of-range index raises IndexError."""
    entries = make_list()
    with pytest.raises(IndexError):
        entries.delete_by_shown_index(4)
    with pytest.raises(IndexError):
        entries.delete_by_shown_index(-1)
    assert entries.full_size() == 4


def test_add_respects_active_filter():
    """Test added entries appear in the shown view only if they match."""
    entries = make_list()
    entries.filter_by_type("milk")
    entries.add(NoteEntry("hello", timestamp=TS))
    assert entries.shown_size() == 2
    entries.add(MilkEntry(50, timestamp=TS))
    assert entries.shown_size() == 3


def test_total_milk_volume_tracks_entries():
    """Test milk total follows adds and deletes."""
    entries = make_list()
    assert entries.total_milk_volume() == 250
    entries.add(MilkEntry(0, timestamp=TS))
    entries.add(MilkEntry(70, timestamp=TS))
    assert entries.total_milk_volume() == 320
    entries.filter_by_type("milk")
    entries.delete_by_shown_index(0)
    assert entries.total_milk_volume() == 220


def test_active_workout_goal_latest_in_week():
    """Test latest goal of the current week wins."""
    entries = EntryList([
        WorkoutGoalEntry(100, timestamp=datetime(2025, 10, 20, 9, 0)),  # previous week
        WorkoutGoalEntry(150, timestamp=datetime(2025, 10, 27, 9, 0)),
        WorkoutGoalEntry(200, timestamp=datetime(2025, 10, 28, 9, 0)),
    ])
    assert entries.active_workout_goal(TS).minutes == 200
    assert entries.active_workout_goal(datetime(2025, 10, 22, 9, 0)).minutes == 100
    assert entries.active_workout_goal(datetime(2025, 11, 3, 0, 0)) is None


def test_active_calorie_goal_is_per_day():
    """Test calorie goal only applies on the day it was set."""
    entries = EntryList([CalorieGoalEntry(1800, timestamp=datetime(2025, 10, 28, 8, 0))])
    assert entries.active_calorie_goal(datetime(2025, 10, 28, 20, 0)).calories == 1800
    assert entries.active_calorie_goal(TS) is None


def test_workout_minutes_in_week():
    """Test weekly workout minutes sum."""
    entries = EntryList([
        WorkoutEntry("run", 30, 4, timestamp=datetime(2025, 10, 27, 7, 0)),
        WorkoutEntry("swim", 45, 3, timestamp=datetime(2025, 11, 2, 23, 0)),
        WorkoutEntry("yoga", 60, 5, timestamp=datetime(2025, 11, 3, 7, 0)),
    ])
    assert entries.workout_minutes_in_week(TS) == 75
