"""
Tests for dashboard aggregation.
"""
from datetime import datetime

from mama.models import (
    EntryList, MealEntry, MilkEntry, WeightEntry, WorkoutEntry,
    WorkoutGoalEntry, CalorieGoalEntry,
)
from mama.reports import entries_frame, summarize, render_dashboard

REF = datetime(2025, 10, 29, 18, 0)  # Wednesday


def make_list():
    return EntryList([
        MealEntry("oats", 300, timestamp=datetime(2025, 10, 29, 8, 0)),
        MealEntry("pasta", 700, timestamp=datetime(2025, 10, 29, 13, 0)),
        MealEntry("pizza", 900, timestamp=datetime(2025, 10, 28, 19, 0)),
        MealEntry("old meal", 500),
        WorkoutEntry("run", 30, 4, timestamp=datetime(2025, 10, 27, 7, 0)),
        WorkoutEntry("yoga", 45, 2, timestamp=datetime(2025, 10, 29, 7, 0)),
        WorkoutEntry("swim", 60, 5, timestamp=datetime(2025, 10, 26, 7, 0)),
        MilkEntry(120, timestamp=datetime(2025, 10, 29, 3, 0)),
        MilkEntry(80, timestamp=datetime(2025, 10, 28, 3, 0)),
        WeightEntry(62, timestamp=datetime(2025, 10, 20, 7, 0)),
        WeightEntry(61, timestamp=datetime(2025, 10, 28, 7, 0)),
    ])


def test_entries_frame_shape():
    """Test one row per entry with NaT for undated meals."""
    df = entries_frame(make_list())
    assert len(df) == 11
    assert df["timestamp"].isna().sum() == 1


def test_entries_frame_empty():
    """Test empty list gives an empty frame."""
    df = entries_frame(EntryList())
    assert df.empty


def test_summary_without_goals():
    """Test totals for today and this week."""
    summary = summarize(make_list(), REF)
    assert summary.calories_today == 1000
    assert summary.calorie_goal is None
    assert summary.workout_sessions == 2
    assert summary.workout_minutes == 75
    assert summary.average_feel == 3.0
    assert summary.workout_goal is None
    assert summary.milk_today_ml == 120
    assert summary.milk_total_ml == 200
    assert summary.latest_weight.kg == 61


def test_render_without_goals():
    """Test absent goals give reminder lines."""
    text = render_dashboard(summarize(make_list(), REF))
    assert "Calories today: 1000 kcal" in text
    assert "No calorie goal set for today" in text
    assert "No workout goal set for this week" in text
    assert "Milk pumped today: 120ml (all-time total: 200ml)" in text
    assert "Latest weight: 61kg" in text


def test_render_with_goals():
    """Test progress against active goals."""
    entries = make_list()
    entries.add(CalorieGoalEntry(1800, timestamp=datetime(2025, 10, 29, 7, 0)))
    entries.add(WorkoutGoalEntry(60, timestamp=datetime(2025, 10, 27, 7, 0)))
    text = render_dashboard(summarize(entries, REF))
    assert "Calories today: 1000/1800 kcal (800 kcal remaining)" in text
    assert "Workouts this week: 75/60 mins" in text
    assert "goal reached!" in text


def test_render_empty_journal():
    """Test dashboard on an empty journal."""
    text = render_dashboard(summarize(EntryList(), REF))
    assert "Calories today: 0 kcal" in text
    assert "Workouts this week: 0 mins (0 sessions)" in text
    assert "Latest weight" not in text
