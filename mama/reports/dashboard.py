"""
Dashboard aggregation over the entry list.

Entries are flattened into a DataFrame (one row per entry) so daily and
weekly totals are simple masked sums.
"""
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

import pandas as pd

from mama.models import EntryList, EntryType, WeightEntry
from mama.utils import format_timestamp, week_start, week_end

COLUMNS = ["type", "timestamp", "calories", "minutes", "feel", "volume_ml"]


def entries_frame(entries: EntryList) -> pd.DataFrame:
    """
    Flatten entries into a DataFrame.

    Args:
        entries: Entry list (the shown filter is ignored)

    Returns:
        DataFrame with COLUMNS; numeric columns are 0 where not applicable
        and timestamp is NaT for undated entries
    """
    rows = []
    for entry in entries:
        rows.append({
            "type": entry.type,
            "timestamp": getattr(entry, "timestamp", None),
            "calories": entry.calories if entry.type == EntryType.MEAL.value else 0,
            "minutes": getattr(entry, "duration_mins", 0),
            "feel": getattr(entry, "feel", 0),
            "volume_ml": getattr(entry, "volume_ml", 0),
        })

    df = pd.DataFrame(rows, columns=COLUMNS)
    df["timestamp"] = pd.to_datetime(df["timestamp"])
    for col in ("calories", "minutes", "feel", "volume_ml"):
        df[col] = pd.to_numeric(df[col]).fillna(0).astype(int)
    return df


@dataclass
class DashboardSummary:
    """Aggregated figures shown by the dashboard command."""
    day: datetime
    calories_today: int
    calorie_goal: Optional[int]
    workout_sessions: int
    workout_minutes: int
    average_feel: Optional[float]
    workout_goal: Optional[int]
    milk_today_ml: int
    milk_total_ml: int
    latest_weight: Optional[WeightEntry]


def summarize(entries: EntryList, ref: datetime) -> DashboardSummary:
    """
    Compute today's and this week's figures.

    Args:
        entries: Entry list
        ref: Reference time ("now")

    Returns:
        DashboardSummary
    """
    df = entries_frame(entries)
    ts = df["timestamp"]
    today = ts.notna() & (ts.dt.date == ref.date())
    this_week = (ts >= week_start(ref)) & (ts < week_end(ref))

    meals_today = df[(df["type"] == EntryType.MEAL.value) & today]
    workouts = df[(df["type"] == EntryType.WORKOUT.value) & this_week]
    milk = df[df["type"] == EntryType.MILK.value]
    milk_today = df[(df["type"] == EntryType.MILK.value) & today]

    calorie_goal = entries.active_calorie_goal(ref)
    workout_goal = entries.active_workout_goal(ref)

    weights = list(entries.of_type(WeightEntry))
    latest_weight = max(weights, key=lambda w: w.timestamp) if weights else None

    return DashboardSummary(
        day=ref,
        calories_today=int(meals_today["calories"].sum()),
        calorie_goal=calorie_goal.calories if calorie_goal else None,
        workout_sessions=len(workouts),
        workout_minutes=int(workouts["minutes"].sum()),
        average_feel=float(workouts["feel"].mean()) if len(workouts) else None,
        workout_goal=workout_goal.minutes if workout_goal else None,
        milk_today_ml=int(milk_today["volume_ml"].sum()),
        milk_total_ml=int(milk["volume_ml"].sum()),
        latest_weight=latest_weight,
    )


def render_dashboard(summary: DashboardSummary) -> str:
    """Format a DashboardSummary as display text."""
    lines = [f"=== Dashboard for {summary.day.strftime('%a %d/%m/%y')} ==="]

    if summary.calorie_goal is None:
        lines.append(f"Calories today: {summary.calories_today} kcal")
        lines.append("  No calorie goal set for today. Set one with: goal CALORIES")
    else:
        left = summary.calorie_goal - summary.calories_today
        status = f"{left} kcal remaining" if left >= 0 else f"{-left} kcal over goal"
        lines.append(f"Calories today: {summary.calories_today}/{summary.calorie_goal} kcal ({status})")

    sessions = f"{summary.workout_sessions} session" + ("" if summary.workout_sessions == 1 else "s")
    if summary.average_feel is not None:
        sessions += f", average feel {summary.average_feel:.1f}/5"
    if summary.workout_goal is None:
        lines.append(f"Workouts this week: {summary.workout_minutes} mins ({sessions})")
        lines.append("  No workout goal set for this week. Set one with: workout goal MINUTES")
    else:
        left = summary.workout_goal - summary.workout_minutes
        status = "goal reached!" if left <= 0 else f"{left} mins to go"
        lines.append(
            f"Workouts this week: {summary.workout_minutes}/{summary.workout_goal} mins "
            f"({sessions}; {status})"
        )

    lines.append(f"Milk pumped today: {summary.milk_today_ml}ml (all-time total: {summary.milk_total_ml}ml)")

    if summary.latest_weight is not None:
        w = summary.latest_weight
        lines.append(f"Latest weight: {w.kg}kg ({format_timestamp(w.timestamp)})")

    return "\n".join(lines)
