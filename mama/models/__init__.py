"""
Data models for the journal.
"""
from .entry import (
    EntryType, BaseEntry, TimestampedEntry, Entry,
    MealEntry, WorkoutEntry, WorkoutGoalEntry, CalorieGoalEntry,
    MilkEntry, WeightEntry, MeasurementEntry, NoteEntry,
    ENTRY_CLASSES, entry_from_storage,
)
from .entry_list import EntryList

__all__ = [
    # Entry variants
    'EntryType',
    'BaseEntry',
    'TimestampedEntry',
    'Entry',
    'MealEntry',
    'WorkoutEntry',
    'WorkoutGoalEntry',
    'CalorieGoalEntry',
    'MilkEntry',
    'WeightEntry',
    'MeasurementEntry',
    'NoteEntry',
    'ENTRY_CLASSES',
    'entry_from_storage',
    # Container
    'EntryList',
]
