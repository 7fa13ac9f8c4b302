"""
Ordered collection of journal entries with a filtered "shown" view.

Index-based commands (delete) address the shown view, which is the backing
list with the active filter applied and renumbered from 1.
"""
from datetime import datetime
from typing import Callable, Iterator, List, Optional, Type, TypeVar

from .entry import (
    BaseEntry, Entry, WorkoutEntry, WorkoutGoalEntry,
    CalorieGoalEntry, MilkEntry,
)
from mama.utils.time_utils import is_in_week, is_same_day

E = TypeVar("E", bound=BaseEntry)


class EntryList:
    """
    Backing list of entries plus the derived shown view.

    The backing list keeps insertion order, which is also the order written
    to storage. The shown view is never persisted.
    """

    def __init__(self, entries: Optional[List[Entry]] = None):
        self._entries: List[Entry] = list(entries or [])
        self._filter: Optional[Callable[[Entry], bool]] = None
        self._shown: List[Entry] = list(self._entries)

    # ---------------- Mutation -----------------

    def add(self, entry: Entry) -> None:
        """Append an entry. Validation and persistence are the caller's job."""
        self._entries.append(entry)
        self._refresh()

    def delete_by_shown_index(self, index: int) -> Entry:
        """
        Remove the entry at a 0-based position of the shown view.

        Args:
            index: 0-based index into the shown view

        Returns:
            The removed entry

        Raises:
            IndexError: If index is outside [0, shown_size())
        """
        if index < 0 or index >= len(self._shown):
            raise IndexError(f"Shown index {index} out of range (size={len(self._shown)})")

        target = self._shown[index]
        # Identity, not equality: two identical entries may coexist
        for pos, entry in enumerate(self._entries):
            if entry is target:
                del self._entries[pos]
                break
        self._refresh()
        return target

    # ---------------- Shown view -----------------

    def filter_by_type(self, type_name: str) -> None:
        """Show only entries whose type tag matches, ignoring case."""
        wanted = type_name.strip().upper()
        self._set_filter(lambda e: e.type.upper() == wanted)

    def filter_by_keyword(self, keyword: str) -> None:
        """Show only entries whose description contains keyword."""
        self._set_filter(lambda e: e.contains(keyword))

    def clear_filter(self) -> None:
        """Show the full backing list."""
        self._set_filter(None)

    def shown(self) -> List[Entry]:
        """Copy of the current shown view."""
        return list(self._shown)

    def all(self) -> List[Entry]:
        """Copy of the full backing list."""
        return list(self._entries)

    def full_size(self) -> int:
        return len(self._entries)

    def shown_size(self) -> int:
        return len(self._shown)

    def _set_filter(self, predicate: Optional[Callable[[Entry], bool]]) -> None:
        self._filter = predicate
        self._refresh()

    def _refresh(self) -> None:
        if self._filter is None:
            self._shown = list(self._entries)
        else:
            self._shown = [e for e in self._entries if self._filter(e)]

    def __iter__(self) -> Iterator[Entry]:
        return iter(self._entries)

    # ---------------- Derived queries -----------------

    def of_type(self, cls: Type[E]) -> Iterator[E]:
        """Iterate backing entries of one class, ignoring the shown filter."""
        return (e for e in self._entries if isinstance(e, cls))

    def total_milk_volume(self) -> int:
        """All-time pumped volume, summed over the milk entries present."""
        return sum(e.volume_ml for e in self.of_type(MilkEntry))

    def active_workout_goal(self, ref: datetime) -> Optional[WorkoutGoalEntry]:
        """
        Latest workout goal set during the week containing ref.

        Later goals in the same week supersede earlier ones; on equal
        timestamps the one added last wins.
        """
        active = None
        for goal in self.of_type(WorkoutGoalEntry):
            if is_in_week(goal.timestamp, ref):
                if active is None or goal.timestamp >= active.timestamp:
                    active = goal
        return active

    def active_calorie_goal(self, ref: datetime) -> Optional[CalorieGoalEntry]:
        """Latest calorie goal set on the day of ref."""
        active = None
        for goal in self.of_type(CalorieGoalEntry):
            if is_same_day(goal.timestamp, ref):
                if active is None or goal.timestamp >= active.timestamp:
                    active = goal
        return active

    def workout_minutes_in_week(self, ref: datetime) -> int:
        """Total workout duration logged during the week containing ref."""
        return sum(
            w.duration_mins
            for w in self.of_type(WorkoutEntry)
            if is_in_week(w.timestamp, ref)
        )

