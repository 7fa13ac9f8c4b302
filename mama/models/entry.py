"""
Journal entry models.

Every record kind is a dataclass sharing the display/persistence contract of
BaseEntry. Storage lines are pipe-delimited with the type tag first:

    MEAL|chicken rice|650|28/10/25 12:30
    WORKOUT|yoga|30|5|28/10/25 07:00
    MILK|150ml|28/10/25 01:14
"""
import re
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import ClassVar, Dict, List, Optional, Type

from mama.errors import StorageFormatError
from mama.utils.time_utils import now, format_timestamp, parse_timestamp

FIELD_SEPARATOR = "|"
DIGITS_RE = re.compile(r"^[0-9]+$")


class EntryType(str, Enum):
    """Type tag written as the first field of every storage line."""
    MEAL = "MEAL"
    WORKOUT = "WORKOUT"
    WORKOUT_GOAL = "WORKOUT_GOAL"
    CALORIE_GOAL = "CALORIE_GOAL"
    MILK = "MILK"
    WEIGHT = "WEIGHT"
    MEASURE = "MEASURE"
    NOTE = "NOTE"


# ---------------- Field helpers -----------------

def _split_fields(line: str, entry_type: EntryType, expected: int) -> List[str]:
    """Split a storage line, checking the tag and the field count."""
    parts = line.split(FIELD_SEPARATOR)
    if len(parts) != expected or parts[0].strip() != entry_type.value:
        raise StorageFormatError(f"Invalid {entry_type.value} entry line: {line}")
    return [p.strip() for p in parts]


def _int_field(value: str, line: str, low: int = 1, high: Optional[int] = None) -> int:
    """Parse an ASCII whole number within [low, high]."""
    if not DIGITS_RE.match(value):
        raise StorageFormatError(f"Non-numeric field '{value}' in line: {line}")
    number = int(value)
    if number < low or (high is not None and number > high):
        raise StorageFormatError(f"Field '{value}' out of range in line: {line}")
    return number


def _optional_int_field(value: str, line: str) -> Optional[int]:
    if value == "":
        return None
    return _int_field(value, line)


def _timestamp_field(value: str, line: str) -> datetime:
    try:
        return parse_timestamp(value)
    except ValueError as e:
        raise StorageFormatError(f"Bad timestamp '{value}' in line: {line}") from e


def _join(*fields) -> str:
    return FIELD_SEPARATOR.join("" if f is None else str(f) for f in fields)


# ---------------- Base types -----------------

class BaseEntry(ABC):
    """
    Shared contract for every journal entry.

    Subclasses provide TYPE, description, to_storage_string() and
    from_storage().
    """

    TYPE: ClassVar[EntryType]

    @property
    def type(self) -> str:
        return self.TYPE.value

    @property
    @abstractmethod
    def description(self) -> str:
        """Human-readable rendering of the entry payload."""

    def to_list_line(self) -> str:
        """One-line string for lists, e.g. "[NOTE] slept well"."""
        return f"[{self.type}] {self.description}"

    def contains(self, keyword: str) -> bool:
        """Substring test over the description."""
        return keyword in self.description

    @abstractmethod
    def to_storage_string(self) -> str:
        """Pipe-delimited storage line (without newline)."""

    @classmethod
    @abstractmethod
    def from_storage(cls, line: str) -> "BaseEntry":
        """Parse a storage line produced by to_storage_string()."""


@dataclass
class TimestampedEntry(BaseEntry):
    """Entry stamped with the time it was recorded."""

    timestamp: datetime = field(default_factory=now, kw_only=True)

    def timestamp_string(self) -> str:
        return format_timestamp(self.timestamp)

    def to_list_line(self) -> str:
        return f"{super().to_list_line()} ({self.timestamp_string()})"

    def _with_timestamp(self, *fields) -> str:
        return _join(self.type, *fields, self.timestamp_string())


# ---------------- Variants -----------------

@dataclass
class MealEntry(BaseEntry):
    """
    A meal with its calorie count.

    Meals written by older versions carry no timestamp (MEAL|name|cal);
    those load with timestamp=None and never count towards "today".
    """
    TYPE: ClassVar[EntryType] = EntryType.MEAL

    name: str
    calories: int
    timestamp: Optional[datetime] = None

    @property
    def description(self) -> str:
        return f"{self.name} ({self.calories} kcal)"

    def to_list_line(self) -> str:
        line = super().to_list_line()
        if self.timestamp is None:
            return line
        return f"{line} ({format_timestamp(self.timestamp)})"

    def to_storage_string(self) -> str:
        if self.timestamp is None:
            return _join(self.type, self.name, self.calories)
        return _join(self.type, self.name, self.calories, format_timestamp(self.timestamp))

    @classmethod
    def from_storage(cls, line: str) -> "MealEntry":
        expected = 4 if line.count(FIELD_SEPARATOR) == 3 else 3
        parts = _split_fields(line, cls.TYPE, expected)
        timestamp = _timestamp_field(parts[3], line) if expected == 4 else None
        return cls(parts[1], _int_field(parts[2], line), timestamp=timestamp)


@dataclass
class WorkoutEntry(TimestampedEntry):
    """A workout session: activity label, duration and a 1-5 feel rating."""
    TYPE: ClassVar[EntryType] = EntryType.WORKOUT

    label: str
    duration_mins: int
    feel: int

    @property
    def description(self) -> str:
        return f"{self.label} ({self.duration_mins} mins, feel {self.feel}/5)"

    def to_storage_string(self) -> str:
        return self._with_timestamp(self.label, self.duration_mins, self.feel)

    @classmethod
    def from_storage(cls, line: str) -> "WorkoutEntry":
        parts = _split_fields(line, cls.TYPE, 5)
        return cls(
            parts[1],
            _int_field(parts[2], line),
            _int_field(parts[3], line, 1, 5),
            timestamp=_timestamp_field(parts[4], line),
        )


@dataclass
class WorkoutGoalEntry(TimestampedEntry):
    """Weekly workout target in minutes."""
    TYPE: ClassVar[EntryType] = EntryType.WORKOUT_GOAL

    minutes: int

    @property
    def description(self) -> str:
        return f"Weekly workout goal: {self.minutes} mins"

    def to_storage_string(self) -> str:
        return self._with_timestamp(self.minutes)

    @classmethod
    def from_storage(cls, line: str) -> "WorkoutGoalEntry":
        parts = _split_fields(line, cls.TYPE, 3)
        return cls(_int_field(parts[1], line), timestamp=_timestamp_field(parts[2], line))


@dataclass
class CalorieGoalEntry(TimestampedEntry):
    """Daily calorie target."""
    TYPE: ClassVar[EntryType] = EntryType.CALORIE_GOAL

    calories: int

    @property
    def description(self) -> str:
        return f"Daily calorie goal: {self.calories} kcal"

    def to_storage_string(self) -> str:
        return self._with_timestamp(self.calories)

    @classmethod
    def from_storage(cls, line: str) -> "CalorieGoalEntry":
        parts = _split_fields(line, cls.TYPE, 3)
        return cls(_int_field(parts[1], line), timestamp=_timestamp_field(parts[2], line))


@dataclass
class MilkEntry(TimestampedEntry):
    """
    A milk-pumping session.

    Example:
        >>> MilkEntry(150, timestamp=datetime(2025, 10, 28, 1, 14)).to_list_line()
        '[MILK] 150ml (28/10/25 01:14)'
    """
    TYPE: ClassVar[EntryType] = EntryType.MILK

    volume_ml: int

    @property
    def description(self) -> str:
        return f"{self.volume_ml}ml"

    def to_storage_string(self) -> str:
        return self._with_timestamp(self.description)

    @classmethod
    def from_storage(cls, line: str) -> "MilkEntry":
        parts = _split_fields(line, cls.TYPE, 3)
        volume = parts[1].lower()
        if volume.endswith("ml"):
            volume = volume[:-2].strip()
        return cls(_int_field(volume, line, low=0), timestamp=_timestamp_field(parts[2], line))


@dataclass
class WeightEntry(TimestampedEntry):
    """Body weight in whole kilograms."""
    TYPE: ClassVar[EntryType] = EntryType.WEIGHT

    kg: int

    @property
    def description(self) -> str:
        return f"{self.kg}kg"

    def to_storage_string(self) -> str:
        return self._with_timestamp(self.kg)

    @classmethod
    def from_storage(cls, line: str) -> "WeightEntry":
        parts = _split_fields(line, cls.TYPE, 3)
        return cls(_int_field(parts[1], line), timestamp=_timestamp_field(parts[2], line))


@dataclass
class MeasurementEntry(TimestampedEntry):
    """Body measurements in cm. Waist and hips are always present."""
    TYPE: ClassVar[EntryType] = EntryType.MEASURE

    waist: int
    hips: int
    chest: Optional[int] = None
    thigh: Optional[int] = None
    arm: Optional[int] = None

    FIELDS: ClassVar[tuple] = ("waist", "hips", "chest", "thigh", "arm")

    @property
    def description(self) -> str:
        parts = []
        for name in self.FIELDS:
            value = getattr(self, name)
            if value is not None:
                parts.append(f"{name}={value}cm")
        return ", ".join(parts)

    def to_storage_string(self) -> str:
        return self._with_timestamp(*(getattr(self, name) for name in self.FIELDS))

    @classmethod
    def from_storage(cls, line: str) -> "MeasurementEntry":
        parts = _split_fields(line, cls.TYPE, 7)
        waist = _int_field(parts[1], line)
        hips = _int_field(parts[2], line)
        return cls(
            waist,
            hips,
            chest=_optional_int_field(parts[3], line),
            thigh=_optional_int_field(parts[4], line),
            arm=_optional_int_field(parts[5], line),
            timestamp=_timestamp_field(parts[6], line),
        )


@dataclass
class NoteEntry(TimestampedEntry):
    """Free-text note."""
    TYPE: ClassVar[EntryType] = EntryType.NOTE

    text: str

    @property
    def description(self) -> str:
        return self.text

    def to_storage_string(self) -> str:
        return self._with_timestamp(self.text)

    @classmethod
    def from_storage(cls, line: str) -> "NoteEntry":
        parts = _split_fields(line, cls.TYPE, 3)
        return cls(parts[1], timestamp=_timestamp_field(parts[2], line))


# Type alias for any concrete entry
Entry = (
    MealEntry | WorkoutEntry | WorkoutGoalEntry | CalorieGoalEntry
    | MilkEntry | WeightEntry | MeasurementEntry | NoteEntry
)

ENTRY_CLASSES: Dict[EntryType, Type[BaseEntry]] = {
    cls.TYPE: cls
    for cls in (
        MealEntry, WorkoutEntry, WorkoutGoalEntry, CalorieGoalEntry,
        MilkEntry, WeightEntry, MeasurementEntry, NoteEntry,
    )
}

_unhandled = set(EntryType) - set(ENTRY_CLASSES)
if _unhandled:
    raise ImportError(f"No entry class for types: {sorted(t.value for t in _unhandled)}")


def entry_from_storage(line: str) -> Entry:
    """
    Create the matching entry from a storage line, dispatching on its tag.

    Raises:
        StorageFormatError: If the tag is unknown or the line is malformed
    """
    tag = line.split(FIELD_SEPARATOR, 1)[0].strip()
    try:
        entry_type = EntryType(tag)
    except ValueError:
        raise StorageFormatError(f"Unknown type: {tag}") from None
    return ENTRY_CLASSES[entry_type].from_storage(line)
