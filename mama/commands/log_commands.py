"""
Commands that record a new entry: meal, milk, weight, measure, note.
"""
import logging
from abc import abstractmethod

from .base import Command, CommandResult, register_command
from mama.errors import CommandSyntaxError
from mama.models import MealEntry, MilkEntry, WeightEntry, MeasurementEntry, NoteEntry
from mama.parsers import (
    parse_positive_int, parse_non_negative_int, split_markers, parse_fields, check_text,
)
from mama.utils import now

logger = logging.getLogger(__name__)


class AddEntryCommand(Command):
    """Shared execute for commands that append one entry and save."""

    @abstractmethod
    def build_entry(self):
        """Create the entry to append, stamped now."""

    def execute(self, entries, storage) -> CommandResult:
        entry = self.build_entry()
        entries.add(entry)
        storage.save(entries)
        logger.info("Added %s", entry.to_storage_string())
        return CommandResult(self.success_message(entry, entries))

    def success_message(self, entry, entries) -> str:
        return f"Added: {entry.to_list_line()}"


@register_command
class MealCommand(AddEntryCommand):
    """Log a meal with its calories."""

    name = "meal"
    syntax = "meal NAME /cal CALORIES"
    help_text = "Logs a meal."
    notes = ("CALORIES must be a positive whole number.",)

    def __init__(self, meal_name: str, calories: int):
        self.meal_name = meal_name
        self.calories = calories

    @classmethod
    def from_input(cls, args: str) -> "MealCommand":
        head, values = split_markers(args, ("/cal",))
        meal_name = check_text(head, "meal name")
        calories = parse_positive_int(values["/cal"], "calories")
        return cls(meal_name, calories)

    def build_entry(self) -> MealEntry:
        return MealEntry(self.meal_name, self.calories, timestamp=now())


@register_command
class MilkCommand(AddEntryCommand):
    """Log a milk-pumping session."""

    name = "milk"
    syntax = "milk VOLUME"
    help_text = "Logs a pumping session of VOLUME ml."
    notes = ("VOLUME must be a whole number of ml, 0 or more (e.g. 150 or 150ml).",)

    def __init__(self, volume_ml: int):
        self.volume_ml = volume_ml

    @classmethod
    def from_input(cls, args: str) -> "MilkCommand":
        value = args.strip().lower()
        if value.endswith("ml"):
            value = value[:-2].strip()
        return cls(parse_non_negative_int(value, "volume"))

    def build_entry(self) -> MilkEntry:
        return MilkEntry(self.volume_ml, timestamp=now())

    def success_message(self, entry, entries) -> str:
        return (
            f"Added: {entry.to_list_line()}\n"
            f"Total breast milk pumped: {entries.total_milk_volume()}ml"
        )


@register_command
class WeightCommand(AddEntryCommand):
    """Log body weight."""

    name = "weight"
    syntax = "weight KG"
    help_text = "Logs your weight in kg."
    notes = ("KG must be a positive whole number.",)

    def __init__(self, kg: int):
        self.kg = kg

    @classmethod
    def from_input(cls, args: str) -> "WeightCommand":
        return cls(parse_positive_int(args, "weight"))

    def build_entry(self) -> WeightEntry:
        return WeightEntry(self.kg, timestamp=now())


@register_command
class MeasureCommand(AddEntryCommand):
    """Log body measurements in cm."""

    name = ("measure", "measurement")
    syntax = "measure waist/W hips/H [chest/C] [thigh/T] [arm/A]"
    help_text = "Logs body measurements in cm."
    notes = (
        "waist and hips are required; chest, thigh and arm are optional.",
        "Every value must be a positive whole number.",
    )

    REQUIRED = ("waist", "hips")

    def __init__(self, values: dict):
        self.values = values

    @classmethod
    def from_input(cls, args: str) -> "MeasureCommand":
        raw = parse_fields(args, MeasurementEntry.FIELDS)
        for field_name in cls.REQUIRED:
            if field_name not in raw:
                raise CommandSyntaxError(f"Missing {field_name}.")
        values = {name: parse_positive_int(value, name) for name, value in raw.items()}
        return cls(values)

    def build_entry(self) -> MeasurementEntry:
        return MeasurementEntry(timestamp=now(), **self.values)


@register_command
class NoteCommand(AddEntryCommand):
    """Log a free-text note."""

    name = "note"
    syntax = "note TEXT"
    help_text = "Logs a free-text note."

    def __init__(self, text: str):
        self.text = text

    @classmethod
    def from_input(cls, args: str) -> "NoteCommand":
        return cls(check_text(args, "note text"))

    def build_entry(self) -> NoteEntry:
        return NoteEntry(self.text, timestamp=now())
