"""
Workout commands: log a session, set or view the weekly goal.
"""
import logging

from .base import Command, CommandResult, register_command
from .log_commands import AddEntryCommand
from mama.errors import ModelStateError
from mama.models import WorkoutEntry, WorkoutGoalEntry
from mama.parsers import parse_positive_int, parse_int_in_range, split_markers, check_text
from mama.utils import now

logger = logging.getLogger(__name__)

NO_GOAL_REMINDER = "No workout goal set for this week. Set one with: workout goal MINUTES"


def goal_progress(entries, ref) -> str:
    """Describe this week's workout minutes against the active goal."""
    goal = entries.active_workout_goal(ref)
    total = entries.workout_minutes_in_week(ref)
    if goal is None:
        return NO_GOAL_REMINDER
    if total >= goal.minutes:
        return f"Congrats! Weekly workout goal reached: {total}/{goal.minutes} mins this week."
    return (
        f"{goal.minutes - total} mins to go to reach your weekly goal "
        f"({total}/{goal.minutes} mins this week)."
    )


@register_command
class WorkoutCommand(AddEntryCommand):
    """Log a workout session."""

    name = "workout"
    syntax = "workout TYPE /dur MINUTES /feel RATING"
    help_text = "Logs a workout."
    notes = (
        "MINUTES must be a positive whole number.",
        "RATING must be a whole number from 1 to 5.",
        "Compact markers are accepted, e.g. workout yoga /dur30/feel4.",
    )

    def __init__(self, label: str, duration_mins: int, feel: int):
        self.label = label
        self.duration_mins = duration_mins
        self.feel = feel

    @classmethod
    def from_input(cls, args: str) -> "WorkoutCommand":
        head, values = split_markers(args, ("/dur", "/feel"))
        label = check_text(head, "workout type")
        duration = parse_positive_int(values["/dur"], "duration")
        feel = parse_int_in_range(values["/feel"], "feel", 1, 5)
        return cls(label, duration, feel)

    def build_entry(self) -> WorkoutEntry:
        return WorkoutEntry(self.label, self.duration_mins, self.feel, timestamp=now())

    def success_message(self, entry, entries) -> str:
        return f"Added: {entry.to_list_line()}\n{goal_progress(entries, entry.timestamp)}"


@register_command
class WorkoutGoalCommand(Command):
    """Set or view this week's workout goal."""

    name = "workout goal"
    syntax = "workout goal [MINUTES]"
    help_text = "Sets this week's workout goal, or shows it when MINUTES is omitted."
    notes = ("MINUTES must be a positive whole number.",)

    def __init__(self, minutes: int | None = None):
        self.minutes = minutes

    @classmethod
    def from_input(cls, args: str) -> "WorkoutGoalCommand":
        if not args.strip():
            return cls()
        return cls(parse_positive_int(args, "minutes"))

    def execute(self, entries, storage) -> CommandResult:
        ref = now()
        if self.minutes is None:
            goal = entries.active_workout_goal(ref)
            if goal is None:
                raise ModelStateError("No workout goal set for this week.")
            total = entries.workout_minutes_in_week(ref)
            return CommandResult(
                f"Your workout goal this week: {goal.minutes} mins "
                f"(set {goal.timestamp_string()}). Done so far: {total} mins."
            )

        goal = WorkoutGoalEntry(self.minutes, timestamp=ref)
        entries.add(goal)
        storage.save(entries)
        logger.info("Workout goal set to %d mins", self.minutes)
        return CommandResult(
            f"Workout goal for this week set to {self.minutes} mins.\n{goal_progress(entries, ref)}"
        )
