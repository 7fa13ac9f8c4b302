"""
Daily calorie goal command.
"""
import logging

from .base import Command, CommandResult, register_command
from mama.errors import ModelStateError
from mama.models import CalorieGoalEntry
from mama.parsers import parse_positive_int
from mama.utils import now

logger = logging.getLogger(__name__)


@register_command
class CalorieGoalCommand(Command):
    """Set or view today's calorie goal."""

    name = "goal"
    syntax = "goal [CALORIES]"
    help_text = "Sets today's calorie goal, or shows it when CALORIES is omitted."
    notes = ("CALORIES must be a positive whole number.",)

    def __init__(self, calories: int | None = None):
        self.calories = calories

    @classmethod
    def from_input(cls, args: str) -> "CalorieGoalCommand":
        if not args.strip():
            return cls()
        return cls(parse_positive_int(args, "calories"))

    def execute(self, entries, storage) -> CommandResult:
        ref = now()
        if self.calories is None:
            goal = entries.active_calorie_goal(ref)
            if goal is None:
                raise ModelStateError("No calorie goal set for today.")
            return CommandResult(f"Your calorie goal today: {goal.calories} kcal.")

        entries.add(CalorieGoalEntry(self.calories, timestamp=ref))
        storage.save(entries)
        logger.info("Calorie goal set to %d kcal", self.calories)
        return CommandResult(f"Calorie goal for today set to {self.calories} kcal.")
