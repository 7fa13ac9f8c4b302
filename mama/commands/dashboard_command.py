"""
Dashboard command - read-only overview of today and this week.
"""
from .base import Command, CommandResult, register_command
from mama.reports import summarize, render_dashboard
from mama.utils import now


@register_command
class DashboardCommand(Command):
    """Show calorie, workout and milk progress."""

    name = ("dashboard", "dash")
    syntax = "dashboard"
    help_text = "Shows today's calories, this week's workouts and milk totals against your goals."

    @classmethod
    def from_input(cls, args: str) -> "DashboardCommand":
        cls.expect_no_args(args)
        return cls()

    def execute(self, entries, storage) -> CommandResult:
        return CommandResult(render_dashboard(summarize(entries, now())))
