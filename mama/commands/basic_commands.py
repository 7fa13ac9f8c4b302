"""
Basic commands: help, bye.
"""
import logging

from .base import Command, CommandResult, register_command, get_registry

logger = logging.getLogger(__name__)


@register_command
class HelpCommand(Command):
    """Show help information."""

    name = ("help", "h", "?")
    syntax = "help"
    help_text = "Shows all available commands."

    @classmethod
    def from_input(cls, args: str) -> "HelpCommand":
        cls.expect_no_args(args)
        return cls()

    def execute(self, entries, storage) -> CommandResult:
        """List every command with its syntax."""
        registry = get_registry()

        commands = registry.get_all_commands()
        commands.sort(key=lambda c: c.syntax)

        lines = ["Available Commands:", "=" * 70]
        for cmd_class in commands:
            lines.append(f"  {cmd_class.syntax:45} {cmd_class.help_text}")
        lines.append("=" * 70)
        return CommandResult("\n".join(lines))


@register_command
class ByeCommand(Command):
    """Save and exit the application."""

    name = ("bye", "exit", "quit")
    syntax = "bye"
    help_text = "Saves all entries and exits."

    @classmethod
    def from_input(cls, args: str) -> "ByeCommand":
        cls.expect_no_args(args)
        return cls()

    def execute(self, entries, storage) -> CommandResult:
        storage.save(entries)
        logger.info("Final save of %d entries before exit", entries.full_size())
        return CommandResult("Bye. Hope to see you again soon!", should_exit=True)
