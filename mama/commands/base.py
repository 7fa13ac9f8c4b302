"""
Base command classes, registry and dispatcher.
"""
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Dict, Type, Optional, List, Tuple, Union

from mama.data import Storage
from mama.errors import (
    MamaError, CommandSyntaxError, CommandValidationError, PersistenceError,
)
from mama.models import EntryList

logger = logging.getLogger(__name__)


@dataclass
class CommandResult:
    """
    Outcome of one command, ready for display.

    Attributes:
        message: Text shown to the user
        should_exit: True when the REPL should stop after showing message
        is_error: True when the command failed
    """
    message: str
    should_exit: bool = False
    is_error: bool = False


@dataclass
class ParseError:
    """
    Structured parse failure returned instead of a command.

    Attributes:
        message: User-facing reason, including usage where a verb matched
    """
    message: str

    def to_result(self) -> CommandResult:
        return CommandResult(self.message, is_error=True)


class Command(ABC):
    """
    Base class for all commands.

    Each command should override:
    - name: Command name(s) that trigger it
    - syntax: Argument synopsis shown in usage/help
    - help_text: Short description
    - from_input(): Syntax checks only, never touches the model
    - execute(): Model-dependent checks, mutation and persistence
    """

    # Command name(s) - can be string or tuple of strings
    name: str | tuple = ""

    # e.g. "delete INDEX"
    syntax: str = ""

    # Help text shown in help command and usage
    help_text: str = ""

    # Extra bullet points appended to usage
    notes: Tuple[str, ...] = ()

    @classmethod
    @abstractmethod
    def from_input(cls, args: str) -> "Command":
        """
        Build a command from its arguments.

        Args:
            args: Everything after the command name

        Raises:
            CommandSyntaxError: On malformed arguments
            CommandValidationError: On out-of-range literal values
        """

    @abstractmethod
    def execute(self, entries: EntryList, storage: Storage) -> CommandResult:
        """
        Run the command.

        Raises:
            ModelStateError: If the command cannot run against entries
            PersistenceError: If saving fails
        """

    @classmethod
    def usage(cls) -> str:
        """Full usage message."""
        lines = [f"Usage: {cls.syntax}", cls.help_text]
        lines.extend(f"• {note}" for note in cls.notes)
        return "\n".join(lines)

    @classmethod
    def with_usage(cls, reason: str) -> str:
        """Append usage to a failure reason with a single newline."""
        return f"{reason}\n{cls.usage()}"

    @classmethod
    def expect_no_args(cls, args: str) -> None:
        if args.strip():
            raise CommandSyntaxError(f"Unexpected arguments: '{args.strip()}'.")


class CommandRegistry:
    """
    Registry for all available commands.

    Names may be one or two words ("workout goal"); lookup prefers the
    longest match.
    """

    def __init__(self):
        """Initialize empty registry."""
        self._commands: Dict[str, Type[Command]] = {}

    def register(self, command_class: Type[Command]) -> None:
        """
        Register a command class.

        Args:
            command_class: Command class to register
        """
        if isinstance(command_class.name, str):
            names = [command_class.name]
        else:
            names = list(command_class.name)

        for name in names:
            self._commands[" ".join(name.lower().split())] = command_class

    def get(self, cmd: str) -> Optional[Type[Command]]:
        """
        Get command class for a command name.

        Args:
            cmd: Command name

        Returns:
            Command class or None if not found
        """
        return self._commands.get(" ".join(cmd.lower().split()))

    def resolve(self, line: str) -> Tuple[Optional[Type[Command]], str]:
        """
        Find the command for an input line.

        Args:
            line: Full user input, e.g. "workout goal 150"

        Returns:
            (command class or None, remaining argument string)
        """
        for words in (2, 1):
            parts = line.split(maxsplit=words)
            if len(parts) < words:
                continue
            cmd_class = self.get(" ".join(parts[:words]))
            if cmd_class is not None:
                args = parts[words] if len(parts) > words else ""
                return cmd_class, args
        return None, ""

    def get_all_commands(self) -> List[Type[Command]]:
        """
        Get list of all unique command classes.

        Returns:
            List of command classes
        """
        seen = set()
        commands = []
        for cmd_class in self._commands.values():
            if cmd_class not in seen:
                seen.add(cmd_class)
                commands.append(cmd_class)
        return commands


# Global registry
_registry = CommandRegistry()


def register_command(command_class: Type[Command]) -> Type[Command]:
    """
    Decorator to register a command.

    Usage:
        @register_command
        class MyCommand(Command):
            name = "mycommand"
            ...
    """
    _registry.register(command_class)
    return command_class


def get_registry() -> CommandRegistry:
    """Get the global command registry."""
    return _registry


def parse_command(line: str) -> Union[Command, ParseError]:
    """
    Parse one line of input.

    Never raises for bad input: an unknown verb or a parse-time error comes
    back as a ParseError.

    Args:
        line: Raw user input

    Returns:
        A ready-to-execute Command, or a ParseError
    """
    trimmed = line.strip()
    if not trimmed:
        return ParseError("Please enter a command. Type 'help' for available commands.")

    cmd_class, args = _registry.resolve(trimmed)
    if cmd_class is None:
        verb = trimmed.split()[0]
        return ParseError(f"Unknown command: '{verb}'. Type 'help' for available commands.")

    try:
        return cmd_class.from_input(args)
    except (CommandSyntaxError, CommandValidationError) as e:
        return ParseError(cmd_class.with_usage(str(e)))


def run_command(line: str, entries: EntryList, storage: Storage) -> CommandResult:
    """
    Parse and execute one line, always yielding exactly one result.

    Args:
        line: Raw user input
        entries: Current entry list
        storage: Storage used by mutating commands

    Returns:
        CommandResult to display
    """
    parsed = parse_command(line)
    if isinstance(parsed, ParseError):
        logger.info("Rejected input %r", line)
        return parsed.to_result()

    try:
        return parsed.execute(entries, storage)
    except PersistenceError as e:
        # Cause already logged by Storage
        return CommandResult(str(e), is_error=True)
    except MamaError as e:
        logger.warning("Command %r failed: %s", line, e)
        return CommandResult(parsed.with_usage(str(e)), is_error=True)
