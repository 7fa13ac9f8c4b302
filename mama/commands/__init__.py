"""
Command classes for the journal REPL.
"""
from .base import (
    Command, CommandResult, ParseError, CommandRegistry,
    register_command, get_registry, parse_command, run_command,
)

# Import all command modules to trigger registration
from . import basic_commands
from . import list_commands
from . import log_commands
from . import workout_commands
from . import goal_command
from . import dashboard_command

__all__ = [
    'Command',
    'CommandResult',
    'ParseError',
    'CommandRegistry',
    'register_command',
    'get_registry',
    'parse_command',
    'run_command',
]
