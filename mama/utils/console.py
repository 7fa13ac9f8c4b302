"""
Terminal output for the REPL.
"""
from rich.console import Console

console = Console()


def print_welcome() -> None:
    """Print welcome message."""
    console.rule("[bold]MaMa Journal[/bold]")
    console.print("Type 'help' for commands, 'bye' to exit", justify="center")
    console.rule()
    console.print()


def render_result(result) -> None:
    """
    Print a command result.

    Args:
        result: CommandResult; errors are shown in red
    """
    style = "red" if result.is_error else None
    # User text may contain [brackets], e.g. "[MILK] 150ml"
    console.print(result.message, style=style, markup=False, highlight=False)
    console.print()
