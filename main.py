"""
MaMa Journal - Main Entry Point

A command-driven health journal for meals, workouts, pumping sessions,
weight and body measurements.
"""
import logging

from config import DATA_FILE, LOG_FILE, LOG_LEVEL, MODE, ensure_data_path
from mama.commands import run_command
from mama.data import Storage
from mama.errors import StorageFormatError
from mama.utils.console import console, print_welcome, render_result

logger = logging.getLogger(__name__)


def setup_logging():
    """Send log records to the log file so they never mix with REPL output."""
    ensure_data_path()
    logging.basicConfig(
        filename=LOG_FILE,
        level=LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def repl() -> int:
    """
    Main Read-Eval-Print Loop.

    Handles user input and dispatches to registered commands.

    Returns:
        Process exit code
    """
    storage = Storage(DATA_FILE)
    try:
        entries = storage.load()
    except StorageFormatError as e:
        logger.critical("Could not load %s: %s", DATA_FILE, e)
        console.print(f"Error: could not load {DATA_FILE}: {e}", style="red", markup=False)
        console.print("Fix or remove the line above and restart.")
        return 1

    print_welcome()

    # Main loop
    while True:
        try:
            user_input = input("> ").strip()
        except (KeyboardInterrupt, EOFError):
            # Ctrl+C or Ctrl+D
            console.print("\nGoodbye!")
            break

        # Skip empty input
        if not user_input:
            continue

        result = run_command(user_input, entries, storage)
        render_result(result)
        if result.should_exit:
            break

    return 0


def main():
    """Main entry point."""
    setup_logging()
    logger.info("Starting in %s mode with data file %s", MODE, DATA_FILE)
    try:
        return repl()
    except Exception:
        logger.exception("Fatal error")
        console.print("Fatal error, see the log file for details.", style="red")
        if MODE == "DEVELOPMENT":
            console.print_exception()
        return 1


if __name__ == "__main__":
    exit(main())
