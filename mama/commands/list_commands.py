"""
Commands working on the shown view: list, find, delete.
"""
import logging
import re

from .base import Command, CommandResult, register_command
from mama.errors import CommandSyntaxError, CommandValidationError, ModelStateError
from mama.models import EntryType
from mama.parsers import split_markers

logger = logging.getLogger(__name__)


def format_shown(entries, header: str) -> str:
    """Number the shown view from 1, or say it is empty."""
    shown = entries.shown()
    if not shown:
        return "No entries found."
    lines = [header]
    for i, entry in enumerate(shown, 1):
        lines.append(f"{i}. {entry.to_list_line()}")
    return "\n".join(lines)


@register_command
class ListCommand(Command):
    """Show all entries, or only those of one type."""

    name = ("list", "ls")
    syntax = "list [/t TYPE]"
    help_text = "Lists all entries, or only entries of TYPE."
    notes = (
        "TYPE is one of: " + ", ".join(t.value.lower() for t in EntryType) + ".",
    )

    def __init__(self, type_name: str | None = None):
        self.type_name = type_name

    @classmethod
    def from_input(cls, args: str) -> "ListCommand":
        if not args.strip():
            return cls()

        head, values = split_markers(args, ("/t",), numeric=False)
        if head:
            raise CommandSyntaxError(f"Unexpected text before /t: '{head}'.")
        type_name = values["/t"]
        if not type_name:
            raise CommandSyntaxError("Missing TYPE after /t.")
        if len(type_name.split()) > 1:
            raise CommandSyntaxError(f"TYPE must be a single word but got '{type_name}'.")
        return cls(type_name)

    def execute(self, entries, storage) -> CommandResult:
        if self.type_name is None:
            entries.clear_filter()
            return CommandResult(format_shown(entries, "Here are your entries:"))

        entries.filter_by_type(self.type_name)
        message = format_shown(entries, f"Here are your {self.type_name.lower()} entries:")
        if self.type_name.upper() == EntryType.MILK.value:
            message += f"\nTotal breast milk pumped: {entries.total_milk_volume()}ml"
        return CommandResult(message)


@register_command
class FindCommand(Command):
    """Show entries whose description contains a keyword."""

    name = ("find", "f")
    syntax = "find KEYWORD"
    help_text = "Lists entries whose description contains KEYWORD."

    def __init__(self, keyword: str):
        self.keyword = keyword

    @classmethod
    def from_input(cls, args: str) -> "FindCommand":
        keyword = args.strip()
        if not keyword:
            raise CommandSyntaxError("Missing keyword.")
        return cls(keyword)

    def execute(self, entries, storage) -> CommandResult:
        entries.filter_by_keyword(self.keyword)
        return CommandResult(format_shown(entries, f"Entries matching '{self.keyword}':"))


@register_command
class DeleteCommand(Command):
    """
    Deletes an entry from the currently shown list by its index.

    The index is validated against the filtered (shown) view, not the full
    backing list. Syntax is checked at parse time; the range is checked again
    at execute time because the shown view may have changed in between.
    """

    name = ("delete", "del")
    syntax = "delete INDEX"
    help_text = "Deletes the entry at INDEX from the currently shown list."
    notes = ("INDEX must be a positive whole number (1, 2, 3, ...).",)

    EMPTY_MESSAGE = "There are no items to delete. The shown list is empty."

    def __init__(self, index_one_based: int):
        self.index_one_based = index_one_based

    @classmethod
    def from_input(cls, args: str) -> "DeleteCommand":
        arg = args.strip()
        if not arg:
            raise CommandSyntaxError("Missing index.")

        # Strict digits only: no sign, no decimals
        if not re.fullmatch(r"[0-9]+", arg):
            raise CommandSyntaxError("Index must be a positive whole number.")

        index = int(arg)
        if index <= 0:
            raise CommandValidationError("Index must be greater than 0.")
        return cls(index)

    def execute(self, entries, storage) -> CommandResult:
        shown_size = entries.shown_size()
        if shown_size == 0:
            logger.info("Delete attempted on empty shown list")
            raise ModelStateError(self.EMPTY_MESSAGE)

        if self.index_one_based <= 0 or self.index_one_based > shown_size:
            logger.info("Delete index out of bounds (shown list): %d / size=%d",
                        self.index_one_based, shown_size)
            raise ModelStateError(self._out_of_bounds(shown_size))

        try:
            removed = entries.delete_by_shown_index(self.index_one_based - 1)
        except IndexError:
            # Shown view changed under us
            size_now = entries.shown_size()
            if size_now == 0:
                raise ModelStateError(self.EMPTY_MESSAGE) from None
            raise ModelStateError(self._out_of_bounds(size_now)) from None

        storage.save(entries)
        logger.info("Deleted (shown view) index %d: %s", self.index_one_based, removed.to_list_line())
        return CommandResult(f"Deleted: {removed.to_list_line()}")

    def _out_of_bounds(self, shown_size: int) -> str:
        valid = "Valid index: 1." if shown_size == 1 else f"Valid range: 1..{shown_size}."
        return f"Index {self.index_one_based} is out of bounds (shown list). {valid}"
