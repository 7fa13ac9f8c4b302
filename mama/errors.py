"""
Exception types shared across the journal.

Parse-time problems (syntax, validation) are raised by command parsers and
captured by the dispatcher; state and persistence problems are raised while
a command executes. All of them are recoverable from the REPL's point of view.
"""


class MamaError(Exception):
    """Base class for all journal errors."""


class CommandSyntaxError(MamaError):
    """Malformed command text: missing, extra or non-numeric tokens."""


class CommandValidationError(MamaError):
    """Well-formed command carrying a value outside its allowed range."""


class ModelStateError(MamaError):
    """Command cannot run against the current entry list (e.g. bad index)."""


class PersistenceError(MamaError):
    """Writing the data file failed. The original OSError is the __cause__."""


class StorageFormatError(MamaError):
    """A storage line could not be parsed back into an entry."""

    def __init__(self, message: str, line_number: int | None = None):
        if line_number is not None:
            message = f"Line {line_number}: {message}"
        super().__init__(message)
        self.line_number = line_number
