"""Exception taxonomy for the shell.

Every condition the dispatcher or the read loop can report is a subclass of
ShellError. Only QuitRequested and InputReadError end the interactive loop.
"""


class ShellError(Exception):
    """Base class for conditions reported by the shell."""


class QuitRequested(ShellError):
    """Raised when the user types quit or exit. A control signal, not a failure."""


class UnknownCommand(ShellError):
    """Raised when the first token names no registered command."""

    def __init__(self, name: str):
        super().__init__(f'command "{name}" unknown')
        self.name = name


class ParseError(ShellError):
    """Raised for bad options or arguments given to a known command."""


class HandlerError(ShellError):
    """Raised by command handlers to report a domain failure."""


class UnknownOption(ShellError):
    """Raised when set targets an option no registered command declares."""

    def __init__(self, name: str):
        super().__init__(f"unknown option {name}")
        self.name = name


class DuplicateCommand(ShellError):
    """Raised when registering a command whose name is already taken."""

    def __init__(self, name: str, reason: str = "is already registered"):
        super().__init__(f"command {name!r} {reason}")
        self.name = name


class InvalidCommand(ShellError):
    """Raised when a command declaration cannot be parsed, e.g. clashing flags."""


class HistoryIOError(ShellError):
    """Raised when the history file cannot be read or written."""


class InputReadError(ShellError):
    """Raised when the line reader fails. Ends the interactive loop."""


class InputInterrupted(ShellError):
    """Raised on Ctrl-C during a read. The loop continues."""


class ConfigError(ShellError):
    """Raised for an invalid shell configuration file."""
