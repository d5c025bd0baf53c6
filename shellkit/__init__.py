"""shellkit: an embeddable interactive command shell."""

from .command import Argument, Command, Invocation, Option
from .errors import (
    ConfigError,
    DuplicateCommand,
    HandlerError,
    HistoryIOError,
    InputInterrupted,
    InputReadError,
    InvalidCommand,
    ParseError,
    QuitRequested,
    ShellError,
    UnknownCommand,
    UnknownOption,
)
from .shell import Shell
from .tokenize import tokenize

__all__ = [
    "Argument",
    "Command",
    "ConfigError",
    "DuplicateCommand",
    "HandlerError",
    "HistoryIOError",
    "InputInterrupted",
    "InputReadError",
    "InvalidCommand",
    "Invocation",
    "Option",
    "ParseError",
    "QuitRequested",
    "Shell",
    "ShellError",
    "UnknownCommand",
    "UnknownOption",
    "tokenize",
]
