"""Route tokenized input to a meta-command or a registered command.

The routes are checked in a fixed order, and that order is the
disambiguation policy: an empty line (or a bare --help while ``list`` is the
default command) goes to the default command; ``quit``/``exit`` alone end
the loop; ``set``/``unset`` are meta-commands even if followed by junk; only
then is the first token looked up as a command name.
"""

import enum
import logging
from typing import Any

from . import fmt
from .errors import (
    HandlerError,
    ParseError,
    QuitRequested,
    UnknownCommand,
    UnknownOption,
)
from .options import GlobalOptions
from .registry import CommandRegistry

logger = logging.getLogger(__name__)

_HELP_TOKENS = ("-h", "--help")
_QUIT_TOKENS = ("quit", "exit")


class Route(enum.Enum):
    DEFAULT = "default"
    QUIT = "quit"
    SET = "set"
    UNSET = "unset"
    COMMAND = "command"


def classify(args: list[str], default_command: str) -> tuple[Route, str, list[str]]:
    """Return (route, command name, remaining args) for tokenized input."""
    if not args or (
        default_command == "list" and len(args) == 1 and args[0] in _HELP_TOKENS
    ):
        return Route.DEFAULT, default_command, []
    if len(args) == 1 and args[0] in _QUIT_TOKENS:
        return Route.QUIT, args[0], []
    if args[0] == "set":
        return Route.SET, "set", args[1:]
    if args[0] == "unset":
        return Route.UNSET, "unset", args[1:]
    return Route.COMMAND, args[0], args[1:]


class Dispatcher:
    """Run one tokenized command line.

    Conditions are printed to the output sink and then raised as ShellError
    subclasses so the caller can tell them apart. ``context`` is passed to
    every handler as its first argument.
    """

    def __init__(
        self,
        registry: CommandRegistry,
        options: GlobalOptions,
        context: Any = None,
        default_command: str = "list",
    ):
        self.registry = registry
        self.options = options
        self.context = context
        self.default_command = default_command

    def run(self, args: list[str]) -> Any:
        route, name, rest = classify(list(args or []), self.default_command)
        logger.debug("route=%s name=%s args=%r", route.value, name, rest)
        if route is Route.QUIT:
            raise QuitRequested(name)
        if route is Route.SET:
            return self._set(rest)
        if route is Route.UNSET:
            return self._unset(rest)
        return self._call(name, rest)

    def _set(self, args: list[str]) -> None:
        if not args:
            dump = self.options.dump()
            if dump:
                fmt.out(dump.rstrip("\n"))
            return
        if len(args) != 2:
            fmt.error("usage: set [name value]")
            raise ParseError("set takes no arguments or exactly two")
        try:
            self.options.set(args[0], args[1])
        except UnknownOption as e:
            fmt.error(str(e))
            raise

    def _unset(self, args: list[str]) -> None:
        if len(args) != 1:
            fmt.error("usage: unset name")
            raise ParseError("unset takes exactly one option name")
        self.options.unset(args[0])

    def _call(self, name: str, args: list[str]) -> Any:
        cmd = self.registry.get(name)
        if cmd is None:
            fmt.error(f'command "{name}" unknown')
            raise UnknownCommand(name)

        try:
            invocation = cmd.parse(args)
        except ParseError as e:
            # A required argument missing must not hide an explicit --help.
            if any(a in _HELP_TOKENS for a in args):
                fmt.usage(cmd.describe())
                return None
            fmt.parse_error(str(e))
            fmt.usage(cmd.describe())
            raise

        if invocation.help_requested():
            fmt.usage(cmd.describe())
            return None

        try:
            return cmd.handler(self.context, invocation)
        except HandlerError as e:
            fmt.failure(str(e))
            raise
