"""Command, option and argument declarations, and the parsed Invocation.

Declarations are immutable and live for the lifetime of the shell. Parsing
never writes into them: every call to Command.parse() builds a fresh
argparse parser from the declaration and returns a new Invocation, so values
from one call cannot leak into the next.
"""

import argparse
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Callable, Mapping

from .errors import InvalidCommand, ParseError


@dataclass(frozen=True)
class Option:
    """A named option such as ``--region/-r``."""

    name: str
    short: str = ""
    description: str = ""
    default: Any = None
    required: bool = False
    multiple: bool = False
    flag: bool = False

    def flags(self) -> list[str]:
        names = [f"--{self.name}"]
        if self.short:
            names.append(f"-{self.short}")
        return names


@dataclass(frozen=True)
class Argument:
    """A positional argument."""

    name: str
    description: str = ""
    required: bool = False
    multiple: bool = False
    default: Any = None


HELP_OPTION = Option("help", "h", "show this help message", flag=True)

# Options every command accepts, on top of what it declares.
DEFAULT_OPTIONS: tuple[Option, ...] = (HELP_OPTION,)

Handler = Callable[..., Any]


class _CommandParser(argparse.ArgumentParser):
    """ArgumentParser that raises instead of exiting the process."""

    def error(self, message):
        raise ParseError(message)

    def exit(self, status=0, message=None):
        raise ParseError(message.strip() if message else f"exit status {status}")


@dataclass(frozen=True)
class Command:
    """A registered command: its declaration plus the handler to call."""

    name: str
    description: str
    handler: Handler
    options: tuple[Option, ...] = ()
    arguments: tuple[Argument, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "options", tuple(self.options))
        object.__setattr__(self, "arguments", tuple(self.arguments))

    def all_options(self) -> tuple[Option, ...]:
        declared = {o.name for o in self.options}
        return self.options + tuple(o for o in DEFAULT_OPTIONS if o.name not in declared)

    def find_option(self, name: str) -> Option | None:
        for opt in self.all_options():
            if opt.name == name:
                return opt
        return None

    def build_parser(self) -> argparse.ArgumentParser:
        parser = _CommandParser(
            prog=self.name,
            description=self.description or None,
            add_help=False,
            allow_abbrev=False,
        )
        for opt in self.all_options():
            kwargs: dict = {
                "dest": opt.name,
                "help": opt.description or None,
                "default": argparse.SUPPRESS,
            }
            if opt.flag:
                kwargs["action"] = "store_true"
            else:
                kwargs["metavar"] = opt.name.upper()
                if opt.multiple:
                    kwargs["action"] = "append"
                if opt.required:
                    kwargs["required"] = True
            parser.add_argument(*opt.flags(), **kwargs)
        for arg in self.arguments:
            if arg.multiple:
                nargs = "+" if arg.required else "*"
            else:
                nargs = None if arg.required else "?"
            kwargs = {"help": arg.description or None, "default": None}
            if nargs is not None:
                kwargs["nargs"] = nargs
            parser.add_argument(arg.name, **kwargs)
        return parser

    def validate(self) -> None:
        """Raise InvalidCommand if the declaration cannot build a parser.

        Catches repeated option or argument names, a positional sharing an
        option's name, and flags such as ``-h`` claimed twice.
        """
        seen: set[str] = set()
        for name in [o.name for o in self.options] + [a.name for a in self.arguments]:
            if name in seen:
                raise InvalidCommand(f"command {self.name!r}: {name!r} is declared twice")
            seen.add(name)
        for arg in self.arguments:
            if self.find_option(arg.name) is not None:
                raise InvalidCommand(
                    f"command {self.name!r}: argument {arg.name!r} clashes with an option"
                )
        try:
            self.build_parser()
        except (argparse.ArgumentError, ValueError) as e:
            raise InvalidCommand(f"command {self.name!r}: {e}") from e

    def parse(self, args: list[str]) -> "Invocation":
        """Parse args against this declaration. Raises ParseError."""
        ns = vars(self.build_parser().parse_args(list(args)))
        option_names = {o.name for o in self.all_options()}
        provided = {k: v for k, v in ns.items() if k in option_names}
        positional = {a.name: ns.get(a.name) for a in self.arguments}
        return Invocation(self, MappingProxyType(provided), MappingProxyType(positional))

    def describe(self) -> str:
        """Return the usage/help text for this command."""
        return self.build_parser().format_help()


@dataclass(frozen=True)
class Invocation:
    """The values parsed from one command line for one command."""

    command: Command
    options: Mapping[str, Any] = field(default_factory=dict)
    arguments: Mapping[str, Any] = field(default_factory=dict)

    @property
    def name(self) -> str:
        return self.command.name

    def provided(self, name: str) -> bool:
        """True if the option was given on this command line, even if empty."""
        return name in self.options

    def option(self, name: str, default: Any = None) -> Any:
        """Return the provided value, else the declared default, else default.

        This does not consult global options; use Shell.get_option for that.
        """
        if name in self.options:
            return self.options[name]
        opt = self.command.find_option(name)
        if opt is not None and opt.default is not None:
            return opt.default
        if opt is not None and opt.flag:
            return False
        return default

    def flag(self, name: str) -> bool:
        return bool(self.options.get(name, False))

    def argument(self, name: str, default: Any = None) -> Any:
        value = self.arguments.get(name)
        if value not in (None, []):
            return value
        for arg in self.command.arguments:
            if arg.name == name and arg.default is not None:
                return arg.default
        return default if value is None else value

    def help_requested(self) -> bool:
        return self.flag(HELP_OPTION.name)
