"""Example host: a tiny shell with a greeter.

Interactive:      python -m shellkit
Non-interactive:  python -m shellkit hello --name zerostack
"""

import logging
import sys
from importlib import metadata

from . import fmt
from .command import Command, Option
from .config import load_config, log_level
from .errors import ConfigError, HandlerError
from .shell import Shell

PROMPT = "mycli> "
NAME = "mycli"


def hello_command(shell: Shell, invocation) -> None:
    """Greet back with the name option."""
    name = shell.get_option(invocation, "name")
    if not name:
        fmt.out("please provide a name using the --name flag or set command")
        return
    fmt.out(f"Hello {name}")


def greet_command(shell: Shell, invocation) -> None:
    name = shell.get_option(invocation, "name")
    if not name:
        raise HandlerError("no name given; use --name or 'set name <value>'")
    greeting = shell.get_option(invocation, "greeting") or "Hello"
    fmt.out(f"{greeting}, {name}!")


COMMANDS = [
    Command(
        "hello",
        "greeting message",
        hello_command,
        options=[Option("name", "n", "name")],
    ),
    Command(
        "greet",
        "greet someone, failing when no name is known",
        greet_command,
        options=[
            Option("name", "n", "who to greet"),
            Option("greeting", "g", "greeting word (default: Hello)"),
        ],
    ),
]


def _version() -> str:
    try:
        return metadata.version("shellkit")
    except metadata.PackageNotFoundError:
        return "unknown"


def main(argv: list[str] | None = None) -> int:
    try:
        config = load_config(NAME)
    except ConfigError as e:
        fmt.error(str(e))
        return 2

    logging.basicConfig(level=log_level(config), format="%(levelname)s %(name)s: %(message)s")
    if "color" in config:
        fmt.init(color=config["color"], no_color=not config["color"])

    shell = Shell(NAME, PROMPT, _version(), description="My CLI", config=config)
    shell.add_commands(COMMANDS)
    return shell.start(sys.argv[1:] if argv is None else argv)
