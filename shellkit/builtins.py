"""Commands every shell registers: the command listing and per-command help."""

from . import fmt
from .command import Argument, Command
from .errors import HandlerError


def list_command(shell, invocation) -> None:
    header = f"{shell.name} {shell.version}".strip()
    if shell.description:
        header += f" - {shell.description}"
    rows = [(cmd.name, cmd.description) for cmd in shell.registry]
    rows += [
        ("set", "set a global option, or show all"),
        ("unset", "remove a global option"),
        ("quit", "leave the shell (also: exit)"),
    ]
    fmt.listing(header, rows)


def help_command(shell, invocation) -> None:
    name = invocation.argument("command")
    if not name:
        return list_command(shell, invocation)
    cmd = shell.registry.get(name)
    if cmd is None:
        raise HandlerError(f'command "{name}" unknown')
    fmt.usage(cmd.describe())


def builtin_commands() -> list[Command]:
    return [
        Command("list", "list all commands", list_command),
        Command(
            "help",
            "show help for a command",
            help_command,
            arguments=[Argument("command", "command to describe")],
        ),
    ]
