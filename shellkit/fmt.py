"""Rich-formatted output for the shell.

All command output and diagnostics go through one console so hosts can
redirect the shell with a single call to init().
"""

from rich.console import Console
from rich.text import Text

_console = Console()


def init(*, color: bool = False, no_color: bool = False, stderr: bool = False) -> None:
    """Reconfigure the module-level console.

    Call once at startup, before any output.
    """
    global _console
    kwargs: dict = {"stderr": stderr}
    if color:
        kwargs["force_terminal"] = True
        kwargs["no_color"] = False
    if no_color:
        kwargs["no_color"] = True
    _console = Console(**kwargs)


# -- Command output ----------------------------------------------------------


def out(msg: str) -> None:
    """Print plain command output, without markup or wrapping."""
    _console.print(Text(msg), soft_wrap=True, highlight=False)


def usage(text: str) -> None:
    _console.print(Text(text.rstrip("\n")), soft_wrap=True, highlight=False)


def listing(header: str, rows: list[tuple[str, str]]) -> None:
    _console.print(Text(header, style="bold"), soft_wrap=True)
    if not rows:
        return
    width = max(len(name) for name, _ in rows)
    for name, desc in rows:
        line = Text()
        line.append(f"  {name.ljust(width)}", style="cyan")
        if desc:
            line.append(f"  {desc}")
        _console.print(line, soft_wrap=True)


# -- Diagnostics -------------------------------------------------------------


def info(msg: str) -> None:
    _console.print(Text(msg, style="dim"), soft_wrap=True)


def hint(msg: str) -> None:
    _console.print(Text(msg, style="yellow"), soft_wrap=True)


def warning(msg: str) -> None:
    line = Text()
    line.append("warning: ", style="yellow")
    line.append(msg, style="yellow")
    _console.print(line, soft_wrap=True)


def error(msg: str) -> None:
    line = Text()
    line.append("error: ", style="bold red")
    line.append(msg, style="red")
    _console.print(line, soft_wrap=True)


def parse_error(msg: str) -> None:
    line = Text()
    line.append("parse error: ", style="bold red")
    line.append(msg, style="red")
    _console.print(line, soft_wrap=True)


def failure(msg: str) -> None:
    line = Text()
    line.append("failure in execution: ", style="bold red")
    line.append(msg, style="red")
    _console.print(line, soft_wrap=True)


def banner(name: str, version: str) -> None:
    text = f"{name} {version}".strip()
    _console.print(
        Text(f'{text}. Type "list" for commands, "quit" or Ctrl-D to quit.', style="dim"),
        soft_wrap=True,
    )
