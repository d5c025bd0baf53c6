"""The Shell: command table, global options, history and the read loop."""

import logging
from pathlib import Path
from typing import Any, Iterable

from . import fmt
from .builtins import builtin_commands
from .command import Command, Invocation
from .completion import CommandCompleter
from .dispatch import Dispatcher
from .errors import (
    HistoryIOError,
    InputInterrupted,
    InputReadError,
    QuitRequested,
    ShellError,
)
from .history import DEFAULT_HISTORY_LIMIT, HistoryManager
from .options import GlobalOptions
from .registry import CommandRegistry
from .tokenize import tokenize

logger = logging.getLogger(__name__)


class Shell:
    """An embeddable interactive command shell.

    The host registers commands with add_commands() and calls start() with
    the program's arguments: a non-empty list runs that one command and
    returns, an empty one starts the interactive prompt. Handlers are called
    as ``handler(shell, invocation)`` and read options with get_option(),
    which falls back to values set with the ``set`` meta-command.
    """

    def __init__(
        self,
        name: str,
        prompt: str | None = None,
        version: str = "",
        history_file: str | Path | None = None,
        description: str = "",
        *,
        history_limit: int | None = None,
        default_command: str = "list",
        config: dict | None = None,
    ):
        config = config or {}
        self.name = name
        self.version = version
        self.description = description
        self.prompt = prompt if prompt is not None else config.get("prompt", f"{name}> ")
        if history_file is None:
            history_file = config.get("history_file") or Path.home() / f".{name}_history"
        if history_limit is None:
            history_limit = config.get("history_limit", DEFAULT_HISTORY_LIMIT)

        self.completer = CommandCompleter()
        self.registry = CommandRegistry(self.completer)
        self.options = GlobalOptions(self.registry.known_options)
        self.history = HistoryManager(history_file, history_limit)
        self.dispatcher = Dispatcher(self.registry, self.options, self, default_command)
        self.registry.register(builtin_commands())

    # -- Host API ------------------------------------------------------------

    def add_commands(self, commands: Iterable[Command]) -> None:
        self.registry.register(commands)

    def get_option(self, invocation: Invocation | None, name: str) -> str:
        """Value from the command line, else the global option, else ""."""
        return self.options.resolve(invocation, name)

    def set_global_option(self, name: str, value: str) -> None:
        self.options.set(name, value)

    def unset_global_option(self, name: str) -> None:
        self.options.unset(name)

    def global_options(self) -> str:
        return self.options.dump()

    def run_command(self, args: list[str]) -> Any:
        """Dispatch one tokenized command line. Raises ShellError subclasses."""
        return self.dispatcher.run(args)

    def start(self, args: list[str] | None = None) -> int:
        """Run args once if given, else the interactive loop. Returns an exit code."""
        if args:
            return self._run_once(list(args))
        self.repl()
        return 0

    # -- Modes -----------------------------------------------------------------

    def _run_once(self, args: list[str]) -> int:
        try:
            self.run_command(args)
        except QuitRequested:
            return 0
        except ShellError as e:
            logger.debug("command %r failed: %s", args, e)
            return 1
        return 0

    def repl(self) -> None:
        """Interactive read-eval-print loop. History is saved on every exit path."""
        try:
            self.history.load()
        except HistoryIOError as e:
            fmt.warning(str(e))

        try:
            session = self._open_session()
            fmt.banner(self.name, self.version)
            while True:
                try:
                    line = self._read_line(session)
                except InputInterrupted:
                    fmt.hint('type "quit" to quit')
                    continue
                except InputReadError as e:
                    fmt.info(f"quitting on error: {e}")
                    break

                if not line.strip():
                    continue

                try:
                    self.run_command(tokenize(line))
                except QuitRequested:
                    break
                except ShellError as e:
                    logger.debug("line %r failed: %s", line, e)
                # Failed lines stay recallable.
                self.history.append(line)
        finally:
            self._save_history()

    def _open_session(self):
        from prompt_toolkit import PromptSession

        return PromptSession(
            history=self.history.buffer,
            completer=self.completer,
            complete_while_typing=False,
        )

    def _read_line(self, session) -> str:
        try:
            return session.prompt(self.prompt)
        except KeyboardInterrupt:
            raise InputInterrupted() from None
        except EOFError:
            raise InputReadError("end of input") from None
        except OSError as e:
            raise InputReadError(str(e)) from e

    def _save_history(self) -> None:
        try:
            self.history.save()
        except HistoryIOError as e:
            fmt.warning(str(e))
