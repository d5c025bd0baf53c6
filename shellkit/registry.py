"""Command registry and the derived registry of known option names."""

import logging
from typing import Iterable, Iterator

from .command import DEFAULT_OPTIONS, Command
from .errors import DuplicateCommand

logger = logging.getLogger(__name__)

# Handled by the dispatcher before any registry lookup.
META_COMMANDS = ("quit", "exit", "set", "unset")


class CommandRegistry:
    """Registered commands keyed by name.

    Every successful register() rebuilds the set of known option names (used
    to validate ``set``) and pushes the command names to the completer.
    """

    def __init__(self, completer=None):
        self._commands: dict[str, Command] = {}
        self._known_options: frozenset[str] = frozenset(o.name for o in DEFAULT_OPTIONS)
        self._completer = completer

    def register(self, commands: Iterable[Command]) -> None:
        """Add commands. Raises DuplicateCommand or InvalidCommand and adds nothing."""
        batch: dict[str, Command] = {}
        for cmd in commands:
            if cmd.name in META_COMMANDS:
                raise DuplicateCommand(cmd.name, "is a built-in meta-command")
            if cmd.name in self._commands or cmd.name in batch:
                raise DuplicateCommand(cmd.name)
            cmd.validate()
            batch[cmd.name] = cmd
        self._commands.update(batch)
        logger.debug("registered commands: %s", ", ".join(batch))
        self._rebuild_options()
        if self._completer is not None:
            self._completer.update(self.names())

    def _rebuild_options(self) -> None:
        names = {o.name for o in DEFAULT_OPTIONS}
        for cmd in self._commands.values():
            names.update(o.name for o in cmd.options)
        self._known_options = frozenset(names)

    def get(self, name: str) -> Command | None:
        return self._commands.get(name)

    def names(self) -> list[str]:
        return sorted(self._commands)

    def known_options(self) -> frozenset[str]:
        return self._known_options

    def __contains__(self, name: object) -> bool:
        return name in self._commands

    def __iter__(self) -> Iterator[Command]:
        return iter(self._commands[n] for n in self.names())

    def __len__(self) -> int:
        return len(self._commands)
