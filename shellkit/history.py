"""Input history: loaded once at start, rewritten once at stop."""

import logging
import os
import tempfile
from pathlib import Path

from prompt_toolkit.history import InMemoryHistory

from .errors import HistoryIOError

logger = logging.getLogger(__name__)

DEFAULT_HISTORY_LIMIT = 1000


class HistoryManager:
    """Flat-file history, one raw input line per entry.

    ``buffer`` is the prompt_toolkit history handed to the PromptSession, so
    up-arrow recall sees both prior sessions and lines accepted in this one.
    Nothing is written to disk until save().
    """

    def __init__(self, path, limit: int = DEFAULT_HISTORY_LIMIT):
        self.path = Path(path).expanduser()
        self.limit = limit
        self.entries: list[str] = []
        self.buffer = InMemoryHistory()

    def load(self) -> None:
        """Read prior entries, replacing anything already in memory.

        A missing file is created empty.
        """
        self.entries = []
        self.buffer = InMemoryHistory()
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.touch(exist_ok=True)
            text = self.path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise HistoryIOError(f"could not read history file {self.path}: {e}") from e
        self.entries = [line for line in text.splitlines() if line.strip()]
        for line in self.entries:
            self.buffer.append_string(line)
        logger.debug("loaded %d history entries from %s", len(self.entries), self.path)

    def append(self, line: str) -> None:
        """Record an accepted line for save().

        The prompt session adds accepted lines to ``buffer`` itself.
        """
        self.entries.append(line)

    def save(self) -> None:
        """Atomically replace the history file with the in-memory history."""
        kept = self.entries[-self.limit :] if self.limit else list(self.entries)
        tmp_path = None
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_path = tempfile.mkstemp(
                dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp"
            )
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                for line in kept:
                    f.write(line + "\n")
            os.replace(tmp_path, self.path)
        except OSError as e:
            if tmp_path is not None:
                Path(tmp_path).unlink(missing_ok=True)
            raise HistoryIOError(f"error writing history file {self.path}: {e}") from e
        logger.debug("saved %d history entries to %s", len(kept), self.path)
