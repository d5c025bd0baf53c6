"""Tab completion of command names for the prompt."""

from prompt_toolkit.completion import Completer, Completion

from .registry import META_COMMANDS


class CommandCompleter(Completer):
    """Complete the first word of the line against known command names.

    Matching is a case-insensitive prefix match. Once the cursor is past the
    first word nothing is offered; argument completion is left to the host.
    """

    def __init__(self, names=()):
        self._names: list[str] = []
        self.update(names)

    def update(self, names) -> None:
        """Replace the candidate list with names plus the meta-commands."""
        self._names = sorted(set(names) | set(META_COMMANDS))

    def candidates(self, prefix: str) -> list[str]:
        prefix = prefix.lower()
        return [n for n in self._names if n.startswith(prefix)]

    def get_completions(self, document, complete_event):
        text = document.text_before_cursor.lstrip()
        if any(c.isspace() for c in text):
            return
        for name in self.candidates(text):
            yield Completion(name, start_position=-len(text))
