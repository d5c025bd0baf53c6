"""Tests for shellkit.completion — first-word command completion."""

from prompt_toolkit.completion import CompleteEvent
from prompt_toolkit.document import Document

from shellkit.completion import CommandCompleter


def _complete(completer, text):
    return [c.text for c in completer.get_completions(Document(text), CompleteEvent())]


class TestCommandCompleter:
    def test_prefix_match(self):
        c = CommandCompleter(["hello", "help", "deploy"])
        assert _complete(c, "he") == ["hello", "help"]

    def test_meta_commands_included(self):
        c = CommandCompleter([])
        assert _complete(c, "q") == ["quit"]
        assert _complete(c, "") == ["exit", "quit", "set", "unset"]

    def test_case_insensitive(self):
        c = CommandCompleter(["hello"])
        completions = list(c.get_completions(Document("HEL"), CompleteEvent()))
        assert [x.text for x in completions] == ["hello"]
        assert completions[0].start_position == -3

    def test_nothing_after_first_word(self):
        c = CommandCompleter(["hello"])
        assert _complete(c, "hello --n") == []
        assert _complete(c, "hello ") == []

    def test_update_replaces_candidates(self):
        c = CommandCompleter(["old"])
        c.update(["new"])
        assert _complete(c, "o") == []
        assert _complete(c, "n") == ["new"]
