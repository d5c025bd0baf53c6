"""Tests for shellkit.registry — command table and known option names."""

import pytest

from shellkit.command import Command, Option
from shellkit.completion import CommandCompleter
from shellkit.errors import DuplicateCommand, InvalidCommand
from shellkit.registry import CommandRegistry


def _noop(shell, invocation):
    return None


def _cmd(name, *options):
    return Command(name, f"{name} command", _noop, options=[Option(o) for o in options])


class TestRegister:
    def test_lookup_and_sorted_names(self):
        reg = CommandRegistry()
        reg.register([_cmd("zeta"), _cmd("alpha")])
        assert reg.names() == ["alpha", "zeta"]
        assert reg.get("alpha").name == "alpha"
        assert reg.get("missing") is None
        assert "zeta" in reg
        assert len(reg) == 2
        assert [c.name for c in reg] == ["alpha", "zeta"]

    def test_duplicate_across_calls(self):
        reg = CommandRegistry()
        first = _cmd("hello", "name")
        reg.register([first])
        with pytest.raises(DuplicateCommand) as exc:
            reg.register([_cmd("hello", "other")])
        assert exc.value.name == "hello"
        assert reg.get("hello") is first
        assert "other" not in reg.known_options()

    def test_duplicate_within_batch_adds_nothing(self):
        reg = CommandRegistry()
        with pytest.raises(DuplicateCommand):
            reg.register([_cmd("a"), _cmd("b"), _cmd("a")])
        assert len(reg) == 0

    @pytest.mark.parametrize("name", ["quit", "exit", "set", "unset"])
    def test_meta_command_names_reserved(self, name):
        reg = CommandRegistry()
        with pytest.raises(DuplicateCommand, match="meta-command"):
            reg.register([_cmd(name)])


class TestKnownOptions:
    def test_default_options_always_known(self):
        assert "help" in CommandRegistry().known_options()

    def test_union_across_commands(self):
        reg = CommandRegistry()
        reg.register([_cmd("a", "region", "zone")])
        reg.register([_cmd("b", "name")])
        assert reg.known_options() == {"help", "region", "zone", "name"}


class TestCompleterRefresh:
    def test_register_updates_completer(self):
        completer = CommandCompleter()
        reg = CommandRegistry(completer)
        assert completer.candidates("he") == []
        reg.register([_cmd("hello")])
        assert completer.candidates("he") == ["hello"]


class TestInvalidDeclarations:
    def test_clashing_flag_rejects_whole_batch(self):
        reg = CommandRegistry()
        bad = Command("connect", "", _noop, options=[Option("host", "h")])
        with pytest.raises(InvalidCommand):
            reg.register([_cmd("ok"), bad])
        assert len(reg) == 0
        assert "host" not in reg.known_options()
