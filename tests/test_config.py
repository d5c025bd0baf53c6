"""Tests for shellkit.config — TOML config loading and validation."""

import logging

import pytest

from shellkit.config import ConfigError, global_config_dir, load_config, log_level


def _write_toml(path, content):
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")


@pytest.fixture(autouse=True)
def _isolated_config(tmp_path, monkeypatch):
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))


class TestGlobalConfigDir:
    def test_xdg(self, tmp_path):
        assert global_config_dir("mycli") == tmp_path / "xdg" / "mycli"

    def test_home_fallback(self, tmp_path, monkeypatch):
        monkeypatch.delenv("XDG_CONFIG_HOME")
        monkeypatch.setenv("HOME", str(tmp_path))
        assert global_config_dir("mycli") == tmp_path / ".config" / "mycli"


class TestLoadConfig:
    def test_missing_files_returns_empty(self):
        assert load_config("mycli") == {}

    def test_global_only(self, tmp_path):
        _write_toml(tmp_path / "xdg" / "mycli" / "config.toml", 'prompt = "g> "\n')
        assert load_config("mycli") == {"prompt": "g> "}

    def test_explicit_overrides_global(self, tmp_path):
        _write_toml(
            tmp_path / "xdg" / "mycli" / "config.toml",
            'prompt = "g> "\nhistory_limit = 10\n',
        )
        explicit = tmp_path / "project.toml"
        _write_toml(explicit, 'prompt = "p> "\n')
        assert load_config("mycli", explicit) == {"prompt": "p> ", "history_limit": 10}

    def test_explicit_missing_is_error(self, tmp_path):
        with pytest.raises(ConfigError, match="not found"):
            load_config("mycli", tmp_path / "nope.toml")

    def test_relative_history_file_resolved(self, tmp_path):
        cfg = tmp_path / "conf" / "shell.toml"
        _write_toml(cfg, 'history_file = "hist/log"\n')
        assert load_config("mycli", cfg)["history_file"] == str(tmp_path / "conf" / "hist" / "log")

    def test_tilde_history_file(self, tmp_path, monkeypatch):
        monkeypatch.setenv("HOME", str(tmp_path / "home"))
        cfg = tmp_path / "shell.toml"
        _write_toml(cfg, 'history_file = "~/.h"\n')
        assert load_config("mycli", cfg)["history_file"] == str(tmp_path / "home" / ".h")


class TestValidation:
    def test_wrong_type(self, tmp_path):
        cfg = tmp_path / "c.toml"
        _write_toml(cfg, "prompt = 3\n")
        with pytest.raises(ConfigError, match="'prompt' expected str, got int"):
            load_config("mycli", cfg)

    def test_bool_rejected_for_int(self, tmp_path):
        cfg = tmp_path / "c.toml"
        _write_toml(cfg, "history_limit = true\n")
        with pytest.raises(ConfigError, match="got bool"):
            load_config("mycli", cfg)

    def test_history_limit_positive(self, tmp_path):
        cfg = tmp_path / "c.toml"
        _write_toml(cfg, "history_limit = 0\n")
        with pytest.raises(ConfigError, match="at least 1"):
            load_config("mycli", cfg)

    def test_bad_log_level(self, tmp_path):
        cfg = tmp_path / "c.toml"
        _write_toml(cfg, 'log_level = "chatty"\n')
        with pytest.raises(ConfigError, match="log_level"):
            load_config("mycli", cfg)

    def test_invalid_toml(self, tmp_path):
        cfg = tmp_path / "c.toml"
        _write_toml(cfg, "prompt = \n")
        with pytest.raises(ConfigError, match="invalid TOML"):
            load_config("mycli", cfg)

    def test_unknown_key_warns_and_is_dropped(self, tmp_path, capsys):
        cfg = tmp_path / "c.toml"
        _write_toml(cfg, 'colour = "red"\ncolor = true\n')
        assert load_config("mycli", cfg) == {"color": True}
        assert "unknown config key 'colour'" in capsys.readouterr().err


class TestLogLevel:
    def test_default_warning(self):
        assert log_level({}) == logging.WARNING

    def test_case_insensitive(self):
        assert log_level({"log_level": "debug"}) == logging.DEBUG
