"""Tests for path expansion and default locations."""

from pathlib import Path
from unittest.mock import patch

import pytest

from tswitch.errors import PathExpansionError
from tswitch.paths import expand_path, get_config_dir, get_rules_path, get_themes_path


class TestExpandPath:
    """Tests for expand_path."""

    def test_leading_tilde_is_replaced(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("HOME", "/home/tester")
        assert expand_path("~/.config/kitty/kitty.conf") == "/home/tester/.config/kitty/kitty.conf"

    def test_absolute_path_unchanged(self) -> None:
        assert expand_path("/etc/hosts") == "/etc/hosts"

    def test_relative_path_unchanged(self) -> None:
        assert expand_path("configs/app.conf") == "configs/app.conf"

    def test_tilde_elsewhere_unchanged(self) -> None:
        assert expand_path("/tmp/~backup") == "/tmp/~backup"

    def test_unknown_home_raises(self) -> None:
        with patch("tswitch.paths.Path.home", side_effect=RuntimeError("no home")):
            with pytest.raises(PathExpansionError, match="no home"):
                expand_path("~/themes.yaml")

    def test_unknown_home_not_needed_for_plain_paths(self) -> None:
        with patch("tswitch.paths.Path.home", side_effect=RuntimeError("no home")):
            assert expand_path("/tmp/themes.yaml") == "/tmp/themes.yaml"


class TestConfigDir:
    """Tests for default configuration locations."""

    def test_override_wins(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
        monkeypatch.setenv("TSWITCH_CONFIG_DIR", str(tmp_path))
        monkeypatch.setenv("XDG_CONFIG_HOME", "/elsewhere")
        assert get_config_dir() == str(tmp_path)

    def test_xdg_config_home(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("TSWITCH_CONFIG_DIR", raising=False)
        monkeypatch.setenv("XDG_CONFIG_HOME", "/xdg")
        assert get_config_dir() == "/xdg/t-switch"

    def test_default_under_home(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("TSWITCH_CONFIG_DIR", raising=False)
        monkeypatch.delenv("XDG_CONFIG_HOME", raising=False)
        assert get_config_dir() == "~/.config/t-switch"
        assert get_themes_path() == "~/.config/t-switch/themes.yaml"
        assert get_rules_path() == "~/.config/t-switch/configs.yaml"
