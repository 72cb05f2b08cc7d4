"""Shared test fixtures for t-switch."""

import os
import tempfile
from collections.abc import Iterator
from pathlib import Path

import pytest

# Keep log files out of the real home directory; must run before tswitch is imported
os.environ.setdefault("TSWITCH_LOG_DIR", tempfile.mkdtemp(prefix="tswitch-logs-"))


SAMPLE_THEMES = """\
tokyonight:
  background: "#1a1b26"
  foreground: "#c0caf5"
dark:
  bg: "#000000"
gruvbox:
  background: "#282828"
  foreground: "#ebdbb2"
"""


@pytest.fixture
def captured_logs() -> Iterator[list[str]]:
    """Collect INFO-and-above log lines emitted during a test.

    Yields:
        List of formatted messages ("LEVEL: message").
    """
    from tswitch.logger import add_sink, remove_sink

    messages: list[str] = []

    def sink(message: object) -> None:
        messages.append(str(message).rstrip("\n"))

    sink_id = add_sink(sink, level="INFO")
    yield messages
    remove_sink(sink_id)


@pytest.fixture
def config_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point TSWITCH_CONFIG_DIR at an empty temporary directory.

    Returns:
        Path to the configuration directory.
    """
    directory = tmp_path / "config"
    directory.mkdir()
    monkeypatch.setenv("TSWITCH_CONFIG_DIR", str(directory))
    return directory


@pytest.fixture
def themes_file(tmp_path: Path) -> Path:
    """Write a small themes document."""
    path = tmp_path / "themes.yaml"
    path.write_text(SAMPLE_THEMES, encoding="utf-8")
    return path
