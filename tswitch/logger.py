"""Logging configuration using loguru.

Logs are stored under ~/.local/share/t-switch/logs and kept for 1 week.
Output goes to file only until a console sink is attached (to avoid
interfering with the theme picker TUI).
"""

import os
import sys
from collections.abc import Callable
from pathlib import Path
from typing import TYPE_CHECKING

from loguru import logger

if TYPE_CHECKING:
    import loguru

# Remove default handler
logger.remove()

# Define log directory (default ~/.local/share/t-switch/logs, overridable via TSWITCH_LOG_DIR)
_default_log_dir = Path.home() / ".local" / "share" / "t-switch" / "logs"
LOG_DIR = Path(os.environ.get("TSWITCH_LOG_DIR", str(_default_log_dir))).expanduser().resolve()
LOG_DIR.mkdir(parents=True, exist_ok=True)

CONSOLE_FORMAT = "<level>{level}</level>: {message}"


class _LoggingState:
    """Internal state tracker for logging configuration.

    Note: the console handler is NOT added at import time so that log lines
    never land on top of the picker. It is attached once the TUI has exited.
    """

    def __init__(self) -> None:
        """Initialize logging state without a console handler."""
        self.console_handler_id: int | None = None


_state = _LoggingState()

# Configure file handler with rotation and retention
logger.add(
    LOG_DIR / "t-switch_{time:YYYY-MM-DD}.log",
    level="DEBUG",
    format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}",
    rotation="00:00",  # New file at midnight
    retention="1 week",  # Keep logs for 1 week
    compression="gz",  # Compress old logs
    backtrace=True,
    diagnose=False,
)


def get_logger(name: str) -> "loguru.Logger":
    """Get a logger instance with the given name.

    Args:
        name: The name for the logger (typically __name__).

    Returns:
        A configured logger instance.
    """
    return logger.bind(name=name)


def add_console_sink(level: str = "INFO") -> int:
    """Attach a stderr sink so warnings and command output reach the user.

    Calling this more than once keeps a single console sink.

    Args:
        level: Minimum log level for the console sink.

    Returns:
        The sink ID of the console handler.
    """
    if _state.console_handler_id is not None:
        return _state.console_handler_id

    _state.console_handler_id = logger.add(sys.stderr, level=level, format=CONSOLE_FORMAT, colorize=True)
    return _state.console_handler_id


def has_console_sink() -> bool:
    """Return whether log lines are currently echoed to stderr."""
    return _state.console_handler_id is not None


def remove_console_sink() -> None:
    """Detach the stderr sink if one is attached."""
    if _state.console_handler_id is not None:
        logger.remove(_state.console_handler_id)
        _state.console_handler_id = None


def add_sink(sink_func: Callable[[object], None], level: str = "DEBUG") -> int:
    """Add an extra sink receiving formatted log messages.

    Args:
        sink_func: A callable that accepts loguru message objects.
        level: Minimum log level for the sink.

    Returns:
        The sink ID that can be used to remove the sink later.
    """
    return logger.add(sink_func, level=level, format="{level}: {message}")


def remove_sink(sink_id: int) -> None:
    """Remove a sink added with add_sink.

    Args:
        sink_id: The sink ID returned by add_sink.
    """
    logger.remove(sink_id)
