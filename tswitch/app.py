"""Load, select, apply: the t-switch command."""

import sys

from tswitch.config import load_config, theme_names
from tswitch.engine import apply_theme
from tswitch.errors import SelectionUIError, TSwitchError
from tswitch.logger import add_console_sink, get_logger, has_console_sink
from tswitch.widgets.theme_picker import present

logger = get_logger(__name__)


def _fail(message: str) -> None:
    """Report a fatal error and exit with status 1."""
    logger.error(message)
    # The console sink already echoed the error
    if not has_console_sink():
        print(message, file=sys.stderr)
    sys.exit(1)


def main() -> None:
    """Run the theme switcher."""
    logger.info("Starting t-switch")

    try:
        config = load_config()
    except TSwitchError as exc:
        _fail(f"Failed to load configuration: {exc}")
        return

    try:
        selection = present(theme_names(config.themes))
    except SelectionUIError as exc:
        _fail(f"An error occurred: {exc}")
        return

    # The picker is gone; let engine and command output reach the terminal
    add_console_sink()

    if selection.cancelled:
        logger.debug("No theme selected")
        print("No theme selected. Exiting.")
        return

    theme = selection.theme
    try:
        apply_theme(theme, config.themes, config.apps)
    except TSwitchError as exc:
        _fail(f"Failed to apply theme '{theme}': {exc}")
        return

    logger.info(f"Theme '{theme}' applied")
