"""Home-directory expansion and default configuration locations."""

import os
from pathlib import Path

from tswitch.errors import PathExpansionError

APP_DIR_NAME = "t-switch"
THEMES_FILENAME = "themes.yaml"
RULES_FILENAME = "configs.yaml"


def expand_path(path: str) -> str:
    """Replace a leading ``~`` with the current user's home directory.

    Only the first character is considered; ``~user`` forms are not resolved.

    Args:
        path: The path to expand.

    Returns:
        The expanded path, or the input unchanged if it does not start with ``~``.

    Raises:
        PathExpansionError: If the home directory cannot be determined.
    """
    if not path.startswith("~"):
        return path

    try:
        home = str(Path.home())
    except (RuntimeError, KeyError) as exc:
        raise PathExpansionError(f"could not determine home directory: {exc}") from exc

    return home + path[1:]


def get_config_dir() -> str:
    """Get the directory holding themes.yaml and configs.yaml.

    Returns:
        Directory path, possibly still starting with ``~``.
    """
    override_dir = os.environ.get("TSWITCH_CONFIG_DIR")
    if override_dir:
        return override_dir

    base_dir = os.environ.get("XDG_CONFIG_HOME")
    if base_dir:
        return os.path.join(base_dir, APP_DIR_NAME)

    return f"~/.config/{APP_DIR_NAME}"


def get_themes_path() -> str:
    """Get the default location of the themes document."""
    return os.path.join(get_config_dir(), THEMES_FILENAME)


def get_rules_path() -> str:
    """Get the default location of the rules document."""
    return os.path.join(get_config_dir(), RULES_FILENAME)
