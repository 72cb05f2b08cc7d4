"""Exceptions raised while loading configuration and applying themes."""


class TSwitchError(Exception):
    """Base class for all t-switch errors."""


class ConfigReadError(TSwitchError):
    """Raised when a configuration file is missing or unreadable."""


class ConfigParseError(TSwitchError):
    """Raised when a configuration file is not a well-formed document."""


class PathExpansionError(TSwitchError):
    """Raised when the current user's home directory cannot be determined."""


class InvalidRegexError(TSwitchError):
    """Raised when a replacement rule's pattern does not compile."""

    def __init__(self, key: str, app_name: str, detail: str) -> None:
        """Initialize the error.

        Args:
            key: Theme property key of the failing rule.
            app_name: Application the rule belongs to.
            detail: Message from the regex engine.
        """
        super().__init__(f"invalid regex for key '{key}' in app '{app_name}': {detail}")
        self.key = key
        self.app_name = app_name


class FileIOError(TSwitchError):
    """Raised when a target file cannot be read or written."""

    def __init__(self, action: str, path: str, app_name: str, detail: str) -> None:
        """Initialize the error.

        Args:
            action: Either "read" or "write".
            path: Expanded path of the target file.
            app_name: Application the file belongs to.
            detail: Message from the underlying OS error.
        """
        verb = "write to" if action == "write" else "read"
        super().__init__(f"could not {verb} file {path} for app '{app_name}': {detail}")
        self.action = action
        self.path = path
        self.app_name = app_name


class CommandError(TSwitchError):
    """Raised when a post-apply command cannot be launched.

    Never escapes the command runner; it is logged there.
    """


class SelectionUIError(TSwitchError):
    """Raised when the theme picker terminates abnormally."""
