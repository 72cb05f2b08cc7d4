"""Textual app presenting the theme list."""

from collections.abc import Sequence
from typing import ClassVar

from rich.text import Text
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Vertical
from textual.widgets import Static

from tswitch.errors import SelectionUIError
from tswitch.logger import get_logger
from tswitch.selection import SelectionInput, SelectionModel, SelectionResult, UiCommand, transition

logger = get_logger(__name__)


class ThemePicker(App[SelectionResult]):
    """Single-selection list of theme names."""

    TITLE = "t-switch"
    ENABLE_COMMAND_PALETTE = False
    DEFAULT_CSS: ClassVar[str] = """
    #picker-container {
        padding: 1 2;
        height: auto;
    }
    #theme-list {
        margin: 1 0;
        height: auto;
    }
    #picker-hint {
        text-style: dim;
    }
    """
    BINDINGS: ClassVar[list[Binding | tuple[str, str, str]]] = [
        ("up", "move_up", "Up"),
        ("k", "move_up", "Up"),
        ("down", "move_down", "Down"),
        ("j", "move_down", "Down"),
        ("enter", "confirm", "Select"),
        ("q", "cancel", "Quit"),
        ("escape", "cancel", "Quit"),
        Binding("ctrl+c", "cancel", "Quit", priority=True),
    ]

    def __init__(self, names: Sequence[str]) -> None:
        """Initialize the picker.

        Args:
            names: Theme names in display order.
        """
        super().__init__()
        self.model = SelectionModel.from_names(names)

    def compose(self) -> ComposeResult:
        """Create the picker layout.

        Yields:
            The widgets that make up the picker.
        """
        with Vertical(id="picker-container"):
            yield Static("Choose a theme:", id="picker-title")
            yield Static(self._build_list(), id="theme-list")
            yield Static("Press 'enter' to select, 'q' to quit.", id="picker-hint")

    def _build_list(self) -> Text:
        """Render theme names with a marker on the cursor row."""
        text = Text()
        for index, name in enumerate(self.model.themes):
            if index:
                text.append("\n")
            if index == self.model.cursor:
                text.append(f"> {name}", style="bold reverse")
            else:
                text.append(f"  {name}")
        return text

    def _dispatch(self, user_input: SelectionInput) -> None:
        """Feed an input to the state machine and act on the result."""
        self.model, command = transition(self.model, user_input)
        if command is UiCommand.RENDER:
            self.query_one("#theme-list", Static).update(self._build_list())
        elif command is UiCommand.QUIT:
            result = self.model.result()
            logger.debug(f"Picker finished: {result}")
            self.exit(result)

    def action_move_up(self) -> None:
        """Move the cursor up."""
        self._dispatch(SelectionInput.UP)

    def action_move_down(self) -> None:
        """Move the cursor down."""
        self._dispatch(SelectionInput.DOWN)

    def action_confirm(self) -> None:
        """Choose the theme under the cursor."""
        self._dispatch(SelectionInput.CONFIRM)

    def action_cancel(self) -> None:
        """Leave without choosing."""
        self._dispatch(SelectionInput.CANCEL)


def present(names: Sequence[str]) -> SelectionResult:
    """Run the picker until the user chooses or cancels.

    Args:
        names: Theme names, sorted ascending.

    Returns:
        The selection outcome. Quitting through other means counts as cancelled.

    Raises:
        SelectionUIError: If the TUI crashed.
    """
    app = ThemePicker(names)
    result = app.run()
    if app.return_code:
        raise SelectionUIError(f"theme picker exited with status {app.return_code}")
    return result if result is not None else SelectionResult()
