"""State machine behind the theme picker.

The picker has three states. While BROWSING the cursor moves over the theme
list; CONFIRM and CANCEL end the session in CHOSEN or CANCELLED. Terminal
states ignore further input.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, replace
from enum import Enum


class SelectionState(Enum):
    """Lifecycle of a picker session."""

    BROWSING = "browsing"
    CHOSEN = "chosen"
    CANCELLED = "cancelled"


class SelectionInput(Enum):
    """Logical inputs understood by the picker."""

    UP = "up"
    DOWN = "down"
    CONFIRM = "confirm"
    CANCEL = "cancel"


class UiCommand(Enum):
    """What the UI should do after a transition."""

    NONE = "none"
    RENDER = "render"
    QUIT = "quit"


@dataclass(frozen=True)
class SelectionResult:
    """Outcome of a picker session."""

    theme: str | None = None

    @property
    def chosen(self) -> bool:
        """Whether a theme was picked."""
        return self.theme is not None

    @property
    def cancelled(self) -> bool:
        """Whether the user left without picking."""
        return self.theme is None


@dataclass(frozen=True)
class SelectionModel:
    """Immutable picker state."""

    themes: tuple[str, ...]
    cursor: int = 0
    state: SelectionState = SelectionState.BROWSING
    chosen_theme: str | None = None

    @classmethod
    def from_names(cls, names: Sequence[str]) -> SelectionModel:
        """Create the initial model for a list of theme names."""
        return cls(themes=tuple(names))

    @property
    def finished(self) -> bool:
        """Whether the session reached a terminal state."""
        return self.state is not SelectionState.BROWSING

    def result(self) -> SelectionResult:
        """Build the session outcome."""
        if self.state is SelectionState.CHOSEN:
            return SelectionResult(theme=self.chosen_theme)
        return SelectionResult()


def transition(model: SelectionModel, user_input: SelectionInput) -> tuple[SelectionModel, UiCommand]:
    """Compute the next picker state.

    Args:
        model: Current state.
        user_input: Input received.

    Returns:
        Tuple of (next state, command for the UI).
    """
    if model.finished:
        return model, UiCommand.NONE

    if user_input is SelectionInput.UP:
        if model.cursor > 0:
            return replace(model, cursor=model.cursor - 1), UiCommand.RENDER
        return model, UiCommand.NONE

    if user_input is SelectionInput.DOWN:
        if model.cursor < len(model.themes) - 1:
            return replace(model, cursor=model.cursor + 1), UiCommand.RENDER
        return model, UiCommand.NONE

    if user_input is SelectionInput.CONFIRM and model.themes:
        return (
            replace(model, state=SelectionState.CHOSEN, chosen_theme=model.themes[model.cursor]),
            UiCommand.QUIT,
        )

    # CANCEL, or CONFIRM with nothing to choose
    return replace(model, state=SelectionState.CANCELLED), UiCommand.QUIT
