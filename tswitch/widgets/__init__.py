"""TUI widgets for t-switch."""

from tswitch.widgets.theme_picker import ThemePicker, present

__all__ = [
    "ThemePicker",
    "present",
]
