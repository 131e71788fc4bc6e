"""UI module containing widgets, styles, and layout helpers."""

from wpatui.ui.widgets import HELP_TEXT, NetworkList, PasswordPrompt, PasswordScreen
from wpatui.ui.helpers import apply_layout
from wpatui.ui import ids

__all__ = [
    # Widgets
    "HELP_TEXT",
    "NetworkList",
    "PasswordPrompt",
    "PasswordScreen",
    # Helpers
    "apply_layout",
    "ids",
]
