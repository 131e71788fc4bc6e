"""Widget ID constants for the TUI.

Using constants prevents typos and makes refactoring easier.
"""


def css(widget_id: str) -> str:
    """Return a CSS selector for a widget ID.

    Usage:
        from wpatui.ui.ids import css, NETWORK_LIST
        self.query_one(css(NETWORK_LIST), NetworkList)
    """
    return f"#{widget_id}"

# Main screen
MAIN_CONTAINER = "main-container"
NETWORK_LIST = "network-list"
HELP_LINE = "help-line"

# Password prompt
PASSWORD_CONTAINER = "password-container"
PASSWORD_PROMPT = "password-prompt"
