"""Widgets: NetworkList, PasswordPrompt, PasswordScreen."""

from __future__ import annotations

from rich.text import Text
from textual.app import ComposeResult
from textual.containers import Vertical
from textual.css.query import NoMatches
from textual.screen import ModalScreen
from textual.widgets import OptionList, Static
from textual.widgets.option_list import Option

from wpatui.ui import ids

HELP_TEXT = "[green]a[/] - add network, [green]x[/] - delete network, [green]q[/] - quit"


class NetworkList(OptionList, can_focus=False):
    """Scan results, one row per network.

    Not focusable: keys go to the app, which drives the selection
    through the session controller.
    """

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self.border_title = "WiFi Networks"
        self._rows: list[str] = []

    def set_rows(self, rows: list[str], selected: int) -> None:
        """Show rows and highlight ``selected``. Options are only rebuilt when rows change."""
        if rows != self._rows:
            self._rows = list(rows)
            self.clear_options()
            # Text, not markup: ssids may contain brackets
            self.add_options([Option(Text(row)) for row in rows])
        if rows:
            self.highlighted = selected


class PasswordPrompt(Static):
    """Bordered paragraph echoing the password being typed."""

    def __init__(self, **kwargs) -> None:
        super().__init__("", markup=False, **kwargs)
        self.border_title = "Password"

    def show_password(self, password: str) -> None:
        self.update(password)


class PasswordScreen(ModalScreen[None]):
    """Overlay shown while a password is being entered.

    Keys bubble up to the app; this screen only displays the buffer.
    """

    def __init__(self, ssid: str, width: int) -> None:
        super().__init__()
        self.ssid = ssid
        self._width = width
        self._password = ""

    def compose(self) -> ComposeResult:
        with Vertical(id=ids.PASSWORD_CONTAINER):
            yield PasswordPrompt(id=ids.PASSWORD_PROMPT)

    def on_mount(self) -> None:
        prompt = self.query_one(ids.css(ids.PASSWORD_PROMPT), PasswordPrompt)
        prompt.border_subtitle = Text(self.ssid)
        prompt.show_password(self._password)
        self.set_width(self._width)

    def set_width(self, width: int) -> None:
        self._width = width
        try:
            self.query_one(ids.css(ids.PASSWORD_CONTAINER)).styles.width = width
        except NoMatches:
            pass  # Applied on mount

    def show_password(self, password: str) -> None:
        self._password = password
        try:
            self.query_one(ids.css(ids.PASSWORD_PROMPT), PasswordPrompt).show_password(password)
        except NoMatches:
            pass  # Applied on mount
