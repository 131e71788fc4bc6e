"""Main TUI application for wpatui."""

import logging
import os
from pathlib import Path

from textual import events
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Vertical
from textual.widgets import Static

from wpatui.controller import PasswordEntry, SessionController
from wpatui.ui import HELP_TEXT, NetworkList, PasswordScreen, apply_layout
from wpatui.ui import ids

log = logging.getLogger(__name__)


def _get_log_path() -> Path:
    """Get the log file path using XDG Base Directory spec."""
    xdg_state = os.environ.get("XDG_STATE_HOME", str(Path.home() / ".local" / "state"))
    log_dir = Path(xdg_state) / "wpatui"
    log_dir.mkdir(parents=True, exist_ok=True)
    return log_dir / "wpatui.log"


def setup_logging() -> None:
    """Send log records to the state directory; the terminal belongs to the TUI."""
    logging.basicConfig(
        filename=str(_get_log_path()),
        level=logging.DEBUG,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )


# Load CSS from file
APP_CSS = (Path(__file__).parent / "ui" / "styles.css").read_text()


class WifiTUI(App):
    """TUI for choosing which scanned networks to remember."""

    TITLE = "wpatui"
    ENABLE_COMMAND_PALETTE = False
    CSS = APP_CSS

    BINDINGS = [
        # Override the default ctrl+c handling: it quits or cancels depending on state
        Binding("ctrl+c", "session_interrupt", "Quit", show=False, priority=True),
    ]

    def __init__(self, controller: SessionController, light_theme: bool = False) -> None:
        super().__init__()
        self.controller = controller
        self.light_theme = light_theme
        self._network_list: NetworkList | None = None
        self._help_line: Static | None = None
        self._password_screen: PasswordScreen | None = None

    def compose(self) -> ComposeResult:
        self._network_list = NetworkList(id=ids.NETWORK_LIST)
        self._help_line = Static(HELP_TEXT, id=ids.HELP_LINE)
        with Vertical(id=ids.MAIN_CONTAINER):
            yield self._network_list
            yield self._help_line

    def on_mount(self) -> None:
        self.theme = "textual-light" if self.light_theme else "textual-dark"
        log.info(f"Session started with {len(self.controller.scan)} scanned network(s)")
        self._relayout(self.size.width, self.size.height)

    # =========================================================================
    # Events
    # =========================================================================

    def on_key(self, event: events.Key) -> None:
        """Forward keys to the session controller."""
        if self.controller.handle_key(event.key, event.character):
            event.prevent_default()
            event.stop()
        self._render_state()

    def on_resize(self, event: events.Resize) -> None:
        self._relayout(event.size.width, event.size.height)

    def action_session_interrupt(self) -> None:
        self.controller.handle_key("ctrl+c")
        self._render_state()

    # =========================================================================
    # Rendering
    # =========================================================================

    def _relayout(self, width: int, height: int) -> None:
        """Recompute geometry and redraw; the session state is untouched."""
        layout = self.controller.resize(width, height)
        if self._network_list is not None and self._help_line is not None:
            apply_layout(self._network_list, self._help_line, layout)
        if self._password_screen is not None:
            self._password_screen.set_width(layout.password_width)
        self._render_state()

    def _render_state(self) -> None:
        """Bring the widgets in line with the controller state."""
        if self.controller.is_done:
            self.exit()
            return

        if self._network_list is not None:
            self._network_list.set_rows(self.controller.formatted_rows(), self.controller.cursor)

        state = self.controller.state
        if isinstance(state, PasswordEntry):
            if self._password_screen is None:
                self._password_screen = PasswordScreen(
                    state.target.ssid, self.controller.layout.password_width
                )
                self.push_screen(self._password_screen)
            self._password_screen.show_password(state.buffer)
        elif self._password_screen is not None:
            self._password_screen = None
            self.pop_screen()
