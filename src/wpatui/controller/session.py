"""SessionController: the modal state machine behind the TUI.

States:
    Browsing: moving through the scan list, adding and deleting networks
    PasswordEntry: typing the password for a secure network being added
    Exit: the session is over and the registry should be saved

The controller knows nothing about Textual. The app forwards key names
(Textual's ``Key.key``) and printable characters and redraws from
``rows()``, ``state`` and ``cursor`` afterwards.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Callable, Union

from wpatui.constants import MAX_LIST_HEIGHT, MAX_LIST_WIDTH
from wpatui.model import Network, NetworkRegistry, ScanEntry

log = logging.getLogger(__name__)


# =============================================================================
# States
# =============================================================================

@dataclass(frozen=True)
class Browsing:
    """Moving through the scan list."""


@dataclass(frozen=True)
class PasswordEntry:
    """Typing a password for ``target``. The buffer only lives here."""

    target: ScanEntry
    buffer: str = ""


@dataclass(frozen=True)
class Exit:
    """Session finished."""


SessionState = Union[Browsing, PasswordEntry, Exit]


# =============================================================================
# Rows and layout
# =============================================================================

@dataclass(frozen=True)
class Row:
    """One line of the network list."""

    ssid: str
    known: bool
    security: bool

    @property
    def mark(self) -> str:
        return "+" if self.known else " "

    @property
    def security_label(self) -> str:
        return "WPA" if self.security else ""


# Row prefix " [+] ", security suffix, scrollbar and borders
ROW_CHROME_WIDTH = 5 + 5 + 1 + 2


def format_row(row: Row, list_width: int) -> str:
    """Render a row, padding the ssid so security labels line up."""
    ssid_width = max(list_width - ROW_CHROME_WIDTH, 0)
    return f" [{row.mark}] {row.ssid.ljust(ssid_width)} {row.security_label}"


@dataclass(frozen=True)
class Layout:
    """Widget sizes for a terminal size. Centering is left to the screen CSS."""

    list_width: int
    list_height: int
    password_width: int


def compute_layout(width: int, height: int) -> Layout:
    """Size the list at most 80x25, leaving room for the help line under it.

    The password box is 3/4 of the list width.
    """
    list_width = max(min(width, MAX_LIST_WIDTH), 0)
    list_height = max(min(height - 3, MAX_LIST_HEIGHT), 0)
    return Layout(
        list_width=list_width,
        list_height=list_height,
        password_width=list_width * 3 // 4,
    )


# =============================================================================
# Controller
# =============================================================================

class SessionController:
    """Applies key events to the registry and tracks the selection."""

    def __init__(
        self,
        scan: list[ScanEntry],
        registry: NetworkRegistry,
        width: int = MAX_LIST_WIDTH,
        height: int = MAX_LIST_HEIGHT + 3,
    ) -> None:
        self.scan = list(scan)
        self.registry = registry
        self.state: SessionState = Browsing()
        self.cursor = 0
        self.layout = compute_layout(width, height)
        self._previous_key: str | None = None

        self._browse_keys: dict[str, Callable[[], bool]] = {
            "q": self.quit,
            "ctrl+c": self.quit,
            "j": lambda: self.move(1),
            "down": lambda: self.move(1),
            "k": lambda: self.move(-1),
            "up": lambda: self.move(-1),
            "ctrl+d": lambda: self.move(self.page_size // 2),
            "ctrl+u": lambda: self.move(-(self.page_size // 2)),
            "ctrl+f": lambda: self.move(self.page_size),
            "pagedown": lambda: self.move(self.page_size),
            "ctrl+b": lambda: self.move(-self.page_size),
            "pageup": lambda: self.move(-self.page_size),
            "home": lambda: self.move_to(0),
            "end": lambda: self.move_to(len(self.scan) - 1),
            "G": lambda: self.move_to(len(self.scan) - 1),
            "a": self.add_selected,
            "x": self.delete_selected,
        }
        self._password_keys: dict[str, Callable[[], bool]] = {
            "enter": self.confirm_password,
            "escape": self.cancel_password,
            "ctrl+c": self.cancel_password,
            "ctrl+u": self.clear_password,
            "backspace": self.backspace,
        }

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    @property
    def is_done(self) -> bool:
        return isinstance(self.state, Exit)

    @property
    def page_size(self) -> int:
        # Rows visible inside the list borders
        return max(self.layout.list_height - 2, 1)

    @property
    def selected(self) -> ScanEntry | None:
        if not self.scan:
            return None
        return self.scan[self.cursor]

    @property
    def password(self) -> str | None:
        """Current password buffer, or None outside PasswordEntry."""
        if isinstance(self.state, PasswordEntry):
            return self.state.buffer
        return None

    def rows(self) -> list[Row]:
        """Rows for the current scan list against the registry."""
        return [
            Row(ssid=entry.ssid, known=entry.ssid in self.registry, security=entry.security)
            for entry in self.scan
        ]

    def formatted_rows(self) -> list[str]:
        return [format_row(row, self.layout.list_width) for row in self.rows()]

    # -------------------------------------------------------------------------
    # Event dispatch
    # -------------------------------------------------------------------------

    def handle_key(self, key: str, character: str | None = None) -> bool:
        """Dispatch one key event to the current state.

        Args:
            key: Key name, e.g. "a", "down", "ctrl+u", "enter"
            character: Printable character for the key, if any

        Returns:
            True if the event was used.
        """
        if isinstance(self.state, Exit):
            return False

        if isinstance(self.state, PasswordEntry):
            action = self._password_keys.get(key)
            if action is not None:
                return action()
            if character and character.isprintable():
                return self.type_char(character)
            return False

        # "g g" jumps to the top
        previous, self._previous_key = self._previous_key, key
        if key == "g":
            if previous == "g":
                self._previous_key = None
                return self.move_to(0)
            return True

        action = self._browse_keys.get(key)
        if action is None:
            return False
        return action()

    def resize(self, width: int, height: int) -> Layout:
        """Recompute geometry for a new terminal size. State is unchanged."""
        self.layout = compute_layout(width, height)
        return self.layout

    # -------------------------------------------------------------------------
    # Browsing
    # -------------------------------------------------------------------------

    def move(self, delta: int) -> bool:
        if not isinstance(self.state, Browsing):
            return False
        return self.move_to(self.cursor + delta)

    def move_to(self, index: int) -> bool:
        if not isinstance(self.state, Browsing):
            return False
        if not self.scan:
            self.cursor = 0
        else:
            self.cursor = min(max(index, 0), len(self.scan) - 1)
        return True

    def add_selected(self) -> bool:
        """Remember the selected network, asking for a password if secure."""
        entry = self.selected
        if not isinstance(self.state, Browsing) or entry is None:
            return False

        if entry.security:
            self.state = PasswordEntry(target=entry)
            return True

        self.registry.add(entry.to_network())
        return True

    def delete_selected(self) -> bool:
        """Forget the selected network. No-op if it is not known."""
        entry = self.selected
        if not isinstance(self.state, Browsing) or entry is None:
            return False
        self.registry.remove(entry.ssid)
        return True

    def quit(self) -> bool:
        if not isinstance(self.state, Browsing):
            return False
        log.info("Session finished")
        self.state = Exit()
        return True

    # -------------------------------------------------------------------------
    # Password entry
    # -------------------------------------------------------------------------

    def type_char(self, character: str) -> bool:
        if not isinstance(self.state, PasswordEntry):
            return False
        self.state = replace(self.state, buffer=self.state.buffer + character)
        return True

    def backspace(self) -> bool:
        if not isinstance(self.state, PasswordEntry):
            return False
        self.state = replace(self.state, buffer=self.state.buffer[:-1])
        return True

    def clear_password(self) -> bool:
        if not isinstance(self.state, PasswordEntry):
            return False
        self.state = replace(self.state, buffer="")
        return True

    def confirm_password(self) -> bool:
        """Remember the target network with the typed password."""
        if not isinstance(self.state, PasswordEntry):
            return False
        target = self.state.target
        self.registry.add(Network(ssid=target.ssid, psk=self.state.buffer, security=True))
        self.state = Browsing()
        return True

    def cancel_password(self) -> bool:
        if not isinstance(self.state, PasswordEntry):
            return False
        self.state = Browsing()
        return True
