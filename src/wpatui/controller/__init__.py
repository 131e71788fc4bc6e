"""Controller layer: session state machine and config sync.

This package contains:
- session: SessionController, the modal state machine driven by key events
- sync: SyncEngine, which writes the registry back to the config file
"""

from wpatui.controller.session import (
    Browsing,
    Exit,
    Layout,
    PasswordEntry,
    Row,
    SessionController,
    SessionState,
    compute_layout,
    format_row,
)
from wpatui.controller.sync import SyncEngine, SyncResult, SyncStatus

__all__ = [
    # Session
    "Browsing",
    "Exit",
    "Layout",
    "PasswordEntry",
    "Row",
    "SessionController",
    "SessionState",
    "compute_layout",
    "format_row",
    # Sync
    "SyncEngine",
    "SyncResult",
    "SyncStatus",
]
