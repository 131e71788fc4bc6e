"""SyncEngine: writes the known networks back to the config file."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

from wpatui.command_execution import ExternalCommandError, build_command, run_command
from wpatui.constants import COMMAND_TIMEOUT, RESTART_COMMAND
from wpatui.fileutils import replace_file_atomic
from wpatui.model.document import ENCODING, ENCODING_ERRORS

if TYPE_CHECKING:
    from wpatui.model import ConfigDocument, NetworkRegistry

log = logging.getLogger(__name__)


class SyncStatus(Enum):
    """What a save did."""

    UNCHANGED = "unchanged"
    CHANGED = "changed"
    SKIPPED = "skipped"  # content differs, but running read-only


@dataclass
class SyncResult:
    """Outcome of a save."""

    status: SyncStatus
    content: str
    external_change: bool = False

    @property
    def changed(self) -> bool:
        return self.status == SyncStatus.CHANGED


class SyncEngine:
    """Regenerates the config from the registry and writes it at most once."""

    def __init__(self, read_only: bool = False, timeout: float = COMMAND_TIMEOUT) -> None:
        self.read_only = read_only
        self.timeout = timeout

    def save(self, document: ConfigDocument, registry: NetworkRegistry) -> SyncResult:
        """Save the registry into the document's generated section.

        The file is only written when the regenerated content differs from
        what was loaded. No lock is held during the session: if the file was
        modified externally since it was loaded, the edit is overwritten and
        reported via ``external_change``.

        Raises:
            OSError: If the new content cannot be written
        """
        content = document.render(registry)

        if content == document.original:
            log.info(f"{document.path} unchanged, not writing")
            return SyncResult(SyncStatus.UNCHANGED, content)

        if self.read_only:
            log.info(f"{document.path} has changes, but running read-only")
            return SyncResult(SyncStatus.SKIPPED, content)

        external_change = False
        current = document.read_current()
        if current is not None and current != document.original:
            log.warning(f"{document.path} was modified externally during the session, overwriting")
            external_change = True

        replace_file_atomic(document.path, content, encoding=ENCODING, errors=ENCODING_ERRORS)
        log.info(f"Wrote {len(registry)} network(s) to {document.path}")
        return SyncResult(SyncStatus.CHANGED, content, external_change=external_change)

    def notify_restart(self, iface: str) -> bool:
        """Restart networking on an interface, best-effort.

        Returns:
            True if the restart command succeeded.
        """
        try:
            run_command(build_command(RESTART_COMMAND, iface), timeout=self.timeout)
        except ExternalCommandError as e:
            log.warning(f"Network restart on {iface} failed: {e}")
            return False
        log.info(f"Restarted network on {iface}")
        return True
