"""ConfigDocument: a supplicant config split into preamble and generated section."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable

from wpatui.constants import LEGACY_MARKERS, MARKER
from wpatui.model.network import Network
from wpatui.model.serializers import parse_section, serialize_entry

log = logging.getLogger(__name__)

# Read and write the file byte-for-byte: keep line endings and undecodable bytes
ENCODING = "utf-8"
ENCODING_ERRORS = "surrogateescape"

MARKERS = (MARKER, *LEGACY_MARKERS)


class ConfigLoadError(Exception):
    """Raised when the config file cannot be read."""


@dataclass
class ConfigDocument:
    """A config file as two halves.

    The preamble is everything before the marker line and is never parsed
    or modified. Everything after the marker is the generated section,
    which is parsed into networks on load and regenerated on save.
    """

    path: Path
    preamble: list[str] = field(default_factory=list)
    marker_line: str | None = None
    networks: list[Network] = field(default_factory=list)
    original: str = ""

    @property
    def has_marker(self) -> bool:
        return self.marker_line is not None

    @classmethod
    def parse(cls, path: Path, content: str) -> ConfigDocument:
        """Split file content at the first marker line.

        A legacy marker line is kept verbatim, so an untouched section is
        not rewritten.
        """
        lines = content.splitlines(keepends=True)
        for i, line in enumerate(lines):
            if line.startswith(MARKERS):
                networks = parse_section(lines[i + 1 :])
                log.debug(f"Found marker at line {i + 1}, {len(networks)} network(s)")
                return cls(
                    path=path,
                    preamble=lines[:i],
                    marker_line=line,
                    networks=networks,
                    original=content,
                )

        log.debug("No marker found, whole file is preamble")
        return cls(path=path, preamble=lines, original=content)

    @classmethod
    def load(cls, path: Path) -> ConfigDocument:
        """Read and parse the config file.

        Raises:
            ConfigLoadError: If the file cannot be read
        """
        try:
            with open(path, encoding=ENCODING, errors=ENCODING_ERRORS, newline="") as f:
                content = f.read()
        except OSError as e:
            raise ConfigLoadError(f"Cannot read {path}: {e.strerror or e}") from e
        log.info(f"Loaded {path} ({len(content)} bytes)")
        return cls.parse(path, content)

    def render(self, networks: Iterable[Network]) -> str:
        """Build the full file content for the given networks.

        The preamble is emitted unchanged, followed by the marker line and
        one entry per network, each followed by a blank line.
        """
        parts = list(self.preamble)

        if self.marker_line is None:
            if parts and not parts[-1].endswith("\n"):
                parts.append("\n")
            parts.append(MARKER + "\n")
        else:
            parts.append(self.marker_line)
            if not self.marker_line.endswith("\n"):
                parts.append("\n")

        for network in networks:
            parts.append(serialize_entry(network))
            parts.append("\n")

        return "".join(parts)

    def read_current(self) -> str | None:
        """Return what is on disk now, or None if it cannot be read."""
        try:
            with open(self.path, encoding=ENCODING, errors=ENCODING_ERRORS, newline="") as f:
                return f.read()
        except OSError:
            return None


@dataclass
class LoadResult:
    """Outcome of loading a config file: a document or the error."""

    document: ConfigDocument | None = None
    error: ConfigLoadError | None = None

    @property
    def ok(self) -> bool:
        return self.document is not None


def load_document(path: Path) -> LoadResult:
    """Load a config file without raising, so callers can degrade."""
    try:
        return LoadResult(document=ConfigDocument.load(path))
    except ConfigLoadError as e:
        log.error(str(e))
        return LoadResult(error=e)
