"""Serialization of network entries in the generated config section.

Grammar of one entry:

    network={
        ssid="<escaped>"
        key_mgmt=NONE|WPA-PSK
        psk="<escaped>"
    }

String values are quoted; backslashes and double quotes inside them are
escaped with a backslash. Bare tokens (key_mgmt) are not quoted.
"""

from __future__ import annotations

import logging
from typing import Iterable

from wpatui.model.network import Network

log = logging.getLogger(__name__)

ENTRY_OPEN = "network={"
ENTRY_CLOSE = "}"
INDENT = "    "


class MalformedValue(Exception):
    """Raised when a config value or entry line cannot be parsed."""


# =============================================================================
# Value escaping
# =============================================================================

def escape_value(value: str) -> str:
    """Escape backslashes and double quotes for a quoted config value."""
    escaped = value.replace("\\", "\\\\")
    return escaped.replace('"', '\\"')


def unescape_value(value: str) -> str:
    """Decode a config value.

    Quoted values have the quotes stripped and the escaping reversed.
    Values not starting with a quote are bare tokens and are returned as-is.

    Raises:
        MalformedValue: If the quotes are unbalanced or an escape is dangling
    """
    if not value or not value.startswith('"'):
        return value

    if len(value) < 2 or not value.endswith('"'):
        raise MalformedValue(f"Unbalanced quotes in value: {value}")

    chars = []
    escaped = False
    for ch in value[1:-1]:
        if escaped:
            chars.append(ch)
            escaped = False
        elif ch == "\\":
            escaped = True
        elif ch == '"':
            raise MalformedValue(f"Unescaped quote inside value: {value}")
        else:
            chars.append(ch)

    # The closing quote was escaped, so the string was never closed
    if escaped:
        raise MalformedValue(f"Unbalanced quotes in value: {value}")

    return "".join(chars)


# =============================================================================
# Entries
# =============================================================================

def serialize_entry(network: Network) -> str:
    """Render one network={...} block, terminated by a newline."""
    lines = [ENTRY_OPEN]
    if network.ssid:
        lines.append(f'{INDENT}ssid="{escape_value(network.ssid)}"')
    lines.append(f"{INDENT}key_mgmt={network.key_mgmt}")
    if network.psk:
        lines.append(f'{INDENT}psk="{escape_value(network.psk)}"')
    lines.append(ENTRY_CLOSE)
    return "\n".join(lines) + "\n"


def parse_entry(lines: Iterable[str]) -> Network:
    """Parse the lines of one network block into a Network.

    The open and close markers may be included; they are skipped.
    Unknown keys are ignored.

    Raises:
        MalformedValue: If a line is not key=value or a value is malformed
    """
    network = Network(ssid="")
    for raw in lines:
        line = raw.strip()
        if not line or line in (ENTRY_OPEN, ENTRY_CLOSE):
            continue

        key, sep, value = line.partition("=")
        if not sep:
            raise MalformedValue(f"Expected key=value, got: {line}")

        value = unescape_value(value)
        if key == "ssid":
            network.ssid = value
        elif key == "psk":
            network.psk = value
        elif key == "key_mgmt":
            network.security = value == "WPA-PSK"
        else:
            log.debug(f"Ignoring unknown key in network entry: {key}")

    return network


def parse_section(lines: Iterable[str]) -> list[Network]:
    """Parse every network block in the generated section.

    Entries that fail to parse are logged and skipped, as is a block that
    is still open at the end of the input.
    """
    networks: list[Network] = []
    block: list[str] | None = None
    start_line = 0

    for lineno, raw in enumerate(lines, start=1):
        line = raw.strip()
        if block is None:
            if line == ENTRY_OPEN:
                block = []
                start_line = lineno
            elif line and not line.startswith("#"):
                log.warning(f"Ignoring line {lineno} outside a network block: {line}")
            continue

        if line == ENTRY_CLOSE:
            try:
                networks.append(parse_entry(block))
            except MalformedValue as e:
                log.warning(f"Skipping network entry at line {start_line}: {e}")
            block = None
        else:
            block.append(line)

    if block is not None:
        log.warning(f"Skipping unterminated network entry at line {start_line}")

    return networks
