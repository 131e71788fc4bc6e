"""Scanning for wireless networks and parsing the scan listing."""

from __future__ import annotations

import logging

from wpatui.command_execution import ExternalCommandError, build_command, run_command
from wpatui.constants import (
    COMMAND_TIMEOUT,
    SCAN_COMMAND,
    SCAN_SECURITY_MARKERS,
    SCAN_SSID_END_LABEL,
)
from wpatui.model import ScanEntry

log = logging.getLogger(__name__)


def parse_scan_output(output: str) -> list[ScanEntry]:
    """Parse a column-aligned scan listing into scan entries.

    The SSID column ends one character before the BSSID label in the header
    row. Records too short to hold the SSID column and records with an empty
    SSID are skipped. Duplicate SSIDs keep their first record. A record is
    secure if a WPA/RSN information element appears after the SSID column.

    Returns:
        Entries sorted by ssid.
    """
    lines = output.split("\n")
    header, records = lines[0], lines[1:]

    ssid_end = header.find(SCAN_SSID_END_LABEL) - 1
    if ssid_end < 0:
        log.warning("Scan output has no SSID column header")
        return []

    entries: dict[str, ScanEntry] = {}
    for record in records:
        if len(record) < ssid_end + 1:
            continue

        ssid = record[:ssid_end].strip(" ")
        # Hidden networks have no SSID to remember them by
        if not ssid or ssid in entries:
            continue

        rest = record[ssid_end:]
        security = any(marker in rest for marker in SCAN_SECURITY_MARKERS)
        entries[ssid] = ScanEntry(ssid=ssid, security=security)

    return sorted(entries.values(), key=lambda e: e.ssid)


def scan_networks(iface: str, timeout: float = COMMAND_TIMEOUT) -> list[ScanEntry]:
    """Scan on an interface.

    A failed scan is logged and yields no entries, so the session can still
    be used to manage already known networks.
    """
    try:
        output = run_command(build_command(SCAN_COMMAND, iface), timeout=timeout)
    except ExternalCommandError as e:
        log.warning(f"Scan on {iface} failed: {e}")
        return []

    entries = parse_scan_output(output)
    log.info(f"Scan on {iface} found {len(entries)} network(s)")
    return entries
