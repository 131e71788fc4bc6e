"""Running the external scan and restart commands."""

from __future__ import annotations

import logging
import subprocess

from wpatui.constants import COMMAND_TIMEOUT

log = logging.getLogger(__name__)


class ExternalCommandError(Exception):
    """Raised when an external command cannot run or fails."""


def build_command(template: list[str], iface: str) -> list[str]:
    """Substitute the interface name into a command template."""
    return [part.format(iface=iface) for part in template]


def run_command(cmd: list[str], timeout: float = COMMAND_TIMEOUT) -> str:
    """Run a command to completion and return its stdout.

    Output is decoded as text; bytes that are not valid UTF-8 (an ssid can
    hold anything) become U+FFFD instead of failing the command.

    Blocks until the command exits or the timeout expires. A KeyboardInterrupt
    while waiting kills the child and propagates to the caller.

    Args:
        cmd: Command and arguments
        timeout: Seconds to wait before killing the command

    Raises:
        ExternalCommandError: If the command cannot be launched, times out,
            or exits non-zero
    """
    log.info(f"Running: {' '.join(cmd)}")
    try:
        result = subprocess.run(
            cmd,
            check=False,
            text=True,
            encoding="utf-8",
            errors="replace",
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
            timeout=timeout,
        )
    except FileNotFoundError as e:
        raise ExternalCommandError(f"Command not found: {cmd[0]}") from e
    except PermissionError as e:
        raise ExternalCommandError(f"Permission denied: {cmd[0]}") from e
    except subprocess.TimeoutExpired as e:
        raise ExternalCommandError(f"Command timed out after {timeout:g}s: {cmd[0]}") from e

    if result.returncode != 0:
        stderr = result.stderr.strip()
        raise ExternalCommandError(
            f"Command exited with status {result.returncode}: {cmd[0]}"
            + (f" ({stderr})" if stderr else "")
        )
    return result.stdout
