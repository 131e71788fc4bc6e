"""Command-line interface for wpatui."""

import argparse
import logging
import sys
from dataclasses import dataclass
from pathlib import Path

from wpatui.app import WifiTUI, setup_logging
from wpatui.constants import COMMAND_TIMEOUT, DEFAULT_CONFIG_PATH, DEFAULT_INTERFACE
from wpatui.controller import SessionController, SyncEngine, SyncStatus
from wpatui.model import ConfigDocument, NetworkRegistry, load_document
from wpatui.scan import scan_networks

WPATUI_VERSION = "0.1.0"

log = logging.getLogger(__name__)


@dataclass
class ParsedArgs:
    """Parsed command-line arguments."""

    interface: str
    config_path: Path
    restart: bool
    light_theme: bool
    read_only: bool
    timeout: float


def print_error_box(title: str, *lines: str) -> None:
    """Print a formatted error box to stderr.

    Args:
        title: The error title (will be prefixed with "Error: ")
        *lines: Additional lines to print in the box
    """
    print("=" * 60, file=sys.stderr)
    print(f"Error: {title}", file=sys.stderr)
    print("", file=sys.stderr)
    for line in lines:
        print(line, file=sys.stderr)
    print("=" * 60, file=sys.stderr)


def create_parser() -> argparse.ArgumentParser:
    """Create argument parser for wpatui CLI."""
    parser = argparse.ArgumentParser(
        prog="wpatui",
        description="Pick wireless networks to remember in wpa_supplicant.conf.",
    )
    parser.add_argument(
        "-i", "--interface", default=DEFAULT_INTERFACE, help=f"wireless interface (default: {DEFAULT_INTERFACE})"
    )
    parser.add_argument(
        "-f", "--file", default=DEFAULT_CONFIG_PATH, help=f"path to wpa_supplicant.conf (default: {DEFAULT_CONFIG_PATH})"
    )
    parser.add_argument(
        "-r", "--restart", action="store_true", help="restart netif service if config has changed"
    )
    parser.add_argument("-l", "--light", action="store_true", help="use light color scheme")
    parser.add_argument(
        "--read-only",
        action="store_true",
        help="never write the config; start empty if it cannot be read",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=COMMAND_TIMEOUT,
        metavar="SECONDS",
        help=f"timeout for the scan and restart commands (default: {COMMAND_TIMEOUT:g})",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {WPATUI_VERSION}")
    return parser


def parse_args(argv: list[str] | None = None) -> ParsedArgs:
    """Parse command line arguments."""
    args = create_parser().parse_args(argv)
    if args.timeout <= 0:
        print("Error: --timeout must be positive", file=sys.stderr)
        sys.exit(1)
    return ParsedArgs(
        interface=args.interface,
        config_path=Path(args.file).expanduser(),
        restart=args.restart,
        light_theme=args.light,
        read_only=args.read_only,
        timeout=args.timeout,
    )


def load_config(args: ParsedArgs) -> ConfigDocument:
    """Load the config file, exiting unless running read-only."""
    result = load_document(args.config_path)
    if result.ok:
        return result.document

    if not args.read_only:
        print_error_box(
            "Cannot load config file",
            str(result.error),
            "",
            "Use --read-only to browse networks without a config file.",
        )
        sys.exit(1)

    print(f"Warning: {result.error}; starting with no known networks", file=sys.stderr)
    return ConfigDocument(path=args.config_path)


def report_sync(args: ParsedArgs, engine: SyncEngine, status: SyncStatus, external_change: bool) -> None:
    """Tell the user what the save did, restarting the network if asked."""
    if external_change:
        print(f"Warning: {args.config_path} was modified while wpatui was running; those edits were overwritten")

    if status == SyncStatus.UNCHANGED:
        print("config file was not changed")
    elif status == SyncStatus.SKIPPED:
        print("config file has changes, not written (read-only)")
    elif args.restart:
        print("new config, restarting network...")
        if not engine.notify_restart(args.interface):
            print(f"network restart failed, please run \"service netif restart {args.interface}\" manually")
    else:
        print(f"new config, please run \"service netif restart {args.interface}\" manually")


def main(argv: list[str] | None = None) -> None:
    """Main entry point."""
    args = parse_args(argv)
    setup_logging()
    log.info(f"wpatui {WPATUI_VERSION}: interface={args.interface} file={args.config_path}")

    document = load_config(args)
    registry = NetworkRegistry.from_networks(document.networks)

    print(f"Scanning on {args.interface}... (Ctrl+C to cancel)")
    try:
        scanned = scan_networks(args.interface, timeout=args.timeout)
    except KeyboardInterrupt:
        print("Cancelled.")
        sys.exit(0)

    controller = SessionController(scanned, registry)
    app = WifiTUI(controller, light_theme=args.light_theme)
    try:
        app.run()
    except Exception as e:
        log.exception("TUI failed")
        print_error_box("Terminal UI failed", str(e))
        sys.exit(1)

    engine = SyncEngine(read_only=args.read_only, timeout=args.timeout)
    try:
        result = engine.save(document, registry)
    except OSError as e:
        log.error(f"Saving {args.config_path} failed: {e}")
        print_error_box("Cannot write config file", f"{args.config_path}: {e.strerror or e}")
        sys.exit(1)

    report_sync(args, engine, result.status, result.external_change)


if __name__ == "__main__":
    main()
