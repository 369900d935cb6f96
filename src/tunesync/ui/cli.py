from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from tunesync.adapters.edit_script import read_edit_script
from tunesync.app import (
    describe_artist,
    edit_field_text,
    load_session_artist,
    replay_edit_script,
)
from tunesync.config import ConfigurationError, configure_logging, get_session_config
from tunesync.domain.model import UpdateOrigin

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

    from tunesync.domain.model import Artist

log = logging.getLogger(__name__)


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Edit an artist tree with origin-tagged updates")
    parser.add_argument(
        "--seed",
        type=Path,
        help="JSON snapshot to load instead of the demo artist (overrides TUNESYNC_SEED_FILE)",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log at DEBUG level, including outbound update lines",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("show", help="Show the artist tree")

    edit = subparsers.add_parser("edit", help="Edit one field from its text representation")
    edit.add_argument("target", help='Entity path, e.g. "" or "albums/0/tracks/1"')
    edit.add_argument("field", help="Field name, e.g. title or duration")
    edit.add_argument("text", help="New value as typed into a text field")
    edit.add_argument(
        "--origin",
        choices=[origin.value for origin in UpdateOrigin],
        default=UpdateOrigin.USER_INTERFACE.value,
        help="Who initiated the edit (default: %(default)s)",
    )

    replay = subparsers.add_parser("replay", help="Apply a JSON-lines edit script")
    replay.add_argument("script", type=Path, help="Path to the edit script")

    return parser.parse_args(list(argv))


def _log_tree(artist: Artist) -> None:
    for line in describe_artist(artist):
        log.info("%s", line)


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    try:
        parsed_args = _parse_args(args_list)
        config = get_session_config()
    except ConfigurationError:
        configure_logging()
        log.exception("Configuration error")
        sys.exit(2)

    configure_logging(level=logging.DEBUG if parsed_args.verbose else config.log_level)

    try:
        artist = load_session_artist(parsed_args.seed or config.seed_path)
        if parsed_args.command == "show":
            pass
        elif parsed_args.command == "edit":
            edit_field_text(
                artist,
                parsed_args.target,
                parsed_args.field,
                parsed_args.text,
                origin=UpdateOrigin(parsed_args.origin),
            )
        elif parsed_args.command == "replay":
            result = replay_edit_script(artist, read_edit_script(parsed_args.script))
            log.info(
                "Edit script finished: applied=%s, forwarded=%s",
                result.applied,
                result.forwarded,
            )
        else:
            raise ValueError(f"Unsupported command: {parsed_args.command}")  # noqa: TRY301
    except (LookupError, ValueError):
        log.exception("Invalid edit")
        sys.exit(2)
    except Exception:
        log.exception("Fatal error during edit session")
        sys.exit(1)

    _log_tree(artist)


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    log.info("Closed by user (Ctrl+C)")
    sys.exit(0)


def run() -> None:
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    run()
