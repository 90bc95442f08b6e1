# ruff: noqa: T201

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv
from pydantic import ValidationError

from modcatalog.adapters.workshop import parse_catalog_payload
from modcatalog.app import apply_payload
from modcatalog.config import (
    PAYLOAD_PATH_VAR,
    ConfigurationError,
    configure_logging,
    get_id_ranges,
    get_payload_path,
    get_report_config,
)
from modcatalog.domain.model import Catalog, UpdateOrigin, classify_id, id_tag

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

log = logging.getLogger(__name__)


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Maintain the mod compatibility catalog")
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Also log debug messages (normalization fallbacks, skipped excluded facts)",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    classify = subparsers.add_parser("classify", help="Show the identity class and tag of mod IDs")
    classify.add_argument("ids", metavar="ID", type=int, nargs="+", help="Numeric mod or group ID")
    classify.add_argument(
        "--hide-id",
        action="store_true",
        help="Leave synthetic IDs out of the tag",
    )

    apply = subparsers.add_parser("apply", help="Apply a JSON payload to an empty catalog")
    apply.add_argument(
        "payload",
        type=Path,
        nargs="?",
        help=f"Path to a catalog payload JSON file (defaults to ${PAYLOAD_PATH_VAR})",
    )
    apply.add_argument(
        "--origin",
        choices=[origin.value for origin in UpdateOrigin],
        help="Treat the payload as coming from this process (defaults to the payload's own)",
    )
    apply.add_argument(
        "--width",
        type=int,
        default=None,
        help="Truncate mod labels to this width (defaults to config)",
    )

    return parser.parse_args(list(argv))


def _classify(args: argparse.Namespace) -> None:
    ranges = get_id_ranges()
    for mod_id in args.ids:
        print(f"{mod_id}\t{classify_id(mod_id, ranges)}\t{id_tag(mod_id, ranges, hide_id=args.hide_id)}")


def _apply(args: argparse.Namespace) -> int:
    payload_path: Path = args.payload if args.payload is not None else get_payload_path()
    payload = parse_catalog_payload(payload_path.read_bytes())
    catalog = Catalog(get_id_ranges())
    width = args.width if args.width is not None else get_report_config().text_report_width
    origin = UpdateOrigin(args.origin) if args.origin else None

    result = apply_payload(catalog, payload, origin=origin)
    if not result.committed:
        log.error("Payload %s was not applied", payload_path)
        return 1

    for mod in catalog.mods.values():
        print(mod.render_label(truncate_to_width=width, ranges=catalog.ranges))
    for group in catalog.groups.values():
        print(f"{group.label()}: {', '.join(str(member) for member in group.members)}")
    return 0


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    parsed_args = _parse_args(args_list)
    configure_logging(level=logging.DEBUG if parsed_args.verbose else logging.INFO)

    try:
        if parsed_args.command == "classify":
            _classify(parsed_args)
            exit_code = 0
        elif parsed_args.command == "apply":
            exit_code = _apply(parsed_args)
        else:
            raise ValueError(f"Unsupported command: {parsed_args.command}")  # noqa: TRY301
    except (ConfigurationError, ValidationError, OSError):
        log.exception("Could not run %s", parsed_args.command)
        sys.exit(2)

    if exit_code:
        sys.exit(exit_code)


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
