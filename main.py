"""Command-line interface for the Firestore admin helpers."""

from __future__ import annotations
import argparse
import logging
import sys
from typing import Sequence

from admintools.cli import (
    add_create_admin_arguments,
    add_rules_notice_arguments,
    execute,
    run_create_admin,
    run_rules_notice,
)

logger = logging.getLogger("admintools.main")

_HANDLERS = {
    "create-admin": run_create_admin,
    "rules-notice": run_rules_notice,
}


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Firestore administration helpers")
    subparsers = parser.add_subparsers(dest="command")

    create_parser = subparsers.add_parser(
        "create-admin",
        help="Collect admin account details and print the firestore:set command",
    )
    add_create_admin_arguments(create_parser)

    rules_parser = subparsers.add_parser(
        "rules-notice",
        help="Print the steps for publishing updated Firestore security rules",
    )
    add_rules_notice_arguments(rules_parser)

    args = parser.parse_args(list(argv) if argv is not None else sys.argv[1:])
    if args.command is None:
        parser.print_help()
    return args


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point for CLI usage."""

    logging.basicConfig(level=logging.INFO, format="%(asctime)s [%(levelname)s] %(message)s")

    args = _parse_args(argv)
    handler = _HANDLERS.get(args.command)
    if handler is None:
        return 1

    logger.debug("Running %s", args.command)
    return execute(handler, args)


if __name__ == "__main__":
    raise SystemExit(main())
