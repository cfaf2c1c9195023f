"""Argument handling shared by ``main.py`` and the standalone scripts."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Callable

from .accounts import create_admin_account
from .config import load_configured_settings
from .prompts import UserInputError, prompt_streams
from .rules import print_rules_instructions

logger = logging.getLogger("admintools.cli")


def _add_config_argument(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--config",
        dest="config_path",
        default=None,
        help="Path to a YAML settings file (defaults to ADMIN_TOOLS_CONFIG or config/admin_tools.yaml)",
    )


def add_create_admin_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--uid", dest="user_id", default=None, help="Firebase user ID; prompted for when omitted")
    parser.add_argument("--email", default=None, help="Admin email address; prompted for when omitted")
    parser.add_argument("--name", default=None, help="Admin display name; prompted for when omitted")
    parser.add_argument(
        "--collection",
        default=None,
        help="Firestore collection holding admin documents (default: admins)",
    )
    _add_config_argument(parser)


def add_rules_notice_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--project",
        dest="project_id",
        default=None,
        help="Firebase project named in the instructions (default: proplanet)",
    )
    _add_config_argument(parser)


def run_create_admin(args: argparse.Namespace) -> int:
    settings = load_configured_settings(args.config_path).with_overrides(
        admins_collection=args.collection
    )
    preset = {"user_id": args.user_id, "email": args.email, "name": args.name}

    with prompt_streams() as (prompt_stdin, prompt_stdout):
        create_admin_account(settings, preset=preset, stdin=prompt_stdin, stdout=prompt_stdout)
    return 0


def run_rules_notice(args: argparse.Namespace) -> int:
    settings = load_configured_settings(args.config_path).with_overrides(project_id=args.project_id)
    print_rules_instructions(settings)
    return 0


def execute(handler: Callable[[argparse.Namespace], int], args: argparse.Namespace) -> int:
    """Run ``handler`` and turn expected failures into an exit status."""

    try:
        return handler(args)
    except (UserInputError, ValueError) as exc:
        logger.debug("Command failed", exc_info=True)
        print(str(exc), file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print("\nAborted.")
        return 1


__all__ = [
    "add_create_admin_arguments",
    "add_rules_notice_arguments",
    "execute",
    "run_create_admin",
    "run_rules_notice",
]
