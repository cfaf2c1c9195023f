"""Collect administrator details and print the matching Firestore CLI command."""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass
from datetime import datetime
from typing import Callable, Mapping, Optional, TextIO

from .config import Settings
from .models import AdminRecord, build_admin_record
from .prompts import ADMIN_ACCOUNT_FIELDS, collect_responses

logger = logging.getLogger("admintools.accounts")


@dataclass(frozen=True)
class AdminAccountRequest:
    """Everything printed for a single run of the collector."""

    user_id: str
    record: AdminRecord
    command: str


def build_firestore_set_command(user_id: str, record: AdminRecord, *, collection: str = "admins") -> str:
    """Return the ``firebase firestore:set`` invocation that writes ``record``.

    The identifier and the JSON body are embedded unchanged; a single quote in
    either one produces a command the shell cannot parse.
    """

    return f"firebase firestore:set {collection}/{user_id} '{record.to_compact_json()}'"


def create_admin_account(
    settings: Settings | None = None,
    *,
    preset: Mapping[str, Optional[str]] | None = None,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
    output: TextIO | None = None,
    now: Optional[Callable[[], datetime]] = None,
) -> AdminAccountRequest:
    """Prompt for the account details, then print the record and command.

    ``stdin`` and ``stdout`` carry the prompts and answers; the banner, record
    and command are written to ``output`` (standard output by default).
    """

    settings = settings or Settings()
    out = output or sys.stdout

    print("🔐 Creating Admin Account in Firestore...\n", file=out, flush=True)

    answers = collect_responses(ADMIN_ACCOUNT_FIELDS, preset=preset, stdin=stdin, stdout=stdout)
    record = build_admin_record(answers["email"], answers["name"], now=now)
    command = build_firestore_set_command(
        answers["user_id"], record, collection=settings.admins_collection
    )
    logger.debug("Assembled admin record for uid %r", answers["user_id"])

    print("\n📋 Admin Data to Create:", file=out)
    print(record.to_pretty_json(), file=out)
    print("\n📝 Run this command in PowerShell:", file=out)
    print(command, file=out, flush=True)

    return AdminAccountRequest(user_id=answers["user_id"], record=record, command=command)


__all__ = ["AdminAccountRequest", "build_firestore_set_command", "create_admin_account"]
