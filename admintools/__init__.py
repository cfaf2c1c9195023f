"""Console helpers for administering the Firestore-backed application."""

from __future__ import annotations

from .accounts import AdminAccountRequest, build_firestore_set_command, create_admin_account
from .config import Settings, load_configured_settings
from .models import AdminRecord, build_admin_record
from .prompts import ADMIN_ACCOUNT_FIELDS, PromptField, UserInputError, collect_responses
from .rules import print_rules_instructions, render_rules_instructions

__all__ = [
    "ADMIN_ACCOUNT_FIELDS",
    "AdminAccountRequest",
    "AdminRecord",
    "PromptField",
    "Settings",
    "UserInputError",
    "build_admin_record",
    "build_firestore_set_command",
    "collect_responses",
    "create_admin_account",
    "load_configured_settings",
    "print_rules_instructions",
    "render_rules_instructions",
]
