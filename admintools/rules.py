"""Operator instructions for publishing updated Firestore security rules."""

from __future__ import annotations

from typing import List, TextIO

from .config import Settings

RULES_UPDATE_TEMPLATE: tuple[str, ...] = (
    "🚨 URGENT: Update Firestore Security Rules",
    "",
    "The app is failing to save daily points due to PERMISSION_DENIED errors.",
    "",
    "To fix this:",
    "1. Go to Firebase Console: {console_url}",
    "2. Select your project: {project_id}",
    "3. Go to Firestore Database → Rules",
    "4. Replace current rules with content from: {rules_file}",
    "5. Click Publish",
    "",
    "Or use Firebase CLI:",
    "firebase deploy --only firestore:rules",
    "",
    "After updating rules, restart your Flutter app and daily points will work!",
)


def render_rules_instructions(settings: Settings | None = None) -> List[str]:
    settings = settings or Settings()
    return [
        line.format(
            console_url=settings.console_url,
            project_id=settings.project_id,
            rules_file=settings.rules_file,
        )
        for line in RULES_UPDATE_TEMPLATE
    ]


def print_rules_instructions(settings: Settings | None = None, *, stdout: TextIO | None = None) -> None:
    for line in render_rules_instructions(settings):
        print(line, file=stdout)


__all__ = ["RULES_UPDATE_TEMPLATE", "print_rules_instructions", "render_rules_instructions"]
