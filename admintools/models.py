"""Domain models for the Firestore admin provisioning helpers."""

from __future__ import annotations

import json
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Callable, Dict, Mapping, Optional

ADMIN_ROLE = "admin"

_DOCUMENT_KEYS = ("email", "name", "role", "isActive", "createdAt")


def _current_timestamp() -> datetime:
    return datetime.now(timezone.utc)


def _serialize_datetime(value: datetime) -> str:
    """Render ``value`` the way ``Date.prototype.toISOString`` does."""

    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    value = value.astimezone(timezone.utc)
    return value.isoformat(timespec="milliseconds").replace("+00:00", "Z")


@dataclass(frozen=True)
class AdminRecord:
    """Document body written to ``admins/<uid>`` for an administrator."""

    email: str
    name: str
    created_at: str
    role: str = ADMIN_ROLE
    is_active: bool = True

    def to_document(self) -> Dict[str, Any]:
        return {
            "email": self.email,
            "name": self.name,
            "role": self.role,
            "isActive": self.is_active,
            "createdAt": self.created_at,
        }

    def to_pretty_json(self) -> str:
        return json.dumps(self.to_document(), indent=2, ensure_ascii=False)

    def to_compact_json(self) -> str:
        return json.dumps(self.to_document(), separators=(",", ":"), ensure_ascii=False)

    @staticmethod
    def from_document(data: Mapping[str, Any]) -> "AdminRecord":
        """Create an :class:`AdminRecord` from a Firestore-style document."""

        missing = [key for key in _DOCUMENT_KEYS if key not in data]
        if missing:
            raise ValueError(f"Admin document is missing fields: {', '.join(missing)}")

        wrong = [
            key
            for key in ("email", "name", "role", "createdAt")
            if not isinstance(data[key], str)
        ]
        if not isinstance(data["isActive"], bool):
            wrong.append("isActive")
        if wrong:
            raise ValueError(f"Admin document has fields of the wrong type: {', '.join(wrong)}")

        return AdminRecord(
            email=data["email"],
            name=data["name"],
            role=data["role"],
            is_active=data["isActive"],
            created_at=data["createdAt"],
        )

    @staticmethod
    def from_json(text: str) -> "AdminRecord":
        try:
            payload = json.loads(text)
        except json.JSONDecodeError as exc:
            raise ValueError(f"Admin document is not valid JSON: {exc}") from exc
        if not isinstance(payload, dict):
            raise ValueError("Admin document must be a JSON object")
        return AdminRecord.from_document(payload)


def build_admin_record(
    email: str,
    name: str,
    *,
    now: Optional[Callable[[], datetime]] = None,
) -> AdminRecord:
    """Assemble an active admin record stamped with the current time.

    ``email`` and ``name`` are stored exactly as given; nothing is trimmed or
    validated.
    """

    clock = now or _current_timestamp
    return AdminRecord(email=email, name=name, created_at=_serialize_datetime(clock()))


__all__ = ["ADMIN_ROLE", "AdminRecord", "build_admin_record"]
