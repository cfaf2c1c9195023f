"""Configuration management for the Firestore admin helpers."""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Dict, Optional

import yaml

logger = logging.getLogger("admintools.config")

CONFIG_ENV = "ADMIN_TOOLS_CONFIG"


@dataclass(frozen=True)
class Settings:
    """Firebase project details referenced in the printed instructions."""

    project_id: str = "proplanet"
    console_url: str = "https://console.firebase.google.com/"
    rules_file: str = "firestore_security_rules_updated.rules"
    admins_collection: str = "admins"

    @staticmethod
    def from_dict(data: Dict[str, object]) -> "Settings":
        """Create :class:`Settings` from raw dictionary data."""
        known = {item.name for item in fields(Settings)}
        unknown = set(data.keys()) - known
        if unknown:
            raise ValueError(f"Unknown firebase configuration keys: {', '.join(sorted(unknown))}")

        values: Dict[str, str] = {}
        for key, value in data.items():
            if not isinstance(value, str) or not value.strip():
                raise ValueError(f"firebase.{key} must be a non-empty string")
            values[key] = value.strip()
        return Settings(**values)

    def with_overrides(self, **overrides: Optional[str]) -> "Settings":
        """Return a copy with every non-``None`` override applied."""
        changes = {key: value for key, value in overrides.items() if value is not None}
        if not changes:
            return self
        return replace(self, **changes)


def load_settings(config_path: Path) -> Settings:
    """Load settings from the ``firebase`` section of a YAML file."""
    with config_path.open("r", encoding="utf-8") as handle:
        raw = yaml.safe_load(handle) or {}

    if not isinstance(raw, dict):
        raise ValueError(f"Configuration file {config_path} must contain a mapping")

    section = raw.get("firebase") or {}
    if not isinstance(section, dict):
        raise ValueError("The 'firebase' configuration key must be a mapping")
    return Settings.from_dict(section)


def resolve_config_path(env_value: Optional[str]) -> Path:
    """Resolve the path to the configuration file."""
    if env_value:
        candidate = Path(env_value).expanduser().resolve(strict=False)
    else:
        candidate = (Path(__file__).resolve().parent.parent / "config" / "admin_tools.yaml").resolve(strict=False)
    return candidate


def load_configured_settings(path_arg: Optional[str] = None) -> Settings:
    """Load settings from ``path_arg``, ``ADMIN_TOOLS_CONFIG`` or the repository default.

    A missing file is not an error; the built-in defaults are used instead.
    """
    config_path = resolve_config_path(path_arg or os.getenv(CONFIG_ENV))
    if not config_path.is_file():
        logger.debug("No configuration file at %s; using defaults", config_path)
        return Settings()

    settings = load_settings(config_path)
    logger.info("Loaded configuration from %s", config_path)
    return settings


__all__ = ["CONFIG_ENV", "Settings", "load_configured_settings", "load_settings", "resolve_config_path"]
