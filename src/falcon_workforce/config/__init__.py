from __future__ import annotations

import os


def get_settings_module() -> str:
    # APP_ENV picks the settings module; default is development
    env = os.getenv("APP_ENV", "development").lower()

    if env in {"prod", "production"}:
        return "falcon_workforce.config.production"

    if env in {"test", "testing"}:
        return "falcon_workforce.config.testing"

    return "falcon_workforce.config.development"


def parse_super_admins(raw: str | None) -> list[str]:
    """Comma-separated identities from the SUPER_ADMINS env var."""
    if not raw:
        return []
    return [part.strip() for part in raw.split(",") if part.strip()]
