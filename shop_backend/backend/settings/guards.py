# backend/settings/guards.py
"""
PATH: backend/settings/guards.py

Startup checks used by the production settings.
Each helper returns the cleaned value or raises ImproperlyConfigured,
so a misconfigured deploy never boots.
"""

from __future__ import annotations

from django.core.exceptions import ImproperlyConfigured

INSECURE_SECRET_KEYS = {"", "dev-insecure-change-me"}
LOCAL_HOST_MARKERS = ("localhost", "127.0.0.1")


def require_secret_key(raw: str | None) -> str:
    value = (raw or "").strip()
    if value in INSECURE_SECRET_KEYS:
        raise ImproperlyConfigured("Production needs a real SECRET_KEY.")
    return value


def require_non_empty(name: str, values: list[str]) -> list[str]:
    if not values:
        raise ImproperlyConfigured(f"{name} is empty; list the production values.")
    return values


def require_server_database_url(raw: str | None) -> str:
    """SQLite cannot serve the row locks the return numbering relies on."""
    value = (raw or "").strip()
    if not value:
        raise ImproperlyConfigured("DATABASE_URL is not set.")
    if value.startswith("sqlite"):
        raise ImproperlyConfigured(
            "DATABASE_URL points at SQLite; production runs on Postgres."
        )
    return value


def require_public_https_origins(name: str, origins: list[str]) -> list[str]:
    require_non_empty(name, origins)
    for origin in origins:
        if any(marker in origin for marker in LOCAL_HOST_MARKERS):
            raise ImproperlyConfigured(f"{name} contains a local origin: {origin}")
        if not origin.startswith("https://"):
            raise ImproperlyConfigured(f"{name} origin is not https: {origin}")
    return origins
