# backend/settings/prod.py
"""
PATH: backend/settings/prod.py

DEPLOYED SETTINGS

Everything that could leak data or silently degrade is checked at import
time (see guards.py). Missing values stop the process instead of falling
back to development defaults.
"""

from __future__ import annotations

from .base import *  # noqa: F403
from .base import BASE_DIR, LOGGING, MIDDLEWARE, env
from .guards import (
    require_non_empty,
    require_public_https_origins,
    require_secret_key,
    require_server_database_url,
)

DEBUG = False

# ============================================================
# IDENTITY
# ============================================================
SECRET_KEY = require_secret_key(env("SECRET_KEY", default=""))
ALLOWED_HOSTS = require_non_empty(
    "ALLOWED_HOSTS", env.list("ALLOWED_HOSTS", default=[])
)

# ============================================================
# DATABASE
# ============================================================
require_server_database_url(env("DATABASE_URL", default=""))
DATABASES = {"default": env.db("DATABASE_URL")}
DATABASES["default"]["CONN_MAX_AGE"] = env.int("DB_CONN_MAX_AGE", default=60)

# ============================================================
# STATIC FILES (served by WhiteNoise after collectstatic)
# ============================================================
STATIC_ROOT = env("STATIC_ROOT", default=str(BASE_DIR / "staticfiles"))
MIDDLEWARE.insert(1, "whitenoise.middleware.WhiteNoiseMiddleware")
STORAGES = {
    "default": {"BACKEND": "django.core.files.storage.FileSystemStorage"},
    "staticfiles": {
        "BACKEND": "whitenoise.storage.CompressedManifestStaticFilesStorage",
    },
}

# ============================================================
# TRANSPORT
# ============================================================
# TLS terminates at the load balancer
SECURE_PROXY_SSL_HEADER = ("HTTP_X_FORWARDED_PROTO", "https")
SECURE_SSL_REDIRECT = env.bool("SECURE_SSL_REDIRECT", default=True)
SECURE_HSTS_SECONDS = env.int("SECURE_HSTS_SECONDS", default=3600)
SECURE_HSTS_INCLUDE_SUBDOMAINS = env.bool("SECURE_HSTS_INCLUDE_SUBDOMAINS", default=True)
SECURE_HSTS_PRELOAD = env.bool("SECURE_HSTS_PRELOAD", default=False)

SECURE_CONTENT_TYPE_NOSNIFF = True
SECURE_REFERRER_POLICY = "same-origin"
SECURE_CROSS_ORIGIN_OPENER_POLICY = "same-origin"
X_FRAME_OPTIONS = "DENY"

# Cookies: https only, not readable from scripts
SESSION_COOKIE_SECURE = CSRF_COOKIE_SECURE = True
SESSION_COOKIE_HTTPONLY = CSRF_COOKIE_HTTPONLY = True
SESSION_COOKIE_SAMESITE = CSRF_COOKIE_SAMESITE = "Lax"

# ============================================================
# BROWSER ORIGINS
# ============================================================
CORS_ALLOWED_ORIGINS = require_public_https_origins(
    "CORS_ALLOWED_ORIGINS", env.list("CORS_ALLOWED_ORIGINS", default=[])
)
CSRF_TRUSTED_ORIGINS = require_public_https_origins(
    "CSRF_TRUSTED_ORIGINS", env.list("CSRF_TRUSTED_ORIGINS", default=[])
)
# API is token authenticated
CORS_ALLOW_CREDENTIALS = False

# ============================================================
# LOGGING
# ============================================================
LOG_LEVEL = (env("LOG_LEVEL", default="WARNING") or "WARNING").strip().upper()
for _app_logger in ("products", "parties", "returns"):
    LOGGING["loggers"][_app_logger]["level"] = LOG_LEVEL
