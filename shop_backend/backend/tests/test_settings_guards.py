# backend/tests/test_settings_guards.py

from __future__ import annotations

from django.core.exceptions import ImproperlyConfigured
from django.test import SimpleTestCase

from backend.settings.guards import (
    require_non_empty,
    require_public_https_origins,
    require_secret_key,
    require_server_database_url,
)


class ProductionGuardTests(SimpleTestCase):
    """
    Production settings refuse to boot on unsafe configuration.
    """

    def test_secret_key(self):
        self.assertEqual(require_secret_key("  s3cr3t-value  "), "s3cr3t-value")
        for bad in (None, "", "   ", "dev-insecure-change-me"):
            with self.subTest(secret=bad):
                with self.assertRaises(ImproperlyConfigured):
                    require_secret_key(bad)

    def test_hosts_must_be_listed(self):
        self.assertEqual(require_non_empty("ALLOWED_HOSTS", ["api.shop.example"]), ["api.shop.example"])
        with self.assertRaises(ImproperlyConfigured):
            require_non_empty("ALLOWED_HOSTS", [])

    def test_database_must_be_a_server(self):
        url = "postgres://shop:pw@db:5432/shop"
        self.assertEqual(require_server_database_url(url), url)
        for bad in (None, "", "sqlite:///db.sqlite3"):
            with self.subTest(url=bad):
                with self.assertRaises(ImproperlyConfigured):
                    require_server_database_url(bad)

    def test_origins_must_be_public_https(self):
        good = ["https://shop.example"]
        self.assertEqual(require_public_https_origins("CORS_ALLOWED_ORIGINS", good), good)
        for bad in (
            [],
            ["http://shop.example"],
            ["https://localhost:5173"],
            ["https://shop.example", "https://127.0.0.1"],
        ):
            with self.subTest(origins=bad):
                with self.assertRaises(ImproperlyConfigured):
                    require_public_https_origins("CORS_ALLOWED_ORIGINS", bad)
