# backend/tests/test_migrations.py

from __future__ import annotations

from io import StringIO

from django.core.management import call_command
from django.test import TestCase

PROJECT_APPS = ("products", "parties", "invoices", "payments", "returns")


class MigrationStateTests(TestCase):
    def test_models_match_committed_migrations(self):
        out = StringIO()
        try:
            call_command(
                "makemigrations",
                *PROJECT_APPS,
                check=True,
                dry_run=True,
                stdout=out,
            )
        except SystemExit:
            self.fail(f"Models changed without a migration:\n{out.getvalue()}")
