# returns/tests/test_numbering.py

from __future__ import annotations

import uuid
from decimal import Decimal
from unittest import mock

from django.db import transaction
from django.test import TestCase

from returns.models import DocumentSequence, Return, ReturnType
from returns.services.exceptions import ReturnIntegrityError
from returns.services import numbering
from returns.services.numbering import (
    allocate_document_number,
    format_document_number,
    parse_document_number,
)


def _legacy_return(return_no, return_type=ReturnType.CUSTOMER):
    return Return.objects.create(
        return_no=return_no,
        return_type=return_type,
        invoice_id=uuid.uuid4(),
        party_id=uuid.uuid4(),
        total_amount=Decimal("1.00"),
    )


def _last_customer_number():
    return (
        Return.objects.filter(return_type=ReturnType.CUSTOMER)
        .order_by("-created_at")
        .values_list("return_no", flat=True)
        .first()
    )


class DocumentNumberFormatTests(TestCase):
    def test_format_pads_to_five_digits(self):
        self.assertEqual(format_document_number("CRET", 1), "CRET-00001")
        self.assertEqual(format_document_number("SRET", 123456), "SRET-123456")

    def test_parse_reads_numeric_suffix(self):
        self.assertEqual(parse_document_number("CRET-00042"), 42)

    def test_parse_rejects_garbage(self):
        for bad in (
            "CRET00042",
            "CRET-ABC",
            "",
            None,
            "CRET--3",
            "CRET- 7",
            "CRET-+7",
            "CRET-7 ",
            "CRET-1_000",
        ):
            with self.subTest(number=bad):
                with self.assertRaises(ReturnIntegrityError):
                    parse_document_number(bad)


class DocumentNumberAllocationTests(TestCase):
    """
    GUARANTEES:
    - First number of an empty partition is 00001
    - Consecutive allocations are strictly sequential
    - Partitions are independent
    - Legacy numbers seed the counter once
    """

    def _allocate(self, partition="customer", prefix="CRET", last_issued=None):
        with transaction.atomic():
            return allocate_document_number(
                partition=partition, prefix=prefix, last_issued=last_issued
            )

    def test_first_number_is_one(self):
        self.assertEqual(self._allocate(), "CRET-00001")

    def test_numbers_are_sequential(self):
        numbers = [self._allocate() for _ in range(3)]
        self.assertEqual(numbers, ["CRET-00001", "CRET-00002", "CRET-00003"])
        self.assertEqual(DocumentSequence.objects.get(partition="customer").last_value, 3)

    def test_partitions_are_independent(self):
        self.assertEqual(self._allocate(), "CRET-00001")
        self.assertEqual(self._allocate("supplier", "SRET"), "SRET-00001")
        self.assertEqual(self._allocate(), "CRET-00002")

    def test_counter_seeds_from_last_issued_number(self):
        _legacy_return("CRET-00041")

        number = self._allocate(last_issued=_last_customer_number)

        self.assertEqual(number, "CRET-00042")

    def test_seed_is_only_read_once(self):
        self._allocate()
        _legacy_return("CRET-00090")

        # Counter row exists: legacy data no longer consulted
        self.assertEqual(self._allocate(last_issued=_last_customer_number), "CRET-00002")

    def test_unparseable_legacy_number_is_integrity_error(self):
        _legacy_return("CRET-LEGACY")

        with self.assertRaises(ReturnIntegrityError):
            self._allocate(last_issued=_last_customer_number)

        self.assertFalse(DocumentSequence.objects.filter(partition="customer").exists())

    def test_rollback_returns_the_number(self):
        try:
            with transaction.atomic():
                allocate_document_number(partition="customer", prefix="CRET")
                raise RuntimeError("abort")
        except RuntimeError:
            pass

        self.assertEqual(self._allocate(), "CRET-00001")

    def test_lost_creation_race_continues_existing_counter(self):
        # Another transaction inserts the row between our lookup and our insert
        def row_appears_after_lookup(partition):
            DocumentSequence.objects.create(
                partition=partition, prefix="CRET", last_value=5
            )
            return None

        with mock.patch.object(
            numbering, "_lock_sequence", side_effect=row_appears_after_lookup
        ):
            number = self._allocate(last_issued=lambda: "CRET-00900")

        self.assertEqual(number, "CRET-00006")
        self.assertEqual(DocumentSequence.objects.count(), 1)

        # The outer transaction survives the rejected insert
        self.assertEqual(self._allocate(), "CRET-00007")
