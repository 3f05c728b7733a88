# returns/services/numbering.py

"""
DOCUMENT NUMBERING ALLOCATOR

Produces the next sequential, prefixed, zero-padded document number for a
partition (e.g. CRET-00001 for customer returns, SRET-00001 for supplier returns).

Rules:
- Increment-and-read happens on a locked DocumentSequence row
  (SELECT ... FOR UPDATE) inside the caller's transaction.
  "read last number, add one" against the documents table is never used
  once the counter exists.
- First use of a partition seeds the counter from the most recently created
  document number of that partition (legacy data), or 0.
- An unparseable legacy number is a data-integrity failure for the partition.
- Rollback of the caller's transaction hands the number back (no gaps).
"""

from __future__ import annotations

import logging
from typing import Callable

from django.db import IntegrityError, transaction
from django.db.models import F

from returns.models import DocumentSequence
from returns.services.exceptions import ReturnIntegrityError

logger = logging.getLogger(__name__)

NUMBER_WIDTH = 5


def format_document_number(prefix: str, value: int) -> str:
    return f"{prefix}-{int(value):0{NUMBER_WIDTH}d}"


def parse_document_number(number: str) -> int:
    """
    Return the numeric suffix of "PREFIX-00042" -> 42.
    """
    _, sep, suffix = (number or "").partition("-")
    # plain ASCII digits only: no sign, whitespace or separators
    if not sep or not (suffix.isascii() and suffix.isdigit()):
        raise ReturnIntegrityError(
            f"Cannot parse document number suffix: {number!r}"
        )
    return int(suffix)


def _seed_value(last_issued: Callable[[], str | None] | None) -> int:
    if last_issued is None:
        return 0
    last_number = last_issued()
    if not last_number:
        return 0
    return parse_document_number(last_number)


def _lock_sequence(partition: str) -> DocumentSequence | None:
    return (
        DocumentSequence.objects.select_for_update()
        .filter(partition=partition)
        .first()
    )


def _get_or_create_locked_sequence(
    *, partition: str, prefix: str, last_issued
) -> DocumentSequence:
    sequence = _lock_sequence(partition)
    if sequence is not None:
        return sequence

    seed = _seed_value(last_issued)
    try:
        # savepoint: a concurrent creator must not poison the outer transaction
        with transaction.atomic():
            DocumentSequence.objects.create(
                partition=partition, prefix=prefix, last_value=seed
            )
    except IntegrityError:
        logger.debug(
            "Document sequence creation raced; re-selecting",
            extra={"partition": partition},
        )

    return DocumentSequence.objects.select_for_update().get(partition=partition)


def allocate_document_number(
    *,
    partition: str,
    prefix: str,
    last_issued: Callable[[], str | None] | None = None,
) -> str:
    """
    Allocate the next document number for `partition`.

    last_issued: optional callable returning the most recently created
    document number of the partition. Only consulted when the counter row
    does not exist yet.

    Must be called inside transaction.atomic().
    """
    sequence = _get_or_create_locked_sequence(
        partition=partition, prefix=prefix, last_issued=last_issued
    )

    DocumentSequence.objects.filter(pk=sequence.pk).update(
        last_value=F("last_value") + 1
    )
    sequence.refresh_from_db(fields=["last_value", "prefix"])

    number = format_document_number(sequence.prefix or prefix, sequence.last_value)

    logger.debug(
        "Document number allocated",
        extra={"partition": partition, "number": number},
    )
    return number
