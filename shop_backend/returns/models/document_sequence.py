# returns/models/document_sequence.py

"""
DOCUMENT SEQUENCE (COUNTER ROW)

One row per numbering partition (e.g. "customer", "supplier").
last_value is the last number issued for the partition.

Rows are locked with SELECT ... FOR UPDATE by the allocator, so the
increment is only visible once the caller's transaction commits and a
rollback hands the number back.
"""

from django.db import models


class DocumentSequence(models.Model):
    partition = models.CharField(max_length=50, unique=True)
    prefix = models.CharField(max_length=20)
    last_value = models.PositiveBigIntegerField(default=0)

    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["partition"]

    def __str__(self):
        return f"{self.partition} ({self.prefix}) @ {self.last_value}"
