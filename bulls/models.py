"""Data model for the bull registry.

A single flat table holds one row per bull. Nothing beyond the field
types is enforced: every attribute is optional and the registration
code is not unique. The record store (see
:mod:`bulls.services.record_store`) only rejects values that cannot be
stored in the column's type, such as a malformed date or a negative
offspring count.
"""

from __future__ import annotations

from django.db import models


class Bull(models.Model):
    """A breeding bull and its offspring tally."""

    registration_code = models.CharField(max_length=64, blank=True, default='')
    name = models.CharField(max_length=255, blank=True, default='')
    born_on = models.DateField(null=True, blank=True)
    offspring_count = models.PositiveIntegerField(null=True, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['id']

    def __str__(self) -> str:
        label = self.name or f"Bull {self.pk}"
        if self.registration_code:
            return f"{label} ({self.registration_code})"
        return label
