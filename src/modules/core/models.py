"""Base abstract models shared by the API modules.

Provides:
- ``TimestampedModel``: integer surrogate key + ``created_at`` /
  ``updated_at`` bookkeeping maintained by the database layer.

Rows are hard-deleted; there is no tombstone column.
"""

from __future__ import annotations

from django.db import models


class TimestampedModel(models.Model):
    """Abstract base with an auto-incremented PK and timestamp bookkeeping."""

    id = models.AutoField(primary_key=True, editable=False)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        abstract = True

    def save(self, *args, **kwargs) -> None:
        """Ensure ``updated_at`` is refreshed even when ``update_fields`` is passed."""
        update_fields = kwargs.get("update_fields")
        if update_fields is not None and "updated_at" not in update_fields:
            kwargs["update_fields"] = list(update_fields) + ["updated_at"]
        super().save(*args, **kwargs)
