"""Product model.

Business rules implemented:
- Name must not be empty (DB check constraint).
- Price must be greater than zero (DB check constraint).
- Availability defaults to ``True`` and is flipped by ``toggle_availability``.
- Products are hard-deleted.

Request input is checked before it reaches the model by the route rules
and the DTOs; the constraints guard the table itself.
"""

from __future__ import annotations

from django.db import models

from modules.core.models import TimestampedModel


class Product(TimestampedModel):
    """Product aggregate root."""

    name = models.CharField(max_length=255)
    price = models.DecimalField(max_digits=10, decimal_places=2)
    availability = models.BooleanField(default=True)

    class Meta:
        db_table = "products"
        ordering = ["-created_at", "-id"]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(price__gt=0),
                name="products_price_positive",
            ),
            models.CheckConstraint(
                condition=~models.Q(name=""),
                name="products_name_not_empty",
            ),
        ]

    # ------------------------------------------------------------------
    # Behaviour
    # ------------------------------------------------------------------

    def toggle_availability(self) -> bool:
        """Flip ``availability`` in memory and return the new value."""
        self.availability = not self.availability
        return self.availability

    # ------------------------------------------------------------------
    # Display
    # ------------------------------------------------------------------

    def __str__(self) -> str:
        return f"#{self.id} - {self.name}"
