"""Django ORM implementation of the Product repository.

Satisfies ``IProductRepository`` using Django's QuerySet API.
Error handling follows the Null Object pattern: methods return ``None``
instead of raising HTTP-level exceptions; the Service Layer decides
how to translate a missing entity into an API response.
"""

from __future__ import annotations

from typing import List, Optional

from django.db import transaction

from modules.products.models import Product
from modules.products.repositories.interfaces import IProductRepository


class ProductDjangoRepository(IProductRepository):
    """Concrete Product repository backed by Django ORM."""

    def get_by_id(self, id: int | str) -> Optional[Product]:
        """Retrieve a product by primary key.

        Returns ``None`` for non-existent, malformed or out-of-range IDs.
        """
        try:
            return Product.objects.filter(id=int(id)).first()
        except (TypeError, ValueError, OverflowError):
            return None

    def list(self) -> List[Product]:
        """List products ordered by creation time, newest first."""
        return list(Product.objects.order_by("-created_at", "-id"))

    @transaction.atomic
    def save(self, entity: Product) -> Product:
        """Persist (create or update) a product."""
        entity.save()
        return entity

    @transaction.atomic
    def delete(self, id: int | str) -> bool:
        """Hard-delete a product by ID.

        Returns ``True`` if the product was found and removed,
        ``False`` if no product exists with the given ID.
        """
        try:
            deleted, _ = Product.objects.filter(id=int(id)).delete()
        except (TypeError, ValueError, OverflowError):
            return False
        return deleted > 0
