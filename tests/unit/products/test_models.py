"""Unit tests for the Product model.

Covers:
- Valid creation and defaults.
- Price > 0 and non-empty name enforced by DB constraints.
- Timestamps maintained by storage.
- Availability toggle.
- Hard delete.
- __str__ representation.
"""

from __future__ import annotations

from decimal import Decimal

import pytest
from django.db import IntegrityError, transaction

from modules.products.models import Product

pytestmark = pytest.mark.unit


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _make_product(**overrides) -> Product:
    """Build an unsaved Product."""
    defaults = {
        "name": "Test Product",
        "price": Decimal("29.90"),
    }
    defaults.update(overrides)
    return Product(**defaults)


# ---------------------------------------------------------------------------
# Creation
# ---------------------------------------------------------------------------


class TestProductCreation:
    def test_create_product_with_valid_data(self):
        p = Product.objects.create(name="Widget", price=Decimal("19.99"))
        p.refresh_from_db()
        assert isinstance(p.id, int)
        assert p.name == "Widget"
        assert p.price == Decimal("19.99")

    def test_availability_defaults_to_true(self):
        p = Product.objects.create(name="Widget", price=Decimal("1.00"))
        assert p.availability is True

    def test_ids_are_unique_and_increasing(self):
        a = Product.objects.create(name="A", price=Decimal("1.00"))
        b = Product.objects.create(name="B", price=Decimal("1.00"))
        assert b.id > a.id

    def test_timestamps_set_on_create(self):
        p = Product.objects.create(name="Widget", price=Decimal("1.00"))
        assert p.created_at is not None
        assert p.updated_at is not None

    def test_updated_at_refreshed_with_update_fields(self):
        p = Product.objects.create(name="Widget", price=Decimal("1.00"))
        before = p.updated_at
        p.name = "Renamed"
        p.save(update_fields=["name"])
        p.refresh_from_db()
        assert p.name == "Renamed"
        assert p.updated_at >= before


# ---------------------------------------------------------------------------
# Constraints
# ---------------------------------------------------------------------------


class TestProductConstraints:
    def test_valid_product_is_stored(self):
        product = _make_product()
        product.save()
        assert Product.objects.filter(id=product.id).exists()

    @pytest.mark.parametrize("price", [Decimal("0"), Decimal("-1.00")])
    def test_db_constraint_rejects_non_positive_price(self, price):
        with pytest.raises(IntegrityError), transaction.atomic():
            _make_product(price=price).save()

    def test_db_constraint_rejects_empty_name(self):
        with pytest.raises(IntegrityError), transaction.atomic():
            _make_product(name="").save()


# ---------------------------------------------------------------------------
# Behaviour
# ---------------------------------------------------------------------------


class TestToggleAvailability:
    def test_toggle_returns_new_value(self):
        product = _make_product()
        assert product.toggle_availability() is False
        assert product.availability is False

    def test_toggle_twice_is_identity(self):
        product = _make_product(availability=False)
        product.toggle_availability()
        product.toggle_availability()
        assert product.availability is False


class TestHardDelete:
    def test_delete_removes_row(self):
        p = Product.objects.create(name="Widget", price=Decimal("1.00"))
        p.delete()
        assert not Product.objects.filter(id=p.id).exists()


# ---------------------------------------------------------------------------
# Display
# ---------------------------------------------------------------------------


class TestProductDisplay:
    def test_str(self):
        p = Product.objects.create(name="Widget", price=Decimal("1.00"))
        assert str(p) == f"#{p.id} - Widget"
