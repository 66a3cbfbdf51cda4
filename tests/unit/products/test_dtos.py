"""Unit tests for Product DTOs.

Covers:
- CreateProductDTO: coercion, price rules, immutability.
- UpdateProductDTO: required fields, boolean parsing.
"""

from __future__ import annotations

from decimal import Decimal

import pytest
from pydantic import ValidationError

from modules.products.dtos import CreateProductDTO, UpdateProductDTO

pytestmark = pytest.mark.unit


class TestCreateProductDTO:
    def test_valid(self):
        dto = CreateProductDTO(name="Mouses Testing", price="300")
        assert dto.name == "Mouses Testing"
        assert dto.price == Decimal("300.00")

    def test_price_rounded_to_cents(self):
        dto = CreateProductDTO(name="Mouse", price="10.555")
        assert dto.price == Decimal("10.56")

    def test_numeric_name_accepted_as_text(self):
        dto = CreateProductDTO(name=123, price=1)
        assert dto.name == "123"

    @pytest.mark.parametrize("price", ["0", "-1", 0, "NaN"])
    def test_non_positive_price_rejected(self, price):
        with pytest.raises(ValidationError):
            CreateProductDTO(name="Mouse", price=price)

    @pytest.mark.parametrize("price", ["0.004", "99999999.995", "100000000"])
    def test_price_out_of_range_after_rounding_rejected(self, price):
        with pytest.raises(ValidationError):
            CreateProductDTO(name="Mouse", price=price)

    def test_price_rounding_up_to_one_cent_accepted(self):
        dto = CreateProductDTO(name="Mouse", price="0.005")
        assert dto.price == Decimal("0.01")

    def test_empty_name_rejected(self):
        with pytest.raises(ValidationError):
            CreateProductDTO(name="", price="1")

    def test_missing_fields_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            CreateProductDTO()
        fields = {err["loc"][0] for err in exc_info.value.errors()}
        assert fields == {"name", "price"}

    def test_is_frozen(self):
        dto = CreateProductDTO(name="Mouse", price="1")
        with pytest.raises(ValidationError):
            dto.name = "Other"


class TestUpdateProductDTO:
    def test_valid(self):
        dto = UpdateProductDTO(name="Monitor", price="950", availability=True)
        assert dto.price == Decimal("950.00")
        assert dto.availability is True

    @pytest.mark.parametrize(
        "raw, expected",
        [("true", True), ("false", False), ("1", True), ("0", False), (0, False)],
    )
    def test_availability_literals(self, raw, expected):
        dto = UpdateProductDTO(name="Monitor", price="1", availability=raw)
        assert dto.availability is expected

    def test_availability_required(self):
        with pytest.raises(ValidationError):
            UpdateProductDTO(name="Monitor", price="1")

    def test_invalid_availability_rejected(self):
        with pytest.raises(ValidationError):
            UpdateProductDTO(name="Monitor", price="1", availability="no-true")

    def test_non_positive_price_rejected(self):
        with pytest.raises(ValidationError):
            UpdateProductDTO(name="Monitor", price="0", availability=True)
