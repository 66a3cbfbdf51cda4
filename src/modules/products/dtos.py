"""Product DTOs for the Service Layer.

Framework-agnostic data transfer objects using Pydantic v2.
These are the contracts between the API layer (DRF views) and the
Service layer.  DTOs are immutable (``frozen=True``).

- ``CreateProductDTO``: input for product creation.
- ``UpdateProductDTO``: input for full product updates (PUT semantics).

Request rules reject bad input before a DTO is built; the validators
here keep the service layer safe when it is called directly.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator

PRICE_QUANTUM = Decimal("0.01")
# DecimalField(max_digits=10, decimal_places=2) holds values below 10^8.
MAX_PRICE = Decimal("100000000")


def round_price(v: Decimal) -> Decimal:
    """Round to cents the way the price column stores it."""
    return v.quantize(PRICE_QUANTUM, rounding=ROUND_HALF_UP)


def _coerce_name(v: Any) -> Any:
    if isinstance(v, (int, float, Decimal)) and not isinstance(v, bool):
        return str(v)
    return v


def _check_name(v: str) -> str:
    if not v:
        raise ValueError("Name must not be empty.")
    return v


def _check_price(v: Decimal) -> Decimal:
    if not v.is_finite():
        raise ValueError("Price must be a finite number.")
    if v <= 0 or v >= MAX_PRICE:
        raise ValueError("Price must be between 0 and 100000000.")
    price = round_price(v)
    if not PRICE_QUANTUM <= price < MAX_PRICE:
        raise ValueError("Price is out of range once rounded to cents.")
    return price


class CreateProductDTO(BaseModel):
    """Immutable DTO for product creation requests.

    Validates:
    - ``name`` is a non-empty string (numbers are accepted as text).
    - ``price`` is a Decimal rounded to cents that stays in ``(0, MAX_PRICE)``.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    price: Decimal

    @field_validator("name", mode="before")
    @classmethod
    def name_as_text(cls, v: Any) -> Any:
        return _coerce_name(v)

    @field_validator("name")
    @classmethod
    def name_must_not_be_empty(cls, v: str) -> str:
        return _check_name(v)

    @field_validator("price")
    @classmethod
    def price_must_be_positive(cls, v: Decimal) -> Decimal:
        return _check_price(v)


class UpdateProductDTO(BaseModel):
    """Immutable DTO for product update requests.

    Every field is required: an update replaces name, price and
    availability together.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    price: Decimal
    availability: bool

    @field_validator("name", mode="before")
    @classmethod
    def name_as_text(cls, v: Any) -> Any:
        return _coerce_name(v)

    @field_validator("name")
    @classmethod
    def name_must_not_be_empty(cls, v: str) -> str:
        return _check_name(v)

    @field_validator("price")
    @classmethod
    def price_must_be_positive(cls, v: Decimal) -> Decimal:
        return _check_price(v)
