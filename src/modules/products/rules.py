"""Request validation rules for the product routes.

Messages are part of the public API contract and stay in Spanish.
"""

from __future__ import annotations

from decimal import Decimal, InvalidOperation
from typing import Any

from modules.core.validation import (
    PARAMS,
    FieldRule,
    custom,
    is_boolean,
    is_int,
    is_numeric,
    max_length,
    not_empty,
)
from modules.products.dtos import MAX_PRICE, round_price

NAME_MAX_LENGTH = 255


def is_valid_price(value: Any) -> bool:
    """``True`` when ``value`` rounded to cents lies in ``(0, MAX_PRICE)``."""
    if value is None or isinstance(value, bool):
        return False
    try:
        price = round_price(Decimal(str(value)))
        return Decimal(0) < price < MAX_PRICE
    except (InvalidOperation, ValueError):
        return False


PRODUCT_ID_RULE = FieldRule(
    "id",
    (is_int("Id no válido"),),
    location=PARAMS,
)

NAME_RULE = FieldRule(
    "name",
    (
        not_empty("El nombre del producto no puede ir vacío"),
        max_length(
            NAME_MAX_LENGTH,
            "El nombre del producto no puede superar los 255 caracteres",
        ),
    ),
)

PRICE_RULE = FieldRule(
    "price",
    (
        is_numeric("Valor no válido"),
        not_empty("El precio del producto no puede ir vacío"),
        custom(is_valid_price, "Precio no válido"),
    ),
)

AVAILABILITY_RULE = FieldRule(
    "availability",
    (is_boolean("Valor para disponibilidad no válido"),),
)

CREATE_PRODUCT_RULES = (NAME_RULE, PRICE_RULE)
PRODUCT_ID_RULES = (PRODUCT_ID_RULE,)
UPDATE_PRODUCT_RULES = (PRODUCT_ID_RULE, *CREATE_PRODUCT_RULES, AVAILABILITY_RULE)
