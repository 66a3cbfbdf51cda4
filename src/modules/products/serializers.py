"""Product DRF serializers for API output and schema generation.

The serializers operate at the Interface layer (API Views) and only
shape responses; input is checked by the request rules in ``rules.py``
and carried to the Service Layer by the Pydantic DTOs in ``dtos.py``.
The input serializers exist to describe request bodies in the OpenAPI
document.
"""

from __future__ import annotations

from rest_framework import serializers

from modules.products.models import Product


class ProductSerializer(serializers.ModelSerializer):
    """Full product representation, timestamps included."""

    price = serializers.DecimalField(
        max_digits=10, decimal_places=2, coerce_to_string=False
    )
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)
    updatedAt = serializers.DateTimeField(source="updated_at", read_only=True)

    class Meta:
        model = Product
        fields = ["id", "name", "price", "availability", "createdAt", "updatedAt"]
        read_only_fields = ["id"]


class ProductListSerializer(ProductSerializer):
    """Product representation used by the listing, without timestamps."""

    class Meta(ProductSerializer.Meta):
        fields = ["id", "name", "price", "availability"]


class ProductCreateSerializer(serializers.Serializer):
    name = serializers.CharField(max_length=255)
    price = serializers.DecimalField(
        max_digits=10, decimal_places=2, coerce_to_string=False
    )


class ProductUpdateSerializer(ProductCreateSerializer):
    availability = serializers.BooleanField()
