"""Product DRF serializers for API output.

The serializer operates at the Interface layer (API Views).
Business logic lives in the Service Layer, which receives
Pydantic DTOs from ``dtos.py``.
"""

from __future__ import annotations

from rest_framework import serializers

from modules.products.models import Product


class ProductSerializer(serializers.ModelSerializer):
    """Read serializer for the Product resource."""

    class Meta:
        model = Product
        fields = [
            "id",
            "name",
            "description",
            "demographic",
            "category",
            "type",
            "release_date",
            "price",
            "quantity",
            "brand",
            "material",
            "primary_color_code",
            "secondary_color_code",
            "style_number",
            "global_product_code",
            "img_src",
            "active",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields
