"""Promocode DRF serializers for API output."""

from __future__ import annotations

from rest_framework import serializers

from modules.promocodes.models import Promocode


class PromocodeSerializer(serializers.ModelSerializer):
    """Read serializer for the Promocode resource."""

    class Meta:
        model = Promocode
        fields = ["id", "title", "description", "type", "rate", "created_at", "updated_at"]
        read_only_fields = fields
