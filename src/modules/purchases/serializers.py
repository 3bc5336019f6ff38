"""Purchase DRF serializers for API input/output.

Input serializers only check the request's shape and that each value
fits its column. Credit-card fields are deliberately loose (null and
blank allowed) so that ``validate_credit_card`` can report every card
problem in one response.
The output never exposes the full card number or the CVV.
"""

from __future__ import annotations

from rest_framework import serializers

from modules.purchases.models import LineItem, Purchase

# ---------------------------------------------------------------------------
# Input Serializers
# ---------------------------------------------------------------------------


def _loose_char(**kwargs) -> serializers.CharField:
    return serializers.CharField(
        required=False, allow_null=True, allow_blank=True, trim_whitespace=False, **kwargs
    )


class CreditCardInputSerializer(serializers.Serializer):
    card_number = _loose_char(default=None)
    cvv = _loose_char(default=None)
    expiration = _loose_char(default=None)
    cardholder = _loose_char(default=None, max_length=255)


class BillingAddressInputSerializer(serializers.Serializer):
    street = serializers.CharField(
        required=False, allow_blank=True, default="", max_length=255
    )
    city = serializers.CharField(
        required=False, allow_blank=True, default="", max_length=100
    )
    state = serializers.CharField(
        required=False, allow_blank=True, default="", max_length=50
    )
    zip = serializers.CharField(
        required=False, allow_blank=True, default="", max_length=20
    )
    email = serializers.CharField(
        required=False, allow_blank=True, default="", max_length=254
    )
    phone = serializers.CharField(
        required=False, allow_blank=True, default="", max_length=30
    )


class DeliveryAddressInputSerializer(serializers.Serializer):
    first_name = serializers.CharField(
        required=False, allow_blank=True, default="", max_length=100
    )
    last_name = serializers.CharField(
        required=False, allow_blank=True, default="", max_length=100
    )
    street = serializers.CharField(
        required=False, allow_blank=True, default="", max_length=255
    )
    city = serializers.CharField(
        required=False, allow_blank=True, default="", max_length=100
    )
    state = serializers.CharField(
        required=False, allow_blank=True, default="", max_length=50
    )
    zip = serializers.CharField(
        required=False, allow_blank=True, default="", max_length=20
    )


class LineItemInputSerializer(serializers.Serializer):
    product_id = serializers.UUIDField()
    quantity = serializers.IntegerField(
        min_value=1, max_value=2147483647, required=False, default=1
    )


class CreatePurchaseSerializer(serializers.Serializer):
    """Validates the purchase creation request payload."""

    billing_address = BillingAddressInputSerializer(required=False)
    delivery_address = DeliveryAddressInputSerializer(required=False)
    credit_card = CreditCardInputSerializer(required=False, allow_null=True, default=None)
    line_items = LineItemInputSerializer(many=True, allow_empty=False)


# ---------------------------------------------------------------------------
# Output Serializers (Read)
# ---------------------------------------------------------------------------


class LineItemSerializer(serializers.ModelSerializer):
    """Read serializer for line items with a product snapshot."""

    product_name = serializers.CharField(source="product.name", read_only=True)
    price = serializers.DecimalField(
        source="product.price", max_digits=10, decimal_places=2, read_only=True
    )

    class Meta:
        model = LineItem
        fields = ["id", "product_id", "product_name", "price", "quantity"]
        read_only_fields = fields


class PurchaseSerializer(serializers.ModelSerializer):
    """Read serializer for purchases with nested addresses, card and items."""

    billing_address = serializers.SerializerMethodField()
    delivery_address = serializers.SerializerMethodField()
    credit_card = serializers.SerializerMethodField()
    line_items = LineItemSerializer(many=True, read_only=True)

    class Meta:
        model = Purchase
        fields = [
            "id",
            "billing_address",
            "delivery_address",
            "credit_card",
            "line_items",
            "created_at",
        ]
        read_only_fields = fields

    def get_billing_address(self, obj: Purchase) -> dict:
        return {
            "street": obj.billing_street,
            "city": obj.billing_city,
            "state": obj.billing_state,
            "zip": obj.billing_zip,
            "email": obj.billing_email,
            "phone": obj.billing_phone,
        }

    def get_delivery_address(self, obj: Purchase) -> dict:
        return {
            "first_name": obj.delivery_first_name,
            "last_name": obj.delivery_last_name,
            "street": obj.delivery_street,
            "city": obj.delivery_city,
            "state": obj.delivery_state,
            "zip": obj.delivery_zip,
        }

    def get_credit_card(self, obj: Purchase) -> dict:
        return {
            "card_number": obj.masked_card_number,
            "expiration": obj.expiration,
            "cardholder": obj.cardholder,
        }
