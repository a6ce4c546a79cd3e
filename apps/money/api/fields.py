"""
Serializer field exposing Money through the REST API.
"""

from decimal import Decimal

from drf_spectacular.utils import extend_schema_field
from rest_framework import serializers

from apps.money.domain.conversion import to_money
from apps.money.domain.exceptions import MoneyParseError
from apps.money.domain.money import Money


@extend_schema_field(
    {
        "type": "object",
        "properties": {
            "amount": {"type": "string", "example": "19.99"},
            "currency": {"type": "string", "example": "USD"},
            "formatted": {"type": "string", "readOnly": True, "example": "$19.99"},
        },
        "required": ["amount"],
    }
)
class MoneyField(serializers.Field):
    """
    Represents Money as {"amount": "19.99", "currency": "USD", "formatted": "$19.99"}.

    Accepts the same object (amount in whole units, currency optional), a
    string such as "19.99 USD", or a bare number.
    """

    default_error_messages = {
        "invalid": "Enter a valid amount of money.",
        "invalid_type": "Expected an object, a string or a number but got {input_type}.",
    }

    def __init__(self, precision: int = 2, **kwargs):
        self.precision = precision
        super().__init__(**kwargs)

    def to_representation(self, value: Money):
        return {
            "amount": value.to_s(),
            "currency": value.currency,
            "formatted": value.format(),
        }

    def to_internal_value(self, data):
        currency = None
        if isinstance(data, dict):
            currency = data.get("currency") or None
            if "amount" not in data:
                self.fail("invalid")
            data = data["amount"]

        if isinstance(data, bool) or not isinstance(data, (str, int, float, Decimal)):
            self.fail("invalid_type", input_type=type(data).__name__)

        try:
            money = to_money(data, currency=currency, precision=self.precision)
        except (MoneyParseError, ValueError):
            self.fail("invalid")

        if currency and money.currency != currency:
            self.fail("invalid")
        return money
