from django.db import models

from apps.money.infrastructure.persistence.fields import MoneyAttribute


class ProductUnit(models.Model):

    sku = models.CharField(max_length=20, unique=True)
    price_amount = models.BigIntegerField(null=True, blank=True)
    price_currency = models.CharField(max_length=3, blank=True, default="")
    price = MoneyAttribute(currency="price_currency")

    # Amount only, currency follows the configured default
    deposit_cents = models.BigIntegerField(null=True, blank=True)
    deposit = MoneyAttribute(amount="deposit_cents")

    weight_price_amount = models.BigIntegerField(null=True, blank=True)
    weight_price_currency = models.CharField(max_length=3, null=True, blank=True)
    weight_price = MoneyAttribute(currency="weight_price_currency", precision=4)

    class Meta:
        app_label = "testapp"

    def __str__(self):
        return self.sku
