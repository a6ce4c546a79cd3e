"""
Composite money attribute for Django models.
Maps an amount column (and optionally a currency column) to a Money value.

    class ProductUnit(models.Model):
        price_amount = models.BigIntegerField(null=True, blank=True)
        price_currency = models.CharField(max_length=3, blank=True, default="")
        price = MoneyAttribute(currency="price_currency")

    unit.price = Money.ca_dollar(1999)    # price_amount=1999, price_currency="CAD"
    unit.price = "12.50 USD"              # coerced with to_money
    unit.price = ""                       # price_amount=None
"""

import logging
from typing import Optional

from apps.money.domain.context import get_context
from apps.money.domain.conversion import to_money
from apps.money.domain.money import Money

logger = logging.getLogger(__name__)


def _is_blank(value) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


class MoneyAttribute(property):
    """
    Descriptor over the amount and currency columns.

    Subclasses property so Model.__init__ and objects.create() accept the
    attribute as a keyword argument.
    """

    def __init__(self, amount: Optional[str] = None, currency: Optional[str] = None, precision: int = 2):
        self.amount_attname = amount
        self.currency_attname = currency
        self.precision = precision
        self.name = None

    def contribute_to_class(self, cls, name):
        self.name = name
        if self.amount_attname is None:
            self.amount_attname = f"{name}_amount"
        setattr(cls, name, self)

    def __set_name__(self, owner, name):
        # Plain classes; Django models go through contribute_to_class.
        if self.name is None:
            self.name = name
            if self.amount_attname is None:
                self.amount_attname = f"{name}_amount"

    def __get__(self, instance, owner=None):
        if instance is None:
            return self

        amount = getattr(instance, self.amount_attname)
        if amount is None:
            return None

        currency = getattr(instance, self.currency_attname) if self.currency_attname else None
        return Money(amount, currency or None, self.precision)

    def __set__(self, instance, value):
        if _is_blank(value):
            setattr(instance, self.amount_attname, None)
            if self.currency_attname:
                setattr(instance, self.currency_attname, self._empty_currency(instance))
            return

        money = to_money(value, precision=self.precision)
        setattr(instance, self.amount_attname, money.amount)
        if self.currency_attname:
            setattr(instance, self.currency_attname, money.currency)
        elif money.currency != get_context().default_currency:
            logger.warning(
                "%s has no currency column, %s amount will read back as %s",
                self.name, money.currency, get_context().default_currency,
            )

    def _empty_currency(self, instance):
        meta = getattr(instance, "_meta", None)
        if meta is None:
            return None
        field = meta.get_field(self.currency_attname)
        return None if field.null else ""
