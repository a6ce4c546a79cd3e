"""
Bank implementations.

Every bank short-circuits exchanges that need no rate (same currency, zero
amount) and keeps the precision of the money it converts. Conversions are
floored, never rounded to nearest.
"""

import logging
import math
from decimal import Decimal
from typing import Dict, Mapping, Tuple

from apps.money.domain.exceptions import UnknownRateError, UnsupportedExchangeError
from apps.money.domain.interfaces import BaseBank, BaseCurrencyExchange
from apps.money.domain.scaling import exact_product

logger = logging.getLogger(__name__)


def _converted(money, amount, currency: str):
    return type(money)(amount, currency, money.precision, context=money.context)


class NoExchangeBank(BaseBank):
    """Default bank. Refuses every exchange so mixed currencies fail loudly."""

    def exchange(self, money, currency: str):
        raise UnsupportedExchangeError(money.currency, currency)


class VariableExchangeBank(BaseBank):
    """
    Bank backed by an in-memory rate table.

    Rates are directional: add_rate("USD", "CAD", ...) does not register
    CAD -> USD.

    Example:
        >>> bank = VariableExchangeBank()
        >>> bank.add_rate("USD", "CAD", 1.24515)
        >>> bank.exchange(Money.us_dollar(100), "CAD")
        Money(124, 'CAD', precision=2)
    """

    def __init__(self, rates: Mapping[str, Mapping[str, object]] | None = None):
        self._rates: Dict[Tuple[str, str], Decimal] = {}
        if rates:
            self.add_rates(rates)

    @property
    def rates(self) -> Dict[Tuple[str, str], Decimal]:
        return dict(self._rates)

    def add_rate(self, source_currency: str, exchanged_currency: str, rate) -> None:
        rate_value = Decimal(str(rate))
        if rate_value <= 0:
            raise ValueError(f"rate must be positive, got {rate}")
        self._rates[(source_currency.upper(), exchanged_currency.upper())] = rate_value

    def add_rates(self, rates: Mapping[str, Mapping[str, object]]) -> None:
        """Register rates given as {"USD": {"CAD": 1.24515, ...}, ...}."""
        for source_currency, targets in rates.items():
            for exchanged_currency, rate in targets.items():
                self.add_rate(source_currency, exchanged_currency, rate)

    def get_rate(self, source_currency: str, exchanged_currency: str) -> Decimal | None:
        return self._rates.get((source_currency.upper(), exchanged_currency.upper()))

    def exchange(self, money, currency: str):
        if money.currency == currency:
            return money
        if money.is_zero():
            return _converted(money, 0, currency)

        rate = self.get_rate(money.currency, currency)
        if rate is None:
            raise UnknownRateError(money.currency, currency)

        amount = math.floor(exact_product(money.amount, rate))
        logger.debug("Exchanged %s %s to %s %s at %s", money.amount, money.currency, amount, currency, rate)
        return _converted(money, amount, currency)


class CurrencyExchangeBank(BaseBank):
    """Bank delegating the conversion to an external currency exchange."""

    def __init__(self, currency_exchange: BaseCurrencyExchange):
        self.currency_exchange = currency_exchange

    def exchange(self, money, currency: str):
        if money.currency == currency:
            return money
        if money.is_zero():
            return _converted(money, 0, currency)

        result = self.currency_exchange.compute_exchange(money.amount, money.currency, currency)
        if result is None:
            raise UnknownRateError(money.currency, currency)

        amount = math.floor(result)
        logger.debug(
            "Exchanged %s %s to %s %s via %s",
            money.amount, money.currency, amount, currency,
            self.currency_exchange.__class__.__name__,
        )
        return _converted(money, amount, currency)
