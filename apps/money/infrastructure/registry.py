"""
Bank Registry - Maps configuration names to bank and rate source classes.
This is the glue between the MONEY Django setting and the domain objects.

Example setting:

    MONEY = {
        "DEFAULT_CURRENCY": "USD",
        "ZERO": "free",
        "SYMBOLS": {"CHF": "Fr."},
        "BANK": {
            "NAME": "variable",
            "RATES": {"USD": {"CAD": "1.24515"}, "CAD": {"USD": "0.803115"}},
        },
    }

or, delegating to an external source:

    "BANK": {"NAME": "currency_exchange", "EXCHANGE": "currency_beacon", "OPTIONS": {"timeout": 5}}
"""

from typing import Any, Mapping

from django.core.exceptions import ImproperlyConfigured

from apps.money.domain.banks import CurrencyExchangeBank, NoExchangeBank, VariableExchangeBank
from apps.money.domain.context import DEFAULT_CURRENCY, DEFAULT_SYMBOLS, MoneyContext
from apps.money.domain.interfaces import BaseBank, BaseCurrencyExchange
from apps.money.infrastructure.rates.currency_beacon import CurrencyBeaconExchange
from apps.money.infrastructure.rates.exchange_rate import ExchangeRateApiExchange
from apps.money.infrastructure.rates.mock import MockCurrencyExchange

BANK_REGISTRY: dict[str, type[BaseBank]] = {
    "no_exchange": NoExchangeBank,
    "variable": VariableExchangeBank,
    "currency_exchange": CurrencyExchangeBank,
}

EXCHANGE_REGISTRY: dict[str, type[BaseCurrencyExchange]] = {
    "currency_beacon": CurrencyBeaconExchange,
    "exchange_rate": ExchangeRateApiExchange,
    "mock": MockCurrencyExchange,
}


def get_currency_exchange_instance(name: str, options: Mapping[str, Any] | None = None) -> BaseCurrencyExchange:
    exchange_class = EXCHANGE_REGISTRY.get(name)
    if exchange_class is None:
        raise ImproperlyConfigured(
            f"Unknown currency exchange '{name}'. Allowed: {sorted(EXCHANGE_REGISTRY)}"
        )
    return exchange_class(**(options or {}))


def build_bank(config: Mapping[str, Any] | None) -> BaseBank:
    """
    Build a bank from the BANK entry of the MONEY setting.

    Args:
        config: Dict with NAME and, depending on the bank, RATES or
            EXCHANGE/OPTIONS. None selects the no-exchange bank.

    Returns:
        Bank instance
    """
    config = config or {}
    name = config.get("NAME", "no_exchange")

    if name not in BANK_REGISTRY:
        raise ImproperlyConfigured(f"Unknown bank '{name}'. Allowed: {sorted(BANK_REGISTRY)}")

    if name == "variable":
        return VariableExchangeBank(config.get("RATES") or {})

    if name == "currency_exchange":
        exchange_name = config.get("EXCHANGE")
        if not exchange_name:
            raise ImproperlyConfigured("The currency_exchange bank requires an EXCHANGE name")
        return CurrencyExchangeBank(get_currency_exchange_instance(exchange_name, config.get("OPTIONS")))

    return BANK_REGISTRY[name]()


def build_context(config: Mapping[str, Any] | None) -> MoneyContext:
    config = config or {}
    symbols = dict(DEFAULT_SYMBOLS)
    symbols.update(config.get("SYMBOLS") or {})

    return MoneyContext(
        bank=build_bank(config.get("BANK")),
        default_currency=config.get("DEFAULT_CURRENCY", DEFAULT_CURRENCY),
        zero=config.get("ZERO"),
        symbols=symbols,
    )
