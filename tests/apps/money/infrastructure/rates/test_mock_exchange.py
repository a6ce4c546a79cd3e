import pytest
from decimal import Decimal

from apps.money.infrastructure.rates.mock import MockCurrencyExchange


@pytest.fixture
def currency_exchange():
    return MockCurrencyExchange()


def test_get_exchange_rate_success(currency_exchange):
    assert currency_exchange.get_exchange_rate("USD", "EUR") == Decimal("0.85")


def test_cross_rate(currency_exchange):
    """
    Test cross rate calculation (EUR to GBP) rounded to 6 decimal places.
    """
    assert currency_exchange.get_exchange_rate("EUR", "GBP") == Decimal("0.858824")


def test_deterministic(currency_exchange):
    assert currency_exchange.get_exchange_rate("CAD", "JPY") == currency_exchange.get_exchange_rate("CAD", "JPY")


def test_unsupported_currency_returns_none(currency_exchange):
    assert currency_exchange.get_exchange_rate("USD", "XXX") is None
    assert currency_exchange.compute_exchange(100, "XXX", "USD") is None


def test_compute_exchange(currency_exchange):
    assert currency_exchange.compute_exchange(1000, "USD", "CAD") == Decimal("1250")
