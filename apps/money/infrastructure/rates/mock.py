"""
Mock source for testing and development.
Derives cross rates from a fixed table, so results are reproducible.
"""

from decimal import Decimal

from apps.money.domain.interfaces import BaseCurrencyExchange


class MockCurrencyExchange(BaseCurrencyExchange):
    """
    Mock source computing cross rates from approximate USD-based values.
    Useful for:
    - Testing without external API calls
    - Development without API keys
    """

    # Base rates relative to USD (approximate real-world values)
    BASE_RATES = {
        "USD": Decimal("1.0"),
        "EUR": Decimal("0.85"),
        "GBP": Decimal("0.73"),
        "CHF": Decimal("0.88"),
        "CAD": Decimal("1.25"),
        "JPY": Decimal("110.0"),
    }

    def get_exchange_rate(self, source_currency: str, exchanged_currency: str) -> Decimal | None:
        source_rate = self.BASE_RATES.get(source_currency)
        target_rate = self.BASE_RATES.get(exchanged_currency)

        if source_rate is None or target_rate is None:
            return None

        # Round to 6 decimal places
        return (target_rate / source_rate).quantize(Decimal("0.000001"))
