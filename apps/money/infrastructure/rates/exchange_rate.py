from decimal import Decimal
from typing import Optional

from django.conf import settings

from apps.money.infrastructure.rates.base import HTTPCurrencyExchange


class ExchangeRateApiExchange(HTTPCurrencyExchange):
    """
    ExchangeRate API source.
    Uses the /pair endpoint to fetch the current rate of a currency pair.
    """

    def __init__(self, api_key: str | None = None, base_url: str | None = None, **kwargs):
        super().__init__(**kwargs)
        self.api_key = api_key if api_key is not None else getattr(settings, "EXCHANGERATE_API_KEY", "")
        self.base_url = base_url if base_url is not None else getattr(settings, "EXCHANGERATE_URL", "")

    def build_url(self, source_currency: str, exchanged_currency: str) -> Optional[str]:
        if not self.base_url or not self.api_key:
            return None
        # Format: https://v6.exchangerate-api.com/v6/YOUR-API-KEY/pair/USD/EUR
        return f"{self.base_url}/{self.api_key}/pair/{source_currency}/{exchanged_currency}"

    def parse_rate(self, data: dict, source_currency: str, exchanged_currency: str) -> Decimal:
        # Response format: {"result": "success", "conversion_rate": 0.85}
        return Decimal(str(data["conversion_rate"]))
