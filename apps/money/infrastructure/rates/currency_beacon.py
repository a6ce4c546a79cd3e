from decimal import Decimal
from typing import Optional

from django.conf import settings

from apps.money.infrastructure.rates.base import HTTPCurrencyExchange


class CurrencyBeaconExchange(HTTPCurrencyExchange):
    """
    CurrencyBeacon API source.
    Uses the /latest endpoint to fetch the current rate of a currency pair.
    """

    def __init__(self, api_key: str | None = None, base_url: str | None = None, **kwargs):
        super().__init__(**kwargs)
        self.api_key = api_key if api_key is not None else getattr(settings, "CURRENCY_BEACON_API_KEY", "")
        self.base_url = base_url if base_url is not None else getattr(settings, "CURRENCY_BEACON_URL", "")

    def build_url(self, source_currency: str, exchanged_currency: str) -> Optional[str]:
        if not self.base_url or not self.api_key:
            return None
        # Format: https://api.currencybeacon.com/v1/latest?api_key=KEY&base=USD&symbols=EUR
        return (
            f"{self.base_url}/latest"
            f"?api_key={self.api_key}"
            f"&base={source_currency}"
            f"&symbols={exchanged_currency}"
        )

    def parse_rate(self, data: dict, source_currency: str, exchanged_currency: str) -> Decimal:
        # Response format: {"response": {"rates": {"EUR": 0.85}}}
        return Decimal(str(data["response"]["rates"][exchanged_currency]))
