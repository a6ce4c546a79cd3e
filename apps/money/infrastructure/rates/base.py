"""
Shared behaviour for HTTP rate sources: a short in-memory cache per currency
pair and translation of transport failures into "no rate" (None).
"""

import logging
from abc import abstractmethod
from datetime import datetime, timedelta
from decimal import Decimal
from typing import Dict, Optional, Tuple

import requests

from apps.money.domain.interfaces import BaseCurrencyExchange

logger = logging.getLogger(__name__)


class HTTPCurrencyExchange(BaseCurrencyExchange):

    DEFAULT_TIMEOUT = 10
    DEFAULT_CACHE_TTL = timedelta(minutes=30)

    def __init__(self, timeout: float | None = None, cache_ttl: timedelta | int | None = None):
        self.timeout = timeout if timeout is not None else self.DEFAULT_TIMEOUT
        if cache_ttl is None:
            cache_ttl = self.DEFAULT_CACHE_TTL
        elif isinstance(cache_ttl, int):
            cache_ttl = timedelta(seconds=cache_ttl)
        self.cache_ttl = cache_ttl
        self._cache: Dict[Tuple[str, str], Tuple[Decimal, datetime]] = {}

    @abstractmethod
    def build_url(self, source_currency: str, exchanged_currency: str) -> Optional[str]:
        """Return the request URL, or None if the source is not configured."""
        pass

    @abstractmethod
    def parse_rate(self, data: dict, source_currency: str, exchanged_currency: str) -> Decimal:
        pass

    def clear_cache(self) -> None:
        self._cache.clear()

    def get_exchange_rate(self, source_currency: str, exchanged_currency: str) -> Decimal | None:
        key = (source_currency, exchanged_currency)
        cached = self._cache.get(key)
        if cached and datetime.now() < cached[1]:
            return cached[0]

        rate = self.fetch_rate(source_currency, exchanged_currency)
        if rate is not None:
            self._cache[key] = (rate, datetime.now() + self.cache_ttl)
        return rate

    def fetch_rate(self, source_currency: str, exchanged_currency: str) -> Decimal | None:
        name = self.__class__.__name__
        url = self.build_url(source_currency, exchanged_currency)
        if url is None:
            logger.warning("%s is not configured, cannot fetch exchange rates", name)
            return None

        try:
            response = requests.get(url, timeout=self.timeout)
            response.raise_for_status()
            return self.parse_rate(response.json(), source_currency, exchanged_currency)

        except requests.exceptions.Timeout:
            logger.warning("Timeout calling %s for %s/%s", name, source_currency, exchanged_currency)
            return None
        except requests.exceptions.RequestException as e:
            logger.warning("HTTP error from %s: %s", name, e)
            return None
        except (KeyError, TypeError, ValueError, ArithmeticError) as e:
            logger.warning("Invalid response from %s: %s", name, e)
            return None
