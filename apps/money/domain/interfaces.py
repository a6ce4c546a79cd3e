from abc import ABC, abstractmethod
from decimal import Decimal
from typing import TYPE_CHECKING

from apps.money.domain.scaling import exact_product

if TYPE_CHECKING:
    from apps.money.domain.money import Money


class BaseBank(ABC):
    """Strategy responsible for converting money between currencies."""

    @abstractmethod
    def exchange(self, money: "Money", currency: str) -> "Money":
        pass


class BaseCurrencyExchange(ABC):
    """
    External source of exchange rates used by CurrencyExchangeBank.

    Implementations return None when a rate cannot be obtained; the bank
    decides how to surface that.
    """

    @abstractmethod
    def get_exchange_rate(self, source_currency: str, exchanged_currency: str) -> Decimal | None:
        pass

    def compute_exchange(self, amount: int, source_currency: str, exchanged_currency: str) -> Decimal | None:
        """
        Convert an amount expressed in minor units.

        Args:
            amount: Amount in minor units of the source currency
            source_currency: Currency code of the amount (e.g. USD)
            exchanged_currency: Target currency code (e.g. CAD)

        Returns:
            Unrounded amount in minor units of the target currency, or None
            if no rate is available
        """
        rate = self.get_exchange_rate(source_currency, exchanged_currency)
        if rate is None:
            return None
        return exact_product(amount, rate)
