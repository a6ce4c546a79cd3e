"""
Domain errors for the money bounded context.
Raised synchronously and never swallowed inside the domain layer.
"""


class MoneyError(Exception):
    """Base class for every money error."""
    pass


class UnsupportedExchangeError(MoneyError):
    """Raised when the configured bank cannot exchange currencies at all."""

    def __init__(self, source_currency: str, exchanged_currency: str):
        self.source_currency = source_currency
        self.exchanged_currency = exchanged_currency
        super().__init__(
            f"Currency exchange is not configured, cannot exchange "
            f"{source_currency} to {exchanged_currency}"
        )


class UnknownRateError(MoneyError):
    """Raised when no rate is available for a currency pair."""

    def __init__(self, source_currency: str, exchanged_currency: str):
        self.source_currency = source_currency
        self.exchanged_currency = exchanged_currency
        super().__init__(f"No exchange rate for {source_currency}/{exchanged_currency}")


class InvalidOperationError(MoneyError, ArithmeticError):
    """Raised for arithmetic that has no meaning on money, e.g. division by zero."""
    pass


class MoneyParseError(MoneyError, ValueError):
    """Raised when a value cannot be coerced to Money."""
    pass
