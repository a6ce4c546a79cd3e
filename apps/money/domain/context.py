"""
Configuration shared by Money values: the bank, the default currency, the
zero display string and the currency symbol table.

A process-wide default context is installed at start-up (see
MoneyConfig.ready). Code that needs a different configuration, such as a test
or a tenant-specific request, scopes one with money_context(), or pins one on
a Money instance through its ``context`` argument.
"""

from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, field
from typing import Dict, Iterator, Optional

from apps.money.domain.banks import NoExchangeBank
from apps.money.domain.interfaces import BaseBank

DEFAULT_CURRENCY = "EUR"

DEFAULT_SYMBOLS: Dict[str, str] = {
    "USD": "$",
    "CAD": "$",
    "AUD": "$",
    "GBP": "£",
    "JPY": "¥",
    "EUR": "€",
}


@dataclass
class MoneyContext:

    bank: BaseBank = field(default_factory=NoExchangeBank)
    default_currency: str = DEFAULT_CURRENCY
    zero: Optional[str] = None
    symbols: Dict[str, str] = field(default_factory=lambda: dict(DEFAULT_SYMBOLS))

    def symbol_for(self, currency: str) -> str:
        return self.symbols.get(currency, "")


_default_context = MoneyContext()
_current_context: ContextVar[Optional[MoneyContext]] = ContextVar("money_context", default=None)


def get_context() -> MoneyContext:
    """Return the scoped context if one is active, else the process default."""
    return _current_context.get() or _default_context


def get_default_context() -> MoneyContext:
    return _default_context


def set_default_context(context: MoneyContext) -> None:
    global _default_context
    _default_context = context


def get_bank() -> BaseBank:
    return get_context().bank


def set_bank(bank: BaseBank) -> None:
    """Replace the bank of the process-wide default context."""
    _default_context.bank = bank


@contextmanager
def money_context(context: MoneyContext) -> Iterator[MoneyContext]:
    token = _current_context.set(context)
    try:
        yield context
    finally:
        _current_context.reset(token)
