"""
Coercion of loose values into Money, used by the ORM and API adapters.

    to_money(Money(100, "USD"))     -> Money(100, "USD")
    to_money(12.5, "USD")           -> Money(1250, "USD")
    to_money("1,234.56 CAD")        -> Money(123456, "CAD")
    to_money("-3 USD", precision=3) -> Money(-3000, "USD", precision=3)

Numbers are read in whole currency units, not minor units.
"""

import re
from decimal import Context, Decimal, InvalidOperation, getcontext
from typing import Optional

from apps.money.domain.context import MoneyContext
from apps.money.domain.exceptions import MoneyParseError
from apps.money.domain.money import Money
from apps.money.domain.scaling import check_precision

DEFAULT_PRECISION = 2

_CURRENCY_RE = re.compile(r"(?<![A-Z])([A-Z]{3})(?![A-Z])")
_NUMBER_RE = re.compile(r"-?\d[\d,]*(?:\.\d+)?|-?\.\d+")


def _from_units(value: Decimal, currency: Optional[str], precision: int, context: Optional[MoneyContext]) -> Money:
    check_precision(precision)
    # scaleb only moves the exponent; keep every digit of the coefficient.
    wide = Context(prec=max(getcontext().prec, len(value.as_tuple().digits)))
    return Money(value.scaleb(precision, context=wide), currency, precision, context=context)


def parse_money(value: str, currency: Optional[str] = None, precision: int = DEFAULT_PRECISION,
                context: Optional[MoneyContext] = None) -> Money:
    """Parse strings like "12.50", "$12.50 USD" or "CAD -1,000"."""
    text = value.strip()
    if not text:
        raise MoneyParseError("Cannot parse money from a blank string")

    currency_match = _CURRENCY_RE.search(text)
    if currency_match:
        currency = currency_match.group(1)

    number_match = _NUMBER_RE.search(text.replace(" ", ""))
    if number_match is None:
        raise MoneyParseError(f"No amount found in {value!r}")

    try:
        units = Decimal(number_match.group(0).replace(",", ""))
    except InvalidOperation as e:
        raise MoneyParseError(f"Invalid amount in {value!r}") from e
    return _from_units(units, currency, precision, context)


def to_money(value, currency: Optional[str] = None, precision: Optional[int] = None,
             context: Optional[MoneyContext] = None) -> Money:
    if isinstance(value, Money):
        if precision is None or precision == value.precision:
            return value.to_money()
        return value.to_precision(precision)

    if precision is None:
        precision = DEFAULT_PRECISION

    if isinstance(value, str):
        return parse_money(value, currency, precision, context)
    if isinstance(value, bool) or not isinstance(value, (int, float, Decimal)):
        raise TypeError(f"Cannot convert {type(value).__name__} to Money")

    units = value if isinstance(value, Decimal) else Decimal(str(value))
    if not units.is_finite():
        raise MoneyParseError(f"Amount must be finite, got {value}")
    return _from_units(units, currency, precision, context)
