"""
Money value object.

An amount is stored as an integer number of minor units scaled by
``precision`` implied decimal digits: Money(1050, "USD") is 10.50 USD,
Money(10500, "USD", 3) is the same value at precision 3.

Pure domain code: no dependency on Django.
"""

import math
import operator
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP, localcontext
from typing import Optional

from apps.money.domain.context import MoneyContext, get_context
from apps.money.domain.exceptions import InvalidOperationError
from apps.money.domain.formatting import format_money, money_to_s
from apps.money.domain.scaling import check_precision, shift_half_away

_SCALARS = (int, float, Decimal)


def round_half_away(value) -> int:
    """Round a number to an int, halves away from zero (2.5 -> 3, -2.5 -> -3)."""
    if isinstance(value, bool):
        raise TypeError("amount must be a number, not bool")
    if isinstance(value, int):
        return value
    if not isinstance(value, Decimal):
        try:
            value = Decimal(str(value))
        except InvalidOperation as e:
            raise ValueError(f"Invalid amount: {value!r}") from e
    if not value.is_finite():
        raise ValueError(f"Amount must be finite, got {value}")
    return int(value.to_integral_value(rounding=ROUND_HALF_UP))


def rescale(money: "Money", precision: int) -> "Money":
    """
    Express money at another precision.

    Scaling up is exact; scaling down rounds half away from zero.
    """
    difference = check_precision(precision) - money.precision
    if difference == 0:
        return money
    amount = shift_half_away(money.amount, difference)
    return Money(amount, money.currency, precision, context=money.context)


def _scale_decimal(amount: int, operand, operation) -> Decimal:
    # Products are exact; quotients keep guard digits below the units.
    operand = Decimal(str(operand)) if isinstance(operand, float) else Decimal(operand)
    digits = len(str(abs(amount))) + len(operand.as_tuple().digits) + abs(operand.adjusted())
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, digits + 6)
        return operation(Decimal(amount), operand)


class Money:
    """
    Immutable amount of money in a single currency.

    Usage:
        price = Money(1999, "USD")             # 19.99 USD
        total = price * 3 + Money.us_dollar(5)
        total.format("with_currency")          # "$60.02 USD"

    Equality only looks at amount and currency. Mixing currencies in
    arithmetic or ordering goes through the bank of the money's context.
    """

    __slots__ = ("_amount", "_currency", "_precision", "_context")

    def __init__(
        self,
        amount,
        currency: Optional[str] = None,
        precision: int = 2,
        context: Optional[MoneyContext] = None,
    ):
        check_precision(precision)
        if currency is None:
            currency = (context or get_context()).default_currency

        self._amount = round_half_away(amount)
        self._currency = currency
        self._precision = precision
        self._context = context

    @property
    def amount(self) -> int:
        return self._amount

    @property
    def currency(self) -> str:
        return self._currency

    @property
    def precision(self) -> int:
        return self._precision

    @property
    def context(self) -> Optional[MoneyContext]:
        """Context pinned on this instance, None when it follows the active one."""
        return self._context

    @property
    def resolved_context(self) -> MoneyContext:
        if self._context is not None:
            return self._context
        return get_context()

    def _new(self, amount, precision: Optional[int] = None) -> "Money":
        if precision is None:
            precision = self._precision
        return Money(amount, self._currency, precision, context=self._context)

    # Comparison -------------------------------------------------

    def eql(self, other: "Money") -> bool:
        return self._amount == other.amount and self._currency == other.currency

    def __eq__(self, other):
        if not isinstance(other, Money):
            return NotImplemented
        return self.eql(other)

    def __hash__(self):
        return hash((self._amount, self._currency))

    def compare(self, other: "Money") -> int:
        """
        Three-way comparison.

        Amounts of the same currency are compared as stored, without
        normalising precision.
        """
        if other.currency != self._currency:
            other = self._exchanged(other)
        return (self._amount > other.amount) - (self._amount < other.amount)

    def __lt__(self, other):
        if not isinstance(other, Money):
            return NotImplemented
        return self.compare(other) < 0

    def __le__(self, other):
        if not isinstance(other, Money):
            return NotImplemented
        return self.compare(other) <= 0

    def __gt__(self, other):
        if not isinstance(other, Money):
            return NotImplemented
        return self.compare(other) > 0

    def __ge__(self, other):
        if not isinstance(other, Money):
            return NotImplemented
        return self.compare(other) >= 0

    # Arithmetic -------------------------------------------------

    def _exchanged(self, other: "Money") -> "Money":
        if other.currency == self._currency:
            return other
        return self.resolved_context.bank.exchange(other, self._currency)

    def __add__(self, other):
        if not isinstance(other, Money):
            return NotImplemented
        other = self._exchanged(other)
        precision = max(self._precision, other.precision)
        return self._new(self.to_precision(precision).amount + other.to_precision(precision).amount, precision)

    def __sub__(self, other):
        if not isinstance(other, Money):
            return NotImplemented
        other = self._exchanged(other)
        precision = max(self._precision, other.precision)
        return self._new(self.to_precision(precision).amount - other.to_precision(precision).amount, precision)

    def __neg__(self):
        return self._new(-self._amount)

    def __mul__(self, factor):
        if isinstance(factor, bool) or not isinstance(factor, _SCALARS):
            return NotImplemented
        if isinstance(factor, int):
            return self._new(self._amount * factor)
        return self._new(_scale_decimal(self._amount, factor, operator.mul))

    __rmul__ = __mul__

    def __truediv__(self, divisor):
        """Integer divisors floor (-7 / 2 -> -4); other divisors round half away from zero."""
        if isinstance(divisor, bool) or not isinstance(divisor, _SCALARS):
            return NotImplemented
        if divisor == 0:
            raise InvalidOperationError("Cannot divide money by zero")
        if isinstance(divisor, int):
            return self._new(self._amount // divisor)
        return self._new(_scale_decimal(self._amount, divisor, operator.truediv))

    def __floordiv__(self, divisor):
        if isinstance(divisor, bool) or not isinstance(divisor, _SCALARS):
            return NotImplemented
        if divisor == 0:
            raise InvalidOperationError("Cannot divide money by zero")
        if isinstance(divisor, int):
            return self._new(self._amount // divisor)
        return self._new(math.floor(_scale_decimal(self._amount, divisor, operator.truediv)))

    def is_zero(self) -> bool:
        return self._amount == 0

    def to_float(self) -> float:
        return float(Decimal(self._amount).scaleb(-self._precision))

    __float__ = to_float

    def to_precision(self, precision: int) -> "Money":
        return rescale(self, precision)

    # Exchange ---------------------------------------------------

    def exchange_to(self, currency: str) -> "Money":
        """Return the amount of this money in another currency."""
        return self.resolved_context.bank.exchange(self, currency)

    def as_us_dollar(self) -> "Money":
        return self.exchange_to("USD")

    def as_ca_dollar(self) -> "Money":
        return self.exchange_to("CAD")

    def as_euro(self) -> "Money":
        return self.exchange_to("EUR")

    def to_money(self) -> "Money":
        return self

    # Formatting -------------------------------------------------

    def format(self, *rules) -> str:
        """Format with rules "with_currency", "no_fraction" and "html"."""
        return format_money(self, *rules)

    def to_s(self, show_precision: Optional[int] = None) -> str:
        return money_to_s(self, show_precision)

    def __str__(self):
        return self.to_s()

    def __repr__(self):
        return f"Money({self._amount}, {self._currency!r}, precision={self._precision})"

    # Constructors -----------------------------------------------

    @classmethod
    def empty(cls, currency: Optional[str] = None) -> "Money":
        return cls(0, currency)

    @classmethod
    def ca_dollar(cls, amount) -> "Money":
        return cls(amount, "CAD")

    @classmethod
    def us_dollar(cls, amount) -> "Money":
        return cls(amount, "USD")

    @classmethod
    def euro(cls, amount) -> "Money":
        return cls(amount, "EUR")
