"""
Display formatting for Money.

    Money.ca_dollar(100).format()                                  -> "$1.00"
    Money.ca_dollar(100).format("with_currency")                   -> "$1.00 CAD"
    Money.ca_dollar(599).format("no_fraction")                     -> "$5"
    Money.ca_dollar(570).format("no_fraction", "with_currency")    -> "$5 CAD"
    Money.ca_dollar(570).format("html", "with_currency")
        -> '$5.70 <span class="currency">CAD</span>'

Currencies missing from the symbol table are rendered without a symbol.
"""

from enum import Enum
from typing import TYPE_CHECKING, Iterable, Optional, Set

from apps.money.domain.context import MoneyContext
from apps.money.domain.scaling import shift_half_away

if TYPE_CHECKING:
    from apps.money.domain.money import Money


class FormatRule(str, Enum):
    WITH_CURRENCY = "with_currency"
    NO_FRACTION = "no_fraction"
    HTML = "html"


def _flatten(rules: Iterable) -> Iterable:
    for rule in rules:
        if isinstance(rule, (list, tuple, set, frozenset)):
            yield from _flatten(rule)
        else:
            yield rule


def normalize_rules(rules: Iterable) -> Set[FormatRule]:
    try:
        return {FormatRule(rule) for rule in _flatten(rules)}
    except ValueError as e:
        raise ValueError(f"Unknown format rule: {e}") from e


def money_to_s(money: "Money", show_precision: Optional[int] = None) -> str:
    """
    Render the numeric part of money without symbol or grouping.

    With show_precision 0 the whole units are truncated toward zero
    (599 cents -> "5"), otherwise the value is rounded half away from zero to
    show_precision fraction digits.
    """
    if show_precision is None:
        show_precision = money.precision

    if show_precision > 0:
        shifted = shift_half_away(money.amount, show_precision - money.precision)
        units, fraction = divmod(abs(shifted), 10 ** show_precision)
        sign = "-" if money.amount < 0 else ""
        return f"{sign}{units}.{fraction:0{show_precision}d}"

    units = abs(money.amount) // 10 ** money.precision
    return f"-{units}" if money.amount < 0 and units else str(units)


def format_money(money: "Money", *rules, context: Optional[MoneyContext] = None) -> str:
    if context is None:
        context = money.resolved_context
    if money.is_zero() and context.zero is not None:
        return context.zero

    rules = normalize_rules(rules)
    show_precision = 0 if FormatRule.NO_FRACTION in rules else money.precision
    formatted = context.symbol_for(money.currency) + money_to_s(money, show_precision)

    if FormatRule.WITH_CURRENCY in rules:
        if FormatRule.HTML in rules:
            formatted += f' <span class="currency">{money.currency}</span>'
        else:
            formatted += f" {money.currency}"
    return formatted
