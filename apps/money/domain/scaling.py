"""
Arithmetic on minor units.

Amounts can have any number of digits: scaling is done on ints, and
products are taken in a Decimal context wide enough to stay exact.
"""

from decimal import Decimal, localcontext


def check_precision(precision) -> int:
    if isinstance(precision, bool) or not isinstance(precision, int):
        raise TypeError(f"precision must be an int, got {type(precision).__name__}")
    if precision < 0:
        raise ValueError(f"precision must be >= 0, got {precision}")
    return precision


def shift_half_away(amount: int, places: int) -> int:
    """
    Multiply amount by 10 ** places.

    Negative places divide, rounding halves away from zero:
    shift_half_away(12350, -2) -> 124, shift_half_away(-12350, -2) -> -124.
    """
    if places >= 0:
        return amount * 10 ** places

    divisor = 10 ** -places
    quotient, remainder = divmod(abs(amount), divisor)
    if remainder * 2 >= divisor:
        quotient += 1
    return -quotient if amount < 0 else quotient


def exact_product(amount: int, factor) -> Decimal:
    factor = factor if isinstance(factor, Decimal) else Decimal(str(factor))
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, len(str(abs(amount))) + len(factor.as_tuple().digits))
        return Decimal(amount) * factor
