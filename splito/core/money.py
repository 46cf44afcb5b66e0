from decimal import Decimal, InvalidOperation, ROUND_HALF_UP, getcontext
from typing import Any
from splito.core.config import settings
from splito.core.errors import InputError

getcontext().prec = 28
CENTS = Decimal("0.01")
ZERO = Decimal("0")

SHARE_TOLERANCE: Decimal = settings.SHARE_TOLERANCE
BALANCE_EPSILON: Decimal = settings.BALANCE_EPSILON
BALANCED_TOLERANCE: Decimal = settings.BALANCED_TOLERANCE
MAX_AMOUNT: Decimal = settings.MAX_AMOUNT


def qround(d: Decimal) -> Decimal:
    try:
        return d.quantize(CENTS, rounding=ROUND_HALF_UP)
    except InvalidOperation:
        raise InputError(f"{d} cannot be represented to the cent")


def to_decimal(value: Any, field: str = "amount") -> Decimal:
    """
    Coerce a caller supplied amount into a Decimal.

    Floats go through str() so 0.1 stays 0.1 instead of its binary expansion.
    """
    if isinstance(value, Decimal):
        return value

    # bool is an int subclass, never a valid amount
    if isinstance(value, bool) or not isinstance(value, (int, float, str)):
        raise InputError(f"{field} must be a number, got {value!r}", field=field)

    try:
        return Decimal(str(value).strip())
    except InvalidOperation:
        raise InputError(f"{field} must be a number, got {value!r}", field=field)


def ensure_amount(value: Any, field: str = "amount") -> Decimal:
    amount = to_decimal(value, field)

    if not amount.is_finite():
        raise InputError(f"{field} must be finite, got {amount}", field=field)

    if amount < 0:
        raise InputError(f"{field} must not be negative, got {amount}", field=field)

    if amount > MAX_AMOUNT:
        raise InputError(f"{field} must not exceed {MAX_AMOUNT}, got {amount}", field=field)

    return amount


def format_amount(d: Decimal) -> str:
    return f"{qround(d):.2f}"
