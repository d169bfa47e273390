"""
Module: payroll_kernel.db.types
Responsibility: Annotated column types and the sanctioned rounding helper for
    monetary values.  Every model and service uses these definitions so that
    salaries are stored and rounded identically everywhere.
Architecture position: Kernel > DB.  May be imported by models/, domain/,
    services/, selectors/ and repositories/.  MUST NOT import from them.

Invariants enforced:
    - No floats for money.  Salaries are Decimal with two decimal places.
    - round_money() is the ONLY rounding function applied to salaries.

Failure modes:
    - decimal.InvalidOperation on non-numeric input to to_money().
    - OverflowError from check_money_range() for values past MONEY_MAX.
"""

from decimal import ROUND_HALF_UP, Decimal
from typing import Annotated

from sqlalchemy import Numeric, String

# Monetary amount: 14 digits total, 2 decimal places
Money = Annotated[Decimal, Numeric(14, 2)]

# Short labels (names, titles, division names)
ShortText = Annotated[str, String(100)]

MONEY_DECIMAL_PLACES = 2
DEFAULT_ROUNDING = ROUND_HALF_UP


def to_money(value: object) -> Decimal:
    """
    Convert an int, str, float or Decimal into a Decimal amount.

    Floats go through str() so that 0.1 becomes Decimal("0.1") rather than
    its binary expansion.  The result is not rounded.
    """
    if isinstance(value, Decimal):
        return value
    if isinstance(value, float):
        return Decimal(str(value))
    return Decimal(value)


def round_money(
    value: Decimal,
    decimal_places: int = MONEY_DECIMAL_PLACES,
    rounding: str = DEFAULT_ROUNDING,
) -> Decimal:
    """
    Round a monetary value to the given number of decimal places.

    Preconditions: value is a Decimal.
    Postconditions: value quantized using the given rounding mode.

    Example:
        round_money(Decimal("10.555")) -> Decimal("10.56")
    """
    quantizer = Decimal(10) ** -decimal_places
    return value.quantize(quantizer, rounding=rounding)


# Largest value a Numeric(14, 2) column holds
MONEY_MAX = Decimal("999999999999.99")


def check_money_range(value: Decimal) -> Decimal:
    """
    Return value unchanged if it fits the Money column.

    Raises:
        OverflowError: abs(value) exceeds MONEY_MAX.
    """
    if abs(value) > MONEY_MAX:
        raise OverflowError(f"{value} does not fit Numeric(14, 2)")
    return value
