"""
Salary adjustment validation -- pure checks with no I/O.

Every backend runs these checks before touching its data, so an invalid
request never opens a transaction.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

from payroll_kernel.db.types import round_money, to_money
from payroll_kernel.exceptions import InvalidPercentageError, InvalidSalaryRangeError

MIN_PERCENT = Decimal("-100")
_HUNDRED = Decimal("100")


def is_blank(value: str | None) -> bool:
    """True for None or a string that is empty after trimming whitespace."""
    return value is None or not value.strip()


def parse_employee_id(term: str) -> int | None:
    """int(term) when the trimmed term is all ASCII digits, else None."""
    digits = term.strip()
    if not digits.isascii() or not digits.isdigit():
        return None
    return int(digits)


@dataclass(frozen=True)
class SalaryAdjustment:
    """
    A validated request to scale every salary in [min_salary, max_salary).

    The interval is half-open: a salary equal to max_salary is NOT adjusted,
    so two successive calls sharing a boundary never touch the same record.
    """

    min_salary: Decimal
    max_salary: Decimal
    percent: Decimal

    @property
    def factor(self) -> Decimal:
        return 1 + self.percent / _HUNDRED

    def matches(self, salary: Decimal) -> bool:
        return self.min_salary <= salary < self.max_salary

    def apply(self, salary: Decimal) -> Decimal:
        """New salary computed from the original value, rounded to cents."""
        return round_money(salary * self.factor)


def _finite(value: object) -> Decimal | None:
    try:
        amount = to_money(value)
    except (InvalidOperation, TypeError, ValueError):
        return None
    if not amount.is_finite():
        return None
    return amount


def validate_salary_adjustment(
    min_salary: object,
    max_salary: object,
    percent: object,
) -> SalaryAdjustment:
    """
    Validate bulk-adjustment arguments.

    Raises:
        InvalidPercentageError: percent is not a finite number or is below -100.
        InvalidSalaryRangeError: a bound is not a finite number, is negative,
            or min_salary > max_salary.
    """
    pct = _finite(percent)
    if pct is None:
        raise InvalidPercentageError(percent, "is not a finite number")
    if pct < MIN_PERCENT:
        raise InvalidPercentageError(percent)

    low = _finite(min_salary)
    high = _finite(max_salary)
    if low is None or high is None:
        raise InvalidSalaryRangeError(min_salary, max_salary, "bounds must be finite numbers")
    if low < 0 or high < 0:
        raise InvalidSalaryRangeError(min_salary, max_salary, "bounds must be >= 0")
    if low > high:
        raise InvalidSalaryRangeError(min_salary, max_salary, "min must be <= max")

    return SalaryAdjustment(min_salary=low, max_salary=high, percent=pct)
