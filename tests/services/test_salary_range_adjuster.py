"""Tests for SalaryRangeAdjuster inside a caller-owned transaction."""

from decimal import Decimal

import pytest

from payroll_kernel.db.engine import session_scope
from payroll_kernel.db.types import MONEY_MAX
from payroll_kernel.domain.validation import validate_salary_adjustment
from payroll_kernel.services.salary_adjustment import SalaryRangeAdjuster


def test_read_matching_is_half_open_and_ordered(session_factory, add_payroll):
    ids = add_payroll(["60000", "50000", "59999.99", "49999.99"])
    adjustment = validate_salary_adjustment(50000, 60000, 10)

    with session_scope(session_factory) as session:
        matched = SalaryRangeAdjuster(session).read_matching(adjustment)

    assert matched == [(ids[1], Decimal("50000.00")), (ids[2], Decimal("59999.99"))]


def test_batch_uses_original_values(session_factory):
    adjustment = validate_salary_adjustment(0, 100000, "3.5")
    with session_scope(session_factory) as session:
        batch = SalaryRangeAdjuster(session).build_batch(
            adjustment, [(1, Decimal("50000.00")), (2, Decimal("0.00"))]
        )
    assert batch == [
        {"payroll_id": 1, "salary": Decimal("51750.00")},
        {"payroll_id": 2, "salary": Decimal("0.00")},
    ]


def test_apply_does_not_commit(session_factory, add_payroll, read_salaries):
    (payroll_id,) = add_payroll(["50000"])
    adjustment = validate_salary_adjustment(0, 60000, 10)

    session = session_factory()
    try:
        assert SalaryRangeAdjuster(session).apply(adjustment) == 1
        session.rollback()
    finally:
        session.close()

    assert read_salaries()[payroll_id] == Decimal("50000.00")


def test_empty_range_writes_nothing(session_factory, add_payroll, read_salaries):
    add_payroll(["50000"])
    before = read_salaries()
    with session_scope(session_factory) as session:
        assert SalaryRangeAdjuster(session).apply(validate_salary_adjustment(1, 2, 50)) == 0
    assert read_salaries() == before


def test_batch_rejects_salary_past_column_limit(session_factory):
    adjustment = validate_salary_adjustment(0, 100000, 10)
    with session_scope(session_factory) as session:
        with pytest.raises(OverflowError):
            SalaryRangeAdjuster(session).build_batch(
                adjustment, [(1, Decimal("50000.00")), (2, MONEY_MAX)]
            )
