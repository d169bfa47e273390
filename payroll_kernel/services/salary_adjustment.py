"""
SalaryRangeAdjuster -- the bulk salary adjustment, inside one transaction.

Responsibility:
    Reads every payroll row whose salary lies in the half-open range
    [min_salary, max_salary), computes each new salary from the value read,
    and writes all of them as a single batch.

Architecture position:
    Kernel > Services.  Runs inside the caller's ``session_scope()``; the
    caller (``SqlPayrollRepository.update_salary_range``) owns commit and
    rollback and turns failures into ``TransactionFailureError``.

Invariants enforced:
    - One read: the matching rows are selected once and materialized before
      any write, so every new salary is derived from the original value and
      adjustments never compound within a pass.
    - Row locks: the read is SELECT ... FOR UPDATE (PostgreSQL), so a
      concurrent adjustment waits instead of reading salaries this pass is
      about to rewrite.
    - One batch: all writes go out as one executemany UPDATE keyed by
      payroll_id; nothing is flushed or committed per row.
    - Writes are keyed by payroll row, so only matched records change even
      when an employee has several payroll rows.

Failure modes:
    - Any SQLAlchemyError propagates unchanged; the caller rolls back.
    - ArithmeticError (OverflowError, decimal.InvalidOperation) when a new
      salary cannot be computed or does not fit the salary column.  Raised
      before the batch is written; the caller rolls back.
"""

from decimal import Decimal

from sqlalchemy import select, update

from payroll_kernel.db.types import check_money_range
from payroll_kernel.domain.validation import SalaryAdjustment
from payroll_kernel.logging_config import get_logger
from payroll_kernel.models.payroll import PayrollEntry
from payroll_kernel.services.base import BaseService

logger = get_logger("services.salary_adjustment")


class SalaryRangeAdjuster(BaseService[PayrollEntry]):
    """Applies a validated SalaryAdjustment to the payroll table."""

    def read_matching(self, adjustment: SalaryAdjustment) -> list[tuple[int, Decimal]]:
        """(payroll_id, salary) for every row in the adjustment's range, locked."""
        stmt = (
            select(PayrollEntry.payroll_id, PayrollEntry.salary)
            .where(
                PayrollEntry.salary >= adjustment.min_salary,
                PayrollEntry.salary < adjustment.max_salary,
            )
            .order_by(PayrollEntry.payroll_id)
            .with_for_update()
        )
        return [(payroll_id, salary) for payroll_id, salary in self.session.execute(stmt)]

    def build_batch(
        self,
        adjustment: SalaryAdjustment,
        matched: list[tuple[int, Decimal]],
    ) -> list[dict]:
        """Queue one parameter set per matched row."""
        batch = []
        for payroll_id, salary in matched:
            new_salary = check_money_range(adjustment.apply(salary))
            batch.append({"payroll_id": payroll_id, "salary": new_salary})
        return batch

    def apply(self, adjustment: SalaryAdjustment) -> int:
        """
        Rewrite every matching salary and return the number of rows matched.

        The count is the number of rows read, even if some new salaries land
        back inside the range; a second call would see them again.
        """
        matched = self.read_matching(adjustment)
        batch = self.build_batch(adjustment, matched)

        logger.debug(
            "salary_batch_prepared",
            extra={
                "matched": len(batch),
                "min_salary": adjustment.min_salary,
                "max_salary": adjustment.max_salary,
                "percent": adjustment.percent,
            },
        )

        if batch:
            self.session.execute(update(PayrollEntry), batch)

        return len(batch)
