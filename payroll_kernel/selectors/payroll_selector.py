"""
Module: payroll_kernel.selectors.payroll_selector
Responsibility: Read-only payroll queries -- one employee's pay history and the
    total-pay reports grouped by job title and by division.
Architecture position: Kernel > Selectors.

Invariants enforced:
    - Pay history is ordered by pay_date descending (most recent first).
    - Reports are computed at query time; nothing is stored.  Employees with
      no job title (or no division) drop out of that report, matching the
      inner joins of the store's own reporting queries.
    - Totals are Decimal sums of salary.
"""

from decimal import Decimal

from sqlalchemy import func, select

from payroll_kernel.domain.dtos import PayrollRecord, ReportRow
from payroll_kernel.models.employee import Division, Employee, JobTitle
from payroll_kernel.models.payroll import PayrollEntry
from payroll_kernel.selectors.base import BaseSelector


class PayrollSelector(BaseSelector[PayrollEntry]):
    """Pay history and aggregate report queries."""

    def pay_history(self, employee_id: int) -> list[PayrollRecord]:
        stmt = (
            select(PayrollEntry.salary, PayrollEntry.pay_date)
            .where(PayrollEntry.empid == employee_id)
            .order_by(PayrollEntry.pay_date.desc(), PayrollEntry.payroll_id.desc())
        )
        return [
            PayrollRecord(employee_id=employee_id, salary=salary, pay_date=pay_date)
            for salary, pay_date in self.session.execute(stmt)
        ]

    def total_pay_by_job_title(self) -> list[ReportRow]:
        stmt = (
            select(JobTitle.job_title_name, func.sum(PayrollEntry.salary))
            .select_from(Employee)
            .join(PayrollEntry, PayrollEntry.empid == Employee.empid)
            .join(JobTitle, JobTitle.job_title_id == Employee.job_title_id)
            .group_by(JobTitle.job_title_name)
            .order_by(JobTitle.job_title_name)
        )
        return self._report_rows(stmt)

    def total_pay_by_division(self) -> list[ReportRow]:
        stmt = (
            select(Division.division_name, func.sum(PayrollEntry.salary))
            .select_from(Employee)
            .join(PayrollEntry, PayrollEntry.empid == Employee.empid)
            .join(Division, Division.division_id == Employee.division_id)
            .group_by(Division.division_name)
            .order_by(Division.division_name)
        )
        return self._report_rows(stmt)

    def _report_rows(self, stmt) -> list[ReportRow]:
        return [
            ReportRow(label=label, total=Decimal(total))
            for label, total in self.session.execute(stmt)
        ]
