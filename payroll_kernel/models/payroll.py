"""
Module: payroll_kernel.models.payroll
Responsibility: ORM persistence for payroll records -- one salary amount paid
    to one employee on one pay date.
Architecture position: Kernel > Models.  May import from db/ only.

Invariants enforced:
    - salary >= 0 at all times (ck_payroll_salary_non_negative).
    - Rows are never deleted by the kernel; only the salary column is
      rewritten, and only by the bulk salary adjustment.
    - The kernel does not enforce one row per (empid, pay_date); that is left
      to the store and the processes that insert payroll rows.

Failure modes:
    - IntegrityError if a write would make a salary negative.
"""

from datetime import date
from typing import TYPE_CHECKING

from sqlalchemy import CheckConstraint, ForeignKey, Index
from sqlalchemy.orm import Mapped, mapped_column, relationship

from payroll_kernel.db.base import Base
from payroll_kernel.db.types import Money

if TYPE_CHECKING:
    from payroll_kernel.models.employee import Employee


class PayrollEntry(Base):
    """A salary payment record."""

    __tablename__ = "payroll"

    __table_args__ = (
        CheckConstraint("salary >= 0", name="ck_payroll_salary_non_negative"),
        Index("idx_payroll_empid_pay_date", "empid", "pay_date"),
        Index("idx_payroll_salary", "salary"),
    )

    payroll_id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)

    empid: Mapped[int] = mapped_column(
        ForeignKey("employees.empid"),
        nullable=False,
    )

    salary: Mapped[Money] = mapped_column(nullable=False)

    pay_date: Mapped[date] = mapped_column(nullable=False)

    employee: Mapped["Employee"] = relationship(back_populates="payroll_entries")

    def __repr__(self) -> str:
        return f"<PayrollEntry {self.payroll_id}: empid={self.empid} {self.salary} on {self.pay_date}>"
