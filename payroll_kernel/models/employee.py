"""
Module: payroll_kernel.models.employee
Responsibility: ORM persistence for employees and the two categories they are
    reported under (job title and division).
Architecture position: Kernel > Models.  May import from db/ only.

Invariants enforced:
    - empid is assigned by external HR processes and never changes; the kernel
      only reads employee rows.
    - ssn is unique when present.

Failure modes:
    - IntegrityError on duplicate empid or ssn (only raised by seeding and
      external writers, never by kernel operations).
"""

from typing import TYPE_CHECKING

from sqlalchemy import ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from payroll_kernel.db.base import Base
from payroll_kernel.db.types import ShortText

if TYPE_CHECKING:
    from payroll_kernel.models.payroll import PayrollEntry


class JobTitle(Base):
    """A job title; employees reference it for the job-title pay report."""

    __tablename__ = "job_titles"

    job_title_id: Mapped[int] = mapped_column(primary_key=True)
    job_title_name: Mapped[ShortText] = mapped_column(nullable=False)


class Division(Base):
    """An organizational division; employees reference it for the division pay report."""

    __tablename__ = "division"

    division_id: Mapped[int] = mapped_column(primary_key=True)
    division_name: Mapped[ShortText] = mapped_column(nullable=False)


class Employee(Base):
    """
    An employee row.

    Contract:
        job_title_id and division_id may be NULL; such employees still show
        up in search and pay history but drop out of the grouped reports
        (inner-join semantics).
    """

    __tablename__ = "employees"

    empid: Mapped[int] = mapped_column(primary_key=True, autoincrement=False)

    name: Mapped[ShortText] = mapped_column(nullable=False)

    # Social Security Number, e.g. "123-45-6789"
    ssn: Mapped[str | None] = mapped_column(String(11), unique=True, nullable=True)

    job_title_id: Mapped[int | None] = mapped_column(
        ForeignKey("job_titles.job_title_id"),
        nullable=True,
    )

    division_id: Mapped[int | None] = mapped_column(
        ForeignKey("division.division_id"),
        nullable=True,
    )

    payroll_entries: Mapped[list["PayrollEntry"]] = relationship(
        back_populates="employee",
    )

    def __repr__(self) -> str:
        return f"<Employee {self.empid}: {self.name}>"
