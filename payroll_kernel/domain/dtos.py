"""
DTOs -- Pure domain data transfer objects.

Responsibility:
    Defines the immutable values every repository returns: Credential,
    EmployeeRecord, EmployeeSearchResult, PayrollRecord and ReportRow, plus
    the Role enum that tags a credential.

Architecture position:
    Kernel > Domain -- pure functional core, zero I/O.
    Free of ORM dependencies.  from_model() class methods are boundary
    converters invoked only from selectors.

Invariants enforced:
    - Repositories accept/return DTOs, never ORM entities.
    - Monetary fields are Decimal, never float.
    - Role is exactly ADMIN or EMPLOYEE; anything else fails Role.parse().
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from payroll_kernel.models.employee import Employee as EmployeeModel


class Role(str, Enum):
    """The two recognized account roles."""

    ADMIN = "ADMIN"
    EMPLOYEE = "EMPLOYEE"

    @classmethod
    def parse(cls, value: str | None) -> Role | None:
        """Case-insensitive lookup; None for missing or unrecognized roles."""
        if value is None:
            return None
        try:
            return cls(value.strip().upper())
        except ValueError:
            return None


@dataclass(frozen=True)
class Credential:
    """A validated username/password pair and the role recorded for it."""

    username: str
    password: str = field(repr=False)
    role: Role
    employee_id: int | None = None

    @property
    def is_admin(self) -> bool:
        return self.role is Role.ADMIN

    @property
    def is_employee(self) -> bool:
        return self.role is Role.EMPLOYEE


@dataclass(frozen=True)
class EmployeeRecord:
    """An employee's identity and category references."""

    employee_id: int
    name: str
    job_title_id: int | None
    division_id: int | None
    ssn: str | None = field(default=None, repr=False)

    @classmethod
    def from_model(cls, model: EmployeeModel) -> EmployeeRecord:
        return cls(
            employee_id=model.empid,
            name=model.name,
            job_title_id=model.job_title_id,
            division_id=model.division_id,
            ssn=model.ssn,
        )


@dataclass(frozen=True)
class EmployeeSearchResult:
    """One search hit: an employee joined with one of their payroll records."""

    employee_id: int
    name: str
    salary: Decimal


@dataclass(frozen=True)
class PayrollRecord:
    """One salary payment in an employee's pay history."""

    employee_id: int
    salary: Decimal
    pay_date: date


@dataclass(frozen=True)
class ReportRow:
    """Total salary paid under one category (job title or division)."""

    label: str
    total: Decimal
