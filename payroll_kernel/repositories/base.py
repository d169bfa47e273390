"""
Module: payroll_kernel.repositories.base
Responsibility: The three capability interfaces every backend implements
    (authentication, employee reads, payroll reads and the bulk salary
    adjustment) and the RepositorySet bundle handed to services.
Architecture position: Kernel > Repositories.  May import from domain/.
    MUST NOT import from db/ or models/ -- callers of these interfaces stay
    store-agnostic.

Invariants enforced:
    - Implementations are stateless gateways; they own no records.
    - Reads degrade to an empty list / None when the store fails.
    - update_salary_range() is all-or-nothing and raises on failure.

Implementations:
    - payroll_kernel.repositories.sql_auth / sql_employee / sql_payroll
    - payroll_kernel.repositories.standin (fixed sample data)
"""

from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from payroll_kernel.domain.dtos import (
    Credential,
    EmployeeRecord,
    EmployeeSearchResult,
    PayrollRecord,
    ReportRow,
)


@runtime_checkable
class AuthRepository(Protocol):
    """Authentication capability."""

    def validate_login(self, username: str, password: str) -> Credential | None:
        """Credential for an exact username/password match, else None."""
        ...


@runtime_checkable
class EmployeeRepository(Protocol):
    """Read-only employee lookup capability."""

    def search(self, term: str) -> list[EmployeeSearchResult]:
        """Rows whose name contains term (case-insensitive) or whose id equals int(term)."""
        ...

    def get_by_id(self, employee_id: int) -> EmployeeRecord | None:
        ...

    def search_by_ssn(self, ssn: str) -> list[EmployeeSearchResult]:
        """Rows for the employee with exactly this SSN."""
        ...


@runtime_checkable
class PayrollRepository(Protocol):
    """Payroll history, reports and the bulk salary adjustment."""

    def get_pay_history(self, employee_id: int) -> list[PayrollRecord]:
        """Payroll records for one employee, most recent pay date first."""
        ...

    def update_salary_range(
        self,
        min_salary: object,
        max_salary: object,
        percent: object,
    ) -> int:
        """
        Scale every salary in [min_salary, max_salary) by (1 + percent/100).

        Returns the number of records matched and updated.

        Raises:
            ValidationError: before any store access, for invalid arguments.
            StoreUnavailableError: the store could not be reached.
            TransactionFailureError: the update failed and was rolled back.
        """
        ...

    def total_pay_by_job_title(self) -> list[ReportRow]:
        ...

    def total_pay_by_division(self) -> list[ReportRow]:
        ...


@dataclass(frozen=True)
class RepositorySet:
    """
    The backend chosen once at startup, passed explicitly to services.

    ``backend`` is "sql" for the store-backed set and "standin" for the
    fixed sample data set.
    """

    auth: AuthRepository
    employees: EmployeeRepository
    payroll: PayrollRepository
    backend: str
