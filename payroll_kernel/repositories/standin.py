"""
Module: payroll_kernel.repositories.standin
Responsibility: Deterministic stand-in implementations of the three repository
    interfaces, used when the store is unreachable at startup.
Architecture position: Kernel > Repositories.  Imports domain/ only; never
    touches SQLAlchemy.

Invariants enforced:
    - Sample data is fixed, module-level tuples of frozen DTOs.  Nothing
      mutates it at runtime, so every call returns the same answer.
    - Query semantics match the store-backed repositories: case-insensitive
      name substring or exact id search, one row per payroll record, exact
      SSN match, pay history newest first, reports grouped by label.
    - update_salary_range() validates exactly like the store-backed version
      and reports how many sample records fall in the range, without
      changing them.

Sample logins:
    admin / admin123     -> ADMIN
    demo / demo123       -> ADMIN
    employee / emp123    -> EMPLOYEE (linked to employee 1)
"""

from collections import defaultdict
from datetime import date
from decimal import Decimal

from payroll_kernel.domain.dtos import (
    Credential,
    EmployeeRecord,
    EmployeeSearchResult,
    PayrollRecord,
    ReportRow,
    Role,
)
from payroll_kernel.domain.validation import (
    is_blank,
    parse_employee_id,
    validate_salary_adjustment,
)
from payroll_kernel.logging_config import get_logger

logger = get_logger("repositories.standin")

# (username, password, role, linked employee id); usernames match case-insensitively
SAMPLE_ACCOUNTS: tuple[tuple[str, str, Role, int | None], ...] = (
    ("admin", "admin123", Role.ADMIN, None),
    ("employee", "emp123", Role.EMPLOYEE, 1),
    ("demo", "demo123", Role.ADMIN, None),
)

SAMPLE_JOB_TITLES: dict[int, str] = {
    1: "Senior Developer",
    2: "Project Manager",
}

SAMPLE_DIVISIONS: dict[int, str] = {
    1: "Engineering",
    2: "Operations",
}

SAMPLE_EMPLOYEES: tuple[EmployeeRecord, ...] = (
    EmployeeRecord(1, "John Smith", job_title_id=1, division_id=1, ssn="123-45-6789"),
    EmployeeRecord(2, "Jane Doe", job_title_id=2, division_id=1, ssn="234-56-7890"),
    EmployeeRecord(3, "Bob Johnson", job_title_id=1, division_id=2, ssn="345-67-8901"),
    EmployeeRecord(4, "Alice Williams", job_title_id=2, division_id=2, ssn="456-78-9012"),
)

SAMPLE_PAYROLL: tuple[PayrollRecord, ...] = (
    PayrollRecord(1, Decimal("72000.00"), date(2024, 1, 1)),
    PayrollRecord(1, Decimal("73500.00"), date(2024, 2, 1)),
    PayrollRecord(1, Decimal("75000.00"), date(2024, 3, 1)),
    PayrollRecord(2, Decimal("85000.00"), date(2024, 3, 1)),
    PayrollRecord(3, Decimal("70000.00"), date(2024, 2, 1)),
    PayrollRecord(3, Decimal("72000.00"), date(2024, 3, 1)),
    PayrollRecord(4, Decimal("90000.00"), date(2024, 3, 1)),
)


def _employee(employee_id: int) -> EmployeeRecord | None:
    for employee in SAMPLE_EMPLOYEES:
        if employee.employee_id == employee_id:
            return employee
    return None


def _history(employee_id: int) -> list[PayrollRecord]:
    records = [r for r in SAMPLE_PAYROLL if r.employee_id == employee_id]
    return sorted(records, key=lambda r: r.pay_date, reverse=True)


def _search_rows(employees) -> list[EmployeeSearchResult]:
    rows = []
    for employee in sorted(employees, key=lambda e: e.employee_id):
        for record in _history(employee.employee_id):
            rows.append(
                EmployeeSearchResult(
                    employee_id=employee.employee_id,
                    name=employee.name,
                    salary=record.salary,
                )
            )
    return rows


class StandInAuthRepository:
    """AuthRepository over SAMPLE_ACCOUNTS."""

    def validate_login(self, username: str, password: str) -> Credential | None:
        if is_blank(username) or is_blank(password):
            return None
        for account_name, account_password, role, employee_id in SAMPLE_ACCOUNTS:
            if account_name == username.lower() and account_password == password:
                return Credential(
                    username=username,
                    password=password,
                    role=role,
                    employee_id=employee_id,
                )
        return None


class StandInEmployeeRepository:
    """EmployeeRepository over SAMPLE_EMPLOYEES."""

    def search(self, term: str) -> list[EmployeeSearchResult]:
        if is_blank(term):
            return []
        employee_id = parse_employee_id(term)
        matches = [
            e for e in SAMPLE_EMPLOYEES
            if term.lower() in e.name.lower() or e.employee_id == employee_id
        ]
        return _search_rows(matches)

    def get_by_id(self, employee_id: int) -> EmployeeRecord | None:
        return _employee(employee_id)

    def search_by_ssn(self, ssn: str) -> list[EmployeeSearchResult]:
        if is_blank(ssn):
            return []
        return _search_rows([e for e in SAMPLE_EMPLOYEES if e.ssn == ssn])


class StandInPayrollRepository:
    """PayrollRepository over SAMPLE_PAYROLL; salary updates are not persisted."""

    def get_pay_history(self, employee_id: int) -> list[PayrollRecord]:
        return _history(employee_id)

    def update_salary_range(
        self,
        min_salary: object,
        max_salary: object,
        percent: object,
    ) -> int:
        adjustment = validate_salary_adjustment(min_salary, max_salary, percent)
        count = sum(1 for r in SAMPLE_PAYROLL if adjustment.matches(r.salary))
        logger.info(
            "standin_salary_update_simulated",
            extra={
                "min_salary": adjustment.min_salary,
                "max_salary": adjustment.max_salary,
                "percent": adjustment.percent,
                "matched_count": count,
            },
        )
        return count

    def total_pay_by_job_title(self) -> list[ReportRow]:
        return self._report(lambda e: SAMPLE_JOB_TITLES.get(e.job_title_id))

    def total_pay_by_division(self) -> list[ReportRow]:
        return self._report(lambda e: SAMPLE_DIVISIONS.get(e.division_id))

    def _report(self, label_for) -> list[ReportRow]:
        totals: dict[str, Decimal] = defaultdict(Decimal)
        for record in SAMPLE_PAYROLL:
            employee = _employee(record.employee_id)
            label = label_for(employee) if employee is not None else None
            if label is None:
                continue
            totals[label] += record.salary
        return [ReportRow(label=label, total=totals[label]) for label in sorted(totals)]
