"""Pure domain values and checks.  The session model lives in payroll_kernel.domain.session."""

from payroll_kernel.domain.dtos import (
    Credential,
    EmployeeRecord,
    EmployeeSearchResult,
    PayrollRecord,
    ReportRow,
    Role,
)
from payroll_kernel.domain.validation import (
    MIN_PERCENT,
    SalaryAdjustment,
    validate_salary_adjustment,
)

__all__ = [
    "Credential",
    "EmployeeRecord",
    "EmployeeSearchResult",
    "MIN_PERCENT",
    "PayrollRecord",
    "ReportRow",
    "Role",
    "SalaryAdjustment",
    "validate_salary_adjustment",
]
