"""Kernel services."""

from payroll_kernel.services.credential_validator import CredentialValidator
from payroll_kernel.services.employee_service import EmployeeService
from payroll_kernel.services.payroll_service import PayrollService
from payroll_kernel.services.salary_adjustment import SalaryRangeAdjuster

__all__ = [
    "CredentialValidator",
    "EmployeeService",
    "PayrollService",
    "SalaryRangeAdjuster",
]
