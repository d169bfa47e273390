"""Read-only query selectors."""

from payroll_kernel.selectors.employee_selector import EmployeeSelector
from payroll_kernel.selectors.payroll_selector import PayrollSelector
from payroll_kernel.selectors.user_selector import UserSelector

__all__ = [
    "EmployeeSelector",
    "PayrollSelector",
    "UserSelector",
]
