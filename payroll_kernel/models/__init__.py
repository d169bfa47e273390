"""ORM models for the payroll kernel."""

from payroll_kernel.models.employee import Division, Employee, JobTitle
from payroll_kernel.models.payroll import PayrollEntry
from payroll_kernel.models.user import UserAccount

__all__ = [
    "Division",
    "Employee",
    "JobTitle",
    "PayrollEntry",
    "UserAccount",
]
