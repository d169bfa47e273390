"""Repository interfaces and their store-backed and stand-in implementations."""

from payroll_kernel.repositories.base import (
    AuthRepository,
    EmployeeRepository,
    PayrollRepository,
    RepositorySet,
)
from payroll_kernel.repositories.sql_auth import SqlAuthRepository
from payroll_kernel.repositories.sql_employee import SqlEmployeeRepository
from payroll_kernel.repositories.sql_payroll import SqlPayrollRepository
from payroll_kernel.repositories.standin import (
    StandInAuthRepository,
    StandInEmployeeRepository,
    StandInPayrollRepository,
)

__all__ = [
    "AuthRepository",
    "EmployeeRepository",
    "PayrollRepository",
    "RepositorySet",
    "SqlAuthRepository",
    "SqlEmployeeRepository",
    "SqlPayrollRepository",
    "StandInAuthRepository",
    "StandInEmployeeRepository",
    "StandInPayrollRepository",
]
