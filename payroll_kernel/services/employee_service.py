"""
EmployeeService -- employee lookups for administrator sessions.

Thin input guard in front of an EmployeeRepository: blank search terms and
non-positive ids are answered locally, everything else is delegated.
"""

from payroll_kernel.domain.dtos import EmployeeRecord, EmployeeSearchResult
from payroll_kernel.domain.validation import is_blank
from payroll_kernel.repositories.base import EmployeeRepository


class EmployeeService:
    def __init__(self, employee_repository: EmployeeRepository):
        self._employees = employee_repository

    def search_employees(self, term: str | None) -> list[EmployeeSearchResult]:
        """Employees whose name contains term, or whose id equals it."""
        if is_blank(term):
            return []
        return self._employees.search(term)

    def search_by_ssn(self, ssn: str | None) -> list[EmployeeSearchResult]:
        if is_blank(ssn):
            return []
        return self._employees.search_by_ssn(ssn.strip())

    def get_employee(self, employee_id: int) -> EmployeeRecord | None:
        if employee_id <= 0:
            return None
        return self._employees.get_by_id(employee_id)
