"""
Module: payroll_kernel.selectors.employee_selector
Responsibility: Read-only employee queries -- search by name or id, lookup by
    id, and exact SSN search.
Architecture position: Kernel > Selectors.

Invariants enforced:
    - Search rows come from an inner join of employees and payroll, so an
      employee appears once per payroll record and employees without payroll
      rows are not returned.
    - Name matching is a case-insensitive substring match with LIKE wildcards
      in the term escaped.  The term is matched as given; surrounding
      whitespace is only trimmed for the id parse.  Id matching is exact and
      only attempted when the trimmed term is all ASCII digits.
"""

from sqlalchemy import or_, select

from payroll_kernel.domain.dtos import EmployeeRecord, EmployeeSearchResult
from payroll_kernel.domain.validation import parse_employee_id
from payroll_kernel.models.employee import Employee
from payroll_kernel.models.payroll import PayrollEntry
from payroll_kernel.selectors.base import BaseSelector


class EmployeeSelector(BaseSelector[Employee]):
    """Employee lookup queries."""

    def _search_base(self):
        return (
            select(Employee.empid, Employee.name, PayrollEntry.salary)
            .join(PayrollEntry, PayrollEntry.empid == Employee.empid)
            .order_by(Employee.empid, PayrollEntry.pay_date.desc())
        )

    def search(self, term: str) -> list[EmployeeSearchResult]:
        name_match = Employee.name.icontains(term, autoescape=True)
        employee_id = parse_employee_id(term)
        if employee_id is not None:
            condition = or_(name_match, Employee.empid == employee_id)
        else:
            condition = name_match

        rows = self.session.execute(self._search_base().where(condition))
        return [
            EmployeeSearchResult(employee_id=empid, name=name, salary=salary)
            for empid, name, salary in rows
        ]

    def search_by_ssn(self, ssn: str) -> list[EmployeeSearchResult]:
        rows = self.session.execute(self._search_base().where(Employee.ssn == ssn))
        return [
            EmployeeSearchResult(employee_id=empid, name=name, salary=salary)
            for empid, name, salary in rows
        ]

    def get_by_id(self, employee_id: int) -> EmployeeRecord | None:
        model = self.session.get(Employee, employee_id)
        if model is None:
            return None
        return EmployeeRecord.from_model(model)
