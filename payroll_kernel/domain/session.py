"""
Session/Role Model -- what a logged-in user may do.

Responsibility:
    Turns a validated Credential into a UserSession tagged with its Role.
    The role tag selects a capability set from the static ROLE_CAPABILITIES
    table; every session operation checks its capability against that set
    before delegating to the injected services.

Invariants enforced:
    - Exactly two session kinds exist: ADMIN and EMPLOYEE.  Anything else
      produces no session.
    - The permitted operations of each role are listed in one table, not
      spread across subclasses.
    - A session is immutable apart from logout(); after logout every
      capability call raises SessionClosedError.
    - open_session() is pure: it performs no store access.

Failure modes:
    - SessionClosedError after logout().
    - CapabilityDeniedError when the role lacks the capability.
"""

from __future__ import annotations

from enum import Enum

from payroll_kernel.domain.dtos import (
    Credential,
    EmployeeRecord,
    EmployeeSearchResult,
    PayrollRecord,
    ReportRow,
    Role,
)
from payroll_kernel.exceptions import CapabilityDeniedError, SessionClosedError
from payroll_kernel.logging_config import LogContext, get_logger
from payroll_kernel.repositories.base import RepositorySet
from payroll_kernel.services.employee_service import EmployeeService
from payroll_kernel.services.payroll_service import PayrollService

logger = get_logger("domain.session")

SALARY_INFO_PLACEHOLDER = "Your salary information is confidential and secure."


class Capability(str, Enum):
    """Operations a session may be permitted to invoke."""

    SEARCH_EMPLOYEES = "search_employees"
    BULK_UPDATE_PAYROLL = "bulk_update_payroll"
    GENERATE_REPORTS = "generate_reports"
    VIEW_OWN_PAY_HISTORY = "view_own_pay_history"
    VIEW_OWN_SALARY_INFO = "view_own_salary_info"


ROLE_CAPABILITIES: dict[Role, frozenset[Capability]] = {
    Role.ADMIN: frozenset({
        Capability.SEARCH_EMPLOYEES,
        Capability.BULK_UPDATE_PAYROLL,
        Capability.GENERATE_REPORTS,
    }),
    Role.EMPLOYEE: frozenset({
        Capability.VIEW_OWN_PAY_HISTORY,
        Capability.VIEW_OWN_SALARY_INFO,
    }),
}


class UserSession:
    """
    A logged-in user: username, role tag and the role's capability set.

    Build one with open_session(); do not construct directly from
    unvalidated input.
    """

    def __init__(
        self,
        username: str,
        role: Role,
        employee_id: int | None,
        employee_service: EmployeeService,
        payroll_service: PayrollService,
    ):
        self._username = username
        self._role = role
        self._employee_id = employee_id
        self._capabilities = ROLE_CAPABILITIES[role]
        self._employees = employee_service
        self._payroll = payroll_service
        self._active = True

    @property
    def username(self) -> str:
        return self._username

    @property
    def role(self) -> Role:
        return self._role

    @property
    def employee_id(self) -> int | None:
        return self._employee_id

    @property
    def capabilities(self) -> frozenset[Capability]:
        return self._capabilities

    @property
    def is_active(self) -> bool:
        return self._active

    def can(self, capability: Capability) -> bool:
        return self._active and capability in self._capabilities

    def logout(self) -> None:
        if self._active:
            self._active = False
            logger.info(
                "session_logged_out",
                extra={"username": self._username, "session_role": self._role.value},
            )

    def _require(self, capability: Capability) -> None:
        if not self._active:
            raise SessionClosedError(self._username, capability.value)
        if capability not in self._capabilities:
            logger.warning(
                "capability_denied",
                extra={
                    "username": self._username,
                    "session_role": self._role.value,
                    "capability": capability.value,
                },
            )
            raise CapabilityDeniedError(self._username, self._role.value, capability.value)

    def _bound(self):
        return LogContext.bind(username=self._username, role=self._role.value)

    # -- ADMIN ---------------------------------------------------------------

    def search_employees(self, term: str) -> list[EmployeeSearchResult]:
        self._require(Capability.SEARCH_EMPLOYEES)
        with self._bound():
            return self._employees.search_employees(term)

    def search_by_ssn(self, ssn: str) -> list[EmployeeSearchResult]:
        self._require(Capability.SEARCH_EMPLOYEES)
        with self._bound():
            return self._employees.search_by_ssn(ssn)

    def get_employee(self, employee_id: int) -> EmployeeRecord | None:
        self._require(Capability.SEARCH_EMPLOYEES)
        with self._bound():
            return self._employees.get_employee(employee_id)

    def apply_salary_raise(
        self,
        min_salary: object,
        max_salary: object,
        percent: object,
    ) -> int:
        self._require(Capability.BULK_UPDATE_PAYROLL)
        with self._bound():
            return self._payroll.apply_salary_raise(min_salary, max_salary, percent)

    def job_title_report(self) -> list[ReportRow]:
        self._require(Capability.GENERATE_REPORTS)
        with self._bound():
            return self._payroll.job_title_report()

    def division_report(self) -> list[ReportRow]:
        self._require(Capability.GENERATE_REPORTS)
        with self._bound():
            return self._payroll.division_report()

    # -- EMPLOYEE ------------------------------------------------------------

    def view_pay_history(self) -> list[PayrollRecord]:
        """Pay history of the employee linked to this account ([] if unlinked)."""
        self._require(Capability.VIEW_OWN_PAY_HISTORY)
        with self._bound():
            return self._payroll.get_pay_history(self._employee_id)

    def salary_info(self) -> str:
        self._require(Capability.VIEW_OWN_SALARY_INFO)
        return SALARY_INFO_PLACEHOLDER

    def __repr__(self) -> str:
        state = "active" if self._active else "logged out"
        return f"<UserSession {self._username} {self._role.value} ({state})>"


def open_session(
    credential: Credential | None,
    repositories: RepositorySet,
) -> UserSession | None:
    """
    Session for a validated credential, or None.

    ADMIN and EMPLOYEE credentials get a session of that kind; a missing
    credential or any other role value gets None.
    """
    if credential is None:
        return None
    role = credential.role if isinstance(credential.role, Role) else Role.parse(credential.role)
    if role not in ROLE_CAPABILITIES:
        return None
    return UserSession(
        username=credential.username,
        role=role,
        employee_id=credential.employee_id,
        employee_service=EmployeeService(repositories.employees),
        payroll_service=PayrollService(repositories.payroll),
    )
