"""
Module: payroll_kernel.repositories.sql_employee
Responsibility: Store-backed EmployeeRepository.

Invariants enforced:
    - Each call opens and closes its own session.
    - Store failures are logged and surface as [] / None.
"""

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from payroll_kernel.db.engine import session_scope
from payroll_kernel.domain.dtos import EmployeeRecord, EmployeeSearchResult
from payroll_kernel.domain.validation import is_blank
from payroll_kernel.logging_config import get_logger
from payroll_kernel.selectors.employee_selector import EmployeeSelector

logger = get_logger("repositories.sql_employee")


class SqlEmployeeRepository:
    """EmployeeRepository over the employees and payroll tables."""

    def __init__(self, session_factory: sessionmaker[Session]):
        self._session_factory = session_factory

    def search(self, term: str) -> list[EmployeeSearchResult]:
        if is_blank(term):
            return []
        try:
            with session_scope(self._session_factory) as session:
                results = EmployeeSelector(session).search(term)
        except SQLAlchemyError:
            logger.warning("employee_search_failed", exc_info=True)
            return []
        logger.info("employee_search_completed", extra={"result_count": len(results)})
        return results

    def get_by_id(self, employee_id: int) -> EmployeeRecord | None:
        try:
            with session_scope(self._session_factory) as session:
                return EmployeeSelector(session).get_by_id(employee_id)
        except SQLAlchemyError:
            logger.warning(
                "employee_lookup_failed",
                extra={"employee_id": employee_id},
                exc_info=True,
            )
            return None

    def search_by_ssn(self, ssn: str) -> list[EmployeeSearchResult]:
        if is_blank(ssn):
            return []
        try:
            with session_scope(self._session_factory) as session:
                return EmployeeSelector(session).search_by_ssn(ssn)
        except SQLAlchemyError:
            # hide_parameters keeps the SSN out of the exception text
            logger.warning("employee_ssn_search_failed", exc_info=True)
            return []
