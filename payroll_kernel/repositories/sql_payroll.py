"""
Module: payroll_kernel.repositories.sql_payroll
Responsibility: Store-backed PayrollRepository, including the transactional
    bulk salary adjustment.

Invariants enforced:
    - Arguments to update_salary_range() are validated before a session is
      opened; an invalid request never touches the store.
    - update_salary_range() runs in exactly one session_scope(): all rows
      are committed together or none are.  On failure it raises (never
      returns 0), so "nothing matched" and "nothing could be written" stay
      distinguishable.
    - Read operations degrade to [] on store failure.

Failure modes:
    - StoreUnavailableError when no connection can be opened.
    - TransactionFailureError for any failure after the transaction began
      (read, batch write or commit); the transaction has been rolled back.
      This includes a new salary that overflows the salary column.
"""

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from payroll_kernel.db.engine import session_scope
from payroll_kernel.domain.dtos import PayrollRecord, ReportRow
from payroll_kernel.domain.validation import validate_salary_adjustment
from payroll_kernel.exceptions import StoreUnavailableError, TransactionFailureError
from payroll_kernel.logging_config import LogContext, get_logger, new_correlation_id
from payroll_kernel.selectors.payroll_selector import PayrollSelector
from payroll_kernel.services.salary_adjustment import SalaryRangeAdjuster

logger = get_logger("repositories.sql_payroll")

_UPDATE_OPERATION = "update_salary_range"


class SqlPayrollRepository:
    """PayrollRepository over the payroll, employees, job_titles and division tables."""

    def __init__(self, session_factory: sessionmaker[Session]):
        self._session_factory = session_factory

    def get_pay_history(self, employee_id: int) -> list[PayrollRecord]:
        try:
            with session_scope(self._session_factory) as session:
                return PayrollSelector(session).pay_history(employee_id)
        except SQLAlchemyError:
            logger.warning(
                "pay_history_failed",
                extra={"employee_id": employee_id},
                exc_info=True,
            )
            return []

    def update_salary_range(
        self,
        min_salary: object,
        max_salary: object,
        percent: object,
    ) -> int:
        adjustment = validate_salary_adjustment(min_salary, max_salary, percent)
        log_fields = {
            "min_salary": adjustment.min_salary,
            "max_salary": adjustment.max_salary,
            "percent": adjustment.percent,
        }

        with LogContext.bind(operation=_UPDATE_OPERATION, correlation_id=new_correlation_id()):
            logger.info("salary_range_update_started", extra=log_fields)
            try:
                with session_scope(self._session_factory) as session:
                    try:
                        session.connection()
                    except SQLAlchemyError as exc:
                        raise StoreUnavailableError(_UPDATE_OPERATION, str(exc)) from exc
                    count = SalaryRangeAdjuster(session).apply(adjustment)
            except StoreUnavailableError:
                logger.error("salary_range_update_store_unavailable", extra=log_fields)
                raise
            except (SQLAlchemyError, ArithmeticError) as exc:
                logger.error(
                    "salary_range_update_rolled_back",
                    extra=log_fields,
                    exc_info=True,
                )
                raise TransactionFailureError(_UPDATE_OPERATION, str(exc)) from exc

            logger.info(
                "salary_range_update_committed",
                extra={**log_fields, "updated_count": count},
            )
            return count

    def total_pay_by_job_title(self) -> list[ReportRow]:
        try:
            with session_scope(self._session_factory) as session:
                return PayrollSelector(session).total_pay_by_job_title()
        except SQLAlchemyError:
            logger.warning("job_title_report_failed", exc_info=True)
            return []

    def total_pay_by_division(self) -> list[ReportRow]:
        try:
            with session_scope(self._session_factory) as session:
                return PayrollSelector(session).total_pay_by_division()
        except SQLAlchemyError:
            logger.warning("division_report_failed", exc_info=True)
            return []
