"""
PayrollService -- pay history, salary raises and reports.

Responsibility:
    Guards inputs before delegating to a PayrollRepository.  Salary raise
    arguments are validated here as well as in the repository, so callers
    get a ValidationError even from a repository that does not check.

Failure modes:
    - InvalidPercentageError / InvalidSalaryRangeError from
      apply_salary_raise() before the repository is called.
    - StoreUnavailableError / TransactionFailureError propagate unchanged
      from the repository.
"""

from payroll_kernel.domain.dtos import PayrollRecord, ReportRow
from payroll_kernel.domain.validation import validate_salary_adjustment
from payroll_kernel.logging_config import get_logger
from payroll_kernel.repositories.base import PayrollRepository

logger = get_logger("services.payroll")


class PayrollService:
    """Payroll operations over an injected PayrollRepository."""

    def __init__(self, payroll_repository: PayrollRepository):
        self._payroll = payroll_repository

    def get_pay_history(self, employee_id: int | None) -> list[PayrollRecord]:
        """Pay history, most recent first; [] for a missing or non-positive id."""
        if employee_id is None or employee_id <= 0:
            return []
        return self._payroll.get_pay_history(employee_id)

    def apply_salary_raise(
        self,
        min_salary: object,
        max_salary: object,
        percent: object,
    ) -> int:
        """
        Adjust every salary in [min_salary, max_salary) by percent.

        Returns:
            Number of payroll records updated.
        """
        adjustment = validate_salary_adjustment(min_salary, max_salary, percent)
        count = self._payroll.update_salary_range(
            adjustment.min_salary,
            adjustment.max_salary,
            adjustment.percent,
        )
        logger.info(
            "salary_raise_applied",
            extra={"percent": adjustment.percent, "updated_count": count},
        )
        return count

    def job_title_report(self) -> list[ReportRow]:
        return self._payroll.total_pay_by_job_title()

    def division_report(self) -> list[ReportRow]:
        return self._payroll.total_pay_by_division()
