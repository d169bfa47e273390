"""
Module: payroll_kernel.selectors.user_selector
Responsibility: Credential lookup against the users table.
Architecture position: Kernel > Selectors.

Invariants enforced:
    - Username and password are matched exactly, as stored.
    - A stored role outside ADMIN / EMPLOYEE yields no credential.
"""

from sqlalchemy import select

from payroll_kernel.domain.dtos import Credential, Role
from payroll_kernel.logging_config import get_logger
from payroll_kernel.models.user import UserAccount
from payroll_kernel.selectors.base import BaseSelector

logger = get_logger("selectors.user")


class UserSelector(BaseSelector[UserAccount]):
    """Login account queries."""

    def find_credential(self, username: str, password: str) -> Credential | None:
        stmt = select(UserAccount.role, UserAccount.empid).where(
            UserAccount.username == username,
            UserAccount.password == password,
        )
        row = self.session.execute(stmt).first()
        if row is None:
            return None

        stored_role, empid = row
        role = Role.parse(stored_role)
        if role is None:
            logger.warning(
                "unrecognized_role",
                extra={"username": username, "stored_role": stored_role},
            )
            return None

        return Credential(
            username=username,
            password=password,
            role=role,
            employee_id=empid,
        )
