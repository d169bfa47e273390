"""
Module: payroll_kernel.repositories.sql_auth
Responsibility: Store-backed AuthRepository.

Invariants enforced:
    - Blank username or password (after trimming) is rejected without
      opening a session.
    - Any store failure yields None, indistinguishable from a wrong password.
"""

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from payroll_kernel.db.engine import session_scope
from payroll_kernel.domain.dtos import Credential
from payroll_kernel.domain.validation import is_blank
from payroll_kernel.logging_config import get_logger
from payroll_kernel.selectors.user_selector import UserSelector

logger = get_logger("repositories.sql_auth")


class SqlAuthRepository:
    """AuthRepository over the users table."""

    def __init__(self, session_factory: sessionmaker[Session]):
        self._session_factory = session_factory

    def validate_login(self, username: str, password: str) -> Credential | None:
        if is_blank(username) or is_blank(password):
            return None

        try:
            with session_scope(self._session_factory) as session:
                return UserSelector(session).find_credential(username, password)
        except SQLAlchemyError:
            logger.warning(
                "credential_lookup_failed",
                extra={"username": username},
                exc_info=True,
            )
            return None
