"""
CredentialValidator -- checks a username/password pair and returns its role.

Invariants enforced:
    - Blank input (after trimming) is rejected locally; the repository is
      not called.
    - The result is a Credential or None.  A wrong password, an unknown
      user, an unrecognized stored role and an unreachable store all look
      the same to the caller.
    - The password is never logged.
"""

from payroll_kernel.domain.dtos import Credential
from payroll_kernel.domain.validation import is_blank
from payroll_kernel.logging_config import get_logger
from payroll_kernel.repositories.base import AuthRepository

logger = get_logger("services.credential_validator")


class CredentialValidator:
    """Validates logins against an AuthRepository."""

    def __init__(self, auth_repository: AuthRepository):
        self._auth_repository = auth_repository

    def validate(self, username: str | None, password: str | None) -> Credential | None:
        if is_blank(username) or is_blank(password):
            logger.info("login_rejected_blank_input")
            return None

        credential = self._auth_repository.validate_login(username, password)
        if credential is None:
            logger.info("login_failed", extra={"username": username})
            return None

        logger.info(
            "login_succeeded",
            extra={"username": username, "role": credential.role.value},
        )
        return credential
