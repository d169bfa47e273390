"""Tests for CredentialValidator (payroll_kernel/services/credential_validator.py)."""

import pytest

from payroll_kernel.domain.dtos import Credential, Role
from payroll_kernel.repositories.base import AuthRepository
from payroll_kernel.services.credential_validator import CredentialValidator


class RecordingAuthRepository:
    """AuthRepository that records calls and answers from a dict."""

    def __init__(self, accounts: dict[tuple[str, str], Credential]):
        self.accounts = accounts
        self.calls: list[tuple[str, str]] = []

    def validate_login(self, username, password):
        self.calls.append((username, password))
        return self.accounts.get((username, password))


@pytest.fixture
def repo():
    return RecordingAuthRepository({
        ("admin", "admin123"): Credential("admin", "admin123", Role.ADMIN),
        ("employee", "emp123"): Credential("employee", "emp123", Role.EMPLOYEE, employee_id=1),
    })


def test_recording_repository_satisfies_protocol(repo):
    assert isinstance(repo, AuthRepository)


def test_valid_admin(repo):
    credential = CredentialValidator(repo).validate("admin", "admin123")
    assert credential.role is Role.ADMIN
    assert credential.is_admin


def test_valid_employee(repo):
    credential = CredentialValidator(repo).validate("employee", "emp123")
    assert credential.is_employee
    assert credential.employee_id == 1


def test_wrong_password(repo):
    assert CredentialValidator(repo).validate("admin", "nope") is None


@pytest.mark.parametrize(
    "username,password",
    [("", "x"), ("x", ""), ("   ", "x"), ("x", "  "), (None, "x"), ("x", None)],
)
def test_blank_input_skips_repository(repo, username, password):
    assert CredentialValidator(repo).validate(username, password) is None
    assert repo.calls == []


def test_password_never_logged(repo, captured_logs):
    validator = CredentialValidator(repo)
    validator.validate("admin", "admin123")
    validator.validate("admin", "secret-guess")
    raw = str(captured_logs())
    assert "admin123" not in raw
    assert "secret-guess" not in raw


def test_credential_repr_hides_password():
    assert "admin123" not in repr(Credential("admin", "admin123", Role.ADMIN))


def test_outcomes_logged(repo, captured_logs):
    validator = CredentialValidator(repo)
    validator.validate("admin", "admin123")
    validator.validate("admin", "bad")
    messages = [r["message"] for r in captured_logs()]
    assert "login_succeeded" in messages
    assert "login_failed" in messages
