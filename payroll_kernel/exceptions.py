"""
Typed Exception Hierarchy for the Payroll Kernel.

===============================================================================
WHY TYPED EXCEPTIONS
===============================================================================

Callers such as the presentation layer must be able to tell a
rejected input apart from an unreachable store or a rolled-back salary
change without parsing message strings.  Every exception therefore has:

  1. Its own class (catch by type, not message)
  2. A static CODE attribute (machine-readable)
  3. Structured attributes carrying the offending values

Example:

    try:
        payroll.update_salary_range(min_salary, max_salary, percent)
    except InvalidPercentageError as e:
        show_field_error("percent", e.percent)
    except TransactionFailureError as e:
        show_banner(f"No salaries were changed ({e.code})")

===============================================================================
EXCEPTION HIERARCHY
===============================================================================

    PayrollKernelError (base)
    |
    +-- ValidationError
    |   +-- InvalidPercentageError
    |   +-- InvalidSalaryRangeError
    |
    +-- StoreError
    |   +-- StoreUnavailableError
    |   +-- TransactionFailureError
    |
    +-- SessionError
    |   +-- SessionClosedError
    |   +-- CapabilityDeniedError
    |
    +-- ConfigurationError

===============================================================================
ERROR CODES - QUICK REFERENCE
===============================================================================

Category        | Code                   | When Raised
----------------|------------------------|------------------------------------------
Validation      | INVALID_PERCENTAGE     | Salary adjustment below -100%
                | INVALID_SALARY_RANGE   | Negative, non-finite or inverted bounds
----------------|------------------------|------------------------------------------
Store           | STORE_UNAVAILABLE      | Connection to the store cannot be opened
                | TRANSACTION_FAILURE    | Bulk salary update rolled back
----------------|------------------------|------------------------------------------
Session         | SESSION_CLOSED         | Capability used after logout
                | CAPABILITY_DENIED      | Capability outside the role's set
----------------|------------------------|------------------------------------------
Configuration   | CONFIGURATION_ERROR    | Invalid config file or env override

===============================================================================
PROPAGATION
===============================================================================

Read operations never raise StoreError: they log and return an empty
result.  The bulk salary update is the one mutating operation and always
raises on failure, because "0 rows updated" must keep meaning "nothing
matched".  Nothing in the kernel retries automatically.
"""


class PayrollKernelError(Exception):
    """
    Base exception for all payroll kernel errors.

    All subclasses must have a `code` class attribute.
    """

    code: str = "PAYROLL_KERNEL_ERROR"


# Validation exceptions (raised before any store access)


class ValidationError(PayrollKernelError):
    """Base exception for malformed caller input."""

    code: str = "VALIDATION_ERROR"


class InvalidPercentageError(ValidationError):
    """Percentage adjustment would remove more than the whole salary."""

    code: str = "INVALID_PERCENTAGE"

    def __init__(self, percent: object, reason: str = "cannot be less than -100"):
        self.percent = percent
        self.reason = reason
        super().__init__(f"Percent adjustment {percent} {reason}")


class InvalidSalaryRangeError(ValidationError):
    """Salary range bounds are negative, non-finite, or inverted."""

    code: str = "INVALID_SALARY_RANGE"

    def __init__(self, min_salary: object, max_salary: object, reason: str):
        self.min_salary = min_salary
        self.max_salary = max_salary
        self.reason = reason
        super().__init__(
            f"Invalid salary range [{min_salary}, {max_salary}): {reason}"
        )


# Store exceptions


class StoreError(PayrollKernelError):
    """Base exception for persistence failures surfaced to callers."""

    code: str = "STORE_ERROR"


class StoreUnavailableError(StoreError):
    """The store could not be reached."""

    code: str = "STORE_UNAVAILABLE"

    def __init__(self, operation: str, detail: str = ""):
        self.operation = operation
        self.detail = detail
        message = f"Store unavailable during {operation}"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)


class TransactionFailureError(StoreError):
    """A transactional write failed and every change was rolled back."""

    code: str = "TRANSACTION_FAILURE"

    def __init__(self, operation: str, detail: str = ""):
        self.operation = operation
        self.detail = detail
        message = f"Transaction for {operation} rolled back"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)


# Session exceptions


class SessionError(PayrollKernelError):
    """Base exception for session state and permission errors."""

    code: str = "SESSION_ERROR"


class SessionClosedError(SessionError):
    """A capability was invoked on a logged-out session."""

    code: str = "SESSION_CLOSED"

    def __init__(self, username: str, capability: str):
        self.username = username
        self.capability = capability
        super().__init__(
            f"Session for {username} is logged out; cannot {capability}"
        )


class CapabilityDeniedError(SessionError):
    """The session's role does not grant the requested capability."""

    code: str = "CAPABILITY_DENIED"

    def __init__(self, username: str, role: str, capability: str):
        self.username = username
        self.role = role
        self.capability = capability
        super().__init__(
            f"Role {role} of {username} does not permit {capability}"
        )


# Configuration exceptions


class ConfigurationError(PayrollKernelError):
    """Configuration file or environment override is invalid."""

    code: str = "CONFIGURATION_ERROR"

    def __init__(self, key: str, reason: str):
        self.key = key
        self.reason = reason
        super().__init__(f"Invalid configuration for '{key}': {reason}")
