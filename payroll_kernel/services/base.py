"""
BaseService -- abstract base for kernel services that write.

Responsibility:
    Provides the common constructor and session-handling contract for
    every writing service in the kernel layer.  Services receive a
    SQLAlchemy ``Session`` and write within the caller's transaction --
    never ``session.commit()``.

Invariants enforced:
    Transaction boundaries: services never commit or roll back themselves.
    The caller (a repository, through ``session_scope()``) owns
    commit/rollback, so a multi-row write is committed or discarded as
    one unit.
"""

from abc import ABC
from typing import Generic, TypeVar

from sqlalchemy.orm import Session

from payroll_kernel.db.base import Base

ModelType = TypeVar("ModelType", bound=Base)


class BaseService(ABC, Generic[ModelType]):
    """
    Abstract base class for writing kernel services.

    Guarantees:
        - The service never calls ``session.commit()`` or
          ``session.rollback()``.

    Non-goals:
        - Query-only methods belong in ``payroll_kernel/selectors/``.
    """

    def __init__(self, session: Session):
        self.session = session
