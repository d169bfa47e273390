"""Database layer - engine, base class and column types."""

from payroll_kernel.db.base import Base
from payroll_kernel.db.engine import (
    create_tables,
    get_engine,
    get_session,
    get_session_factory,
    init_engine_from_url,
    probe_connection,
    session_scope,
)
from payroll_kernel.db.types import Money, round_money, to_money

__all__ = [
    "init_engine_from_url",
    "get_engine",
    "get_session",
    "get_session_factory",
    "session_scope",
    "probe_connection",
    "create_tables",
    "Base",
    "Money",
    "round_money",
    "to_money",
]
