"""
Pytest fixtures for the payroll kernel test suite.

Provides:
- Structured logging configuration and JSON log capture
- A per-test SQLite file database with the schema created
- The fixed sample data loaded into that database
- Helpers for inserting payroll rows with chosen salaries
"""

import json
import logging
from datetime import date
from decimal import Decimal
from io import StringIO

import pytest
from sqlalchemy import text
from sqlalchemy.orm import Session, sessionmaker

from payroll_kernel.bootstrap import sql_repositories, standin_repositories
from payroll_kernel.db.engine import (
    create_tables,
    get_session_factory,
    init_engine_from_url,
    reset_engine,
    session_scope,
)
from payroll_kernel.logging_config import (
    LogContext,
    StructuredFormatter,
    configure_logging,
    reset_logging,
)
from payroll_kernel.models import Division, Employee, JobTitle, PayrollEntry, UserAccount
from payroll_kernel.repositories.standin import (
    SAMPLE_ACCOUNTS,
    SAMPLE_DIVISIONS,
    SAMPLE_EMPLOYEES,
    SAMPLE_JOB_TITLES,
    SAMPLE_PAYROLL,
)


# =============================================================================
# Logging fixtures
# =============================================================================


@pytest.fixture(autouse=True, scope="session")
def _configure_test_logging():
    """Configure structured logging for the test suite."""
    reset_logging()
    configure_logging(level=logging.DEBUG)
    yield
    reset_logging()


@pytest.fixture(autouse=True)
def _clear_log_context():
    """Clear LogContext between tests to prevent cross-test contamination."""
    LogContext.clear()
    yield
    LogContext.clear()


@pytest.fixture
def captured_logs():
    """
    Capture payroll_kernel logs as parsed JSON dicts.

    Usage::

        def test_something(captured_logs, sql_repos):
            sql_repos.payroll.update_salary_range(0, 60000, 3)
            logs = captured_logs()
            assert any(r["message"] == "salary_range_update_committed" for r in logs)
    """
    stream = StringIO()
    handler = logging.StreamHandler(stream)
    handler.setFormatter(StructuredFormatter())
    root = logging.getLogger("payroll_kernel")
    previous_level = root.level
    root.setLevel(logging.DEBUG)
    root.addHandler(handler)

    def _get_records() -> list[dict]:
        lines = stream.getvalue().strip().split("\n")
        return [json.loads(line) for line in lines if line]

    yield _get_records

    root.removeHandler(handler)
    root.setLevel(previous_level)


# =============================================================================
# Database fixtures
# =============================================================================


@pytest.fixture
def database_url(tmp_path) -> str:
    return f"sqlite:///{tmp_path / 'payroll.db'}"


@pytest.fixture
def db_engine(database_url):
    """Engine over a fresh SQLite file with every table created."""
    engine = init_engine_from_url(database_url)
    create_tables()
    yield engine
    reset_engine()


@pytest.fixture
def session_factory(db_engine) -> sessionmaker[Session]:
    return get_session_factory()


def seed_sample_data(factory: sessionmaker[Session]) -> None:
    """Load the stand-in sample data into the store, in the same order."""
    with session_scope(factory) as session:
        for job_title_id, name in SAMPLE_JOB_TITLES.items():
            session.add(JobTitle(job_title_id=job_title_id, job_title_name=name))
        for division_id, name in SAMPLE_DIVISIONS.items():
            session.add(Division(division_id=division_id, division_name=name))
        session.flush()
        for record in SAMPLE_EMPLOYEES:
            session.add(
                Employee(
                    empid=record.employee_id,
                    name=record.name,
                    ssn=record.ssn,
                    job_title_id=record.job_title_id,
                    division_id=record.division_id,
                )
            )
        session.flush()
        for record in SAMPLE_PAYROLL:
            session.add(
                PayrollEntry(
                    empid=record.employee_id,
                    salary=record.salary,
                    pay_date=record.pay_date,
                )
            )
        for username, password, role, employee_id in SAMPLE_ACCOUNTS:
            session.add(
                UserAccount(
                    username=username,
                    password=password,
                    role=role.value,
                    empid=employee_id,
                )
            )


@pytest.fixture
def seeded_factory(session_factory) -> sessionmaker[Session]:
    """Session factory over a store holding the sample data."""
    seed_sample_data(session_factory)
    return session_factory


@pytest.fixture
def sql_repos(seeded_factory):
    return sql_repositories(seeded_factory)


@pytest.fixture
def standin_repos():
    return standin_repositories()


@pytest.fixture
def add_payroll(session_factory):
    """
    Insert one employee per salary and return the new payroll ids.

    Usage::

        ids = add_payroll(["50000", "60000"])
    """
    next_empid = [100]

    def _add(salaries, pay_date: date = date(2024, 3, 1)) -> list[int]:
        ids = []
        with session_scope(session_factory) as session:
            for salary in salaries:
                empid = next_empid[0]
                next_empid[0] += 1
                session.add(Employee(empid=empid, name=f"Employee {empid}"))
                session.flush()
                entry = PayrollEntry(empid=empid, salary=Decimal(str(salary)), pay_date=pay_date)
                session.add(entry)
                session.flush()
                ids.append(entry.payroll_id)
        return ids

    return _add


@pytest.fixture
def read_salaries(session_factory):
    """Return {payroll_id: salary} for every payroll row."""

    def _read() -> dict[int, Decimal]:
        with session_scope(session_factory) as session:
            rows = session.execute(
                text("SELECT payroll_id, salary FROM payroll ORDER BY payroll_id")
            )
            return {payroll_id: Decimal(str(salary)).quantize(Decimal("0.01")) for payroll_id, salary in rows}

    return _read

