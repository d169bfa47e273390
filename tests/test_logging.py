"""Tests for the structured logging system (payroll_kernel/logging_config.py)."""

import json
import logging
from datetime import date
from decimal import Decimal
from io import StringIO

import pytest
from sqlalchemy.exc import OperationalError

from payroll_kernel.domain.dtos import Role
from payroll_kernel.exceptions import InvalidPercentageError, TransactionFailureError
from payroll_kernel.logging_config import (
    LogContext,
    StructuredFormatter,
    configure_logging,
    get_logger,
    new_correlation_id,
    reset_logging,
)


@pytest.fixture(autouse=True)
def _clean_logging():
    """Reset logging state between tests."""
    reset_logging()
    LogContext.clear()
    yield
    LogContext.clear()
    reset_logging()


def _make_handler() -> tuple[logging.Handler, StringIO]:
    stream = StringIO()
    handler = logging.StreamHandler(stream)
    handler.setFormatter(StructuredFormatter())
    return handler, stream


def _parse_log(stream: StringIO) -> dict:
    """Parse the first JSON log line from a stream."""
    line = stream.getvalue().strip().split("\n")[0]
    return json.loads(line)


def _parse_all_logs(stream: StringIO) -> list[dict]:
    lines = stream.getvalue().strip().split("\n")
    return [json.loads(line) for line in lines if line]


# ---------------------------------------------------------------------------
# StructuredFormatter tests
# ---------------------------------------------------------------------------


class TestStructuredFormatter:
    """Tests for JSON log output format."""

    def test_basic_json_output(self):
        handler, stream = _make_handler()
        configure_logging(handler=handler)
        get_logger("test").info("hello")

        record = _parse_log(stream)
        assert record["level"] == "INFO"
        assert record["message"] == "hello"
        assert record["logger"] == "payroll_kernel.test"
        assert "ts" in record

    def test_extra_fields_included(self):
        handler, stream = _make_handler()
        configure_logging(handler=handler)
        get_logger("test").info("salary_raise_applied", extra={"updated_count": 3})

        assert _parse_log(stream)["updated_count"] == 3

    def test_context_fields_included(self):
        handler, stream = _make_handler()
        configure_logging(handler=handler)
        LogContext.set(username="admin", role="ADMIN", operation="update_salary_range")
        get_logger("test").info("test_msg")

        record = _parse_log(stream)
        assert record["username"] == "admin"
        assert record["role"] == "ADMIN"
        assert record["operation"] == "update_salary_range"

    def test_context_wins_over_extra_with_same_name(self):
        handler, stream = _make_handler()
        configure_logging(handler=handler)
        LogContext.set(username="from_context")
        get_logger("test").info("test_msg", extra={"username": "from_extra"})

        assert _parse_log(stream)["username"] == "from_context"

    def test_decimal_date_and_enum_serialized(self):
        handler, stream = _make_handler()
        configure_logging(handler=handler)
        get_logger("test").info(
            "values",
            extra={"salary": Decimal("51750.00"), "pay_date": date(2024, 3, 1), "kind": Role.ADMIN},
        )

        record = _parse_log(stream)
        assert record["salary"] == "51750.00"
        assert record["pay_date"] == "2024-03-01"
        assert record["kind"] == "ADMIN"

    def test_exception_fields(self):
        handler, stream = _make_handler()
        configure_logging(handler=handler)
        try:
            raise ValueError("boom")
        except ValueError:
            get_logger("test").error("failed", exc_info=True)

        record = _parse_log(stream)
        assert record["exc_type"] == "ValueError"
        assert record["exc_message"] == "boom"
        assert "traceback" in record

    def test_kernel_exception_code_extracted(self):
        """Kernel exceptions carry a .code attribute and structured fields."""
        handler, stream = _make_handler()
        configure_logging(handler=handler)
        try:
            raise InvalidPercentageError(Decimal("-150"))
        except InvalidPercentageError:
            get_logger("test").error("raise_rejected", exc_info=True)

        record = _parse_log(stream)
        assert record["exc_code"] == "INVALID_PERCENTAGE"
        assert record["exc_type"] == "InvalidPercentageError"
        assert record["exc_percent"] == "-150"

    def test_store_exception_operation_extracted(self):
        handler, stream = _make_handler()
        configure_logging(handler=handler)
        try:
            raise TransactionFailureError("update_salary_range", "constraint failed")
        except TransactionFailureError:
            get_logger("test").error("rolled_back", exc_info=True)

        record = _parse_log(stream)
        assert record["exc_code"] == "TRANSACTION_FAILURE"
        assert record["exc_operation"] == "update_salary_range"

    def test_no_context_fields_when_empty(self):
        handler, stream = _make_handler()
        configure_logging(handler=handler)
        get_logger("test").info("bare_message")

        record = _parse_log(stream)
        assert "correlation_id" not in record
        assert "username" not in record

    def test_valid_json_every_line(self):
        handler, stream = _make_handler()
        configure_logging(handler=handler)
        logger = get_logger("test")
        logger.info("first")
        logger.warning("second", extra={"k": "v"})
        logger.debug("third")

        logs = _parse_all_logs(stream)
        # default level is INFO, so the debug line is dropped
        assert len(logs) == 2
        for record in logs:
            assert {"ts", "level", "logger", "message"} <= record.keys()


# ---------------------------------------------------------------------------
# LogContext tests
# ---------------------------------------------------------------------------


class TestLogContext:
    """Tests for context propagation."""

    def test_set_and_get(self):
        LogContext.set(correlation_id="x", username="y")
        assert LogContext.get_all() == {"correlation_id": "x", "username": "y"}

    def test_clear(self):
        LogContext.set(correlation_id="x")
        LogContext.clear()
        assert LogContext.get_all() == {}

    def test_bind_context_manager(self):
        LogContext.set(operation="outer")
        with LogContext.bind(operation="inner"):
            assert LogContext.get_all()["operation"] == "inner"
        assert LogContext.get_all()["operation"] == "outer"

    def test_bind_restores_none(self):
        assert "username" not in LogContext.get_all()
        with LogContext.bind(username="temp"):
            assert LogContext.get_all()["username"] == "temp"
        assert "username" not in LogContext.get_all()

    def test_bind_restores_after_exception(self):
        with pytest.raises(RuntimeError):
            with LogContext.bind(role="ADMIN"):
                raise RuntimeError("inside")
        assert "role" not in LogContext.get_all()

    def test_bind_ignores_unknown_fields(self):
        with LogContext.bind(unknown="value", username="u"):
            assert LogContext.get_all() == {"username": "u"}

    def test_all_fields(self):
        LogContext.set(correlation_id="c", username="u", role="r", operation="o")
        assert LogContext.get_all() == {
            "correlation_id": "c",
            "username": "u",
            "role": "r",
            "operation": "o",
        }


# ---------------------------------------------------------------------------
# configure_logging tests
# ---------------------------------------------------------------------------


class TestConfigureLogging:
    """Tests for initialization."""

    def test_idempotent(self):
        h1, _ = _make_handler()
        configure_logging(handler=h1)
        h2, _ = _make_handler()
        configure_logging(handler=h2)  # second call is no-op
        handlers = logging.getLogger("payroll_kernel").handlers
        assert h1 in handlers
        assert h2 not in handlers

    def test_get_logger_returns_child(self):
        assert get_logger("services.payroll").name == "payroll_kernel.services.payroll"

    def test_logger_hierarchy(self):
        handler, stream = _make_handler()
        configure_logging(handler=handler, level=logging.DEBUG)
        get_logger("deep.nested.module").debug("hierarchy_test")

        record = _parse_log(stream)
        assert record["message"] == "hierarchy_test"
        assert record["logger"] == "payroll_kernel.deep.nested.module"


class TestSensitiveValues:
    """Bound SQL parameters never reach the JSON payload."""

    def test_statement_params_not_copied(self):
        handler, stream = _make_handler()
        configure_logging(handler=handler)
        error = OperationalError(
            "SELECT * FROM users WHERE username = ? AND password = ?",
            ("admin", "S3cretPw!"),
            Exception("no such table: users"),
            hide_parameters=True,
        )
        try:
            raise error
        except OperationalError:
            get_logger("test").warning("credential_lookup_failed", exc_info=True)

        line = stream.getvalue()
        record = _parse_log(stream)
        assert "exc_params" not in record
        assert record["exc_type"] == "OperationalError"
        assert "S3cretPw!" not in line


class TestCorrelationId:

    def test_new_ids_are_distinct(self):
        assert new_correlation_id() != new_correlation_id()

    def test_bound_id_appears_on_every_line(self):
        handler, stream = _make_handler()
        configure_logging(handler=handler)
        correlation_id = new_correlation_id()
        with LogContext.bind(correlation_id=correlation_id):
            get_logger("test").info("first")
            get_logger("test").info("second")
        get_logger("test").info("after")

        first, second, after = _parse_all_logs(stream)
        assert first["correlation_id"] == second["correlation_id"] == correlation_id
        assert "correlation_id" not in after
