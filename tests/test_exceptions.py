"""
Tests for exception handling in the vet-exams package.
"""

import logging
from unittest.mock import Mock

from vet_exams.exceptions import (
    ConfigurationException,
    ConnectionException,
    ConstraintViolationException,
    DatabaseException,
    ExamDataException,
    RouteNotFoundException,
    SchemaException,
    StatementException,
    VetExamsException,
    create_error_response,
    log_exception_context,
)


class TestVetExamsException:
    """Test cases for the base VetExamsException class."""

    def test_basic_exception_creation(self):
        """Test creating a basic exception."""
        exc = VetExamsException("Test error")

        assert str(exc) == "Test error"
        assert exc.message == "Test error"
        assert exc.error_code == "VetExamsException"
        assert exc.details == {}

    def test_exception_with_details(self):
        """Test creating exception with details."""
        details = {"field": "name"}
        exc = VetExamsException("Test error", details=details)

        assert exc.details == details
        assert "Details: " in str(exc)

    def test_to_dict_method(self):
        """Test converting exception to dictionary."""
        exc = VetExamsException("Test error", error_code="TEST_ERROR")

        result = exc.to_dict()

        assert result["error_type"] == "VetExamsException"
        assert result["error_code"] == "TEST_ERROR"
        assert result["message"] == "Test error"
        assert result["details"] == {}
        assert "timestamp" in result


class TestDatabaseException:
    """Test cases for DatabaseException and its subclasses."""

    def test_database_exception_keeps_original_error(self):
        original_error = Exception("disk I/O error")
        exc = DatabaseException("Database error", original_error=original_error)

        assert exc.original_error is original_error
        assert exc.details["original_error"] == "disk I/O error"

    def test_connection_exception_drops_query_string(self):
        exc = ConnectionException(
            database_url="sqlite+aiosqlite:///tvusvet.db?mode=ro"
        )

        assert exc.error_code == "DATABASE_CONNECTION_ERROR"
        assert exc.details["database_url"] == "sqlite+aiosqlite:///tvusvet.db"

    def test_statement_exception_records_statement_and_params(self):
        exc = StatementException(
            sql="SELECT *\n    FROM patients\n    WHERE id = ?",
            params=[7],
        )

        assert exc.error_code == "DATABASE_STATEMENT_ERROR"
        assert exc.details["sql"] == "SELECT * FROM patients WHERE id = ?"
        assert exc.details["params"] == [7]
        assert exc.params == [7]

    def test_constraint_violation_is_a_statement_exception(self):
        exc = ConstraintViolationException(
            sql="INSERT INTO templates (name, content) VALUES (?, ?)",
            params=["Abdomen", "..."],
        )

        assert isinstance(exc, StatementException)
        assert exc.error_code == "DATABASE_CONSTRAINT_ERROR"

    def test_schema_exception_lists_failures(self):
        exc = SchemaException(failures={"exams": "near \"(\": syntax error"})

        assert exc.error_code == "DATABASE_SCHEMA_ERROR"
        assert exc.failures == {"exams": "near \"(\": syntax error"}
        assert exc.details["failures"] == exc.failures


class TestOtherExceptions:
    def test_exam_data_exception(self):
        exc = ExamDataException(exam_id=3, original_error=ValueError("bad json"))

        assert exc.error_code == "EXAM_DATA_ERROR"
        assert exc.details == {"exam_id": 3, "original_error": "bad json"}

    def test_configuration_exception_redacts_sensitive_values(self):
        exc = ConfigurationException(
            "Bad config", config_key="API_TOKEN", config_value="abc123"
        )

        assert exc.details["config_value"] == "[REDACTED]"

    def test_configuration_exception_keeps_plain_values(self):
        exc = ConfigurationException(
            "Bad config", config_key="LOG_LEVEL", config_value="LOUD"
        )

        assert exc.details["config_value"] == "LOUD"

    def test_route_not_found(self):
        exc = RouteNotFoundException("/nowhere")

        assert exc.error_code == "ROUTE_NOT_FOUND"
        assert exc.path == "/nowhere"


class TestUtilityFunctions:
    def test_create_error_response_for_package_exception(self):
        exc = StatementException("Statement failed", sql="SELEC 1")

        response = create_error_response(exc)

        assert response["success"] is False
        assert response["error"]["type"] == "StatementException"
        assert response["error"]["code"] == "DATABASE_STATEMENT_ERROR"
        assert response["error"]["details"]["sql"] == "SELEC 1"

    def test_create_error_response_without_details(self):
        exc = StatementException("Statement failed", sql="SELEC 1")

        response = create_error_response(exc, include_details=False)

        assert "details" not in response["error"]

    def test_create_error_response_for_foreign_exception(self):
        response = create_error_response(RuntimeError("boom"))

        assert response["error"]["type"] == "RuntimeError"
        assert response["error"]["code"] == "UNEXPECTED_ERROR"
        assert response["error"]["message"] == "boom"

    def test_log_exception_context_with_package_exception(self):
        logger = Mock()
        exc = VetExamsException("Test error")

        log_exception_context(exc, {"path": "/"}, logger=logger)

        logger.log.assert_called_once()
        level, message = logger.log.call_args[0]
        assert level == logging.ERROR
        assert "Test error" in message
        extra = logger.log.call_args[1]["extra"]
        assert extra["exception_data"]["context"] == {"path": "/"}

    def test_log_exception_context_with_foreign_exception(self):
        logger = Mock()

        log_exception_context(
            ValueError("nope"), {"step": "x"}, logger=logger, level=logging.WARNING
        )

        level, message = logger.log.call_args[0]
        assert level == logging.WARNING
        assert logger.log.call_args[1]["extra"]["exception_type"] == "ValueError"
