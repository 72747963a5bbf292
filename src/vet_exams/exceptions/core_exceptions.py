"""
Core exceptions for the vet-exams package.

This module defines the exception hierarchy raised by the database facade
and the application shell, plus helpers for turning exceptions into
user-facing error payloads and structured log records.
"""

import logging
import time
from typing import Any, Dict, Optional, Sequence


class VetExamsException(Exception):
    """
    Base exception class for all vet-exams package exceptions.

    Provides a consistent interface for error handling across the package.
    """

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        """
        Initialize the exception.

        Args:
            message: Human-readable error message
            error_code: Machine-readable error code
            details: Additional error details
        """
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert exception to dictionary format.

        Returns:
            Dictionary representation of the exception
        """
        return {
            "error_type": self.__class__.__name__,
            "error_code": self.error_code,
            "message": self.message,
            "details": self.details,
            "timestamp": time.time(),
        }

    def __str__(self) -> str:
        """String representation of the exception."""
        if self.details:
            return f"{self.message} (Details: {self.details})"
        return self.message


class DatabaseException(VetExamsException):
    """Base exception for database-related errors."""

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        original_error: Optional[Exception] = None,
    ):
        """
        Initialize database exception.

        Args:
            message: Human-readable error message
            error_code: Machine-readable error code
            details: Additional error details
            original_error: Original exception that caused this error
        """
        super().__init__(message, error_code, details)
        self.original_error = original_error

        if original_error and "original_error" not in self.details:
            self.details["original_error"] = str(original_error)


class ConnectionException(DatabaseException):
    """Exception raised when the database connection cannot be opened."""

    def __init__(
        self,
        message: str = "Database connection failed",
        database_url: Optional[str] = None,
        original_error: Optional[Exception] = None,
    ):
        """
        Initialize connection exception.

        Args:
            message: Error message
            database_url: Database URL (query string is dropped)
            original_error: Original exception
        """
        details = {}
        if database_url:
            details["database_url"] = self._sanitize_url(database_url)

        super().__init__(
            message=message,
            error_code="DATABASE_CONNECTION_ERROR",
            details=details,
            original_error=original_error,
        )

    @staticmethod
    def _sanitize_url(url: str) -> str:
        """Strip connection options from a database URL for logging."""
        return url.split("?", 1)[0]


class StatementException(DatabaseException):
    """Exception raised when a SQL statement fails to execute."""

    def __init__(
        self,
        message: str = "Database statement failed",
        sql: Optional[str] = None,
        params: Optional[Sequence[Any]] = None,
        original_error: Optional[Exception] = None,
        error_code: str = "DATABASE_STATEMENT_ERROR",
    ):
        """
        Initialize statement exception.

        Args:
            message: Error message
            sql: The statement that failed
            params: Positional parameters bound to the statement
            original_error: Original exception
            error_code: Machine-readable error code
        """
        details: Dict[str, Any] = {}
        if sql:
            details["sql"] = " ".join(sql.split())
        if params:
            details["params"] = list(params)

        super().__init__(
            message=message,
            error_code=error_code,
            details=details,
            original_error=original_error,
        )
        self.sql = sql
        self.params = list(params) if params else []


class ConstraintViolationException(StatementException):
    """Exception raised when a statement violates a NOT NULL, UNIQUE or FOREIGN KEY constraint."""

    def __init__(
        self,
        message: str = "Database constraint violated",
        sql: Optional[str] = None,
        params: Optional[Sequence[Any]] = None,
        original_error: Optional[Exception] = None,
    ):
        super().__init__(
            message=message,
            sql=sql,
            params=params,
            original_error=original_error,
            error_code="DATABASE_CONSTRAINT_ERROR",
        )


class SchemaException(DatabaseException):
    """Exception raised when one or more schema statements failed."""

    def __init__(
        self,
        message: str = "Database schema initialization failed",
        failures: Optional[Dict[str, str]] = None,
    ):
        """
        Initialize schema exception.

        Args:
            message: Error message
            failures: Mapping of table name to the error raised while creating it
        """
        self.failures = dict(failures or {})
        super().__init__(
            message=message,
            error_code="DATABASE_SCHEMA_ERROR",
            details={"failures": self.failures} if self.failures else {},
        )


class ExamDataException(VetExamsException):
    """Exception raised when a stored exam payload cannot be deserialized."""

    def __init__(
        self,
        message: str = "Stored exam data is not valid JSON",
        exam_id: Optional[int] = None,
        original_error: Optional[Exception] = None,
    ):
        details: Dict[str, Any] = {}
        if exam_id is not None:
            details["exam_id"] = exam_id
        if original_error:
            details["original_error"] = str(original_error)

        super().__init__(
            message=message,
            error_code="EXAM_DATA_ERROR",
            details=details,
        )
        self.exam_id = exam_id
        self.original_error = original_error


class RouteNotFoundException(VetExamsException):
    """Exception raised when no application route matches a path."""

    def __init__(self, path: str):
        super().__init__(
            message=f"No route matches {path!r}",
            error_code="ROUTE_NOT_FOUND",
            details={"path": path},
        )
        self.path = path


class ConfigurationException(VetExamsException):
    """Exception raised for configuration-related errors."""

    def __init__(
        self,
        message: str = "Configuration error",
        config_key: Optional[str] = None,
        config_value: Optional[str] = None,
    ):
        """
        Initialize configuration exception.

        Args:
            message: Error message
            config_key: Configuration key that caused the error
            config_value: Configuration value (will be sanitized)
        """
        details = {}
        if config_key:
            details["config_key"] = config_key
        if config_value:
            details["config_value"] = self._sanitize_config_value(
                config_key, config_value
            )

        super().__init__(
            message=message,
            error_code="CONFIGURATION_ERROR",
            details=details,
        )

    @staticmethod
    def _sanitize_config_value(key: Optional[str], value: str) -> str:
        """Sanitize configuration values to avoid exposing secrets."""
        if not key:
            return "[REDACTED]"

        sensitive_keys = ["password", "secret", "key", "token", "credential"]
        if any(sensitive in key.lower() for sensitive in sensitive_keys):
            return "[REDACTED]"

        return value


# Utility functions for exception handling and error formatting


def create_error_response(
    exception: Exception,
    include_details: bool = True,
) -> Dict[str, Any]:
    """
    Create a standardized error response from an exception.

    Non-package exceptions are reported with a generic code so that the
    caller can still show something to the user.

    Args:
        exception: The exception to format
        include_details: Whether to include the exception details

    Returns:
        Standardized error response dictionary
    """
    if isinstance(exception, VetExamsException):
        response: Dict[str, Any] = {
            "success": False,
            "error": {
                "type": exception.__class__.__name__,
                "code": exception.error_code,
                "message": exception.message,
            },
        }
        if include_details and exception.details:
            response["error"]["details"] = exception.details
        return response

    return {
        "success": False,
        "error": {
            "type": exception.__class__.__name__,
            "code": "UNEXPECTED_ERROR",
            "message": str(exception) or exception.__class__.__name__,
        },
    }


def log_exception_context(
    exception: Exception,
    context: Dict[str, Any],
    logger: Optional[logging.Logger] = None,
    level: int = logging.ERROR,
) -> None:
    """
    Log an exception with additional context information.

    Args:
        exception: The exception to log
        context: Additional context information
        logger: Logger instance to use
        level: Logging level
    """
    if logger is None:
        logger = logging.getLogger(__name__)

    if isinstance(exception, VetExamsException):
        log_data = exception.to_dict()
        log_data["context"] = context
        logger.log(
            level,
            f"Exception with context: {exception.message}",
            extra={"exception_data": log_data},
        )
    else:
        logger.log(
            level,
            f"Non-VetExams exception: {str(exception)}",
            extra={
                "exception_type": exception.__class__.__name__,
                "exception_message": str(exception),
                "context": context,
            },
        )

