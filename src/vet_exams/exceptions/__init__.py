"""
Custom exceptions for the vet-exams package.

This module defines the exception hierarchy and custom exceptions
used by the exam records data layer and application shell.
"""

from .core_exceptions import (  # Utility functions
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

__all__ = [
    # Exception classes
    "VetExamsException",
    "DatabaseException",
    "ConnectionException",
    "StatementException",
    "ConstraintViolationException",
    "SchemaException",
    "ExamDataException",
    "RouteNotFoundException",
    "ConfigurationException",
    # Utility functions
    "create_error_response",
    "log_exception_context",
]
