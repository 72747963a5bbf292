"""
Database connection, schema, and data access utilities.

This module provides the async SQLite engine configuration and the
``ExamDatabase`` facade used by the exam records application.
"""

from .connection import (
    DatabaseConfig,
    check_connection,
    close_engine,
    create_engine,
    get_database_url,
)
from .schema import schema_statements
from .service import (
    ExamDatabase,
    get_database_service,
    initialize_database_service,
)
from .types import (
    ExecuteResult,
    SchemaInitResult,
    deserialize_exam_data,
    serialize_exam_data,
)

__all__ = [
    # Connection utilities
    "DatabaseConfig",
    "create_engine",
    "get_database_url",
    "check_connection",
    "close_engine",
    # Schema
    "schema_statements",
    # Data access
    "ExamDatabase",
    "initialize_database_service",
    "get_database_service",
    "ExecuteResult",
    "SchemaInitResult",
    "serialize_exam_data",
    "deserialize_exam_data",
]
