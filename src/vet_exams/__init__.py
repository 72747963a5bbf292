"""
Vet Exams

Data layer and application shell for a desktop veterinary exam records
application. Patients, exams, report templates, settings and organ
reference values are kept in a local SQLite database accessed
asynchronously.

It includes:

- An ``ExamDatabase`` facade with lazy single-connection management and one
  method per entity operation
- SQLAlchemy table declarations used to create the schema
- Pydantic input schemas for the entity operations
- An application shell with page routing, theme and notifications

Quick Start:
    >>> from vet_exams import ExamDatabase

    >>> async with ExamDatabase.from_path("tvusvet.db") as db:
    ...     await db.ensure_schema()
    ...     created = await db.add_patient({"name": "Rex", "species": "dog"})
    ...     await db.add_exam({
    ...         "patient_id": created.last_insert_id,
    ...         "exam_type": "xray",
    ...         "exam_data": {"notes": "clear"},
    ...     })

Requirements:
    - Python 3.10+
    - SQLAlchemy 2.0+ with aiosqlite
    - Pydantic 2.5+
"""

__version__ = "0.1.0"
__license__ = "MIT"

from . import app
from . import database
from . import exceptions
from . import models
from . import schemas
from . import utils

# Convenience imports for common usage patterns
from .database import DatabaseConfig, ExamDatabase, ExecuteResult
from .exceptions import (
    ConstraintViolationException,
    DatabaseException,
    VetExamsException,
)

__all__ = [
    # Version and metadata
    "__version__",
    "__license__",
    # Core modules
    "app",
    "database",
    "exceptions",
    "models",
    "schemas",
    "utils",
    # Convenience imports
    "DatabaseConfig",
    "ExamDatabase",
    "ExecuteResult",
    "VetExamsException",
    "DatabaseException",
    "ConstraintViolationException",
]
