"""
Database models for the vet-exams package.

This module contains the SQLAlchemy table declarations for every entity in
the exam records database.
"""

from .base import Base
from .exam import Exam
from .patient import Patient
from .reference_value import ReferenceValue
from .setting import Setting
from .template import Template

# Creation order used by schema initialization; parents before children.
SCHEMA_TABLES = [
    Patient.__table__,
    Exam.__table__,
    Setting.__table__,
    Template.__table__,
    ReferenceValue.__table__,
]

__all__ = [
    "Base",
    "Patient",
    "Exam",
    "Setting",
    "Template",
    "ReferenceValue",
    "SCHEMA_TABLES",
]
