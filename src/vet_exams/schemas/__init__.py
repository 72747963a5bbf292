"""
Pydantic schemas for the exam records data layer.

These schemas are optional, typed input shapes for ``ExamDatabase``; every
operation also accepts a plain mapping with the same keys.
"""

from .exam import ExamCreate, ExamUpdate
from .patient import PatientBase, PatientCreate, PatientUpdate
from .reference_value import ReferenceValueCreate, ReferenceValueUpdate
from .template import TemplateCreate, TemplateUpdate

__all__ = [
    # Patient schemas
    "PatientBase",
    "PatientCreate",
    "PatientUpdate",
    # Exam schemas
    "ExamCreate",
    "ExamUpdate",
    # Template schemas
    "TemplateCreate",
    "TemplateUpdate",
    # Reference value schemas
    "ReferenceValueCreate",
    "ReferenceValueUpdate",
]
