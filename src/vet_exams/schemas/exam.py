"""
Exam Pydantic schemas.

``exam_data`` is the exam's free-form structured payload (measurements,
findings, notes). It is stored as JSON text, so it must be JSON-serializable.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ExamCreate(BaseModel):
    """Schema for inserting an exam."""

    model_config = ConfigDict(from_attributes=True)

    patient_id: int = Field(..., description="Primary key of the examined patient")
    exam_type: str = Field(..., description="Kind of exam, e.g. 'xray'")
    exam_data: Any = Field(
        default_factory=dict, description="Structured exam payload"
    )


class ExamUpdate(BaseModel):
    """Schema for updating an exam; only the payload is rewritten."""

    model_config = ConfigDict(from_attributes=True)

    id: int = Field(..., description="Primary key of the exam to update")
    exam_data: Any = Field(
        default_factory=dict, description="Structured exam payload"
    )
