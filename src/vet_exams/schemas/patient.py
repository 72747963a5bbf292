"""
Patient Pydantic schemas.

Input shapes accepted by the patient operations of ``ExamDatabase``. They
describe the fields bound to the SQL statements; constraint checking is left
to the database engine.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class PatientBase(BaseModel):
    """Base Patient schema with common fields."""

    model_config = ConfigDict(from_attributes=True, str_strip_whitespace=True)

    name: str = Field(..., description="Patient's name")
    species: Optional[str] = Field(None, description="Species, e.g. 'dog'")
    breed: Optional[str] = Field(None, description="Breed")
    owner_name: Optional[str] = Field(None, description="Owner's full name")


class PatientCreate(PatientBase):
    """Schema for inserting a patient."""


class PatientUpdate(PatientBase):
    """Schema for updating a patient in place; every column is rewritten."""

    id: int = Field(..., description="Primary key of the patient to update")
