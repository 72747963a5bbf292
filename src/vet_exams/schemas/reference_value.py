"""
Reference value Pydantic schemas.

A reference value is keyed by (exam_type, species, organ, measurement);
the database rejects a second row with the same key.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class ReferenceValueCreate(BaseModel):
    """Schema for inserting a reference value."""

    model_config = ConfigDict(from_attributes=True, str_strip_whitespace=True)

    exam_type: str = Field(..., description="Exam type the range applies to")
    species: str = Field(..., description="Species the range applies to")
    organ: str = Field(..., description="Organ measured")
    measurement: str = Field(..., description="Measurement name, e.g. 'length'")
    min_value: Optional[float] = Field(None, description="Lower bound of the normal range")
    max_value: Optional[float] = Field(None, description="Upper bound of the normal range")
    unit: Optional[str] = Field(None, description="Unit of the bounds, e.g. 'cm'")


class ReferenceValueUpdate(ReferenceValueCreate):
    """Schema for updating a reference value."""

    id: int = Field(..., description="Primary key of the reference value to update")
