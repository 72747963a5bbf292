"""Report template Pydantic schemas."""

from pydantic import BaseModel, ConfigDict, Field


class TemplateCreate(BaseModel):
    """Schema for inserting a template."""

    model_config = ConfigDict(from_attributes=True)

    name: str = Field(..., description="Unique template name")
    content: str = Field(..., description="Template body")


class TemplateUpdate(TemplateCreate):
    """Schema for updating a template."""

    id: int = Field(..., description="Primary key of the template to update")
