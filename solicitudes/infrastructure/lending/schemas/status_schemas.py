"""Pydantic schemas for status API request/response validation."""

from uuid import UUID

from pydantic import BaseModel, Field


class StatusResponse(BaseModel):
    """Schema for a workflow status."""

    id: UUID
    name: str = Field(..., serialization_alias="nombre")
    description: str = Field(..., serialization_alias="descripcion")
    version: int


class StatusDescriptionUpdateRequest(BaseModel):
    """Schema for updating a status description."""

    description: str = Field(..., alias="descripcion", description="New description")
    version: int = Field(..., ge=0, description="Version the caller last read")

    model_config = {"populate_by_name": True}
