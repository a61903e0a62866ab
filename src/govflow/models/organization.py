"""Pydantic models for the Organization entity."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class OrganizationCreate(BaseModel):
    model_config = ConfigDict(extra="forbid")

    organization_name: str = Field(..., min_length=1, max_length=200)


class Organization(BaseModel):
    org_id: str
    organization_name: str
    created_by: str
    created_at: datetime | None = None
