# This project was developed with assistance from AI tools.
"""Lender request/response schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class LenderCreate(BaseModel):
    """Register a new lender."""

    name: str = Field(min_length=1, max_length=255)
    logo_url: str | None = None
    website_url: str | None = None
    phone: str | None = Field(default=None, max_length=50)
    email: str | None = Field(default=None, max_length=255)
    is_active: bool = True


class LenderUpdate(BaseModel):
    """Partial update to an existing lender. Omitted fields are left unchanged."""

    name: str | None = Field(default=None, min_length=1, max_length=255)
    logo_url: str | None = None
    website_url: str | None = None
    phone: str | None = Field(default=None, max_length=50)
    email: str | None = Field(default=None, max_length=255)
    is_active: bool | None = None


class LenderResponse(BaseModel):
    """Single lender response."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    logo_url: str | None = None
    website_url: str | None = None
    phone: str | None = None
    email: str | None = None
    is_active: bool
    created_at: datetime
    updated_at: datetime
