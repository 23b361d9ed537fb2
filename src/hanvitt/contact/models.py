"""Pydantic models for consultation requests submitted through the site."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator


class ContactRequestCreate(BaseModel):
    """Fields a visitor submits. Everything else is assigned on save."""

    model_config = ConfigDict(str_strip_whitespace=True, extra="ignore")

    name: str = Field(min_length=2, max_length=100)
    email: EmailStr
    phone: str | None = Field(default=None, max_length=20)
    message: str = Field(min_length=5, max_length=2000)

    @field_validator("phone", mode="before")
    @classmethod
    def _blank_phone_is_none(cls, v):
        if isinstance(v, str) and not v.strip():
            return None
        return v


class ContactRequest(ContactRequestCreate):
    """A stored request."""

    id: int
    is_read: bool = False
    created_at: datetime
