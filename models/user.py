"""Account models for the email/password login."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field, field_validator


class User(BaseModel):
    """Stored account record."""

    id: Optional[str] = None
    email: str
    password_hash: str = Field(..., description="passlib pbkdf2_sha256 hash")
    name: str = ""
    business_name: str = ""
    created_at: Optional[datetime] = None


class UserCreate(BaseModel):
    """Account creation model."""

    email: str
    password_hash: str
    name: str = ""
    business_name: str = ""

    @field_validator("email")
    @classmethod
    def normalize_email(cls, v: str) -> str:
        return v.strip().lower()

    @field_validator("name", "business_name")
    @classmethod
    def strip_text(cls, v: Optional[str]) -> str:
        return (v or "").strip()
