"""Customer roster models."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from utils.constants import MAX_NAME_LENGTH
from utils.validation import sanitize_text


class Customer(BaseModel):
    """Customer model."""

    id: Optional[str] = None
    user_id: str = Field(..., description="Owning account ID")
    name: str
    phone: str = ""
    created_at: Optional[datetime] = None

    class Config:
        json_schema_extra = {
            "example": {
                "user_id": "uuid-here",
                "name": "Priya Sharma",
                "phone": "+91 98765 43210",
            }
        }


class CustomerCreate(BaseModel):
    """Customer creation model. Name and phone are both required."""

    name: str
    phone: str

    @field_validator("name", "phone")
    @classmethod
    def require_text(cls, v: str) -> str:
        cleaned = sanitize_text(v, max_length=MAX_NAME_LENGTH)
        if not cleaned:
            raise ValueError("must not be empty")
        return cleaned
