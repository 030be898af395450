"""Appointment models.

``date`` and ``time`` are kept as fixed-width strings (``YYYY-MM-DD`` and
``HH:MM``) so that sorting them as text is the same as sorting them in time.
The create and update models refuse any other format.
"""

from datetime import datetime
from enum import Enum
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field, field_validator

from utils.constants import MAX_NAME_LENGTH, MAX_NOTES_LENGTH
from utils.validation import sanitize_text, validate_iso_date, validate_time


class AppointmentStatus(str, Enum):
    """Appointment status. Any status may be set from any other."""

    SCHEDULED = "scheduled"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


def _check_date(v: str) -> str:
    if not validate_iso_date(v):
        raise ValueError("date must be a calendar date in YYYY-MM-DD format")
    return v


def _check_time(v: str) -> str:
    if not validate_time(v):
        raise ValueError("time must be HH:MM (24-hour)")
    return v


class Appointment(BaseModel):
    """Stored appointment record."""

    id: Optional[str] = None
    user_id: str = Field(..., description="Owning account ID")
    customer_id: Optional[str] = None
    customer_name: str = ""
    phone: str = ""
    date: str = ""
    time: str = ""
    notes: str = ""
    status: AppointmentStatus = AppointmentStatus.SCHEDULED
    created_at: Optional[datetime] = None

    class Config:
        use_enum_values = True
        json_schema_extra = {
            "example": {
                "user_id": "uuid-here",
                "customer_name": "Priya Sharma",
                "phone": "+91 98765 43210",
                "date": "2024-03-01",
                "time": "10:30",
                "status": "scheduled",
            }
        }


class AppointmentCreate(BaseModel):
    """Booking form input."""

    customer_id: Optional[str] = None
    customer_name: str
    phone: str
    date: str
    time: str
    notes: str = ""
    status: AppointmentStatus = AppointmentStatus.SCHEDULED

    @field_validator("customer_name", "phone")
    @classmethod
    def require_text(cls, v: str) -> str:
        cleaned = sanitize_text(v, max_length=MAX_NAME_LENGTH)
        if not cleaned:
            raise ValueError("must not be empty")
        return cleaned

    @field_validator("customer_id")
    @classmethod
    def blank_customer_is_none(cls, v: Optional[str]) -> Optional[str]:
        return v or None

    @field_validator("date")
    @classmethod
    def validate_date(cls, v: str) -> str:
        return _check_date(v)

    @field_validator("time")
    @classmethod
    def validate_time(cls, v: str) -> str:
        return _check_time(v)

    @field_validator("notes")
    @classmethod
    def clean_notes(cls, v: Optional[str]) -> str:
        return sanitize_text(v, max_length=MAX_NOTES_LENGTH)


class AppointmentUpdate(BaseModel):
    """Partial edit. Only fields that were explicitly set are written."""

    customer_id: Optional[str] = None
    customer_name: Optional[str] = None
    phone: Optional[str] = None
    date: Optional[str] = None
    time: Optional[str] = None
    notes: Optional[str] = None
    status: Optional[AppointmentStatus] = None

    @field_validator("customer_id")
    @classmethod
    def blank_customer_is_none(cls, v: Optional[str]) -> Optional[str]:
        return v or None

    @field_validator("customer_name", "phone")
    @classmethod
    def require_text(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return None
        cleaned = sanitize_text(v, max_length=MAX_NAME_LENGTH)
        if not cleaned:
            raise ValueError("must not be empty")
        return cleaned

    @field_validator("notes")
    @classmethod
    def clean_notes(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return None
        return sanitize_text(v, max_length=MAX_NOTES_LENGTH)

    @field_validator("date")
    @classmethod
    def validate_date(cls, v: Optional[str]) -> Optional[str]:
        return None if v is None else _check_date(v)

    @field_validator("time")
    @classmethod
    def validate_time(cls, v: Optional[str]) -> Optional[str]:
        return None if v is None else _check_time(v)

    def to_update_dict(self) -> Dict[str, Any]:
        """Column values for the store, limited to the fields the caller set."""
        data = self.model_dump(exclude_unset=True, mode="json")
        # date/time/name cannot be cleared, only replaced
        for field in ("customer_name", "phone", "date", "time", "status"):
            if field in data and data[field] is None:
                del data[field]
        return data
