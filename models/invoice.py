"""GST invoice models."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from utils.constants import DEFAULT_SERVICE_DESCRIPTION, MAX_GST_RATE, MAX_NAME_LENGTH
from utils.validation import sanitize_text, validate_iso_date, validate_state_code


class Invoice(BaseModel):
    """Stored invoice. Created once, never edited."""

    id: Optional[str] = None
    user_id: str = Field(..., description="Owning account ID")
    invoice_number: str = ""
    date: str = ""
    seller_name: str = ""
    seller_address: Optional[str] = None
    seller_gstin: Optional[str] = None
    seller_state: str = ""
    buyer_name: str = ""
    buyer_address: Optional[str] = None
    buyer_phone: Optional[str] = None
    buyer_gstin: Optional[str] = None
    place_of_supply: str = ""
    description: str = ""
    sac_code: str = ""
    quantity: float = 1
    rate: float = 0
    gst_rate: float = 0
    taxable_value: float = 0
    cgst: float = 0
    sgst: float = 0
    igst: float = 0
    total_amount: float = 0
    appointment_id: Optional[str] = None
    created_at: Optional[datetime] = None

    class Config:
        json_schema_extra = {
            "example": {
                "user_id": "uuid-here",
                "invoice_number": "INV-202403-001",
                "date": "2024-03-01",
                "seller_name": "Sharma Physio Clinic",
                "seller_state": "27",
                "buyer_name": "Priya Sharma",
                "place_of_supply": "27",
                "description": "Consultation / Professional service",
                "sac_code": "998313",
                "quantity": 1,
                "rate": 1000,
                "gst_rate": 18,
                "taxable_value": 1000,
                "cgst": 90,
                "sgst": 90,
                "igst": 0,
                "total_amount": 1180,
            }
        }


class InvoiceDraft(BaseModel):
    """
    Bill form input.

    Amounts and the invoice number are not part of the draft; they are
    computed when the invoice is saved.
    """

    date: str
    seller_name: str
    seller_address: Optional[str] = None
    seller_gstin: Optional[str] = None
    seller_state: str
    buyer_name: str
    buyer_address: Optional[str] = None
    buyer_phone: Optional[str] = None
    buyer_gstin: Optional[str] = None
    place_of_supply: str
    description: str = DEFAULT_SERVICE_DESCRIPTION
    sac_code: str = ""
    quantity: float = Field(default=1, ge=0)
    rate: float = Field(..., ge=0)
    gst_rate: float = Field(default=18, ge=0, le=MAX_GST_RATE)
    appointment_id: Optional[str] = None

    @field_validator("seller_name", "buyer_name")
    @classmethod
    def require_text(cls, v: str) -> str:
        cleaned = sanitize_text(v, max_length=MAX_NAME_LENGTH)
        if not cleaned:
            raise ValueError("must not be empty")
        return cleaned

    @field_validator(
        "seller_address", "seller_gstin", "buyer_address", "buyer_phone", "buyer_gstin"
    )
    @classmethod
    def blank_is_none(cls, v: Optional[str]) -> Optional[str]:
        return sanitize_text(v) or None

    @field_validator("description", "sac_code")
    @classmethod
    def strip_text(cls, v: Optional[str]) -> str:
        return sanitize_text(v)

    @field_validator("seller_state", "place_of_supply")
    @classmethod
    def validate_state(cls, v: str) -> str:
        v = (v or "").strip()
        if not validate_state_code(v):
            raise ValueError("must be a known GST state code")
        return v

    @field_validator("date")
    @classmethod
    def validate_date(cls, v: str) -> str:
        if not validate_iso_date(v):
            raise ValueError("date must be a calendar date in YYYY-MM-DD format")
        return v
