"""Pydantic models for data validation and serialization."""

from .appointment import (
    Appointment,
    AppointmentCreate,
    AppointmentStatus,
    AppointmentUpdate,
)
from .customer import Customer, CustomerCreate
from .invoice import Invoice, InvoiceDraft
from .user import User, UserCreate

__all__ = [
    "Appointment",
    "AppointmentCreate",
    "AppointmentStatus",
    "AppointmentUpdate",
    "Customer",
    "CustomerCreate",
    "Invoice",
    "InvoiceDraft",
    "User",
    "UserCreate",
]
