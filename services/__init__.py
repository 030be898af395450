"""Account-scoped operations called by the UI layer."""

from .appointments import AppointmentService
from .auth import AuthService
from .customers import CustomerService
from .invoices import InvoiceService
from .session import SessionContext

__all__ = [
    "AppointmentService",
    "AuthService",
    "CustomerService",
    "InvoiceService",
    "SessionContext",
]
