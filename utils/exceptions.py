"""
Custom exception classes for better error handling.
Provides specific error types instead of generic exceptions.
"""


class DatabaseError(Exception):
    """Base exception for storage operations."""

    pass


class StorageTransportError(DatabaseError):
    """Raised when the hosted store rejects a call (network, permissions)."""

    pass


class StorageTimeoutError(DatabaseError):
    """Raised when a storage call exceeds the configured deadline."""

    pass


class RecordNotFoundError(DatabaseError):
    """Raised when a record is missing or belongs to another account."""

    pass


class CustomerNotFoundError(RecordNotFoundError):
    """Raised when a customer is not found."""

    pass


class AppointmentNotFoundError(RecordNotFoundError):
    """Raised when an appointment is not found."""

    pass


class InvoiceNotFoundError(RecordNotFoundError):
    """Raised when an invoice is not found."""

    pass


class ValidationError(Exception):
    """Raised when input validation fails."""

    pass


class AuthenticationError(Exception):
    """Raised when login, signup or session checks fail."""

    pass
