"""
Pytest configuration and shared fixtures.
"""

import os

# Settings are read at import time; provide test values before any app import
os.environ.setdefault("SUPABASE_URL", "https://test.supabase.co")
os.environ.setdefault("SUPABASE_KEY", "test_key")
os.environ.setdefault("STORAGE_TIMEOUT_SECONDS", "2")
os.environ.setdefault("TIMEZONE", "Asia/Kolkata")
os.environ.setdefault("LOG_TO_FILE", "false")
os.environ.setdefault("ENVIRONMENT", "test")

from unittest.mock import AsyncMock, MagicMock, patch  # noqa: E402

import pytest  # noqa: E402

from models.appointment import Appointment  # noqa: E402
from services.session import SessionContext  # noqa: E402


@pytest.fixture
def mock_supabase_client():
    """Create a mock Supabase client."""
    mock_client = MagicMock()
    mock_table = MagicMock()
    mock_client.table.return_value = mock_table
    return mock_client, mock_table


@pytest.fixture
def db_client(mock_supabase_client):
    """SupabaseClient wired to the mocked Supabase client."""
    from db.supabase_client import SupabaseClient

    mock_client, mock_table = mock_supabase_client
    with patch("db.supabase_client.create_client", return_value=mock_client):
        client = SupabaseClient()
    return client, mock_table


@pytest.fixture
def mock_db():
    """Storage client double for service tests."""
    return AsyncMock()


@pytest.fixture
def session_context():
    return SessionContext(
        user_id="user_123",
        email="owner@example.com",
        name="Dr. Mehta",
        business_name="Mehta Physio",
    )


@pytest.fixture
def make_appointment():
    """Factory for stored appointments."""

    def _make(
        date="2024-03-01",
        time="10:00",
        status="scheduled",
        appointment_id=None,
        user_id="user_123",
        **extra,
    ):
        return Appointment(
            id=appointment_id or f"apt_{date}_{time}",
            user_id=user_id,
            customer_name=extra.pop("customer_name", "Priya Sharma"),
            phone=extra.pop("phone", "+91 98765 43210"),
            date=date,
            time=time,
            status=status,
            **extra,
        )

    return _make
