"""
Unit tests for the generic storage operations.
Tests with mocked Supabase API calls.
"""

import time
from unittest.mock import MagicMock

import pytest

from utils.exceptions import StorageTimeoutError, StorageTransportError


@pytest.mark.asyncio
async def test_query_by_field_returns_rows(db_client, mock_supabase_client):
    client, mock_table = db_client
    mock_client, _ = mock_supabase_client
    mock_response = MagicMock()
    mock_response.data = [{"id": "c1"}, {"id": "c2"}]
    mock_table.select.return_value.eq.return_value.execute.return_value = mock_response

    rows = await client.query_by_field("customers", "user_id", "user_123")

    assert [r["id"] for r in rows] == ["c1", "c2"]
    mock_client.table.assert_called_with("customers")
    mock_table.select.return_value.eq.assert_called_once_with("user_id", "user_123")


@pytest.mark.asyncio
async def test_get_by_id_not_found(db_client):
    client, mock_table = db_client
    mock_table.select.return_value.eq.return_value.execute.return_value = MagicMock(data=[])

    assert await client.get_by_id("invoices", "inv_404") is None


@pytest.mark.asyncio
async def test_insert_returns_new_id(db_client):
    client, mock_table = db_client
    mock_table.insert.return_value.execute.return_value = MagicMock(
        data=[{"id": "new_1", "created_at": "2024-03-01T10:00:00Z"}]
    )

    new_id = await client.insert("customers", {"user_id": "user_123", "name": "Ravi"})

    assert new_id == "new_1"
    mock_table.insert.assert_called_once_with({"user_id": "user_123", "name": "Ravi"})


@pytest.mark.asyncio
async def test_insert_without_returned_row_fails(db_client):
    client, mock_table = db_client
    mock_table.insert.return_value.execute.return_value = MagicMock(data=[])

    with pytest.raises(StorageTransportError, match="no data returned"):
        await client.insert("customers", {"name": "Ravi"})


@pytest.mark.asyncio
async def test_update_and_delete_target_record_id(db_client):
    client, mock_table = db_client

    await client.update("appointments", "apt_1", {"status": "completed"})
    await client.delete("appointments", "apt_1")

    mock_table.update.assert_called_once_with({"status": "completed"})
    mock_table.update.return_value.eq.assert_called_once_with("id", "apt_1")
    mock_table.delete.return_value.eq.assert_called_once_with("id", "apt_1")


@pytest.mark.asyncio
async def test_transport_failure_is_wrapped(db_client):
    client, mock_table = db_client
    cause = ConnectionError("connection refused")
    mock_table.select.return_value.eq.return_value.execute.side_effect = cause

    with pytest.raises(StorageTransportError) as exc_info:
        await client.query_by_field("appointments", "user_id", "user_123")

    assert exc_info.value.__cause__ is cause
    assert not isinstance(exc_info.value, StorageTimeoutError)


@pytest.mark.asyncio
async def test_slow_request_times_out(db_client):
    client, mock_table = db_client
    client.timeout_seconds = 0.05
    mock_table.select.return_value.eq.return_value.execute.side_effect = (
        lambda: time.sleep(0.3)
    )

    with pytest.raises(StorageTimeoutError, match="timed out") as exc_info:
        await client.get_by_id("users", "user_123")

    assert "SUPABASE_URL" in str(exc_info.value)
    assert not isinstance(exc_info.value, StorageTransportError)


def test_get_db_client_is_shared(monkeypatch):
    from db import supabase_client

    monkeypatch.setattr(supabase_client, "_db_client", None)
    monkeypatch.setattr(supabase_client, "create_client", MagicMock())

    first = supabase_client.get_db_client()

    assert supabase_client.get_db_client() is first
