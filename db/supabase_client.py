"""
Supabase storage client.

Exposes the five generic record operations the rest of the code relies on
(query by field, get by id, insert, update, delete) plus typed helpers for
users, customers, appointments and invoices built on top of them.

Every request runs the synchronous supabase-py call in a worker thread and is
bounded by ``settings.storage_timeout_seconds``. A request that runs past the
deadline raises ``StorageTimeoutError``; any other failure raises
``StorageTransportError``. Nothing is retried.

Tables (snake_case columns, ``id uuid default gen_random_uuid()``,
``created_at timestamptz default now()``):
    users(email, password_hash, name, business_name)
    customers(user_id, name, phone)
    appointments(user_id, customer_id, customer_name, phone, date, time, notes, status)
    invoices(user_id, invoice_number, date, seller_*, buyer_*, place_of_supply,
             description, sac_code, quantity, rate, gst_rate, taxable_value,
             cgst, sgst, igst, total_amount, appointment_id)

Records are always queried by ``user_id``; a record that belongs to another
account is reported exactly like a missing one.
"""

import asyncio
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Type, TypeVar

from pydantic import BaseModel
from supabase import Client as SupabaseClientType
from supabase import create_client

from billing.invoice_numbers import next_invoice_number
from config import settings
from models.appointment import Appointment, AppointmentCreate, AppointmentUpdate
from models.customer import Customer, CustomerCreate
from models.invoice import Invoice
from models.user import User, UserCreate
from scheduling.aggregator import sort_chronological
from utils.datetime_utils import local_now, parse_iso_datetime
from utils.exceptions import (
    AppointmentNotFoundError,
    CustomerNotFoundError,
    InvoiceNotFoundError,
    StorageTimeoutError,
    StorageTransportError,
)
from utils.logging_config import setup_logging

logger = setup_logging(name=__name__, log_file="storage.log")

USERS = "users"
CUSTOMERS = "customers"
APPOINTMENTS = "appointments"
INVOICES = "invoices"

TIMEOUT_REMEDIATION = (
    "Check that SUPABASE_URL is reachable and that the row level security "
    "policies for this table allow the request. The first write after a long "
    "idle period can be slow; try again."
)

_EPOCH = datetime.min.replace(tzinfo=timezone.utc)

M = TypeVar("M", bound=BaseModel)


def _parse(model: Type[M], item: Dict[str, Any]) -> M:
    """Build a model from a raw row, normalizing the server timestamp."""
    item = dict(item)
    if isinstance(item.get("created_at"), str):
        item["created_at"] = parse_iso_datetime(item["created_at"])
    return model(**item)


def _newest_first(records: List[M]) -> List[M]:
    return sorted(records, key=lambda r: r.created_at or _EPOCH, reverse=True)


class SupabaseClient:
    """
    Supabase database client wrapper.

    Uses the key from settings; row level security should still restrict
    each table to its ``user_id`` owner when the anon key is used.
    """

    def __init__(self, timeout_seconds: Optional[float] = None):
        settings.validate_all_required()
        self.client: SupabaseClientType = create_client(
            settings.supabase_url, settings.supabase_key
        )
        self.timeout_seconds = timeout_seconds or settings.storage_timeout_seconds

    # ========== Request Execution ==========

    async def _execute(self, action: str, request: Any) -> Any:
        """
        Execute a prepared supabase-py request under the storage deadline.

        Args:
            action: Short description used in errors and logs
            request: Query builder whose ``execute()`` sends the request

        Raises:
            StorageTimeoutError: If the deadline passes first
            StorageTransportError: If the request fails
        """
        try:
            return await asyncio.wait_for(
                asyncio.to_thread(request.execute), timeout=self.timeout_seconds
            )
        except asyncio.TimeoutError as e:
            logger.error(f"Storage timeout after {self.timeout_seconds}s: {action}")
            raise StorageTimeoutError(
                f"Request timed out while trying to {action}. {TIMEOUT_REMEDIATION}"
            ) from e
        except Exception as e:
            logger.error(f"Storage request failed ({action}): {e}", exc_info=True)
            raise StorageTransportError(f"Failed to {action}: {e}") from e

    # ========== Generic Operations ==========

    async def query_by_field(
        self, collection: str, field: str, value: Any
    ) -> List[Dict[str, Any]]:
        """All rows of ``collection`` where ``field`` equals ``value``."""
        request = self.client.table(collection).select("*").eq(field, value)
        response = await self._execute(f"query {collection} by {field}", request)
        return list(response.data or [])

    async def get_by_id(self, collection: str, record_id: str) -> Optional[Dict[str, Any]]:
        request = self.client.table(collection).select("*").eq("id", record_id)
        response = await self._execute(f"get {collection} record", request)
        if response.data:
            return response.data[0]
        return None

    async def insert(self, collection: str, record: Dict[str, Any]) -> str:
        """Insert a row and return its id. ``created_at`` is set by the database."""
        request = self.client.table(collection).insert(record)
        response = await self._execute(f"insert into {collection}", request)
        if not response.data:
            raise StorageTransportError(
                f"Failed to insert into {collection}: no data returned"
            )
        return response.data[0]["id"]

    async def update(
        self, collection: str, record_id: str, partial: Dict[str, Any]
    ) -> None:
        request = self.client.table(collection).update(partial).eq("id", record_id)
        await self._execute(f"update {collection} record", request)

    async def delete(self, collection: str, record_id: str) -> None:
        request = self.client.table(collection).delete().eq("id", record_id)
        await self._execute(f"delete {collection} record", request)

    async def _get_owned(
        self, collection: str, user_id: str, record_id: str
    ) -> Optional[Dict[str, Any]]:
        if not record_id:
            return None
        item = await self.get_by_id(collection, record_id)
        if item is None or item.get("user_id") != user_id:
            return None
        return item

    # ========== User Operations ==========

    async def get_user_by_email(self, email: str) -> Optional[User]:
        rows = await self.query_by_field(USERS, "email", email.strip().lower())
        if not rows:
            return None
        return _parse(User, rows[0])

    async def create_user(self, user_data: UserCreate) -> str:
        user_id = await self.insert(USERS, user_data.model_dump())
        logger.info(f"Created user {user_id}")
        return user_id

    # ========== Customer Operations ==========

    async def add_customer(self, user_id: str, customer_data: CustomerCreate) -> str:
        data = customer_data.model_dump()
        data["user_id"] = user_id
        return await self.insert(CUSTOMERS, data)

    async def get_customers(self, user_id: str) -> List[Customer]:
        """Customers of an account, most recently added first."""
        rows = await self.query_by_field(CUSTOMERS, "user_id", user_id)
        return _newest_first([_parse(Customer, row) for row in rows])

    async def get_customer(self, user_id: str, customer_id: str) -> Customer:
        item = await self._get_owned(CUSTOMERS, user_id, customer_id)
        if item is None:
            raise CustomerNotFoundError(f"Customer {customer_id} not found")
        return _parse(Customer, item)

    # ========== Appointment Operations ==========

    async def add_appointment(
        self, user_id: str, appointment_data: AppointmentCreate
    ) -> str:
        data = appointment_data.model_dump(mode="json")
        data["user_id"] = user_id
        return await self.insert(APPOINTMENTS, data)

    async def get_appointment(self, user_id: str, appointment_id: str) -> Appointment:
        item = await self._get_owned(APPOINTMENTS, user_id, appointment_id)
        if item is None:
            raise AppointmentNotFoundError(f"Appointment {appointment_id} not found")
        return _parse(Appointment, item)

    async def get_appointments(self, user_id: str) -> List[Appointment]:
        """All appointments of an account in (date, time) order."""
        rows = await self.query_by_field(APPOINTMENTS, "user_id", user_id)
        return sort_chronological([_parse(Appointment, row) for row in rows])

    async def update_appointment(
        self, user_id: str, appointment_id: str, changes: AppointmentUpdate
    ) -> Appointment:
        """Apply a partial edit and return the updated appointment."""
        current = await self.get_appointment(user_id, appointment_id)
        data = changes.to_update_dict()
        if data:
            await self.update(APPOINTMENTS, appointment_id, data)
        return current.model_copy(update=data)

    async def delete_appointment(self, user_id: str, appointment_id: str) -> None:
        await self.get_appointment(user_id, appointment_id)
        await self.delete(APPOINTMENTS, appointment_id)
        logger.info(f"Deleted appointment {appointment_id}")

    # ========== Invoice Operations ==========

    async def get_invoices(self, user_id: str) -> List[Invoice]:
        """Invoices of an account, most recent first."""
        rows = await self.query_by_field(INVOICES, "user_id", user_id)
        return _newest_first([_parse(Invoice, row) for row in rows])

    async def get_invoice(self, user_id: str, invoice_id: str) -> Invoice:
        item = await self._get_owned(INVOICES, user_id, invoice_id)
        if item is None:
            raise InvoiceNotFoundError(f"Invoice {invoice_id} not found")
        return _parse(Invoice, item)

    async def create_invoice(
        self, user_id: str, data: Dict[str, Any], now: Optional[datetime] = None
    ) -> str:
        """
        Store a new invoice under the next number for the current period.

        The number is computed from the invoices present when this runs; the
        scan and the insert are not atomic. Any ``invoice_number`` in ``data``
        is replaced and ``None`` values are left out.
        """
        now = now or local_now()
        rows = await self.query_by_field(INVOICES, "user_id", user_id)
        invoice_number = next_invoice_number(rows, now)

        record = {k: v for k, v in data.items() if v is not None and k != "invoice_number"}
        record["user_id"] = user_id
        record["invoice_number"] = invoice_number

        invoice_id = await self.insert(INVOICES, record)
        logger.info(f"Created invoice {invoice_number} ({invoice_id}) for user {user_id}")
        return invoice_id


# Global database client instance
_db_client: Optional[SupabaseClient] = None


def get_db_client() -> SupabaseClient:
    """Get or create database client instance."""
    global _db_client
    if _db_client is None:
        _db_client = SupabaseClient()
    return _db_client
