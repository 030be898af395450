"""
GST invoices for the signed-in account.

The bill form shows live, unrounded totals (``preview``); saving validates
the draft, rounds every amount half-up to 2 decimals and stores the invoice
under the next number for the current billing period.
"""

from datetime import datetime
from typing import Any, Dict, List, Mapping, Optional, Union

from billing import InvoiceTotals, compute_invoice_totals
from config import settings
from db import SupabaseClient, get_db_client
from models.invoice import Invoice, InvoiceDraft
from services.session import SessionContext
from utils.constants import DEFAULT_SERVICE_DESCRIPTION
from utils.datetime_utils import local_now, today_iso
from utils.exceptions import AppointmentNotFoundError
from utils.logging_config import setup_logging
from utils.validation import parse_form

logger = setup_logging(name=__name__, log_file="services.log")


def _number(value: Any) -> float:
    """Form field as a number; blank or non-numeric input counts as 0."""
    try:
        return float(value)
    except (TypeError, ValueError):
        return 0.0


class InvoiceService:
    def __init__(self, db: Optional[SupabaseClient] = None):
        self.db = db or get_db_client()

    async def new_draft(
        self,
        context: SessionContext,
        appointment_id: Optional[str] = None,
        today: Optional[str] = None,
    ) -> Dict[str, Any]:
        """
        Initial bill form values.

        When started from an appointment of this account, the buyer name and
        phone are copied from it; an appointment of another account is ignored.
        """
        user_id = context.require_user_id()
        draft: Dict[str, Any] = {
            "date": today or today_iso(),
            "seller_name": context.seller_name,
            "seller_state": "",
            "buyer_name": "",
            "buyer_phone": "",
            "place_of_supply": "",
            "description": DEFAULT_SERVICE_DESCRIPTION,
            "sac_code": settings.default_sac_code,
            "quantity": 1,
            "rate": "",
            "gst_rate": settings.default_gst_rate,
            "appointment_id": None,
        }
        if appointment_id:
            try:
                appointment = await self.db.get_appointment(user_id, appointment_id)
            except AppointmentNotFoundError:
                logger.warning(
                    f"Bill prefill skipped: appointment {appointment_id} not found for user {user_id}"
                )
            else:
                draft["buyer_name"] = appointment.customer_name
                draft["buyer_phone"] = appointment.phone
                draft["appointment_id"] = appointment.id
        return draft

    def preview(self, form: Mapping[str, Any]) -> InvoiceTotals:
        """Unrounded totals for the values currently in the bill form."""
        return compute_invoice_totals(
            _number(form.get("quantity")),
            _number(form.get("rate")),
            _number(form.get("gst_rate")),
            form.get("seller_state") or "",
            form.get("place_of_supply") or "",
        )

    async def create(
        self,
        context: SessionContext,
        form: Union[InvoiceDraft, Mapping[str, Any]],
        now: Optional[datetime] = None,
    ) -> Invoice:
        """
        Save a bill and return the stored invoice.

        Raises:
            ValidationError: Missing seller/buyer name, rate, date, or an
                unknown state code
        """
        user_id = context.require_user_id()
        draft = parse_form(InvoiceDraft, form)

        totals = compute_invoice_totals(
            draft.quantity,
            draft.rate,
            draft.gst_rate,
            draft.seller_state,
            draft.place_of_supply,
        ).rounded()

        data = draft.model_dump()
        data.update(totals.model_dump())

        invoice_id = await self.db.create_invoice(user_id, data, now or local_now())
        invoice = await self.db.get_invoice(user_id, invoice_id)
        logger.info(
            f"Saved invoice {invoice.invoice_number} total {invoice.total_amount:.2f} "
            f"for user {user_id}"
        )
        return invoice

    async def list_invoices(self, context: SessionContext) -> List[Invoice]:
        return await self.db.get_invoices(context.require_user_id())

    async def get(self, context: SessionContext, invoice_id: str) -> Invoice:
        return await self.db.get_invoice(context.require_user_id(), invoice_id)
