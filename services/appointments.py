"""
Appointment booking and schedule views for the signed-in account.

Listing always fetches the account's full appointment set and filters it in
memory with the functions in ``scheduling``; "today" is the current date in
``settings.timezone``.
"""

from typing import Any, Dict, List, Mapping, Optional, Tuple, Union

from db import SupabaseClient, get_db_client
from models.appointment import (
    Appointment,
    AppointmentCreate,
    AppointmentStatus,
    AppointmentUpdate,
)
from reminders import reminder_link_for
from scheduling import (
    CalendarDay,
    FilterMode,
    appointments_for_day,
    counts_by_date,
    counts_by_status,
    filter_by_mode,
    group_by_date,
    week_strip,
)
from services.session import SessionContext
from utils.datetime_utils import today_iso
from utils.logging_config import setup_logging
from utils.validation import parse_form

logger = setup_logging(name=__name__, log_file="services.log")

AppointmentForm = Union[AppointmentCreate, Mapping[str, Any]]


class AppointmentService:
    def __init__(self, db: Optional[SupabaseClient] = None):
        self.db = db or get_db_client()

    async def book(self, context: SessionContext, form: AppointmentForm) -> str:
        """
        Create an appointment.

        Raises:
            ValidationError: Missing name/phone or a date/time not in
                ``YYYY-MM-DD``/``HH:MM`` form
        """
        user_id = context.require_user_id()
        appointment = parse_form(AppointmentCreate, form)
        appointment_id = await self.db.add_appointment(user_id, appointment)
        logger.info(
            f"Booked appointment {appointment_id} on {appointment.date} "
            f"{appointment.time} for user {user_id}"
        )
        return appointment_id

    async def prefill_from_customer(
        self, context: SessionContext, customer_id: str
    ) -> Dict[str, Any]:
        """Booking form values for an existing customer."""
        customer = await self.db.get_customer(context.require_user_id(), customer_id)
        return {
            "customer_id": customer.id,
            "customer_name": customer.name,
            "phone": customer.phone or "",
        }

    async def get(self, context: SessionContext, appointment_id: str) -> Appointment:
        return await self.db.get_appointment(context.require_user_id(), appointment_id)

    async def list_appointments(
        self,
        context: SessionContext,
        mode: Union[FilterMode, str] = FilterMode.UPCOMING,
        date: Optional[str] = None,
        today: Optional[str] = None,
    ) -> List[Appointment]:
        """Appointments for the list view, in (date, time) order."""
        appointments = await self.db.get_appointments(context.require_user_id())
        return filter_by_mode(appointments, mode, today or today_iso(), date)

    async def day_view(
        self, context: SessionContext, day: Optional[str] = None
    ) -> List[Appointment]:
        """One day's appointments ordered by time; defaults to today."""
        appointments = await self.db.get_appointments(context.require_user_id())
        return appointments_for_day(appointments, day or today_iso())

    async def grouped(
        self,
        context: SessionContext,
        mode: Union[FilterMode, str] = FilterMode.UPCOMING,
        selected_date: Optional[str] = None,
        today: Optional[str] = None,
    ) -> List[Tuple[str, List[Appointment]]]:
        """
        List view grouped under date headings.

        A selected calendar day narrows the filtered list to that day.
        """
        appointments = await self.list_appointments(context, mode, today=today)
        if selected_date:
            appointments = [a for a in appointments if a.date == selected_date]
        return group_by_date(appointments)

    async def calendar(
        self,
        context: SessionContext,
        offset_weeks: int = 0,
        selected_date: Optional[str] = None,
        today: Optional[str] = None,
    ) -> List[CalendarDay]:
        """Week strip with per-day counts over all of the account's appointments."""
        appointments = await self.db.get_appointments(context.require_user_id())
        return week_strip(appointments, today or today_iso(), offset_weeks, selected_date)

    async def summary(self, context: SessionContext) -> Dict[str, Dict[str, int]]:
        """Counts per date and per status for the dashboard."""
        appointments = await self.db.get_appointments(context.require_user_id())
        return {
            "by_date": counts_by_date(appointments),
            "by_status": counts_by_status(appointments),
        }

    async def update(
        self,
        context: SessionContext,
        appointment_id: str,
        changes: Union[AppointmentUpdate, Mapping[str, Any]],
    ) -> Appointment:
        """Edit an appointment. Any status may be set, from any status."""
        user_id = context.require_user_id()
        update = parse_form(AppointmentUpdate, changes)
        appointment = await self.db.update_appointment(user_id, appointment_id, update)
        logger.info(f"Updated appointment {appointment_id} for user {user_id}")
        return appointment

    async def set_status(
        self,
        context: SessionContext,
        appointment_id: str,
        status: Union[AppointmentStatus, str],
    ) -> Appointment:
        return await self.update(context, appointment_id, {"status": status})

    async def delete(self, context: SessionContext, appointment_id: str) -> None:
        await self.db.delete_appointment(context.require_user_id(), appointment_id)

    async def reminder_link(self, context: SessionContext, appointment_id: str) -> str:
        """
        WhatsApp link with the reminder message for one appointment.

        Raises:
            ValidationError: If the appointment has no phone number
        """
        appointment = await self.get(context, appointment_id)
        return reminder_link_for(appointment)
