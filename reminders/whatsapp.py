"""
WhatsApp appointment reminders.

Builds a ``wa.me`` click-to-chat link with the reminder text pre-filled; the
business owner opens it and presses send. No messaging API is involved.
"""

import re
from typing import Any
from urllib.parse import quote

from config import settings
from utils.exceptions import ValidationError

REMINDER_TEMPLATE = (
    "Hi {customer_name}! This is a reminder for your appointment on {date} "
    "at {time}. Please confirm or reschedule if needed."
)

# Same unescaped set as JavaScript's encodeURIComponent
_URI_COMPONENT_SAFE = "!~*'()"


def reminder_text(customer_name: str, date: str, time: str) -> str:
    return REMINDER_TEMPLATE.format(customer_name=customer_name, date=date, time=time)


def whatsapp_reminder_link(phone: str, customer_name: str, date: str, time: str) -> str:
    """
    Click-to-chat link for an appointment reminder.

    Args:
        phone: Phone number in any notation; everything but digits is dropped,
            so it should include the country code (e.g. 91 for India)
        customer_name: Name used in the greeting
        date: Appointment date
        time: Appointment time

    Returns:
        ``https://wa.me/<digits>?text=<encoded message>``
    """
    digits = re.sub(r"\D", "", phone or "")
    message = quote(reminder_text(customer_name, date, time), safe=_URI_COMPONENT_SAFE)
    return f"{settings.whatsapp_base_url.rstrip('/')}/{digits}?text={message}"


def reminder_link_for(appointment: Any) -> str:
    """
    Reminder link for a stored appointment.

    Raises:
        ValidationError: If the appointment has no phone number with digits
    """
    phone = (getattr(appointment, "phone", "") or "").strip()
    if not re.search(r"\d", phone):
        raise ValidationError("Appointment has no phone number for a WhatsApp reminder")
    return whatsapp_reminder_link(
        phone, appointment.customer_name, appointment.date, appointment.time
    )
