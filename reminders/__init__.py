"""Appointment reminders sent through WhatsApp links."""

from .whatsapp import reminder_link_for, reminder_text, whatsapp_reminder_link

__all__ = ["reminder_link_for", "reminder_text", "whatsapp_reminder_link"]
