"""Invoice numbering and GST computation."""

from .gst import GstBreakdown, InvoiceTotals, compute_gst, compute_invoice_totals, round_currency
from .invoice_numbers import billing_period_key, next_invoice_number

__all__ = [
    "GstBreakdown",
    "InvoiceTotals",
    "billing_period_key",
    "compute_gst",
    "compute_invoice_totals",
    "next_invoice_number",
    "round_currency",
]
