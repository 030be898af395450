"""
Sequential invoice numbers per billing period.

Numbers look like ``INV-202403-007``: a fixed prefix, the billing period
(``YYYYMM``) and a zero-padded sequence within that period. The next number is
derived from a scan of the account's existing invoices; there is no stored
counter, so two invoices created at the same moment for the same account can
receive the same number.
"""

from datetime import datetime
from typing import Any, Iterable, Optional

from utils.constants import INVOICE_NUMBER_PREFIX, INVOICE_SEQUENCE_WIDTH


def billing_period_key(now: datetime) -> str:
    """``YYYYMM`` for the month containing ``now``."""
    return now.strftime("%Y%m")


def invoice_number_prefix(now: datetime) -> str:
    return f"{INVOICE_NUMBER_PREFIX}-{billing_period_key(now)}-"


def _number_of(invoice: Any) -> Optional[str]:
    """Pull the invoice number out of a model, a mapping or a plain string."""
    if isinstance(invoice, str):
        return invoice
    if isinstance(invoice, dict):
        number = invoice.get("invoice_number")
    else:
        number = getattr(invoice, "invoice_number", None)
    return number if isinstance(number, str) else None


def parse_sequence(invoice_number: Optional[str], prefix: str) -> Optional[int]:
    """
    Sequence part of ``invoice_number`` if it carries ``prefix``.

    Returns None for other periods and for suffixes that are not a plain
    run of digits.
    """
    if not invoice_number or not invoice_number.startswith(prefix):
        return None
    suffix = invoice_number[len(prefix):]
    if not (suffix.isascii() and suffix.isdigit()):
        return None
    return int(suffix)


def next_invoice_number(existing_invoices: Iterable[Any], now: datetime) -> str:
    """
    Next invoice number for the billing period containing ``now``.

    Args:
        existing_invoices: The account's invoices (models, dicts or numbers)
        now: Moment of allocation; selects the billing period

    Returns:
        ``INV-YYYYMM-NNN`` one past the highest sequence found for the period,
        starting at ``001``
    """
    prefix = invoice_number_prefix(now)
    highest = 0
    for invoice in existing_invoices:
        sequence = parse_sequence(_number_of(invoice), prefix)
        if sequence is not None and sequence > highest:
            highest = sequence
    return f"{prefix}{str(highest + 1).zfill(INVOICE_SEQUENCE_WIDTH)}"
