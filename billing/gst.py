"""
GST split between intrastate and interstate supplies.

When the seller's state and the place of supply are the same state, the tax
is divided equally into central (CGST) and state (SGST) parts. Otherwise the
whole amount is integrated tax (IGST). The total is the same either way.

Values stay as unrounded floats while an invoice is being edited; they are
rounded half-up to paise only when the invoice is saved (``rounded()``).
"""

from decimal import ROUND_HALF_UP, Decimal

from pydantic import BaseModel, ConfigDict


def round_currency(value: float) -> float:
    """Round to 2 decimal places, halves away from zero."""
    # str() first so 1.005 rounds as written rather than as its binary value
    return float(Decimal(str(value)).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP))


class GstBreakdown(BaseModel):
    model_config = ConfigDict(frozen=True)

    cgst: float
    sgst: float
    igst: float

    @property
    def total_tax(self) -> float:
        return self.cgst + self.sgst + self.igst

    @property
    def is_interstate(self) -> bool:
        return self.igst != 0


class InvoiceTotals(BaseModel):
    """Amounts shown on the bill form and stored on the invoice."""

    model_config = ConfigDict(frozen=True)

    taxable_value: float
    cgst: float
    sgst: float
    igst: float
    total_amount: float

    def rounded(self) -> "InvoiceTotals":
        """Amounts rounded to paise; the total is the sum of the rounded parts."""
        taxable_value = round_currency(self.taxable_value)
        cgst = round_currency(self.cgst)
        sgst = round_currency(self.sgst)
        igst = round_currency(self.igst)
        return InvoiceTotals(
            taxable_value=taxable_value,
            cgst=cgst,
            sgst=sgst,
            igst=igst,
            total_amount=round_currency(taxable_value + cgst + sgst + igst),
        )


def compute_gst(
    taxable_value: float,
    gst_rate_percent: float,
    seller_state_code: str,
    place_of_supply_code: str,
) -> GstBreakdown:
    """
    Split GST on ``taxable_value`` into CGST/SGST or IGST.

    Args:
        taxable_value: Quantity times rate, before tax
        gst_rate_percent: GST rate, e.g. 18 for 18%
        seller_state_code: GST state code of the seller
        place_of_supply_code: GST state code of the place of supply

    Returns:
        Unrounded breakdown; exactly one side is non-zero unless tax is zero
    """
    gst_amount = taxable_value * gst_rate_percent / 100
    if seller_state_code == place_of_supply_code:
        half = gst_amount / 2
        return GstBreakdown(cgst=half, sgst=half, igst=0.0)
    return GstBreakdown(cgst=0.0, sgst=0.0, igst=gst_amount)


def compute_invoice_totals(
    quantity: float,
    rate: float,
    gst_rate_percent: float,
    seller_state_code: str,
    place_of_supply_code: str,
) -> InvoiceTotals:
    """Taxable value, GST split and grand total for a single line item."""
    taxable_value = (quantity or 0) * (rate or 0)
    gst = compute_gst(
        taxable_value, gst_rate_percent or 0, seller_state_code, place_of_supply_code
    )
    return InvoiceTotals(
        taxable_value=taxable_value,
        cgst=gst.cgst,
        sgst=gst.sgst,
        igst=gst.igst,
        total_amount=taxable_value + gst.cgst + gst.sgst + gst.igst,
    )
