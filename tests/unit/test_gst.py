"""
Unit tests for the GST split and invoice totals.
"""

import pytest

from billing.gst import compute_gst, compute_invoice_totals, round_currency


def test_intrastate_splits_into_cgst_and_sgst():
    gst = compute_gst(1000, 18, "27", "27")

    assert gst.cgst == 90
    assert gst.sgst == 90
    assert gst.igst == 0
    assert 1000 + gst.total_tax == 1180


def test_interstate_is_all_igst():
    gst = compute_gst(1000, 18, "27", "29")

    assert gst.cgst == 0
    assert gst.sgst == 0
    assert gst.igst == 180
    assert 1000 + gst.total_tax == 1180
    assert gst.is_interstate


@pytest.mark.parametrize("taxable", [0, 1, 99.99, 1234.5, 100000])
@pytest.mark.parametrize("rate", [0, 5, 12, 18, 28])
@pytest.mark.parametrize("states", [("27", "27"), ("27", "29")])
def test_split_never_mixes_and_preserves_total(taxable, rate, states):
    gst = compute_gst(taxable, rate, *states)

    assert gst.total_tax == pytest.approx(taxable * rate / 100)
    assert not (gst.igst and (gst.cgst or gst.sgst))
    if states[0] == states[1]:
        assert gst.igst == 0
    else:
        assert gst.cgst == gst.sgst == 0


def test_degenerate_inputs_give_zero_tax():
    assert compute_gst(1000, 0, "27", "29").total_tax == 0
    assert compute_gst(0, 18, "27", "27").total_tax == 0

    empty = compute_gst(500, 0, "", "")
    assert (empty.cgst, empty.sgst, empty.igst) == (0, 0, 0)


def test_invoice_totals_for_line_item():
    totals = compute_invoice_totals(2, 750, 18, "07", "07")

    assert totals.taxable_value == 1500
    assert totals.cgst == 135
    assert totals.sgst == 135
    assert totals.igst == 0
    assert totals.total_amount == 1770


def test_invoice_totals_with_zero_quantity():
    totals = compute_invoice_totals(0, 750, 18, "07", "29")

    assert totals.taxable_value == 0
    assert totals.total_amount == 0


def test_totals_are_unrounded_until_saved():
    # 333.33 * 18% = 59.9994 -> 29.9997 each side
    totals = compute_invoice_totals(1, 333.33, 18, "27", "27")

    assert totals.cgst == pytest.approx(29.9997)

    saved = totals.rounded()
    assert saved.cgst == 30.0
    assert saved.sgst == 30.0
    assert saved.taxable_value == 333.33
    assert saved.total_amount == 393.33


@pytest.mark.parametrize(
    "value, expected",
    [(1.005, 1.01), (2.675, 2.68), (0.125, 0.13), (10.0, 10.0), (-1.005, -1.01), (1.004, 1.0)],
)
def test_round_currency_is_half_up(value, expected):
    assert round_currency(value) == expected


def test_saved_total_is_sum_of_rounded_parts():
    # 10.05 * 18% = 1.809 -> 0.9045 each side, rounded to 0.90
    saved = compute_invoice_totals(1, 10.05, 18, "27", "27").rounded()

    assert (saved.taxable_value, saved.cgst, saved.sgst) == (10.05, 0.90, 0.90)
    assert saved.total_amount == 11.85
    assert saved.total_amount == round_currency(
        saved.taxable_value + saved.cgst + saved.sgst + saved.igst
    )
