import pytest

from salesdoc.models.documents import DocumentKind, LineItem, TaxCategory, TaxSelection
from salesdoc.services.totals import compute_document_totals, compute_tax, compute_total


@pytest.fixture()
def items():
    return [
        LineItem(details="Consulting", quantity=2, rate=500, discount=10),
        LineItem(details="Setup", quantity=1, rate=1000, discount=0),
    ]


def test_tax_is_percentage_of_sub_total():
    assert compute_tax(1900, 18) == 342
    assert compute_tax(1000, 0.1) == pytest.approx(1)


@pytest.mark.parametrize("sub_total", [0, 1900, -250, 1e8])
def test_zero_rate_means_no_tax(sub_total):
    assert compute_tax(sub_total, 0) == 0


def test_total_with_tax_section_always_deducts_tax():
    assert compute_total(1900, 342, -50, True) == 1508
    assert compute_total(1000, 20, 0, True) == 980


def test_total_without_tax_section():
    assert compute_total(1900, 0, 0, False) == 1900
    assert compute_total(100, 10, 5, False) == 105


def test_invoice_scenario(items):
    totals = compute_document_totals(
        items,
        DocumentKind.INVOICE,
        TaxSelection(category=TaxCategory.GST, rate=18),
        adjustment=-50,
    )
    assert totals.sub_total == 1900
    assert totals.tax_amount == 342
    assert totals.total == 1508
    assert totals.tax_category == TaxCategory.GST
    assert totals.total_quantity == 3


@pytest.mark.parametrize("kind", [DocumentKind.QUOTE, DocumentKind.SALES_ORDER])
def test_quote_and_sales_order_ignore_tax_and_adjustment(items, kind):
    totals = compute_document_totals(
        items, kind, TaxSelection(category=TaxCategory.TDS, rate=10), adjustment=75
    )
    assert totals.tax_amount == 0
    assert totals.tax_category == TaxCategory.NONE
    assert totals.adjustment == 0
    assert totals.total == totals.sub_total == 1900


def test_delivery_challan_applies_adjustment(items):
    totals = compute_document_totals(items, DocumentKind.DELIVERY_CHALLAN, TaxSelection(), adjustment=100)
    assert totals.tax_amount == 0
    assert totals.total == 2000


def test_totals_do_not_mutate_items(items):
    before = [item.model_dump() for item in items]
    compute_document_totals(items, DocumentKind.INVOICE, TaxSelection(category=TaxCategory.TDS, rate=2))
    assert [item.model_dump() for item in items] == before


def test_empty_document_totals_to_adjustment():
    totals = compute_document_totals([], DocumentKind.INVOICE, TaxSelection(), adjustment=10)
    assert totals.sub_total == 0
    assert totals.total == 10
