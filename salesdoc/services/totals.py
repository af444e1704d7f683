"""Tax, adjustment and grand total computation."""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable

from .line_items import coerce_number, compute_sub_total, compute_total_quantity

if TYPE_CHECKING:  # pragma: no cover - avoid circular imports at runtime
    from ..models.documents import DocumentKind, DocumentTotals, LineItem, TaxSelection


def compute_tax(sub_total: float, tax_rate: float) -> float:
    return coerce_number(sub_total) * coerce_number(tax_rate) / 100


def compute_total(sub_total: float, tax_amount: float, adjustment: float, has_tax_section: bool) -> float:
    """Grand total of a document.

    With a tax section the tax is always deducted, whatever its category:
    GST, TDS and TCS share one selector and one subtraction.
    """
    sub_total = coerce_number(sub_total)
    adjustment = coerce_number(adjustment)
    if has_tax_section:
        return sub_total - coerce_number(tax_amount) + adjustment
    return sub_total + adjustment


def compute_document_totals(
    items: Iterable["LineItem"],
    kind: "DocumentKind",
    tax: "TaxSelection",
    adjustment: float = 0.0,
) -> "DocumentTotals":
    from ..models.documents import DocumentTotals, TaxCategory  # local import to avoid circular dependency

    items = list(items)
    sub_total = compute_sub_total(items)

    if kind.has_tax_section:
        tax_category, tax_rate = tax.category, tax.rate
        tax_amount = compute_tax(sub_total, tax_rate)
    else:
        tax_category, tax_rate, tax_amount = TaxCategory.NONE, 0.0, 0.0

    if not kind.accepts_adjustment:
        adjustment = 0.0

    total = compute_total(sub_total, tax_amount, adjustment, kind.has_tax_section)

    return DocumentTotals(
        sub_total=sub_total,
        tax_category=tax_category,
        tax_rate=tax_rate,
        tax_amount=tax_amount,
        adjustment=coerce_number(adjustment),
        total=total,
        total_quantity=compute_total_quantity(items),
    )
