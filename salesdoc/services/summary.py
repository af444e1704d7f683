"""Totals rows printed beneath the item table of an exported document."""

from __future__ import annotations

from typing import List, Optional

from ..models.documents import DocumentKind, DocumentTotals, SummaryRow
from .currency import format_plain


def build_summary_rows(
    totals: DocumentTotals,
    kind: DocumentKind,
    tax_label: Optional[str] = None,
    currency_code: str = "INR",
) -> List[SummaryRow]:
    rows = [SummaryRow(label="Sub Total", value=format_plain(totals.sub_total, currency_code))]

    if kind.has_tax_section:
        rows.append(
            SummaryRow(
                label=tax_label or "Tax",
                value=f"(-) {format_plain(totals.tax_amount, currency_code)}",
            )
        )
    if kind.accepts_adjustment:
        rows.append(SummaryRow(label="Adjustment", value=format_plain(totals.adjustment, currency_code)))

    rows.append(SummaryRow(label="Total", value=format_plain(totals.total, currency_code)))
    return rows
