"""Document service: recomputes a sales document and renders its totals."""

from __future__ import annotations

import math
from typing import List

from ..core.config import Settings
from ..core.exceptions import UnknownTaxOption, ValueOutOfRange
from ..core.logging import get_logger
from ..models.documents import DocumentComputation, SalesDocument, TotalsDisplay
from .currency import format_currency
from .summary import build_summary_rows
from .tax_catalog import TaxCatalog
from .totals import compute_document_totals
from .words import amount_to_words

logger = get_logger(__name__)

_TOTAL_FIELDS = ("sub_total", "tax_amount", "adjustment", "total", "total_quantity")


def _ensure_finite(totals) -> None:
    # JSON has no representation for inf or NaN
    overflowed = [name for name in _TOTAL_FIELDS if not math.isfinite(getattr(totals, name))]
    if overflowed:
        raise ValueOutOfRange("document totals exceed the representable range", fields=overflowed)


class DocumentService:
    """Thin caller over the engine for every document screen"""

    def __init__(self, settings: Settings, tax_catalog: TaxCatalog):
        self.settings = settings
        self.tax_catalog = tax_catalog

    def compute(self, document: SalesDocument) -> DocumentComputation:
        locale = document.locale or self.settings.default_locale
        currency = (document.currency or self.settings.default_currency).upper()
        kind = document.kind
        warnings: List[str] = []

        if kind.has_tax_section and self.settings.enforce_tax_catalog:
            if not self.tax_catalog.contains(document.tax):
                raise UnknownTaxOption(
                    "Tax selection is not in the configured catalog",
                    category=document.tax.category.value,
                    rate=document.tax.rate,
                )

        if not kind.accepts_adjustment and document.adjustment:
            logger.info("adjustment_ignored", kind=kind.value, adjustment=document.adjustment)
            warnings.append(f"adjustment is not applied to {kind.value} documents")

        # Rows are recomputed from their inputs before aggregating
        items = [item.edit() for item in document.items]
        totals = compute_document_totals(items, kind, document.tax, document.adjustment)
        _ensure_finite(totals)

        tax_label = self.tax_catalog.label_for(document.tax) if kind.has_tax_section else None

        try:
            words = amount_to_words(totals.total, self.settings.words_currency_label)
        except ValueOutOfRange as exc:
            logger.warning("amount_in_words_unavailable", total=totals.total, reason=exc.message)
            words = None
            warnings.append(exc.message)

        display = TotalsDisplay(
            sub_total=format_currency(totals.sub_total, locale, currency),
            tax_amount=format_currency(totals.tax_amount, locale, currency),
            adjustment=format_currency(totals.adjustment, locale, currency),
            total=format_currency(totals.total, locale, currency),
            tax_label=tax_label,
            total_in_words=words,
        )

        logger.debug(
            "document_computed",
            kind=kind.value,
            lines=len(items),
            sub_total=totals.sub_total,
            total=totals.total,
        )

        return DocumentComputation(
            kind=kind,
            items=items,
            totals=totals,
            display=display,
            summary=build_summary_rows(totals, kind, tax_label, currency),
            warnings=warnings,
        )
