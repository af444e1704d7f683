"""Pydantic models for sales documents and their derived totals."""

from __future__ import annotations

from enum import Enum
from typing import Any, List, Optional

from pydantic import BaseModel, Field, field_validator, model_validator

from ..services.line_items import coerce_number, compute_line_amount


class DocumentKind(str, Enum):
    QUOTE = "QUOTE"
    SALES_ORDER = "SALES_ORDER"
    DELIVERY_CHALLAN = "DELIVERY_CHALLAN"
    INVOICE = "INVOICE"

    @property
    def has_tax_section(self) -> bool:
        return self is DocumentKind.INVOICE

    @property
    def accepts_adjustment(self) -> bool:
        return self in (DocumentKind.INVOICE, DocumentKind.DELIVERY_CHALLAN)


class TaxCategory(str, Enum):
    NONE = "NONE"
    GST = "GST"
    TDS = "TDS"
    TCS = "TCS"


class LineItem(BaseModel):
    """One row of a sales document.

    ``amount`` is always derived from quantity, rate and discount when the
    model is validated; a supplied amount is discarded.
    """

    details: str = ""
    quantity: float = 1.0
    rate: float = 0.0
    discount_percent: float = 0.0
    amount: float = 0.0

    @field_validator("details", mode="before")
    @classmethod
    def _coerce_details(cls, value):
        return "" if value is None else str(value)

    @model_validator(mode="before")
    @classmethod
    def _derive_amount(cls, data: Any):
        if not isinstance(data, dict):
            return data
        data = dict(data)
        if "discount_percent" not in data and "discount" in data:
            data["discount_percent"] = data.pop("discount")
        for name, default in (("quantity", 1.0), ("rate", 0.0), ("discount_percent", 0.0)):
            data[name] = coerce_number(data[name]) if name in data else default
        data["amount"] = compute_line_amount(data["quantity"], data["rate"], data["discount_percent"])
        return data

    def edit(self, **changes: Any) -> "LineItem":
        """Return a copy with ``changes`` applied and the amount recomputed."""
        changes.pop("amount", None)
        if "discount" in changes:
            changes["discount_percent"] = changes.pop("discount")
        return LineItem.model_validate({**self.model_dump(exclude={"amount"}), **changes})


class TaxSelection(BaseModel):
    category: TaxCategory = TaxCategory.NONE
    rate: float = 0.0

    @field_validator("rate", mode="before")
    @classmethod
    def _coerce_rate(cls, value):
        return coerce_number(value)


class TaxOption(BaseModel):
    category: TaxCategory
    rate: float
    label: str


class SalesDocument(BaseModel):
    kind: DocumentKind = DocumentKind.INVOICE
    items: List[LineItem] = Field(default_factory=lambda: [LineItem()])
    tax: TaxSelection = Field(default_factory=TaxSelection)
    adjustment: float = 0.0
    locale: Optional[str] = None
    currency: Optional[str] = None

    @field_validator("adjustment", mode="before")
    @classmethod
    def _coerce_adjustment(cls, value):
        return coerce_number(value)


class DocumentTotals(BaseModel):
    sub_total: float
    tax_category: TaxCategory = TaxCategory.NONE
    tax_rate: float = 0.0
    tax_amount: float = 0.0
    adjustment: float = 0.0
    total: float
    total_quantity: float = 0.0


class TotalsDisplay(BaseModel):
    sub_total: str
    tax_amount: str
    adjustment: str
    total: str
    tax_label: Optional[str] = None
    total_in_words: Optional[str] = None


class SummaryRow(BaseModel):
    label: str
    value: str


class DocumentComputation(BaseModel):
    kind: DocumentKind
    items: List[LineItem]
    totals: DocumentTotals
    display: TotalsDisplay
    summary: List[SummaryRow]
    warnings: List[str] = Field(default_factory=list)
