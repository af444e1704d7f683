"""Line and document totals endpoints."""

from __future__ import annotations

import math

from fastapi import APIRouter, Depends

from ...core.exceptions import ValueOutOfRange
from ...models.documents import DocumentComputation, LineItem, SalesDocument
from ..deps import get_document_service
from ...services.document_service import DocumentService

router = APIRouter()


@router.post("/compute/line", response_model=LineItem)
async def compute_line(payload: LineItem) -> LineItem:
    # Validation already derived the amount from the submitted fields
    if not math.isfinite(payload.amount):
        raise ValueOutOfRange("line amount exceeds the representable range", fields=["amount"])
    return payload


@router.post("/compute/totals", response_model=DocumentComputation)
async def compute_totals(
    payload: SalesDocument,
    document_service: DocumentService = Depends(get_document_service),
) -> DocumentComputation:
    return document_service.compute(payload)
