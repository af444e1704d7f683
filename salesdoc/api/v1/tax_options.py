"""Tax option catalogue endpoint"""
from typing import List

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from ...models.documents import TaxOption
from ...services.tax_catalog import TaxCatalog
from ..deps import get_tax_catalog


router = APIRouter()


class TaxOptionsResponse(BaseModel):
    options: List[TaxOption]


@router.get("/tax-options", response_model=TaxOptionsResponse)
async def list_tax_options(catalog: TaxCatalog = Depends(get_tax_catalog)):
    """List the GST/TDS/TCS rates a document can select"""
    return {"options": catalog.options()}
