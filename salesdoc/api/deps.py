"""Request-scoped dependencies"""
from fastapi import Request
from ..services.document_service import DocumentService
from ..services.tax_catalog import TaxCatalog


def get_document_service(request: Request) -> DocumentService:
    """Get document service from app state"""
    return request.app.state.document_service


def get_tax_catalog(request: Request) -> TaxCatalog:
    """Get tax catalog from app state"""
    return request.app.state.tax_catalog
