"""Application lifespan management."""

from __future__ import annotations

from contextlib import asynccontextmanager

from fastapi import FastAPI

from .core.config import get_settings
from .core.logging import get_logger
from .services.document_service import DocumentService
from .services.tax_catalog import TaxCatalog

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = getattr(app.state, "settings", None) or get_settings()
    logger.info("application_startup", env=settings.app_env)

    tax_catalog = TaxCatalog(settings.tax_options)
    app.state.tax_catalog = tax_catalog
    app.state.document_service = DocumentService(settings=settings, tax_catalog=tax_catalog)

    logger.info("application_started", tax_options=len(tax_catalog.options()))

    try:
        yield
    finally:
        logger.info("application_shutdown")
