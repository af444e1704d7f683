"""Versioned API router registration."""

from fastapi import APIRouter

from .formatting import router as formatting_router
from .health import router as health_router
from .tax_options import router as tax_options_router
from .totals import router as totals_router


def create_v1_router() -> APIRouter:
    """Create and configure v1 API router"""
    router = APIRouter(prefix="/v1")

    router.include_router(health_router, tags=["health"])
    router.include_router(tax_options_router, tags=["tax"])
    router.include_router(totals_router, tags=["totals"])
    router.include_router(formatting_router, tags=["formatting"])

    return router
