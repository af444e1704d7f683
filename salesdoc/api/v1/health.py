"""Health and version endpoints"""
from fastapi import APIRouter, Depends
from ...core.config import Settings, get_settings


router = APIRouter()


@router.get("/health")
async def health(settings: Settings = Depends(get_settings)):
    """Liveness check"""
    return {"ok": True, "version": settings.app_version}


@router.get("/version")
async def version(settings: Settings = Depends(get_settings)):
    """Version and formatting defaults"""
    return {
        "name": settings.app_name,
        "version": settings.app_version,
        "default_locale": settings.default_locale,
        "default_currency": settings.default_currency,
    }
