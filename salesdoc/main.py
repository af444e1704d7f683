"""FastAPI application factory."""

from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path
from typing import Iterable, Optional

from fastapi import Depends, FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from fastapi.templating import Jinja2Templates
from starlette.exceptions import HTTPException as StarletteHTTPException

from .api.errors import (
    APIError,
    api_error_handler,
    general_exception_handler,
    http_exception_handler,
    salesdoc_error_handler,
    validation_error_handler,
)
from .api.middleware import LoggingMiddleware, RequestIDMiddleware
from .api.v1.router import create_v1_router
from .core.config import Settings, get_settings
from .core.exceptions import SalesDocError
from .core.logging import setup_logging
from .core.security import enforce_api_key
from .lifecycles import lifespan

templates = Jinja2Templates(directory=str(Path(__file__).parent / "templates"))


def _build_links(base_url: str) -> Iterable[tuple[str, dict[str, str]]]:
    """Return the curated list of root endpoint links."""

    def absolute(path: str) -> str:
        return f"{base_url}{path.lstrip('/')}"

    entries = (
        ("docs", {"label": "Interactive API docs", "path": "docs"}),
        ("health", {"label": "Service health", "path": "v1/health"}),
        ("tax_options", {"label": "Tax option catalogue", "path": "v1/tax-options"}),
        ("version", {"label": "Service version", "path": "v1/version"}),
    )

    return tuple(
        (key, {"label": data["label"], "url": absolute(data["path"])})
        for key, data in entries
    )


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or get_settings()
    setup_logging(settings.log_level, settings.log_json, service=settings.app_name)

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        lifespan=lifespan,
        dependencies=[Depends(enforce_api_key)],
    )
    app.state.settings = settings
    app.dependency_overrides[get_settings] = lambda: settings

    # Last added runs first: the request ID is bound before access logging
    app.add_middleware(LoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"]
    )

    app.add_exception_handler(APIError, api_error_handler)
    app.add_exception_handler(SalesDocError, salesdoc_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, general_exception_handler)

    @app.get("/", include_in_schema=False)
    async def root(request: Request) -> Response:
        """Serve the landing page, or JSON when the client asks for it."""

        base_url = str(request.base_url)
        if not base_url.endswith("/"):
            base_url = f"{base_url}/"

        links = _build_links(base_url)

        accepts = request.headers.get("accept", "").lower()
        wants_json = "application/json" in accepts and "text/html" not in accepts

        if wants_json:
            return JSONResponse(
                {
                    "status": "available",
                    "service": settings.app_name,
                    "version": settings.app_version,
                    "links": {name: link["url"] for name, link in links},
                }
            )

        context = {
            "service_name": settings.app_name,
            "service_version": settings.app_version,
            "links": links,
            "timestamp": datetime.now(tz=timezone.utc).isoformat(),
        }
        return templates.TemplateResponse(request, "home.html", context)

    app.include_router(create_v1_router())
    return app
