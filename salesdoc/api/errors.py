"""API exceptions and the error envelope handlers"""
from typing import Any, Dict, Optional
from fastapi import Request, status
from fastapi.responses import JSONResponse
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
import structlog

from ..core.exceptions import EmptyDocument, SalesDocError, UnknownTaxOption, ValueOutOfRange


logger = structlog.get_logger(__name__)


# Engine errors that reach the API; anything else is a 400
ENGINE_ERROR_STATUS = {
    ValueOutOfRange: status.HTTP_422_UNPROCESSABLE_ENTITY,
    UnknownTaxOption: status.HTTP_422_UNPROCESSABLE_ENTITY,
    EmptyDocument: status.HTTP_409_CONFLICT,
}


class APIError(Exception):
    """Base API error with error envelope"""

    def __init__(
        self,
        code: str,
        message: str,
        status_code: int = 400,
        details: Optional[Dict[str, Any]] = None
    ):
        self.code = code
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        super().__init__(message)


def _request_id(request: Request) -> str:
    return getattr(request.state, "request_id", "unknown")


def create_error_response(
    code: str,
    message: str,
    request_id: str,
    details: Optional[Dict[str, Any]] = None,
    status_code: int = 400
) -> JSONResponse:
    """Create standardized error response"""
    return JSONResponse(
        status_code=status_code,
        content={
            "error": {
                "code": code,
                "message": message,
                "request_id": request_id,
                "details": jsonable_encoder(details or {})
            }
        }
    )


async def api_error_handler(request: Request, exc: APIError) -> JSONResponse:
    request_id = _request_id(request)

    logger.error(
        "api_error",
        code=exc.code,
        message=exc.message,
        request_id=request_id,
        path=request.url.path
    )

    return create_error_response(
        code=exc.code,
        message=exc.message,
        request_id=request_id,
        details=exc.details,
        status_code=exc.status_code
    )


async def salesdoc_error_handler(request: Request, exc: SalesDocError) -> JSONResponse:
    """Handle engine errors (out-of-range amounts, unknown tax options, empty documents)"""
    request_id = _request_id(request)
    status_code = ENGINE_ERROR_STATUS.get(type(exc), status.HTTP_400_BAD_REQUEST)

    logger.warning(
        "engine_error",
        code=exc.code,
        message=exc.message,
        request_id=request_id,
        path=request.url.path
    )

    return create_error_response(
        code=exc.code,
        message=exc.message,
        request_id=request_id,
        details=exc.details,
        status_code=status_code
    )


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Handle Pydantic validation errors"""
    request_id = _request_id(request)

    logger.warning(
        "validation_error",
        errors=jsonable_encoder(exc.errors()),
        request_id=request_id,
        path=request.url.path
    )

    return create_error_response(
        code="VALIDATION_ERROR",
        message="Request validation failed",
        request_id=request_id,
        details={"errors": exc.errors()},
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    request_id = _request_id(request)

    logger.warning(
        "http_exception",
        status_code=exc.status_code,
        detail=exc.detail,
        request_id=request_id,
        path=request.url.path
    )

    return create_error_response(
        code="HTTP_ERROR",
        message=str(exc.detail),
        request_id=request_id,
        status_code=exc.status_code
    )


async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle unexpected exceptions"""
    request_id = _request_id(request)

    logger.error(
        "unhandled_exception",
        exc_info=exc,
        request_id=request_id,
        path=request.url.path
    )

    return create_error_response(
        code="INTERNAL_ERROR",
        message="An internal error occurred",
        request_id=request_id,
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR
    )
