"""Centralized exception handlers for the FastAPI app.

Register with register_exception_handlers(app). Maps domain and framework
exceptions to the search response envelope:
{"success": false, "status_code": ..., "message": ..., "data": null, "errors": [...]}.
"""

import logging
from typing import Any

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.core.config import get_settings
from app.domain.exceptions import HotelSearchException, SearchValidationException

logger = logging.getLogger(__name__)

# Map domain error_code to HTTP status
_ERROR_CODE_STATUS: dict[str, int] = {
    "VALIDATION_ERROR": 400,
    "DATA_ACCESS_ERROR": 503,
    "MAPPING_ERROR": 500,
}


def _envelope(status: int, message: str, errors: list[Any]) -> JSONResponse:
    return JSONResponse(
        status_code=status,
        content={
            "success": False,
            "status_code": status,
            "message": message,
            "data": None,
            "errors": errors,
        },
    )


def _hotel_search_exception_handler(
    request: Request, exc: HotelSearchException
) -> JSONResponse:
    """Return the envelope with the status mapped from exc.error_code.

    Validation failures list every violation; other failures carry the
    exception's to_dict() as the single error.
    """
    status = _ERROR_CODE_STATUS.get(exc.error_code, 400)
    if isinstance(exc, SearchValidationException):
        return _envelope(status, exc.message, list(exc.violations))
    if status >= 500:
        logger.error(
            "%s on %s %s: %s",
            exc.error_code,
            request.method,
            request.url.path,
            exc.details,
        )
    return _envelope(status, exc.message, [exc.to_dict()])


def _validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Return 422 when a query parameter cannot be parsed (e.g. a non-date)."""
    return _envelope(422, "Request validation failed", jsonable_encoder(exc.errors()))


def _http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """Return the envelope for Starlette HTTP exceptions (status + detail)."""
    return _envelope(
        exc.status_code,
        str(exc.detail),
        [{"error": "HTTP_ERROR", "message": exc.detail}],
    )


def _generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Return 500; include detail only when debug is True."""
    logger.exception("Unhandled exception: %s", exc)
    settings = get_settings()
    detail: Any = str(exc) if settings.debug else "Internal server error"
    return _envelope(500, detail, [{"error": "INTERNAL_ERROR", "message": detail}])


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers on the FastAPI app.

    Call once after creating the app. Handlers: HotelSearchException (and
    subclasses), RequestValidationError, StarletteHTTPException, generic Exception.
    """
    app.add_exception_handler(HotelSearchException, _hotel_search_exception_handler)
    app.add_exception_handler(RequestValidationError, _validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, _http_exception_handler)
    app.add_exception_handler(Exception, _generic_exception_handler)
