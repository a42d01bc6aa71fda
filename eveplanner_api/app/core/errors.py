"""
Error envelope for API responses.

Handlers decide status codes themselves by raising
``fastapi.HTTPException``.  The handlers registered here only reshape
the body into ``{"error": <message>}`` and report request validation
failures as ``400 Bad Request`` with the offending field names.
"""

from typing import Any, Dict, Iterable

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

# Location prefixes FastAPI adds in front of the field name.
_LOCATION_PREFIXES = {"body", "query", "path", "header", "cookie", "form"}


def describe_validation_errors(errors: Iterable[Dict[str, Any]]) -> str:
    """Build a readable message such as ``fullName: Field required``."""
    parts = []
    for error in errors:
        loc = [str(item) for item in error.get("loc", ()) if item not in _LOCATION_PREFIXES]
        field = ".".join(loc)
        message = error.get("msg", "Invalid value")
        parts.append(f"{field}: {message}" if field else message)
    return "; ".join(parts) or "Invalid request"


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        {"error": exc.detail},
        status_code=exc.status_code,
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return JSONResponse(
        {"error": describe_validation_errors(exc.errors())},
        status_code=status.HTTP_400_BAD_REQUEST,
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
