"""
将异常转换为统一的JSON错误响应
"""

import logging
from datetime import datetime, timezone
from http import HTTPStatus
from typing import Dict, Optional
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm.exc import StaleDataError
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.status import HTTP_400_BAD_REQUEST, HTTP_409_CONFLICT, HTTP_500_INTERNAL_SERVER_ERROR
from app.core.exceptions import AppError, ValidationFailedError
from app.schemas.common import ErrorResponse

logger = logging.getLogger(__name__)

GENERIC_ERROR_MESSAGE = "An unexpected error occurred. Please try again later."


def error_response(
    status_code: int,
    error: str,
    message: str,
    path: str,
    validation_errors: Optional[Dict[str, str]] = None,
) -> JSONResponse:
    body = ErrorResponse(
        timestamp=datetime.now(timezone.utc),
        status=status_code,
        error=error,
        message=message,
        path=path,
        validation_errors=validation_errors,
    )
    return JSONResponse(
        status_code=status_code,
        content=body.model_dump(mode="json", by_alias=True, exclude_none=True),
    )


def _field_name(loc) -> str:
    parts = [str(part) for part in loc if part not in ("body", "query", "path", "header")]
    return ".".join(parts) or "body"


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    logger.warning("%s on %s: %s", type(exc).__name__, request.url.path, exc.message)
    errors = exc.errors if isinstance(exc, ValidationFailedError) else None
    return error_response(exc.status_code, exc.error, exc.message, request.url.path, errors)


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = {}
    for err in exc.errors():
        errors.setdefault(_field_name(err.get("loc", ())), err.get("msg", "Invalid value"))
    logger.warning("Validation failed on %s: %s", request.url.path, errors)
    return error_response(
        HTTP_400_BAD_REQUEST, "Validation Failed", "Invalid request data", request.url.path, errors
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return error_response(
        exc.status_code,
        _reason_phrase(exc.status_code),
        str(exc.detail),
        request.url.path,
    )


async def stale_data_handler(request: Request, exc: StaleDataError) -> JSONResponse:
    logger.warning("Concurrent modification on %s: %s", request.url.path, exc)
    return error_response(
        HTTP_409_CONFLICT,
        "Conflict",
        "The resource was modified by another request. Reload and try again.",
        request.url.path,
    )


async def integrity_error_handler(request: Request, exc: IntegrityError) -> JSONResponse:
    logger.warning("Integrity violation on %s: %s", request.url.path, exc.orig)
    return error_response(
        HTTP_409_CONFLICT, "Conflict", "Data integrity violation", request.url.path
    )


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error("Unexpected error on %s", request.url.path, exc_info=exc)
    return error_response(
        HTTP_500_INTERNAL_SERVER_ERROR,
        "Internal Server Error",
        GENERIC_ERROR_MESSAGE,
        request.url.path,
    )


def _reason_phrase(status_code: int) -> str:
    try:
        return HTTPStatus(status_code).phrase
    except ValueError:
        return "Error"


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(StaleDataError, stale_data_handler)
    app.add_exception_handler(IntegrityError, integrity_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
