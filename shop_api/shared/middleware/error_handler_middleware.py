# shop_api/shared/middleware/error_handler_middleware.py

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware

from shop_api.domain.exceptions import DomainException
from shop_api.shared.utils.error_utils import error_body, normalize_error

logger = logging.getLogger(__name__)


def _log(request: Request, exc: Exception, status_code: int) -> None:
    if status_code >= 500:
        logger.error(f"Unexpected error on {request.method} {request.url.path}", exc_info=exc)
    elif isinstance(exc, DomainException):
        logger.warning(f"[{exc.internal_code}] {request.method} {request.url.path}: {exc.message}")
    else:
        logger.warning(f"{type(exc).__name__} on {request.method} {request.url.path}: {status_code}")


def _to_response(request: Request, exc: Exception) -> JSONResponse:
    status_code, message = normalize_error(exc)
    _log(request, exc, status_code)

    headers = getattr(exc, "headers", None) if status_code == 401 else None
    return JSONResponse(status_code=status_code, content=error_body(message), headers=headers)


class ErrorHandlerMiddleware(BaseHTTPMiddleware):
    """Last line of defense: anything a handler did not turn into a response."""

    async def dispatch(self, request: Request, call_next):
        try:
            return await call_next(request)
        except Exception as e:
            return _to_response(request, e)


async def domain_exception_handler(request: Request, exc: DomainException) -> JSONResponse:
    return _to_response(request, exc)


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return _to_response(request, exc)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return _to_response(request, exc)


def register_exception_handlers(app: FastAPI) -> None:
    """
    Handlers for exceptions FastAPI catches before they reach the middleware.
    """
    app.add_exception_handler(DomainException, domain_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
