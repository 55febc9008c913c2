# shop_api/shared/utils/error_utils.py

"""
Error normalization.

Maps any failure to the (status, message) pair sent on the wire. Pure: no
logging, no response building. Callers decide how to log.
"""

from typing import Dict, Tuple

from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from shop_api.adapters.configuration.config import settings
from shop_api.application.dtos.base_dto import issues_from_errors
from shop_api.domain.exceptions import DomainException, ValidationFailure
from shop_api.shared.utils.messages_utils import get_message


def normalize_error(exc: Exception) -> Tuple[int, str]:
    """
    Return the HTTP status and client-facing message for an exception.

    - ValidationFailure (or FastAPI's RequestValidationError): 400 and the
      first issue's message only.
    - DomainException below 500: its own status and message.
    - HTTPException: its status and detail.
    - Anything else, 5xx domain errors included: 500 with a generic message.
    """
    if isinstance(exc, RequestValidationError):
        exc = ValidationFailure(issues_from_errors(list(exc.errors())))

    if isinstance(exc, ValidationFailure):
        return 400, exc.message

    if isinstance(exc, DomainException) and exc.status_code < 500:
        return exc.status_code, exc.message

    if isinstance(exc, StarletteHTTPException) and exc.status_code < 500:
        return exc.status_code, str(exc.detail)

    return 500, get_message("internal_error", settings.MESSAGES_LANGUAGE)


def error_body(message: str) -> Dict[str, str]:
    return {"error": message}
