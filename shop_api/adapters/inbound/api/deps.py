# shop_api/adapters/inbound/api/deps.py

"""
Dependencies for injection into API endpoints.

This module defines functions that provide dependencies via
FastAPI Depends() for authentication and database access.
"""

import logging
from typing import Optional

from fastapi import Depends, HTTPException, Request, Security, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.ext.asyncio import AsyncSession

from shop_api.adapters.configuration.config import settings
from shop_api.adapters.outbound.persistence.database import get_db
from shop_api.adapters.outbound.persistence.repositories.token_repository import (
    token_repository,
)
from shop_api.adapters.outbound.security.token_service import get_token_service
from shop_api.application.ports.outbound.token_service_port import ITokenService
from shop_api.domain.exceptions import InvalidTokenException
from shop_api.domain.models.identity import DecodedIdentity
from shop_api.shared.utils.messages_utils import get_message

# Configure logger
logger = logging.getLogger(__name__)

# Só documenta o esquema no OpenAPI; a validação do header é feita abaixo
bearer_scheme = HTTPBearer(auto_error=False)


########################################################################
# Database Session Management
########################################################################

# Alias for get_db used by the endpoints
get_session = get_db


########################################################################
# User Token Authentication
########################################################################


def _unauthorized(message: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=message,
        headers={"WWW-Authenticate": "Bearer"},
    )


def extract_bearer_token(authorization: Optional[str]) -> str:
    """
    Pull the raw token out of an ``Authorization`` header value.

    Raises:
        HTTPException: 401 when the header is missing, uses another scheme
            or carries no token.
    """
    language = settings.MESSAGES_LANGUAGE

    if not authorization:
        raise _unauthorized(get_message("auth_header_missing", language))

    scheme, _, token = authorization.strip().partition(" ")
    if scheme.lower() != "bearer":
        raise _unauthorized(get_message("auth_scheme_invalid", language))

    token = token.strip()
    if not token:
        raise _unauthorized(get_message("auth_token_missing", language))

    return token


async def get_current_identity(
    request: Request,
    _: Optional[HTTPAuthorizationCredentials] = Security(bearer_scheme),
    db: AsyncSession = Depends(get_session),
    token_service: ITokenService = Depends(get_token_service),
) -> DecodedIdentity:
    """
    Authenticate the request from its bearer token.

    The checks run in order and the first failure rejects the request:
    header present, Bearer scheme, non-empty token, not revoked, valid
    signature and expiry. On success the identity and the raw token are
    attached to ``request.state``.

    Raises:
        HTTPException: 401 for every rejection
    """
    token = extract_bearer_token(request.headers.get("Authorization"))

    # Verificar se token está na blacklist - ponto crítico
    if await token_repository.is_blacklisted(db, token):
        logger.warning("Rejected revoked token")
        raise _unauthorized(get_message("auth_token_revoked", settings.MESSAGES_LANGUAGE))

    try:
        identity = token_service.verify(token)
    except InvalidTokenException as e:
        logger.warning(f"Rejected token: {e.message}")
        raise _unauthorized(e.message)

    request.state.identity = identity
    request.state.token = token
    return identity


async def get_current_token(
    request: Request,
    _: DecodedIdentity = Depends(get_current_identity),
) -> str:
    """Raw token accepted by the gate (used by logout)."""
    return request.state.token
