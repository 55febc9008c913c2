# shop_api/application/use_cases/auth_use_cases.py

"""
Service for user authentication.

This module implements the business logic for the session lifecycle:
register, login, logout (token blacklist) and current user lookup.
"""

import logging
from typing import Optional, Union
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from shop_api.adapters.configuration.config import settings
from shop_api.adapters.outbound.persistence.models import User
from shop_api.adapters.outbound.persistence.repositories import user_repository, token_repository
from shop_api.adapters.outbound.security.password_hasher import PasswordHasher
from shop_api.adapters.outbound.security.token_service import token_service as default_token_service
from shop_api.application.dtos.user_dto import UserCreate, UserLogin
from shop_api.application.ports.inbound.auth_port import IAuthUseCase
from shop_api.application.ports.outbound.token_service_port import ITokenService
from shop_api.domain.exceptions import (
    DomainException,
    ResourceAlreadyExistsException,
    ResourceNotFoundException,
    InvalidCredentialsException,
    DatabaseOperationException,
)
from shop_api.shared.utils.datetime_utils import DateTimeUtil
from shop_api.shared.utils.input_validation import InputValidator
from shop_api.shared.utils.messages_utils import get_message

logger = logging.getLogger(__name__)


class AsyncAuthService(IAuthUseCase):
    """
    Application service for authentication-related operations.

    Responsibilities:
    - Register new users
    - Authenticate users and issue tokens
    - Revoke tokens on logout
    - Resolve the current user from a verified identity
    """

    def __init__(
            self,
            db_session: AsyncSession,
            token_service: Optional[ITokenService] = None,
            hasher: type = PasswordHasher,
    ):
        """Initialize with a database session and the security collaborators."""
        self.db = db_session
        self.token_service = token_service or default_token_service
        self.hasher = hasher
        self.language = settings.MESSAGES_LANGUAGE

    async def register_user(self, user_input: UserCreate) -> User:
        """
        Register a new user.

        Raises:
            ResourceAlreadyExistsException: Email already registered (advisory
                check or unique index violation).
        """
        duplicate_message = get_message("user_already_exists", self.language)

        if await user_repository.email_exists(self.db, user_input.email):
            logger.warning("Registration failed - duplicate email")
            raise ResourceAlreadyExistsException(message=duplicate_message)

        hashed_password = await self.hasher.hash_password(user_input.password)
        user_data = user_input.model_dump(mode="json")
        user_data["password"] = hashed_password

        try:
            user = await user_repository.create(self.db, obj_in=user_data)
        except ResourceAlreadyExistsException:
            # outra requisição gravou o mesmo email entre a checagem e o insert
            logger.warning("Registration failed - unique index on email")
            raise ResourceAlreadyExistsException(message=duplicate_message)

        logger.info(f"User registered successfully: {user.id}")
        return user

    async def login_user(self, user_input: UserLogin) -> str:
        """
        Authenticate user and issue an access token.

        Unknown email and wrong password fail the same way, so the response
        does not tell which accounts exist.

        Raises:
            InvalidCredentialsException: If credentials are incorrect.
        """
        user = await user_repository.get_by_email(self.db, user_input.email)

        if not user or not await self.hasher.verify_password(user_input.password, user.password):
            logger.warning("Authentication failed")
            raise InvalidCredentialsException(message=get_message("generic_invalid_credentials", self.language))

        token = self.token_service.issue(str(user.id), user.email)

        logger.info(f"User logged in successfully: {user.id}")
        return token

    async def logout_user(self, token: str) -> None:
        """
        Revoke a token by adding it to the blacklist.

        The entry lives as long as the token itself would. Logging out twice
        with the same token is not an error.
        """
        expires_at = self.token_service.get_expiration(token)
        if expires_at is None:
            expires_at = DateTimeUtil.add_minutes(DateTimeUtil.utcnow(), settings.BLACKLIST_FALLBACK_MINUTES)

        try:
            created = await token_repository.add_to_blacklist(self.db, token, expires_at)
        except DomainException:
            raise
        except Exception as e:
            logger.exception("Unexpected error during logout")
            raise DatabaseOperationException(message="Error revoking token.", original_error=e)

        if created:
            logger.info("Token revoked until %s", expires_at.isoformat())
        else:
            logger.info("Token was already revoked")

    async def get_current_user(self, user_id: Union[str, UUID]) -> User:
        """
        Return the user behind a verified identity.

        Raises:
            ResourceNotFoundException: If the user no longer exists.
        """
        not_found = get_message("user_not_found", self.language)

        user_uuid = InputValidator.parse_uuid(user_id)
        if user_uuid is None:
            raise ResourceNotFoundException(message=not_found, resource_id=user_id)

        user = await user_repository.get(self.db, id=user_uuid)
        if not user:
            logger.warning("User not found: %s", user_id)
            raise ResourceNotFoundException(message=not_found, resource_id=user_id)
        return user
