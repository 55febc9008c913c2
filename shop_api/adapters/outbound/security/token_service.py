# shop_api/adapters/outbound/security/token_service.py

import logging
from datetime import datetime, timedelta
from typing import Dict, Any, Optional

from jose import jwt, JWTError, ExpiredSignatureError

from shop_api.adapters.configuration.config import Settings, settings
from shop_api.application.ports.outbound.token_service_port import ITokenService
from shop_api.domain.exceptions import InvalidTokenException
from shop_api.domain.models.identity import DecodedIdentity
from shop_api.domain.services.auth_service import AuthService
from shop_api.shared.utils.datetime_utils import DateTimeUtil
from shop_api.shared.utils.messages_utils import get_message

# Configure logger
logger = logging.getLogger(__name__)


class JWTTokenService(ITokenService):
    """
    Issues and verifies signed session tokens.

    The secret is injected at construction time; rotating it means building
    a new service, which invalidates every outstanding token.
    """

    def __init__(self, secret_key: str, algorithm: str = "HS256", expire_minutes: int = 60 * 24):
        if not secret_key:
            raise ValueError("A signing secret is required")
        self._secret_key = secret_key
        self.algorithm = algorithm
        self.default_ttl = timedelta(minutes=expire_minutes)

    @classmethod
    def from_settings(cls, config: Settings) -> "JWTTokenService":
        return cls(
            secret_key=config.SECRET_KEY.get_secret_value(),
            algorithm=config.ALGORITHM,
            expire_minutes=config.ACCESS_TOKEN_EXPIRE_MINUTES,
        )

    def issue(self, user_id: str, email: str, ttl: Optional[timedelta] = None) -> str:
        """Create an access token for authentication."""
        payload = AuthService.create_token_payload(
            subject=user_id,
            email=email,
            expires_delta=ttl if ttl is not None else self.default_ttl,
        )
        token = jwt.encode(payload, self._secret_key, algorithm=self.algorithm)
        logger.debug(f"Access token created for subject={user_id}")
        return token

    def _decode(self, token: str, verify_exp: bool = True) -> Dict[str, Any]:
        return jwt.decode(
            token,
            self._secret_key,
            algorithms=[self.algorithm],
            options={"verify_exp": verify_exp},
        )

    def verify(self, token: str) -> DecodedIdentity:
        """
        Validate an access token.

        Raises:
            InvalidTokenException: bad signature, malformed, missing claims or expired.
        """
        language = settings.MESSAGES_LANGUAGE
        try:
            payload = self._decode(token)
        except ExpiredSignatureError:
            logger.warning("Expired access token presented")
            raise InvalidTokenException(message=get_message("auth_token_expired", language))
        except JWTError as e:
            logger.warning("Invalid access token: %s", str(e))
            raise InvalidTokenException(message=get_message("auth_token_invalid", language))

        if not AuthService.has_required_claims(payload):
            logger.warning("Access token with missing claims or incorrect type detected.")
            raise InvalidTokenException(message=get_message("auth_token_invalid", language))

        return DecodedIdentity(user_id=payload["sub"], email=payload["email"])

    def get_expiration(self, token: str) -> Optional[datetime]:
        """
        Read the expiry of a correctly signed token, even if already expired.

        Returns None when the token cannot be decoded or carries no exp.
        """
        try:
            payload = self._decode(token, verify_exp=False)
        except JWTError:
            return None

        exp = payload.get("exp")
        if not isinstance(exp, (int, float)):
            return None
        return DateTimeUtil.timestamp_to_datetime(exp)


# Instância padrão construída a partir das configurações
token_service = JWTTokenService.from_settings(settings)


def get_token_service() -> ITokenService:
    """FastAPI dependency; override it to inject another secret in tests."""
    return token_service
