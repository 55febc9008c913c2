# shop_api/domain/services/auth_service.py

from datetime import datetime, timedelta, timezone
from typing import Optional, Dict, Any
import uuid

ACCESS_TOKEN_TYPE = "access"
REQUIRED_CLAIMS = ("sub", "email", "iat", "exp", "type", "jti")


class AuthService:
    """
    Domain service for authentication-related business logic.
    """

    @staticmethod
    def create_token_payload(
            subject: str,
            email: str,
            expires_delta: timedelta,
            token_type: str = ACCESS_TOKEN_TYPE,
            now: Optional[datetime] = None,
    ) -> Dict[str, Any]:
        """
        Create a token payload with standard claims.

        Args:
            subject: The user ID the token is issued for
            email: The user's email, carried so requests need no lookup
            expires_delta: Token lifetime
            token_type: Type of token
            now: Issue instant (defaults to current UTC time)

        Returns:
            Dict with all token claims
        """
        issued_at = now or datetime.now(timezone.utc)
        expire = issued_at + expires_delta

        return {
            "sub": str(subject),
            "email": email,
            "iat": int(issued_at.timestamp()),
            "exp": int(expire.timestamp()),
            "type": token_type,
            "jti": str(uuid.uuid4()),
        }

    @staticmethod
    def has_required_claims(token_payload: Dict[str, Any], expected_type: str = ACCESS_TOKEN_TYPE) -> bool:
        """
        Check a decoded payload carries every claim and the expected type.

        Signature and expiry are checked by the token library, not here.
        """
        if not all(token_payload.get(k) for k in REQUIRED_CLAIMS):
            return False

        return token_payload.get("type") == expected_type
