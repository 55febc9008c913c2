# shop_api/application/ports/outbound/token_service_port.py

from abc import ABC, abstractmethod
from typing import Optional
from datetime import datetime, timedelta

from shop_api.domain.models.identity import DecodedIdentity


class ITokenService(ABC):
    """Token handling interface."""

    @abstractmethod
    def issue(self, user_id: str, email: str, ttl: Optional[timedelta] = None) -> str:
        pass

    @abstractmethod
    def verify(self, token: str) -> DecodedIdentity:
        pass

    @abstractmethod
    def get_expiration(self, token: str) -> Optional[datetime]:
        pass
