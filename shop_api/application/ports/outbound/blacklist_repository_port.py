# shop_api/application/ports/outbound/blacklist_repository_port.py

from abc import ABC, abstractmethod
from datetime import datetime


class IBlacklistRepository(ABC):
    """Deny-list of tokens revoked before their natural expiry."""

    @abstractmethod
    async def add_to_blacklist(self, db, token: str, expires_at: datetime) -> bool:
        pass

    @abstractmethod
    async def is_blacklisted(self, db, token: str) -> bool:
        pass

    @abstractmethod
    async def cleanup_expired(self, db) -> int:
        pass
