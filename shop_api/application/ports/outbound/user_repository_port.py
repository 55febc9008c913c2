# shop_api/application/ports/outbound/user_repository_port.py

from abc import abstractmethod
from typing import Optional

from shop_api.application.ports.outbound.generic_repository import IRepository


class IUserRepository(IRepository):
    """User repository interface."""

    @abstractmethod
    async def get_by_email(self, db, email: str) -> Optional[object]:
        pass

    @abstractmethod
    async def email_exists(self, db, email: str) -> bool:
        pass
