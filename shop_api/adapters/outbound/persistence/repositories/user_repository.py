# shop_api/adapters/outbound/persistence/repositories/user_repository.py

"""
Async repository for User entity (user_repository.py).

Handles user lookups and creation. The email uniqueness check here is only
advisory; the unique index on users.email is what actually prevents
duplicates under concurrent registrations.
"""

from typing import Optional, Dict, Any

from sqlalchemy.ext.asyncio import AsyncSession

from shop_api.adapters.outbound.persistence.models import User
from shop_api.adapters.outbound.persistence.repositories.base_repository import AsyncCRUDBase
from shop_api.application.dtos.user_dto import UserCreate
from shop_api.application.ports.outbound.user_repository_port import IUserRepository


class AsyncUserCRUD(AsyncCRUDBase[User, UserCreate, Dict[str, Any]], IUserRepository):
    """
    Concrete repository for User entity, fully async.

    Extends AsyncCRUDBase and implements IUserRepository.
    """

    async def get_by_email(self, db: AsyncSession, email: str) -> Optional[User]:
        return await self.get_by_field(db, "email", email)

    async def email_exists(self, db: AsyncSession, email: str) -> bool:
        return await self.exists(db, email=email)


# Create singleton instance
user_repository = AsyncUserCRUD(User)
