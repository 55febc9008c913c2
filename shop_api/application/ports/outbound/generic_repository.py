# shop_api/application/ports/outbound/generic_repository.py

from abc import ABC, abstractmethod
from typing import TypeVar, Generic, Optional, Any

T = TypeVar("T")


class IRepository(Generic[T], ABC):
    """Generic repository interface."""

    @abstractmethod
    async def get(self, db, id: Any) -> Optional[T]:
        pass

    @abstractmethod
    async def create(self, db, *, obj_in: Any) -> T:
        pass

    @abstractmethod
    async def update(self, db, *, db_obj: T, obj_in: Any) -> T:
        pass

    @abstractmethod
    async def remove(self, db, *, id: Any) -> T:
        pass
