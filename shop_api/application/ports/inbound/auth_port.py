# shop_api/application/ports/inbound/auth_port.py

from abc import ABC, abstractmethod
from uuid import UUID
from typing import Union

from shop_api.application.dtos.user_dto import UserCreate, UserLogin


class IAuthUseCase(ABC):
    """Interface for authentication/session use cases."""

    @abstractmethod
    async def register_user(self, user_input: UserCreate):
        pass

    @abstractmethod
    async def login_user(self, user_input: UserLogin) -> str:
        pass

    @abstractmethod
    async def logout_user(self, token: str) -> None:
        pass

    @abstractmethod
    async def get_current_user(self, user_id: Union[str, UUID]):
        pass
