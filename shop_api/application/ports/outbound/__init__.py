# shop_api/application/ports/outbound/__init__.py

from .generic_repository import IRepository
from .user_repository_port import IUserRepository
from .blacklist_repository_port import IBlacklistRepository
from .token_service_port import ITokenService

__all__ = [
    "IRepository",
    "IUserRepository",
    "IBlacklistRepository",
    "ITokenService",
]
