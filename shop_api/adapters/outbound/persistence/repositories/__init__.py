# shop_api/adapters/outbound/persistence/repositories/__init__.py

from shop_api.adapters.outbound.persistence.repositories.user_repository import user_repository
from shop_api.adapters.outbound.persistence.repositories.product_repository import product_repository
from shop_api.adapters.outbound.persistence.repositories.token_repository import token_repository

__all__ = [
    "user_repository",
    "product_repository",
    "token_repository",
]
