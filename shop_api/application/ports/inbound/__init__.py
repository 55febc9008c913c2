# shop_api/application/ports/inbound/__init__.py

from .auth_port import IAuthUseCase
from .product_port import IProductUseCase

__all__ = [
    "IAuthUseCase",
    "IProductUseCase",
]
