# shop_api/adapters/outbound/persistence/models/__init__.py

"""
Módulo de modelos de dados.

Este módulo exporta todos os modelos SQLAlchemy do sistema,
facilitando a importação e uso em outros módulos.
"""

from shop_api.adapters.outbound.persistence.models.base_model import Base
from shop_api.adapters.outbound.persistence.models.user_model import User
from shop_api.adapters.outbound.persistence.models.product_model import Product
from shop_api.adapters.outbound.persistence.models.token_blacklist_model import TokenBlacklist
from shop_api.adapters.outbound.persistence.events import register_datetime_events

register_datetime_events()

__all__ = [
    "Base",
    "User",
    "Product",
    "TokenBlacklist",
]
