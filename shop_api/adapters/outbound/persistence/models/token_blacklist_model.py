# shop_api/adapters/outbound/persistence/models/token_blacklist_model.py

"""
Modelo para blacklist de tokens.

Este módulo define o modelo usado para armazenar tokens revogados
para prevenir sua reutilização após o logout.
"""

from sqlalchemy import Column, String, DateTime
from shop_api.adapters.outbound.persistence.models.base_model import Base


class TokenBlacklist(Base):
    """
    Modelo para armazenar tokens revogados.

    Attributes:
        token: o token bearer bruto (único)
        expires_at: quando o registro deixa de importar (expiração do próprio token)
        revoked_at: Data e hora em que o token foi revogado
    """
    __tablename__ = "token_blacklist"

    token = Column(String, primary_key=True)
    expires_at = Column(DateTime(timezone=False), nullable=False, index=True)
    revoked_at = Column(DateTime(timezone=False), nullable=False)
