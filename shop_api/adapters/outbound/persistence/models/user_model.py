# shop_api/adapters/outbound/persistence/models/user_model.py

"""
Modelo de usuário.
"""

import uuid

from sqlalchemy import Column, String, DateTime, Uuid

from shop_api.adapters.outbound.persistence.models.base_model import Base
from shop_api.domain.models.user_role import UserRole


class User(Base):
    """
    Modelo de usuário do sistema.

    Attributes:
        id: Identificador único do usuário (UUID)
        username: Nome de exibição
        email: Email do usuário (utilizado para login, único)
        password: Hash da senha do usuário, nunca a senha em texto plano
        role: admin, user ou manager
        avatar: URL opcional do avatar
        created_at: Data e hora de criação
        updated_at: Data e hora da última atualização
    """
    __tablename__ = "users"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    username = Column(String(100), nullable=False)
    # unique=True é a garantia real contra cadastros simultâneos com o mesmo email
    email = Column(String(255), unique=True, nullable=False, index=True)
    password = Column(String, nullable=False)
    role = Column(String(20), nullable=False, default=UserRole.USER.value)
    avatar = Column(String, nullable=True)
    created_at = Column(DateTime, nullable=True)
    updated_at = Column(DateTime, nullable=True)

    def __repr__(self) -> str:
        """Representação em string do objeto User."""
        return f"<User(email={self.email}, role={self.role})>"
