# shop_api/adapters/outbound/persistence/models/product_model.py

import uuid

from sqlalchemy import Column, String, Text, Float, Integer, DateTime, Uuid

from shop_api.adapters.outbound.persistence.models.base_model import Base


class Product(Base):
    """
    Produto do catálogo.

    Attributes:
        id: Identificador único (UUID)
        name: Nome do produto
        description: Descrição
        price: Preço unitário (>= 0)
        quantity: Quantidade em estoque (>= 1 na criação)
    """
    __tablename__ = "products"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    name = Column(String(255), nullable=False)
    description = Column(Text, nullable=False)
    price = Column(Float, nullable=False)
    quantity = Column(Integer, nullable=False)
    created_at = Column(DateTime, nullable=True, index=True)
    updated_at = Column(DateTime, nullable=True)

    def __repr__(self) -> str:
        return f"<Product(name={self.name}, quantity={self.quantity})>"
