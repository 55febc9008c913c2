# shop_api/adapters/outbound/persistence/repositories/product_repository.py

from sqlalchemy import Select, select

from shop_api.adapters.outbound.persistence.models import Product
from shop_api.adapters.outbound.persistence.repositories.base_repository import AsyncCRUDBase
from shop_api.application.dtos.product_dto import ProductCreate, ProductUpdate


class AsyncProductCRUD(AsyncCRUDBase[Product, ProductCreate, ProductUpdate]):
    """Repository for Product entity."""

    def listing_query(self, order: str = "desc") -> Select:
        """Query used by the paginated listing, ordered by creation date."""
        ordering = Product.created_at.desc() if order == "desc" else Product.created_at.asc()
        return select(Product).order_by(ordering, Product.id)


# Create singleton instance
product_repository = AsyncProductCRUD(Product)
