# shop_api/application/ports/inbound/product_port.py

from abc import ABC, abstractmethod

from fastapi_pagination import Params

from shop_api.application.dtos.product_dto import ProductCreate, ProductUpdate


class IProductUseCase(ABC):
    """Interface for product use cases."""

    @abstractmethod
    async def create_product(self, data: ProductCreate):
        pass

    @abstractmethod
    async def list_products(self, params: Params, order: str = "desc"):
        pass

    @abstractmethod
    async def get_product(self, product_id: str):
        pass

    @abstractmethod
    async def update_product(self, product_id: str, data: ProductUpdate):
        pass

    @abstractmethod
    async def delete_product(self, product_id: str) -> None:
        pass
