# shop_api/application/use_cases/product_use_cases.py

"""
Service for product management.

Thin layer over the product repository: input already arrives validated,
so the only rule here is turning unknown ids into a 404.
"""

from __future__ import annotations

import logging
from typing import Union
from uuid import UUID

from fastapi_pagination import Params
from fastapi_pagination.ext.sqlalchemy import apaginate
from sqlalchemy.ext.asyncio import AsyncSession

from shop_api.adapters.configuration.config import settings
from shop_api.adapters.outbound.persistence.models import Product
from shop_api.adapters.outbound.persistence.repositories import product_repository
from shop_api.application.dtos.product_dto import ProductCreate, ProductUpdate
from shop_api.application.ports.inbound.product_port import IProductUseCase
from shop_api.domain.exceptions import DatabaseOperationException, ResourceNotFoundException
from shop_api.shared.utils.input_validation import InputValidator
from shop_api.shared.utils.messages_utils import get_message

logger = logging.getLogger(__name__)


class AsyncProductService(IProductUseCase):
    """Service layer (async) for managing **Product** entities."""

    def __init__(self, db_session: AsyncSession):
        self.db: AsyncSession = db_session

    async def _get_product_or_404(self, product_id: Union[str, UUID]) -> Product:
        not_found = get_message("product_not_found", settings.MESSAGES_LANGUAGE)

        product_uuid = InputValidator.parse_uuid(product_id)
        if product_uuid is None:
            logger.warning("Malformed product id: %s", product_id)
            raise ResourceNotFoundException(message=not_found, resource_id=product_id)

        product = await product_repository.get(self.db, id=product_uuid)
        if not product:
            logger.warning("Product not found: %s", product_id)
            raise ResourceNotFoundException(message=not_found, resource_id=product_id)
        return product

    async def create_product(self, data: ProductCreate) -> Product:
        product = await product_repository.create(self.db, obj_in=data.model_dump())
        logger.info("Product created: %s", product.id)
        return product

    async def list_products(self, params: Params, order: str = "desc"):
        try:
            return await apaginate(self.db, product_repository.listing_query(order), params)
        except Exception as exc:
            logger.exception("Error listing products")
            raise DatabaseOperationException(message="Error listing products", original_error=exc) from exc

    async def get_product(self, product_id: Union[str, UUID]) -> Product:
        return await self._get_product_or_404(product_id)

    async def update_product(self, product_id: Union[str, UUID], data: ProductUpdate) -> Product:
        product = await self._get_product_or_404(product_id)
        updated = await product_repository.update(self.db, db_obj=product, obj_in=data)
        logger.info("Product updated: %s", updated.id)
        return updated

    async def delete_product(self, product_id: Union[str, UUID]) -> None:
        product = await self._get_product_or_404(product_id)
        await product_repository.remove(self.db, id=product.id)
        logger.info("Product deleted: %s", product_id)
