# shop_api/adapters/inbound/api/v1/endpoints/product_endpoint.py

import logging

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from shop_api.adapters.inbound.api.deps import get_session, get_current_identity
from shop_api.application.use_cases.product_use_cases import AsyncProductService
from shop_api.application.dtos.product_dto import (
    ProductCreate,
    ProductListResponse,
    ProductOutput,
    ProductResponse,
    ProductUpdate,
)
from shop_api.application.dtos.user_dto import MessageResponse
from shop_api.shared.utils.error_responses import product_errors
from shop_api.shared.utils.pagination import ListingParams, listing_params
from shop_api.shared.utils.success_responses import (
    product_created_success,
    product_deleted_success,
    product_list_success,
    product_success,
)

logger = logging.getLogger(__name__)

# Todas as rotas de produto exigem token válido
router = APIRouter(
    prefix="/products",
    tags=["Products"],
    dependencies=[Depends(get_current_identity)],
)


@router.post(
    "",
    response_model=ProductResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create product",
    description="Adds a product to the catalogue.",
    responses={**product_created_success, **product_errors}
)
async def create_product(
        product_input: ProductCreate,
        db: AsyncSession = Depends(get_session),
):
    service = AsyncProductService(db)
    product = await service.create_product(product_input)
    return ProductResponse(
        message="Product added successfully",
        data=ProductOutput.model_validate(product),
    )


@router.get(
    "",
    response_model=ProductListResponse,
    status_code=status.HTTP_200_OK,
    summary="List products",
    description="Returns a page of products, newest first unless order=asc.",
    responses={**product_list_success, **product_errors}
)
async def list_products(
        params: ListingParams = Depends(listing_params),
        db: AsyncSession = Depends(get_session),
):
    service = AsyncProductService(db)
    page = await service.list_products(params, order=params.order)
    return ProductListResponse(
        data=[ProductOutput.model_validate(p) for p in page.items],
        total=page.total,
        page=page.page,
        size=page.size,
        pages=page.pages,
    )


@router.get(
    "/{product_id}",
    response_model=ProductResponse,
    response_model_exclude_none=True,
    status_code=status.HTTP_200_OK,
    summary="Get product",
    description="Returns a single product by id.",
    responses={**product_success, **product_errors}
)
async def get_product(
        product_id: str,
        db: AsyncSession = Depends(get_session),
):
    service = AsyncProductService(db)
    product = await service.get_product(product_id)
    return ProductResponse(data=ProductOutput.model_validate(product))


@router.put(
    "/{product_id}",
    response_model=ProductResponse,
    response_model_exclude_none=True,
    status_code=status.HTTP_200_OK,
    summary="Update product",
    description="Partially updates a product. Only the fields sent are changed; null is rejected.",
    responses={**product_success, **product_errors}
)
async def update_product(
        product_id: str,
        product_input: ProductUpdate,
        db: AsyncSession = Depends(get_session),
):
    service = AsyncProductService(db)
    product = await service.update_product(product_id, product_input)
    return ProductResponse(data=ProductOutput.model_validate(product))


@router.delete(
    "/{product_id}",
    response_model=MessageResponse,
    status_code=status.HTTP_200_OK,
    summary="Delete product",
    description="Removes a product by id.",
    responses={**product_deleted_success, **product_errors}
)
async def delete_product(
        product_id: str,
        db: AsyncSession = Depends(get_session),
):
    service = AsyncProductService(db)
    await service.delete_product(product_id)
    return MessageResponse(message="Product deleted successfully")
