# shop_api/application/dtos/product_dto.py

"""
Schemas for product data.

Create and update share the same per-field rules; on update every field is
optional but an explicit null is rejected.
"""

from uuid import UUID
from datetime import datetime
from typing import List, Optional
from pydantic import field_validator, Field

from shop_api.application.dtos.base_dto import CustomBaseModel, invalid

# Limite da coluna INTEGER (32 bits) de products.quantity
MAX_QUANTITY = 2 ** 31 - 1


def _check_name(v: str) -> str:
    v = v.strip()
    if not v:
        raise invalid("name_required")
    return v


def _check_description(v: str) -> str:
    if len(v) < 1:
        raise invalid("description_required")
    return v


def _check_price(v: float) -> float:
    if v < 0:
        raise invalid("price_invalid")
    return v


def _check_quantity(v: int) -> int:
    if v < 1:
        raise invalid("quantity_invalid")
    if v > MAX_QUANTITY:
        raise invalid("quantity_too_large", max=MAX_QUANTITY)
    return v


class ProductCreate(CustomBaseModel):
    """
    Schema for creating a product.
    """
    name: str = Field(..., description="Product name, trimmed, non-empty.")
    description: str = Field(..., description="Product description, non-empty.")
    price: float = Field(..., strict=True, allow_inf_nan=False, description="Unit price, zero or more.")
    quantity: int = Field(..., strict=True, description="Units in stock, 1 to 2147483647.")

    @field_validator("name")
    def validate_name(cls, v):
        return _check_name(v)

    @field_validator("description")
    def validate_description(cls, v):
        return _check_description(v)

    @field_validator("price")
    def validate_price(cls, v):
        return _check_price(v)

    @field_validator("quantity")
    def validate_quantity(cls, v):
        return _check_quantity(v)


class ProductUpdate(CustomBaseModel):
    """
    Schema for partially updating a product.

    Only the fields sent by the client are applied (see ``exclude_unset``).
    """
    name: Optional[str] = Field(None, description="Product name, trimmed, non-empty.")
    description: Optional[str] = Field(None, description="Product description, non-empty.")
    price: Optional[float] = Field(None, strict=True, allow_inf_nan=False, description="Unit price, zero or more.")
    quantity: Optional[int] = Field(None, strict=True, description="Units in stock, 1 to 2147483647.")

    @field_validator("name", "description", "price", "quantity", mode="before")
    def reject_null(cls, v, info):
        # Só roda para valores enviados; o default None não é validado
        if v is None:
            raise invalid("field_not_nullable", field=info.field_name)
        return v

    @field_validator("name")
    def validate_name(cls, v):
        return _check_name(v)

    @field_validator("description")
    def validate_description(cls, v):
        return _check_description(v)

    @field_validator("price")
    def validate_price(cls, v):
        return _check_price(v)

    @field_validator("quantity")
    def validate_quantity(cls, v):
        return _check_quantity(v)


class ProductOutput(CustomBaseModel):
    """Schema for returning product data."""
    id: UUID = Field(..., description="Product's unique identifier.")
    name: str
    description: str
    price: float
    quantity: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


########################################################################
# Response envelopes
########################################################################
class ProductResponse(CustomBaseModel):
    message: Optional[str] = None
    data: ProductOutput


class ProductListResponse(CustomBaseModel):
    data: List[ProductOutput] = Field(default_factory=list)
    total: Optional[int] = None
    page: Optional[int] = None
    size: Optional[int] = None
    pages: Optional[int] = None
