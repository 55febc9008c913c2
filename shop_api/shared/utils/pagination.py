# shop_api/shared/utils/pagination.py

from typing import Literal

from fastapi import Query
from fastapi_pagination import Params

DEFAULT_PAGE_SIZE = 20
MAX_PAGE_SIZE = 100


class ListingParams(Params):
    """Page request plus the created_at direction of the listing."""

    order: Literal["asc", "desc"] = "desc"


def listing_params(
        page: int = Query(1, ge=1, description="Número da página, a partir de 1"),
        size: int = Query(
            DEFAULT_PAGE_SIZE, ge=1, le=MAX_PAGE_SIZE, description="Itens por página (máximo 100)"
        ),
        order: Literal["asc", "desc"] = Query(
            "desc", description="Ordem por data de criação: desc (mais novos primeiro) ou asc"
        ),
) -> ListingParams:
    return ListingParams(page=page, size=size, order=order)
