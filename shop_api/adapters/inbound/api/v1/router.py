# shop_api/adapters/inbound/api/v1/router.py

from fastapi import APIRouter
# Manter em ordem alfabética
from shop_api.adapters.inbound.api.v1.endpoints import (
    auth_endpoint,
    product_endpoint,
    user_endpoint
)

api_router = APIRouter()

# Incluir os routers de autenticação e usuário
api_router.include_router(auth_endpoint.router)
api_router.include_router(user_endpoint.router)

# Incluir router de produtos
api_router.include_router(product_endpoint.router)
