# shop_api/main.py

"""
Application entry point.

Run with: uvicorn shop_api.main:app --reload
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi_pagination import add_pagination

from shop_api.adapters.configuration.config import settings
from shop_api.adapters.inbound.api.v1.router import api_router
from shop_api.adapters.outbound.persistence.database import async_session_factory
from shop_api.adapters.outbound.persistence.repositories import token_repository
from shop_api.shared.middleware import (
    AsyncRequestLoggingMiddleware,
    ErrorHandlerMiddleware,
    register_exception_handlers,
)

logger = logging.getLogger(__name__)


def configure_logging() -> None:
    logging.basicConfig(
        level=settings.LOG_LEVEL,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


async def purge_expired_tokens() -> int:
    """Delete blacklist rows whose token would have expired anyway."""
    async with async_session_factory() as session:
        removed = await token_repository.cleanup_expired(session)
    logger.info(f"Removed {removed} expired blacklisted tokens")
    return removed


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(f"Starting {settings.PROJECT_NAME} v{settings.VERSION} ({settings.ENVIRONMENT})")
    if settings.BLACKLIST_CLEANUP_ON_STARTUP:
        await purge_expired_tokens()
    yield
    logger.info(f"Shutting down {settings.PROJECT_NAME}")


def create_app() -> FastAPI:
    configure_logging()

    app = FastAPI(
        title=settings.PROJECT_NAME,
        version=settings.VERSION,
        description="Async API for user authentication and product management.",
        lifespan=lifespan,
    )

    # Ordem importa: o último adicionado é o mais externo
    app.add_middleware(ErrorHandlerMiddleware)
    app.add_middleware(AsyncRequestLoggingMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    app.include_router(api_router, prefix=settings.API_PREFIX)

    @app.get("/health", tags=["Health"], summary="Health check")
    async def health():
        return {"status": "ok"}

    add_pagination(app)
    return app


app = create_app()
