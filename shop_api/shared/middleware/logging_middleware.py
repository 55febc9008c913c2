# shop_api/shared/middleware/logging_middleware.py

"""
Request logging middleware and the ORM guard that keeps plaintext passwords out of the users table.
"""

import time
import logging
import re
from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from shop_api.adapters.configuration.config import settings
from shop_api.adapters.outbound.security.password_hasher import PasswordHasher

# Configure logger
logger = logging.getLogger(__name__)


class AsyncRequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Middleware para log de requisições HTTP.
    """

    async def dispatch(self, request: Request, call_next):
        # Log da requisição
        if settings.ENVIRONMENT == "production":
            logger.info(f"Request: {request.method} {request.url.path}")
        else:
            query_params = dict(request.query_params)
            logger.info(
                f"Request: {request.method} {request.url.path} | "
                f"Query: {query_params if query_params else 'N/A'} | "
                f"Client: {request.client.host if request.client else 'N/A'}"
            )

        # Processar
        start_time = time.time()
        response = await call_next(request)
        process_time = time.time() - start_time

        # Log da resposta
        if settings.ENVIRONMENT == "production":
            logger.info(f"Response: {response.status_code} for {request.method} {request.url.path}")
        else:
            logger.info(
                f"Response: {response.status_code} for {request.method} {request.url.path} | "
                f"Time: {process_time:.4f}s"
            )

        return response


class PlaintextPasswordGuard:
    """
    Última barreira antes do banco: a coluna ``password`` só pode receber hash bcrypt.

    Os casos de uso já gravam o hash, então texto plano aqui é bug de quem
    chamou. O valor é convertido em hash e o evento é logado como ERROR.
    """

    BCRYPT_PATTERN = re.compile(r'^\$2[abxy]\$\d{2}\$[./A-Za-z0-9]{53}$')

    @classmethod
    def is_hashed(cls, value: str) -> bool:
        return bool(cls.BCRYPT_PATTERN.match(value))

    @classmethod
    def enforce(cls, target) -> bool:
        """
        Hash ``target.password`` in place when it is plaintext.

        Returns:
            True when the value had to be hashed.
        """
        value = getattr(target, 'password', None)
        if not value or cls.is_hashed(value):
            return False

        logger.error(
            f"Plaintext password reached the ORM for {target.__class__.__name__} "
            f"id={getattr(target, 'id', None)}; hashing before flush"
        )
        target.password = PasswordHasher.hash_password_sync(value)
        return True
