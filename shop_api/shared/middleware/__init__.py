# shop_api/shared/middleware/__init__.py

from shop_api.shared.middleware.error_handler_middleware import (
    ErrorHandlerMiddleware,
    register_exception_handlers,
)
from shop_api.shared.middleware.logging_middleware import (
    AsyncRequestLoggingMiddleware,
    PlaintextPasswordGuard,
)

__all__ = [
    "AsyncRequestLoggingMiddleware",
    "ErrorHandlerMiddleware",
    "PlaintextPasswordGuard",
    "register_exception_handlers",
]
