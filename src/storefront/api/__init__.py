from .checkout_router import router as checkout_router
from .config_router import router as config_router
from .error_handlers import register_error_handlers
from .logging_middleware import RequestLoggingMiddleware
from .page_router import router as page_router
from .webhook_router import router as webhook_router

__all__ = [
    "checkout_router",
    "config_router",
    "page_router",
    "webhook_router",
    "register_error_handlers",
    "RequestLoggingMiddleware",
]
