from .checkout_service import build_line_items, build_session_params, create_checkout_session
from .stripe_gateway import StripeGateway
from .webhook_dispatcher import WebhookDispatcher

__all__ = [
    "build_line_items",
    "build_session_params",
    "create_checkout_session",
    "StripeGateway",
    "WebhookDispatcher",
]
