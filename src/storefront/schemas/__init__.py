from .checkout_schemas import (
    CartItem,
    CheckoutSessionRequest,
    CheckoutSessionResponse,
    ErrorResponse,
    PublishableKeyConfig,
)

__all__ = [
    "CartItem",
    "CheckoutSessionRequest",
    "CheckoutSessionResponse",
    "ErrorResponse",
    "PublishableKeyConfig",
]
