from typing import Any, Dict, List

from starlette.concurrency import run_in_threadpool

from storefront import storefront_logger as logger
from storefront.config import CHECKOUT_CURRENCY, Settings
from storefront.schemas import CartItem, CheckoutSessionRequest
from storefront.services.stripe_gateway import StripeGateway
from storefront.utils.urls import STOREFRONT_URLS


def build_line_items(items: List[CartItem], currency: str = CHECKOUT_CURRENCY) -> List[Dict[str, Any]]:
    """Map cart items to Stripe line items. Prices are passed through as minor units."""
    return [
        {
            "price_data": {
                "currency": currency,
                "product_data": {"name": item.name},
                "unit_amount": item.price,
            },
            "quantity": item.quantity,
        }
        for item in items
    ]


def build_session_params(request: CheckoutSessionRequest, settings: Settings) -> Dict[str, Any]:
    return {
        "payment_method_types": ["card"],
        "mode": "payment",
        "line_items": build_line_items(request.items),
        "success_url": settings.redirect_url(STOREFRONT_URLS.success),
        "cancel_url": settings.redirect_url(STOREFRONT_URLS.cancel),
    }


async def create_checkout_session(
    request: CheckoutSessionRequest,
    settings: Settings,
    gateway: StripeGateway,
) -> str:
    """
    Request one hosted Checkout Session for the cart and return its id.

    The Stripe call is blocking, so it runs in the thread pool. No idempotency key
    is sent: a client retrying after a timeout may create a second session.
    """
    params = build_session_params(request, settings)
    logger.debug(f"Creating checkout session with {len(params['line_items'])} line item(s)")

    session_id = await run_in_threadpool(gateway.create_checkout_session, params)

    logger.info(f"Checkout session created: {session_id}")
    return session_id
