import stripe
from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from storefront import storefront_logger as logger
from storefront.api.dependencies import get_gateway, get_settings
from storefront.config import Settings
from storefront.schemas import CheckoutSessionRequest, CheckoutSessionResponse, ErrorResponse
from storefront.services import StripeGateway, create_checkout_session
from storefront.utils.errors import ConfigurationError
from storefront.utils.urls import STOREFRONT_URLS

router = APIRouter(tags=["Checkout"])

CHECKOUT_FAILED_MESSAGE = "Error creating checkout session"


def _server_error(message: str) -> JSONResponse:
    return JSONResponse(status_code=500, content=ErrorResponse(error=message).model_dump())


@router.post(
    STOREFRONT_URLS.create_checkout_session,
    response_model=CheckoutSessionResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def create_checkout_session_endpoint(
    data: CheckoutSessionRequest,
    settings: Settings = Depends(get_settings),
    gateway: StripeGateway = Depends(get_gateway),
):
    """
    Create a Stripe Checkout Session for the cart.

    Invalid carts never reach this function: the validation error handler turns
    them into a 400 before Stripe is contacted. Stripe's error details are logged
    but not returned to the caller.
    """
    try:
        session_id = await create_checkout_session(data, settings, gateway)
    except ConfigurationError as e:
        logger.error(f"Cannot create checkout session: {e}")
        return _server_error("Stripe secret key not configured")
    except stripe.StripeError as e:
        logger.error(f"Stripe rejected checkout session (code={e.code}, status={e.http_status}): {e}")
        return _server_error(CHECKOUT_FAILED_MESSAGE)
    except Exception as e:
        logger.error(f"Error creating checkout session: {e}", exc_info=True)
        return _server_error(CHECKOUT_FAILED_MESSAGE)

    return CheckoutSessionResponse(id=session_id)
