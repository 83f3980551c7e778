import stripe
from fastapi import APIRouter, Depends, Request, Response

from storefront import storefront_logger as logger
from storefront.api.dependencies import get_dispatcher, get_gateway
from storefront.services import StripeGateway, WebhookDispatcher
from storefront.utils.errors import ConfigurationError
from storefront.utils.urls import STOREFRONT_URLS

router = APIRouter(tags=["Webhook"])

SIGNATURE_HEADER = "Stripe-Signature"


@router.post(STOREFRONT_URLS.webhook, include_in_schema=False)
async def stripe_webhook(
    request: Request,
    gateway: StripeGateway = Depends(get_gateway),
    dispatcher: WebhookDispatcher = Depends(get_dispatcher),
):
    """
    Receive a Stripe event and acknowledge it once its signature checks out.

    The signature covers the exact bytes Stripe sent, so this route must read the
    raw body: it declares no body model and nothing upstream may parse or re-encode
    the request. Rejections answer 400 with no detail; the reason is only logged.
    Verified events answer 200 even when no handler is registered, otherwise
    Stripe keeps redelivering them.
    """
    payload = await request.body()
    sig_header = request.headers.get(SIGNATURE_HEADER)

    if not sig_header:
        logger.warning(f"Webhook rejected: missing {SIGNATURE_HEADER} header")
        return Response(status_code=400)

    try:
        event = gateway.construct_event(payload, sig_header)
    except ConfigurationError as e:
        logger.error(f"Webhook cannot be verified: {e}")
        return Response(status_code=500)
    except ValueError as e:
        logger.warning(f"Webhook rejected: invalid payload: {e}")
        return Response(status_code=400)
    except stripe.SignatureVerificationError as e:
        logger.warning(f"Webhook signature verification failed: {e}")
        return Response(status_code=400)

    logger.info(f"Webhook verified: {event.type} ({event.id})")
    await dispatcher.dispatch(event)

    return Response(status_code=200)
