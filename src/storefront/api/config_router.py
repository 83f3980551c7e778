from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from storefront import storefront_logger as logger
from storefront.api.dependencies import get_settings
from storefront.config import Settings
from storefront.schemas import ErrorResponse, PublishableKeyConfig
from storefront.utils.urls import STOREFRONT_URLS

router = APIRouter(tags=["Config"])


@router.get(
    STOREFRONT_URLS.config,
    response_model=PublishableKeyConfig,
    responses={500: {"model": ErrorResponse}},
)
async def get_config(settings: Settings = Depends(get_settings)):
    """Return the publishable key the browser needs to load Stripe.js."""
    if not settings.stripe_publishable_key:
        logger.error("STRIPE_PUBLISHABLE_KEY is not configured")
        return JSONResponse(
            status_code=500,
            content=ErrorResponse(error="Stripe publishable key not configured").model_dump(),
        )

    return PublishableKeyConfig(publishable_key=settings.stripe_publishable_key)
