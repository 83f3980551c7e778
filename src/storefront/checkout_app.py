"""
Storefront Checkout Service

Serves the storefront UI and its Stripe payment flow:
1. GET  /api/config                  - publishable key for Stripe.js
2. POST /api/create-checkout-session - hosted Checkout Session for a cart
3. GET  /success, /cancel            - redirect landing pages
4. POST /webhook                     - signed Stripe event intake

Usage:
    python -m storefront.checkout_app
"""

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from storefront import storefront_logger as logger
from storefront.api import (
    RequestLoggingMiddleware,
    checkout_router,
    config_router,
    page_router,
    register_error_handlers,
    webhook_router,
)
from storefront.config import Settings, load_settings
from storefront.services import StripeGateway, WebhookDispatcher
from storefront.utils.logger import set_log_level
from storefront.utils.urls import STOREFRONT_URLS


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings: Settings = app.state.settings
    # Startup
    logger.info(f"Storefront Checkout Service starting on {settings.host}:{settings.port}")
    logger.info(f"STRIPE_SECRET_KEY loaded: {bool(settings.stripe_secret_key)}")
    logger.info(f"STRIPE_PUBLISHABLE_KEY loaded: {bool(settings.stripe_publishable_key)}")
    logger.info(f"STRIPE_WEBHOOK_SECRET loaded: {bool(settings.stripe_webhook_secret)}")
    logger.info(f"Redirect base URL: {settings.base_url}")
    yield
    # Shutdown
    logger.info("Storefront Checkout Service shutting down")


def create_app(
    settings: Optional[Settings] = None,
    gateway: Optional[StripeGateway] = None,
    dispatcher: Optional[WebhookDispatcher] = None,
) -> FastAPI:
    settings = settings or load_settings()

    app = FastAPI(
        title="Storefront Checkout Service",
        description="Stripe Checkout sessions and webhook intake for the storefront",
        version="1.0.0",
        lifespan=lifespan,
    )

    app.state.settings = settings
    app.state.gateway = gateway or StripeGateway.from_settings(settings)
    app.state.dispatcher = dispatcher or WebhookDispatcher()

    app.add_middleware(RequestLoggingMiddleware)
    register_error_handlers(app)

    app.include_router(config_router)
    app.include_router(checkout_router)
    app.include_router(page_router)
    app.include_router(webhook_router)

    @app.get(STOREFRONT_URLS.health)
    async def health_check():
        """Health check endpoint."""
        return {"status": "ok"}

    # Mounted last so the API routes above take precedence over static files
    if settings.static_dir.is_dir():
        app.mount("/", StaticFiles(directory=str(settings.static_dir), html=True), name="static")
    else:
        logger.warning(f"Static directory not found, storefront UI disabled: {settings.static_dir}")

    return app


app = create_app()
# The storefront logger is process-wide, so its level follows the served app only
set_log_level(logger, app.state.settings.log_level)


def main() -> None:
    import uvicorn

    settings: Settings = app.state.settings
    logger.info(f"Starting Storefront Checkout Service on {settings.host}:{settings.port}")
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
