"""
FastAPI dependencies exposing the per-application collaborators.

``create_app`` builds the settings, the Stripe gateway and the webhook dispatcher
once and stores them on ``app.state``; endpoints receive them through these
functions instead of reading module globals.
"""
from fastapi import Request

from storefront.config import Settings
from storefront.services.stripe_gateway import StripeGateway
from storefront.services.webhook_dispatcher import WebhookDispatcher


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_gateway(request: Request) -> StripeGateway:
    return request.app.state.gateway


def get_dispatcher(request: Request) -> WebhookDispatcher:
    return request.app.state.dispatcher
