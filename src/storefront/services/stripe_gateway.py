"""Thin adapter over the Stripe SDK used by the checkout and webhook endpoints."""

from __future__ import annotations

from typing import Any, Mapping, Optional

import stripe

from storefront.config import Settings
from storefront.utils.errors import ConfigurationError


class StripeGateway:
    """
    Wraps the two Stripe calls this service makes.

    Keys are passed per call instead of being assigned to ``stripe.api_key`` so that
    several gateways (e.g. one per test) can coexist in the same process.
    """

    def __init__(
        self,
        secret_key: Optional[str],
        webhook_secret: Optional[str],
        tolerance: int = stripe.Webhook.DEFAULT_TOLERANCE,
    ) -> None:
        self.secret_key = secret_key
        self.webhook_secret = webhook_secret
        self.tolerance = tolerance

    @classmethod
    def from_settings(cls, settings: Settings) -> "StripeGateway":
        return cls(
            secret_key=settings.stripe_secret_key,
            webhook_secret=settings.stripe_webhook_secret,
        )

    def create_checkout_session(self, params: Mapping[str, Any]) -> str:
        """
        Create a hosted Checkout Session and return its id.

        Blocking; callers on the event loop must run it in a worker thread.

        Raises:
            ConfigurationError: If no secret key is configured.
            stripe.StripeError: If Stripe rejects the request or cannot be reached.
        """
        if not self.secret_key:
            raise ConfigurationError("STRIPE_SECRET_KEY")

        session = stripe.checkout.Session.create(api_key=self.secret_key, **params)
        return session.id

    def construct_event(self, payload: bytes, sig_header: str) -> stripe.Event:
        """
        Verify ``sig_header`` against the exact ``payload`` bytes and build the event.

        Raises:
            ConfigurationError: If no webhook signing secret is configured.
            ValueError: If the payload is not valid JSON.
            stripe.SignatureVerificationError: If the signature does not match or is stale.
        """
        if not self.webhook_secret:
            raise ConfigurationError("STRIPE_WEBHOOK_SECRET")

        return stripe.Webhook.construct_event(
            payload,
            sig_header,
            self.webhook_secret,
            tolerance=self.tolerance,
            api_key=self.secret_key,
        )
