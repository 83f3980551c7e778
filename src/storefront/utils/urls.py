"""Centralised URL definitions for the storefront checkout service."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class StorefrontURLs:
    """URL mapping for the storefront payment endpoints."""

    config: str = "/api/config"
    create_checkout_session: str = "/api/create-checkout-session"
    success: str = "/success"
    cancel: str = "/cancel"
    webhook: str = "/webhook"
    health: str = "/healthz"


STOREFRONT_URLS = StorefrontURLs()

__all__ = ["STOREFRONT_URLS", "StorefrontURLs"]
