"""Shared fixtures, plus a pytest plugin to execute asyncio marked tests without external dependencies."""

from __future__ import annotations

import asyncio
import hashlib
import hmac
import inspect
import os
import tempfile
import time
from typing import Any, Callable, Mapping

import pytest

os.environ.setdefault("LOG_DIR", tempfile.mkdtemp(prefix="storefront-logs-"))

from fastapi.testclient import TestClient  # noqa: E402

from storefront.checkout_app import create_app  # noqa: E402
from storefront.config import Settings  # noqa: E402
from storefront.services import StripeGateway, WebhookDispatcher  # noqa: E402

SECRET_KEY = "sk_test_storefront"
PUBLISHABLE_KEY = "pk_test_storefront"
WEBHOOK_SECRET = "whsec_test_storefront"
BASE_URL = "https://shop.example.com"


@pytest.hookimpl
def pytest_configure(config: pytest.Config) -> None:  # pragma: no cover - pytest hook
    config.addinivalue_line(
        "markers",
        "asyncio: mark test to run inside an event loop",
    )


@pytest.hookimpl(tryfirst=True)
def pytest_pyfunc_call(pyfuncitem: pytest.Function) -> bool:  # pragma: no cover - pytest hook
    if "asyncio" not in pyfuncitem.keywords:
        return False

    test_function = pyfuncitem.obj
    if not inspect.iscoroutinefunction(test_function):
        return False

    argnames = pyfuncitem._fixtureinfo.argnames
    kwargs = {name: pyfuncitem.funcargs[name] for name in argnames}

    loop = asyncio.new_event_loop()
    try:
        loop.run_until_complete(test_function(**kwargs))
    finally:
        loop.close()
    return True


class RecordingGateway(StripeGateway):
    """Gateway whose checkout call is recorded instead of sent to Stripe."""

    def __init__(self, *args, session_id: str = "cs_test_123", error: Exception | None = None, **kwargs):
        super().__init__(*args, **kwargs)
        self.session_id = session_id
        self.error = error
        self.calls: list[Mapping[str, Any]] = []

    def create_checkout_session(self, params: Mapping[str, Any]) -> str:
        self.calls.append(params)
        if self.error is not None:
            raise self.error
        return self.session_id


def sign_payload(payload: bytes, secret: str = WEBHOOK_SECRET, timestamp: int | None = None) -> str:
    """Build a ``Stripe-Signature`` header the way Stripe signs webhook deliveries."""
    timestamp = int(time.time()) if timestamp is None else timestamp
    signed_payload = f"{timestamp}.".encode("utf-8") + payload
    signature = hmac.new(secret.encode("utf-8"), signed_payload, hashlib.sha256).hexdigest()
    return f"t={timestamp},v1={signature}"


@pytest.fixture
def settings() -> Settings:
    return Settings(
        stripe_secret_key=SECRET_KEY,
        stripe_publishable_key=PUBLISHABLE_KEY,
        stripe_webhook_secret=WEBHOOK_SECRET,
        base_url=BASE_URL,
    )


@pytest.fixture
def gateway(settings: Settings) -> RecordingGateway:
    return RecordingGateway(
        secret_key=settings.stripe_secret_key,
        webhook_secret=settings.stripe_webhook_secret,
    )


@pytest.fixture
def dispatcher() -> WebhookDispatcher:
    return WebhookDispatcher()


@pytest.fixture
def make_client() -> Callable[..., TestClient]:
    def _make(
        settings: Settings,
        gateway: StripeGateway | None = None,
        dispatcher: WebhookDispatcher | None = None,
        raise_server_exceptions: bool = True,
    ):
        app = create_app(settings=settings, gateway=gateway, dispatcher=dispatcher)
        return TestClient(app, raise_server_exceptions=raise_server_exceptions)

    return _make


@pytest.fixture
def client(make_client, settings, gateway, dispatcher) -> TestClient:
    return make_client(settings, gateway, dispatcher)
