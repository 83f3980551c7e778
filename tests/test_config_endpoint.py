import logging
from dataclasses import replace

from conftest import PUBLISHABLE_KEY
from storefront.checkout_app import create_app


def test_config_returns_configured_publishable_key(client):
    response = client.get("/api/config")

    assert response.status_code == 200
    assert response.json() == {"publishableKey": PUBLISHABLE_KEY}


def test_config_fails_closed_when_publishable_key_missing(make_client, settings, gateway):
    client = make_client(replace(settings, stripe_publishable_key=None), gateway)

    response = client.get("/api/config")

    assert response.status_code == 500
    assert response.json() == {"error": "Stripe publishable key not configured"}


def test_health_check(client):
    response = client.get("/healthz")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_missing_publishable_key_is_logged(make_client, settings, gateway, caplog):
    client = make_client(replace(settings, stripe_publishable_key=None), gateway)

    with caplog.at_level(logging.ERROR, logger="storefront"):
        client.get("/api/config")

    errors = [record for record in caplog.records if record.levelno == logging.ERROR]
    assert [record.getMessage() for record in errors] == ["STRIPE_PUBLISHABLE_KEY is not configured"]


def test_create_app_leaves_logger_level_alone(settings, gateway):
    logger = logging.getLogger("storefront")
    level_before = logger.level

    create_app(settings=replace(settings, log_level="DEBUG"), gateway=gateway)
    create_app(settings=replace(settings, log_level="ERROR"), gateway=gateway)

    assert logger.level == level_before
