from dataclasses import replace

import pytest


@pytest.mark.parametrize(
    "path, marker",
    [
        ("/success", "Thank you for your order!"),
        ("/cancel", "Payment cancelled"),
    ],
)
def test_redirect_pages_are_fixed_documents(client, path, marker):
    plain = client.get(path)
    with_query = client.get(path, params={"session_id": "cs_test_123", "x": "<script>"})

    assert plain.status_code == 200
    assert plain.headers["content-type"].startswith("text/html")
    assert marker in plain.text
    assert with_query.status_code == 200
    assert with_query.content == plain.content


def test_storefront_index_served_at_root(client):
    response = client.get("/")

    assert response.status_code == 200
    assert "Storefront" in response.text


def test_static_assets_served_verbatim(client):
    response = client.get("/app.js")

    assert response.status_code == 200
    assert "/api/create-checkout-session" in response.text


def test_api_routes_take_precedence_over_static_files(client):
    response = client.get("/api/config")

    assert response.headers["content-type"].startswith("application/json")


def test_missing_static_dir_keeps_api_available(make_client, settings, gateway, tmp_path):
    client = make_client(replace(settings, static_dir=tmp_path / "missing"), gateway)

    assert client.get("/api/config").status_code == 200
    assert client.get("/success").status_code == 200
    assert client.get("/").status_code == 404
