import pytest
from fastapi.testclient import TestClient

from catalog_bot.api.deps import get_catalog_client
from catalog_bot.api.v1.endpoints.control import parse_flag
from catalog_bot.core.config import Settings, get_settings
from catalog_bot.core.exceptions import CatalogAPIError
from catalog_bot.main import app
from catalog_bot.services.catalog.descriptions import build_description
from tests.fakes import FakeCatalog, make_product, make_variant


@pytest.fixture
def store():
    return FakeCatalog([
        make_product(1, title="Ball", body_html="<p>old</p>",
                     variants=[make_variant(10, price="19.99", qty=0)]),
        make_product(2, title="Rope", body_html=build_description("Rope", "Acme Pets", "FuzzleToys"),
                     variants=[make_variant(20, price="10.00", qty=4)]),
    ])


@pytest.fixture
def api(settings, store):
    app.dependency_overrides[get_settings] = lambda: settings
    app.dependency_overrides[get_catalog_client] = lambda: store
    yield TestClient(app)
    app.dependency_overrides.clear()


def test_health(api):
    response = api.get("/health")
    assert response.status_code == 200
    assert response.json() == {"ok": True, "shop": "fuzzle-test.myshopify.com"}


def test_wrong_key_is_unauthorized(api, store):
    response = api.post("/run/hide-oos", params={"key": "nope"})

    assert response.status_code == 401
    assert response.json() == {"error": "Unauthorized"}
    assert store.list_calls == []


def test_missing_key_is_unauthorized(api):
    assert api.post("/run/reprice").status_code == 401


def test_missing_secret_is_reported(api, settings):
    app.dependency_overrides[get_settings] = lambda: settings.model_copy(update={"control_secret": ""})

    response = api.post("/run/hide-oos", params={"key": "s3cret"})

    assert response.status_code == 500
    assert response.json() == {"error": "Missing CONTROL_SECRET"}


def test_missing_shop_is_reported(api, settings):
    app.dependency_overrides.pop(get_catalog_client)
    app.dependency_overrides[get_settings] = lambda: settings.model_copy(update={"shopify_shop": None})

    response = api.post("/run/hide-oos", params={"key": "s3cret"})

    assert response.status_code == 500
    assert response.json() == {"error": "Missing SHOPIFY_SHOP"}


def test_description_preview_by_default(api, store):
    response = api.post("/run/update-descriptions", headers={"X-Control-Key": "s3cret"})

    assert response.status_code == 200
    assert response.json() == {"preview_count": 1, "preview": [{"id": 1, "title": "Ball"}]}
    assert store.write_attempts == []


def test_description_apply(api, store):
    response = api.post("/run/update-descriptions", params={"key": "s3cret", "apply": "1"})

    assert response.status_code == 200
    assert response.json() == {"updated": 1}
    assert [w.id for w in store.writes] == [1]


def test_hide_out_of_stock(api, store):
    response = api.post("/run/hide-oos", params={"key": "s3cret"})

    assert response.json() == {"hidden": 1}
    assert store.products[1]["status"] == "draft"


def test_reprice(api, store):
    response = api.post("/run/reprice", params={"key": "s3cret", "percent": "10"})

    assert response.json() == {"changed": 2}
    assert store.products[1]["variants"][0]["price"] == "21.99"
    assert store.products[2]["variants"][0]["price"] == "11.00"


def test_reprice_defaults_to_zero(api, store):
    assert api.post("/run/reprice", params={"key": "s3cret"}).json() == {"changed": 0}


def test_remote_failure_becomes_error_response(api, settings):
    failing = FakeCatalog(
        [make_product(1, variants=[make_variant(10, qty=0)])],
        fail_on_write=1,
        error=CatalogAPIError(502, "PUT", "/products/1.json", "Bad Gateway"),
    )
    app.dependency_overrides[get_catalog_client] = lambda: failing

    response = api.post("/run/hide-oos", params={"key": "s3cret"})

    assert response.status_code == 500
    assert response.json() == {"error": "Shopify 502 PUT /products/1.json: Bad Gateway"}


def test_webhook_is_acknowledged(api):
    response = api.post("/webhooks/products/update", content=b'{"id": 1}',
                        headers={"Content-Type": "application/json"})
    assert response.status_code == 200
    assert response.content == b""


@pytest.mark.parametrize("value,expected", [
    (None, False), ("", False), ("0", False), ("false", False),
    ("off", False), ("OFF", False), (" No ", False),
    ("1", True), ("true", True), ("yes", True),
])
def test_parse_flag(value, expected):
    assert parse_flag(value) is expected


@pytest.mark.parametrize("percent", ["nan", "inf", "-inf", "abc"])
def test_reprice_rejects_non_finite_percent(api, store, percent):
    response = api.post("/run/reprice", params={"key": "s3cret", "percent": percent})

    assert response.status_code == 422
    assert store.list_calls == []
    assert store.products[1]["variants"][0]["price"] == "19.99"
