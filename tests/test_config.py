import pickle

import pytest

from catalog_bot.core.config import Settings
from catalog_bot.core.exceptions import (
    CatalogAPIError,
    CatalogTransportError,
    NotConfiguredError,
)


def test_reads_environment(monkeypatch):
    monkeypatch.setenv("SHOPIFY_SHOP", "env-shop.myshopify.com")
    monkeypatch.setenv("SHOPIFY_ADMIN_TOKEN", "shpat_env")
    monkeypatch.setenv("CONTROL_SECRET", "from-env")
    monkeypatch.setenv("WRITE_CONCURRENCY", "3")

    settings = Settings(_env_file=None)

    assert settings.shop_base_url == "https://env-shop.myshopify.com/admin/api/2024-10"
    assert settings.require_control_secret() == "from-env"
    assert settings.write_concurrency == 3


def test_defaults():
    settings = Settings(_env_file=None)

    assert settings.default_brand == "FuzzleToys"
    assert settings.write_concurrency == 1
    assert (settings.description_page_size, settings.hide_page_size, settings.reprice_page_size) == (250, 250, 100)


def test_missing_secret_is_not_configured(monkeypatch):
    monkeypatch.delenv("CONTROL_SECRET", raising=False)
    settings = Settings(_env_file=None)

    with pytest.raises(NotConfiguredError) as exc_info:
        settings.require_control_secret()
    assert str(exc_info.value) == "Missing CONTROL_SECRET"


def test_missing_shop_is_not_configured(monkeypatch):
    monkeypatch.delenv("SHOPIFY_SHOP", raising=False)

    with pytest.raises(NotConfiguredError):
        Settings(_env_file=None, shopify_admin_token="x").require_shop()


def test_errors_survive_pickling():
    error = pickle.loads(pickle.dumps(CatalogAPIError(404, "GET", "/products.json", "Not Found")))
    assert (error.status_code, error.method, error.path, error.body) == (404, "GET", "/products.json", "Not Found")

    transport = pickle.loads(pickle.dumps(CatalogTransportError("PUT", "/variants/1.json", "timeout")))
    assert str(transport) == "Shopify None PUT /variants/1.json: timeout"
    assert pickle.loads(pickle.dumps(NotConfiguredError("CONTROL_SECRET"))).setting == "CONTROL_SECRET"
