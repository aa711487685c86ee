import pytest

from catalog_bot.core.config import Settings
from tests.fakes import FakeCatalog


@pytest.fixture
def settings():
    return Settings(
        _env_file=None,
        shopify_shop="fuzzle-test.myshopify.com",
        shopify_admin_token="shpat_test",
        control_secret="s3cret",
    )


@pytest.fixture
def catalog():
    return FakeCatalog()
