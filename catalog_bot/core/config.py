from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings

from catalog_bot.core.exceptions import NotConfiguredError


class Settings(BaseSettings):
    shopify_shop: Optional[str] = None
    shopify_admin_token: Optional[str] = None
    shopify_api_version: str = "2024-10"
    control_secret: str = ""
    request_timeout: float = 30.0
    default_brand: str = "FuzzleToys"
    description_page_size: int = Field(250, ge=1, le=250)
    hide_page_size: int = Field(250, ge=1, le=250)
    reprice_page_size: int = Field(100, ge=1, le=250)
    # Writes in flight at once; 1 keeps the store's per-account rate limit happy.
    write_concurrency: int = Field(1, ge=1)
    log_level: str = "INFO"
    port: int = 3000
    celery_broker_url: str = "redis://localhost:6379/0"
    celery_result_backend: str = "redis://localhost:6379/0"

    class Config:
        env_file = ".env"
        extra = "ignore"

    @property
    def shop_base_url(self) -> str:
        return f"https://{self.shopify_shop}/admin/api/{self.shopify_api_version}"

    def require_shop(self) -> None:
        """Raise NotConfiguredError unless shop and access token are set."""
        if not self.shopify_shop:
            raise NotConfiguredError("SHOPIFY_SHOP")
        if not self.shopify_admin_token:
            raise NotConfiguredError("SHOPIFY_ADMIN_TOKEN")

    def require_control_secret(self) -> str:
        if not self.control_secret:
            raise NotConfiguredError("CONTROL_SECRET")
        return self.control_secret


@lru_cache
def get_settings() -> Settings:
    """Build the process-wide settings once; everything else receives them explicitly."""
    return Settings()
