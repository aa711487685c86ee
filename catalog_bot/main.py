import logging

from fastapi import FastAPI

from catalog_bot.api.errors import register_exception_handlers
from catalog_bot.api.v1.endpoints.control import router as control_router
from catalog_bot.api.v1.endpoints.webhooks import router as webhooks_router
from catalog_bot.core.config import get_settings

settings = get_settings()
logging.basicConfig(level=settings.log_level)
_logger = logging.getLogger(__name__)

app = FastAPI(title="catalog-bot")
register_exception_handlers(app)

app.include_router(control_router, tags=["control"])
app.include_router(webhooks_router, tags=["webhooks"])

if __name__ == "__main__":
    import uvicorn
    _logger.info(f"Bot up on :{settings.port}")
    uvicorn.run(app, host="0.0.0.0", port=settings.port)
