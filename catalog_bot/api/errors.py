"""Translate bot errors into `{error: ...}` JSON responses."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from catalog_bot.core.exceptions import (
    CatalogBotError,
    NotConfiguredError,
    UnauthorizedError,
)

logger = logging.getLogger(__name__)


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


async def unauthorized_handler(request: Request, exc: UnauthorizedError) -> JSONResponse:
    logger.warning(f"Rejected control call to {request.url.path}")
    return error_response(status.HTTP_401_UNAUTHORIZED, str(exc))


async def not_configured_handler(request: Request, exc: NotConfiguredError) -> JSONResponse:
    logger.error(f"Not configured: {exc}")
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, str(exc))


async def catalog_error_handler(request: Request, exc: CatalogBotError) -> JSONResponse:
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, str(exc))


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(UnauthorizedError, unauthorized_handler)
    app.add_exception_handler(NotConfiguredError, not_configured_handler)
    app.add_exception_handler(CatalogBotError, catalog_error_handler)
