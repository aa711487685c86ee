"""Errors raised by the catalog bot."""

from typing import Optional


class CatalogBotError(Exception):
    """Base class for every error the bot raises on purpose."""


class CatalogAPIError(CatalogBotError):
    """
    Non-2xx response from the Shopify Admin API.

    Args:
        status_code: HTTP status returned by Shopify (None if no response arrived)
        method: HTTP method of the failed call
        path: API path relative to the admin base URL
        body: Raw response body text
    """

    def __init__(
        self,
        status_code: Optional[int],
        method: str,
        path: str,
        body: str = ""
    ):
        self.status_code = status_code
        self.method = method
        self.path = path
        self.body = body
        super().__init__(f"Shopify {status_code} {method} {path}: {body}")

    def __reduce__(self):
        # Celery pickles task errors; rebuild from the fields, not the message
        return (self.__class__, (self.status_code, self.method, self.path, self.body))


class CatalogTransportError(CatalogAPIError):
    """The request never got a response (DNS, TLS, connection reset, timeout)."""

    def __init__(self, method: str, path: str, reason: str):
        super().__init__(None, method, path, reason)

    def __reduce__(self):
        return (self.__class__, (self.method, self.path, self.body))


class NotConfiguredError(CatalogBotError):
    """A required setting is missing."""

    def __init__(self, setting: str):
        self.setting = setting
        super().__init__(f"Missing {setting}")

    def __reduce__(self):
        return (self.__class__, (self.setting,))


class UnauthorizedError(CatalogBotError):
    """The control key sent by the caller does not match the shared secret."""

    def __init__(self):
        super().__init__("Unauthorized")

    def __reduce__(self):
        return (self.__class__, ())
