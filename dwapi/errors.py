"""
Exception types raised by the DeviceWISE API client.

Every failed call raises one of these; the Exchange of the attempted call
(raw request sent and raw body received, if any) rides along on the error.
"""
from typing import Optional

from .result import Exchange


class DwApiError(RuntimeError):
    """Base class for all client failures."""

    def __init__(self, message: str, exchange: Optional[Exchange] = None):
        super().__init__(message)
        self.message = message
        self.exchange = exchange


class ConfigurationError(DwApiError):
    """A required endpoint or credential was not configured before the call."""


class TransportError(DwApiError):
    """The POST failed, or the endpoint answered with something unusable."""

    def __init__(self, message: str, exchange: Optional[Exchange] = None,
                 status_code: Optional[int] = None, body: Optional[str] = None):
        super().__init__(message, exchange)
        self.status_code = status_code
        self.body = body


class ApiError(DwApiError):
    """The endpoint answered with a non-empty errorMessage."""
