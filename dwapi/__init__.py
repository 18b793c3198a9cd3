"""
DeviceWISE Public API Client

Synchronous client for the DeviceWISE JSON API: one POST per command,
authentication through application/organization tokens or portal users,
typed errors for configuration, transport and API failures.
"""

__version__ = "0.1.0"

from .client import DwApiClient
from .config import ClientConfig
from .credentials import OrganizationToken, UserCredentials
from .envelope import NO_AUTH_COMMANDS, to_key_value_list
from .errors import ApiError, ConfigurationError, DwApiError, TransportError
from .result import CallResult, Exchange

__all__ = [
    "DwApiClient",
    "ClientConfig",
    "OrganizationToken",
    "UserCredentials",
    "NO_AUTH_COMMANDS",
    "to_key_value_list",
    "DwApiError",
    "ConfigurationError",
    "TransportError",
    "ApiError",
    "CallResult",
    "Exchange",
]
