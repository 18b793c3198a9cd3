"""
Configuration settings for the DeviceWISE API client
"""
import os
from dataclasses import dataclass
from typing import Any, Dict


DEFAULT_TIMEOUT = 30.0


@dataclass
class ClientConfig:
    """Endpoint and credentials for a DwApiClient"""
    endpoint: str = ""
    application_token: str = ""
    organization_token: str = ""
    session_id: str = ""
    timeout: float = DEFAULT_TIMEOUT  # Seconds per request

    def __post_init__(self):
        if self.timeout is not None and self.timeout <= 0:
            raise ValueError(f"Timeout must be positive, got {self.timeout}")

    @classmethod
    def from_env(cls) -> "ClientConfig":
        """Create config from environment variables"""
        timeout = os.getenv("DWAPI_TIMEOUT")
        try:
            timeout_value = float(timeout) if timeout else DEFAULT_TIMEOUT
        except ValueError as e:
            raise ValueError(f"DWAPI_TIMEOUT is not a number: {timeout!r}") from e

        return cls(
            endpoint=os.getenv("DWAPI_ENDPOINT", ""),
            application_token=os.getenv("DWAPI_APPLICATION_TOKEN", ""),
            organization_token=os.getenv("DWAPI_ORGANIZATION_TOKEN", ""),
            session_id=os.getenv("DWAPI_SESSION_ID", ""),
            timeout=timeout_value,
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for logging, with tokens redacted"""
        return {
            "endpoint": self.endpoint,
            "application_token": _redact(self.application_token),
            "organization_token": _redact(self.organization_token),
            "session_id": _redact(self.session_id),
            "timeout": self.timeout,
        }


def _redact(value: str) -> str:
    return "***" if value else ""
