"""
Per-call records returned by the client.

The raw JSON strings exchanged with the endpoint are kept here, on an
immutable object owned by the caller, rather than on the client.
"""
from dataclasses import dataclass
from typing import Any, Optional


@dataclass(frozen=True)
class Exchange:
    """Raw request sent and raw response body received for one call"""
    command: str
    sent: str
    received: Optional[str] = None


@dataclass(frozen=True)
class CallResult:
    """Outcome of one successful call"""
    command: str
    params: Any
    exchange: Exchange

    @property
    def sent(self) -> str:
        return self.exchange.sent

    @property
    def received(self) -> Optional[str]:
        return self.exchange.received
