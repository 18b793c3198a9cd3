"""
Transport interface

Defines what the client needs from an HTTP transport: POST a JSON body to a
URL and hand back the response body. Swapping the transport (tests, a host
application's own HTTP stack) does not touch the client.
"""

import abc
from typing import Dict, Optional


class TransportInterface(abc.ABC):
    """Transport used by DwApiClient to reach the endpoint"""

    @abc.abstractmethod
    def post(self,
             url: str,
             body: str,
             headers: Optional[Dict[str, str]] = None,
             timeout: Optional[float] = None) -> str:
        """POST a JSON body and return the response body

        Args:
            url: Endpoint URL
            body: Serialized JSON request
            headers: Extra HTTP headers
            timeout: Request timeout in seconds

        Returns:
            str: Raw response body

        Raises:
            TransportError: Connection failure, timeout or non-2xx status
        """
        pass
