"""
HTTP transport built on requests
"""

import logging
from typing import Dict, Optional

import requests

from dwapi import __version__
from dwapi.errors import TransportError
from dwapi.transport.transport_interface import TransportInterface

logger = logging.getLogger(__name__)

DEFAULT_HEADERS = {
    "Content-Type": "application/json",
    "Accept": "application/json",
    "User-Agent": f"dwapi/{__version__}",
}


class RequestsTransport(TransportInterface):
    """Blocking POST via requests, one request per call"""

    def __init__(self, headers: Optional[Dict[str, str]] = None):
        self.headers = dict(DEFAULT_HEADERS)
        if headers:
            self.headers.update(headers)

    def post(self,
             url: str,
             body: str,
             headers: Optional[Dict[str, str]] = None,
             timeout: Optional[float] = None) -> str:
        request_headers = dict(self.headers)
        if headers:
            request_headers.update(headers)

        try:
            response = requests.post(
                url,
                data=body.encode("utf-8"),
                headers=request_headers,
                timeout=timeout,
            )
            response.raise_for_status()
        except requests.exceptions.Timeout as e:
            logger.error(f"POST to {url} timed out after {timeout}s")
            raise TransportError(f"Request to {url} timed out") from e
        except requests.exceptions.HTTPError as e:
            status_code = getattr(e.response, "status_code", None)
            logger.error(f"POST to {url} failed with HTTP {status_code}")
            raise TransportError(f"Failed to POST to {url}: HTTP {status_code}",
                                 status_code=status_code,
                                 body=_error_body(e.response)) from e
        except requests.exceptions.RequestException as e:
            logger.error(f"POST to {url} failed: {e}")
            raise TransportError(f"Failed to POST to {url}") from e

        # The endpoint always answers UTF-8 JSON, whatever Content-Type it claims
        try:
            return response.content.decode("utf-8")
        except UnicodeDecodeError as e:
            logger.error(f"Response from {url} is not valid UTF-8")
            raise TransportError(f"Response from {url} is not valid UTF-8",
                                 status_code=response.status_code) from e


def _error_body(response) -> Optional[str]:
    """Body of a failed response, kept for diagnostics only"""
    if response is None or not response.content:
        return None
    return response.content.decode("utf-8", errors="replace")
