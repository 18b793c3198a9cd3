"""
Transport Module

The client talks to the endpoint through a TransportInterface; RequestsTransport
is the default implementation.
"""

from .transport_interface import TransportInterface
from .http import RequestsTransport

__all__ = [
    "TransportInterface",
    "RequestsTransport",
]
