"""HTTP transports for the JustCMS client."""

from justcms.transport.base import Transport, TransportFailure, TransportResponse
from justcms.transport.httpx_transport import HttpxTransport

__all__ = [
    "HttpxTransport",
    "Transport",
    "TransportFailure",
    "TransportResponse",
]
