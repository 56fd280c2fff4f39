"""Client exception types.

Convention:
- ``ConfigurationError`` for a client that cannot be built (missing token
  or project id). Raised before any request is made.
- ``ApiError`` when the API answered with a non-success status. ``status``
  and ``message`` carry the raw values so callers can decide on retries.
- ``TransportError`` when no status is available at all (connection
  refused, timeout, TLS failure). It is an ``ApiError`` with status 500.
- ``DecodingError`` when the exchange succeeded but the body is not JSON or
  does not match the expected shape.
"""

from __future__ import annotations

GENERIC_API_ERROR = "JustCMS API error"


class JustCmsError(Exception):
    """Base class for every error raised by the client."""


class ConfigurationError(JustCmsError):
    """Raised when the client is missing its token or project id."""


class ApiError(JustCmsError):
    """Raised when the JustCMS API returns a non-success status."""

    def __init__(self, status: int, message: str) -> None:
        super().__init__(f"{GENERIC_API_ERROR} {status}: {message}")
        self.status = status
        self.message = message


class TransportError(ApiError):
    """Raised when the request could not be completed and no status exists."""

    def __init__(self, status: int = 500, message: str = GENERIC_API_ERROR) -> None:
        super().__init__(status, message)


class DecodingError(JustCmsError):
    """Raised when a successful response body cannot be decoded."""

    def __init__(self, url: str, detail: str) -> None:
        super().__init__(f"Could not decode response from {url}: {detail}")
        self.url = url
        self.detail = detail
