"""Default transport built on ``httpx.AsyncClient``."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import httpx

from justcms.transport.base import TransportFailure, TransportResponse

if TYPE_CHECKING:
    from collections.abc import Mapping

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 15.0


class HttpxTransport:
    """Transport that issues requests through a shared ``httpx.AsyncClient``.

    Every HTTP status is returned as a ``TransportResponse``; only failures
    that leave no response (connect errors, timeouts, protocol errors,
    malformed URLs) become ``TransportFailure``.
    """

    def __init__(
        self,
        client: httpx.AsyncClient | None = None,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self._owns_client = client is None
        self._client = client if client is not None else httpx.AsyncClient(timeout=timeout)

    async def get(self, url: str, headers: Mapping[str, str]) -> TransportResponse:
        try:
            resp = await self._client.get(url, headers=dict(headers))
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            logger.debug("HTTP GET failed without response: %s", exc)
            raise TransportFailure(str(exc) or type(exc).__name__) from exc
        return TransportResponse(
            status_code=resp.status_code,
            text=resp.text,
            headers=dict(resp.headers),
        )

    async def aclose(self) -> None:
        """Close the underlying client if this transport created it."""
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> HttpxTransport:
        return self

    async def __aexit__(self, *args: object) -> None:
        await self.aclose()
