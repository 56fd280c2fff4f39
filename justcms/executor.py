"""Authenticated GET requests with JSON decoding and error translation."""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import TYPE_CHECKING, Any, TypeVar

import httpx
from pydantic import TypeAdapter, ValidationError

from justcms.exceptions import ApiError, DecodingError, TransportError
from justcms.transport.base import TransportFailure
from justcms.urls import build_url

if TYPE_CHECKING:
    from collections.abc import Mapping

    from justcms.transport.base import Transport

logger = logging.getLogger(__name__)

T = TypeVar("T")


@lru_cache(maxsize=None)
def _adapter_for(response_type: Any) -> TypeAdapter[Any]:
    return TypeAdapter(response_type)


def _error_message(status: int, text: str | None) -> str:
    """Use the response body when there is one, else the reason phrase."""
    if text:
        return text
    return httpx.codes.get_reason_phrase(status) or str(status)


class RequestExecutor:
    """Runs one project-scoped GET per call and decodes the JSON body.

    Holds only immutable configuration, so one instance may serve any number
    of concurrent calls.
    """

    def __init__(
        self,
        transport: Transport,
        token: str,
        project_id: str,
        base_url: str,
    ) -> None:
        self._transport = transport
        self._token = token
        self._project_id = project_id
        self._base_url = base_url

    def build_url(self, endpoint: str = "", query: Mapping[str, object] | None = None) -> str:
        return build_url(self._base_url, self._project_id, endpoint, query)

    def _headers(self) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {self._token}",
            "Accept": "application/json",
        }

    async def execute(
        self,
        endpoint: str = "",
        query: Mapping[str, object] | None = None,
        *,
        response_type: type[T] | Any,
    ) -> T:
        """GET ``endpoint`` and validate the body against ``response_type``.

        Raises ApiError for non-success statuses, TransportError when no
        response was received, and DecodingError for bodies that are not
        JSON or do not match the expected shape.
        """
        url = self.build_url(endpoint, query)
        logger.debug("JustCMS GET %s", url)

        try:
            response = await self._transport.get(url, self._headers())
        except TransportFailure as exc:
            if exc.status_code is None:
                logger.warning("JustCMS request to %s failed: %s", url, exc)
                raise TransportError() from exc
            logger.warning("JustCMS API error for %s: %s", url, exc.status_code)
            raise ApiError(exc.status_code, _error_message(exc.status_code, exc.text)) from exc

        if not response.is_success:
            logger.warning(
                "JustCMS API error for %s: %s %s", url, response.status_code, response.text
            )
            raise ApiError(
                response.status_code, _error_message(response.status_code, response.text)
            )

        try:
            result: T = _adapter_for(response_type).validate_json(response.text)
        except ValidationError as exc:
            logger.warning("Could not decode JustCMS response from %s", url)
            raise DecodingError(url, str(exc)) from exc
        return result
