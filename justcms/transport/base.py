"""Transport protocol and data classes for issuing HTTP GET requests."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Mapping


@dataclass(frozen=True)
class TransportResponse:
    """Status, body and headers of a completed HTTP exchange."""

    status_code: int
    text: str
    headers: Mapping[str, str] = field(default_factory=dict)

    @property
    def is_success(self) -> bool:
        return 200 <= self.status_code < 300


class TransportFailure(Exception):
    """Raised by a transport when the exchange could not be completed.

    Adapters that treat error statuses as failures may attach the
    ``status_code`` and response ``text``; connection-level failures leave
    both as None.
    """

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        text: str | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.text = text


@runtime_checkable
class Transport(Protocol):
    """Protocol for the HTTP layer used by the request executor."""

    async def get(self, url: str, headers: Mapping[str, str]) -> TransportResponse:
        """Send one GET request and return the response."""
        ...
