"""Shared test fixtures for the JustCMS client."""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any

import pytest

from justcms.client import JustCmsClient
from justcms.transport.base import TransportFailure, TransportResponse

TEST_TOKEN = "test-token"
TEST_PROJECT = "proj-1"


class FakeTransport:
    """Transport double that records requests and replays queued outcomes."""

    def __init__(self) -> None:
        self.requests: list[tuple[str, dict[str, str]]] = []
        self._outcomes: list[TransportResponse | TransportFailure] = []

    def queue_json(self, payload: Any, status_code: int = 200) -> None:
        self._outcomes.append(TransportResponse(status_code=status_code, text=json.dumps(payload)))

    def queue_text(self, text: str, status_code: int) -> None:
        self._outcomes.append(TransportResponse(status_code=status_code, text=text))

    def queue_failure(self, failure: TransportFailure) -> None:
        self._outcomes.append(failure)

    async def get(self, url: str, headers: Mapping[str, str]) -> TransportResponse:
        self.requests.append((url, dict(headers)))
        outcome = self._outcomes.pop(0)
        if isinstance(outcome, TransportFailure):
            raise outcome
        return outcome

    @property
    def last_url(self) -> str:
        return self.requests[-1][0]


@pytest.fixture
def transport() -> FakeTransport:
    return FakeTransport()


@pytest.fixture
def client(transport: FakeTransport) -> JustCmsClient:
    return JustCmsClient(TEST_TOKEN, TEST_PROJECT, transport=transport)


def make_variant(width: int, name: str = "img") -> dict[str, Any]:
    return {
        "url": f"https://cdn.example.com/{name}-{width}.jpg",
        "width": width,
        "height": width // 2,
        "filename": f"{name}-{width}.jpg",
    }


def make_page_summary(slug: str = "hello", **overrides: Any) -> dict[str, Any]:
    page: dict[str, Any] = {
        "title": "Hello",
        "subtitle": "World",
        "coverImage": {"alt": "cover", "variants": [make_variant(320), make_variant(1280)]},
        "slug": slug,
        "categories": [{"name": "News", "slug": "news"}],
        "createdAt": "2024-05-01T10:00:00.000Z",
        "updatedAt": "2024-05-02T10:00:00.000Z",
    }
    page.update(overrides)
    return page


def make_page_detail(slug: str = "hello", **overrides: Any) -> dict[str, Any]:
    page = make_page_summary(slug)
    page.update(
        {
            "meta": {"title": "Hello | Site", "description": "A greeting"},
            "content": [
                {
                    "type": "header",
                    "styles": ["Center"],
                    "header": "Welcome",
                    "subheader": None,
                    "size": "h1",
                },
                {"type": "text", "styles": [], "text": "Body text"},
                {
                    "type": "image",
                    "styles": ["Wide"],
                    "images": [{"alt": "photo", "variants": [make_variant(320, "photo")]}],
                },
                {
                    "type": "custom",
                    "styles": [],
                    "blockId": "pricing",
                    "plans": ["basic", "pro"],
                    "highlight": True,
                },
            ],
        }
    )
    page.update(overrides)
    return page
