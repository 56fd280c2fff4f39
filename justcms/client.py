"""Typed client for the JustCMS public API."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from justcms.config import DEFAULT_BASE_URL, Settings
from justcms.exceptions import ConfigurationError
from justcms.executor import RequestExecutor
from justcms.schemas.category import CategoriesResponse, Category
from justcms.schemas.layout import Layout
from justcms.schemas.menu import Menu
from justcms.schemas.page import PageDetail, PagesResponse
from justcms.services import query_service
from justcms.transport.httpx_transport import DEFAULT_TIMEOUT, HttpxTransport

if TYPE_CHECKING:
    from justcms.schemas.blocks import ContentBlock, ImageBlock
    from justcms.schemas.image import Image, ImageVariant
    from justcms.schemas.page import PageFilters, PageSummary
    from justcms.transport.base import Transport

logger = logging.getLogger(__name__)


class JustCmsClient:
    """Read-only client for one JustCMS project.

    Explicit ``token``/``project_id`` arguments take precedence over the
    supplied ``settings``. A client without both fails at construction.
    """

    def __init__(
        self,
        token: str | None = None,
        project_id: str | None = None,
        *,
        settings: Settings | None = None,
        transport: Transport | None = None,
        base_url: str | None = None,
    ) -> None:
        token = token or (settings.token if settings is not None else None)
        project_id = project_id or (settings.project if settings is not None else None)
        if not token:
            msg = "JustCMS API token is required"
            raise ConfigurationError(msg)
        if not token.isascii():
            msg = "JustCMS API token must contain only ASCII characters"
            raise ConfigurationError(msg)
        if not project_id:
            msg = "JustCMS project ID is required"
            raise ConfigurationError(msg)

        if base_url is None:
            base_url = settings.base_url if settings is not None else DEFAULT_BASE_URL

        self._owns_transport = transport is None
        if transport is None:
            timeout = settings.timeout if settings is not None else DEFAULT_TIMEOUT
            transport = HttpxTransport(timeout=timeout)
        self._transport = transport
        self.project_id = project_id
        self._executor = RequestExecutor(transport, token, project_id, base_url)
        logger.debug("JustCMS client ready for project %s at %s", project_id, base_url)

    @classmethod
    def from_env(cls, transport: Transport | None = None) -> JustCmsClient:
        """Create a client from ``JUST_CMS_*`` environment variables and ``.env``."""
        return cls(settings=Settings(), transport=transport)

    async def aclose(self) -> None:
        """Close the transport if this client created it."""
        if self._owns_transport:
            assert isinstance(self._transport, HttpxTransport)
            await self._transport.aclose()

    async def __aenter__(self) -> JustCmsClient:
        return self

    async def __aexit__(self, *args: object) -> None:
        await self.aclose()

    async def get_categories(self) -> list[Category]:
        """Retrieve all categories of the project."""
        data = await self._executor.execute("", response_type=CategoriesResponse)
        return data.categories

    async def get_pages(
        self,
        filters: PageFilters | None = None,
        start: int | None = None,
        offset: int | None = None,
    ) -> PagesResponse:
        """Retrieve pages, optionally filtered by category.

        ``start`` is the index of the first item and ``offset`` the number of
        items to return; both are passed to the API unchanged.
        """
        query: dict[str, object] = {}
        if filters is not None and filters.category.slug:
            query["filter.category.slug"] = filters.category.slug
        if start is not None:
            query["start"] = start
        if offset is not None:
            query["offset"] = offset
        return await self._executor.execute("pages", query, response_type=PagesResponse)

    async def get_page_by_slug(self, slug: str, version: str | None = None) -> PageDetail:
        """Retrieve a page; ``version`` selects a revision such as ``"draft"``."""
        query: dict[str, object] = {}
        if version:
            query["v"] = version
        return await self._executor.execute(f"pages/{slug}", query, response_type=PageDetail)

    async def get_menu_by_id(self, menu_id: str) -> Menu:
        return await self._executor.execute(f"menus/{menu_id}", response_type=Menu)

    async def get_layout_by_id(self, layout_id: str) -> Layout:
        return await self._executor.execute(f"layouts/{layout_id}", response_type=Layout)

    async def get_layouts_by_ids(self, layout_ids: list[str]) -> list[Layout]:
        """Retrieve several layouts in one request.

        The ids are sent as one ``;``-separated path segment. An empty list
        is not rejected here and produces a request to ``layouts/``.
        """
        ids = ";".join(layout_ids)
        return await self._executor.execute(f"layouts/{ids}", response_type=list[Layout])

    # Content helpers

    def is_block_has_style(self, block: ContentBlock, style: str) -> bool:
        return query_service.has_style(block, style)

    def get_large_image_variant(self, image: Image) -> ImageVariant | None:
        return query_service.large_image_variant(image)

    def get_first_image(self, block: ImageBlock) -> Image | None:
        return query_service.first_image(block)

    def has_category(self, page: PageSummary, category_slug: str) -> bool:
        return query_service.has_category(page, category_slug)
