"""Page schemas."""

from __future__ import annotations

from pydantic import Field

from justcms.schemas.base import CmsModel
from justcms.schemas.blocks import ContentBlock
from justcms.schemas.category import Category
from justcms.schemas.image import Image


class PageSummary(CmsModel):
    """Page as it appears in listings."""

    title: str
    subtitle: str
    cover_image: Image | None
    slug: str
    categories: list[Category]
    created_at: str
    updated_at: str


class PagesResponse(CmsModel):
    """Page listing; ``total`` counts all matches, not just this window."""

    items: list[PageSummary]
    total: int = Field(ge=0)


class PageMeta(CmsModel):
    title: str
    description: str


class PageDetail(PageSummary):
    """Full page with SEO metadata and content blocks."""

    meta: PageMeta
    content: list[ContentBlock]


class CategoryFilter(CmsModel):
    slug: str


class PageFilters(CmsModel):
    """Filters accepted by the page listing endpoint."""

    category: CategoryFilter
