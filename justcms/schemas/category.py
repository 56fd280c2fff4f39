"""Category schemas."""

from __future__ import annotations

from justcms.schemas.base import CmsModel


class Category(CmsModel):
    """Page category; ``slug`` is its stable identifier."""

    name: str
    slug: str


class CategoriesResponse(CmsModel):
    """Envelope returned by the project root endpoint."""

    categories: list[Category]
