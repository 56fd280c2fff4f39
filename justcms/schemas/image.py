"""Image schemas."""

from __future__ import annotations

from justcms.schemas.base import CmsModel


class ImageVariant(CmsModel):
    """One rendition of an image."""

    url: str
    width: int
    height: int
    filename: str


class Image(CmsModel):
    """Image with its renditions, ordered smallest to largest."""

    alt: str
    variants: list[ImageVariant]
