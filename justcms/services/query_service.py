"""Pure helpers over decoded JustCMS content."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from justcms.schemas.blocks import ContentBlock, ImageBlock
    from justcms.schemas.image import Image, ImageVariant
    from justcms.schemas.page import PageDetail, PageSummary

# Variants are ordered smallest to largest; the second one is the "large" rendition.
LARGE_VARIANT_INDEX = 1


def has_style(block: ContentBlock, style: str) -> bool:
    """Check whether a block carries ``style``, ignoring case."""
    wanted = style.lower()
    return any(s.lower() == wanted for s in block.styles)


def large_image_variant(image: Image) -> ImageVariant | None:
    """Return the large variant of an image, or None if it has fewer than two."""
    if len(image.variants) <= LARGE_VARIANT_INDEX:
        return None
    return image.variants[LARGE_VARIANT_INDEX]


def first_image(block: ImageBlock) -> Image | None:
    """Return the first image of an image block, or None if it is empty."""
    return block.images[0] if block.images else None


def has_category(page: PageSummary, category_slug: str) -> bool:
    return any(category.slug == category_slug for category in page.categories)


def find_blocks(page: PageDetail, block_type: str) -> list[ContentBlock]:
    """Return the page's content blocks of ``block_type`` in page order."""
    return [block for block in page.content if block.type == block_type]
