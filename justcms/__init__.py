"""Typed async client for the JustCMS public API."""

from justcms.client import JustCmsClient
from justcms.config import Settings
from justcms.exceptions import (
    ApiError,
    ConfigurationError,
    DecodingError,
    JustCmsError,
    TransportError,
)
from justcms.services.query_service import (
    find_blocks,
    first_image,
    has_category,
    has_style,
    large_image_variant,
)

__all__ = [
    "ApiError",
    "ConfigurationError",
    "DecodingError",
    "JustCmsClient",
    "JustCmsError",
    "Settings",
    "TransportError",
    "find_blocks",
    "first_image",
    "has_category",
    "has_style",
    "large_image_variant",
]
