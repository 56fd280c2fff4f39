"""Menu schemas."""

from __future__ import annotations

from justcms.schemas.base import CmsModel


class MenuItem(CmsModel):
    """Menu entry; ``children`` nest arbitrarily deep."""

    title: str
    subtitle: str | None = None
    icon: str
    url: str
    styles: list[str]
    children: list[MenuItem]


class Menu(CmsModel):
    id: str
    name: str
    items: list[MenuItem]
