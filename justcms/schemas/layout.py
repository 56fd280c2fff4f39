"""Layout schemas.

Layout items are typed by the API, so ``value`` is left untyped and unknown
keys are kept on both models.
"""

from __future__ import annotations

from typing import Any

from pydantic import ConfigDict, Field

from justcms.schemas.base import CmsModel


class LayoutItem(CmsModel):
    model_config = ConfigDict(extra="allow")

    label: str
    description: str | None = None
    uid: str
    type: str
    value: Any = None


class Layout(CmsModel):
    model_config = ConfigDict(extra="allow")

    id: str
    name: str
    items: list[LayoutItem] = Field(default_factory=list)
