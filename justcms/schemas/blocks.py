"""Content block schemas.

A page's ``content`` is a list of blocks discriminated by ``type``. Fixed-schema
blocks drop unknown keys; ``CustomBlock`` keeps every extra key the editor defined.
"""

from __future__ import annotations

from typing import Annotated, Any, Literal

from pydantic import ConfigDict, Field

from justcms.schemas.base import CmsModel
from justcms.schemas.image import Image


class _Block(CmsModel):
    styles: list[str]


class HeaderBlock(_Block):
    type: Literal["header"]
    header: str
    subheader: str | None = None
    size: str


class ListOption(CmsModel):
    title: str
    subtitle: str | None = None


class ListBlock(_Block):
    type: Literal["list"]
    options: list[ListOption]


class EmbedBlock(_Block):
    type: Literal["embed"]
    url: str


class ImageBlock(_Block):
    type: Literal["image"]
    images: list[Image]


class CodeBlock(_Block):
    type: Literal["code"]
    code: str


class TextBlock(_Block):
    type: Literal["text"]
    text: str


class CtaBlock(_Block):
    """Call-to-action block."""

    type: Literal["cta"]
    text: str
    url: str
    description: str | None = None


class CustomBlock(_Block):
    """Editor-defined block with an open set of fields beyond ``blockId``."""

    model_config = ConfigDict(extra="allow")

    type: Literal["custom"]
    block_id: str

    @property
    def fields(self) -> dict[str, Any]:
        """Extra keys of the block, as sent by the API."""
        return dict(self.model_extra or {})


ContentBlock = Annotated[
    HeaderBlock
    | ListBlock
    | EmbedBlock
    | ImageBlock
    | CodeBlock
    | TextBlock
    | CtaBlock
    | CustomBlock,
    Field(discriminator="type"),
]
