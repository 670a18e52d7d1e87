"""Menu specification items, one model per entry shape."""

from __future__ import annotations

from typing import Annotated, Literal

from pydantic import BaseModel, Field


class LabelItem(BaseModel):
    """Plain label referencing a markdown file by relative path."""

    kind: Literal["label"] = "label"
    target: str


class SeparatorItem(BaseModel):
    """Visual separator between menu entries."""

    kind: Literal["separator"] = "separator"


class HeaderItem(BaseModel):
    """Non-navigable section label."""

    kind: Literal["header"] = "header"
    title: str


class ExternalItem(BaseModel):
    """Link to an ``http(s)://`` URL outside the site."""

    kind: Literal["external"] = "external"
    title: str
    url: str


class SubmenuItem(BaseModel):
    """Landing page reference with nested entries."""

    kind: Literal["submenu"] = "submenu"
    target: str
    children: list[MenuItem] = Field(default_factory=list)


class AliasItem(BaseModel):
    """Link to a site path shown under a custom title."""

    kind: Literal["alias"] = "alias"
    title: str
    target: str


MenuItem = Annotated[
    LabelItem | SeparatorItem | HeaderItem | ExternalItem | SubmenuItem | AliasItem,
    Field(discriminator="kind"),
]

SubmenuItem.model_rebuild()
