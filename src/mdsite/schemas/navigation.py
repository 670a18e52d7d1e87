"""Navigation tree models."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

NodeType = Literal["link", "separator", "header", "external"]


class TreeNode(BaseModel):
    """A resolved navigation node.

    Attributes:
        id: Positional identifier, unique among siblings only.
        title: Markdown H1 of the target, or the literal menu label.
        path: Absolute site path, external URL, or a synthetic path for
            separators and headers.
        type: Node kind as consumed by the site.
        description: Frontmatter description of the target page.
        is_primary: True for direct file references, False for aliases,
            unset for non-page nodes. Serialized as ``isPrimary``.
        children: Submenu entries; only set on submenu nodes.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str
    title: str
    path: str
    type: NodeType
    description: str | None = None
    is_primary: bool | None = Field(default=None, alias="isPrimary")
    children: list[TreeNode] | None = None


class NavigationResult(BaseModel):
    """Nodes produced by one build call and the order counter after them."""

    nodes: list[TreeNode] = Field(default_factory=list)
    next_order: int = 0
