"""Shared schemas for mdsite."""

from mdsite.schemas.menu import (
    AliasItem,
    ExternalItem,
    HeaderItem,
    LabelItem,
    MenuItem,
    SeparatorItem,
    SubmenuItem,
)
from mdsite.schemas.metadata import MarkdownMetadata
from mdsite.schemas.navigation import NavigationResult, TreeNode
from mdsite.schemas.search import SearchIndexEntry

__all__ = [
    "AliasItem",
    "ExternalItem",
    "HeaderItem",
    "LabelItem",
    "MarkdownMetadata",
    "MenuItem",
    "NavigationResult",
    "SearchIndexEntry",
    "SeparatorItem",
    "SubmenuItem",
    "TreeNode",
]
