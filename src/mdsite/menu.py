"""Load ``_menu.yaml`` and convert its entries into typed menu items."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from mdsite.config import CONFIG_EXTENSIONS, MENU_BASENAME
from mdsite.exceptions import MenuSpecError
from mdsite.schemas import (
    AliasItem,
    ExternalItem,
    HeaderItem,
    LabelItem,
    MenuItem,
    SeparatorItem,
    SubmenuItem,
)

logger = logging.getLogger(__name__)

SEPARATOR_MARKER = "==="
_EXTERNAL_PREFIXES = ("http://", "https://")
_TEXT_TAGS = frozenset(
    {
        "tag:yaml.org,2002:bool",
        "tag:yaml.org,2002:int",
        "tag:yaml.org,2002:float",
        "tag:yaml.org,2002:timestamp",
    }
)


class MenuLoader(yaml.SafeLoader):
    """Safe loader that keeps plain scalars as text; only null is resolved.

    Labels such as ``2024-01-01``, ``on`` or ``1.10`` name markdown files and
    must reach the parser verbatim.
    """


MenuLoader.yaml_implicit_resolvers = {
    first: [(tag, regexp) for tag, regexp in resolvers if tag not in _TEXT_TAGS]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}


def find_menu_file(content_root: Path) -> Path | None:
    """Return ``_menu.yaml`` or ``_menu.yml`` under ``content_root``, first match wins."""
    for extension in CONFIG_EXTENSIONS:
        candidate = content_root / f"{MENU_BASENAME}{extension}"
        if candidate.is_file():
            return candidate
    return None


def load_menu(menu_path: Path) -> list[MenuItem]:
    """Read and parse a menu file.

    Raises:
        MenuSpecError: If the file is not valid YAML or has an unusable shape.
    """
    try:
        raw = yaml.load(menu_path.read_text(encoding="utf-8"), Loader=MenuLoader)  # noqa: S506
    except yaml.YAMLError as exc:
        raise MenuSpecError(f"Invalid YAML in {menu_path}: {exc}") from exc
    return parse_menu(raw)


def parse_menu(raw: Any) -> list[MenuItem]:
    """Convert a parsed YAML menu into typed menu items.

    A document that is empty yields no items and a single top-level mapping
    is read as a one-entry list.

    Raises:
        MenuSpecError: If the top-level value is neither a list nor a mapping.
    """
    if raw is None:
        return []
    if isinstance(raw, dict):
        raw = [raw]
    if not isinstance(raw, list):
        raise MenuSpecError(f"Menu must be a list of entries, got {type(raw).__name__}")
    return _parse_entries(raw)


def _parse_entries(entries: list[Any]) -> list[MenuItem]:
    items: list[MenuItem] = []
    for entry in entries:
        if isinstance(entry, dict):
            for key, value in entry.items():
                item = _parse_keyed_entry(_as_text(key), value)
                if item is not None:
                    items.append(item)
            continue

        item = _parse_scalar_entry(entry)
        if item is not None:
            items.append(item)
    return items


def _parse_scalar_entry(entry: Any) -> MenuItem | None:
    if entry is None or entry == SEPARATOR_MARKER:
        return SeparatorItem()
    if isinstance(entry, bool) or not isinstance(entry, (str, int, float)):
        logger.warning("Skipping unsupported menu entry: %r", entry)
        return None
    return LabelItem(target=_as_text(entry))


def _parse_keyed_entry(key: str, value: Any) -> MenuItem | None:
    if value is None or value == "" or value == SEPARATOR_MARKER:
        return HeaderItem(title=key)
    if isinstance(value, list):
        return SubmenuItem(target=key, children=_parse_entries(value))
    if isinstance(value, str):
        if value.startswith(_EXTERNAL_PREFIXES):
            return ExternalItem(title=key, url=value)
        return AliasItem(title=key, target=value)

    logger.warning("Skipping menu entry %r with unsupported value %r", key, value)
    return None


def _as_text(value: Any) -> str:
    return value if isinstance(value, str) else str(value)
