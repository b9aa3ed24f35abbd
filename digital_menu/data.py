"""Static catalog data and the catalog search filter."""

from __future__ import annotations

import json
from decimal import Decimal
from pathlib import Path
from typing import Iterable, Mapping

from digital_menu.config import resolve_catalog_path
from digital_menu.constant import MENU_ITEMS
from digital_menu.models import MenuItem


def menu_item_from_record(record: Mapping[str, object]) -> MenuItem:
    """Build a MenuItem from a raw record; price goes through str to keep it exact."""
    return MenuItem(
        id=int(record["id"]),  # type: ignore[arg-type]
        title=str(record["title"]),
        description=str(record.get("description", "")),
        price=Decimal(str(record["price"])),
        image=str(record.get("image", "")),
        category=str(record.get("category", "")),
    )


def build_catalog(records: Iterable[Mapping[str, object]]) -> tuple[MenuItem, ...]:
    """Wrap raw records into an ordered catalog, rejecting duplicate ids."""
    items: list[MenuItem] = []
    seen: set[int] = set()
    for record in records:
        item = menu_item_from_record(record)
        if item.id in seen:
            raise ValueError(f"Duplicate menu item id: {item.id}")
        seen.add(item.id)
        items.append(item)
    return tuple(items)


def load_catalog(path: str | Path) -> tuple[MenuItem, ...]:
    """Load a catalog from a JSON file holding a list of item records."""
    with Path(path).open(encoding="utf-8") as fh:
        records = json.load(fh)
    if not isinstance(records, list):
        raise ValueError(f"Catalog file {path} must contain a JSON list")
    return build_catalog(records)


def default_catalog() -> tuple[MenuItem, ...]:
    """Return the configured catalog: the JSON file if one is set, else the built-in menu."""
    path = resolve_catalog_path()
    if path is not None:
        return load_catalog(path)
    return build_catalog(MENU_ITEMS)


CATALOG: tuple[MenuItem, ...] = build_catalog(MENU_ITEMS)


def filter_catalog(query: str, items: Iterable[MenuItem] = CATALOG) -> list[MenuItem]:
    """Items whose title or description contains query, ignoring case.

    Plain substring containment; an empty query keeps every item in order.
    """
    source = list(items)
    if not query:
        return source
    q = query.lower()
    return [item for item in source if q in item.title.lower() or q in item.description.lower()]


def categories(items: Iterable[MenuItem]) -> list[str]:
    """Distinct categories in first-seen order."""
    seen: list[str] = []
    for item in items:
        if item.category not in seen:
            seen.append(item.category)
    return seen
