"""Catalog group - a container of catalog items."""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from typing import TYPE_CHECKING, Any

from .errors import CatalogError
from .fields import ItemField
from .item import CatalogItem

if TYPE_CHECKING:
    from .context import CatalogContext


logger = logging.getLogger(__name__)


def _update_items(group: CatalogGroup, json: Mapping[str, Any], name: str) -> None:
    """
    Merge child descriptions into the group.

    A child whose name and type match an existing item updates that item in
    place; anything else becomes a new item built through the context's
    type registry. Existing children not mentioned are kept.
    """
    children = json[name]
    if children is None:
        return
    if not isinstance(children, list):
        raise CatalogError(
            f"'{name}' of group {group.name!r} must be a list, got {type(children).__name__}"
        )

    item_types = group.context.item_types
    for child_json in children:
        if not isinstance(child_json, Mapping):
            raise CatalogError(f"Item in group {group.name!r} must be an object: {child_json!r}")
        if not child_json.get("type"):
            raise CatalogError(f"Item in group {group.name!r} has no type: {dict(child_json)!r}")

        existing = group.find(child_json.get("name"), child_json.get("type"))
        if existing is not None:
            existing.update_from_json(child_json)
            logger.debug(f"Updated {existing!r} in group {group.name!r}")
        else:
            child = item_types.create_from_json(group.context, child_json)
            group.items.append(child)
            logger.debug(f"Added {child!r} to group {group.name!r}")


def _serialize_items(
    group: CatalogGroup,
    result: dict[str, Any],
    name: str,
    enabled_items_only: bool,
) -> None:
    serialized = []
    for item in group.items:
        child = item.serialize_to_json(enabled_items_only)
        if child is not None:
            serialized.append(child)
    result[name] = serialized


class CatalogGroup(CatalogItem):
    """A group of catalog items, possibly including other groups."""

    item_type = "group"
    item_type_name = "Group"

    declared_fields = (
        ItemField("isOpen", "is_open"),
        ItemField("items"),
    )

    field_hooks = CatalogItem.field_hooks.extend(
        updaters={"items": _update_items},
        serializers={"items": _serialize_items},
    )

    def __init__(self, context: CatalogContext, name: str | None = None):
        super().__init__(context)

        if name is not None:
            self.name = name

        # Whether the group is expanded in the catalog tree.
        self.is_open = False

        self.items: list[CatalogItem] = []

    def add(self, item: CatalogItem) -> CatalogItem:
        """Append an item to the group and return it."""
        self.items.append(item)
        return item

    def find(self, name: str | None, item_type: str | None = None) -> CatalogItem | None:
        """Find a direct child by name, optionally restricted to a type tag."""
        if name is None:
            return None
        for item in self.items:
            if item.name == name and (item_type is None or item.type == item_type):
                return item
        return None

    def walk(self) -> Iterator[CatalogItem]:
        """Iterate depth-first over every item below this group."""
        for item in self.items:
            yield item
            if isinstance(item, CatalogGroup):
                yield from item.walk()
