"""Item type registry - maps ``type`` tags to catalog item classes."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from .errors import CatalogError, DeveloperError, UnknownItemTypeError

if TYPE_CHECKING:
    from .context import CatalogContext
    from .item import CatalogItem


logger = logging.getLogger(__name__)


class ItemTypeRegistry:
    """
    Registry of concrete catalog item classes, keyed by their ``item_type``.

    Used by groups (and loaders) to turn ``{"type": "wms", ...}`` into the
    right subclass. ``register`` also works as a class decorator.
    """

    def __init__(self):
        self._types: dict[str, type[CatalogItem]] = {}

    @classmethod
    def with_builtin_types(cls) -> ItemTypeRegistry:
        """Create a registry with the built-in container types registered."""
        from .group import CatalogGroup

        registry = cls()
        registry.register(CatalogGroup)
        return registry

    def register(self, item_class: type[CatalogItem]) -> type[CatalogItem]:
        """Register a concrete item class under its ``item_type``."""
        item_type = getattr(item_class, "item_type", None)
        if not item_type:
            raise DeveloperError(
                f"{item_class.__name__} cannot be registered without an item_type"
            )

        existing = self._types.get(item_type)
        if existing is not None and existing is not item_class:
            raise DeveloperError(
                f"Item type {item_type!r} is already registered to {existing.__name__}"
            )

        self._types[item_type] = item_class
        logger.debug(f"Registered catalog item type: {item_type} -> {item_class.__name__}")
        return item_class

    def unregister(self, item_type: str) -> None:
        self._types.pop(item_type, None)

    def has(self, item_type: str) -> bool:
        return item_type in self._types

    def get(self, item_type: str) -> type[CatalogItem]:
        """Get the class for a tag, raising UnknownItemTypeError if absent."""
        try:
            return self._types[item_type]
        except KeyError:
            raise UnknownItemTypeError(item_type) from None

    def all_types(self) -> list[str]:
        return sorted(self._types)

    def create(self, item_type: str, context: CatalogContext) -> CatalogItem:
        """Instantiate an empty item of the given type."""
        return self.get(item_type)(context)

    def create_from_json(self, context: CatalogContext, json: Mapping[str, Any]) -> CatalogItem:
        """Create an item from its JSON description, dispatching on ``json["type"]``."""
        if not isinstance(json, Mapping):
            raise CatalogError(f"Catalog item must be an object, got {type(json).__name__}")

        item_type = json.get("type")
        if not item_type:
            raise CatalogError(f"Catalog item has no type: {dict(json)!r}")

        item = self.create(item_type, context)
        item.update_from_json(json)
        return item
