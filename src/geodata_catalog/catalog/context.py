"""Catalog context - shared services handed to every item."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .registry import ItemTypeRegistry


@dataclass(eq=False)
class CatalogContext:
    """
    Catalog-wide services shared by every item in a tree.

    Items keep a non-owning reference to their context. The import/export
    protocol never looks inside it; groups use ``item_types`` to build
    children, and concrete data sources may stash whatever they need
    (a scene handle, an HTTP session) in ``services``.
    """
    item_types: ItemTypeRegistry = field(default_factory=ItemTypeRegistry.with_builtin_types)
    services: dict[str, Any] = field(default_factory=dict)

    def service(self, name: str) -> Any:
        """Get a registered service, raising KeyError if absent."""
        return self.services[name]
