"""Data source base type - catalog leaves that can be switched on and off."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .fields import ItemField
from .item import CatalogItem, Enablement

if TYPE_CHECKING:
    from .context import CatalogContext


class DataSourceItem(CatalogItem):
    """
    Abstract base for leaf items that load data.

    Adds ``isEnabled``; a disabled source is dropped from "enabled items
    only" exports. Fetching and display are left to subclasses.
    """

    declared_fields = (ItemField("isEnabled", "is_enabled"),)

    def __init__(self, context: CatalogContext):
        super().__init__(context)

        self.is_enabled = False

    @property
    def enablement(self) -> Enablement:
        # Only an explicit False disables; other falsy values still export.
        return Enablement.DISABLED if self.is_enabled is False else Enablement.ENABLED
