"""Catalog item base type and the generic JSON import/export protocol."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from enum import Enum
from typing import TYPE_CHECKING, Any, ClassVar

from .errors import DeveloperError
from .fields import ItemField, merge_fields
from .hooks import EMPTY_HOOKS, FieldHooks, Serializer, Updater

if TYPE_CHECKING:
    from .context import CatalogContext


logger = logging.getLogger(__name__)


class Enablement(str, Enum):
    """
    Whether an item takes part in "enabled items only" exports.

    Containers have no enablement of their own and report ``NOT_APPLICABLE``;
    they are kept or dropped depending on what survives inside them.
    """
    NOT_APPLICABLE = "not_applicable"
    ENABLED = "enabled"
    DISABLED = "disabled"


class CatalogItem:
    """
    A member of a catalog group: either a data source or a group.

    Subclasses describe the fields they add with ``declared_fields`` and
    customise how individual fields are imported or exported through
    ``field_hooks``. Both are resolved once, when the subclass is defined:

    ```python
    @item_types.register
    class GeoJsonItem(DataSourceItem):
        item_type = "geojson"
        item_type_name = "GeoJSON"
        declared_fields = ("url",)

        def __init__(self, context):
            super().__init__(context)
            self.url = ""
    ```

    Only attributes listed in ``item_fields`` are read or written by
    ``update_from_json`` and ``serialize_to_json``.
    """

    # Discriminator and label returned by ``type`` / ``type_name``.
    item_type: ClassVar[str | None] = None
    item_type_name: ClassVar[str | None] = None

    # Fields added by this class; ``item_fields`` is the inherited list plus these.
    declared_fields: ClassVar[tuple[ItemField | str, ...]] = ("name", "description")
    item_fields: ClassVar[tuple[ItemField, ...]] = merge_fields((), declared_fields, "CatalogItem")

    field_hooks: ClassVar[FieldHooks] = EMPTY_HOOKS

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        inherited = super(cls, cls).item_fields
        declared = cls.__dict__.get("declared_fields", ())
        cls.item_fields = merge_fields(inherited, tuple(declared), cls.__name__)
        if not isinstance(cls.field_hooks, FieldHooks):
            raise DeveloperError(f"{cls.__name__}.field_hooks must be a FieldHooks instance")

    def __init__(self, context: CatalogContext):
        if context is None:
            raise DeveloperError("context is required")

        self._context = context

        self.name = "Unnamed Item"
        self.description = ""

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"

    @property
    def type(self) -> str:
        """Gets the type of data item represented by this instance."""
        if not self.item_type:
            raise DeveloperError(
                f'Types derived from CatalogItem must implement a "type" property '
                f"({type(self).__name__} does not)."
            )
        return self.item_type

    @property
    def type_name(self) -> str:
        """Gets a human-readable name for this type of item, such as 'Web Map Service (WMS)'."""
        if not self.item_type_name:
            raise DeveloperError(
                f'Types derived from CatalogItem must implement a "type_name" property '
                f"({type(self).__name__} does not)."
            )
        return self.item_type_name

    @property
    def context(self) -> CatalogContext:
        """Gets the context for this item."""
        return self._context

    @property
    def enablement(self) -> Enablement:
        return Enablement.NOT_APPLICABLE

    @property
    def updaters(self) -> Mapping[str, Updater]:
        """Functions used in place of direct assignment by ``update_from_json``."""
        return type(self).field_hooks.updaters

    @property
    def serializers(self) -> Mapping[str, Serializer]:
        """Functions used in place of direct copy by ``serialize_to_json``."""
        return type(self).field_hooks.serializers

    def update_from_json(self, json: Mapping[str, Any]) -> None:
        """
        Update the item from a JSON description of it.

        ``json`` is an already-parsed mapping, not a string. Keys missing
        from it leave the corresponding fields untouched.
        """
        update_from_json(self, json)

    def serialize_to_json(self, enabled_items_only: bool = True) -> dict[str, Any] | None:
        """
        Serialize the item to a JSON-compatible dict.

        Args:
            enabled_items_only: If True, only enabled data items (and the
                groups containing them) are serialized.

        Returns:
            The serialized mapping, or None if the item should be omitted.
        """
        return serialize_to_json(self, enabled_items_only)


def update_from_json(item: CatalogItem, json: Mapping[str, Any]) -> None:
    """Apply ``json`` to ``item`` field by field, routing through updater hooks."""
    updaters = item.updaters
    for item_field in item.item_fields:
        name = item_field.name
        if name not in json:
            continue
        updater = updaters.get(name)
        if updater is not None:
            updater(item, json, name)
        else:
            item_field.set(item, json[name])

    known = {f.name for f in item.item_fields}
    ignored = sorted(k for k in json if k not in known and k != "type")
    if ignored:
        logger.warning(f"Ignored unknown keys for {item!r}: {ignored}")


def serialize_to_json(item: CatalogItem, enabled_items_only: bool = True) -> dict[str, Any] | None:
    """Build the JSON description of ``item``; returns None when it should be omitted."""
    enablement = item.enablement
    if enabled_items_only and enablement is Enablement.DISABLED:
        return None

    result: dict[str, Any] = {"type": item.type}

    serializers = item.serializers
    for item_field in item.item_fields:
        name = item_field.name
        serializer = serializers.get(name)
        if serializer is not None:
            serializer(item, result, name, enabled_items_only)
        else:
            result[name] = item_field.get(item)

    # When serializing enabled items only, keep a group only if something survived in it.
    if enabled_items_only and enablement is Enablement.NOT_APPLICABLE and not result.get("items"):
        return None

    return result
