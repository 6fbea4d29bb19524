"""Field hook tables - per-type overrides for import and export of single fields."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .item import CatalogItem


# updater(item, json, field_name)
Updater = Callable[["CatalogItem", Mapping[str, Any], str], None]

# serializer(item, result, field_name, enabled_items_only)
Serializer = Callable[["CatalogItem", dict[str, Any], str, bool], None]

_EMPTY: Mapping[str, Any] = MappingProxyType({})


def _layer(
    base: Mapping[str, Any],
    overrides: Mapping[str, Any] | None,
) -> Mapping[str, Any]:
    if not overrides:
        return base
    merged = dict(base)
    for name, hook in overrides.items():
        if hook is None:
            merged.pop(name, None)
        else:
            merged[name] = hook
    return MappingProxyType(merged)


@dataclass(frozen=True, slots=True)
class FieldHooks:
    """
    Immutable pair of hook mappings keyed by JSON field name.

    A subtype that needs custom behaviour for field ``"f"`` supplies
    ``updaters["f"]`` and/or ``serializers["f"]``; a missing entry means
    the value is copied directly. Tables are built once per class and are
    read-only once published:

    ```python
    class WebMapServiceItem(DataSourceItem):
        field_hooks = DataSourceItem.field_hooks.extend(
            updaters={"layers": _split_layers},
            serializers={"layers": _join_layers},
        )
    ```
    """
    updaters: Mapping[str, Updater] = field(default_factory=lambda: _EMPTY)
    serializers: Mapping[str, Serializer] = field(default_factory=lambda: _EMPTY)

    def __post_init__(self):
        # Copy whatever the caller handed in so the table cannot be mutated later.
        object.__setattr__(self, "updaters", MappingProxyType(dict(self.updaters)))
        object.__setattr__(self, "serializers", MappingProxyType(dict(self.serializers)))

    def extend(
        self,
        updaters: Mapping[str, Updater | None] | None = None,
        serializers: Mapping[str, Serializer | None] | None = None,
    ) -> FieldHooks:
        """
        Return a new table layered over this one.

        Entries override inherited hooks of the same name; a ``None`` value
        removes the inherited hook so the field falls back to direct copy.
        """
        return FieldHooks(
            updaters=_layer(self.updaters, updaters),
            serializers=_layer(self.serializers, serializers),
        )


EMPTY_HOOKS = FieldHooks()
