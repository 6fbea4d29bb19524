"""Catalog items - typed records synchronised with JSON catalog documents."""

from .errors import CatalogError, DeveloperError, UnknownItemTypeError
from .fields import ItemField, to_camel_case, to_snake_case
from .hooks import EMPTY_HOOKS, FieldHooks
from .item import CatalogItem, Enablement, serialize_to_json, update_from_json
from .registry import ItemTypeRegistry
from .context import CatalogContext
from .source import DataSourceItem
from .group import CatalogGroup
from .loader import CatalogLoader, load_catalog

__all__ = [
    # Errors
    "CatalogError",
    "DeveloperError",
    "UnknownItemTypeError",
    # Fields and hooks
    "ItemField",
    "to_camel_case",
    "to_snake_case",
    "FieldHooks",
    "EMPTY_HOOKS",
    # Items
    "CatalogItem",
    "Enablement",
    "update_from_json",
    "serialize_to_json",
    "DataSourceItem",
    "CatalogGroup",
    # Context and registry
    "CatalogContext",
    "ItemTypeRegistry",
    # Loader
    "CatalogLoader",
    "load_catalog",
]
