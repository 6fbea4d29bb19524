"""Geospatial data catalog - catalog item trees synchronised with JSON/YAML documents."""

from .catalog import (
    CatalogContext,
    CatalogError,
    CatalogGroup,
    CatalogItem,
    CatalogLoader,
    DataSourceItem,
    DeveloperError,
    Enablement,
    FieldHooks,
    ItemField,
    ItemTypeRegistry,
    UnknownItemTypeError,
    load_catalog,
)
from .config import CatalogConfig

__version__ = "0.1.0"

__all__ = [
    "CatalogConfig",
    "CatalogContext",
    "CatalogError",
    "CatalogGroup",
    "CatalogItem",
    "CatalogLoader",
    "DataSourceItem",
    "DeveloperError",
    "Enablement",
    "FieldHooks",
    "ItemField",
    "ItemTypeRegistry",
    "UnknownItemTypeError",
    "load_catalog",
]
