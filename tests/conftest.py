from __future__ import annotations

import pytest

from geodata_catalog.catalog import CatalogContext, CatalogGroup, ItemTypeRegistry

from sample_items import SAMPLE_ITEM_CLASSES, GeoJsonItem, WebMapServiceItem


@pytest.fixture
def context() -> CatalogContext:
    item_types = ItemTypeRegistry.with_builtin_types()
    for item_class in SAMPLE_ITEM_CLASSES:
        item_types.register(item_class)
    return CatalogContext(item_types=item_types, services={"scene": object()})


@pytest.fixture
def geojson(context) -> GeoJsonItem:
    item = GeoJsonItem(context)
    item.name = "Rivers"
    item.url = "https://example.org/rivers.geojson"
    return item


@pytest.fixture
def wms(context) -> WebMapServiceItem:
    item = WebMapServiceItem(context)
    item.name = "Topography"
    item.url = "https://example.org/wms"
    item.layers = ["elevation", "contours"]
    return item


@pytest.fixture
def group(context) -> CatalogGroup:
    return CatalogGroup(context, name="Hydrography")
