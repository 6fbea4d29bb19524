from __future__ import annotations

import pytest

from geodata_catalog.catalog import (
    CatalogContext,
    CatalogError,
    CatalogGroup,
    DataSourceItem,
    DeveloperError,
    ItemTypeRegistry,
    UnknownItemTypeError,
)

from sample_items import GeoJsonItem, UntypedItem, WebMapServiceItem


def test_builtin_registry_knows_groups() -> None:
    registry = ItemTypeRegistry.with_builtin_types()

    assert registry.all_types() == ["group"]
    assert registry.get("group") is CatalogGroup
    assert registry.has("group")


def test_default_context_uses_builtin_registry() -> None:
    context = CatalogContext()

    assert context.item_types.has("group")
    assert context.services == {}


def test_context_service_lookup() -> None:
    scene = object()
    context = CatalogContext(services={"scene": scene})

    assert context.service("scene") is scene
    with pytest.raises(KeyError):
        context.service("clock")


def test_register_works_as_a_decorator() -> None:
    registry = ItemTypeRegistry()

    @registry.register
    class KmlItem(DataSourceItem):
        item_type = "kml"
        item_type_name = "KML"

    assert KmlItem.item_type == "kml"
    assert registry.get("kml") is KmlItem
    assert registry.all_types() == ["kml"]


def test_register_is_idempotent_for_the_same_class() -> None:
    registry = ItemTypeRegistry()
    registry.register(GeoJsonItem)
    registry.register(GeoJsonItem)

    assert registry.all_types() == ["geojson"]


def test_conflicting_registration_raises() -> None:
    registry = ItemTypeRegistry()
    registry.register(GeoJsonItem)

    class OtherGeoJson(DataSourceItem):
        item_type = "geojson"

    with pytest.raises(DeveloperError, match="already registered"):
        registry.register(OtherGeoJson)


def test_untyped_class_cannot_be_registered() -> None:
    with pytest.raises(DeveloperError):
        ItemTypeRegistry().register(UntypedItem)


def test_unregister() -> None:
    registry = ItemTypeRegistry()
    registry.register(GeoJsonItem)
    registry.unregister("geojson")
    registry.unregister("geojson")

    assert not registry.has("geojson")


def test_create_from_json(context) -> None:
    item = context.item_types.create_from_json(
        context,
        {"type": "wms", "name": "Roads", "layers": "roads"},
    )

    assert isinstance(item, WebMapServiceItem)
    assert item.context is context
    assert item.name == "Roads"
    assert item.layers == ["roads"]


def test_create_unknown_type_raises(context) -> None:
    with pytest.raises(UnknownItemTypeError, match="'kml'"):
        context.item_types.create("kml", context)


@pytest.mark.parametrize("json", [{"name": "No type"}, {"type": ""}, ["geojson"]])
def test_create_from_json_requires_an_object_with_a_type(context, json) -> None:
    with pytest.raises(CatalogError):
        context.item_types.create_from_json(context, json)
