from __future__ import annotations

import pytest

from geodata_catalog.catalog import CatalogError, CatalogGroup, UnknownItemTypeError

from sample_items import GeoJsonItem, WebMapServiceItem


def _hydrography_json() -> dict:
    return {
        "type": "group",
        "name": "Hydrography",
        "isOpen": True,
        "items": [
            {"type": "geojson", "name": "Rivers", "isEnabled": True, "url": "rivers.geojson"},
            {"type": "geojson", "name": "Lakes", "url": "lakes.geojson"},
            {
                "type": "group",
                "name": "Coastal",
                "items": [
                    {"type": "wms", "name": "Tides", "layers": "tides", "isEnabled": False},
                ],
            },
        ],
    }


def test_update_builds_children_by_type(group) -> None:
    group.update_from_json(_hydrography_json())

    assert group.is_open is True
    assert [item.name for item in group.items] == ["Rivers", "Lakes", "Coastal"]
    rivers, lakes, coastal = group.items
    assert isinstance(rivers, GeoJsonItem)
    assert rivers.is_enabled is True
    assert lakes.is_enabled is False
    assert isinstance(coastal, CatalogGroup)
    assert isinstance(coastal.items[0], WebMapServiceItem)
    assert coastal.items[0].layers == ["tides"]
    assert coastal.context is group.context


def test_update_merges_into_existing_children_by_name_and_type(group) -> None:
    group.update_from_json(_hydrography_json())
    rivers = group.find("Rivers")

    group.update_from_json({
        "items": [
            {"type": "geojson", "name": "Rivers", "isEnabled": False},
            {"type": "wms", "name": "Lakes", "url": "lakes-wms"},
        ],
    })

    assert group.find("Rivers") is rivers
    assert rivers.is_enabled is False
    assert rivers.url == "rivers.geojson"
    assert [item.type for item in group.items] == ["geojson", "geojson", "group", "wms"]


def test_null_items_leave_children_alone(group, geojson) -> None:
    group.add(geojson)
    group.update_from_json({"items": None})

    assert group.items == [geojson]


def test_unknown_child_type_raises(group) -> None:
    with pytest.raises(UnknownItemTypeError) as exc_info:
        group.update_from_json({"items": [{"type": "kml", "name": "Parcels"}]})

    assert exc_info.value.item_type == "kml"
    assert isinstance(exc_info.value, CatalogError)


@pytest.mark.parametrize(
    "json",
    [
        {"items": {"type": "geojson"}},
        {"items": ["not an object"]},
        {"items": [{"name": "No type"}]},
    ],
)
def test_malformed_children_raise_catalog_error(group, json) -> None:
    with pytest.raises(CatalogError):
        group.update_from_json(json)


def test_export_keeps_only_enabled_sources_and_non_empty_groups(group) -> None:
    group.update_from_json(_hydrography_json())

    result = group.serialize_to_json()

    assert result["type"] == "group"
    assert result["isOpen"] is True
    assert [item["name"] for item in result["items"]] == ["Rivers"]


def test_export_of_everything_keeps_the_whole_tree(group) -> None:
    group.update_from_json(_hydrography_json())

    result = group.serialize_to_json(enabled_items_only=False)

    assert [item["name"] for item in result["items"]] == ["Rivers", "Lakes", "Coastal"]
    coastal = result["items"][2]
    assert coastal["items"][0] == {
        "type": "wms",
        "name": "Tides",
        "description": "",
        "isEnabled": False,
        "url": "",
        "layers": "tides",
        "maxZoom": 18,
    }


def test_group_with_only_disabled_sources_is_omitted(group, geojson) -> None:
    geojson.is_enabled = False
    group.add(geojson)

    assert group.serialize_to_json() is None
    assert group.serialize_to_json(enabled_items_only=False)["items"][0]["name"] == "Rivers"


def test_nested_group_survives_when_a_descendant_is_enabled(context, group, wms) -> None:
    inner = group.add(CatalogGroup(context, name="Inner"))
    inner.add(wms)
    wms.is_enabled = True

    result = group.serialize_to_json()

    assert result["items"][0]["name"] == "Inner"
    assert result["items"][0]["items"][0]["layers"] == "elevation,contours"


def test_export_round_trip(context, group) -> None:
    group.update_from_json(_hydrography_json())
    exported = group.serialize_to_json(enabled_items_only=False)

    copy = CatalogGroup(context)
    copy.update_from_json(exported)

    assert copy.serialize_to_json(enabled_items_only=False) == exported


def test_find_and_walk(group) -> None:
    group.update_from_json(_hydrography_json())

    assert group.find("Lakes").url == "lakes.geojson"
    assert group.find("Lakes", "wms") is None
    assert group.find("Missing") is None
    assert group.find(None) is None
    assert [item.name for item in group.walk()] == ["Rivers", "Lakes", "Coastal", "Tides"]


def test_constructor_name_is_optional(context) -> None:
    assert CatalogGroup(context).name == "Unnamed Item"
    assert CatalogGroup(context, name="Basemaps").name == "Basemaps"


def test_child_without_type_never_matches_an_existing_child(group, geojson) -> None:
    group.add(geojson)

    with pytest.raises(CatalogError, match="has no type"):
        group.update_from_json({"items": [{"name": "Rivers", "isEnabled": True}]})

    assert geojson.is_enabled is False
