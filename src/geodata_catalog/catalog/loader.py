"""Catalog loader - builds item trees from YAML/JSON documents and saves them back."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import yaml

from .context import CatalogContext
from .errors import CatalogError
from .group import CatalogGroup


logger = logging.getLogger(__name__)

CATALOG_KEY = "catalog"
ROOT_NAME = "Root"

_YAML_SUFFIXES = (".yaml", ".yml")


class CatalogLoader:
    """
    Loads catalog documents into a tree of catalog items.

    File format:
    ```yaml
    catalog:
      - type: group
        name: Hydrography
        items:
          - type: geojson
            name: Rivers
            isEnabled: true
            url: https://example.org/rivers.geojson
    ```

    A bare list of items is accepted as well. The returned root is a
    ``CatalogGroup`` whose ``items`` are the top-level entries.
    """

    def __init__(self, context: CatalogContext | None = None):
        self.context = context if context is not None else CatalogContext()

    def load_file(self, path: str | Path) -> CatalogGroup:
        """Load a catalog from a YAML or JSON file."""
        return self.load_dict(read_document(path))

    def load_dict(self, data: dict[str, Any] | list[Any] | None) -> CatalogGroup:
        """Load a catalog from an already-parsed document."""
        root = CatalogGroup(self.context, name=ROOT_NAME)
        self.load_into(root, data)
        logger.info(f"Loaded {sum(1 for _ in root.walk())} catalog items")
        return root

    def load_into(self, root: CatalogGroup, data: dict[str, Any] | list[Any] | None) -> CatalogGroup:
        """
        Merge a document into an existing tree.

        Items matching an existing item by name and type are updated in
        place, so a later document can override parts of an earlier one.
        """
        root.update_from_json({"items": _catalog_items(data)})
        return root

    def load_files(self, paths: list[str | Path]) -> CatalogGroup:
        """Load several files in order, later files overriding earlier ones."""
        root = CatalogGroup(self.context, name=ROOT_NAME)
        for path in paths:
            logger.info(f"Loading catalog file: {path}")
            self.load_into(root, read_document(path))
        return root

    def to_dict(self, root: CatalogGroup, enabled_items_only: bool = True) -> dict[str, Any]:
        """Export the tree below ``root`` as a catalog document."""
        items = []
        for item in root.items:
            serialized = item.serialize_to_json(enabled_items_only)
            if serialized is not None:
                items.append(serialized)
        return {CATALOG_KEY: items}

    def save_file(
        self,
        root: CatalogGroup,
        path: str | Path,
        enabled_items_only: bool = True,
    ) -> Path:
        """Write the tree below ``root`` to a YAML or JSON file."""
        path = Path(path)
        document = self.to_dict(root, enabled_items_only)

        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            if path.suffix in _YAML_SUFFIXES:
                yaml.safe_dump(document, f, sort_keys=False, allow_unicode=True)
            else:
                json.dump(document, f, indent=2)
                f.write("\n")

        logger.info(f"Saved {len(document[CATALOG_KEY])} top-level catalog items to {path}")
        return path


def read_document(path: str | Path) -> Any:
    """Parse a YAML or JSON file."""
    path = Path(path)

    if not path.exists():
        raise FileNotFoundError(f"Catalog file not found: {path}")

    with open(path, "r", encoding="utf-8") as f:
        try:
            if path.suffix in _YAML_SUFFIXES:
                return yaml.safe_load(f)
            return json.load(f)
        except (yaml.YAMLError, json.JSONDecodeError) as e:
            raise CatalogError(f"Cannot parse catalog file {path}: {e}") from e


def _catalog_items(data: dict[str, Any] | list[Any] | None) -> list[Any]:
    if data is None:
        return []
    if isinstance(data, list):
        return data
    if isinstance(data, dict):
        items = data.get(CATALOG_KEY, [])
        if not isinstance(items, list):
            raise CatalogError(f"'{CATALOG_KEY}' must be a list, got {type(items).__name__}")
        return items
    raise CatalogError(f"Catalog document must be a mapping or a list, got {type(data).__name__}")


def load_catalog(
    source: str | Path | dict[str, Any] | list[Any],
    context: CatalogContext | None = None,
) -> CatalogGroup:
    """
    Convenience function to load a catalog.

    Args:
        source: File path, or an already-parsed document
        context: Context shared by the loaded items (a default one if omitted)

    Returns:
        Root CatalogGroup holding the loaded items
    """
    loader = CatalogLoader(context)

    if isinstance(source, (dict, list)):
        return loader.load_dict(source)
    return loader.load_file(source)
