"""Catalog configuration dataclasses."""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any

import yaml


@dataclass
class CatalogConfig:
    """Where catalog documents are read from and how they are exported."""
    definition_files: list[str] = field(default_factory=list)  # e.g., ["catalog/init.yaml"]
    item_types: list[str] = field(default_factory=list)  # e.g., ["my_sources.wms:WebMapServiceItem"]
    output_file: str | None = None  # e.g., "catalog/saved.json"
    enabled_items_only: bool = True  # Export only enabled sources and their groups
    log_level: str = "INFO"

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> CatalogConfig:
        """Create config from dictionary."""
        catalog_data = data.get("catalog", data)

        definition_files = catalog_data.get("definition_files", [])
        if isinstance(definition_files, str):
            definition_files = [definition_files]

        known = {f.name for f in fields(cls)}
        unknown = set(catalog_data) - known
        if unknown:
            raise ValueError(f"Unknown catalog config keys: {sorted(unknown)}")

        return cls(
            definition_files=list(definition_files),
            item_types=list(catalog_data.get("item_types", [])),
            output_file=catalog_data.get("output_file"),
            enabled_items_only=catalog_data.get("enabled_items_only", True),
            log_level=str(catalog_data.get("log_level", "INFO")).upper(),
        )

    @classmethod
    def from_yaml(cls, path: str | Path) -> CatalogConfig:
        """Load config from a YAML file.

        Relative ``definition_files`` and ``output_file`` are resolved against
        the directory holding the config file.
        """
        path = Path(path)
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}

        config = cls.from_dict(data)
        base = path.parent
        config.definition_files = [str(base / p) for p in config.definition_files]
        if config.output_file:
            config.output_file = str(base / config.output_file)
        return config
