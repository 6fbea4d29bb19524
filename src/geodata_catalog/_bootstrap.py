"""Shared initialisation helpers.

Each function constructs exactly one piece of the catalog stack, so the CLI
and any embedding application build things the same way.
"""
from __future__ import annotations

import importlib
import logging
import os
from collections.abc import Iterable
from pathlib import Path

from .catalog import CatalogContext, CatalogGroup, CatalogItem, CatalogLoader, ItemTypeRegistry
from .config import CatalogConfig

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "GEODATA_CATALOG_CONFIG"
DEFAULT_CONFIG_PATH = "catalog-config.yaml"


# ---------------------------------------------------------------------------
# Config
# ---------------------------------------------------------------------------

def load_config(config_path: str | None = None):
    """Load config from file or fall back to defaults.

    Returns ``(config, resolved_config_path)`` where *resolved_config_path*
    is the string that was actually looked up.
    """
    config_path = config_path or os.environ.get(CONFIG_ENV_VAR, DEFAULT_CONFIG_PATH)
    if Path(config_path).exists():
        config = CatalogConfig.from_yaml(config_path)
        logger.info("Loaded config from %s", config_path)
    else:
        config = CatalogConfig()
        logger.info("Using default config (no file at %s)", config_path)
    return config, config_path


# ---------------------------------------------------------------------------
# Context
# ---------------------------------------------------------------------------

def build_context(item_classes: Iterable[type[CatalogItem]] = (), **services) -> CatalogContext:
    """Build a catalog context with the built-in types plus *item_classes* registered."""
    item_types = ItemTypeRegistry.with_builtin_types()
    for item_class in item_classes:
        item_types.register(item_class)
    logger.info("Registered catalog item types: %s", item_types.all_types())
    return CatalogContext(item_types=item_types, services=dict(services))


# ---------------------------------------------------------------------------
# Catalog
# ---------------------------------------------------------------------------

def build_catalog(config: CatalogConfig, context: CatalogContext) -> CatalogGroup:
    """Load every configured catalog file into one tree.

    With no files configured an empty root group is returned.
    """
    loader = CatalogLoader(context)
    if not config.definition_files:
        logger.info("No catalog definition files configured, starting with an empty catalog")
        return loader.load_dict(None)

    root = loader.load_files(config.definition_files)
    logger.info(
        "Catalog loaded with %d items from %d files",
        sum(1 for _ in root.walk()),
        len(config.definition_files),
    )
    return root


def save_catalog(config: CatalogConfig, root: CatalogGroup, context: CatalogContext) -> Path | None:
    """Save *root* to the configured output file, if there is one."""
    if not config.output_file:
        logger.info("No output_file configured, catalog not saved")
        return None
    return CatalogLoader(context).save_file(root, config.output_file, config.enabled_items_only)


# ---------------------------------------------------------------------------
# Item types
# ---------------------------------------------------------------------------

def resolve_item_class(reference: str) -> type[CatalogItem]:
    """Import an item class from a ``"package.module:ClassName"`` reference."""
    module_name, sep, class_name = reference.partition(":")
    if not sep or not module_name or not class_name:
        raise ValueError(f"Item type reference must look like 'module:Class', got {reference!r}")

    module = importlib.import_module(module_name)
    try:
        item_class = getattr(module, class_name)
    except AttributeError:
        raise ValueError(f"Module {module_name!r} has no attribute {class_name!r}") from None

    if not (isinstance(item_class, type) and issubclass(item_class, CatalogItem)):
        raise ValueError(f"{reference!r} is not a CatalogItem subclass")
    return item_class
