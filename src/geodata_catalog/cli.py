"""Command line entry point.

Usage:
    # Re-export a catalog, keeping only enabled sources and their groups
    geodata-catalog export catalog/init.yaml -o saved.json

    # Register extra item classes and export everything
    geodata-catalog export init.json --item-type my_sources.wms:WebMapServiceItem --all

    # Show which item types are known
    geodata-catalog types --config catalog-config.yaml
"""

from __future__ import annotations

import argparse
import json
import logging
import sys

from . import _bootstrap as bs
from .catalog import CatalogError, CatalogLoader

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="geodata-catalog",
        description="Load and re-export geospatial data catalog documents",
    )
    parser.add_argument(
        "--config", "-c",
        default=None,
        help=f"Config file (default: ${bs.CONFIG_ENV_VAR} or {bs.DEFAULT_CONFIG_PATH})",
    )
    parser.add_argument(
        "--item-type", "-t",
        action="append",
        default=[],
        metavar="MODULE:CLASS",
        help="Register an extra catalog item class (repeatable)",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable debug logging",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    export = subparsers.add_parser("export", help="Load catalog files and write the exported catalog")
    export.add_argument(
        "sources",
        nargs="*",
        help="Catalog files to load, in order (default: definition_files from config)",
    )
    export.add_argument(
        "--output", "-o",
        default=None,
        help="Output file, .json or .yaml (default: output_file from config, else stdout)",
    )
    export.add_argument(
        "--all",
        action="store_true",
        help="Export every item, not just enabled sources and their groups",
    )

    subparsers.add_parser("types", help="List registered catalog item types")

    return parser


def _export(args: argparse.Namespace, config, context) -> int:
    if args.sources:
        config.definition_files = list(args.sources)
    if args.output:
        config.output_file = args.output
    if args.all:
        config.enabled_items_only = False

    root = bs.build_catalog(config, context)

    if config.output_file:
        bs.save_catalog(config, root, context)
    else:
        document = CatalogLoader(context).to_dict(root, config.enabled_items_only)
        json.dump(document, sys.stdout, indent=2)
        sys.stdout.write("\n")
    return 0


def _types(args: argparse.Namespace, config, context) -> int:
    for item_type in context.item_types.all_types():
        item_class = context.item_types.get(item_type)
        print(f"{item_type:16} {item_class.item_type_name or ''}")
    return 0


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        config, _config_path = bs.load_config(args.config)
        if not args.verbose:
            logging.getLogger().setLevel(config.log_level)

        item_classes = [bs.resolve_item_class(reference) for reference in [*config.item_types, *args.item_type]]
        context = bs.build_context(item_classes)

        if args.command == "export":
            return _export(args, config, context)
        return _types(args, config, context)
    except (CatalogError, FileNotFoundError, ValueError, ImportError) as e:
        logger.error(f"{args.command} failed: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
