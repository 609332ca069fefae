#!/usr/bin/env python3
"""skuselect - inspect which option values stay reachable for a selection"""

import sys

from skuselect.config import SelectorConfig, load_config
from skuselect.data import CatalogLoader, DataValidationError
from skuselect.engine import CatalogConfigError, InvalidSelectionError, SkuSelector


def parse_value(catalog, text):
    """Match command-line text against catalog values, which may be numbers."""
    for values in catalog.group_values:
        for value in values:
            if str(value) == text:
                return value
    return text


def main(catalog_path: str = "catalog.yaml", config_path: str | None = None, selections=()):
    config = load_config(config_path) if config_path else SelectorConfig()
    try:
        catalog = CatalogLoader(config).load_catalog(catalog_path)
    except FileNotFoundError:
        print(f"Catalog file not found: {catalog_path}")
        sys.exit(1)
    except (CatalogConfigError, DataValidationError) as exc:
        print(f"Invalid catalog: {exc}")
        sys.exit(1)

    selector = SkuSelector(catalog)
    for text in selections:
        try:
            selector.toggle(parse_value(catalog, text))
        except InvalidSelectionError as exc:
            print(f"Skipped: {exc}")

    print("=" * 60)
    print(f"Catalog: {catalog_path} ({catalog.group_count} groups, {len(catalog.variants)} variants)")
    print(f"Selected: {list(selector.selected_values)} (code {selector.selected_code()})")
    print("=" * 60)

    for group in selector.snapshot():
        name = group["name"] or f"group {group['group']}"
        cells = []
        for option in group["options"]:
            marker = "*" if option["selected"] else ("x" if option["disabled"] else " ")
            cells.append(f"[{marker}] {option['value']}")
        print(f"  {name:<12} " + "  ".join(cells))

    variant = selector.resolve_variant()
    print()
    print(f"Variant: {variant if variant is not None else '-'}")
    return variant


if __name__ == "__main__":
    import argparse

    parser = argparse.ArgumentParser(description="skuselect catalog inspector")
    parser.add_argument("--catalog", default="catalog.yaml", help="catalog file (.yaml/.yml/.json/.csv)")
    parser.add_argument("--config", default=None, help="selector config file")
    parser.add_argument("--select", action="append", default=[], help="option value to toggle (repeatable)")

    args = parser.parse_args()
    main(catalog_path=args.catalog, config_path=args.config, selections=args.select)
